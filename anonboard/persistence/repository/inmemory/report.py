"""In-memory report repository for testing."""

from typing import Optional

from anonboard.domain.model.report import Report
from anonboard.domain.repository.report import ReportRepository
from anonboard.domain.value import ReportId


class InMemoryReportRepository(ReportRepository):
    """In-memory implementation of ReportRepository for testing."""

    def __init__(self) -> None:
        self._reports: dict[ReportId, Report] = {}

    async def find_by_id(self, report_id: ReportId) -> Optional[Report]:
        """Find a report by ID."""
        return self._reports.get(report_id)

    async def save(self, report: Report) -> Report:
        """Save a report."""
        self._reports[report.id] = report
        return report

    def all(self) -> list[Report]:
        """All stored reports, for assertions in tests."""
        return list(self._reports.values())
