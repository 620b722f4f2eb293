"""Report repository interface."""

from abc import ABC, abstractmethod
from typing import Optional

from anonboard.domain.model.report import Report
from anonboard.domain.value import ReportId


class ReportRepository(ABC):
    """Repository for Report entity.

    Reports are only ever appended; nothing in the service reads them back
    apart from lookups by ID.
    """

    @abstractmethod
    async def find_by_id(self, report_id: ReportId) -> Optional[Report]:
        """Find a report by ID.

        Args:
            report_id: The report's unique identifier

        Returns:
            The report if found, None otherwise
        """
        pass

    @abstractmethod
    async def save(self, report: Report) -> Report:
        """Persist a new report.

        Args:
            report: The report to save

        Returns:
            The saved report
        """
        pass
