"""PostgreSQL implementation of Report repository."""

from typing import Optional

from sqlalchemy import insert, select
from sqlalchemy.ext.asyncio import AsyncSession

from anonboard.domain.model import Report
from anonboard.domain.repository import ReportRepository
from anonboard.domain.value import ReportId
from anonboard.persistence.mappers import report_to_dict, row_to_report
from anonboard.persistence.tables import reports_table


class PostgresReportRepository(ReportRepository):
    """PostgreSQL implementation of ReportRepository."""

    def __init__(self, session: AsyncSession) -> None:
        """Initialize repository with database session.

        Args:
            session: SQLAlchemy async session
        """
        self.session = session

    async def find_by_id(self, report_id: ReportId) -> Optional[Report]:
        """Find a report by ID."""
        stmt = select(reports_table).where(reports_table.c.id == report_id)
        result = await self.session.execute(stmt)
        row = result.fetchone()
        return row_to_report(row._asdict()) if row else None

    async def save(self, report: Report) -> Report:
        """Insert a report."""
        stmt = insert(reports_table).values(**report_to_dict(report))
        await self.session.execute(stmt)
        await self.session.flush()
        return report
