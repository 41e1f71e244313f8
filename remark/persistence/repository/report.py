"""PostgreSQL implementation of Report repository."""

from datetime import datetime
from typing import Optional

from sqlalchemy import asc, func, select, update
from sqlalchemy.dialects.postgresql import insert
from sqlalchemy.ext.asyncio import AsyncSession

from remark.domain.error import AlreadyExistsError
from remark.domain.model import Report
from remark.domain.repository import ReportRepository
from remark.domain.value import ReportId, ReportStatus, UserId
from remark.persistence.mappers import report_to_dict, row_to_report
from remark.persistence.tables import reports_table


class PostgresReportRepository(ReportRepository):
    """PostgreSQL implementation of ReportRepository."""

    def __init__(self, session: AsyncSession) -> None:
        """Initialize repository with database session.

        Args:
            session: SQLAlchemy async session
        """
        self.session = session

    async def insert(self, report: Report) -> Report:
        """Insert a report, rejecting a second one from the same reporter."""
        t = reports_table
        stmt = (
            insert(t)
            .values(**report_to_dict(report))
            .on_conflict_do_nothing(index_elements=[t.c.comment_id, t.c.reporter_id])
            .returning(t)
        )
        result = await self.session.execute(stmt)
        row = result.fetchone()
        if row is None:
            raise AlreadyExistsError(
                "report", f"{report.comment_id}/{report.reporter_id}"
            )
        await self.session.flush()
        return row_to_report(row._asdict())

    async def find_by_id(self, report_id: ReportId) -> Optional[Report]:
        """Find a report by ID."""
        stmt = select(reports_table).where(reports_table.c.id == report_id)
        result = await self.session.execute(stmt)
        row = result.fetchone()
        return row_to_report(row._asdict()) if row else None

    async def find_pending(self, offset: int, limit: int) -> tuple[list[Report], int]:
        """Pending reports, oldest first."""
        t = reports_table
        condition = t.c.status == ReportStatus.PENDING.value

        count_stmt = select(func.count()).select_from(t).where(condition)
        total = (await self.session.execute(count_stmt)).scalar() or 0

        stmt = (
            select(t)
            .where(condition)
            .order_by(asc(t.c.created_at))
            .offset(offset)
            .limit(limit)
        )
        result = await self.session.execute(stmt)
        return [row_to_report(row._asdict()) for row in result.fetchall()], total

    async def update_status(
        self, report_id: ReportId, status: ReportStatus, reviewed_by: UserId
    ) -> Optional[Report]:
        """Mark a report reviewed or dismissed."""
        stmt = (
            update(reports_table)
            .where(reports_table.c.id == report_id)
            .values(
                status=status.value,
                reviewed_by=reviewed_by,
                reviewed_at=datetime.now(),
            )
            .returning(reports_table)
        )
        result = await self.session.execute(stmt)
        row = result.fetchone()
        if row is None:
            return None
        await self.session.flush()
        return row_to_report(row._asdict())
