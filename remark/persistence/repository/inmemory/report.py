"""In-memory report repository for testing."""

from datetime import datetime
from typing import Optional

from remark.domain.error import AlreadyExistsError
from remark.domain.model import Report
from remark.domain.repository.report import ReportRepository
from remark.domain.value import ReportId, ReportStatus, UserId


class InMemoryReportRepository(ReportRepository):
    """In-memory implementation of ReportRepository for testing."""

    def __init__(self) -> None:
        self._reports: dict[ReportId, Report] = {}

    async def insert(self, report: Report) -> Report:
        """Insert a report.

        Raises:
            AlreadyExistsError: If the reporter already reported the comment
        """
        for existing in self._reports.values():
            if (
                existing.comment_id == report.comment_id
                and existing.reporter_id == report.reporter_id
            ):
                raise AlreadyExistsError(
                    "report", f"{report.comment_id}/{report.reporter_id}"
                )
        self._reports[report.id] = report
        return report

    async def find_by_id(self, report_id: ReportId) -> Optional[Report]:
        """Find a report by ID."""
        return self._reports.get(report_id)

    async def find_pending(self, offset: int, limit: int) -> tuple[list[Report], int]:
        """Pending reports, oldest first."""
        pending = sorted(
            (r for r in self._reports.values() if r.status == ReportStatus.PENDING),
            key=lambda r: r.created_at,
        )
        return pending[offset : offset + limit], len(pending)

    async def update_status(
        self, report_id: ReportId, status: ReportStatus, reviewed_by: UserId
    ) -> Optional[Report]:
        """Mark a report reviewed or dismissed."""
        report = self._reports.get(report_id)
        if report is None:
            return None
        updated = report.model_copy(
            update={
                "status": status,
                "reviewed_by": reviewed_by,
                "reviewed_at": datetime.now(),
            }
        )
        self._reports[report_id] = updated
        return updated
