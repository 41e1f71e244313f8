"""Report domain service."""

from datetime import datetime
from typing import Optional
from uuid import uuid4

import logfire

from remark.domain.error import (
    AlreadyExistsError,
    DuplicateReportError,
    NotFoundError,
    ValidationError,
)
from remark.domain.model import Page, Report
from remark.domain.model.query import normalize_page, normalize_page_size
from remark.domain.repository import ReportRepository
from remark.domain.value import (
    CommentId,
    ReportId,
    ReportReason,
    ReportStatus,
    UserId,
)

from .base import Service
from .comment_service import CommentService


class ReportService(Service):
    """Domain service for reports against comments."""

    def __init__(
        self, report_repository: ReportRepository, comment_service: CommentService
    ) -> None:
        """Initialize report service.

        Args:
            report_repository: Report repository
            comment_service: Comment domain service
        """
        self.report_repository = report_repository
        self.comment_service = comment_service

    async def report_comment(
        self,
        comment_id: CommentId,
        reporter_id: UserId,
        reason: ReportReason,
        description: Optional[str] = None,
    ) -> Report:
        """File a report.

        Raises:
            NotFoundError: If the comment does not exist
            DuplicateReportError: If the reporter already reported it
        """
        with logfire.span(
            "report_service.report_comment",
            comment_id=str(comment_id),
            reporter_id=reporter_id,
            reason=reason.value,
        ):
            await self.comment_service.get_comment_by_id(comment_id)

            report = Report(
                id=ReportId(uuid4()),
                comment_id=comment_id,
                reporter_id=reporter_id,
                reason=reason,
                description=description,
                status=ReportStatus.PENDING,
                created_at=datetime.now(),
            )
            try:
                saved = await self.report_repository.insert(report)
            except AlreadyExistsError:
                logfire.warn(
                    "Duplicate report attempt",
                    comment_id=str(comment_id),
                    reporter_id=reporter_id,
                )
                raise DuplicateReportError()

            await self.comment_service.increment_report_count(comment_id)
            logfire.info(
                "Comment reported", comment_id=str(comment_id), report_id=str(saved.id)
            )
            return saved

    async def get_pending(
        self, page: Optional[int] = 1, page_size: Optional[int] = None
    ) -> Page[Report]:
        """Reports waiting for review, oldest first."""
        page, page_size = normalize_page(page), normalize_page_size(page_size)
        items, total = await self.report_repository.find_pending(
            (page - 1) * page_size, page_size
        )
        return Page(items=items, total=total, page=page, page_size=page_size)

    async def review(
        self, report_id: ReportId, status: ReportStatus, reviewer_id: UserId
    ) -> Report:
        """Close a report as reviewed or dismissed.

        Raises:
            ValidationError: If status is pending
            NotFoundError: If the report does not exist
        """
        with logfire.span(
            "report_service.review",
            report_id=str(report_id),
            status=status.value,
            reviewer_id=reviewer_id,
        ):
            if status == ReportStatus.PENDING:
                raise ValidationError("Report status must be reviewed or dismissed")

            updated = await self.report_repository.update_status(
                report_id, status, reviewer_id
            )
            if updated is None:
                raise NotFoundError("report", str(report_id))

            logfire.info(
                "Report reviewed", report_id=str(report_id), status=status.value
            )
            return updated
