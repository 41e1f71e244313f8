"""Report comment use case."""

from pydantic import BaseModel, Field

from remark.domain.service import ReportService
from remark.domain.value import ReportReason, UserId, parse_comment_id

from .common import ReportItem


class ReportCommentRequest(BaseModel):
    """Report comment request."""

    comment_id: str
    reporter_id: str
    reason: ReportReason
    description: str | None = Field(default=None, max_length=500)


class ReportCommentUseCase:
    """Use case for reporting a comment."""

    def __init__(self, report_service: ReportService) -> None:
        """Initialize report comment use case.

        Args:
            report_service: Report domain service
        """
        self.report_service = report_service

    async def execute(self, request: ReportCommentRequest) -> ReportItem:
        """Execute report flow.

        Raises:
            NotFoundError: If the comment does not exist
            DuplicateReportError: If the reporter already reported it
        """
        report = await self.report_service.report_comment(
            parse_comment_id(request.comment_id),
            UserId(request.reporter_id),
            request.reason,
            request.description,
        )
        return ReportItem.from_report(report)
