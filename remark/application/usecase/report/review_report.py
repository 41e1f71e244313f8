"""Review report use case."""

from pydantic import BaseModel

from remark.application.usecase.base import BaseUseCase
from remark.domain.service import ReportService
from remark.domain.value import ReportId, ReportStatus, UserId, parse_id

from .common import ReportItem


class ReviewReportRequest(BaseModel):
    """Review report request."""

    report_id: str
    status: ReportStatus  # reviewed or dismissed
    reviewer_id: str


class ReviewReportUseCase(BaseUseCase):
    """Use case for closing a report."""

    def __init__(self, report_service: ReportService) -> None:
        self.report_service = report_service

    async def execute(self, request: ReviewReportRequest) -> ReportItem:
        """Mark a report reviewed or dismissed.

        Raises:
            ValidationError: If the ID is malformed or the status is pending
            NotFoundError: If the report does not exist
        """
        report = await self.report_service.review(
            parse_id(request.report_id, ReportId, "report ID"),
            request.status,
            UserId(request.reviewer_id),
        )
        return ReportItem.from_report(report)
