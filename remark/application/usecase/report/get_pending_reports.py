"""Pending reports use case."""

from pydantic import BaseModel

from remark.domain.service import ReportService

from .common import ReportItem


class GetPendingReportsRequest(BaseModel):
    """Pending reports request."""

    page: int | None = 1
    page_size: int | None = None


class ReportListResponse(BaseModel):
    """A page of reports."""

    reports: list[ReportItem]
    total: int
    page: int
    page_size: int
    total_pages: int


class GetPendingReportsUseCase:
    """Use case for the report review queue."""

    def __init__(self, report_service: ReportService) -> None:
        self.report_service = report_service

    async def execute(self, request: GetPendingReportsRequest) -> ReportListResponse:
        page = await self.report_service.get_pending(request.page, request.page_size)
        return ReportListResponse(
            reports=[ReportItem.from_report(r) for r in page.items],
            total=page.total,
            page=page.page,
            page_size=page.page_size,
            total_pages=page.total_pages,
        )
