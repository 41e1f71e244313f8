"""Moderation queue use case."""

from pydantic import BaseModel

from remark.application.usecase.comment.common import CommentListResponse
from remark.domain.service import CommentService
from remark.domain.value import TenantId


class GetPendingCommentsRequest(BaseModel):
    """Moderation queue request."""

    tenant_id: str | None = None  # None spans all tenants
    page: int | None = 1
    page_size: int | None = None


class GetPendingCommentsUseCase:
    """Use case for reading comments awaiting moderation."""

    def __init__(self, comment_service: CommentService) -> None:
        self.comment_service = comment_service

    async def execute(
        self, request: GetPendingCommentsRequest
    ) -> CommentListResponse:
        page = await self.comment_service.get_pending(
            TenantId(request.tenant_id) if request.tenant_id else None,
            request.page,
            request.page_size,
        )
        return CommentListResponse.from_page(page)
