"""Search comments use case."""

from pydantic import BaseModel

from remark.domain.service import CommentService
from remark.domain.value import TenantId

from .common import CommentListResponse


class SearchCommentsRequest(BaseModel):
    """Search comments request."""

    tenant_id: str
    query: str
    page: int | None = 1
    page_size: int | None = None


class SearchCommentsUseCase:
    """Use case for full-text comment search."""

    def __init__(self, comment_service: CommentService) -> None:
        self.comment_service = comment_service

    async def execute(self, request: SearchCommentsRequest) -> CommentListResponse:
        """Search approved comments of the tenant, best match first."""
        page = await self.comment_service.search_comments(
            TenantId(request.tenant_id),
            request.query,
            request.page,
            request.page_size,
        )
        return CommentListResponse.from_page(page)
