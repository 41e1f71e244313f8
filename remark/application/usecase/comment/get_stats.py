"""Comment stats use case."""

from pydantic import BaseModel

from remark.domain.service import CommentService
from remark.domain.value import TenantId


class GetStatsRequest(BaseModel):
    """Comment stats request."""

    tenant_id: str
    resource_type: str
    resource_id: str


class GetStatsResponse(BaseModel):
    """Comment stats response."""

    resource_type: str
    resource_id: str
    total_comments: int
    approved_count: int
    pending_count: int
    rejected_count: int
    spam_count: int


class GetStatsUseCase:
    """Use case for per-resource comment counts."""

    def __init__(self, comment_service: CommentService) -> None:
        self.comment_service = comment_service

    async def execute(self, request: GetStatsRequest) -> GetStatsResponse:
        stats = await self.comment_service.get_stats(
            TenantId(request.tenant_id), request.resource_type, request.resource_id
        )
        return GetStatsResponse(
            resource_type=request.resource_type,
            resource_id=request.resource_id,
            total_comments=stats.total,
            approved_count=stats.approved,
            pending_count=stats.pending,
            rejected_count=stats.rejected,
            spam_count=stats.spam,
        )
