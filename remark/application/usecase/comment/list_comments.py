"""List comments use case."""

from pydantic import BaseModel

from remark.domain.model import CommentFilter
from remark.domain.service import CommentService, ReactionService
from remark.domain.value import (
    CommentStatus,
    SortField,
    SortOrder,
    TenantId,
    UserId,
    parse_comment_id,
)

from .common import CommentListResponse


class ListCommentsRequest(BaseModel):
    """List comments request."""

    tenant_id: str
    resource_type: str | None = None
    resource_id: str | None = None
    parent_id: str | None = None  # None lists top-level comments
    status: CommentStatus | None = None
    author_id: str | None = None
    is_pinned: bool | None = None
    include_deleted: bool = False
    sort_by: SortField = SortField.CREATED_AT
    sort_order: SortOrder = SortOrder.DESC
    page: int | None = 1
    page_size: int | None = None

    # Caller, used for visibility and reaction state
    user_id: str | None = None
    is_admin: bool = False


class ListCommentsUseCase:
    """Use case for listing comments on a resource."""

    def __init__(
        self, comment_service: CommentService, reaction_service: ReactionService
    ) -> None:
        """Initialize list comments use case.

        Args:
            comment_service: Comment domain service
            reaction_service: Reaction service for the caller's reactions
        """
        self.comment_service = comment_service
        self.reaction_service = reaction_service

    async def execute(self, request: ListCommentsRequest) -> CommentListResponse:
        """Execute list comments flow.

        Deleted comments are only included for admins.

        Raises:
            ValidationError: If the parent ID is malformed
        """
        query = CommentFilter(
            tenant_id=TenantId(request.tenant_id),
            resource_type=request.resource_type,
            resource_id=request.resource_id,
            parent_id=parse_comment_id(request.parent_id)
            if request.parent_id
            else None,
            status=request.status,
            author_id=UserId(request.author_id) if request.author_id else None,
            is_pinned=request.is_pinned,
            include_deleted=request.include_deleted and request.is_admin,
            sort_by=request.sort_by,
            sort_order=request.sort_order,
            page=request.page,
            page_size=request.page_size,
        )
        page = await self.comment_service.list_comments(
            query, caller_is_admin=request.is_admin
        )

        reactions = {}
        if request.user_id and page.items:
            reactions = await self.reaction_service.get_user_reactions(
                UserId(request.user_id), [c.id for c in page.items]
            )
        return CommentListResponse.from_page(page, reactions)
