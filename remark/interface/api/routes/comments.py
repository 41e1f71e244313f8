"""Comment routes."""

from typing import Any

import logfire
from dishka.integrations.fastapi import DishkaRoute, FromDishka
from fastapi import APIRouter, Query, Request, status
from pydantic import BaseModel, Field

from remark.application.usecase.comment import (
    CommentItem,
    CommentListResponse,
    CreateCommentRequest,
    CreateCommentUseCase,
    DeleteCommentRequest,
    DeleteCommentResponse,
    DeleteCommentUseCase,
    GetCommentRequest,
    GetCommentUseCase,
    GetRepliesRequest,
    GetRepliesUseCase,
    GetStatsRequest,
    GetStatsResponse,
    GetStatsUseCase,
    ListCommentsRequest,
    ListCommentsUseCase,
    SearchCommentsRequest,
    SearchCommentsUseCase,
    UpdateCommentRequest,
    UpdateCommentUseCase,
)
from remark.domain.value import Attachment, CommentStatus, SortField, SortOrder
from remark.interface.api.dependencies import CallerDep, TenantDep
from remark.interface.error import RateLimitExceededError
from remark.util.ratelimit import RateLimiter

router = APIRouter(prefix="/comments", tags=["comments"], route_class=DishkaRoute)


class CreateCommentAPIRequest(BaseModel):
    """API request for creating a comment."""

    resource_type: str = Field(min_length=1, max_length=100)
    resource_id: str = Field(min_length=1, max_length=255)
    content: str = Field(min_length=1)
    parent_id: str | None = None  # Parent comment ID for replies
    author_name: str | None = None
    author_avatar: str | None = None
    is_anonymous: bool = False
    attachments: list[Attachment] = Field(default_factory=list)
    metadata: dict[str, Any] = Field(default_factory=dict)


@router.post("", response_model=CommentItem, status_code=status.HTTP_201_CREATED)
async def create_comment(
    request: CreateCommentAPIRequest,
    http_request: Request,
    tenant_id: TenantDep,
    caller: CallerDep,
    create_comment_use_case: FromDishka[CreateCommentUseCase],
    rate_limiter: FromDishka[RateLimiter],
) -> CommentItem:
    """Create a comment on a resource or reply to another comment.

    Rate limited per caller.
    """
    if not rate_limiter.hit(f"{tenant_id}:{caller.user_id}"):
        logfire.warn(
            "Comment creation rate limited", tenant_id=tenant_id, user_id=caller.user_id
        )
        raise RateLimitExceededError()

    use_case_request = CreateCommentRequest(
        tenant_id=tenant_id,
        resource_type=request.resource_type,
        resource_id=request.resource_id,
        content=request.content,
        parent_id=request.parent_id,
        author_id=caller.user_id,
        author_name=request.author_name or caller.name,
        author_email=caller.email,
        author_avatar=request.author_avatar,
        is_anonymous=request.is_anonymous,
        attachments=request.attachments,
        metadata=request.metadata,
        ip_address=http_request.client.host if http_request.client else None,
        user_agent=http_request.headers.get("user-agent"),
    )
    return await create_comment_use_case.execute(use_case_request)


@router.get("", response_model=CommentListResponse)
async def list_comments(
    tenant_id: TenantDep,
    caller: CallerDep,
    list_comments_use_case: FromDishka[ListCommentsUseCase],
    resource_type: str | None = Query(default=None),
    resource_id: str | None = Query(default=None),
    parent_id: str | None = Query(default=None),
    comment_status: CommentStatus | None = Query(default=None, alias="status"),
    author_id: str | None = Query(default=None),
    is_pinned: bool | None = Query(default=None),
    include_deleted: bool = Query(default=False),
    sort_by: SortField = Query(default=SortField.CREATED_AT),
    sort_order: SortOrder = Query(default=SortOrder.DESC),
    page: int = Query(default=1),
    page_size: int | None = Query(default=None),
) -> CommentListResponse:
    """List comments with filters, sorting and pagination.

    Pinned comments come first. Non-admins see approved comments unless they
    filter by status explicitly.
    """
    return await list_comments_use_case.execute(
        ListCommentsRequest(
            tenant_id=tenant_id,
            resource_type=resource_type,
            resource_id=resource_id,
            parent_id=parent_id,
            status=comment_status,
            author_id=author_id,
            is_pinned=is_pinned,
            include_deleted=include_deleted,
            sort_by=sort_by,
            sort_order=sort_order,
            page=page,
            page_size=page_size,
            user_id=caller.user_id,
            is_admin=caller.is_admin,
        )
    )


@router.get("/search", response_model=CommentListResponse)
async def search_comments(
    tenant_id: TenantDep,
    caller: CallerDep,
    search_comments_use_case: FromDishka[SearchCommentsUseCase],
    q: str = Query(default=""),
    page: int = Query(default=1),
    page_size: int | None = Query(default=None),
) -> CommentListResponse:
    """Full-text search over approved comments of the tenant."""
    return await search_comments_use_case.execute(
        SearchCommentsRequest(
            tenant_id=tenant_id, query=q, page=page, page_size=page_size
        )
    )


@router.get("/stats", response_model=GetStatsResponse)
async def get_stats(
    tenant_id: TenantDep,
    caller: CallerDep,
    get_stats_use_case: FromDishka[GetStatsUseCase],
    resource_type: str = Query(min_length=1),
    resource_id: str = Query(min_length=1),
) -> GetStatsResponse:
    """Per-status comment counts for a resource."""
    return await get_stats_use_case.execute(
        GetStatsRequest(
            tenant_id=tenant_id, resource_type=resource_type, resource_id=resource_id
        )
    )


@router.get("/{comment_id}", response_model=CommentItem)
async def get_comment(
    comment_id: str,
    caller: CallerDep,
    get_comment_use_case: FromDishka[GetCommentUseCase],
) -> CommentItem:
    """Get a single comment with the caller's reaction."""
    return await get_comment_use_case.execute(
        GetCommentRequest(
            comment_id=comment_id, user_id=caller.user_id, is_admin=caller.is_admin
        )
    )


class UpdateCommentAPIRequest(BaseModel):
    """API request for editing a comment."""

    content: str = Field(min_length=1)
    attachments: list[Attachment] | None = None


@router.put("/{comment_id}", response_model=CommentItem)
async def update_comment(
    comment_id: str,
    request: UpdateCommentAPIRequest,
    caller: CallerDep,
    update_comment_use_case: FromDishka[UpdateCommentUseCase],
) -> CommentItem:
    """Edit a comment. Only the author (or an admin) can edit."""
    return await update_comment_use_case.execute(
        UpdateCommentRequest(
            comment_id=comment_id,
            user_id=caller.user_id,
            is_admin=caller.is_admin,
            content=request.content,
            attachments=request.attachments,
        )
    )


@router.delete("/{comment_id}", response_model=DeleteCommentResponse)
async def delete_comment(
    comment_id: str,
    caller: CallerDep,
    delete_comment_use_case: FromDishka[DeleteCommentUseCase],
) -> DeleteCommentResponse:
    """Soft-delete a comment."""
    return await delete_comment_use_case.execute(
        DeleteCommentRequest(
            comment_id=comment_id, user_id=caller.user_id, is_admin=caller.is_admin
        )
    )


@router.get("/{comment_id}/replies", response_model=CommentListResponse)
async def get_replies(
    comment_id: str,
    caller: CallerDep,
    get_replies_use_case: FromDishka[GetRepliesUseCase],
    page: int = Query(default=1),
    page_size: int | None = Query(default=None),
) -> CommentListResponse:
    """Approved replies of a comment, oldest first."""
    return await get_replies_use_case.execute(
        GetRepliesRequest(
            comment_id=comment_id,
            page=page,
            page_size=page_size,
            user_id=caller.user_id,
        )
    )
