"""Admin moderation routes."""

import logfire
from dishka.integrations.fastapi import DishkaRoute, FromDishka
from fastapi import APIRouter, Query, status
from pydantic import BaseModel, Field

from remark.application.usecase.comment import CommentItem, CommentListResponse
from remark.application.usecase.moderation import (
    BulkModerateRequest,
    BulkModerateResponse,
    BulkModerateUseCase,
    GetPendingCommentsRequest,
    GetPendingCommentsUseCase,
    HardDeleteCommentRequest,
    HardDeleteCommentUseCase,
    ModerateCommentRequest,
    ModerateCommentUseCase,
    PinCommentRequest,
    PinCommentUseCase,
)
from remark.application.usecase.report import (
    GetPendingReportsRequest,
    GetPendingReportsUseCase,
    ReportItem,
    ReportListResponse,
    ReviewReportRequest,
    ReviewReportUseCase,
)
from remark.domain.value import ReportStatus
from remark.interface.api.dependencies import AdminDep, TenantDep

router = APIRouter(prefix="/admin", tags=["admin"], route_class=DishkaRoute)


@router.get("/comments/pending", response_model=CommentListResponse)
async def get_pending_comments(
    tenant_id: TenantDep,
    admin: AdminDep,
    get_pending_use_case: FromDishka[GetPendingCommentsUseCase],
    page: int = Query(default=1),
    page_size: int | None = Query(default=None),
) -> CommentListResponse:
    """Comments awaiting moderation, oldest first."""
    return await get_pending_use_case.execute(
        GetPendingCommentsRequest(tenant_id=tenant_id, page=page, page_size=page_size)
    )


class ModerateAPIRequest(BaseModel):
    """API request for moderating a comment."""

    status: str  # approved, rejected or spam
    rejection_reason: str | None = Field(default=None, max_length=1000)


@router.post("/comments/{comment_id}/moderate", response_model=CommentItem)
async def moderate_comment(
    comment_id: str,
    request: ModerateAPIRequest,
    admin: AdminDep,
    moderate_use_case: FromDishka[ModerateCommentUseCase],
) -> CommentItem:
    """Approve, reject or mark a comment as spam."""
    return await moderate_use_case.execute(
        ModerateCommentRequest(
            comment_id=comment_id,
            status=request.status,
            moderator_id=admin.user_id,
            rejection_reason=request.rejection_reason,
        )
    )


class BulkModerateAPIRequest(BaseModel):
    """API request for moderating several comments."""

    comment_ids: list[str] = Field(min_length=1, max_length=100)
    status: str
    rejection_reason: str | None = Field(default=None, max_length=1000)


@router.post("/comments/bulk-moderate", response_model=BulkModerateResponse)
async def bulk_moderate(
    request: BulkModerateAPIRequest,
    admin: AdminDep,
    bulk_moderate_use_case: FromDishka[BulkModerateUseCase],
) -> BulkModerateResponse:
    """Moderate up to 100 comments; failures are reported per ID."""
    result = await bulk_moderate_use_case.execute(
        BulkModerateRequest(
            comment_ids=request.comment_ids,
            status=request.status,
            moderator_id=admin.user_id,
            rejection_reason=request.rejection_reason,
        )
    )
    if result.failed_count:
        logfire.warn(
            "Bulk moderation had failures",
            failed_count=result.failed_count,
            moderator_id=admin.user_id,
        )
    return result


class PinAPIRequest(BaseModel):
    """API request for pinning a comment."""

    is_pinned: bool


@router.post("/comments/{comment_id}/pin", response_model=CommentItem)
async def pin_comment(
    comment_id: str,
    request: PinAPIRequest,
    admin: AdminDep,
    pin_use_case: FromDishka[PinCommentUseCase],
) -> CommentItem:
    """Pin or unpin a comment."""
    return await pin_use_case.execute(
        PinCommentRequest(
            comment_id=comment_id,
            is_pinned=request.is_pinned,
            moderator_id=admin.user_id,
        )
    )


@router.delete("/comments/{comment_id}", status_code=status.HTTP_204_NO_CONTENT)
async def hard_delete_comment(
    comment_id: str,
    admin: AdminDep,
    hard_delete_use_case: FromDishka[HardDeleteCommentUseCase],
) -> None:
    """Permanently delete a comment."""
    await hard_delete_use_case.execute(HardDeleteCommentRequest(comment_id=comment_id))
    logfire.info(
        "Comment hard deleted by admin", comment_id=comment_id, admin_id=admin.user_id
    )


@router.get("/reports/pending", response_model=ReportListResponse)
async def get_pending_reports(
    admin: AdminDep,
    get_pending_reports_use_case: FromDishka[GetPendingReportsUseCase],
    page: int = Query(default=1),
    page_size: int | None = Query(default=None),
) -> ReportListResponse:
    """Reports awaiting review, oldest first."""
    return await get_pending_reports_use_case.execute(
        GetPendingReportsRequest(page=page, page_size=page_size)
    )


class ReviewReportAPIRequest(BaseModel):
    """API request for closing a report."""

    status: ReportStatus


@router.post("/reports/{report_id}/review", response_model=ReportItem)
async def review_report(
    report_id: str,
    request: ReviewReportAPIRequest,
    admin: AdminDep,
    review_report_use_case: FromDishka[ReviewReportUseCase],
) -> ReportItem:
    """Mark a report reviewed or dismissed."""
    return await review_report_use_case.execute(
        ReviewReportRequest(
            report_id=report_id, status=request.status, reviewer_id=admin.user_id
        )
    )
