"""Report routes."""

from dishka.integrations.fastapi import DishkaRoute, FromDishka
from fastapi import APIRouter, status
from pydantic import BaseModel, Field

from remark.application.usecase.report import (
    ReportCommentRequest,
    ReportCommentUseCase,
    ReportItem,
)
from remark.domain.value import ReportReason
from remark.interface.api.dependencies import CallerDep

router = APIRouter(prefix="/comments", tags=["reports"], route_class=DishkaRoute)


class ReportCommentAPIRequest(BaseModel):
    """API request for reporting a comment."""

    reason: ReportReason
    description: str | None = Field(default=None, max_length=500)


@router.post(
    "/{comment_id}/reports",
    response_model=ReportItem,
    status_code=status.HTTP_201_CREATED,
)
async def report_comment(
    comment_id: str,
    request: ReportCommentAPIRequest,
    caller: CallerDep,
    report_comment_use_case: FromDishka[ReportCommentUseCase],
) -> ReportItem:
    """Report a comment. Each user can report a comment once."""
    return await report_comment_use_case.execute(
        ReportCommentRequest(
            comment_id=comment_id,
            reporter_id=caller.user_id,
            reason=request.reason,
            description=request.description,
        )
    )
