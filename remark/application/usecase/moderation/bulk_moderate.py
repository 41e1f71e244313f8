"""Bulk moderation use case."""

from pydantic import BaseModel, Field

from remark.application.usecase.base import BaseUseCase
from remark.domain.error import ValidationError
from remark.domain.service import CommentService
from remark.domain.value import UserId, parse_comment_id


class BulkModerateRequest(BaseModel):
    """Bulk moderation request."""

    comment_ids: list[str] = Field(min_length=1, max_length=100)
    status: str
    moderator_id: str
    rejection_reason: str | None = Field(default=None, max_length=1000)


class BulkModerateResponse(BaseModel):
    """Bulk moderation response."""

    success_count: int
    failed_count: int
    failed_ids: list[str]


class BulkModerateUseCase(BaseUseCase):
    """Use case for moderating several comments at once.

    Malformed and missing IDs are reported as failed instead of aborting
    the batch.
    """

    def __init__(self, comment_service: CommentService) -> None:
        self.comment_service = comment_service

    async def execute(self, request: BulkModerateRequest) -> BulkModerateResponse:
        valid_ids = []
        failed_ids = []
        for raw in request.comment_ids:
            try:
                valid_ids.append(parse_comment_id(raw))
            except ValidationError:
                failed_ids.append(raw)

        _, failed = await self.comment_service.bulk_moderate(
            valid_ids,
            request.status,
            UserId(request.moderator_id),
            request.rejection_reason,
        )
        failed_ids.extend(str(comment_id) for comment_id in failed)

        return BulkModerateResponse(
            success_count=len(request.comment_ids) - len(failed_ids),
            failed_count=len(failed_ids),
            failed_ids=failed_ids,
        )
