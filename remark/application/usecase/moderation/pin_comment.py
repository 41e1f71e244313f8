"""Pin comment use case."""

from pydantic import BaseModel

from remark.application.usecase.comment.common import CommentItem
from remark.domain.service import CommentService
from remark.domain.value import UserId, parse_comment_id


class PinCommentRequest(BaseModel):
    """Pin comment request."""

    comment_id: str
    is_pinned: bool
    moderator_id: str


class PinCommentUseCase:
    """Use case for pinning or unpinning a comment."""

    def __init__(self, comment_service: CommentService) -> None:
        self.comment_service = comment_service

    async def execute(self, request: PinCommentRequest) -> CommentItem:
        pinned = await self.comment_service.pin_comment(
            parse_comment_id(request.comment_id),
            request.is_pinned,
            UserId(request.moderator_id),
        )
        return CommentItem.from_comment(pinned)
