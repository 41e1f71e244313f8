"""Moderate comment use case."""

from pydantic import BaseModel, Field

from remark.application.usecase.comment.common import CommentItem
from remark.domain.service import CommentService
from remark.domain.value import UserId, parse_comment_id


class ModerateCommentRequest(BaseModel):
    """Moderate comment request."""

    comment_id: str
    status: str  # approved, rejected or spam
    moderator_id: str
    rejection_reason: str | None = Field(default=None, max_length=1000)


class ModerateCommentUseCase:
    """Use case for approving, rejecting or marking a comment as spam."""

    def __init__(self, comment_service: CommentService) -> None:
        """Initialize moderate comment use case.

        Args:
            comment_service: Comment domain service
        """
        self.comment_service = comment_service

    async def execute(self, request: ModerateCommentRequest) -> CommentItem:
        """Execute moderation.

        Raises:
            ValidationError: If the ID or status is invalid
            NotFoundError: If the comment does not exist
        """
        moderated = await self.comment_service.moderate_comment(
            parse_comment_id(request.comment_id),
            request.status,
            UserId(request.moderator_id),
            request.rejection_reason,
        )
        return CommentItem.from_comment(moderated)
