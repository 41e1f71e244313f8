"""Update comment use case."""

from pydantic import BaseModel, Field

from remark.domain.service import CommentService
from remark.domain.value import Attachment, UserId, parse_comment_id

from .common import CommentItem


class UpdateCommentRequest(BaseModel):
    """Update comment request."""

    comment_id: str  # UUID string
    user_id: str  # Current user ID (must be author unless admin)
    is_admin: bool = False
    content: str = Field(min_length=1)
    attachments: list[Attachment] | None = None  # None keeps current attachments


class UpdateCommentUseCase:
    """Use case for editing a comment's content."""

    def __init__(self, comment_service: CommentService) -> None:
        """Initialize update comment use case.

        Args:
            comment_service: Comment domain service
        """
        self.comment_service = comment_service

    async def execute(self, request: UpdateCommentRequest) -> CommentItem:
        """Execute update comment flow.

        Raises:
            NotFoundError: If the comment does not exist
            NotAuthorizedError: If the user doesn't own the comment
            ContentDeletedException: If the comment is deleted
            ContentTooLongError: If the new content is too long
        """
        updated = await self.comment_service.update_comment(
            comment_id=parse_comment_id(request.comment_id),
            content=request.content,
            caller_id=UserId(request.user_id),
            is_admin=request.is_admin,
            attachments=request.attachments,
        )
        return CommentItem.from_comment(updated)
