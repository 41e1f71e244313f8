"""Delete comment use case."""

from pydantic import BaseModel

from remark.domain.service import CommentService
from remark.domain.value import UserId, parse_comment_id


class DeleteCommentRequest(BaseModel):
    """Delete comment request."""

    comment_id: str
    user_id: str
    is_admin: bool = False


class DeleteCommentResponse(BaseModel):
    """Delete comment response."""

    comment_id: str
    deleted: bool


class DeleteCommentUseCase:
    """Use case for soft-deleting a comment."""

    def __init__(self, comment_service: CommentService) -> None:
        self.comment_service = comment_service

    async def execute(self, request: DeleteCommentRequest) -> DeleteCommentResponse:
        """Soft-delete a comment owned by the caller (or any, for admins)."""
        comment = await self.comment_service.delete_comment(
            parse_comment_id(request.comment_id),
            caller_id=UserId(request.user_id),
            is_admin=request.is_admin,
        )
        return DeleteCommentResponse(
            comment_id=str(comment.id), deleted=comment.is_deleted
        )
