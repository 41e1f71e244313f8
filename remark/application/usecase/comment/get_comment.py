"""Get comment use case."""

from pydantic import BaseModel

from remark.domain.error import NotFoundError
from remark.domain.service import CommentService, ReactionService
from remark.domain.value import CommentStatus, UserId, parse_comment_id

from .common import CommentItem


class GetCommentRequest(BaseModel):
    """Get comment request."""

    comment_id: str
    user_id: str | None = None
    is_admin: bool = False


class GetCommentUseCase:
    """Use case for fetching a single comment."""

    def __init__(
        self, comment_service: CommentService, reaction_service: ReactionService
    ) -> None:
        self.comment_service = comment_service
        self.reaction_service = reaction_service

    async def execute(self, request: GetCommentRequest) -> CommentItem:
        """Fetch a comment.

        Unapproved comments are only visible to admins and their author.

        Raises:
            ValidationError: If the ID is malformed
            NotFoundError: If the comment does not exist or is hidden
        """
        comment_id = parse_comment_id(request.comment_id)
        comment = await self.comment_service.get_comment_by_id(comment_id)

        is_author = (
            request.user_id is not None and comment.author_id == request.user_id
        )
        if comment.status != CommentStatus.APPROVED and not (
            request.is_admin or is_author
        ):
            raise NotFoundError("comment", request.comment_id)

        reaction = None
        if request.user_id:
            found = await self.reaction_service.get_user_reaction(
                comment_id, UserId(request.user_id)
            )
            reaction = found.type if found else None

        return CommentItem.from_comment(comment, reaction)
