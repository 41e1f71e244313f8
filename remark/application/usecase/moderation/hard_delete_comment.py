"""Hard delete use case."""

from pydantic import BaseModel

from remark.domain.service import CommentService
from remark.domain.value import parse_comment_id


class HardDeleteCommentRequest(BaseModel):
    """Hard delete request."""

    comment_id: str


class HardDeleteCommentUseCase:
    """Use case for permanently removing a comment.

    Reactions and reports of the comment go with it.
    """

    def __init__(self, comment_service: CommentService) -> None:
        self.comment_service = comment_service

    async def execute(self, request: HardDeleteCommentRequest) -> None:
        await self.comment_service.hard_delete_comment(
            parse_comment_id(request.comment_id)
        )
