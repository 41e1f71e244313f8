"""Get replies use case."""

from pydantic import BaseModel

from remark.domain.service import CommentService, ReactionService
from remark.domain.value import UserId, parse_comment_id

from .common import CommentListResponse


class GetRepliesRequest(BaseModel):
    """Get replies request."""

    comment_id: str
    page: int | None = 1
    page_size: int | None = None
    user_id: str | None = None


class GetRepliesUseCase:
    """Use case for reading the replies of a comment."""

    def __init__(
        self, comment_service: CommentService, reaction_service: ReactionService
    ) -> None:
        self.comment_service = comment_service
        self.reaction_service = reaction_service

    async def execute(self, request: GetRepliesRequest) -> CommentListResponse:
        """Approved replies, oldest first, with the caller's reactions."""
        page = await self.comment_service.get_replies(
            parse_comment_id(request.comment_id), request.page, request.page_size
        )

        reactions = {}
        if request.user_id and page.items:
            reactions = await self.reaction_service.get_user_reactions(
                UserId(request.user_id), [c.id for c in page.items]
            )
        return CommentListResponse.from_page(page, reactions)
