"""Remove reaction use case."""

from pydantic import BaseModel

from remark.domain.service import ReactionService
from remark.domain.value import UserId, parse_comment_id


class RemoveReactionRequest(BaseModel):
    """Remove reaction request."""

    comment_id: str
    user_id: str


class RemoveReactionResponse(BaseModel):
    """Remove reaction response."""

    removed: bool


class RemoveReactionUseCase:
    """Use case for withdrawing a reaction."""

    def __init__(self, reaction_service: ReactionService) -> None:
        self.reaction_service = reaction_service

    async def execute(self, request: RemoveReactionRequest) -> RemoveReactionResponse:
        """Remove the user's reaction; removing nothing is not an error."""
        removed = await self.reaction_service.remove_reaction(
            parse_comment_id(request.comment_id), UserId(request.user_id)
        )
        return RemoveReactionResponse(removed=removed)
