"""Get user reaction use case."""

from pydantic import BaseModel

from remark.domain.service import ReactionService
from remark.domain.value import ReactionType, UserId, parse_comment_id


class GetUserReactionRequest(BaseModel):
    """Get user reaction request."""

    comment_id: str
    user_id: str


class GetUserReactionResponse(BaseModel):
    """The caller's reaction on a comment, if any."""

    comment_id: str
    reaction_type: ReactionType | None = None


class GetUserReactionUseCase:
    """Use case for reading the caller's own reaction."""

    def __init__(self, reaction_service: ReactionService) -> None:
        self.reaction_service = reaction_service

    async def execute(
        self, request: GetUserReactionRequest
    ) -> GetUserReactionResponse:
        reaction = await self.reaction_service.get_user_reaction(
            parse_comment_id(request.comment_id), UserId(request.user_id)
        )
        return GetUserReactionResponse(
            comment_id=request.comment_id,
            reaction_type=reaction.type if reaction else None,
        )
