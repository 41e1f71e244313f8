"""Add reaction use case."""

from datetime import datetime

from pydantic import BaseModel

from remark.domain.service import ReactionService
from remark.domain.value import ReactionType, UserId, parse_comment_id


class AddReactionRequest(BaseModel):
    """Add reaction request."""

    comment_id: str  # UUID string
    user_id: str  # User ID from authenticated user
    reaction_type: ReactionType


class AddReactionResponse(BaseModel):
    """Add reaction response."""

    reaction_id: str
    comment_id: str
    reaction_type: ReactionType
    created_at: datetime
    updated_at: datetime


class AddReactionUseCase:
    """Use case for reacting to a comment."""

    def __init__(self, reaction_service: ReactionService) -> None:
        """Initialize add reaction use case.

        Args:
            reaction_service: Reaction domain service
        """
        self.reaction_service = reaction_service

    async def execute(self, request: AddReactionRequest) -> AddReactionResponse:
        """Execute add reaction flow.

        A second reaction by the same user replaces the first.

        Args:
            request: Add reaction request

        Returns:
            The stored reaction

        Raises:
            NotFoundError: If the comment does not exist
            ReactionsNotAllowedError: If the reaction type is disabled
        """
        reaction = await self.reaction_service.add_reaction(
            parse_comment_id(request.comment_id),
            UserId(request.user_id),
            request.reaction_type,
        )
        return AddReactionResponse(
            reaction_id=str(reaction.id),
            comment_id=str(reaction.comment_id),
            reaction_type=reaction.type,
            created_at=reaction.created_at,
            updated_at=reaction.updated_at,
        )
