"""Reaction repository interface."""

from abc import ABC, abstractmethod
from typing import Optional, Sequence

from remark.domain.model import Reaction
from remark.domain.value import CommentId, ReactionType, UserId


class ReactionRepository(ABC):
    """Repository for Reaction entity."""

    @abstractmethod
    async def upsert(self, reaction: Reaction) -> Reaction:
        """Store a reaction, replacing the user's previous one on the comment.

        Returns:
            The stored reaction
        """
        pass

    @abstractmethod
    async def delete(self, comment_id: CommentId, user_id: UserId) -> bool:
        """Remove a user's reaction.

        Returns:
            True if a reaction was removed
        """
        pass

    @abstractmethod
    async def find_by_user(
        self, comment_id: CommentId, user_id: UserId
    ) -> Optional[Reaction]:
        """Find a user's reaction on a comment."""
        pass

    @abstractmethod
    async def find_by_user_and_comments(
        self, user_id: UserId, comment_ids: Sequence[CommentId]
    ) -> list[Reaction]:
        """Find a user's reactions on several comments (batch query)."""
        pass

    @abstractmethod
    async def count_by_type(self, comment_id: CommentId) -> dict[ReactionType, int]:
        """Count reactions on a comment grouped by type.

        Types with no reactions are absent from the result.
        """
        pass
