"""In-memory reaction repository for testing."""

from collections import Counter
from typing import Optional, Sequence

from remark.domain.model import Reaction
from remark.domain.repository.reaction import ReactionRepository
from remark.domain.value import CommentId, ReactionType, UserId


class InMemoryReactionRepository(ReactionRepository):
    """In-memory implementation of ReactionRepository for testing."""

    def __init__(self) -> None:
        self._reactions: dict[tuple[CommentId, str], Reaction] = {}

    async def upsert(self, reaction: Reaction) -> Reaction:
        """Store a reaction, replacing the user's previous one."""
        key = (reaction.comment_id, reaction.user_id)
        existing = self._reactions.get(key)
        if existing:
            reaction = existing.model_copy(
                update={"type": reaction.type, "updated_at": reaction.updated_at}
            )
        self._reactions[key] = reaction
        return reaction

    async def delete(self, comment_id: CommentId, user_id: UserId) -> bool:
        """Remove a user's reaction."""
        return self._reactions.pop((comment_id, user_id), None) is not None

    async def find_by_user(
        self, comment_id: CommentId, user_id: UserId
    ) -> Optional[Reaction]:
        """Find a user's reaction on a comment."""
        return self._reactions.get((comment_id, user_id))

    async def find_by_user_and_comments(
        self, user_id: UserId, comment_ids: Sequence[CommentId]
    ) -> list[Reaction]:
        """Find a user's reactions on several comments."""
        wanted = set(comment_ids)
        return [
            r
            for r in self._reactions.values()
            if r.user_id == user_id and r.comment_id in wanted
        ]

    async def count_by_type(self, comment_id: CommentId) -> dict[ReactionType, int]:
        """Count reactions on a comment grouped by type."""
        return dict(
            Counter(
                r.type
                for r in self._reactions.values()
                if r.comment_id == comment_id
            )
        )
