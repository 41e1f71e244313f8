"""Reaction domain service and reaction counter."""

from datetime import datetime
from uuid import uuid4

import logfire

from remark.domain.error import (
    ContentDeletedException,
    NotFoundError,
    ReactionsNotAllowedError,
)
from remark.domain.model import Reaction
from remark.domain.repository import CommentRepository, ReactionRepository
from remark.domain.value import CommentId, ReactionId, ReactionType, UserId

from .base import Service
from .settings_service import SettingsService


class ReactionService(Service):
    """Domain service for reactions.

    Every mutation is followed by a recount that rewrites the comment's
    counters from the reaction store. The recount is best effort: the
    reaction itself is already stored when it runs.
    """

    def __init__(
        self,
        reaction_repository: ReactionRepository,
        comment_repository: CommentRepository,
        settings_service: SettingsService,
    ) -> None:
        """Initialize reaction service.

        Args:
            reaction_repository: Reaction repository
            comment_repository: Comment repository
            settings_service: Settings resolver
        """
        self.reaction_repository = reaction_repository
        self.comment_repository = comment_repository
        self.settings_service = settings_service

    async def add_reaction(
        self, comment_id: CommentId, user_id: UserId, reaction_type: ReactionType
    ) -> Reaction:
        """Add or replace the user's reaction on a comment.

        Raises:
            NotFoundError: If the comment does not exist
            ContentDeletedException: If the comment is soft-deleted
            ReactionsNotAllowedError: If reactions or this type are disabled
        """
        with logfire.span(
            "reaction_service.add_reaction",
            comment_id=str(comment_id),
            user_id=user_id,
            reaction_type=reaction_type.value,
        ):
            comment = await self.comment_repository.find_by_id(comment_id)
            if comment is None:
                logfire.warn(
                    "Reaction on non-existent comment", comment_id=str(comment_id)
                )
                raise NotFoundError("comment", str(comment_id))
            if comment.is_deleted:
                raise ContentDeletedException("comment", str(comment_id))

            settings = await self.settings_service.get_or_create(
                comment.tenant_id, comment.resource_type
            )
            if not settings.allow_reactions:
                raise ReactionsNotAllowedError()
            if reaction_type not in settings.allowed_reactions:
                raise ReactionsNotAllowedError(
                    f"Reaction type not allowed: {reaction_type.value}"
                )

            now = datetime.now()
            reaction = await self.reaction_repository.upsert(
                Reaction(
                    id=ReactionId(uuid4()),
                    comment_id=comment_id,
                    user_id=user_id,
                    type=reaction_type,
                    created_at=now,
                    updated_at=now,
                )
            )
            logfire.info(
                "Reaction stored",
                comment_id=str(comment_id),
                user_id=user_id,
                reaction_type=reaction_type.value,
            )

            await self.recount(comment_id)
            return reaction

    async def remove_reaction(self, comment_id: CommentId, user_id: UserId) -> bool:
        """Remove the user's reaction.

        Returns:
            True if a reaction was removed, False if there was none
        """
        with logfire.span(
            "reaction_service.remove_reaction",
            comment_id=str(comment_id),
            user_id=user_id,
        ):
            removed = await self.reaction_repository.delete(comment_id, user_id)
            if removed:
                logfire.info(
                    "Reaction removed", comment_id=str(comment_id), user_id=user_id
                )
                await self.recount(comment_id)
            else:
                logfire.info(
                    "No reaction to remove", comment_id=str(comment_id), user_id=user_id
                )
            return removed

    async def get_user_reaction(
        self, comment_id: CommentId, user_id: UserId
    ) -> Reaction | None:
        """The user's reaction on one comment, if any."""
        return await self.reaction_repository.find_by_user(comment_id, user_id)

    async def get_user_reactions(
        self, user_id: UserId, comment_ids: list[CommentId]
    ) -> dict[CommentId, ReactionType]:
        """The user's reactions on several comments.

        Returns:
            Mapping of comment ID to reaction type for comments reacted to
        """
        if not comment_ids:
            return {}

        reactions = await self.reaction_repository.find_by_user_and_comments(
            user_id, comment_ids
        )
        return {r.comment_id: r.type for r in reactions}

    async def recount(self, comment_id: CommentId) -> None:
        """Rewrite the comment's counters from the reaction store."""
        try:
            counts = await self.reaction_repository.count_by_type(comment_id)
            await self.comment_repository.set_reaction_counts(
                comment_id,
                like_count=counts.get(ReactionType.LIKE, 0),
                dislike_count=counts.get(ReactionType.DISLIKE, 0),
                reaction_counts={t.value: n for t, n in counts.items() if n},
            )
        except Exception as e:
            logfire.warn(
                "Failed to recount reactions",
                comment_id=str(comment_id),
                error=str(e),
            )
