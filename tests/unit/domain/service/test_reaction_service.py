"""Unit tests for ReactionService."""

from uuid import uuid4

import pytest

from remark.domain.error import (
    ContentDeletedException,
    NotFoundError,
    ReactionsNotAllowedError,
)
from remark.domain.model import SettingsUpdate
from remark.domain.repository import CommentRepository
from remark.domain.service import CommentService, ReactionService, SettingsService
from remark.domain.value import CommentId, ReactionType, TenantId, UserId
from tests.harness import create_env_fixture

unit_env = create_env_fixture()

TENANT = TenantId("shop")


async def make_comment(unit_env):
    comment_service = await unit_env.get(CommentService)
    return await comment_service.create_comment(
        tenant_id=TENANT,
        resource_type="product",
        resource_id="p1",
        author_id=UserId("author"),
        author_name="Author",
        content="Nice",
    )


class TestAddReaction:
    """Tests for add_reaction and the counters it maintains."""

    @pytest.mark.asyncio
    async def test_like_updates_counters(self, unit_env):
        # Arrange
        service = await unit_env.get(ReactionService)
        repo = await unit_env.get(CommentRepository)
        comment = await make_comment(unit_env)

        # Act
        reaction = await service.add_reaction(
            comment.id, UserId("u1"), ReactionType.LIKE
        )

        # Assert
        assert reaction.type == ReactionType.LIKE
        stored = await repo.find_by_id(comment.id)
        assert stored.like_count == 1
        assert stored.dislike_count == 0
        assert stored.reaction_counts == {"like": 1}

    @pytest.mark.asyncio
    async def test_changing_reaction_moves_the_count(self, unit_env):
        """A user has at most one reaction per comment."""
        service = await unit_env.get(ReactionService)
        repo = await unit_env.get(CommentRepository)
        comment = await make_comment(unit_env)

        first = await service.add_reaction(comment.id, UserId("u1"), ReactionType.LIKE)
        second = await service.add_reaction(
            comment.id, UserId("u1"), ReactionType.DISLIKE
        )

        assert second.id == first.id
        assert second.type == ReactionType.DISLIKE
        stored = await repo.find_by_id(comment.id)
        assert stored.like_count == 0
        assert stored.dislike_count == 1
        assert stored.reaction_counts == {"dislike": 1}

    @pytest.mark.asyncio
    async def test_counts_every_type(self, unit_env):
        service = await unit_env.get(ReactionService)
        repo = await unit_env.get(CommentRepository)
        comment = await make_comment(unit_env)

        await service.add_reaction(comment.id, UserId("u1"), ReactionType.LIKE)
        await service.add_reaction(comment.id, UserId("u2"), ReactionType.LIKE)
        await service.add_reaction(comment.id, UserId("u3"), ReactionType.LOVE)

        stored = await repo.find_by_id(comment.id)
        assert stored.like_count == 2
        assert stored.reaction_counts == {"like": 2, "love": 1}

    @pytest.mark.asyncio
    async def test_missing_comment(self, unit_env):
        service = await unit_env.get(ReactionService)

        with pytest.raises(NotFoundError):
            await service.add_reaction(
                CommentId(uuid4()), UserId("u1"), ReactionType.LIKE
            )

    @pytest.mark.asyncio
    async def test_deleted_comment(self, unit_env):
        service = await unit_env.get(ReactionService)
        comment_service = await unit_env.get(CommentService)
        comment = await make_comment(unit_env)
        await comment_service.delete_comment(comment.id, UserId("author"))

        with pytest.raises(ContentDeletedException):
            await service.add_reaction(comment.id, UserId("u1"), ReactionType.LIKE)

    @pytest.mark.asyncio
    async def test_reactions_disabled(self, unit_env):
        settings_service = await unit_env.get(SettingsService)
        service = await unit_env.get(ReactionService)
        comment = await make_comment(unit_env)
        await settings_service.update(
            TENANT, "product", SettingsUpdate(allow_reactions=False)
        )

        with pytest.raises(ReactionsNotAllowedError):
            await service.add_reaction(comment.id, UserId("u1"), ReactionType.LIKE)

    @pytest.mark.asyncio
    async def test_type_outside_allowed_list(self, unit_env):
        settings_service = await unit_env.get(SettingsService)
        service = await unit_env.get(ReactionService)
        comment = await make_comment(unit_env)
        await settings_service.update(
            TENANT,
            "product",
            SettingsUpdate(allowed_reactions=[ReactionType.LIKE, ReactionType.DISLIKE]),
        )

        with pytest.raises(ReactionsNotAllowedError) as exc_info:
            await service.add_reaction(comment.id, UserId("u1"), ReactionType.ANGRY)

        assert "angry" in str(exc_info.value)


class TestRemoveReaction:
    """Tests for remove_reaction."""

    @pytest.mark.asyncio
    async def test_remove_recounts(self, unit_env):
        service = await unit_env.get(ReactionService)
        repo = await unit_env.get(CommentRepository)
        comment = await make_comment(unit_env)
        await service.add_reaction(comment.id, UserId("u1"), ReactionType.LIKE)

        removed = await service.remove_reaction(comment.id, UserId("u1"))

        assert removed is True
        stored = await repo.find_by_id(comment.id)
        assert stored.like_count == 0
        assert stored.reaction_counts == {}

    @pytest.mark.asyncio
    async def test_remove_without_reaction(self, unit_env):
        service = await unit_env.get(ReactionService)
        comment = await make_comment(unit_env)

        assert await service.remove_reaction(comment.id, UserId("u1")) is False


class TestUserReactions:
    """Tests for reading a caller's own reactions."""

    @pytest.mark.asyncio
    async def test_get_user_reaction(self, unit_env):
        service = await unit_env.get(ReactionService)
        comment = await make_comment(unit_env)
        await service.add_reaction(comment.id, UserId("u1"), ReactionType.WOW)

        mine = await service.get_user_reaction(comment.id, UserId("u1"))
        theirs = await service.get_user_reaction(comment.id, UserId("u2"))

        assert mine.type == ReactionType.WOW
        assert theirs is None

    @pytest.mark.asyncio
    async def test_get_user_reactions_maps_comment_to_type(self, unit_env):
        service = await unit_env.get(ReactionService)
        first = await make_comment(unit_env)
        second = await make_comment(unit_env)
        await service.add_reaction(first.id, UserId("u1"), ReactionType.SAD)

        reactions = await service.get_user_reactions(
            UserId("u1"), [first.id, second.id]
        )

        assert reactions == {first.id: ReactionType.SAD}

    @pytest.mark.asyncio
    async def test_get_user_reactions_empty_input(self, unit_env):
        service = await unit_env.get(ReactionService)

        assert await service.get_user_reactions(UserId("u1"), []) == {}
