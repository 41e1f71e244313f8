"""Integration tests for the PostgreSQL repositories.

Run with ``pytest -m integration`` against a migrated database.
"""

from uuid import uuid4

import pytest

from remark.domain.error import AlreadyExistsError
from remark.domain.model import Comment, CommentFilter, Reaction, Report
from remark.domain.repository import (
    CommentRepository,
    ReactionRepository,
    ReportRepository,
)
from remark.domain.service import SettingsService
from remark.domain.value import (
    Attachment,
    CommentId,
    CommentStatus,
    ReactionId,
    ReactionType,
    ReportId,
    ReportReason,
    TenantId,
    UserId,
)
from tests.harness import create_env_fixture

pytestmark = pytest.mark.integration

# Integration test fixture
integration_env = create_env_fixture(unmock={"persistence"})


def make_comment(tenant: str, **overrides) -> Comment:
    fields = {
        "id": CommentId(uuid4()),
        "tenant_id": TenantId(tenant),
        "resource_type": "product",
        "resource_id": "p1",
        "author_id": UserId("u1"),
        "author_name": "User One",
        "content": "Solid battery life",
        "status": CommentStatus.APPROVED,
    }
    fields.update(overrides)
    return Comment(**fields)


class TestPostgresCommentRepository:
    """Round trips through the comments table."""

    @pytest.mark.asyncio
    async def test_json_columns_survive_round_trip(self, integration_env):
        # Arrange
        repo = await integration_env.get(CommentRepository)
        comment = make_comment(
            f"it-{uuid4()}",
            attachments=[
                Attachment(id="a1", type="image", url="https://cdn.local/a1.png")
            ],
            flagged_words=["scam"],
            metadata={"source": "web"},
        )

        # Act
        await repo.create(comment)
        found = await repo.find_by_id(comment.id)

        # Assert
        assert found is not None
        assert found.attachments[0].url == "https://cdn.local/a1.png"
        assert found.flagged_words == ["scam"]
        assert found.metadata == {"source": "web"}

    @pytest.mark.asyncio
    async def test_pinned_first_and_reply_counter(self, integration_env):
        repo = await integration_env.get(CommentRepository)
        tenant = f"it-{uuid4()}"
        plain = await repo.create(make_comment(tenant))
        pinned = await repo.create(make_comment(tenant, is_pinned=True))

        await repo.increment_reply_count(plain.id, 1)
        await repo.increment_reply_count(plain.id, -5)
        page = await repo.find_page(CommentFilter(tenant_id=TenantId(tenant)))

        assert [c.id for c in page.items] == [pinned.id, plain.id]
        assert (await repo.find_by_id(plain.id)).reply_count == 0

    @pytest.mark.asyncio
    async def test_search_and_stats(self, integration_env):
        repo = await integration_env.get(CommentRepository)
        tenant = f"it-{uuid4()}"
        match = await repo.create(make_comment(tenant))
        await repo.create(make_comment(tenant, content="Slow shipping"))
        await repo.create(make_comment(tenant, status=CommentStatus.PENDING))

        items, total = await repo.search(TenantId(tenant), "battery", 0, 10)
        stats = await repo.count_by_status(TenantId(tenant), "product", "p1")

        assert total == 1
        assert items[0].id == match.id
        assert stats.total == 3
        assert stats.approved == 2
        assert stats.pending == 1


class TestPostgresReactionAndReportRepositories:
    """Uniqueness rules enforced by the database."""

    @pytest.mark.asyncio
    async def test_reaction_upsert_replaces_type(self, integration_env):
        comments = await integration_env.get(CommentRepository)
        reactions = await integration_env.get(ReactionRepository)
        comment = await comments.create(make_comment(f"it-{uuid4()}"))

        for reaction_type in (ReactionType.LIKE, ReactionType.WOW):
            await reactions.upsert(
                Reaction(
                    id=ReactionId(uuid4()),
                    comment_id=comment.id,
                    user_id=UserId("u2"),
                    type=reaction_type,
                )
            )

        assert await reactions.count_by_type(comment.id) == {ReactionType.WOW: 1}

    @pytest.mark.asyncio
    async def test_duplicate_report_raises(self, integration_env):
        comments = await integration_env.get(CommentRepository)
        reports = await integration_env.get(ReportRepository)
        comment = await comments.create(make_comment(f"it-{uuid4()}"))

        def report() -> Report:
            return Report(
                id=ReportId(uuid4()),
                comment_id=comment.id,
                reporter_id=UserId("u2"),
                reason=ReportReason.SPAM,
            )

        await reports.insert(report())
        with pytest.raises(AlreadyExistsError):
            await reports.insert(report())


class TestSettingsResolution:
    """get_or_create against the real table."""

    @pytest.mark.asyncio
    async def test_defaults_created_once(self, integration_env):
        service = await integration_env.get(SettingsService)
        tenant = TenantId(f"it-{uuid4()}")

        first = await service.get_or_create(tenant, "product")
        second = await service.get_or_create(tenant, "product")

        assert first.id == second.id
