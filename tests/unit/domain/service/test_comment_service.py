"""Unit tests for CommentService."""

from uuid import uuid4

import pytest

from remark.adapter.notifier import MockNotifier
from remark.domain.error import (
    AnonymousNotAllowedError,
    CommentsDisabledError,
    ContentDeletedException,
    ContentTooLongError,
    MaxDepthExceededError,
    NotAuthorizedError,
    NotFoundError,
    RepliesNotAllowedError,
    ValidationError,
)
from remark.domain.model import CommentFilter, SettingsUpdate
from remark.domain.repository import CommentRepository
from remark.domain.service import (
    BadWordDetector,
    CommentService,
    NotificationDispatcher,
    SettingsService,
)
from remark.domain.value import (
    CommentId,
    CommentStatus,
    NotificationEvent,
    SortField,
    TenantId,
    UserId,
)
from remark.persistence.repository.inmemory import (
    InMemoryCommentRepository,
    InMemorySettingsRepository,
)
from tests.harness import create_env_fixture

# Unit test fixture - everything mocked, no docker needed
unit_env = create_env_fixture()

TENANT = TenantId("shop")
RESOURCE_TYPE = "product"
RESOURCE_ID = "p1"


async def create(service: CommentService, content: str = "Great product!", **kwargs):
    """Create a comment on the default resource."""
    params = {
        "tenant_id": TENANT,
        "resource_type": RESOURCE_TYPE,
        "resource_id": RESOURCE_ID,
        "author_id": UserId("u1"),
        "author_name": "User One",
        "content": content,
    }
    params.update(kwargs)
    return await service.create_comment(**params)


async def configure(unit_env, **changes):
    """Change the default resource type's settings."""
    settings_service = await unit_env.get(SettingsService)
    return await settings_service.update(
        TENANT, RESOURCE_TYPE, SettingsUpdate(**changes)
    )


class TestCreateComment:
    """Tests for create_comment."""

    @pytest.mark.asyncio
    async def test_top_level_comment_defaults_to_pending(self, unit_env):
        """Approval is required by default."""
        # Arrange
        service = await unit_env.get(CommentService)
        repo = await unit_env.get(CommentRepository)

        # Act
        comment = await create(service)

        # Assert
        assert comment.status == CommentStatus.PENDING
        assert comment.depth == 0
        assert comment.parent_id is None
        assert comment.root_id is None
        assert comment.flagged_words == []
        assert comment.author_name == "User One"

        saved = await repo.find_by_id(comment.id)
        assert saved == comment

    @pytest.mark.asyncio
    async def test_approved_immediately_when_approval_not_required(self, unit_env):
        await configure(unit_env, require_approval=False)
        service = await unit_env.get(CommentService)

        comment = await create(service)

        assert comment.status == CommentStatus.APPROVED

    @pytest.mark.asyncio
    async def test_flagged_comment_stays_pending_even_without_approval(self, unit_env):
        """Bad words always send the comment to moderation."""
        await configure(unit_env, require_approval=False)
        service = await unit_env.get(CommentService)

        comment = await create(service, content="total scam, avoid")

        assert comment.status == CommentStatus.PENDING
        assert comment.flagged_words == ["scam"]

    @pytest.mark.asyncio
    async def test_custom_bad_words_are_flagged(self, unit_env):
        await configure(unit_env, require_approval=False, custom_bad_words=["junk"])
        service = await unit_env.get(CommentService)

        comment = await create(service, content="This is Junk")

        assert comment.status == CommentStatus.PENDING
        assert comment.flagged_words == ["Junk"]

    @pytest.mark.asyncio
    async def test_filter_disabled_skips_detection(self, unit_env):
        await configure(unit_env, require_approval=False, bad_words_filter=False)
        service = await unit_env.get(CommentService)

        comment = await create(service, content="total scam")

        assert comment.status == CommentStatus.APPROVED
        assert comment.flagged_words == []

    @pytest.mark.asyncio
    async def test_comments_disabled_rejects_creation(self, unit_env):
        await configure(unit_env, comments_enabled=False)
        service = await unit_env.get(CommentService)
        repo = await unit_env.get(CommentRepository)

        with pytest.raises(CommentsDisabledError):
            await create(service)

        page = await repo.find_page(
            CommentFilter(tenant_id=TENANT, include_deleted=True)
        )
        assert page.total == 0

    @pytest.mark.asyncio
    async def test_anonymous_rejected_by_default(self, unit_env):
        service = await unit_env.get(CommentService)

        with pytest.raises(AnonymousNotAllowedError):
            await create(service, is_anonymous=True)

    @pytest.mark.asyncio
    async def test_anonymous_hides_author_identity(self, unit_env):
        await configure(unit_env, allow_anonymous=True)
        service = await unit_env.get(CommentService)

        comment = await create(
            service, is_anonymous=True, author_email="u1@example.com"
        )

        assert comment.is_anonymous is True
        assert comment.author_name == "Anonymous"
        assert comment.author_email is None
        assert comment.author_id == "u1"

    @pytest.mark.asyncio
    async def test_content_at_max_length_is_accepted(self, unit_env):
        await configure(unit_env, max_comment_length=10)
        service = await unit_env.get(CommentService)

        comment = await create(service, content="x" * 10)

        assert len(comment.content) == 10

    @pytest.mark.asyncio
    async def test_content_over_max_length_is_rejected(self, unit_env):
        await configure(unit_env, max_comment_length=10)
        service = await unit_env.get(CommentService)

        with pytest.raises(ContentTooLongError) as exc_info:
            await create(service, content="x" * 11)

        assert exc_info.value.max_length == 10
        assert isinstance(exc_info.value, ValidationError)
        repo = await unit_env.get(CommentRepository)
        page = await repo.find_page(
            CommentFilter(tenant_id=TENANT, include_deleted=True)
        )
        assert page.total == 0


class TestReplies:
    """Tests for threading rules on create_comment."""

    @pytest.mark.asyncio
    async def test_reply_depth_and_root(self, unit_env):
        """Replies point at the thread root, however deep."""
        # Arrange
        service = await unit_env.get(CommentService)
        root = await create(service, content="root")

        # Act
        child = await create(service, content="child", parent_id=root.id)
        grandchild = await create(service, content="grandchild", parent_id=child.id)

        # Assert
        assert child.depth == 1
        assert child.root_id == root.id
        assert grandchild.depth == 2
        assert grandchild.root_id == root.id
        assert grandchild.parent_id == child.id

    @pytest.mark.asyncio
    async def test_reply_increments_parent_reply_count(self, unit_env):
        service = await unit_env.get(CommentService)
        repo = await unit_env.get(CommentRepository)
        root = await create(service)

        await create(service, content="one", parent_id=root.id)
        await create(service, content="two", parent_id=root.id)

        parent = await repo.find_by_id(root.id)
        assert parent.reply_count == 2

    @pytest.mark.asyncio
    async def test_missing_parent_raises_not_found(self, unit_env):
        service = await unit_env.get(CommentService)

        with pytest.raises(NotFoundError):
            await create(service, parent_id=CommentId(uuid4()))

    @pytest.mark.asyncio
    async def test_replies_disabled(self, unit_env):
        service = await unit_env.get(CommentService)
        repo = await unit_env.get(CommentRepository)
        root = await create(service)
        await configure(unit_env, allow_replies=False)

        with pytest.raises(RepliesNotAllowedError):
            await create(service, parent_id=root.id)

        assert (await repo.find_by_id(root.id)).reply_count == 0

    @pytest.mark.asyncio
    async def test_max_depth_is_enforced(self, unit_env):
        """A reply may sit exactly at max depth, not beyond."""
        await configure(unit_env, max_reply_depth=1)
        service = await unit_env.get(CommentService)
        root = await create(service)
        child = await create(service, parent_id=root.id)

        with pytest.raises(MaxDepthExceededError):
            await create(service, parent_id=child.id)

        assert child.depth == 1

    @pytest.mark.asyncio
    async def test_zero_depth_forbids_all_replies(self, unit_env):
        await configure(unit_env, max_reply_depth=0)
        service = await unit_env.get(CommentService)
        root = await create(service)

        with pytest.raises(MaxDepthExceededError):
            await create(service, parent_id=root.id)

    @pytest.mark.asyncio
    async def test_parent_on_another_resource_is_rejected(self, unit_env):
        service = await unit_env.get(CommentService)
        other = await create(service, resource_id="p2")

        with pytest.raises(ValidationError):
            await create(service, parent_id=other.id)


class TestUpdateComment:
    """Tests for update_comment."""

    @pytest.mark.asyncio
    async def test_author_edit_keeps_history(self, unit_env):
        # Arrange
        service = await unit_env.get(CommentService)
        comment = await create(service, content="first")

        # Act
        updated = await service.update_comment(comment.id, "second", UserId("u1"))
        updated = await service.update_comment(comment.id, "third", UserId("u1"))

        # Assert
        assert updated.content == "third"
        assert updated.is_edited is True
        assert [e.content for e in updated.edit_history] == ["first", "second"]
        assert updated.edit_history[0].edited_by == "u1"
        assert updated.updated_at >= comment.updated_at

    @pytest.mark.asyncio
    async def test_other_user_cannot_edit(self, unit_env):
        service = await unit_env.get(CommentService)
        comment = await create(service)

        with pytest.raises(NotAuthorizedError):
            await service.update_comment(comment.id, "hijack", UserId("u2"))

    @pytest.mark.asyncio
    async def test_admin_can_edit_any_comment(self, unit_env):
        service = await unit_env.get(CommentService)
        comment = await create(service)

        updated = await service.update_comment(
            comment.id, "cleaned up", UserId("mod"), is_admin=True
        )

        assert updated.content == "cleaned up"
        assert updated.edit_history[0].edited_by == "mod"

    @pytest.mark.asyncio
    async def test_deleted_comment_cannot_be_edited(self, unit_env):
        service = await unit_env.get(CommentService)
        comment = await create(service)
        await service.delete_comment(comment.id, UserId("u1"))

        with pytest.raises(ContentDeletedException):
            await service.update_comment(comment.id, "again", UserId("u1"))

    @pytest.mark.asyncio
    async def test_edit_over_max_length_is_rejected(self, unit_env):
        service = await unit_env.get(CommentService)
        comment = await create(service)
        await configure(unit_env, max_comment_length=5)

        with pytest.raises(ContentTooLongError):
            await service.update_comment(comment.id, "too long", UserId("u1"))

    @pytest.mark.asyncio
    async def test_flagged_edit_returns_approved_comment_to_moderation(
        self, unit_env
    ):
        service = await unit_env.get(CommentService)
        comment = await create(service)
        await service.moderate_comment(comment.id, CommentStatus.APPROVED, UserId("m1"))

        updated = await service.update_comment(comment.id, "buy porn", UserId("u1"))

        assert updated.status == CommentStatus.PENDING
        assert updated.flagged_words == ["porn"]

    @pytest.mark.asyncio
    async def test_flagged_edit_keeps_status_when_approval_off(self, unit_env):
        await configure(unit_env, require_approval=False)
        service = await unit_env.get(CommentService)
        comment = await create(service)

        updated = await service.update_comment(comment.id, "buy porn", UserId("u1"))

        assert updated.status == CommentStatus.APPROVED
        assert updated.flagged_words == ["porn"]


class TestDeleteComment:
    """Tests for soft and hard deletion."""

    @pytest.mark.asyncio
    async def test_soft_delete_marks_comment(self, unit_env):
        service = await unit_env.get(CommentService)
        repo = await unit_env.get(CommentRepository)
        comment = await create(service)

        deleted = await service.delete_comment(comment.id, UserId("u1"))

        assert deleted.is_deleted is True
        assert deleted.deleted_by == "u1"
        assert deleted.deleted_at is not None
        assert (await repo.find_by_id(comment.id)).is_deleted is True

    @pytest.mark.asyncio
    async def test_soft_delete_decrements_parent_once(self, unit_env):
        """Deleting the same reply twice only counts once."""
        service = await unit_env.get(CommentService)
        repo = await unit_env.get(CommentRepository)
        root = await create(service)
        reply = await create(service, parent_id=root.id)

        await service.delete_comment(reply.id, UserId("u1"))
        again = await service.delete_comment(reply.id, UserId("u1"))

        assert again.is_deleted is True
        assert (await repo.find_by_id(root.id)).reply_count == 0

    @pytest.mark.asyncio
    async def test_soft_delete_root_leaves_other_comments_alone(self, unit_env):
        service = await unit_env.get(CommentService)
        repo = await unit_env.get(CommentRepository)
        root = await create(service)
        await create(service, parent_id=root.id)
        sibling = await create(service, content="sibling")

        await service.delete_comment(root.id, UserId("u1"))

        assert (await repo.find_by_id(root.id)).reply_count == 1
        assert (await repo.find_by_id(sibling.id)) == sibling

    @pytest.mark.asyncio
    async def test_other_user_cannot_delete(self, unit_env):
        service = await unit_env.get(CommentService)
        comment = await create(service)

        with pytest.raises(NotAuthorizedError):
            await service.delete_comment(comment.id, UserId("u2"))

    @pytest.mark.asyncio
    async def test_admin_can_delete(self, unit_env):
        service = await unit_env.get(CommentService)
        comment = await create(service)

        deleted = await service.delete_comment(comment.id, UserId("mod"), is_admin=True)

        assert deleted.deleted_by == "mod"

    @pytest.mark.asyncio
    async def test_hard_delete_removes_record(self, unit_env):
        service = await unit_env.get(CommentService)
        repo = await unit_env.get(CommentRepository)
        root = await create(service)
        reply = await create(service, parent_id=root.id)

        await service.hard_delete_comment(reply.id)

        assert await repo.find_by_id(reply.id) is None
        assert (await repo.find_by_id(root.id)).reply_count == 0

    @pytest.mark.asyncio
    async def test_hard_delete_after_soft_delete_does_not_double_count(
        self, unit_env
    ):
        service = await unit_env.get(CommentService)
        repo = await unit_env.get(CommentRepository)
        root = await create(service)
        first = await create(service, parent_id=root.id)
        await create(service, parent_id=root.id)

        await service.delete_comment(first.id, UserId("u1"))
        await service.hard_delete_comment(first.id)

        assert (await repo.find_by_id(root.id)).reply_count == 1

    @pytest.mark.asyncio
    async def test_hard_delete_missing_comment(self, unit_env):
        service = await unit_env.get(CommentService)

        with pytest.raises(NotFoundError):
            await service.hard_delete_comment(CommentId(uuid4()))


class TestModerateComment:
    """Tests for moderate_comment, bulk_moderate and pin_comment."""

    @pytest.mark.asyncio
    async def test_create_then_approve(self, unit_env):
        """Pending comment on shop/product/p1 approved by m1."""
        # Arrange
        service = await unit_env.get(CommentService)
        comment = await create(service, content="Great product!")
        assert comment.status == CommentStatus.PENDING

        # Act
        moderated = await service.moderate_comment(
            comment.id, CommentStatus.APPROVED, UserId("m1")
        )

        # Assert
        assert moderated.status == CommentStatus.APPROVED
        assert moderated.moderated_by == "m1"
        assert moderated.moderated_at is not None
        assert moderated.rejection_reason is None

    @pytest.mark.asyncio
    async def test_reject_keeps_reason(self, unit_env):
        service = await unit_env.get(CommentService)
        comment = await create(service)

        moderated = await service.moderate_comment(
            comment.id, CommentStatus.REJECTED, UserId("m1"), "Off topic"
        )

        assert moderated.status == CommentStatus.REJECTED
        assert moderated.rejection_reason == "Off topic"

    @pytest.mark.asyncio
    async def test_reason_dropped_unless_rejected(self, unit_env):
        service = await unit_env.get(CommentService)
        comment = await create(service)

        moderated = await service.moderate_comment(
            comment.id, CommentStatus.SPAM, UserId("m1"), "ignored"
        )

        assert moderated.status == CommentStatus.SPAM
        assert moderated.rejection_reason is None

    @pytest.mark.asyncio
    async def test_string_status_is_accepted(self, unit_env):
        service = await unit_env.get(CommentService)
        comment = await create(service)

        moderated = await service.moderate_comment(comment.id, "approved", UserId("m1"))

        assert moderated.status == CommentStatus.APPROVED

    @pytest.mark.asyncio
    @pytest.mark.parametrize("status", [CommentStatus.PENDING, "bogus"])
    async def test_invalid_status_is_rejected(self, unit_env, status):
        service = await unit_env.get(CommentService)
        comment = await create(service)

        with pytest.raises(ValidationError):
            await service.moderate_comment(comment.id, status, UserId("m1"))

    @pytest.mark.asyncio
    async def test_moderate_missing_comment(self, unit_env):
        service = await unit_env.get(CommentService)

        with pytest.raises(NotFoundError):
            await service.moderate_comment(
                CommentId(uuid4()), CommentStatus.APPROVED, UserId("m1")
            )

    @pytest.mark.asyncio
    async def test_bulk_moderate_reports_failures(self, unit_env):
        service = await unit_env.get(CommentService)
        a = await create(service, content="a")
        b = await create(service, content="b")
        missing = CommentId(uuid4())

        succeeded, failed = await service.bulk_moderate(
            [a.id, missing, b.id], CommentStatus.APPROVED, UserId("m1")
        )

        assert succeeded == [a.id, b.id]
        assert failed == [missing]

    @pytest.mark.asyncio
    async def test_bulk_moderate_validates_status_first(self, unit_env):
        service = await unit_env.get(CommentService)
        comment = await create(service)

        with pytest.raises(ValidationError):
            await service.bulk_moderate(
                [comment.id], CommentStatus.PENDING, UserId("m1")
            )

    @pytest.mark.asyncio
    async def test_pin_and_unpin(self, unit_env):
        service = await unit_env.get(CommentService)
        comment = await create(service)

        pinned = await service.pin_comment(comment.id, True, UserId("m1"))
        unpinned = await service.pin_comment(comment.id, False, UserId("m1"))

        assert pinned.is_pinned is True
        assert pinned.pinned_by == "m1"
        assert pinned.pinned_at is not None
        assert unpinned.is_pinned is False
        assert unpinned.pinned_by is None


class TestQueries:
    """Tests for list, replies, pending, stats and search."""

    @pytest.mark.asyncio
    async def test_non_admin_sees_only_approved(self, unit_env):
        service = await unit_env.get(CommentService)
        visible = await create(service, content="visible")
        await create(service, content="hidden")
        await service.moderate_comment(visible.id, CommentStatus.APPROVED, UserId("m1"))
        query = CommentFilter(
            tenant_id=TENANT, resource_type=RESOURCE_TYPE, resource_id=RESOURCE_ID
        )

        public = await service.list_comments(query)
        admin = await service.list_comments(query, caller_is_admin=True)

        assert [c.id for c in public.items] == [visible.id]
        assert admin.total == 2

    @pytest.mark.asyncio
    async def test_list_excludes_replies_and_deleted(self, unit_env):
        await configure(unit_env, require_approval=False)
        service = await unit_env.get(CommentService)
        root = await create(service, content="root")
        await create(service, content="reply", parent_id=root.id)
        gone = await create(service, content="gone")
        await service.delete_comment(gone.id, UserId("u1"))

        page = await service.list_comments(
            CommentFilter(tenant_id=TENANT, resource_id=RESOURCE_ID)
        )

        assert [c.id for c in page.items] == [root.id]

    @pytest.mark.asyncio
    async def test_pinned_first_then_sort_field(self, unit_env):
        await configure(unit_env, require_approval=False)
        service = await unit_env.get(CommentService)
        repo = await unit_env.get(CommentRepository)
        low = await create(service, content="low")
        high = await create(service, content="high")
        pinned = await create(service, content="pinned")
        await repo.set_reaction_counts(high.id, 5, 0, {"like": 5})
        await repo.set_reaction_counts(low.id, 1, 0, {"like": 1})
        await service.pin_comment(pinned.id, True, UserId("m1"))

        page = await service.list_comments(
            CommentFilter(tenant_id=TENANT, sort_by=SortField.LIKE_COUNT)
        )

        assert [c.id for c in page.items] == [pinned.id, high.id, low.id]

    @pytest.mark.asyncio
    async def test_pagination(self, unit_env):
        await configure(unit_env, require_approval=False)
        service = await unit_env.get(CommentService)
        for i in range(5):
            await create(service, content=f"comment {i}")

        page = await service.list_comments(
            CommentFilter(tenant_id=TENANT, page=2, page_size=2)
        )

        assert page.total == 5
        assert page.page == 2
        assert len(page.items) == 2
        assert page.total_pages == 3

    def test_out_of_range_page_size_falls_back_to_default(self):
        query = CommentFilter(tenant_id=TENANT, page=0, page_size=1000)

        assert query.page == 1
        assert query.page_size == 20

    @pytest.mark.asyncio
    async def test_replies_are_approved_oldest_first(self, unit_env):
        service = await unit_env.get(CommentService)
        root = await create(service)
        first = await create(service, content="first", parent_id=root.id)
        second = await create(service, content="second", parent_id=root.id)
        await create(service, content="unmoderated", parent_id=root.id)
        for reply in (second, first):
            await service.moderate_comment(reply.id, CommentStatus.APPROVED, UserId("m1"))

        page = await service.get_replies(root.id)

        assert [c.id for c in page.items] == [first.id, second.id]
        assert page.total == 2

    @pytest.mark.asyncio
    async def test_pending_queue(self, unit_env):
        service = await unit_env.get(CommentService)
        first = await create(service, content="first")
        second = await create(service, content="second")
        await create(service, content="elsewhere", tenant_id=TenantId("other"))

        page = await service.get_pending(TENANT)

        assert [c.id for c in page.items] == [first.id, second.id]

    @pytest.mark.asyncio
    async def test_stats_count_by_status(self, unit_env):
        service = await unit_env.get(CommentService)
        a = await create(service, content="a")
        b = await create(service, content="b")
        c = await create(service, content="c")
        await create(service, content="d")
        gone = await create(service, content="e")
        await service.moderate_comment(a.id, CommentStatus.APPROVED, UserId("m1"))
        await service.moderate_comment(b.id, CommentStatus.REJECTED, UserId("m1"))
        await service.moderate_comment(c.id, CommentStatus.SPAM, UserId("m1"))
        await service.delete_comment(gone.id, UserId("u1"))

        stats = await service.get_stats(TENANT, RESOURCE_TYPE, RESOURCE_ID)

        assert stats.total == 4
        assert stats.approved == 1
        assert stats.pending == 1
        assert stats.rejected == 1
        assert stats.spam == 1

    @pytest.mark.asyncio
    async def test_search_finds_approved_comments(self, unit_env):
        await configure(unit_env, require_approval=False)
        service = await unit_env.get(CommentService)
        match = await create(service, content="The battery lasts all day")
        await create(service, content="Shipping was slow")

        page = await service.search_comments(TENANT, "battery")

        assert [c.id for c in page.items] == [match.id]

    @pytest.mark.asyncio
    async def test_blank_search_is_rejected(self, unit_env):
        service = await unit_env.get(CommentService)

        with pytest.raises(ValidationError):
            await service.search_comments(TENANT, "   ")


class FailingCounterRepository(InMemoryCommentRepository):
    """Comment store whose counter updates always fail."""

    async def increment_reply_count(self, comment_id, delta):
        raise RuntimeError("counter store down")

    async def increment_report_count(self, comment_id):
        raise RuntimeError("counter store down")


class TestBestEffortSideEffects:
    """Counter and notification failures never fail the primary write."""

    def _service(self, repo, notifier) -> CommentService:
        return CommentService(
            comment_repository=repo,
            settings_service=SettingsService(InMemorySettingsRepository()),
            bad_word_detector=BadWordDetector(["spam"]),
            notification_dispatcher=NotificationDispatcher(
                notifier, moderator_recipients=["admin"]
            ),
        )

    @pytest.mark.asyncio
    async def test_reply_survives_counter_failure(self):
        repo = FailingCounterRepository()
        service = self._service(repo, MockNotifier())
        root = await create(service)

        reply = await create(service, parent_id=root.id)

        assert await repo.find_by_id(reply.id) is not None
        assert (await repo.find_by_id(root.id)).reply_count == 0

    @pytest.mark.asyncio
    async def test_report_counter_failure_is_swallowed(self):
        repo = FailingCounterRepository()
        service = self._service(repo, MockNotifier())
        comment = await create(service)

        await service.increment_report_count(comment.id)

        assert (await repo.find_by_id(comment.id)).report_count == 0


class TestNotifications:
    """Tests for events emitted by the engine."""

    @pytest.mark.asyncio
    async def test_pending_comment_notifies_moderators(self, unit_env):
        # Arrange
        service = await unit_env.get(CommentService)
        dispatcher = await unit_env.get(NotificationDispatcher)
        notifier = await unit_env.get(MockNotifier)

        # Act
        comment = await create(service)
        await dispatcher.drain()

        # Assert
        assert len(notifier.sent) == 1
        sent = notifier.sent[0]
        assert sent.event == NotificationEvent.PENDING
        assert sent.recipients == ["admin"]
        assert sent.data["comment_id"] == str(comment.id)
        assert sent.data["status"] == "pending"

    @pytest.mark.asyncio
    async def test_moderation_notifies_author(self, unit_env):
        service = await unit_env.get(CommentService)
        dispatcher = await unit_env.get(NotificationDispatcher)
        notifier = await unit_env.get(MockNotifier)
        comment = await create(service)

        await service.moderate_comment(
            comment.id, CommentStatus.REJECTED, UserId("m1"), "Off topic"
        )
        await dispatcher.drain()

        sent = notifier.sent[-1]
        assert sent.event == NotificationEvent.MODERATED
        assert sent.recipients == ["u1"]
        assert "Off topic" in sent.body
        assert sent.data["moderated_by"] == "m1"

    @pytest.mark.asyncio
    async def test_no_notification_when_disabled(self, unit_env):
        await configure(unit_env, notify_on_new_comment=False)
        service = await unit_env.get(CommentService)
        dispatcher = await unit_env.get(NotificationDispatcher)
        notifier = await unit_env.get(MockNotifier)

        await create(service)
        await dispatcher.drain()

        assert notifier.sent == []
