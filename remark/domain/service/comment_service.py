"""Comment domain service.

The comment lifecycle and moderation engine: creation with threading and
settings checks, edits, soft/hard deletes, moderation, pinning and the read
queries the API exposes.

Counter updates on other comments and notifications are best effort: they are
attempted after the primary write, logged on failure and never raised.
"""

from datetime import datetime
from typing import Any, Optional
from uuid import uuid4

import logfire

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
from remark.domain.model import (
    Comment,
    CommentFilter,
    CommentSettings,
    CommentStats,
    Page,
)
from remark.domain.model.query import normalize_page, normalize_page_size
from remark.domain.repository import CommentRepository
from remark.domain.value import (
    MODERATION_OUTCOMES,
    Attachment,
    CommentId,
    CommentStatus,
    EditRecord,
    TenantId,
    UserId,
)

from .bad_words import BadWordDetector
from .base import Service
from .notification_service import NotificationDispatcher
from .settings_service import SettingsService

ANONYMOUS_NAME = "Anonymous"


class CommentService(Service):
    """Domain service for comment operations."""

    def __init__(
        self,
        comment_repository: CommentRepository,
        settings_service: SettingsService,
        bad_word_detector: BadWordDetector,
        notification_dispatcher: NotificationDispatcher,
    ) -> None:
        """Initialize comment service.

        Args:
            comment_repository: Comment repository
            settings_service: Settings resolver
            bad_word_detector: Bad-word detector
            notification_dispatcher: Background notification dispatcher
        """
        self.comment_repository = comment_repository
        self.settings_service = settings_service
        self.bad_word_detector = bad_word_detector
        self.notification_dispatcher = notification_dispatcher

    def _scan(self, content: str, settings: CommentSettings) -> list[str]:
        if not settings.bad_words_filter:
            return []
        return self.bad_word_detector.scan(content, settings.custom_bad_words)

    @staticmethod
    def _check_length(content: str, settings: CommentSettings) -> None:
        if len(content) > settings.max_comment_length:
            raise ContentTooLongError(len(content), settings.max_comment_length)

    async def _require(self, comment_id: CommentId) -> Comment:
        comment = await self.comment_repository.find_by_id(comment_id)
        if comment is None:
            logfire.warn("Comment not found", comment_id=str(comment_id))
            raise NotFoundError("comment", str(comment_id))
        return comment

    async def _adjust_reply_count(self, parent_id: CommentId, delta: int) -> None:
        try:
            await self.comment_repository.increment_reply_count(parent_id, delta)
        except Exception as e:
            logfire.warn(
                "Failed to update parent reply count",
                parent_id=str(parent_id),
                delta=delta,
                error=str(e),
            )

    async def create_comment(
        self,
        tenant_id: TenantId,
        resource_type: str,
        resource_id: str,
        author_id: UserId,
        author_name: str,
        content: str,
        parent_id: Optional[CommentId] = None,
        author_email: Optional[str] = None,
        author_avatar: Optional[str] = None,
        is_anonymous: bool = False,
        attachments: Optional[list[Attachment]] = None,
        metadata: Optional[dict[str, Any]] = None,
        ip_address: Optional[str] = None,
        user_agent: Optional[str] = None,
    ) -> Comment:
        """Create a top-level comment or a reply.

        Args:
            tenant_id: Tenant ID
            resource_type: Type of the commented resource
            resource_id: ID of the commented resource
            author_id: Author user ID
            author_name: Display name (ignored for anonymous comments)
            content: Comment text
            parent_id: Parent comment ID for replies (None for top-level)
            author_email: Author email (dropped for anonymous comments)
            author_avatar: Author avatar URL
            is_anonymous: Post without revealing the author
            attachments: Attached files
            metadata: Free-form client data
            ip_address: Request origin, stored for moderation
            user_agent: Request user agent, stored for moderation

        Returns:
            Created comment

        Raises:
            CommentsDisabledError: If comments are off for the resource type
            AnonymousNotAllowedError: If anonymous posting is off
            ContentTooLongError: If content exceeds the maximum length
            NotFoundError: If the parent comment does not exist
            RepliesNotAllowedError: If replies are off
            MaxDepthExceededError: If the reply would nest too deep
            ValidationError: If the parent belongs to another resource
        """
        with logfire.span(
            "comment_service.create_comment",
            tenant_id=tenant_id,
            resource_type=resource_type,
            resource_id=resource_id,
            author_id=author_id,
            parent_id=str(parent_id) if parent_id else None,
        ):
            settings = await self.settings_service.get_or_create(
                tenant_id, resource_type
            )
            if not settings.comments_enabled:
                raise CommentsDisabledError(resource_type)
            if is_anonymous and not settings.allow_anonymous:
                raise AnonymousNotAllowedError()
            self._check_length(content, settings)

            parent: Optional[Comment] = None
            depth = 0
            root_id: Optional[CommentId] = None
            if parent_id:
                parent = await self.comment_repository.find_by_id(parent_id)
                if parent is None:
                    logfire.warn("Parent comment not found", parent_id=str(parent_id))
                    raise NotFoundError("parent comment", str(parent_id))
                if not settings.allow_replies:
                    raise RepliesNotAllowedError()
                if (
                    parent.tenant_id != tenant_id
                    or parent.resource_type != resource_type
                    or parent.resource_id != resource_id
                ):
                    logfire.warn(
                        "Parent comment belongs to another resource",
                        parent_id=str(parent_id),
                        resource_id=resource_id,
                    )
                    raise ValidationError(
                        "Parent comment does not belong to this resource"
                    )
                depth = parent.depth + 1
                if depth > settings.max_reply_depth:
                    raise MaxDepthExceededError(settings.max_reply_depth)
                root_id = parent.root_id or parent.id

            flagged = self._scan(content, settings)
            if not settings.require_approval and not flagged:
                status = CommentStatus.APPROVED
            else:
                status = CommentStatus.PENDING

            if is_anonymous:
                author_name = ANONYMOUS_NAME
                author_email = None

            now = datetime.now()
            comment = Comment(
                id=CommentId(uuid4()),
                tenant_id=tenant_id,
                resource_type=resource_type,
                resource_id=resource_id,
                parent_id=parent_id,
                root_id=root_id,
                depth=depth,
                author_id=author_id,
                author_name=author_name,
                author_email=author_email,
                author_avatar=author_avatar,
                is_anonymous=is_anonymous,
                content=content,
                attachments=attachments or [],
                status=status,
                flagged_words=flagged,
                ip_address=ip_address,
                user_agent=user_agent,
                metadata=metadata or {},
                created_at=now,
                updated_at=now,
            )

            saved = await self.comment_repository.create(comment)
            logfire.info(
                "Comment created",
                comment_id=str(saved.id),
                tenant_id=tenant_id,
                status=saved.status.value,
                depth=depth,
                flagged_words=len(flagged),
            )

            if parent_id:
                await self._adjust_reply_count(parent_id, +1)

            self.notification_dispatcher.comment_created(saved, settings, parent)
            return saved

    async def get_comment_by_id(self, comment_id: CommentId) -> Comment:
        """Get a comment by ID.

        Raises:
            NotFoundError: If the comment does not exist
        """
        with logfire.span(
            "comment_service.get_comment_by_id", comment_id=str(comment_id)
        ):
            return await self._require(comment_id)

    async def update_comment(
        self,
        comment_id: CommentId,
        content: str,
        caller_id: UserId,
        is_admin: bool = False,
        attachments: Optional[list[Attachment]] = None,
    ) -> Comment:
        """Edit a comment's content.

        The previous content is kept in the edit history. New bad words send
        the comment back to moderation when the tenant requires approval.

        Args:
            comment_id: Comment ID
            content: New content
            caller_id: Editing user
            is_admin: Whether the caller may edit any comment
            attachments: Replacement attachments (None keeps the current ones)

        Returns:
            Updated comment

        Raises:
            NotFoundError: If the comment does not exist
            NotAuthorizedError: If the caller is neither author nor admin
            ContentDeletedException: If the comment is soft-deleted
            ContentTooLongError: If content exceeds the maximum length
        """
        with logfire.span(
            "comment_service.update_comment",
            comment_id=str(comment_id),
            caller_id=caller_id,
            content_length=len(content),
        ):
            comment = await self._require(comment_id)
            if comment.author_id != caller_id and not is_admin:
                logfire.warn(
                    "Unauthorized comment edit",
                    comment_id=str(comment_id),
                    caller_id=caller_id,
                )
                raise NotAuthorizedError("comment", str(comment_id), caller_id)
            if comment.is_deleted:
                raise ContentDeletedException("comment", str(comment_id))

            settings = await self.settings_service.get_or_create(
                comment.tenant_id, comment.resource_type
            )
            self._check_length(content, settings)

            now = datetime.now()
            history = comment.edit_history + [
                EditRecord(content=comment.content, edited_at=now, edited_by=caller_id)
            ]
            flagged = self._scan(content, settings)
            status = comment.status
            if flagged and settings.require_approval:
                status = CommentStatus.PENDING

            changes: dict[str, Any] = {
                "content": content,
                "edit_history": history,
                "flagged_words": flagged,
                "status": status,
                "is_edited": True,
                "updated_at": now,
            }
            if attachments is not None:
                changes["attachments"] = attachments

            updated = await self.comment_repository.update(
                comment.model_copy(update=changes)
            )
            logfire.info(
                "Comment updated",
                comment_id=str(comment_id),
                status=updated.status.value,
                edits=len(history),
            )
            return updated

    async def delete_comment(
        self, comment_id: CommentId, caller_id: UserId, is_admin: bool = False
    ) -> Comment:
        """Soft-delete a comment.

        The record stays in place so the thread keeps its shape. Deleting a
        comment twice is a no-op.

        Raises:
            NotFoundError: If the comment does not exist
            NotAuthorizedError: If the caller is neither author nor admin
        """
        with logfire.span(
            "comment_service.delete_comment",
            comment_id=str(comment_id),
            caller_id=caller_id,
        ):
            comment = await self._require(comment_id)
            if comment.author_id != caller_id and not is_admin:
                logfire.warn(
                    "Unauthorized comment delete",
                    comment_id=str(comment_id),
                    caller_id=caller_id,
                )
                raise NotAuthorizedError("comment", str(comment_id), caller_id)
            if comment.is_deleted:
                return comment

            now = datetime.now()
            deleted = await self.comment_repository.update(
                comment.model_copy(
                    update={
                        "is_deleted": True,
                        "deleted_by": caller_id,
                        "deleted_at": now,
                        "updated_at": now,
                    }
                )
            )
            logfire.info("Comment soft-deleted", comment_id=str(comment_id))

            if comment.parent_id:
                await self._adjust_reply_count(comment.parent_id, -1)
            return deleted

    async def hard_delete_comment(self, comment_id: CommentId) -> None:
        """Remove a comment permanently (admin only).

        Raises:
            NotFoundError: If the comment does not exist
        """
        with logfire.span(
            "comment_service.hard_delete_comment", comment_id=str(comment_id)
        ):
            comment = await self._require(comment_id)
            await self.comment_repository.delete(comment_id)
            logfire.info("Comment hard-deleted", comment_id=str(comment_id))

            if comment.parent_id and not comment.is_deleted:
                await self._adjust_reply_count(comment.parent_id, -1)

    async def moderate_comment(
        self,
        comment_id: CommentId,
        status: CommentStatus,
        moderator_id: UserId,
        rejection_reason: Optional[str] = None,
    ) -> Comment:
        """Approve, reject or mark a comment as spam.

        Raises:
            ValidationError: If status is not a moderation outcome
            NotFoundError: If the comment does not exist
        """
        with logfire.span(
            "comment_service.moderate_comment",
            comment_id=str(comment_id),
            status=str(getattr(status, "value", status)),
            moderator_id=moderator_id,
        ):
            if status not in MODERATION_OUTCOMES:
                raise ValidationError(
                    f"Invalid moderation status: {getattr(status, 'value', status)}"
                )
            status = CommentStatus(status)

            comment = await self._require(comment_id)
            now = datetime.now()
            moderated = await self.comment_repository.update(
                comment.model_copy(
                    update={
                        "status": status,
                        "moderated_by": moderator_id,
                        "moderated_at": now,
                        "rejection_reason": rejection_reason
                        if status == CommentStatus.REJECTED
                        else None,
                        "updated_at": now,
                    }
                )
            )
            logfire.info(
                "Comment moderated",
                comment_id=str(comment_id),
                status=status.value,
                moderator_id=moderator_id,
            )

            self.notification_dispatcher.comment_moderated(moderated)
            return moderated

    async def bulk_moderate(
        self,
        comment_ids: list[CommentId],
        status: CommentStatus,
        moderator_id: UserId,
        rejection_reason: Optional[str] = None,
    ) -> tuple[list[CommentId], list[CommentId]]:
        """Moderate several comments; failures do not stop the batch.

        Returns:
            Tuple of (moderated IDs, failed IDs)

        Raises:
            ValidationError: If status is not a moderation outcome
        """
        if status not in MODERATION_OUTCOMES:
            raise ValidationError(
                f"Invalid moderation status: {getattr(status, 'value', status)}"
            )
        status = CommentStatus(status)

        with logfire.span(
            "comment_service.bulk_moderate",
            count=len(comment_ids),
            status=status.value,
        ):
            succeeded: list[CommentId] = []
            failed: list[CommentId] = []
            for comment_id in comment_ids:
                try:
                    await self.moderate_comment(
                        comment_id, status, moderator_id, rejection_reason
                    )
                    succeeded.append(comment_id)
                except NotFoundError:
                    failed.append(comment_id)

            logfire.info(
                "Bulk moderation finished",
                success_count=len(succeeded),
                failed_count=len(failed),
            )
            return succeeded, failed

    async def pin_comment(
        self, comment_id: CommentId, is_pinned: bool, caller_id: UserId
    ) -> Comment:
        """Pin or unpin a comment.

        Raises:
            NotFoundError: If the comment does not exist
        """
        with logfire.span(
            "comment_service.pin_comment",
            comment_id=str(comment_id),
            is_pinned=is_pinned,
        ):
            comment = await self._require(comment_id)
            now = datetime.now()
            pinned = await self.comment_repository.update(
                comment.model_copy(
                    update={
                        "is_pinned": is_pinned,
                        "pinned_by": caller_id if is_pinned else None,
                        "pinned_at": now if is_pinned else None,
                        "updated_at": now,
                    }
                )
            )
            logfire.info(
                "Comment pin toggled", comment_id=str(comment_id), is_pinned=is_pinned
            )
            return pinned

    async def list_comments(
        self, query: CommentFilter, caller_is_admin: bool = False
    ) -> Page[Comment]:
        """List comments on a resource.

        Non-admin callers that do not ask for a status only see approved
        comments.
        """
        if not caller_is_admin and query.status is None:
            query = query.model_copy(update={"status": CommentStatus.APPROVED})

        with logfire.span(
            "comment_service.list_comments",
            tenant_id=query.tenant_id,
            resource_type=query.resource_type,
            resource_id=query.resource_id,
            status=query.status.value if query.status else None,
            page=query.page,
        ):
            page = await self.comment_repository.find_page(query)
            logfire.info(
                "Comments listed", count=len(page.items), total=page.total
            )
            return page

    async def get_replies(
        self,
        parent_id: CommentId,
        page: Optional[int] = 1,
        page_size: Optional[int] = None,
    ) -> Page[Comment]:
        """Approved, non-deleted replies of a comment in reading order."""
        page, page_size = normalize_page(page), normalize_page_size(page_size)
        with logfire.span(
            "comment_service.get_replies", parent_id=str(parent_id), page=page
        ):
            items, total = await self.comment_repository.find_replies(
                parent_id, (page - 1) * page_size, page_size
            )
            return Page(items=items, total=total, page=page, page_size=page_size)

    async def get_pending(
        self,
        tenant_id: Optional[TenantId] = None,
        page: Optional[int] = 1,
        page_size: Optional[int] = None,
    ) -> Page[Comment]:
        """Moderation queue, oldest first."""
        page, page_size = normalize_page(page), normalize_page_size(page_size)
        with logfire.span(
            "comment_service.get_pending", tenant_id=tenant_id, page=page
        ):
            items, total = await self.comment_repository.find_pending(
                tenant_id, (page - 1) * page_size, page_size
            )
            return Page(items=items, total=total, page=page, page_size=page_size)

    async def get_stats(
        self, tenant_id: TenantId, resource_type: str, resource_id: str
    ) -> CommentStats:
        """Per-status counts for a resource."""
        with logfire.span(
            "comment_service.get_stats",
            tenant_id=tenant_id,
            resource_type=resource_type,
            resource_id=resource_id,
        ):
            return await self.comment_repository.count_by_status(
                tenant_id, resource_type, resource_id
            )

    async def search_comments(
        self,
        tenant_id: TenantId,
        query: str,
        page: Optional[int] = 1,
        page_size: Optional[int] = None,
    ) -> Page[Comment]:
        """Full-text search over approved comments of a tenant.

        Raises:
            ValidationError: If the query is blank
        """
        query = query.strip()
        if not query:
            raise ValidationError("Search query is required")

        page, page_size = normalize_page(page), normalize_page_size(page_size)
        with logfire.span(
            "comment_service.search_comments", tenant_id=tenant_id, page=page
        ):
            items, total = await self.comment_repository.search(
                tenant_id, query, (page - 1) * page_size, page_size
            )
            logfire.info("Comments searched", tenant_id=tenant_id, total=total)
            return Page(items=items, total=total, page=page, page_size=page_size)

    async def increment_report_count(self, comment_id: CommentId) -> None:
        """Best-effort report counter bump."""
        try:
            await self.comment_repository.increment_report_count(comment_id)
        except Exception as e:
            logfire.warn(
                "Failed to increment report count",
                comment_id=str(comment_id),
                error=str(e),
            )
