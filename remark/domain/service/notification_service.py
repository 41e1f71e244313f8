"""Notification dispatch.

The comment engine never waits for delivery: notifications are handed to a
background asyncio task with its own timeout, and failures end up in the logs.
"""

import asyncio
from typing import Optional

import logfire

from remark.domain.model import Comment, CommentSettings, Notification
from remark.domain.value import CommentStatus, NotificationEvent

from .base import Service

BODY_PREVIEW_LENGTH = 100


class Notifier:
    """Delivery channel to the notification service."""

    async def send(self, notification: Notification) -> None:
        """Deliver a notification.

        Args:
            notification: Payload to deliver

        Raises:
            Exception: Any delivery failure; the dispatcher logs it
        """
        raise NotImplementedError


def preview(content: str, limit: int = BODY_PREVIEW_LENGTH) -> str:
    """Shorten content for a notification body."""
    if len(content) <= limit:
        return content
    return content[: limit - 3] + "..."


def comment_data(comment: Comment) -> dict[str, str]:
    """Fields every comment event carries."""
    return {
        "comment_id": str(comment.id),
        "tenant_id": comment.tenant_id,
        "resource_type": comment.resource_type,
        "resource_id": comment.resource_id,
        "author_id": comment.author_id,
        "status": comment.status.value,
    }


class NotificationDispatcher(Service):
    """Builds comment events and delivers them in the background."""

    def __init__(
        self,
        notifier: Notifier,
        moderator_recipients: list[str],
        timeout_seconds: float = 10.0,
    ) -> None:
        """Initialize dispatcher.

        Args:
            notifier: Delivery channel (may be a no-op)
            moderator_recipients: Who hears about new and pending comments
            timeout_seconds: Upper bound for a single delivery
        """
        self.notifier = notifier
        self.moderator_recipients = list(moderator_recipients)
        self.timeout_seconds = timeout_seconds
        self._tasks: set[asyncio.Task] = set()

    def dispatch(self, notification: Notification) -> Optional[asyncio.Task]:
        """Schedule delivery without waiting for it.

        Returns:
            The background task, None when there are no recipients
        """
        if not notification.recipients:
            return None

        task = asyncio.create_task(self._deliver(notification))
        self._tasks.add(task)
        task.add_done_callback(self._tasks.discard)
        return task

    async def _deliver(self, notification: Notification) -> None:
        try:
            await asyncio.wait_for(
                self.notifier.send(notification), timeout=self.timeout_seconds
            )
            logfire.info(
                "Notification sent",
                notification_event=notification.event.value,
                comment_id=notification.data.get("comment_id"),
            )
        except asyncio.TimeoutError:
            logfire.warn(
                "Notification timed out",
                notification_event=notification.event.value,
                comment_id=notification.data.get("comment_id"),
                timeout_seconds=self.timeout_seconds,
            )
        except Exception as e:
            logfire.warn(
                "Notification failed",
                notification_event=notification.event.value,
                comment_id=notification.data.get("comment_id"),
                error=str(e),
            )

    async def drain(self) -> None:
        """Wait for every in-flight delivery (shutdown and tests)."""
        while self._tasks:
            await asyncio.gather(*list(self._tasks), return_exceptions=True)

    @property
    def pending(self) -> int:
        """Number of deliveries still in flight."""
        return len(self._tasks)

    def comment_created(
        self,
        comment: Comment,
        settings: CommentSettings,
        parent: Optional[Comment] = None,
    ) -> Optional[asyncio.Task]:
        """Announce a new comment or reply.

        Pending comments go to moderators as ``comment.pending``; visible
        replies also reach the parent's author.
        """
        if comment.is_reply and not settings.notify_on_reply:
            return None
        if not comment.is_reply and not settings.notify_on_new_comment:
            return None

        recipients = list(self.moderator_recipients)
        if comment.status == CommentStatus.PENDING:
            event = NotificationEvent.PENDING
            title = "Comment Pending Approval"
        elif comment.is_reply:
            event = NotificationEvent.REPLY
            title = "New Reply to Your Comment"
            if parent and parent.author_id != comment.author_id:
                recipients.append(parent.author_id)
        else:
            event = NotificationEvent.NEW
            title = "New Comment"

        data = comment_data(comment)
        if comment.parent_id:
            data["parent_id"] = str(comment.parent_id)

        return self.dispatch(
            Notification(
                event=event,
                recipients=_unique(recipients),
                title=title,
                body=preview(comment.content),
                data=data,
            )
        )

    def comment_moderated(self, comment: Comment) -> Optional[asyncio.Task]:
        """Tell the author how their comment was moderated."""
        status = comment.status.value
        body = f"Your comment has been {status}."
        if comment.status == CommentStatus.REJECTED and comment.rejection_reason:
            body += f" Reason: {comment.rejection_reason}"

        data = comment_data(comment)
        if comment.moderated_by:
            data["moderated_by"] = comment.moderated_by

        return self.dispatch(
            Notification(
                event=NotificationEvent.MODERATED,
                recipients=[comment.author_id],
                title=f"Your Comment Was {status.capitalize()}",
                body=body,
                data=data,
            )
        )


def _unique(items: list[str]) -> list[str]:
    return list(dict.fromkeys(items))
