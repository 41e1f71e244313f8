"""Notification payload sent to the notification service."""

from typing import Any

from pydantic import Field

from remark.domain.model.common import DomainModel
from remark.domain.value import NotificationEvent


class Notification(DomainModel):
    """Structured event for the external notifier."""

    event: NotificationEvent
    recipients: list[str]
    title: str
    body: str
    data: dict[str, Any] = Field(default_factory=dict)
