"""Notification service adapter."""

from .client import HttpNotifierClient, MockNotifier, NoopNotifier

__all__ = ["HttpNotifierClient", "MockNotifier", "NoopNotifier"]
