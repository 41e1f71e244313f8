"""Notification service client.

Posts comment events to the notification service's REST API.
"""

import httpx
import logfire

from remark.adapter.error import NotifierError
from remark.domain.model import Notification
from remark.domain.service.notification_service import Notifier

DEFAULT_CHANNELS = ["push", "email"]


class HttpNotifierClient(Notifier):
    """Notifier that POSTs to ``/api/v1/notifications``."""

    def __init__(
        self,
        base_url: str,
        timeout: float = 10.0,
        client_id: str | None = None,
        client_secret: str | None = None,
    ) -> None:
        """Initialize notifier client.

        Args:
            base_url: Notification service base URL
            timeout: Per-request HTTP timeout in seconds
            client_id: Service client ID (optional)
            client_secret: Service client secret (optional)
        """
        self.base_url = base_url.rstrip("/")
        self.timeout = timeout
        self.client_id = client_id
        self.client_secret = client_secret

    def _payload(self, notification: Notification) -> dict:
        return {
            "type": notification.event.value,
            "recipients": notification.recipients,
            "title": notification.title,
            "message": notification.body,
            "data": notification.data,
            "channels": DEFAULT_CHANNELS,
        }

    async def send(self, notification: Notification) -> None:
        """Deliver a notification.

        Raises:
            NotifierError: On transport errors or a 4xx/5xx answer
        """
        headers = {"Content-Type": "application/json"}
        if self.client_id:
            headers["X-Client-ID"] = self.client_id
        if self.client_secret:
            headers["X-Client-Secret"] = self.client_secret

        try:
            async with httpx.AsyncClient(timeout=self.timeout) as client:
                response = await client.post(
                    f"{self.base_url}/api/v1/notifications",
                    json=self._payload(notification),
                    headers=headers,
                )
        except httpx.HTTPError as e:
            logfire.error("Notifier HTTP error", error=str(e))
            raise NotifierError(f"Failed to send notification: {e}")

        if response.status_code >= 400:
            logfire.error(
                "Notifier rejected notification",
                status_code=response.status_code,
                error=response.text,
            )
            raise NotifierError(
                f"Notification service returned status {response.status_code}"
            )


class NoopNotifier(Notifier):
    """Drops every notification (notifier disabled)."""

    async def send(self, notification: Notification) -> None:
        """Do nothing."""
        return None


class MockNotifier(Notifier):
    """Records notifications for assertions in tests."""

    def __init__(self) -> None:
        self.sent: list[Notification] = []

    async def send(self, notification: Notification) -> None:
        """Record the notification."""
        self.sent.append(notification)
