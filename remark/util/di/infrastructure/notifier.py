"""Notification service providers."""

from dishka import Scope, provide

from remark.adapter.notifier import HttpNotifierClient, NoopNotifier
from remark.config import NotifierSettings
from remark.domain.service import Notifier
from remark.util.di.base import ProviderBase


class NotifierProvider(ProviderBase):
    """Notifier component base."""

    __mock_component__ = "notifier"


class ProdNotifierProvider(NotifierProvider):
    """Production notifier provider.

    Falls back to a no-op notifier when the integration is disabled.
    """

    __is_mock__ = False

    @provide(scope=Scope.APP)
    def get_notifier(self, notifier_settings: NotifierSettings) -> Notifier:
        """Provide notification delivery client."""
        if not notifier_settings.enabled:
            return NoopNotifier()

        return HttpNotifierClient(
            base_url=notifier_settings.service_url,
            timeout=notifier_settings.timeout_seconds,
            client_id=notifier_settings.client_id,
            client_secret=notifier_settings.client_secret,
        )
