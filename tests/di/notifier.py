"""Mock notifier providers for testing."""

from dishka import Scope, provide

from remark.adapter.notifier import MockNotifier
from remark.domain.service import Notifier
from remark.util.di.infrastructure.notifier import NotifierProvider


class MockNotifierProvider(NotifierProvider):
    """Mock notifier provider recording every notification."""

    __is_mock__ = True

    @provide(scope=Scope.APP)
    def get_mock_notifier(self) -> MockNotifier:
        """Provide the recording notifier itself, for assertions."""
        return MockNotifier()

    @provide(scope=Scope.APP)
    def get_notifier(self, notifier: MockNotifier) -> Notifier:
        """Provide the recording notifier as the delivery channel."""
        return notifier
