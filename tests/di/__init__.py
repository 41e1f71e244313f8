"""Mock providers for testing."""

from .auth import MockAuthProvider
from .notifier import MockNotifierProvider
from .persistence import MockPersistenceProvider
from .container import build_test_container

__all__ = [
    "MockAuthProvider",
    "MockNotifierProvider",
    "MockPersistenceProvider",
    "build_test_container",
]
