"""Test harness for unit and integration tests.

Unit tests run fully mocked. Integration tests that unmock persistence
expect a PostgreSQL reachable through DATABASE__URL with migrations applied.
"""

import pytest_asyncio

from remark.domain.service import NotificationDispatcher
from remark.util.di import Component
from tests.di import build_test_container


def create_env_fixture(unmock: set[Component] | None = None):
    """Factory for creating test environment fixtures.

    The fixture builds a fresh container per test and yields a
    request-scoped container for service access.

    Args:
        unmock: Components to use real implementations for

    Returns:
        Pytest fixture function that yields AsyncContainer

    Usage:
        unit_env = create_env_fixture()

        @pytest.mark.asyncio
        async def test_create_comment(unit_env):
            service = await unit_env.get(CommentService)
            ...
    """

    @pytest_asyncio.fixture
    async def _test_environment():
        container = build_test_container(unmock=unmock or set())

        async with container() as request_container:
            yield request_container

        # Let background notifications finish before the loop goes away
        dispatcher = await container.get(NotificationDispatcher)
        await dispatcher.drain()
        await container.close()

    return _test_environment
