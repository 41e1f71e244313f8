"""Base classes for dependency injection providers."""

from typing import ClassVar, Literal

from dishka import Provider

# Infrastructure pieces tests can swap for in-memory or recording doubles
Component = Literal["auth", "notifier", "persistence"]


class ProviderBase(Provider):
    """Base for all DI providers.

    Attributes:
        __mock_component__: Component a provider family stands for, None for
            providers that are never mocked (config, domain, use cases)
        __is_mock__: Whether the provider is the test double of its family
    """

    __mock_component__: ClassVar[Component | None] = None
    __is_mock__: ClassVar[bool] = False
