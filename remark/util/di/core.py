"""Core DI providers (non-mockable)."""

from dishka import Scope, provide

from remark.config import ModerationSettings, NotifierSettings, Settings
from remark.util.di.base import ProviderBase
from remark.util.ratelimit import RateLimiter


class ProdConfigProvider(ProviderBase):
    """Settings loaded from the environment and .env file."""

    @provide(scope=Scope.APP)
    def provide_settings(self) -> Settings:
        """Provide application settings from environment."""
        return Settings()

    @provide(scope=Scope.APP)
    def provide_moderation_settings(self, settings: Settings) -> ModerationSettings:
        return settings.moderation

    @provide(scope=Scope.APP)
    def provide_notifier_settings(self, settings: Settings) -> NotifierSettings:
        return settings.notifier

    @provide(scope=Scope.APP)
    def provide_rate_limiter(self, moderation: ModerationSettings) -> RateLimiter:
        """Provide the comment creation rate limiter."""
        return RateLimiter(limit=moderation.rate_limit_per_minute, window_seconds=60)
