"""Domain layer DI providers."""

from dishka import Scope, provide

from remark.config import ModerationSettings, NotifierSettings
from remark.domain.repository import (
    CommentRepository,
    ReactionRepository,
    ReportRepository,
    SettingsRepository,
)
from remark.domain.service import (
    AuthService,
    BadWordDetector,
    CommentService,
    NotificationDispatcher,
    Notifier,
    ReactionService,
    ReportService,
    SettingsService,
    TokenVerifier,
)
from remark.util.di.base import ProviderBase


class ProdDomainProvider(ProviderBase):
    """Production domain services provider - concrete, no mocks needed.

    Domain services are REQUEST-scoped to align with repository/session
    lifecycle. The bad-word matcher and the notification dispatcher live for
    the whole app: the first is compiled once, the second owns background
    delivery tasks that outlive a request.
    """

    scope = Scope.REQUEST

    @provide(scope=Scope.APP)
    def get_bad_word_detector(self, moderation: ModerationSettings) -> BadWordDetector:
        """Provide the global bad-word detector."""
        return BadWordDetector(
            moderation.bad_words, enabled=moderation.bad_words_enabled
        )

    @provide(scope=Scope.APP)
    def get_notification_dispatcher(
        self, notifier: Notifier, notifier_settings: NotifierSettings
    ) -> NotificationDispatcher:
        """Provide the background notification dispatcher."""
        return NotificationDispatcher(
            notifier=notifier,
            moderator_recipients=notifier_settings.moderator_recipients,
            timeout_seconds=notifier_settings.timeout_seconds,
        )

    @provide
    def get_settings_service(
        self, settings_repository: SettingsRepository
    ) -> SettingsService:
        """Provide settings resolver."""
        return SettingsService(settings_repository=settings_repository)

    @provide
    def get_comment_service(
        self,
        comment_repository: CommentRepository,
        settings_service: SettingsService,
        bad_word_detector: BadWordDetector,
        notification_dispatcher: NotificationDispatcher,
    ) -> CommentService:
        """Provide comment engine."""
        return CommentService(
            comment_repository=comment_repository,
            settings_service=settings_service,
            bad_word_detector=bad_word_detector,
            notification_dispatcher=notification_dispatcher,
        )

    @provide
    def get_reaction_service(
        self,
        reaction_repository: ReactionRepository,
        comment_repository: CommentRepository,
        settings_service: SettingsService,
    ) -> ReactionService:
        """Provide reaction service."""
        return ReactionService(
            reaction_repository=reaction_repository,
            comment_repository=comment_repository,
            settings_service=settings_service,
        )

    @provide
    def get_report_service(
        self, report_repository: ReportRepository, comment_service: CommentService
    ) -> ReportService:
        """Provide report service."""
        return ReportService(
            report_repository=report_repository, comment_service=comment_service
        )

    @provide
    def get_auth_service(self, token_verifier: TokenVerifier) -> AuthService:
        """Provide authentication service."""
        return AuthService(token_verifier=token_verifier)
