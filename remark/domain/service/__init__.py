"""Domain services."""

from .auth_service import AuthService, TokenVerifier
from .bad_words import BadWordDetector
from .base import Service
from .comment_service import CommentService
from .notification_service import NotificationDispatcher, Notifier
from .reaction_service import ReactionService
from .report_service import ReportService
from .settings_service import SettingsService

__all__ = [
    "AuthService",
    "BadWordDetector",
    "CommentService",
    "NotificationDispatcher",
    "Notifier",
    "ReactionService",
    "ReportService",
    "Service",
    "SettingsService",
    "TokenVerifier",
]
