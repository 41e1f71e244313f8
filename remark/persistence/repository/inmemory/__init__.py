"""In-memory repository implementations for testing."""

from .comment import InMemoryCommentRepository
from .reaction import InMemoryReactionRepository
from .report import InMemoryReportRepository
from .settings import InMemorySettingsRepository

__all__ = [
    "InMemoryCommentRepository",
    "InMemoryReactionRepository",
    "InMemoryReportRepository",
    "InMemorySettingsRepository",
]
