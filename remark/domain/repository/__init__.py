"""Repository interfaces for the comment service domain.

Repository interfaces are defined in the domain layer (dependency inversion).
Implementations live in the persistence layer.
"""

from remark.domain.repository.comment import CommentRepository
from remark.domain.repository.reaction import ReactionRepository
from remark.domain.repository.report import ReportRepository
from remark.domain.repository.settings import SettingsRepository

__all__ = [
    "CommentRepository",
    "ReactionRepository",
    "ReportRepository",
    "SettingsRepository",
]
