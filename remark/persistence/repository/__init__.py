"""PostgreSQL repository implementations."""

from remark.persistence.repository.comment import PostgresCommentRepository
from remark.persistence.repository.reaction import PostgresReactionRepository
from remark.persistence.repository.report import PostgresReportRepository
from remark.persistence.repository.settings import PostgresSettingsRepository

__all__ = [
    "PostgresCommentRepository",
    "PostgresReactionRepository",
    "PostgresReportRepository",
    "PostgresSettingsRepository",
]
