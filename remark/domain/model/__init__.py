"""Domain model entities for the comment service."""

from remark.domain.model.comment import Comment
from remark.domain.model.notification import Notification
from remark.domain.model.query import CommentFilter, CommentStats, Page
from remark.domain.model.reaction import Reaction
from remark.domain.model.report import Report
from remark.domain.model.settings import CommentSettings, SettingsUpdate

__all__ = [
    "Comment",
    "CommentFilter",
    "CommentSettings",
    "CommentStats",
    "Notification",
    "Page",
    "Reaction",
    "Report",
    "SettingsUpdate",
]
