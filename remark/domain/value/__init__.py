"""Domain value objects for the comment service."""

from remark.domain.value.identifiers import (
    CommentId,
    ReactionId,
    ReportId,
    SettingsId,
    TenantId,
    UserId,
    parse_comment_id,
    parse_id,
)
from remark.domain.value.types import (
    MODERATION_OUTCOMES,
    Attachment,
    Caller,
    CommentStatus,
    EditRecord,
    NotificationEvent,
    ReactionType,
    ReportReason,
    ReportStatus,
    SortField,
    SortOrder,
)

__all__ = [
    # Identifiers
    "CommentId",
    "ReactionId",
    "ReportId",
    "SettingsId",
    "TenantId",
    "UserId",
    "parse_comment_id",
    "parse_id",
    # Types
    "MODERATION_OUTCOMES",
    "Attachment",
    "Caller",
    "CommentStatus",
    "EditRecord",
    "NotificationEvent",
    "ReactionType",
    "ReportReason",
    "ReportStatus",
    "SortField",
    "SortOrder",
]
