"""Mappers for converting between database rows and domain models.

Since we're using Pydantic domain models (immutable), we use manual mapping
instead of SQLAlchemy's classical imperative mapping.
"""

from typing import Any, Dict
from uuid import UUID

from remark.domain.model import Comment, CommentSettings, Reaction, Report
from remark.domain.value import (
    CommentId,
    CommentStatus,
    ReactionId,
    ReactionType,
    ReportId,
    ReportReason,
    ReportStatus,
    SettingsId,
    TenantId,
    UserId,
)

# Columns stored as JSONB; dumped in JSON mode so datetimes become strings
_COMMENT_JSON_FIELDS = {
    "attachments",
    "edit_history",
    "flagged_words",
    "reaction_counts",
    "metadata",
}


def _uuid(value: Any) -> UUID:
    return value if isinstance(value, UUID) else UUID(str(value))


def _optional_uuid(value: Any) -> UUID | None:
    return _uuid(value) if value is not None else None


def row_to_comment(row: Dict[str, Any]) -> Comment:
    """Convert database row to Comment domain model.

    Args:
        row: Database row as dict

    Returns:
        Comment domain model
    """
    parent_id = _optional_uuid(row.get("parent_id"))
    root_id = _optional_uuid(row.get("root_id"))
    return Comment(
        id=CommentId(_uuid(row["id"])),
        tenant_id=TenantId(row["tenant_id"]),
        resource_type=row["resource_type"],
        resource_id=row["resource_id"],
        parent_id=CommentId(parent_id) if parent_id else None,
        root_id=CommentId(root_id) if root_id else None,
        depth=row["depth"],
        author_id=UserId(row["author_id"]),
        author_name=row["author_name"],
        author_email=row.get("author_email"),
        author_avatar=row.get("author_avatar"),
        is_anonymous=row["is_anonymous"],
        content=row["content"],
        content_html=row.get("content_html"),
        attachments=row.get("attachments") or [],
        status=CommentStatus(row["status"]),
        moderated_by=row.get("moderated_by"),
        moderated_at=row.get("moderated_at"),
        rejection_reason=row.get("rejection_reason"),
        flagged_words=row.get("flagged_words") or [],
        report_count=row["report_count"],
        is_pinned=row["is_pinned"],
        pinned_by=row.get("pinned_by"),
        pinned_at=row.get("pinned_at"),
        is_edited=row["is_edited"],
        edit_history=row.get("edit_history") or [],
        reply_count=row["reply_count"],
        like_count=row["like_count"],
        dislike_count=row["dislike_count"],
        reaction_counts=row.get("reaction_counts") or {},
        ip_address=row.get("ip_address"),
        user_agent=row.get("user_agent"),
        metadata=row.get("metadata") or {},
        is_deleted=row["is_deleted"],
        deleted_by=row.get("deleted_by"),
        deleted_at=row.get("deleted_at"),
        created_at=row["created_at"],
        updated_at=row["updated_at"],
    )


def comment_to_dict(comment: Comment) -> Dict[str, Any]:
    """Convert Comment domain model to database dict.

    Args:
        comment: Comment domain model

    Returns:
        Dict suitable for database insertion/update
    """
    data = comment.model_dump(exclude=_COMMENT_JSON_FIELDS)
    data.update(comment.model_dump(mode="json", include=_COMMENT_JSON_FIELDS))
    data["status"] = comment.status.value
    return data


def row_to_settings(row: Dict[str, Any]) -> CommentSettings:
    """Convert database row to CommentSettings domain model."""
    return CommentSettings(
        id=SettingsId(_uuid(row["id"])),
        tenant_id=TenantId(row["tenant_id"]),
        resource_type=row["resource_type"],
        require_approval=row["require_approval"],
        allow_anonymous=row["allow_anonymous"],
        allow_replies=row["allow_replies"],
        max_reply_depth=row["max_reply_depth"],
        allow_reactions=row["allow_reactions"],
        allowed_reactions=[ReactionType(r) for r in row["allowed_reactions"]],
        allow_attachments=row["allow_attachments"],
        max_attachments=row["max_attachments"],
        max_comment_length=row["max_comment_length"],
        comments_enabled=row["comments_enabled"],
        notify_on_new_comment=row["notify_on_new_comment"],
        notify_on_reply=row["notify_on_reply"],
        auto_approve_verified=row["auto_approve_verified"],
        bad_words_filter=row["bad_words_filter"],
        custom_bad_words=row.get("custom_bad_words") or [],
        created_at=row["created_at"],
        updated_at=row["updated_at"],
    )


def settings_to_dict(settings: CommentSettings) -> Dict[str, Any]:
    """Convert CommentSettings domain model to database dict."""
    data = settings.model_dump()
    data["allowed_reactions"] = [r.value for r in settings.allowed_reactions]
    return data


def settings_changes_to_columns(changes: Dict[str, Any]) -> Dict[str, Any]:
    """Convert a partial settings change to column values."""
    columns = dict(changes)
    if "allowed_reactions" in columns:
        columns["allowed_reactions"] = [
            ReactionType(r).value for r in columns["allowed_reactions"]
        ]
    return columns


def row_to_reaction(row: Dict[str, Any]) -> Reaction:
    """Convert database row to Reaction domain model."""
    return Reaction(
        id=ReactionId(_uuid(row["id"])),
        comment_id=CommentId(_uuid(row["comment_id"])),
        user_id=UserId(row["user_id"]),
        type=ReactionType(row["type"]),
        created_at=row["created_at"],
        updated_at=row["updated_at"],
    )


def reaction_to_dict(reaction: Reaction) -> Dict[str, Any]:
    """Convert Reaction domain model to database dict."""
    data = reaction.model_dump()
    data["type"] = reaction.type.value
    return data


def row_to_report(row: Dict[str, Any]) -> Report:
    """Convert database row to Report domain model."""
    return Report(
        id=ReportId(_uuid(row["id"])),
        comment_id=CommentId(_uuid(row["comment_id"])),
        reporter_id=UserId(row["reporter_id"]),
        reason=ReportReason(row["reason"]),
        description=row.get("description"),
        status=ReportStatus(row["status"]),
        reviewed_by=row.get("reviewed_by"),
        reviewed_at=row.get("reviewed_at"),
        created_at=row["created_at"],
    )


def report_to_dict(report: Report) -> Dict[str, Any]:
    """Convert Report domain model to database dict."""
    data = report.model_dump()
    data["reason"] = report.reason.value
    data["status"] = report.status.value
    return data
