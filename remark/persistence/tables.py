"""SQLAlchemy table definitions for the comment service.

They match the schema defined in Alembic migrations. Nested documents
(attachments, edit history, counters by type, settings lists) live in JSONB.
"""

from sqlalchemy import (
    Boolean,
    Column,
    ForeignKey,
    Index,
    Integer,
    MetaData,
    String,
    Table,
    Text,
    UniqueConstraint,
    func,
)
from sqlalchemy.dialects.postgresql import JSONB, TIMESTAMP, UUID

# Metadata object for all tables
metadata = MetaData()

# ============================================================================
# COMMENTS TABLE
# ============================================================================
comments_table = Table(
    "comments",
    metadata,
    Column("id", UUID, primary_key=True),
    Column("tenant_id", String(100), nullable=False),
    Column("resource_type", String(100), nullable=False),
    Column("resource_id", String(255), nullable=False),
    Column("parent_id", UUID, nullable=True),
    Column("root_id", UUID, nullable=True),
    Column("depth", Integer, nullable=False, server_default="0"),
    Column("author_id", String(255), nullable=False),
    Column("author_name", String(255), nullable=False),
    Column("author_email", String(255), nullable=True),
    Column("author_avatar", Text, nullable=True),
    Column("is_anonymous", Boolean, nullable=False, server_default="false"),
    Column("content", Text, nullable=False),
    Column("content_html", Text, nullable=True),
    Column("attachments", JSONB, nullable=False, server_default="[]"),
    Column("status", String(20), nullable=False, server_default="pending"),
    Column("moderated_by", String(255), nullable=True),
    Column("moderated_at", TIMESTAMP(timezone=True), nullable=True),
    Column("rejection_reason", Text, nullable=True),
    Column("flagged_words", JSONB, nullable=False, server_default="[]"),
    Column("report_count", Integer, nullable=False, server_default="0"),
    Column("is_pinned", Boolean, nullable=False, server_default="false"),
    Column("pinned_by", String(255), nullable=True),
    Column("pinned_at", TIMESTAMP(timezone=True), nullable=True),
    Column("is_edited", Boolean, nullable=False, server_default="false"),
    Column("edit_history", JSONB, nullable=False, server_default="[]"),
    Column("reply_count", Integer, nullable=False, server_default="0"),
    Column("like_count", Integer, nullable=False, server_default="0"),
    Column("dislike_count", Integer, nullable=False, server_default="0"),
    Column("reaction_counts", JSONB, nullable=False, server_default="{}"),
    Column("ip_address", String(64), nullable=True),
    Column("user_agent", Text, nullable=True),
    Column("metadata", JSONB, nullable=False, server_default="{}"),
    Column("is_deleted", Boolean, nullable=False, server_default="false"),
    Column("deleted_by", String(255), nullable=True),
    Column("deleted_at", TIMESTAMP(timezone=True), nullable=True),
    Column(
        "created_at", TIMESTAMP(timezone=True), nullable=False, server_default="NOW()"
    ),
    Column(
        "updated_at", TIMESTAMP(timezone=True), nullable=False, server_default="NOW()"
    ),
)

Index(
    "idx_comments_resource",
    comments_table.c.tenant_id,
    comments_table.c.resource_type,
    comments_table.c.resource_id,
    comments_table.c.status,
)
Index("idx_comments_parent_id", comments_table.c.parent_id)
Index("idx_comments_root_id", comments_table.c.root_id)
Index("idx_comments_author_id", comments_table.c.author_id)
Index("idx_comments_status_created", comments_table.c.status, comments_table.c.created_at)


def comment_search_vector():
    """Text-search document over content and author name."""
    return func.to_tsvector(
        "simple",
        func.coalesce(comments_table.c.content, "")
        + " "
        + func.coalesce(comments_table.c.author_name, ""),
    )


# ============================================================================
# COMMENT SETTINGS TABLE
# ============================================================================
comment_settings_table = Table(
    "comment_settings",
    metadata,
    Column("id", UUID, primary_key=True),
    Column("tenant_id", String(100), nullable=False),
    Column("resource_type", String(100), nullable=False),
    Column("require_approval", Boolean, nullable=False),
    Column("allow_anonymous", Boolean, nullable=False),
    Column("allow_replies", Boolean, nullable=False),
    Column("max_reply_depth", Integer, nullable=False),
    Column("allow_reactions", Boolean, nullable=False),
    Column("allowed_reactions", JSONB, nullable=False),
    Column("allow_attachments", Boolean, nullable=False),
    Column("max_attachments", Integer, nullable=False),
    Column("max_comment_length", Integer, nullable=False),
    Column("comments_enabled", Boolean, nullable=False),
    Column("notify_on_new_comment", Boolean, nullable=False),
    Column("notify_on_reply", Boolean, nullable=False),
    Column("auto_approve_verified", Boolean, nullable=False),
    Column("bad_words_filter", Boolean, nullable=False),
    Column("custom_bad_words", JSONB, nullable=False, server_default="[]"),
    Column(
        "created_at", TIMESTAMP(timezone=True), nullable=False, server_default="NOW()"
    ),
    Column(
        "updated_at", TIMESTAMP(timezone=True), nullable=False, server_default="NOW()"
    ),
    UniqueConstraint("tenant_id", "resource_type", name="uq_settings_tenant_resource"),
)

# ============================================================================
# REACTIONS TABLE
# ============================================================================
reactions_table = Table(
    "reactions",
    metadata,
    Column("id", UUID, primary_key=True),
    Column(
        "comment_id",
        UUID,
        ForeignKey("comments.id", ondelete="CASCADE"),
        nullable=False,
    ),
    Column("user_id", String(255), nullable=False),
    Column("type", String(20), nullable=False),
    Column(
        "created_at", TIMESTAMP(timezone=True), nullable=False, server_default="NOW()"
    ),
    Column(
        "updated_at", TIMESTAMP(timezone=True), nullable=False, server_default="NOW()"
    ),
    UniqueConstraint("comment_id", "user_id", name="uq_reaction_comment_user"),
)

Index("idx_reactions_user_id", reactions_table.c.user_id)

# ============================================================================
# REPORTS TABLE
# ============================================================================
reports_table = Table(
    "reports",
    metadata,
    Column("id", UUID, primary_key=True),
    Column(
        "comment_id",
        UUID,
        ForeignKey("comments.id", ondelete="CASCADE"),
        nullable=False,
    ),
    Column("reporter_id", String(255), nullable=False),
    Column("reason", String(30), nullable=False),
    Column("description", String(500), nullable=True),
    Column("status", String(20), nullable=False, server_default="pending"),
    Column("reviewed_by", String(255), nullable=True),
    Column("reviewed_at", TIMESTAMP(timezone=True), nullable=True),
    Column(
        "created_at", TIMESTAMP(timezone=True), nullable=False, server_default="NOW()"
    ),
    UniqueConstraint("comment_id", "reporter_id", name="uq_report_comment_reporter"),
)

Index("idx_reports_status_created", reports_table.c.status, reports_table.c.created_at)
