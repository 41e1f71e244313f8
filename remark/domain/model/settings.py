"""Per-tenant comment settings."""

from datetime import datetime
from typing import Optional

from pydantic import BaseModel, Field

from remark.domain.model.common import DomainModel
from remark.domain.value import ReactionType, SettingsId, TenantId


def _all_reactions() -> list[ReactionType]:
    return list(ReactionType)


class CommentSettings(DomainModel):
    """Moderation and feature switches for one (tenant, resource type).

    Materialized lazily with these defaults on first access.
    """

    id: SettingsId
    tenant_id: TenantId
    resource_type: str

    require_approval: bool = True
    allow_anonymous: bool = False
    allow_replies: bool = True
    max_reply_depth: int = Field(default=5, ge=0)
    allow_reactions: bool = True
    allowed_reactions: list[ReactionType] = Field(default_factory=_all_reactions)
    allow_attachments: bool = False
    max_attachments: int = Field(default=3, ge=0)
    max_comment_length: int = Field(default=5000, ge=1)
    comments_enabled: bool = True
    notify_on_new_comment: bool = True
    notify_on_reply: bool = True
    # Stored but not consulted by any moderation path yet
    auto_approve_verified: bool = False
    bad_words_filter: bool = True
    custom_bad_words: list[str] = Field(default_factory=list)

    created_at: datetime = Field(default_factory=datetime.now)
    updated_at: datetime = Field(default_factory=datetime.now)


class SettingsUpdate(BaseModel):
    """Partial settings change.

    Only fields that were explicitly set are applied (see ``changes``).
    """

    require_approval: Optional[bool] = None
    allow_anonymous: Optional[bool] = None
    allow_replies: Optional[bool] = None
    max_reply_depth: Optional[int] = Field(default=None, ge=0)
    allow_reactions: Optional[bool] = None
    allowed_reactions: Optional[list[ReactionType]] = None
    allow_attachments: Optional[bool] = None
    max_attachments: Optional[int] = Field(default=None, ge=0)
    max_comment_length: Optional[int] = Field(default=None, ge=1)
    comments_enabled: Optional[bool] = None
    notify_on_new_comment: Optional[bool] = None
    notify_on_reply: Optional[bool] = None
    auto_approve_verified: Optional[bool] = None
    bad_words_filter: Optional[bool] = None
    custom_bad_words: Optional[list[str]] = None

    def changes(self) -> dict:
        """Return only the explicitly supplied, non-null fields."""
        return {
            k: v
            for k, v in self.model_dump(exclude_unset=True).items()
            if v is not None
        }
