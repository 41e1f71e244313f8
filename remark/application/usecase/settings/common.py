"""Settings response shape."""

from datetime import datetime

from pydantic import BaseModel

from remark.domain.model import CommentSettings
from remark.domain.value import ReactionType


class SettingsItem(BaseModel):
    """Effective settings of a (tenant, resource type)."""

    settings_id: str
    tenant_id: str
    resource_type: str
    require_approval: bool
    allow_anonymous: bool
    allow_replies: bool
    max_reply_depth: int
    allow_reactions: bool
    allowed_reactions: list[ReactionType]
    allow_attachments: bool
    max_attachments: int
    max_comment_length: int
    comments_enabled: bool
    notify_on_new_comment: bool
    notify_on_reply: bool
    auto_approve_verified: bool
    bad_words_filter: bool
    custom_bad_words: list[str]
    created_at: datetime
    updated_at: datetime

    @classmethod
    def from_settings(cls, settings: CommentSettings) -> "SettingsItem":
        data = settings.model_dump(exclude={"id"})
        return cls(settings_id=str(settings.id), **data)
