"""Comment entity.

Comments are attached to an external resource, identified by
(tenant_id, resource_type, resource_id), and may be threaded:

- parent_id: direct parent comment (None for top-level)
- root_id: top-most ancestor of the thread (None for top-level)
- depth: nesting level (0 for top-level, parent depth + 1 for replies)
"""

from datetime import datetime
from typing import Any, Optional

from pydantic import Field

from remark.domain.model.common import DomainModel
from remark.domain.value import (
    Attachment,
    CommentId,
    CommentStatus,
    EditRecord,
    TenantId,
    UserId,
)


class Comment(DomainModel):
    """Comment entity.

    Counters (reply/like/dislike/reaction_counts/report_count) are owned by
    the engine and the reaction counter; clients never set them directly.
    """

    id: CommentId
    tenant_id: TenantId
    resource_type: str
    resource_id: str

    parent_id: Optional[CommentId] = None
    root_id: Optional[CommentId] = None
    depth: int = Field(default=0, ge=0)

    author_id: UserId
    author_name: str
    author_email: Optional[str] = None
    author_avatar: Optional[str] = None
    is_anonymous: bool = False

    content: str
    content_html: Optional[str] = None
    attachments: list[Attachment] = Field(default_factory=list)

    status: CommentStatus = CommentStatus.PENDING
    moderated_by: Optional[UserId] = None
    moderated_at: Optional[datetime] = None
    rejection_reason: Optional[str] = None
    flagged_words: list[str] = Field(default_factory=list)
    report_count: int = 0

    is_pinned: bool = False
    pinned_by: Optional[UserId] = None
    pinned_at: Optional[datetime] = None

    is_edited: bool = False
    edit_history: list[EditRecord] = Field(default_factory=list)

    reply_count: int = 0
    like_count: int = 0
    dislike_count: int = 0
    reaction_counts: dict[str, int] = Field(default_factory=dict)

    ip_address: Optional[str] = None
    user_agent: Optional[str] = None
    metadata: dict[str, Any] = Field(default_factory=dict)

    is_deleted: bool = False
    deleted_by: Optional[UserId] = None
    deleted_at: Optional[datetime] = None

    created_at: datetime = Field(default_factory=datetime.now)
    updated_at: datetime = Field(default_factory=datetime.now)

    @property
    def is_reply(self) -> bool:
        """Whether this comment answers another comment."""
        return self.parent_id is not None

    @property
    def thread_id(self) -> CommentId:
        """ID of the thread's root (own ID for top-level comments)."""
        return self.root_id or self.id
