"""Domain value objects for the comment service.

Value objects are immutable and defined by their values, not identity.
"""

from datetime import datetime
from enum import Enum

from pydantic import Field

from remark.domain.value.common import ValueObject


class CommentStatus(str, Enum):
    """Moderation status of a comment."""

    PENDING = "pending"
    APPROVED = "approved"
    REJECTED = "rejected"
    SPAM = "spam"


# Statuses a moderator may assign
MODERATION_OUTCOMES = frozenset(
    {CommentStatus.APPROVED, CommentStatus.REJECTED, CommentStatus.SPAM}
)


class ReactionType(str, Enum):
    """Reaction a user can leave on a comment."""

    LIKE = "like"
    DISLIKE = "dislike"
    LOVE = "love"
    HAHA = "haha"
    WOW = "wow"
    SAD = "sad"
    ANGRY = "angry"


class ReportReason(str, Enum):
    """Why a comment was reported."""

    SPAM = "spam"
    INAPPROPRIATE = "inappropriate"
    HARASSMENT = "harassment"
    HATE_SPEECH = "hate_speech"
    MISINFORMATION = "misinformation"
    OTHER = "other"


class ReportStatus(str, Enum):
    """Review state of a report."""

    PENDING = "pending"
    REVIEWED = "reviewed"
    DISMISSED = "dismissed"


class SortField(str, Enum):
    """Secondary sort key for comment listings (pinned always first)."""

    CREATED_AT = "created_at"
    LIKE_COUNT = "like_count"
    REPLY_COUNT = "reply_count"


class SortOrder(str, Enum):
    """Sort direction."""

    ASC = "asc"
    DESC = "desc"


class NotificationEvent(str, Enum):
    """Events emitted towards the notification service."""

    NEW = "comment.new"
    REPLY = "comment.reply"
    PENDING = "comment.pending"
    MODERATED = "comment.moderated"


class Attachment(ValueObject):
    """File attached to a comment."""

    id: str
    type: str  # image, file, link
    url: str
    filename: str | None = None
    size: int | None = None
    mime_type: str | None = None
    uploaded_at: datetime = Field(default_factory=datetime.now)


class EditRecord(ValueObject):
    """Snapshot of the content a comment had before an edit."""

    content: str
    edited_at: datetime
    edited_by: str


class Caller(ValueObject):
    """Authenticated identity attached to a request.

    Resolved by the auth collaborator; the domain trusts it as given.
    """

    user_id: str
    name: str | None = None
    email: str | None = None
    is_admin: bool = False
