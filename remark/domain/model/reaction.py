"""Reaction entity."""

from datetime import datetime

from pydantic import Field

from remark.domain.model.common import DomainModel
from remark.domain.value import CommentId, ReactionId, ReactionType, UserId


class Reaction(DomainModel):
    """A user's reaction to a comment.

    (comment_id, user_id) is unique: reacting again replaces the type.
    """

    id: ReactionId
    comment_id: CommentId
    user_id: UserId
    type: ReactionType
    created_at: datetime = Field(default_factory=datetime.now)
    updated_at: datetime = Field(default_factory=datetime.now)
