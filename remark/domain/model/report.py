"""Report entity."""

from datetime import datetime
from typing import Optional

from pydantic import Field

from remark.domain.model.common import DomainModel
from remark.domain.value import CommentId, ReportId, ReportReason, ReportStatus, UserId


class Report(DomainModel):
    """A user's report against a comment.

    (comment_id, reporter_id) is unique.
    """

    id: ReportId
    comment_id: CommentId
    reporter_id: UserId
    reason: ReportReason
    description: Optional[str] = Field(default=None, max_length=500)
    status: ReportStatus = ReportStatus.PENDING
    reviewed_by: Optional[UserId] = None
    reviewed_at: Optional[datetime] = None
    created_at: datetime = Field(default_factory=datetime.now)
