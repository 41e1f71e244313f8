"""Report response shape."""

from datetime import datetime

from pydantic import BaseModel

from remark.domain.model import Report
from remark.domain.value import ReportReason, ReportStatus


class ReportItem(BaseModel):
    """Report as returned to API clients."""

    report_id: str
    comment_id: str
    reporter_id: str
    reason: ReportReason
    description: str | None
    status: ReportStatus
    reviewed_by: str | None
    reviewed_at: datetime | None
    created_at: datetime

    @classmethod
    def from_report(cls, report: Report) -> "ReportItem":
        return cls(
            report_id=str(report.id),
            comment_id=str(report.comment_id),
            reporter_id=report.reporter_id,
            reason=report.reason,
            description=report.description,
            status=report.status,
            reviewed_by=report.reviewed_by,
            reviewed_at=report.reviewed_at,
            created_at=report.created_at,
        )
