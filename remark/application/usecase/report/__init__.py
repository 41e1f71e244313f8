"""Report use cases."""

from .common import ReportItem
from .get_pending_reports import (
    GetPendingReportsRequest,
    GetPendingReportsUseCase,
    ReportListResponse,
)
from .report_comment import ReportCommentRequest, ReportCommentUseCase
from .review_report import ReviewReportRequest, ReviewReportUseCase

__all__ = [
    "GetPendingReportsRequest",
    "GetPendingReportsUseCase",
    "ReportCommentRequest",
    "ReportCommentUseCase",
    "ReportItem",
    "ReportListResponse",
    "ReviewReportRequest",
    "ReviewReportUseCase",
]
