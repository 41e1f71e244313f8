"""Moderation use cases."""

from .bulk_moderate import (
    BulkModerateRequest,
    BulkModerateResponse,
    BulkModerateUseCase,
)
from .get_pending import GetPendingCommentsRequest, GetPendingCommentsUseCase
from .hard_delete_comment import HardDeleteCommentRequest, HardDeleteCommentUseCase
from .moderate_comment import ModerateCommentRequest, ModerateCommentUseCase
from .pin_comment import PinCommentRequest, PinCommentUseCase

__all__ = [
    "BulkModerateRequest",
    "BulkModerateResponse",
    "BulkModerateUseCase",
    "GetPendingCommentsRequest",
    "GetPendingCommentsUseCase",
    "HardDeleteCommentRequest",
    "HardDeleteCommentUseCase",
    "ModerateCommentRequest",
    "ModerateCommentUseCase",
    "PinCommentRequest",
    "PinCommentUseCase",
]
