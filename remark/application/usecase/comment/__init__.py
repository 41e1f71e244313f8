"""Comment use cases."""

from .common import CommentItem, CommentListResponse
from .create_comment import CreateCommentRequest, CreateCommentUseCase
from .delete_comment import (
    DeleteCommentRequest,
    DeleteCommentResponse,
    DeleteCommentUseCase,
)
from .get_comment import GetCommentRequest, GetCommentUseCase
from .get_replies import GetRepliesRequest, GetRepliesUseCase
from .get_stats import GetStatsRequest, GetStatsResponse, GetStatsUseCase
from .list_comments import ListCommentsRequest, ListCommentsUseCase
from .search_comments import SearchCommentsRequest, SearchCommentsUseCase
from .update_comment import UpdateCommentRequest, UpdateCommentUseCase

__all__ = [
    "CommentItem",
    "CommentListResponse",
    "CreateCommentRequest",
    "CreateCommentUseCase",
    "DeleteCommentRequest",
    "DeleteCommentResponse",
    "DeleteCommentUseCase",
    "GetCommentRequest",
    "GetCommentUseCase",
    "GetRepliesRequest",
    "GetRepliesUseCase",
    "GetStatsRequest",
    "GetStatsResponse",
    "GetStatsUseCase",
    "ListCommentsRequest",
    "ListCommentsUseCase",
    "SearchCommentsRequest",
    "SearchCommentsUseCase",
    "UpdateCommentRequest",
    "UpdateCommentUseCase",
]
