"""Response shapes shared by comment use cases."""

from datetime import datetime
from typing import Any

from pydantic import BaseModel

from remark.domain.model import Comment, Page
from remark.domain.value import Attachment, CommentStatus, EditRecord, ReactionType


class CommentItem(BaseModel):
    """Comment as returned to API clients.

    Request metadata (IP address, user agent) and author email never leave
    the service.
    """

    comment_id: str
    tenant_id: str
    resource_type: str
    resource_id: str
    parent_id: str | None
    root_id: str | None
    depth: int
    author_id: str
    author_name: str
    author_avatar: str | None
    is_anonymous: bool
    content: str
    content_html: str | None
    attachments: list[Attachment]
    status: CommentStatus
    rejection_reason: str | None
    flagged_words: list[str]
    is_pinned: bool
    is_edited: bool
    edit_history: list[EditRecord]
    reply_count: int
    like_count: int
    dislike_count: int
    reaction_counts: dict[str, int]
    report_count: int
    metadata: dict[str, Any]
    is_deleted: bool
    created_at: datetime
    updated_at: datetime
    user_reaction: ReactionType | None = None

    @classmethod
    def from_comment(
        cls, comment: Comment, user_reaction: ReactionType | None = None
    ) -> "CommentItem":
        """Build the API view of a comment."""
        return cls(
            comment_id=str(comment.id),
            tenant_id=comment.tenant_id,
            resource_type=comment.resource_type,
            resource_id=comment.resource_id,
            parent_id=str(comment.parent_id) if comment.parent_id else None,
            root_id=str(comment.root_id) if comment.root_id else None,
            depth=comment.depth,
            author_id=comment.author_id,
            author_name=comment.author_name,
            author_avatar=comment.author_avatar,
            is_anonymous=comment.is_anonymous,
            content=comment.content,
            content_html=comment.content_html,
            attachments=comment.attachments,
            status=comment.status,
            rejection_reason=comment.rejection_reason,
            flagged_words=comment.flagged_words,
            is_pinned=comment.is_pinned,
            is_edited=comment.is_edited,
            edit_history=comment.edit_history,
            reply_count=comment.reply_count,
            like_count=comment.like_count,
            dislike_count=comment.dislike_count,
            reaction_counts=comment.reaction_counts,
            report_count=comment.report_count,
            metadata=comment.metadata,
            is_deleted=comment.is_deleted,
            created_at=comment.created_at,
            updated_at=comment.updated_at,
            user_reaction=user_reaction,
        )


class CommentListResponse(BaseModel):
    """A page of comments."""

    comments: list[CommentItem]
    total: int
    page: int
    page_size: int
    total_pages: int

    @classmethod
    def from_page(
        cls,
        page: Page[Comment],
        user_reactions: dict | None = None,
    ) -> "CommentListResponse":
        """Build the API view of a page of comments."""
        user_reactions = user_reactions or {}
        return cls(
            comments=[
                CommentItem.from_comment(c, user_reactions.get(c.id))
                for c in page.items
            ],
            total=page.total,
            page=page.page,
            page_size=page.page_size,
            total_pages=page.total_pages,
        )
