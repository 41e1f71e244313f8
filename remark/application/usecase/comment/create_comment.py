"""Create comment use case."""

from typing import Any

from pydantic import BaseModel, Field

from remark.domain.service import CommentService
from remark.domain.value import Attachment, TenantId, UserId, parse_comment_id

from .common import CommentItem


class CreateCommentRequest(BaseModel):
    """Create comment request."""

    tenant_id: str
    resource_type: str = Field(min_length=1, max_length=100)
    resource_id: str = Field(min_length=1, max_length=255)
    content: str = Field(min_length=1)
    parent_id: str | None = None  # Parent comment ID for replies
    author_id: str  # From the authenticated caller
    author_name: str | None = None  # Overrides the caller's profile name
    author_email: str | None = None
    author_avatar: str | None = None
    is_anonymous: bool = False
    attachments: list[Attachment] = Field(default_factory=list)
    metadata: dict[str, Any] = Field(default_factory=dict)
    ip_address: str | None = None
    user_agent: str | None = None


class CreateCommentUseCase:
    """Use case for creating a comment or a reply."""

    def __init__(self, comment_service: CommentService) -> None:
        """Initialize create comment use case.

        Args:
            comment_service: Comment domain service
        """
        self.comment_service = comment_service

    async def execute(self, request: CreateCommentRequest) -> CommentItem:
        """Execute create comment flow.

        Args:
            request: Create comment request

        Returns:
            The created comment

        Raises:
            ValidationError: If the parent ID is malformed
        """
        parent_id = parse_comment_id(request.parent_id) if request.parent_id else None

        comment = await self.comment_service.create_comment(
            tenant_id=TenantId(request.tenant_id),
            resource_type=request.resource_type,
            resource_id=request.resource_id,
            author_id=UserId(request.author_id),
            author_name=request.author_name or request.author_id,
            author_email=request.author_email,
            author_avatar=request.author_avatar,
            content=request.content,
            parent_id=parent_id,
            is_anonymous=request.is_anonymous,
            attachments=request.attachments,
            metadata=request.metadata,
            ip_address=request.ip_address,
            user_agent=request.user_agent,
        )
        return CommentItem.from_comment(comment)
