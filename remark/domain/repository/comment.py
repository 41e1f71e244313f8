"""Comment repository interface."""

from abc import ABC, abstractmethod
from typing import Optional

from remark.domain.model import Comment, CommentFilter, CommentStats, Page
from remark.domain.value import CommentId, TenantId


class CommentRepository(ABC):
    """Repository for Comment entity.

    Defines the contract for comment persistence operations.
    Implementations live in the persistence layer.
    """

    @abstractmethod
    async def find_by_id(self, comment_id: CommentId) -> Optional[Comment]:
        """Find a comment by ID.

        Args:
            comment_id: The comment's unique identifier

        Returns:
            The comment if found, None otherwise
        """
        pass

    @abstractmethod
    async def create(self, comment: Comment) -> Comment:
        """Insert a new comment.

        Args:
            comment: The comment to insert

        Returns:
            The stored comment
        """
        pass

    @abstractmethod
    async def update(self, comment: Comment) -> Comment:
        """Replace a stored comment with the given state (last write wins).

        Args:
            comment: Full comment state

        Returns:
            The stored comment
        """
        pass

    @abstractmethod
    async def delete(self, comment_id: CommentId) -> bool:
        """Remove a comment permanently.

        Args:
            comment_id: The comment ID to delete

        Returns:
            True if a comment was removed
        """
        pass

    @abstractmethod
    async def find_page(self, query: CommentFilter) -> Page[Comment]:
        """Filtered, sorted, paginated listing.

        Pinned comments always sort first, then ``query.sort_by`` in
        ``query.sort_order``. ``query.parent_id`` unset restricts to roots.

        Args:
            query: Filters, sort and pagination

        Returns:
            Page of comments with the total match count
        """
        pass

    @abstractmethod
    async def find_replies(
        self, parent_id: CommentId, offset: int, limit: int
    ) -> tuple[list[Comment], int]:
        """Approved, non-deleted direct replies, oldest first.

        Args:
            parent_id: The parent comment ID
            offset: Number of replies to skip
            limit: Maximum number of replies to return

        Returns:
            Tuple of (replies, total count)
        """
        pass

    @abstractmethod
    async def find_pending(
        self, tenant_id: Optional[TenantId], offset: int, limit: int
    ) -> tuple[list[Comment], int]:
        """Pending, non-deleted comments oldest first (moderation queue).

        Args:
            tenant_id: Restrict to one tenant, or None for all
            offset: Number of comments to skip
            limit: Maximum number of comments to return

        Returns:
            Tuple of (comments, total count)
        """
        pass

    @abstractmethod
    async def count_by_status(
        self, tenant_id: TenantId, resource_type: str, resource_id: str
    ) -> CommentStats:
        """Group non-deleted comments on a resource by status.

        Returns:
            Per-status counts and their total
        """
        pass

    @abstractmethod
    async def search(
        self, tenant_id: TenantId, query: str, offset: int, limit: int
    ) -> tuple[list[Comment], int]:
        """Relevance-ranked text search over content and author name.

        Only approved, non-deleted comments of the tenant are searched.

        Returns:
            Tuple of (comments best match first, total count)
        """
        pass

    @abstractmethod
    async def increment_reply_count(self, comment_id: CommentId, delta: int) -> None:
        """Atomically add ``delta`` (+1/-1) to the reply count."""
        pass

    @abstractmethod
    async def increment_report_count(self, comment_id: CommentId) -> None:
        """Atomically add one to the report count."""
        pass

    @abstractmethod
    async def set_reaction_counts(
        self,
        comment_id: CommentId,
        like_count: int,
        dislike_count: int,
        reaction_counts: dict[str, int],
    ) -> None:
        """Overwrite the reaction counters with recomputed values."""
        pass

    @abstractmethod
    async def ping(self) -> None:
        """Check that the store is reachable.

        Raises:
            Exception: Whatever the store raises when it is unavailable
        """
        pass
