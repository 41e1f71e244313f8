"""In-memory comment repository for testing."""

import re
from typing import Callable, Optional

from remark.domain.model import Comment, CommentFilter, CommentStats, Page
from remark.domain.repository.comment import CommentRepository
from remark.domain.value import CommentId, CommentStatus, SortOrder, TenantId

_WORD = re.compile(r"\w+")


def _paginate(
    comments: list[Comment], offset: int, limit: int
) -> tuple[list[Comment], int]:
    return comments[offset : offset + limit], len(comments)


class InMemoryCommentRepository(CommentRepository):
    """In-memory implementation of CommentRepository for testing."""

    def __init__(self) -> None:
        self._comments: dict[CommentId, Comment] = {}

    def _where(self, predicate: Callable[[Comment], bool]) -> list[Comment]:
        return [c for c in self._comments.values() if predicate(c)]

    def _bump(
        self, comment_id: CommentId, **changes: Callable[[Comment], object]
    ) -> None:
        comment = self._comments.get(comment_id)
        if comment:
            # Comments are immutable, replace with an updated copy
            self._comments[comment_id] = comment.model_copy(
                update={field: fn(comment) for field, fn in changes.items()}
            )

    async def find_by_id(self, comment_id: CommentId) -> Optional[Comment]:
        """Find a comment by ID."""
        return self._comments.get(comment_id)

    async def create(self, comment: Comment) -> Comment:
        """Insert a new comment."""
        self._comments[comment.id] = comment
        return comment

    async def update(self, comment: Comment) -> Comment:
        """Replace a stored comment."""
        self._comments[comment.id] = comment
        return comment

    async def delete(self, comment_id: CommentId) -> bool:
        """Delete a comment."""
        return self._comments.pop(comment_id, None) is not None

    async def find_page(self, query: CommentFilter) -> Page[Comment]:
        """Filtered, sorted, paginated listing."""

        def matches(c: Comment) -> bool:
            return (
                c.tenant_id == query.tenant_id
                and (not query.resource_type or c.resource_type == query.resource_type)
                and (not query.resource_id or c.resource_id == query.resource_id)
                and c.parent_id == query.parent_id
                and (query.status is None or c.status == query.status)
                and (query.author_id is None or c.author_id == query.author_id)
                and (query.is_pinned is None or c.is_pinned == query.is_pinned)
                and (query.include_deleted or not c.is_deleted)
            )

        comments = self._where(matches)

        # Stable sorts: secondary key first, pinned last so it dominates
        comments.sort(
            key=lambda c: getattr(c, query.sort_by.value),
            reverse=query.sort_order == SortOrder.DESC,
        )
        comments.sort(key=lambda c: c.is_pinned, reverse=True)

        items, total = _paginate(comments, query.offset, query.page_size)
        return Page(
            items=items, total=total, page=query.page, page_size=query.page_size
        )

    async def find_replies(
        self, parent_id: CommentId, offset: int, limit: int
    ) -> tuple[list[Comment], int]:
        """Approved, non-deleted direct replies, oldest first."""
        replies = self._where(
            lambda c: c.parent_id == parent_id
            and c.status == CommentStatus.APPROVED
            and not c.is_deleted
        )
        replies.sort(key=lambda c: c.created_at)
        return _paginate(replies, offset, limit)

    async def find_pending(
        self, tenant_id: Optional[TenantId], offset: int, limit: int
    ) -> tuple[list[Comment], int]:
        """Pending, non-deleted comments oldest first."""
        pending = self._where(
            lambda c: c.status == CommentStatus.PENDING
            and not c.is_deleted
            and (tenant_id is None or c.tenant_id == tenant_id)
        )
        pending.sort(key=lambda c: c.created_at)
        return _paginate(pending, offset, limit)

    async def count_by_status(
        self, tenant_id: TenantId, resource_type: str, resource_id: str
    ) -> CommentStats:
        """Group non-deleted comments on a resource by status."""
        comments = self._where(
            lambda c: c.tenant_id == tenant_id
            and c.resource_type == resource_type
            and c.resource_id == resource_id
            and not c.is_deleted
        )
        counts = {status: 0 for status in CommentStatus}
        for c in comments:
            counts[c.status] += 1
        return CommentStats(
            total=len(comments),
            approved=counts[CommentStatus.APPROVED],
            pending=counts[CommentStatus.PENDING],
            rejected=counts[CommentStatus.REJECTED],
            spam=counts[CommentStatus.SPAM],
        )

    async def search(
        self, tenant_id: TenantId, query: str, offset: int, limit: int
    ) -> tuple[list[Comment], int]:
        """Every query term must appear; more occurrences rank higher."""
        terms = {t.casefold() for t in _WORD.findall(query)}
        if not terms:
            return [], 0

        scored: list[tuple[int, Comment]] = []
        for c in self._where(
            lambda c: c.tenant_id == tenant_id
            and c.status == CommentStatus.APPROVED
            and not c.is_deleted
        ):
            text = f"{c.content} {c.author_name}"
            words = [w.casefold() for w in _WORD.findall(text)]
            if terms.issubset(words):
                scored.append((sum(words.count(t) for t in terms), c))

        scored.sort(key=lambda pair: (pair[0], pair[1].created_at), reverse=True)
        return _paginate([c for _, c in scored], offset, limit)

    async def increment_reply_count(self, comment_id: CommentId, delta: int) -> None:
        """Add delta to the reply count (never below zero)."""
        self._bump(comment_id, reply_count=lambda c: max(0, c.reply_count + delta))

    async def increment_report_count(self, comment_id: CommentId) -> None:
        """Add one to the report count."""
        self._bump(comment_id, report_count=lambda c: c.report_count + 1)

    async def set_reaction_counts(
        self,
        comment_id: CommentId,
        like_count: int,
        dislike_count: int,
        reaction_counts: dict[str, int],
    ) -> None:
        """Overwrite reaction counters."""
        self._bump(
            comment_id,
            like_count=lambda c: like_count,
            dislike_count=lambda c: dislike_count,
            reaction_counts=lambda c: dict(reaction_counts),
        )

    async def ping(self) -> None:
        """Always reachable."""
        return None
