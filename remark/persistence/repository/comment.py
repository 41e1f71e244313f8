"""PostgreSQL implementation of Comment repository."""

from datetime import datetime
from typing import Optional

from sqlalchemy import asc, case, delete, desc, func, select, update
from sqlalchemy.ext.asyncio import AsyncSession

from remark.domain.model import Comment, CommentFilter, CommentStats, Page
from remark.domain.repository import CommentRepository
from remark.domain.value import (
    CommentId,
    CommentStatus,
    SortOrder,
    TenantId,
)
from remark.persistence.mappers import comment_to_dict, row_to_comment
from remark.persistence.tables import comment_search_vector, comments_table


class PostgresCommentRepository(CommentRepository):
    """PostgreSQL implementation of CommentRepository."""

    def __init__(self, session: AsyncSession) -> None:
        """Initialize repository with database session.

        Args:
            session: SQLAlchemy async session
        """
        self.session = session

    async def _fetch_page(
        self, stmt, offset: int, limit: int
    ) -> tuple[list[Comment], int]:
        count_stmt = select(func.count()).select_from(
            stmt.order_by(None).subquery()
        )
        total = (await self.session.execute(count_stmt)).scalar() or 0

        result = await self.session.execute(stmt.offset(offset).limit(limit))
        return [row_to_comment(row._asdict()) for row in result.fetchall()], total

    async def find_by_id(self, comment_id: CommentId) -> Optional[Comment]:
        """Find a comment by ID."""
        stmt = select(comments_table).where(comments_table.c.id == comment_id)
        result = await self.session.execute(stmt)
        row = result.fetchone()
        return row_to_comment(row._asdict()) if row else None

    async def create(self, comment: Comment) -> Comment:
        """Insert a new comment."""
        stmt = (
            comments_table.insert()
            .values(**comment_to_dict(comment))
            .returning(comments_table)
        )
        result = await self.session.execute(stmt)
        await self.session.flush()
        return row_to_comment(result.fetchone()._asdict())

    async def update(self, comment: Comment) -> Comment:
        """Replace a stored comment."""
        values = comment_to_dict(comment)
        values.pop("id")
        stmt = (
            update(comments_table)
            .where(comments_table.c.id == comment.id)
            .values(**values)
            .returning(comments_table)
        )
        result = await self.session.execute(stmt)
        row = result.fetchone()
        await self.session.flush()
        return row_to_comment(row._asdict()) if row else comment

    async def delete(self, comment_id: CommentId) -> bool:
        """Delete a comment (hard delete); reactions and reports cascade."""
        stmt = delete(comments_table).where(comments_table.c.id == comment_id)
        result = await self.session.execute(stmt)
        await self.session.flush()
        return result.rowcount > 0

    async def find_page(self, query: CommentFilter) -> Page[Comment]:
        """Filtered, sorted, paginated listing."""
        t = comments_table
        stmt = select(t).where(t.c.tenant_id == query.tenant_id)

        if query.resource_type:
            stmt = stmt.where(t.c.resource_type == query.resource_type)
        if query.resource_id:
            stmt = stmt.where(t.c.resource_id == query.resource_id)
        if query.parent_id:
            stmt = stmt.where(t.c.parent_id == query.parent_id)
        else:
            stmt = stmt.where(t.c.parent_id.is_(None))
        if query.status:
            stmt = stmt.where(t.c.status == query.status.value)
        if query.author_id:
            stmt = stmt.where(t.c.author_id == query.author_id)
        if query.is_pinned is not None:
            stmt = stmt.where(t.c.is_pinned.is_(query.is_pinned))
        if not query.include_deleted:
            stmt = stmt.where(t.c.is_deleted.is_(False))

        direction = asc if query.sort_order == SortOrder.ASC else desc
        stmt = stmt.order_by(
            desc(t.c.is_pinned), direction(t.c[query.sort_by.value]), desc(t.c.id)
        )

        items, total = await self._fetch_page(stmt, query.offset, query.page_size)
        return Page(
            items=items, total=total, page=query.page, page_size=query.page_size
        )

    async def find_replies(
        self, parent_id: CommentId, offset: int, limit: int
    ) -> tuple[list[Comment], int]:
        """Approved, non-deleted direct replies, oldest first."""
        t = comments_table
        stmt = (
            select(t)
            .where(t.c.parent_id == parent_id)
            .where(t.c.status == CommentStatus.APPROVED.value)
            .where(t.c.is_deleted.is_(False))
            .order_by(asc(t.c.created_at))
        )
        return await self._fetch_page(stmt, offset, limit)

    async def find_pending(
        self, tenant_id: Optional[TenantId], offset: int, limit: int
    ) -> tuple[list[Comment], int]:
        """Pending, non-deleted comments oldest first."""
        t = comments_table
        stmt = (
            select(t)
            .where(t.c.status == CommentStatus.PENDING.value)
            .where(t.c.is_deleted.is_(False))
        )
        if tenant_id:
            stmt = stmt.where(t.c.tenant_id == tenant_id)
        stmt = stmt.order_by(asc(t.c.created_at))
        return await self._fetch_page(stmt, offset, limit)

    async def count_by_status(
        self, tenant_id: TenantId, resource_type: str, resource_id: str
    ) -> CommentStats:
        """Group non-deleted comments on a resource by status."""
        t = comments_table
        stmt = (
            select(t.c.status, func.count())
            .where(t.c.tenant_id == tenant_id)
            .where(t.c.resource_type == resource_type)
            .where(t.c.resource_id == resource_id)
            .where(t.c.is_deleted.is_(False))
            .group_by(t.c.status)
        )
        result = await self.session.execute(stmt)
        counts = {status: count for status, count in result.fetchall()}
        return CommentStats(
            total=sum(counts.values()),
            approved=counts.get(CommentStatus.APPROVED.value, 0),
            pending=counts.get(CommentStatus.PENDING.value, 0),
            rejected=counts.get(CommentStatus.REJECTED.value, 0),
            spam=counts.get(CommentStatus.SPAM.value, 0),
        )

    async def search(
        self, tenant_id: TenantId, query: str, offset: int, limit: int
    ) -> tuple[list[Comment], int]:
        """Relevance-ranked text search over content and author name."""
        t = comments_table
        ts_query = func.plainto_tsquery("simple", query)
        vector = comment_search_vector()
        stmt = (
            select(t)
            .where(t.c.tenant_id == tenant_id)
            .where(t.c.status == CommentStatus.APPROVED.value)
            .where(t.c.is_deleted.is_(False))
            .where(vector.op("@@")(ts_query))
            .order_by(desc(func.ts_rank(vector, ts_query)), desc(t.c.created_at))
        )
        return await self._fetch_page(stmt, offset, limit)

    async def increment_reply_count(self, comment_id: CommentId, delta: int) -> None:
        """Atomically add delta to the reply count (never below zero)."""
        t = comments_table
        new_count = t.c.reply_count + delta
        stmt = (
            update(t)
            .where(t.c.id == comment_id)
            .values(
                reply_count=case((new_count < 0, 0), else_=new_count),
                updated_at=datetime.now(),
            )
        )
        # Savepoint so a failed counter write leaves the request transaction usable
        async with self.session.begin_nested():
            await self.session.execute(stmt)

    async def increment_report_count(self, comment_id: CommentId) -> None:
        """Atomically add one to the report count."""
        t = comments_table
        stmt = (
            update(t)
            .where(t.c.id == comment_id)
            .values(report_count=t.c.report_count + 1, updated_at=datetime.now())
        )
        async with self.session.begin_nested():
            await self.session.execute(stmt)

    async def set_reaction_counts(
        self,
        comment_id: CommentId,
        like_count: int,
        dislike_count: int,
        reaction_counts: dict[str, int],
    ) -> None:
        """Overwrite reaction counters."""
        stmt = (
            update(comments_table)
            .where(comments_table.c.id == comment_id)
            .values(
                like_count=like_count,
                dislike_count=dislike_count,
                reaction_counts=reaction_counts,
                updated_at=datetime.now(),
            )
        )
        async with self.session.begin_nested():
            await self.session.execute(stmt)

    async def ping(self) -> None:
        """Round-trip a trivial query."""
        await self.session.execute(select(1))
