"""PostgreSQL implementation of Reaction repository."""

from datetime import datetime
from typing import Optional, Sequence

from sqlalchemy import and_, delete, func, select
from sqlalchemy.dialects.postgresql import insert
from sqlalchemy.ext.asyncio import AsyncSession

from remark.domain.model import Reaction
from remark.domain.repository import ReactionRepository
from remark.domain.value import CommentId, ReactionType, UserId
from remark.persistence.mappers import reaction_to_dict, row_to_reaction
from remark.persistence.tables import reactions_table


class PostgresReactionRepository(ReactionRepository):
    """PostgreSQL implementation of ReactionRepository."""

    def __init__(self, session: AsyncSession) -> None:
        """Initialize repository with database session.

        Args:
            session: SQLAlchemy async session
        """
        self.session = session

    async def upsert(self, reaction: Reaction) -> Reaction:
        """Store a reaction, replacing the user's previous one."""
        t = reactions_table
        stmt = (
            insert(t)
            .values(**reaction_to_dict(reaction))
            .on_conflict_do_update(
                index_elements=[t.c.comment_id, t.c.user_id],
                set_={"type": reaction.type.value, "updated_at": datetime.now()},
            )
            .returning(t)
        )
        result = await self.session.execute(stmt)
        await self.session.flush()
        return row_to_reaction(result.fetchone()._asdict())

    async def delete(self, comment_id: CommentId, user_id: UserId) -> bool:
        """Remove a user's reaction."""
        stmt = delete(reactions_table).where(
            and_(
                reactions_table.c.comment_id == comment_id,
                reactions_table.c.user_id == user_id,
            )
        )
        result = await self.session.execute(stmt)
        await self.session.flush()
        return result.rowcount > 0

    async def find_by_user(
        self, comment_id: CommentId, user_id: UserId
    ) -> Optional[Reaction]:
        """Find a user's reaction on a comment."""
        stmt = select(reactions_table).where(
            and_(
                reactions_table.c.comment_id == comment_id,
                reactions_table.c.user_id == user_id,
            )
        )
        result = await self.session.execute(stmt)
        row = result.fetchone()
        return row_to_reaction(row._asdict()) if row else None

    async def find_by_user_and_comments(
        self, user_id: UserId, comment_ids: Sequence[CommentId]
    ) -> list[Reaction]:
        """Find a user's reactions on several comments (batch query)."""
        if not comment_ids:
            return []

        stmt = select(reactions_table).where(
            and_(
                reactions_table.c.user_id == user_id,
                reactions_table.c.comment_id.in_(list(comment_ids)),
            )
        )
        result = await self.session.execute(stmt)
        return [row_to_reaction(row._asdict()) for row in result.fetchall()]

    async def count_by_type(self, comment_id: CommentId) -> dict[ReactionType, int]:
        """Count reactions on a comment grouped by type."""
        stmt = (
            select(reactions_table.c.type, func.count())
            .where(reactions_table.c.comment_id == comment_id)
            .group_by(reactions_table.c.type)
        )
        result = await self.session.execute(stmt)
        return {ReactionType(kind): count for kind, count in result.fetchall()}
