"""PostgreSQL implementation of Settings repository."""

from datetime import datetime
from typing import Any, Optional

from sqlalchemy import select
from sqlalchemy.dialects.postgresql import insert
from sqlalchemy.ext.asyncio import AsyncSession

from remark.domain.error import AlreadyExistsError
from remark.domain.model import CommentSettings
from remark.domain.repository import SettingsRepository
from remark.domain.value import TenantId
from remark.persistence.mappers import (
    row_to_settings,
    settings_changes_to_columns,
    settings_to_dict,
)
from remark.persistence.tables import comment_settings_table


class PostgresSettingsRepository(SettingsRepository):
    """PostgreSQL implementation of SettingsRepository."""

    def __init__(self, session: AsyncSession) -> None:
        """Initialize repository with database session.

        Args:
            session: SQLAlchemy async session
        """
        self.session = session

    async def find(
        self, tenant_id: TenantId, resource_type: str
    ) -> Optional[CommentSettings]:
        """Find settings for a tenant and resource type."""
        t = comment_settings_table
        stmt = (
            select(t)
            .where(t.c.tenant_id == tenant_id)
            .where(t.c.resource_type == resource_type)
        )
        result = await self.session.execute(stmt)
        row = result.fetchone()
        return row_to_settings(row._asdict()) if row else None

    async def insert(self, settings: CommentSettings) -> CommentSettings:
        """Insert settings; a concurrent insert for the same key loses."""
        t = comment_settings_table
        stmt = (
            insert(t)
            .values(**settings_to_dict(settings))
            .on_conflict_do_nothing(index_elements=[t.c.tenant_id, t.c.resource_type])
            .returning(t)
        )
        result = await self.session.execute(stmt)
        row = result.fetchone()
        if row is None:
            raise AlreadyExistsError(
                "settings", f"{settings.tenant_id}/{settings.resource_type}"
            )
        await self.session.flush()
        return row_to_settings(row._asdict())

    async def upsert(
        self,
        tenant_id: TenantId,
        resource_type: str,
        changes: dict[str, Any],
        defaults: CommentSettings,
    ) -> CommentSettings:
        """Apply changes, creating the record from defaults if absent."""
        t = comment_settings_table
        columns = settings_changes_to_columns(changes)
        columns["updated_at"] = datetime.now()

        values = settings_to_dict(defaults)
        values.update(columns)
        values["tenant_id"] = tenant_id
        values["resource_type"] = resource_type

        stmt = (
            insert(t)
            .values(**values)
            .on_conflict_do_update(
                index_elements=[t.c.tenant_id, t.c.resource_type],
                set_=columns,
            )
            .returning(t)
        )
        result = await self.session.execute(stmt)
        await self.session.flush()
        return row_to_settings(result.fetchone()._asdict())

    async def find_by_tenant(self, tenant_id: TenantId) -> list[CommentSettings]:
        """All settings records of a tenant."""
        t = comment_settings_table
        stmt = (
            select(t).where(t.c.tenant_id == tenant_id).order_by(t.c.resource_type)
        )
        result = await self.session.execute(stmt)
        return [row_to_settings(row._asdict()) for row in result.fetchall()]
