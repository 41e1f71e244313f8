"""In-memory settings repository for testing."""

from datetime import datetime
from typing import Any, Optional

from remark.domain.error import AlreadyExistsError
from remark.domain.model import CommentSettings
from remark.domain.repository.settings import SettingsRepository
from remark.domain.value import TenantId


class InMemorySettingsRepository(SettingsRepository):
    """In-memory implementation of SettingsRepository for testing."""

    def __init__(self) -> None:
        self._settings: dict[tuple[str, str], CommentSettings] = {}

    async def find(
        self, tenant_id: TenantId, resource_type: str
    ) -> Optional[CommentSettings]:
        """Find settings for a tenant and resource type."""
        return self._settings.get((tenant_id, resource_type))

    async def insert(self, settings: CommentSettings) -> CommentSettings:
        """Insert settings.

        Raises:
            AlreadyExistsError: If settings for the key already exist
        """
        key = (settings.tenant_id, settings.resource_type)
        if key in self._settings:
            raise AlreadyExistsError("settings", "/".join(key))
        self._settings[key] = settings
        return settings

    async def upsert(
        self,
        tenant_id: TenantId,
        resource_type: str,
        changes: dict[str, Any],
        defaults: CommentSettings,
    ) -> CommentSettings:
        """Apply changes, creating the record from defaults if absent."""
        key = (tenant_id, resource_type)
        current = self._settings.get(key, defaults)
        updated = CommentSettings.model_validate(
            {**current.model_dump(), **changes, "updated_at": datetime.now()}
        )
        self._settings[key] = updated
        return updated

    async def find_by_tenant(self, tenant_id: TenantId) -> list[CommentSettings]:
        """All settings records of a tenant."""
        return sorted(
            (s for (t, _), s in self._settings.items() if t == tenant_id),
            key=lambda s: s.resource_type,
        )
