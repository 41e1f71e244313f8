"""Comment settings repository interface."""

from abc import ABC, abstractmethod
from typing import Any, Optional

from remark.domain.model import CommentSettings
from remark.domain.value import TenantId


class SettingsRepository(ABC):
    """Repository for per (tenant, resource type) comment settings."""

    @abstractmethod
    async def find(
        self, tenant_id: TenantId, resource_type: str
    ) -> Optional[CommentSettings]:
        """Find settings for a tenant and resource type.

        Returns:
            The settings if stored, None otherwise
        """
        pass

    @abstractmethod
    async def insert(self, settings: CommentSettings) -> CommentSettings:
        """Insert a new settings record.

        Args:
            settings: Settings to insert

        Returns:
            The stored settings

        Raises:
            AlreadyExistsError: If settings for the key already exist
        """
        pass

    @abstractmethod
    async def upsert(
        self,
        tenant_id: TenantId,
        resource_type: str,
        changes: dict[str, Any],
        defaults: CommentSettings,
    ) -> CommentSettings:
        """Apply ``changes`` to the stored record, creating it if absent.

        Fields not present in ``changes`` are left untouched; when the record
        does not exist yet it is created from ``defaults`` plus ``changes``.

        Returns:
            The resulting full settings record
        """
        pass

    @abstractmethod
    async def find_by_tenant(self, tenant_id: TenantId) -> list[CommentSettings]:
        """All settings records of a tenant, ordered by resource type."""
        pass
