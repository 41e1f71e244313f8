"""Comment settings domain service."""

from uuid import uuid4

import logfire

from remark.domain.error import AlreadyExistsError, NotFoundError
from remark.domain.model import CommentSettings, SettingsUpdate
from remark.domain.repository import SettingsRepository
from remark.domain.value import SettingsId, TenantId

from .base import Service


def default_settings(tenant_id: TenantId, resource_type: str) -> CommentSettings:
    """Settings a (tenant, resource type) gets on first access."""
    return CommentSettings(
        id=SettingsId(uuid4()),
        tenant_id=tenant_id,
        resource_type=resource_type,
    )


class SettingsService(Service):
    """Resolves effective settings per tenant and resource type."""

    def __init__(self, settings_repository: SettingsRepository) -> None:
        """Initialize settings service.

        Args:
            settings_repository: Settings repository
        """
        self.settings_repository = settings_repository

    async def get_or_create(
        self, tenant_id: TenantId, resource_type: str
    ) -> CommentSettings:
        """Return stored settings, materializing defaults on first access.

        Concurrent first access is resolved by the store's uniqueness
        constraint: the caller that loses the insert re-fetches the winner's
        record instead of failing.

        Args:
            tenant_id: Tenant ID
            resource_type: Resource type (e.g. "product")

        Returns:
            Effective settings, never None
        """
        with logfire.span(
            "settings_service.get_or_create",
            tenant_id=tenant_id,
            resource_type=resource_type,
        ):
            existing = await self.settings_repository.find(tenant_id, resource_type)
            if existing:
                return existing

            try:
                created = await self.settings_repository.insert(
                    default_settings(tenant_id, resource_type)
                )
                logfire.info(
                    "Default settings created",
                    tenant_id=tenant_id,
                    resource_type=resource_type,
                )
                return created
            except AlreadyExistsError:
                logfire.info(
                    "Settings created concurrently, re-fetching",
                    tenant_id=tenant_id,
                    resource_type=resource_type,
                )

            winner = await self.settings_repository.find(tenant_id, resource_type)
            if winner is None:
                # Conflict reported but nothing stored: the store is inconsistent
                logfire.error(
                    "Settings conflict without stored record",
                    tenant_id=tenant_id,
                    resource_type=resource_type,
                )
                raise NotFoundError("settings", f"{tenant_id}/{resource_type}")
            return winner

    async def update(
        self, tenant_id: TenantId, resource_type: str, update: SettingsUpdate
    ) -> CommentSettings:
        """Apply a partial settings change, creating the record if needed.

        Args:
            tenant_id: Tenant ID
            resource_type: Resource type
            update: Fields to change; unset fields are left as they are

        Returns:
            The full resulting settings
        """
        changes = update.changes()
        with logfire.span(
            "settings_service.update",
            tenant_id=tenant_id,
            resource_type=resource_type,
            fields=sorted(changes),
        ):
            updated = await self.settings_repository.upsert(
                tenant_id,
                resource_type,
                changes,
                defaults=default_settings(tenant_id, resource_type),
            )
            logfire.info(
                "Settings updated",
                tenant_id=tenant_id,
                resource_type=resource_type,
                fields=sorted(changes),
            )
            return updated

    async def list_for_tenant(self, tenant_id: TenantId) -> list[CommentSettings]:
        """All stored settings of a tenant."""
        with logfire.span("settings_service.list_for_tenant", tenant_id=tenant_id):
            return await self.settings_repository.find_by_tenant(tenant_id)
