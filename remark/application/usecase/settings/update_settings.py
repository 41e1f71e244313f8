"""Update settings use case."""

from pydantic import BaseModel, Field

from remark.domain.model import SettingsUpdate
from remark.domain.service import SettingsService
from remark.domain.value import TenantId

from .common import SettingsItem


class UpdateSettingsRequest(BaseModel):
    """Update settings request."""

    tenant_id: str
    resource_type: str = Field(min_length=1, max_length=100)
    update: SettingsUpdate


class UpdateSettingsUseCase:
    """Use case for changing settings of a (tenant, resource type)."""

    def __init__(self, settings_service: SettingsService) -> None:
        """Initialize update settings use case.

        Args:
            settings_service: Settings domain service
        """
        self.settings_service = settings_service

    async def execute(self, request: UpdateSettingsRequest) -> SettingsItem:
        """Apply only the fields present in the update.

        Returns:
            The full resulting settings
        """
        settings = await self.settings_service.update(
            TenantId(request.tenant_id), request.resource_type, request.update
        )
        return SettingsItem.from_settings(settings)
