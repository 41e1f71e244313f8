"""Get settings use case."""

from pydantic import BaseModel, Field

from remark.domain.service import SettingsService
from remark.domain.value import TenantId

from .common import SettingsItem


class GetSettingsRequest(BaseModel):
    """Get settings request."""

    tenant_id: str
    resource_type: str = Field(min_length=1, max_length=100)


class GetSettingsUseCase:
    """Use case for reading effective settings.

    Defaults are stored on first read.
    """

    def __init__(self, settings_service: SettingsService) -> None:
        self.settings_service = settings_service

    async def execute(self, request: GetSettingsRequest) -> SettingsItem:
        settings = await self.settings_service.get_or_create(
            TenantId(request.tenant_id), request.resource_type
        )
        return SettingsItem.from_settings(settings)
