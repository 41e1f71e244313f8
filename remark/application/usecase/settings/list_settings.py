"""List settings use case."""

from pydantic import BaseModel

from remark.domain.service import SettingsService
from remark.domain.value import TenantId

from .common import SettingsItem


class ListSettingsRequest(BaseModel):
    """List settings request."""

    tenant_id: str


class ListSettingsResponse(BaseModel):
    """All stored settings of a tenant."""

    settings: list[SettingsItem]


class ListSettingsUseCase:
    """Use case for listing a tenant's settings records."""

    def __init__(self, settings_service: SettingsService) -> None:
        self.settings_service = settings_service

    async def execute(self, request: ListSettingsRequest) -> ListSettingsResponse:
        records = await self.settings_service.list_for_tenant(
            TenantId(request.tenant_id)
        )
        return ListSettingsResponse(
            settings=[SettingsItem.from_settings(s) for s in records]
        )
