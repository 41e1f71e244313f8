"""Settings admin routes."""

from dishka.integrations.fastapi import DishkaRoute, FromDishka
from fastapi import APIRouter

from remark.application.usecase.settings import (
    GetSettingsRequest,
    GetSettingsUseCase,
    ListSettingsRequest,
    ListSettingsResponse,
    ListSettingsUseCase,
    SettingsItem,
    UpdateSettingsRequest,
    UpdateSettingsUseCase,
)
from remark.domain.model import SettingsUpdate
from remark.interface.api.dependencies import AdminDep, TenantDep

router = APIRouter(prefix="/admin/settings", tags=["settings"], route_class=DishkaRoute)


@router.get("", response_model=ListSettingsResponse)
async def list_settings(
    tenant_id: TenantDep,
    admin: AdminDep,
    list_settings_use_case: FromDishka[ListSettingsUseCase],
) -> ListSettingsResponse:
    """All stored settings records of the tenant."""
    return await list_settings_use_case.execute(
        ListSettingsRequest(tenant_id=tenant_id)
    )


@router.get("/{resource_type}", response_model=SettingsItem)
async def get_settings(
    resource_type: str,
    tenant_id: TenantDep,
    admin: AdminDep,
    get_settings_use_case: FromDishka[GetSettingsUseCase],
) -> SettingsItem:
    """Effective settings of a resource type, created with defaults if absent."""
    return await get_settings_use_case.execute(
        GetSettingsRequest(tenant_id=tenant_id, resource_type=resource_type)
    )


@router.put("/{resource_type}", response_model=SettingsItem)
async def update_settings(
    resource_type: str,
    request: SettingsUpdate,
    tenant_id: TenantDep,
    admin: AdminDep,
    update_settings_use_case: FromDishka[UpdateSettingsUseCase],
) -> SettingsItem:
    """Change only the supplied settings fields."""
    return await update_settings_use_case.execute(
        UpdateSettingsRequest(
            tenant_id=tenant_id, resource_type=resource_type, update=request
        )
    )
