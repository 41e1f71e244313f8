"""Settings use cases."""

from .common import SettingsItem
from .get_settings import GetSettingsRequest, GetSettingsUseCase
from .list_settings import (
    ListSettingsRequest,
    ListSettingsResponse,
    ListSettingsUseCase,
)
from .update_settings import UpdateSettingsRequest, UpdateSettingsUseCase

__all__ = [
    "GetSettingsRequest",
    "GetSettingsUseCase",
    "ListSettingsRequest",
    "ListSettingsResponse",
    "ListSettingsUseCase",
    "SettingsItem",
    "UpdateSettingsRequest",
    "UpdateSettingsUseCase",
]
