from __future__ import annotations

from installments_lite.domain.installments import InstallmentsSettings
from installments_lite.ports.installments_settings_repository import (
    InstallmentsSettingsRepository,
)


class InMemoryInstallmentsSettingsRepository(InstallmentsSettingsRepository):
    """Settings keyed by shop id, held in a dict."""

    def __init__(self, settings: list[InstallmentsSettings] | None = None) -> None:
        self._settings = {item.shop_id: item for item in settings or []}

    def get(self, shop_id: int) -> InstallmentsSettings | None:
        return self._settings.get(shop_id)

    def has_settings(self, shop_id: int) -> bool:
        return shop_id in self._settings
