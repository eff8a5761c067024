from __future__ import annotations

from abc import ABC, abstractmethod

from installments_lite.domain.installments import InstallmentsSettings


class InstallmentsSettingsRepository(ABC):
    """
    Port for reading merchant installments settings, keyed by shop id.

    The ranking engine never reads settings itself; use cases hand it the
    booleans it needs.
    """

    @abstractmethod
    def get(self, shop_id: int) -> InstallmentsSettings | None:
        """Return settings stored for the shop, or None if there are none."""
        ...

    @abstractmethod
    def has_settings(self, shop_id: int) -> bool: ...
