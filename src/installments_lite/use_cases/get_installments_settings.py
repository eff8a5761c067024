"""Get installments settings use case."""

from __future__ import annotations

from dataclasses import dataclass

from installments_lite.domain.errors import NotFoundError, ValidationError
from installments_lite.domain.installments import InstallmentsSettings
from installments_lite.ports.installments_settings_repository import (
    InstallmentsSettingsRepository,
)


@dataclass(frozen=True, slots=True)
class GetInstallmentsSettingsRequest:
    shop_id: int


class GetInstallmentsSettings:
    """Read the installments settings stored for one shop."""

    def __init__(self, settings_repository: InstallmentsSettingsRepository) -> None:
        self._repository = settings_repository

    def execute(self, request: GetInstallmentsSettingsRequest) -> InstallmentsSettings:
        """
        Raises:
            ValidationError: If shop_id is not positive
            NotFoundError: If no settings exist for the shop
        """
        if request.shop_id <= 0:
            raise ValidationError(
                errors=[
                    {
                        "field": "shop_id",
                        "message": "Must be a positive integer",
                        "code": "INVALID_VALUE",
                    }
                ]
            )

        settings = self._repository.get(request.shop_id)

        if settings is None:
            raise NotFoundError(resource="InstallmentsSettings", identifier=str(request.shop_id))

        return settings
