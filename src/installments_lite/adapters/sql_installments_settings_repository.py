"""SQLAlchemy implementation of InstallmentsSettingsRepository."""

from __future__ import annotations

from sqlalchemy import select
from sqlalchemy.orm import Session

from installments_lite.domain.installments import InstallmentsSettings, PresentmentType
from installments_lite.infra.db.models.installments_settings import InstallmentsSettingsRow
from installments_lite.ports.installments_settings_repository import (
    InstallmentsSettingsRepository,
)


class SqlInstallmentsSettingsRepository(InstallmentsSettingsRepository):
    """
    Reads installments settings rows through a request-scoped session.

    - One row per shop (unique shop_id)
    - Converts InstallmentsSettingsRow (infrastructure) to InstallmentsSettings (domain)
    - Unknown presentment values fall back to PresentmentType.NONE
    """

    def __init__(self, session: Session) -> None:
        self._session = session

    def get(self, shop_id: int) -> InstallmentsSettings | None:
        query = select(InstallmentsSettingsRow).where(InstallmentsSettingsRow.shop_id == shop_id)
        row = self._session.execute(query).scalar_one_or_none()
        return self._to_domain(row) if row else None

    def has_settings(self, shop_id: int) -> bool:
        query = select(InstallmentsSettingsRow.id).where(InstallmentsSettingsRow.shop_id == shop_id)
        return self._session.execute(query).scalar_one_or_none() is not None

    def _to_domain(self, row: InstallmentsSettingsRow) -> InstallmentsSettings:
        return InstallmentsSettings(
            shop_id=row.shop_id,
            active=row.active,
            presentment_detail=_presentment(row.presentment_type_detail),
            presentment_cart=_presentment(row.presentment_type_cart),
            show_logo=row.show_logo,
            include_non_qualifying=row.include_non_qualifying,
        )


def _presentment(value: str | None) -> PresentmentType:
    try:
        return PresentmentType(value)
    except ValueError:
        return PresentmentType.NONE
