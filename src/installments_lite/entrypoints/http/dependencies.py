"""
Dependency injection for FastAPI routes.

Database sessions and provider clients are built per request; nothing that
holds request state is cached.
"""

from __future__ import annotations

from typing import Generator

from fastapi import Depends, Query
from sqlalchemy.orm import Session

from installments_lite.adapters.paypal_quote_provider import PayPalQuoteProvider
from installments_lite.adapters.sql_installments_settings_repository import (
    SqlInstallmentsSettingsRepository,
)
from installments_lite.infra import config
from installments_lite.infra.db.session import get_session
from installments_lite.ports.installments_settings_repository import (
    InstallmentsSettingsRepository,
)
from installments_lite.ports.quote_provider import QuoteProvider
from installments_lite.use_cases.get_cheapest_installment import GetCheapestInstallment
from installments_lite.use_cases.get_installments_settings import GetInstallmentsSettings
from installments_lite.use_cases.list_installment_offers import ListInstallmentOffers


def get_db() -> Generator[Session, None, None]:
    """
    Provides a database session for a single request.

    The session is committed or rolled back and closed by get_session()
    once the request is done.
    """
    with get_session() as session:
        yield session


def get_settings_repository(db: Session = Depends(get_db)) -> InstallmentsSettingsRepository:
    return SqlInstallmentsSettingsRepository(session=db)


def get_quote_provider() -> QuoteProvider:
    """Builds a provider client from environment configuration."""
    return PayPalQuoteProvider(
        base_url=config.provider_api_base(),
        client_id=config.provider_client_id(),
        client_secret=config.provider_client_secret(),
        country_code=config.financing_country_code(),
        currency=config.financing_currency(),
        timeout=config.provider_timeout_seconds(),
    )


def get_cheapest_installment_use_case(
    quote_provider: QuoteProvider = Depends(get_quote_provider),
    settings_repository: InstallmentsSettingsRepository = Depends(get_settings_repository),
) -> GetCheapestInstallment:
    return GetCheapestInstallment(
        quote_provider=quote_provider,
        settings_repository=settings_repository,
    )


def get_list_installment_offers_use_case(
    quote_provider: QuoteProvider = Depends(get_quote_provider),
    settings_repository: InstallmentsSettingsRepository = Depends(get_settings_repository),
) -> ListInstallmentOffers:
    return ListInstallmentOffers(
        quote_provider=quote_provider,
        settings_repository=settings_repository,
    )


def get_installments_settings_use_case(
    settings_repository: InstallmentsSettingsRepository = Depends(get_settings_repository),
) -> GetInstallmentsSettings:
    return GetInstallmentsSettings(settings_repository=settings_repository)


def get_shop_id(
    shop_id: int | None = Query(default=None, ge=1, description="Shop to read settings for"),
) -> int:
    """Resolves the shop for a storefront request, falling back to the configured default."""
    return shop_id if shop_id is not None else config.default_shop_id()
