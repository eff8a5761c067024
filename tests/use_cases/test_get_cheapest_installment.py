"""Tests for GetCheapestInstallment use case."""

from __future__ import annotations

from decimal import Decimal
from unittest.mock import Mock

import pytest

from installments_lite.adapters.in_memory_installments_settings_repository import (
    InMemoryInstallmentsSettingsRepository,
)
from installments_lite.adapters.in_memory_quote_provider import InMemoryQuoteProvider
from installments_lite.domain.errors import (
    EmptyCollectionError,
    InstallmentsDisabledError,
    NoQualifyingOfferError,
    QuoteProviderError,
    ValidationError,
)
from installments_lite.domain.installments import (
    DisplayMode,
    InstallmentsSettings,
    Offer,
    PresentmentType,
)
from installments_lite.use_cases.get_cheapest_installment import (
    GetCheapestInstallment,
    GetCheapestInstallmentRequest,
)


def _offer(term: int, monthly: str, qualifying: bool = True) -> Offer:
    return Offer(
        term_months=term,
        monthly_payment=Decimal(monthly),
        total_cost=Decimal(monthly) * term,
        annual_percentage_rate=Decimal("9.99"),
        qualifying=qualifying,
    )


@pytest.fixture
def settings_repository() -> InMemoryInstallmentsSettingsRepository:
    return InMemoryInstallmentsSettingsRepository(
        [
            InstallmentsSettings(
                shop_id=1,
                active=True,
                presentment_detail=PresentmentType.CHEAPEST,
                presentment_cart=PresentmentType.SIMPLE,
            ),
            InstallmentsSettings(shop_id=2, active=False),
        ]
    )


@pytest.fixture
def quote_provider() -> InMemoryQuoteProvider:
    return InMemoryQuoteProvider([_offer(6, "50.00"), _offer(12, "30.00"), _offer(24, "16.00", False)])


def _request(price: str = "300.00", mode: DisplayMode = DisplayMode.DETAIL, shop_id: int = 1):
    return GetCheapestInstallmentRequest(
        product_price=Decimal(price), display_mode=mode, shop_id=shop_id
    )


# ============================================================================
# HAPPY PATH
# ============================================================================


def test_returns_cheapest_qualifying_offer(quote_provider, settings_repository):
    uc = GetCheapestInstallment(quote_provider, settings_repository)

    result = uc.execute(_request())

    assert result.offer.term_months == 12
    assert result.display_mode is DisplayMode.DETAIL
    assert result.collection.product_price == Decimal("300.00")
    assert quote_provider.requested_prices == [Decimal("300.00")]


# ============================================================================
# SETTINGS GATE
# ============================================================================


def test_skips_provider_when_page_type_is_not_presented(quote_provider, settings_repository):
    """Cart presentment is 'simple', so no cheapest rate is fetched."""
    uc = GetCheapestInstallment(quote_provider, settings_repository)

    with pytest.raises(InstallmentsDisabledError):
        uc.execute(_request(mode=DisplayMode.CART))

    assert quote_provider.requested_prices == []


def test_inactive_shop_is_disabled(quote_provider, settings_repository):
    uc = GetCheapestInstallment(quote_provider, settings_repository)

    with pytest.raises(InstallmentsDisabledError) as exc_info:
        uc.execute(_request(shop_id=2))

    assert exc_info.value.context == {"shop_id": 2, "page_type": "detail"}


def test_shop_without_settings_is_disabled(quote_provider, settings_repository):
    uc = GetCheapestInstallment(quote_provider, settings_repository)

    with pytest.raises(InstallmentsDisabledError):
        uc.execute(_request(shop_id=99))


# ============================================================================
# FAILURES
# ============================================================================


def test_rejects_non_positive_price(quote_provider, settings_repository):
    uc = GetCheapestInstallment(quote_provider, settings_repository)

    with pytest.raises(ValidationError) as exc_info:
        uc.execute(_request(price="0"))

    assert exc_info.value.errors[0]["field"] == "product_price"


def test_empty_quote_raises_empty_collection(settings_repository):
    uc = GetCheapestInstallment(InMemoryQuoteProvider([]), settings_repository)

    with pytest.raises(EmptyCollectionError):
        uc.execute(_request())


def test_no_qualifying_offer(settings_repository):
    provider = InMemoryQuoteProvider([_offer(6, "50.00", False)])
    uc = GetCheapestInstallment(provider, settings_repository)

    with pytest.raises(NoQualifyingOfferError):
        uc.execute(_request())


def test_provider_errors_propagate(settings_repository):
    """Provider failures are not retried or swallowed."""
    provider = Mock()
    provider.fetch_offers.side_effect = QuoteProviderError("Quote provider timeout after 5.0s")
    uc = GetCheapestInstallment(provider, settings_repository)

    with pytest.raises(QuoteProviderError):
        uc.execute(_request())

    provider.fetch_offers.assert_called_once_with(Decimal("300.00"))
