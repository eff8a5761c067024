from __future__ import annotations

import re
from dataclasses import dataclass
from decimal import Decimal
from enum import Enum

from installments_lite.domain.errors import InvalidOfferError


CENT = Decimal("0.01")
_CURRENCY_PATTERN = re.compile(r"^[A-Z]{3}$")


class DisplayMode(str, Enum):
    """Storefront context a widget is rendered in."""

    DETAIL = "detail"
    CART = "cart"


class PresentmentType(str, Enum):
    """How installments are advertised on a given page type."""

    NONE = "none"
    SIMPLE = "simple"
    CHEAPEST = "cheapest"


@dataclass(frozen=True, slots=True)
class Offer:
    """
    One repayment plan the provider quoted for a fixed product price.

    ``is_best_value`` is derived by the ranking engine and never taken from the
    provider. The optional fields are carried through for display only.
    """

    term_months: int
    monthly_payment: Decimal
    total_cost: Decimal
    annual_percentage_rate: Decimal
    qualifying: bool
    is_best_value: bool = False
    nominal_rate: Decimal | None = None
    monthly_percentage_rate: Decimal | None = None
    total_interest: Decimal | None = None
    fee: Decimal | None = None
    financing_code: str | None = None

    def validate(self) -> None:
        if self.term_months <= 0:
            raise InvalidOfferError("term_months must be > 0", term_months=self.term_months)
        if self.monthly_payment < 0:
            raise InvalidOfferError("monthly_payment must be >= 0", term_months=self.term_months)
        if self.total_cost < 0:
            raise InvalidOfferError("total_cost must be >= 0", term_months=self.term_months)
        if self.annual_percentage_rate < 0:
            raise InvalidOfferError(
                "annual_percentage_rate must be >= 0", term_months=self.term_months
            )
        for name in ("nominal_rate", "monthly_percentage_rate", "total_interest", "fee"):
            value = getattr(self, name)
            if value is not None and value < 0:
                raise InvalidOfferError(f"{name} must be >= 0", term_months=self.term_months)

        # Installments are rounded to cents, so allow one cent of drift per installment
        tolerance = CENT * self.term_months
        if self.total_cost < self.monthly_payment * self.term_months - tolerance:
            raise InvalidOfferError(
                "total_cost must cover monthly_payment * term_months",
                term_months=self.term_months,
            )


@dataclass(frozen=True, slots=True)
class OfferCollection:
    """Offers returned for one price quote, unordered as received."""

    product_price: Decimal
    currency: str
    offers: tuple[Offer, ...] = ()

    def validate(self) -> None:
        if self.product_price <= 0:
            raise InvalidOfferError("product_price must be > 0")
        if not _CURRENCY_PATTERN.match(self.currency):
            raise InvalidOfferError(
                "currency must be a three letter ISO code", currency=self.currency
            )

        seen_terms: set[int] = set()
        for offer in self.offers:
            offer.validate()
            if offer.term_months in seen_terms:
                raise InvalidOfferError(
                    "term_months must be unique within a collection",
                    term_months=offer.term_months,
                )
            seen_terms.add(offer.term_months)

    def qualifying_offers(self) -> tuple[Offer, ...]:
        return tuple(offer for offer in self.offers if offer.qualifying)


@dataclass(frozen=True, slots=True)
class InstallmentsSettings:
    """Merchant display toggles for installments, stored per shop."""

    shop_id: int
    active: bool = False
    presentment_detail: PresentmentType = PresentmentType.CHEAPEST
    presentment_cart: PresentmentType = PresentmentType.CHEAPEST
    show_logo: bool = True
    include_non_qualifying: bool = True

    def presentment_for(self, display_mode: DisplayMode) -> PresentmentType:
        if display_mode is DisplayMode.CART:
            return self.presentment_cart
        return self.presentment_detail

    def shows_cheapest_rate(self, display_mode: DisplayMode) -> bool:
        return self.active and self.presentment_for(display_mode) is PresentmentType.CHEAPEST
