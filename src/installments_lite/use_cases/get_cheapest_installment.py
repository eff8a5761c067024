"""Get cheapest installment use case."""

from __future__ import annotations

from dataclasses import dataclass
from decimal import Decimal

from installments_lite.domain.errors import InstallmentsDisabledError, ValidationError
from installments_lite.domain.installments import DisplayMode, Offer, OfferCollection
from installments_lite.domain.ranking import cheapest_offer
from installments_lite.ports.installments_settings_repository import (
    InstallmentsSettingsRepository,
)
from installments_lite.ports.quote_provider import QuoteProvider


@dataclass(frozen=True, slots=True)
class GetCheapestInstallmentRequest:
    product_price: Decimal
    display_mode: DisplayMode
    shop_id: int

    def validate(self) -> None:
        if self.product_price <= 0:
            raise ValidationError(
                errors=[
                    {
                        "field": "product_price",
                        "message": "Must be greater than 0",
                        "code": "INVALID_VALUE",
                    }
                ]
            )


@dataclass(frozen=True, slots=True)
class GetCheapestInstallmentResponse:
    offer: Offer
    collection: OfferCollection
    display_mode: DisplayMode


class GetCheapestInstallment:
    """
    Use case behind the compact "pay in installments from X/month" widget.

    Responsibilities:
    - Check the shop presents the cheapest rate on this page type
    - Fetch the offers for the price from the quote provider
    - Pick the cheapest qualifying offer
    """

    def __init__(
        self,
        quote_provider: QuoteProvider,
        settings_repository: InstallmentsSettingsRepository,
    ) -> None:
        self._quote_provider = quote_provider
        self._settings_repository = settings_repository

    def execute(self, request: GetCheapestInstallmentRequest) -> GetCheapestInstallmentResponse:
        """
        Execute the cheapest installment lookup.

        Raises:
            ValidationError: If product_price is not positive
            InstallmentsDisabledError: If the shop does not show the cheapest rate here
            QuoteProviderError: If the provider cannot be reached
            EmptyCollectionError: If the provider returned no offers
            NoQualifyingOfferError: If no offer qualifies
        """
        request.validate()

        settings = self._settings_repository.get(request.shop_id)
        if settings is None or not settings.shows_cheapest_rate(request.display_mode):
            raise InstallmentsDisabledError(
                "Cheapest rate is not presented for this shop and page type",
                shop_id=request.shop_id,
                page_type=request.display_mode.value,
            )

        collection = self._quote_provider.fetch_offers(request.product_price)

        return GetCheapestInstallmentResponse(
            offer=cheapest_offer(collection),
            collection=collection,
            display_mode=request.display_mode,
        )
