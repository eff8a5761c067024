"""List installment offers use case."""

from __future__ import annotations

from dataclasses import dataclass
from decimal import Decimal

from installments_lite.domain.errors import (
    InstallmentsDisabledError,
    NoQualifyingOfferError,
    ValidationError,
)
from installments_lite.domain.installments import Offer, OfferCollection
from installments_lite.domain.ranking import best_value_index, ranked_list
from installments_lite.ports.installments_settings_repository import (
    InstallmentsSettingsRepository,
)
from installments_lite.ports.quote_provider import QuoteProvider


@dataclass(frozen=True, slots=True)
class ListInstallmentOffersRequest:
    product_price: Decimal
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
class ListInstallmentOffersResponse:
    offers: tuple[Offer, ...]
    best_value_index: int | None
    collection: OfferCollection


class ListInstallmentOffers:
    """
    Use case behind the comparison list and the modal content.

    Whether plans the shopper does not qualify for are listed is a merchant
    setting (include_non_qualifying).
    """

    def __init__(
        self,
        quote_provider: QuoteProvider,
        settings_repository: InstallmentsSettingsRepository,
    ) -> None:
        self._quote_provider = quote_provider
        self._settings_repository = settings_repository

    def execute(self, request: ListInstallmentOffersRequest) -> ListInstallmentOffersResponse:
        """
        Execute the ranked offer listing.

        Raises:
            ValidationError: If product_price is not positive
            InstallmentsDisabledError: If installments are inactive for the shop
            QuoteProviderError: If the provider cannot be reached
            EmptyCollectionError: If the provider returned no offers
            NoQualifyingOfferError: If filtering left nothing to list
        """
        request.validate()

        settings = self._settings_repository.get(request.shop_id)
        if settings is None or not settings.active:
            raise InstallmentsDisabledError(
                "Installments are not active for this shop",
                shop_id=request.shop_id,
            )

        collection = self._quote_provider.fetch_offers(request.product_price)
        offers = ranked_list(collection, include_non_qualifying=settings.include_non_qualifying)

        if not offers:
            raise NoQualifyingOfferError(
                product_price=str(collection.product_price),
                offer_count=len(collection.offers),
                offers=collection.offers,
            )

        return ListInstallmentOffersResponse(
            offers=offers,
            best_value_index=best_value_index(offers),
            collection=collection,
        )
