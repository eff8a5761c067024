from __future__ import annotations

from decimal import Decimal

from installments_lite.domain.installments import Offer, OfferCollection
from installments_lite.ports.quote_provider import QuoteProvider


class InMemoryQuoteProvider(QuoteProvider):
    """
    Canonical contract implementation for tests and local runs.

    - Quotes the same offers for every price
    - Keeps the configured offer order (unsorted, as a provider would)
    - Validates every collection it hands out
    - Records requested prices for assertions
    """

    def __init__(self, offers: list[Offer], currency: str = "EUR") -> None:
        self._offers = tuple(offers)
        self._currency = currency
        self.requested_prices: list[Decimal] = []

    def fetch_offers(self, product_price: Decimal) -> OfferCollection:
        self.requested_prices.append(product_price)
        collection = OfferCollection(
            product_price=product_price,
            currency=self._currency,
            offers=self._offers,
        )
        collection.validate()
        return collection
