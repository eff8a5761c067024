from __future__ import annotations

from abc import ABC, abstractmethod
from decimal import Decimal

from installments_lite.domain.installments import OfferCollection


class QuoteProvider(ABC):
    """
    Port for fetching financing offers from the payment provider.

    Implementations own transport concerns (authentication, timeouts, caching).
    Retries, if any, belong to the implementation; callers never retry.

    Contract:
        - Returned collections are validated (InvalidOfferError otherwise)
        - Offers arrive unordered and without best value flags
        - An empty collection is a valid answer, ranking rejects it later
    """

    @abstractmethod
    def fetch_offers(self, product_price: Decimal) -> OfferCollection:
        """
        Fetch the offers quoted for a product price.

        Precondition: product_price must be validated (> 0) by caller (UseCase).

        Args:
            product_price: Price the shopper would finance

        Returns:
            OfferCollection for that price

        Raises:
            QuoteProviderError: If the quote cannot be obtained
            InvalidOfferError: If the provider answered with malformed offers
        """
        ...
