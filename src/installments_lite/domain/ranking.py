"""Ranking of financing offers.

Both public operations share ``ranking_key`` so the compact widget and the
comparison list can never disagree on which offer is cheapest:

- ascending monthly payment
- then shortest term
- then lowest total cost

Terms are unique within a collection, so the key is a strict total order and
input order never matters.
"""

from __future__ import annotations

from dataclasses import replace
from decimal import Decimal

from installments_lite.domain.errors import EmptyCollectionError, NoQualifyingOfferError
from installments_lite.domain.installments import Offer, OfferCollection


def ranking_key(offer: Offer) -> tuple[Decimal, int, Decimal]:
    return (offer.monthly_payment, offer.term_months, offer.total_cost)


def cheapest_offer(collection: OfferCollection) -> Offer:
    """
    Return the qualifying offer with the lowest monthly payment.

    The returned instance is the provider's own offer, unmodified.

    Raises:
        EmptyCollectionError: If the collection holds no offers
        NoQualifyingOfferError: If none of the offers qualify
    """
    if not collection.offers:
        raise EmptyCollectionError(product_price=str(collection.product_price))

    qualifying = collection.qualifying_offers()
    if not qualifying:
        raise NoQualifyingOfferError(
            product_price=str(collection.product_price),
            offer_count=len(collection.offers),
            offers=collection.offers,
        )

    return min(qualifying, key=ranking_key)


def ranked_list(
    collection: OfferCollection, include_non_qualifying: bool = True
) -> tuple[Offer, ...]:
    """
    Return all offers sorted by ``ranking_key`` with the best value flagged.

    Exactly the first qualifying offer in sorted order gets ``is_best_value``;
    every other entry is returned with the flag cleared. New Offer instances are
    produced, the collection itself is left untouched.

    Args:
        collection: Offers for one price quote
        include_non_qualifying: Keep offers the shopper does not qualify for

    Raises:
        EmptyCollectionError: If the collection holds no offers
    """
    if not collection.offers:
        raise EmptyCollectionError(product_price=str(collection.product_price))

    offers = collection.offers if include_non_qualifying else collection.qualifying_offers()

    ranked: list[Offer] = []
    best_value_taken = False
    for offer in sorted(offers, key=ranking_key):
        is_best_value = offer.qualifying and not best_value_taken
        best_value_taken = best_value_taken or is_best_value
        ranked.append(replace(offer, is_best_value=is_best_value))

    return tuple(ranked)


def best_value_index(ranked: tuple[Offer, ...]) -> int | None:
    for index, offer in enumerate(ranked):
        if offer.is_best_value:
            return index
    return None
