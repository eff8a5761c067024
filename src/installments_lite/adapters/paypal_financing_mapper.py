"""Translation of PayPal calculated-financing payloads into domain offers."""

from __future__ import annotations

from decimal import Decimal, InvalidOperation
from typing import Any

from installments_lite.domain.errors import InvalidOfferError
from installments_lite.domain.installments import Offer, OfferCollection


class PayPalFinancingMapper:
    """
    Maps the provider's ``calculated-financing-options`` response to domain models.

    Expected payload shape (only the first financing option block is used)::

        {
            "financing_options": [
                {
                    "qualifying_financing_options": [ ... ],
                    "non_qualifying_financing_options": [ ... ]
                }
            ]
        }

    Each entry carries ``credit_financing`` (term, apr, nominal_rate),
    ``monthly_payment``, ``total_cost`` and ``total_interest`` money objects.
    """

    @staticmethod
    def to_collection(
        payload: dict[str, Any], product_price: Decimal, currency: str
    ) -> OfferCollection:
        """
        Build a validated OfferCollection from a provider payload.

        A payload without a first financing option block yields an empty
        collection; the ranking step reports that as EmptyCollectionError.

        Raises:
            InvalidOfferError: If an entry is malformed or violates offer invariants
        """
        options = payload.get("financing_options") or []
        if not isinstance(options, list):
            raise _malformed(f"financing_options is not a list: {options!r}")
        if not options:
            collection = OfferCollection(product_price=product_price, currency=currency)
            collection.validate()
            return collection

        block = options[0]
        if not isinstance(block, dict):
            raise _malformed(f"financing option block is not an object: {block!r}")

        offers = [
            PayPalFinancingMapper.to_offer(entry, qualifying=True, currency=currency)
            for entry in block.get("qualifying_financing_options") or []
        ]
        offers.extend(
            PayPalFinancingMapper.to_offer(entry, qualifying=False, currency=currency)
            for entry in block.get("non_qualifying_financing_options") or []
        )

        collection = OfferCollection(
            product_price=product_price,
            currency=currency,
            offers=tuple(offers),
        )
        collection.validate()
        return collection

    @staticmethod
    def to_offer(entry: dict[str, Any], qualifying: bool, currency: str) -> Offer:
        """
        Convert one provider financing entry to an Offer.

        Raises:
            InvalidOfferError: If required fields are missing or not numeric
        """
        try:
            credit = entry["credit_financing"]
            offer = Offer(
                term_months=_term(credit["term"]),
                monthly_payment=_money(entry["monthly_payment"], currency),
                total_cost=_money(entry["total_cost"], currency),
                annual_percentage_rate=_decimal(credit["apr"]),
                qualifying=qualifying,
                nominal_rate=_optional_decimal(credit.get("nominal_rate")),
                monthly_percentage_rate=_optional_decimal(entry.get("monthly_percentage_rate")),
                total_interest=_optional_money(entry.get("total_interest"), currency),
                fee=_optional_money(entry.get("fee"), currency),
                financing_code=credit.get("financing_code"),
            )
        except (AttributeError, KeyError, TypeError, ValueError, InvalidOperation) as exc:
            raise _malformed(f"Malformed financing entry: {exc!r}") from exc

        return offer


def _decimal(value: Any) -> Decimal:
    # The provider sends rates as JSON numbers; go through str to avoid float noise
    result = Decimal(str(value))
    if not result.is_finite():
        raise ValueError(f"not a finite number: {value}")
    return result


def _optional_decimal(value: Any) -> Decimal | None:
    return None if value is None else _decimal(value)


def _money(amount: dict[str, Any], currency: str) -> Decimal:
    if not isinstance(amount, dict):
        raise TypeError(f"money value is not an object: {amount!r}")
    amount_currency = amount.get("currency_code", currency)
    if amount_currency != currency:
        raise ValueError(f"currency {amount_currency} does not match quote currency {currency}")
    return _decimal(amount["value"])


def _optional_money(amount: dict[str, Any] | None, currency: str) -> Decimal | None:
    return None if amount is None else _money(amount, currency)


def _term(value: Any) -> int:
    # Whole months only; 12.7 or True must not become a valid term
    if isinstance(value, bool):
        raise ValueError(f"term is not a whole number of months: {value!r}")
    if isinstance(value, int):
        return value
    if isinstance(value, str) and value.isdigit():
        return int(value)
    raise ValueError(f"term is not a whole number of months: {value!r}")


def _malformed(message: str) -> InvalidOfferError:
    return InvalidOfferError(
        errors=[
            {
                "field": "financing_options",
                "message": message,
                "code": "INVALID_OFFER",
            }
        ]
    )
