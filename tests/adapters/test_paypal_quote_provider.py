"""
Test suite for PayPalQuoteProvider.

Uses httpx.MockTransport so no network is involved. Verifies:
- token is requested once and sent as bearer
- the quote request body carries price, currency and country
- transport and HTTP failures become QuoteProviderError
"""

from __future__ import annotations

import json
from decimal import Decimal

import httpx
import pytest

from installments_lite.adapters.paypal_quote_provider import PayPalQuoteProvider
from installments_lite.domain.errors import QuoteProviderError

FINANCING_RESPONSE = {
    "financing_options": [
        {
            "qualifying_financing_options": [
                {
                    "credit_financing": {"apr": 9.99, "nominal_rate": 9.57, "term": 12},
                    "monthly_payment": {"currency_code": "EUR", "value": "30.50"},
                    "total_cost": {"currency_code": "EUR", "value": "366.00"},
                }
            ],
            "non_qualifying_financing_options": [],
        }
    ]
}


def _provider(handler) -> PayPalQuoteProvider:
    return PayPalQuoteProvider(
        base_url="https://provider.test/",
        client_id="client",
        client_secret="secret",
        country_code="DE",
        currency="EUR",
        timeout=1.0,
        transport=httpx.MockTransport(handler),
    )


def _ok_handler(calls: list[httpx.Request]):
    def handler(request: httpx.Request) -> httpx.Response:
        calls.append(request)
        if request.url.path == "/v1/oauth2/token":
            return httpx.Response(200, json={"access_token": "token-123"})
        return httpx.Response(200, json=FINANCING_RESPONSE)

    return handler


# ==============================================================================
# Happy Path
# ==============================================================================


def test_fetch_offers_returns_collection() -> None:
    calls: list[httpx.Request] = []
    provider = _provider(_ok_handler(calls))

    collection = provider.fetch_offers(Decimal("356.00"))

    assert collection.product_price == Decimal("356.00")
    assert [offer.term_months for offer in collection.offers] == [12]
    assert collection.offers[0].monthly_payment == Decimal("30.50")


def test_fetch_offers_sends_quote_request() -> None:
    calls: list[httpx.Request] = []
    provider = _provider(_ok_handler(calls))

    provider.fetch_offers(Decimal("356.00"))

    token_request, quote_request = calls
    assert token_request.url.path == "/v1/oauth2/token"
    assert token_request.headers["Authorization"].startswith("Basic ")
    assert quote_request.url.path == "/v1/credit/calculated-financing-options"
    assert quote_request.headers["Authorization"] == "Bearer token-123"
    assert json.loads(quote_request.content) == {
        "financing_country_code": "DE",
        "transaction_amount": {"value": "356.00", "currency_code": "EUR"},
        "funding_instrument_type": "CREDIT",
    }


def test_token_is_reused_across_quotes() -> None:
    calls: list[httpx.Request] = []
    provider = _provider(_ok_handler(calls))

    provider.fetch_offers(Decimal("100.00"))
    provider.fetch_offers(Decimal("200.00"))

    token_calls = [call for call in calls if call.url.path == "/v1/oauth2/token"]
    assert len(token_calls) == 1


# ==============================================================================
# Failures
# ==============================================================================


def test_http_error_becomes_provider_error() -> None:
    def handler(request: httpx.Request) -> httpx.Response:
        if request.url.path == "/v1/oauth2/token":
            return httpx.Response(200, json={"access_token": "token"})
        return httpx.Response(503)

    with pytest.raises(QuoteProviderError, match="503") as exc_info:
        _provider(handler).fetch_offers(Decimal("100.00"))

    assert exc_info.value.context["status_code"] == 503


def test_timeout_becomes_provider_error() -> None:
    def handler(request: httpx.Request) -> httpx.Response:
        if request.url.path == "/v1/oauth2/token":
            return httpx.Response(200, json={"access_token": "token"})
        raise httpx.ReadTimeout("timed out", request=request)

    with pytest.raises(QuoteProviderError, match="timeout"):
        _provider(handler).fetch_offers(Decimal("100.00"))


def test_connection_error_becomes_provider_error() -> None:
    def handler(request: httpx.Request) -> httpx.Response:
        raise httpx.ConnectError("refused", request=request)

    with pytest.raises(QuoteProviderError, match="unreachable"):
        _provider(handler).fetch_offers(Decimal("100.00"))


def test_failed_authentication_becomes_provider_error() -> None:
    def handler(request: httpx.Request) -> httpx.Response:
        return httpx.Response(401, json={"error": "invalid_client"})

    with pytest.raises(QuoteProviderError, match="authentication failed"):
        _provider(handler).fetch_offers(Decimal("100.00"))


def test_invalid_json_becomes_provider_error() -> None:
    def handler(request: httpx.Request) -> httpx.Response:
        if request.url.path == "/v1/oauth2/token":
            return httpx.Response(200, json={"access_token": "token"})
        return httpx.Response(200, content=b"<html>maintenance</html>")

    with pytest.raises(QuoteProviderError, match="invalid JSON"):
        _provider(handler).fetch_offers(Decimal("100.00"))


def test_non_object_payload_becomes_provider_error() -> None:
    def handler(request: httpx.Request) -> httpx.Response:
        if request.url.path == "/v1/oauth2/token":
            return httpx.Response(200, json={"access_token": "token"})
        return httpx.Response(200, json=[1, 2, 3])

    with pytest.raises(QuoteProviderError, match="unexpected payload"):
        _provider(handler).fetch_offers(Decimal("100.00"))
