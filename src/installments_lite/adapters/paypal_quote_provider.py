"""PayPal implementation of QuoteProvider."""

from __future__ import annotations

import logging
from decimal import Decimal

import httpx

from installments_lite.adapters.paypal_financing_mapper import PayPalFinancingMapper
from installments_lite.domain.errors import QuoteProviderError
from installments_lite.domain.installments import OfferCollection
from installments_lite.ports.quote_provider import QuoteProvider

logger = logging.getLogger(__name__)

TOKEN_PATH = "/v1/oauth2/token"
FINANCING_OPTIONS_PATH = "/v1/credit/calculated-financing-options"


class PayPalQuoteProvider(QuoteProvider):
    """
    Fetches installment offers from PayPal's calculated financing endpoint.

    - Authenticates with OAuth2 client credentials (token kept for the instance)
    - Posts the product price as transaction amount
    - Converts transport, HTTP and payload failures to QuoteProviderError
    - Does not retry
    """

    def __init__(
        self,
        base_url: str,
        client_id: str,
        client_secret: str,
        country_code: str = "DE",
        currency: str = "EUR",
        timeout: float = 5.0,
        transport: httpx.BaseTransport | None = None,
    ) -> None:
        """
        Args:
            base_url: API root, e.g. https://api.sandbox.paypal.com
            client_id: OAuth2 client id
            client_secret: OAuth2 client secret
            country_code: Financing country sent with every quote
            currency: Currency the product price is quoted in
            timeout: Per-request timeout in seconds
            transport: Optional httpx transport (tests use httpx.MockTransport)
        """
        self._base_url = base_url.rstrip("/")
        self._client_id = client_id
        self._client_secret = client_secret
        self._country_code = country_code
        self._currency = currency
        self._timeout = timeout
        self._transport = transport
        self._access_token: str | None = None

    def fetch_offers(self, product_price: Decimal) -> OfferCollection:
        body = {
            "financing_country_code": self._country_code,
            "transaction_amount": {
                "value": str(product_price),
                "currency_code": self._currency,
            },
            "funding_instrument_type": "CREDIT",
        }

        with self._client() as client:
            token = self._token(client)
            try:
                response = client.post(
                    FINANCING_OPTIONS_PATH,
                    json=body,
                    headers={"Authorization": f"Bearer {token}"},
                )
                response.raise_for_status()
                payload = response.json()
            except httpx.TimeoutException as exc:
                raise QuoteProviderError(
                    f"Quote provider timeout after {self._timeout}s",
                    product_price=str(product_price),
                ) from exc
            except httpx.HTTPStatusError as exc:
                raise QuoteProviderError(
                    f"Quote provider error: {exc.response.status_code}",
                    product_price=str(product_price),
                    status_code=exc.response.status_code,
                ) from exc
            except httpx.HTTPError as exc:
                raise QuoteProviderError(
                    f"Quote provider unreachable: {exc}",
                    product_price=str(product_price),
                ) from exc
            except ValueError as exc:
                raise QuoteProviderError(
                    "Quote provider returned invalid JSON",
                    product_price=str(product_price),
                ) from exc

        if not isinstance(payload, dict):
            raise QuoteProviderError(
                "Quote provider returned an unexpected payload",
                product_price=str(product_price),
            )

        logger.debug(
            "Financing options received",
            extra={"product_price": str(product_price), "payload": payload},
        )

        return PayPalFinancingMapper.to_collection(
            payload, product_price=product_price, currency=self._currency
        )

    def _client(self) -> httpx.Client:
        return httpx.Client(
            base_url=self._base_url,
            timeout=self._timeout,
            transport=self._transport,
        )

    def _token(self, client: httpx.Client) -> str:
        if self._access_token is not None:
            return self._access_token

        try:
            response = client.post(
                TOKEN_PATH,
                data={"grant_type": "client_credentials"},
                auth=(self._client_id, self._client_secret),
            )
            response.raise_for_status()
            self._access_token = response.json()["access_token"]
        except httpx.HTTPStatusError as exc:
            raise QuoteProviderError(
                f"Quote provider authentication failed: {exc.response.status_code}",
                status_code=exc.response.status_code,
            ) from exc
        except httpx.HTTPError as exc:
            raise QuoteProviderError(f"Quote provider unreachable: {exc}") from exc
        except (KeyError, ValueError) as exc:
            raise QuoteProviderError("Quote provider returned an invalid token response") from exc

        return self._access_token
