"""Tests for FastAPI exception handlers."""

import pytest
from fastapi import FastAPI, Query
from fastapi.testclient import TestClient

from installments_lite.domain.errors import (
    DomainError,
    InvalidOfferError,
    NotFoundError,
    QuoteProviderError,
    ValidationError,
)
from installments_lite.entrypoints.http.exception_handlers import register_exception_handlers


@pytest.fixture
def app() -> FastAPI:
    """Create a minimal FastAPI app with exception handlers registered."""
    test_app = FastAPI()
    register_exception_handlers(test_app)

    @test_app.get("/validation-error")
    def raise_validation_error() -> None:
        raise ValidationError("Validation failed")

    @test_app.get("/validation-error-with-fields")
    def raise_validation_error_with_fields() -> None:
        raise ValidationError(
            errors=[
                {
                    "field": "product_price",
                    "message": "Must be greater than 0",
                    "code": "INVALID_VALUE",
                }
            ]
        )

    @test_app.get("/not-found-error")
    def raise_not_found_error() -> None:
        raise NotFoundError("InstallmentsSettings", "7")

    @test_app.get("/provider-error")
    def raise_provider_error() -> None:
        raise QuoteProviderError("Quote provider timeout after 5.0s", product_price="10.00")

    @test_app.get("/invalid-offer")
    def raise_invalid_offer() -> None:
        raise InvalidOfferError("term_months must be unique within a collection", term_months=12)

    @test_app.get("/generic-domain-error")
    def raise_generic_domain_error() -> None:
        raise DomainError("Something domain specific")

    @test_app.get("/typed-query")
    def typed_query(product_price: str = Query(pattern=r"^\d+(\.\d{1,2})?$")) -> dict:
        return {"product_price": product_price}

    @test_app.get("/unexpected-error")
    def raise_unexpected_error() -> dict:
        raise RuntimeError("Something went wrong")

    return test_app


@pytest.fixture
def client(app: FastAPI) -> TestClient:
    """Create a test client."""
    return TestClient(app, raise_server_exceptions=False)


class TestValidationErrorHandler:
    """Tests for ValidationError exception handler."""

    def test_simple_validation_error_returns_422(self, client: TestClient) -> None:
        response = client.get("/validation-error")

        assert response.status_code == 422
        assert response.json() == {
            "detail": "Validation failed",
            "code": "VALIDATION_ERROR",
        }

    def test_validation_error_with_field_errors_returns_422(self, client: TestClient) -> None:
        response = client.get("/validation-error-with-fields")

        assert response.status_code == 422
        data = response.json()
        assert data["code"] == "VALIDATION_ERROR"
        assert data["errors"] == [
            {
                "field": "product_price",
                "message": "Must be greater than 0",
                "code": "INVALID_VALUE",
            }
        ]


class TestNotFoundErrorHandler:
    """Tests for NotFoundError exception handler."""

    def test_not_found_error_returns_404(self, client: TestClient) -> None:
        response = client.get("/not-found-error")

        assert response.status_code == 404
        assert response.json() == {
            "detail": "InstallmentsSettings with identifier '7' not found",
            "code": "NOT_FOUND",
        }


class TestUpstreamErrorHandler:
    """Provider failures and malformed provider data map to 502."""

    def test_provider_error_returns_502(self, client: TestClient) -> None:
        response = client.get("/provider-error")

        assert response.status_code == 502
        assert response.json() == {
            "detail": "Quote provider timeout after 5.0s",
            "code": "PROVIDER_ERROR",
        }

    def test_invalid_offer_returns_502(self, client: TestClient) -> None:
        response = client.get("/invalid-offer")

        assert response.status_code == 502
        assert response.json()["code"] == "INVALID_OFFER"

    def test_provider_error_is_logged_with_context(
        self, client: TestClient, caplog: pytest.LogCaptureFixture
    ) -> None:
        with caplog.at_level("ERROR"):
            client.get("/provider-error")

        record = next(r for r in caplog.records if r.getMessage() == "Quote provider failure")
        assert record.error_code == "PROVIDER_ERROR"
        assert record.context == {"product_price": "10.00"}


class TestFallbackHandlers:
    """Unmapped domain errors, request validation and unexpected errors."""

    def test_unmapped_domain_error_returns_400(self, client: TestClient) -> None:
        response = client.get("/generic-domain-error")

        assert response.status_code == 400
        assert response.json()["code"] == "DOMAIN_ERROR"

    def test_request_validation_error_returns_422(self, client: TestClient) -> None:
        response = client.get("/typed-query", params={"product_price": "abc"})

        assert response.status_code == 422
        data = response.json()
        assert data["code"] == "VALIDATION_ERROR"
        assert data["detail"] == "Invalid request parameters"
        assert data["errors"][0]["field"] == "product_price"

    def test_missing_query_parameter_returns_422(self, client: TestClient) -> None:
        response = client.get("/typed-query")

        assert response.status_code == 422
        assert response.json()["errors"][0]["field"] == "product_price"

    def test_unexpected_error_returns_500(self, client: TestClient) -> None:
        response = client.get("/unexpected-error")

        assert response.status_code == 500
        assert response.json() == {
            "detail": "An unexpected error occurred",
            "code": "INTERNAL_ERROR",
        }
