"""Domain error classes.

Protocol-agnostic errors that represent business failures in the installments flow.
Protocol adapters (HTTP today) translate them into their own formats.
"""

from typing import Any


class DomainError(Exception):
    """Base class for all domain errors.

    Carries a human-readable message plus free-form context that callers can log
    or serialize without knowing the concrete error type.
    """

    # Default error code (can be used as i18n key)
    error_code: str = "DOMAIN_ERROR"

    def __init__(self, message: str, **context: Any) -> None:
        """Create a domain error.

        Args:
            message: Human-readable error message (default locale)
            **context: Additional context for error (e.g., field names, values)
        """
        self.message = message
        self.context = context
        super().__init__(message)

    def to_dict(self) -> dict[str, Any]:
        """Convert to structured format for protocol translation."""
        return {
            "message": self.message,
            "code": self.error_code,
            **self.context,
        }


class ValidationError(DomainError):
    """Business rule validation error.

    Examples:
        - product_price <= 0
        - page_type not one of the supported display modes

    Protocol mappings:
        - REST: 422 Unprocessable Entity
    """

    error_code: str = "VALIDATION_ERROR"

    def __init__(
        self,
        message: str | None = None,
        errors: list[dict[str, str]] | None = None,
        **context: Any,
    ) -> None:
        """Create a validation error.

        Args:
            message: Overall validation error message (optional if errors provided)
            errors: List of field-specific errors, each with 'field' and 'message'
                   Example: [{"field": "product_price", "message": "Must be positive"}]
            **context: Additional context
        """
        self.errors: list[dict[str, str]] | None
        if errors:
            self.errors = errors
            msg = message or "Validation failed"
        else:
            self.errors = None
            msg = message or "Validation error"

        super().__init__(msg, **context)

    def to_dict(self) -> dict[str, Any]:
        """Convert to structured format."""
        if self.errors:
            return {
                "message": self.message,
                "code": self.error_code,
                "errors": self.errors,
                **self.context,
            }
        return super().to_dict()


class InvalidOfferError(ValidationError):
    """Malformed offer data received from the quote provider.

    Raised at ingestion time (negative amounts, zero term, duplicate term within
    one collection). Offers are never silently coerced into shape.
    """

    error_code: str = "INVALID_OFFER"


class OfferUnavailableError(DomainError):
    """No financing widget can be shown for the requested price.

    Callers are expected to log these and suppress the widget instead of
    failing the surrounding page.
    """

    error_code: str = "OFFERS_UNAVAILABLE"


class EmptyCollectionError(OfferUnavailableError):
    """The provider returned no offers at all."""

    error_code: str = "EMPTY_COLLECTION"

    def __init__(self, message: str = "No financing offers present", **context: Any) -> None:
        super().__init__(message, **context)


class NoQualifyingOfferError(OfferUnavailableError):
    """Offers exist but the shopper qualifies for none of them."""

    error_code: str = "NO_QUALIFYING_OFFER"

    def __init__(self, message: str = "No qualifying financing offer", **context: Any) -> None:
        super().__init__(message, **context)


class InstallmentsDisabledError(OfferUnavailableError):
    """Installments are switched off (or not presented) for the shop and page type."""

    error_code: str = "INSTALLMENTS_DISABLED"


class QuoteProviderError(DomainError):
    """The quote provider could not deliver an offer collection.

    Transport failures, HTTP errors and unreadable payloads all end up here.
    No retry happens in this service.

    Protocol mappings:
        - REST: 502 Bad Gateway
    """

    error_code: str = "PROVIDER_ERROR"


class NotFoundError(DomainError):
    """Resource not found.

    Examples:
        - No installments settings stored for a shop

    Protocol mappings:
        - REST: 404 Not Found
    """

    error_code: str = "NOT_FOUND"

    def __init__(self, resource: str, identifier: str | None = None, **context: Any) -> None:
        """Create a not found error.

        Args:
            resource: Type of resource (e.g., "InstallmentsSettings")
            identifier: Resource identifier (e.g., shop id)
            **context: Additional context
        """
        if identifier:
            message = f"{resource} with identifier '{identifier}' not found"
        else:
            message = f"{resource} not found"

        super().__init__(message, resource=resource, identifier=identifier, **context)
