"""REST API error response models, used to document error responses in OpenAPI."""

from pydantic import BaseModel, ConfigDict


class ErrorDetail(BaseModel):
    """Field-level error inside a validation error response."""

    field: str
    message: str
    code: str | None = None

    model_config = ConfigDict(
        json_schema_extra={
            "example": {
                "field": "product_price",
                "message": "Must be greater than 0",
                "code": "INVALID_VALUE",
            }
        }
    )


class ErrorResponse(BaseModel):
    """Structured error response format.

    Simple errors carry ``detail`` and ``code``; validation errors add ``errors``.
    """

    detail: str
    code: str | None = None
    errors: list[ErrorDetail] | None = None

    model_config = ConfigDict(
        json_schema_extra={
            "examples": [
                {"detail": "Quote provider timeout after 5.0s", "code": "PROVIDER_ERROR"},
                {
                    "detail": "Validation failed",
                    "code": "VALIDATION_ERROR",
                    "errors": [
                        {
                            "field": "product_price",
                            "message": "Must be greater than 0",
                            "code": "INVALID_VALUE",
                        }
                    ],
                },
            ]
        }
    )
