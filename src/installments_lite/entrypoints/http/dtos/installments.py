from pydantic import BaseModel, ConfigDict, Field

from installments_lite.domain.installments import DisplayMode, PresentmentType


class InstallmentOptionDTO(BaseModel):
    """One financing plan as shown to the shopper."""

    term_months: int = Field(description="Number of monthly installments", examples=[12])
    monthly_payment: str = Field(
        description="Monthly installment as decimal string", examples=["30.00"]
    )
    total_cost: str = Field(
        description="Total amount repaid over the term as decimal string", examples=["360.00"]
    )
    annual_percentage_rate: str = Field(
        description="Effective annual rate in percent as decimal string", examples=["9.99"]
    )
    nominal_rate: str | None = None
    monthly_percentage_rate: str | None = None
    total_interest: str | None = None
    fee: str | None = None
    financing_code: str | None = Field(
        default=None, description="Provider reference of the plan", examples=["CODE-12"]
    )
    qualifying: bool = Field(description="Whether the shopper qualifies for this plan")
    is_best_value: bool = Field(
        description="Highlights the cheapest qualifying plan in a comparison list"
    )


class CheapestInstallmentResponseDTO(BaseModel):
    """Response for the compact cheapest-rate widget."""

    product_price: str = Field(examples=["349.99"])
    currency: str = Field(examples=["EUR"])
    page_type: DisplayMode = Field(
        description="Storefront context; decides which upstream presentment is rendered"
    )
    option: InstallmentOptionDTO

    model_config = ConfigDict(
        json_schema_extra={
            "example": {
                "product_price": "349.99",
                "currency": "EUR",
                "page_type": "detail",
                "option": {
                    "term_months": 12,
                    "monthly_payment": "30.50",
                    "total_cost": "366.00",
                    "annual_percentage_rate": "9.99",
                    "nominal_rate": "9.57",
                    "monthly_percentage_rate": "0.80",
                    "total_interest": "16.01",
                    "fee": None,
                    "financing_code": "CODE-12",
                    "qualifying": True,
                    "is_best_value": False,
                },
            }
        }
    )


class InstallmentOptionsResponseDTO(BaseModel):
    """Response for the comparison list and modal views."""

    product_price: str = Field(examples=["349.99"])
    currency: str = Field(examples=["EUR"])
    options: list[InstallmentOptionDTO]
    best_value_index: int | None = Field(
        description="Position of the best value option in options, null if none qualifies"
    )


class InstallmentsSettingsDTO(BaseModel):
    """Installments display settings for one shop."""

    shop_id: int
    active: bool
    presentment_detail: PresentmentType
    presentment_cart: PresentmentType
    show_logo: bool
    include_non_qualifying: bool

    model_config = ConfigDict(
        json_schema_extra={
            "example": {
                "shop_id": 1,
                "active": True,
                "presentment_detail": "cheapest",
                "presentment_cart": "simple",
                "show_logo": True,
                "include_non_qualifying": True,
            }
        }
    )
