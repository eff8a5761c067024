from __future__ import annotations

from decimal import Decimal, InvalidOperation

from installments_lite.domain.errors import ValidationError
from installments_lite.domain.installments import DisplayMode, InstallmentsSettings, Offer
from installments_lite.entrypoints.http.dtos.installments import (
    CheapestInstallmentResponseDTO,
    InstallmentOptionDTO,
    InstallmentOptionsResponseDTO,
    InstallmentsSettingsDTO,
)
from installments_lite.use_cases.get_cheapest_installment import (
    GetCheapestInstallmentRequest,
    GetCheapestInstallmentResponse,
)
from installments_lite.use_cases.list_installment_offers import (
    ListInstallmentOffersRequest,
    ListInstallmentOffersResponse,
)


class InstallmentsMapper:
    """Maps between REST parameters/DTOs and domain models for installments."""

    @staticmethod
    def to_product_price(raw: str) -> Decimal:
        """
        Converts the product_price query parameter to Decimal.

        Raises:
            ValidationError: If the value is not a valid decimal
        """
        try:
            return Decimal(raw)
        except (InvalidOperation, ValueError):
            raise ValidationError(
                errors=[
                    {
                        "field": "product_price",
                        "message": f"Must be a valid decimal: {raw}",
                        "code": "INVALID_DECIMAL",
                    }
                ]
            )

    @staticmethod
    def to_cheapest_request(
        product_price: str, page_type: DisplayMode, shop_id: int
    ) -> GetCheapestInstallmentRequest:
        return GetCheapestInstallmentRequest(
            product_price=InstallmentsMapper.to_product_price(product_price),
            display_mode=page_type,
            shop_id=shop_id,
        )

    @staticmethod
    def to_list_request(product_price: str, shop_id: int) -> ListInstallmentOffersRequest:
        return ListInstallmentOffersRequest(
            product_price=InstallmentsMapper.to_product_price(product_price),
            shop_id=shop_id,
        )

    @staticmethod
    def to_option(offer: Offer) -> InstallmentOptionDTO:
        """Converts a domain Offer to its DTO, Decimal → string."""
        return InstallmentOptionDTO(
            term_months=offer.term_months,
            monthly_payment=str(offer.monthly_payment),
            total_cost=str(offer.total_cost),
            annual_percentage_rate=str(offer.annual_percentage_rate),
            nominal_rate=_optional_str(offer.nominal_rate),
            monthly_percentage_rate=_optional_str(offer.monthly_percentage_rate),
            total_interest=_optional_str(offer.total_interest),
            fee=_optional_str(offer.fee),
            financing_code=offer.financing_code,
            qualifying=offer.qualifying,
            is_best_value=offer.is_best_value,
        )

    @staticmethod
    def to_cheapest_response(
        result: GetCheapestInstallmentResponse,
    ) -> CheapestInstallmentResponseDTO:
        return CheapestInstallmentResponseDTO(
            product_price=str(result.collection.product_price),
            currency=result.collection.currency,
            page_type=result.display_mode,
            option=InstallmentsMapper.to_option(result.offer),
        )

    @staticmethod
    def to_options_response(
        result: ListInstallmentOffersResponse,
    ) -> InstallmentOptionsResponseDTO:
        return InstallmentOptionsResponseDTO(
            product_price=str(result.collection.product_price),
            currency=result.collection.currency,
            options=[InstallmentsMapper.to_option(offer) for offer in result.offers],
            best_value_index=result.best_value_index,
        )

    @staticmethod
    def to_settings_response(settings: InstallmentsSettings) -> InstallmentsSettingsDTO:
        return InstallmentsSettingsDTO(
            shop_id=settings.shop_id,
            active=settings.active,
            presentment_detail=settings.presentment_detail,
            presentment_cart=settings.presentment_cart,
            show_logo=settings.show_logo,
            include_non_qualifying=settings.include_non_qualifying,
        )


def _optional_str(value: Decimal | None) -> str | None:
    return None if value is None else str(value)
