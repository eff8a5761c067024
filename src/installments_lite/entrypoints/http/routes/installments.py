import logging

from fastapi import APIRouter, Depends, Query, Response, status

from installments_lite.domain.errors import InstallmentsDisabledError, OfferUnavailableError
from installments_lite.domain.installments import DisplayMode
from installments_lite.entrypoints.http.dependencies import (
    get_cheapest_installment_use_case,
    get_installments_settings_use_case,
    get_list_installment_offers_use_case,
    get_shop_id,
)
from installments_lite.entrypoints.http.dtos.installments import (
    CheapestInstallmentResponseDTO,
    InstallmentOptionsResponseDTO,
    InstallmentsSettingsDTO,
)
from installments_lite.entrypoints.http.error_responses import ErrorResponse
from installments_lite.entrypoints.http.mappers.installments_mapper import InstallmentsMapper
from installments_lite.use_cases.get_cheapest_installment import GetCheapestInstallment
from installments_lite.use_cases.get_installments_settings import (
    GetInstallmentsSettings,
    GetInstallmentsSettingsRequest,
)
from installments_lite.use_cases.list_installment_offers import ListInstallmentOffers

logger = logging.getLogger(__name__)

router = APIRouter(tags=["Installments"])

PRICE_PATTERN = r"^\d+(\.\d{1,2})?$"

_SUPPRESSED = {
    status.HTTP_204_NO_CONTENT: {
        "description": "No widget to show (installments disabled or no usable offers)"
    },
    422: {"model": ErrorResponse, "description": "Validation error"},
    502: {"model": ErrorResponse, "description": "Quote provider unavailable"},
}


def _suppress(exc: OfferUnavailableError, product_price: str, level: int) -> Response:
    # Disabled installments are a merchant choice, not an incident
    if isinstance(exc, InstallmentsDisabledError):
        level = logging.INFO

    logger.log(
        level,
        "Could not find financing options for widget",
        extra={
            "error_code": exc.error_code,
            "detail": exc.message,
            "product_price": product_price,
            "context": exc.context,
        },
    )
    return Response(status_code=status.HTTP_204_NO_CONTENT)


@router.get(
    "/installments/cheapest",
    response_model=CheapestInstallmentResponseDTO,
    summary="Cheapest installment for a product price",
    description="""
    Returns the qualifying plan with the lowest monthly payment, for the compact
    "pay in installments" widget on the detail or cart page.

    ## Ordering
    - Lowest monthly payment wins
    - Ties: shorter term, then lower total cost

    ## Suppression
    Answers 204 No Content when the widget should not be rendered: installments
    are disabled for the page type, the provider has no offers, or none qualify.

    ## Example
    ```
    GET /v1/installments/cheapest?product_price=349.99&page_type=detail
    ```
    """,
    responses=_SUPPRESSED,
)
def get_cheapest_installment(
    product_price: str = Query(
        description="Product price as decimal string",
        examples=["349.99"],
        pattern=PRICE_PATTERN,
    ),
    page_type: DisplayMode = Query(
        default=DisplayMode.DETAIL,
        description="Storefront context the widget is rendered in",
    ),
    shop_id: int = Depends(get_shop_id),
    use_case: GetCheapestInstallment = Depends(get_cheapest_installment_use_case),
) -> CheapestInstallmentResponseDTO | Response:
    """Cheapest rate endpoint following parse → execute → map → return."""
    request = InstallmentsMapper.to_cheapest_request(product_price, page_type, shop_id)

    try:
        result = use_case.execute(request)
    except OfferUnavailableError as exc:
        return _suppress(exc, product_price, logging.WARNING)

    return InstallmentsMapper.to_cheapest_response(result)


@router.get(
    "/installments/options",
    response_model=InstallmentOptionsResponseDTO,
    summary="All installment options for a product price",
    description="""
    Returns every plan ranked by monthly payment for the comparison list and the
    modal view. The first qualifying plan is flagged `is_best_value` and its
    position is returned as `best_value_index`.

    Plans the shopper does not qualify for are listed unless the shop's
    `include_non_qualifying` setting is off.

    ## Suppression
    Answers 204 No Content when installments are inactive or nothing can be listed.
    """,
    responses=_SUPPRESSED,
)
def list_installment_options(
    product_price: str = Query(
        description="Product price as decimal string",
        examples=["349.99"],
        pattern=PRICE_PATTERN,
    ),
    shop_id: int = Depends(get_shop_id),
    use_case: ListInstallmentOffers = Depends(get_list_installment_offers_use_case),
) -> InstallmentOptionsResponseDTO | Response:
    """Options list endpoint following parse → execute → map → return."""
    request = InstallmentsMapper.to_list_request(product_price, shop_id)

    try:
        result = use_case.execute(request)
    except OfferUnavailableError as exc:
        return _suppress(exc, product_price, logging.ERROR)

    return InstallmentsMapper.to_options_response(result)


@router.get(
    "/installments/settings/{shop_id}",
    response_model=InstallmentsSettingsDTO,
    summary="Installments settings of a shop",
    responses={404: {"model": ErrorResponse, "description": "No settings for the shop"}},
)
def get_installments_settings(
    shop_id: int,
    use_case: GetInstallmentsSettings = Depends(get_installments_settings_use_case),
) -> InstallmentsSettingsDTO:
    settings = use_case.execute(GetInstallmentsSettingsRequest(shop_id=shop_id))
    return InstallmentsMapper.to_settings_response(settings)
