"""GET /v1/payout/breakdown - Allocation of a collected payment"""

import logging
from fastapi import APIRouter, Depends, HTTPException, Query, Request

from fuzzycat_gateway.api.v1.schemas import PayoutBreakdownResponse
from fuzzycat_gateway.api.dependencies import get_business_rates, get_request_id
from fuzzycat_gateway.domain.constants import BusinessRates
from fuzzycat_gateway.domain.exceptions import InvalidAmountError
from fuzzycat_gateway.domain.payouts import calculate_payout_breakdown
from fuzzycat_gateway.infrastructure.observability.metrics import payout_breakdown_counter

logger = logging.getLogger(__name__)

router = APIRouter()


@router.get("/payout/breakdown", response_model=PayoutBreakdownResponse)
def get_payout_breakdown(
    request: Request,
    payment_amount_cents: int = Query(..., description="Collected owner payment in cents, fee included"),
    rates: BusinessRates = Depends(get_business_rates),
):
    """
    Split a deposit or installment into platform fee, reserve, clinic share and transfer.

    Reporting consumers read these figures verbatim instead of re-deriving them.
    """
    try:
        breakdown = calculate_payout_breakdown(payment_amount_cents, rates)
    except InvalidAmountError as e:
        logger.warning(f"Payout breakdown rejected: {e}", extra={"request_id": get_request_id(request)})
        raise HTTPException(status_code=422, detail=str(e))

    payout_breakdown_counter.inc()

    return PayoutBreakdownResponse(
        payment_amount_cents=breakdown.payment_amount_cents,
        platform_fee_cents=breakdown.platform_fee_cents,
        platform_reserve_cents=breakdown.platform_reserve_cents,
        clinic_share_cents=breakdown.clinic_share_cents,
        transfer_amount_cents=breakdown.transfer_amount_cents,
    )
