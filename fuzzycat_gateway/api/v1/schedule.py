"""POST /v1/schedule - Payment schedule quote endpoint"""

import time
import logging
from datetime import datetime
from fastapi import APIRouter, Depends, HTTPException, Request

from fuzzycat_gateway.api.v1.schemas import ScheduleRequest, ScheduleResponse, ScheduledPaymentSchema
from fuzzycat_gateway.api.dependencies import get_business_rates, get_current_time, get_request_id
from fuzzycat_gateway.domain.constants import BusinessRates
from fuzzycat_gateway.domain.exceptions import InvalidAmountError
from fuzzycat_gateway.domain.money import format_cents
from fuzzycat_gateway.domain.payouts import calculate_reserve_contribution
from fuzzycat_gateway.domain.schedule import calculate_payment_schedule, validate_bill_amount
from fuzzycat_gateway.infrastructure.observability.metrics import record_schedule_quote, record_schedule_rejection
from fuzzycat_gateway.infrastructure.observability.logging import log_schedule_quote

logger = logging.getLogger(__name__)

router = APIRouter()


@router.post("/schedule", response_model=ScheduleResponse)
def create_schedule_quote(
    request_body: ScheduleRequest,
    request: Request,
    rates: BusinessRates = Depends(get_business_rates),
    now: datetime = Depends(get_current_time),
):
    """
    Quote the full payment schedule for a veterinary bill.

    Flow:
    1. Validate the bill against the minimum and maximum plan bounds
    2. Calculate fee, deposit and installments
    3. Compute the platform reserve contribution
    4. Return every amount in cents plus a display string per payment

    Nothing is persisted; the enrollment service stores the returned entries.
    """
    start_time = time.time()
    request_id = get_request_id(request)
    enrollment_date = request_body.enrollment_date or now

    try:
        validate_bill_amount(request_body.bill_amount_cents, rates)
        schedule = calculate_payment_schedule(request_body.bill_amount_cents, enrollment_date, rates)
        reserve_cents = calculate_reserve_contribution(schedule, rates)

    except InvalidAmountError as e:
        record_schedule_rejection()
        logger.warning(f"Schedule rejected: {e}", extra={"request_id": request_id})
        raise HTTPException(status_code=422, detail=str(e))

    except Exception as e:
        logger.error(f"Unexpected error: {e}", extra={"request_id": request_id})
        raise HTTPException(status_code=500, detail="Internal server error")

    duration_ms = (time.time() - start_time) * 1000
    record_schedule_quote(schedule.total_bill_cents)
    log_schedule_quote(
        request_id,
        schedule.total_bill_cents,
        schedule.total_with_fee_cents,
        len(schedule.payments),
        duration_ms,
    )

    return ScheduleResponse(
        total_bill_cents=schedule.total_bill_cents,
        fee_cents=schedule.fee_cents,
        total_with_fee_cents=schedule.total_with_fee_cents,
        deposit_cents=schedule.deposit_cents,
        remaining_cents=schedule.remaining_cents,
        installment_cents=schedule.installment_cents,
        num_installments=schedule.num_installments,
        platform_reserve_cents=reserve_cents,
        payments=[
            ScheduledPaymentSchema(
                kind=payment.kind,
                sequence_num=payment.sequence_num,
                amount_cents=payment.amount_cents,
                amount_display=format_cents(payment.amount_cents),
                scheduled_at=payment.scheduled_at,
            )
            for payment in schedule.payments
        ],
    )
