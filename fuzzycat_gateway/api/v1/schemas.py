"""Pydantic schemas for API request/response validation"""

from pydantic import BaseModel, Field
from datetime import datetime
from typing import List, Optional

from fuzzycat_gateway.domain.models import PaymentKind


class ScheduleRequest(BaseModel):
    """Request body for POST /v1/schedule"""

    bill_amount_cents: int = Field(..., gt=0, description="Veterinary bill in cents", examples=[120000])
    enrollment_date: Optional[datetime] = Field(
        None,
        description="Plan start (ISO 8601). Defaults to the server clock.",
    )


class ScheduledPaymentSchema(BaseModel):
    """Single payment in a schedule"""

    kind: PaymentKind
    sequence_num: int
    amount_cents: int
    amount_display: str = Field(..., description="Formatted USD amount", examples=["$159.00"])
    scheduled_at: datetime


class ScheduleResponse(BaseModel):
    """Response for POST /v1/schedule"""

    total_bill_cents: int
    fee_cents: int
    total_with_fee_cents: int
    deposit_cents: int
    remaining_cents: int
    installment_cents: int
    num_installments: int
    platform_reserve_cents: int
    payments: List[ScheduledPaymentSchema]


class PayoutBreakdownResponse(BaseModel):
    """Response for GET /v1/payout/breakdown"""

    payment_amount_cents: int
    platform_fee_cents: int
    platform_reserve_cents: int
    clinic_share_cents: int
    transfer_amount_cents: int


class RatesResponse(BaseModel):
    """Response for GET /v1/rates"""

    platform_fee_rate: float
    deposit_rate: float
    clinic_share_rate: float
    platform_reserve_rate: float
    num_installments: int
    installment_interval_days: int
    min_bill_cents: int
    max_bill_cents: int
