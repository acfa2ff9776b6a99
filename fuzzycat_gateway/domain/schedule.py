"""Payment schedule calculator: fee, deposit and biweekly installments for a vet bill"""

from datetime import date
from typing import List

from fuzzycat_gateway.domain.constants import BusinessRates, DEFAULT_RATES
from fuzzycat_gateway.domain.exceptions import (
    BillAmountAboveMaximumError,
    BillAmountBelowMinimumError,
    InvalidAmountError,
)
from fuzzycat_gateway.domain.models import PaymentKind, PaymentSchedule, ScheduledPayment
from fuzzycat_gateway.domain.money import percent_of_cents
from fuzzycat_gateway.utils.date_utils import add_calendar_days


def _require_integer_cents(bill_amount_cents: int) -> None:
    if not isinstance(bill_amount_cents, int) or isinstance(bill_amount_cents, bool):
        raise InvalidAmountError(f"Bill amount must be integer cents, got {bill_amount_cents!r}")


def validate_bill_amount(bill_amount_cents: int, rates: BusinessRates = DEFAULT_RATES) -> None:
    """
    Input-layer check of a bill against both plan bounds.

    The calculator itself only enforces the minimum; callers accepting
    user-submitted bills run this first so the maximum is applied too.
    """
    _require_integer_cents(bill_amount_cents)

    if bill_amount_cents < rates.min_bill_cents:
        raise BillAmountBelowMinimumError(
            f"Bill must be at least {rates.min_bill_cents} cents (${rates.min_bill_cents // 100})"
        )
    if bill_amount_cents > rates.max_bill_cents:
        raise BillAmountAboveMaximumError(
            f"Bill must not exceed {rates.max_bill_cents} cents (${rates.max_bill_cents // 100:,})"
        )


def calculate_payment_schedule(
    bill_amount_cents: int,
    enrollment_date: date,
    rates: BusinessRates = DEFAULT_RATES,
) -> PaymentSchedule:
    """
    Calculate the full payment schedule for a veterinary bill.

    Requirements:
    - Fee and deposit are each rounded half-up to the cent independently
    - Base installment is floored, never rounded
    - Last installment absorbs the floor remainder (0..N-1 cents) so
      deposit + installments == total with fee, exactly
    - Installments fall every 14 calendar days after enrollment

    Args:
        bill_amount_cents: Vet bill in integer cents (minimum $500)
        enrollment_date: Plan start; the deposit is dated here. Callers pass "now" explicitly.
        rates: Business rates to price the plan with

    Returns:
        PaymentSchedule with 1 deposit + num_installments installments

    Example:
        $750.00 bill → fee 4500, total 79500, deposit 19875, remaining 59625
        59625 // 6 = 9937 base → [9937, 9937, 9937, 9937, 9937, 9940]

    Raises:
        BillAmountBelowMinimumError: bill is below rates.min_bill_cents
    """
    _require_integer_cents(bill_amount_cents)
    if bill_amount_cents < rates.min_bill_cents:
        raise BillAmountBelowMinimumError(
            f"Bill amount {bill_amount_cents} cents is below minimum {rates.min_bill_cents} cents"
        )

    num_installments = rates.num_installments

    fee_cents = percent_of_cents(bill_amount_cents, rates.platform_fee_rate)
    total_with_fee_cents = bill_amount_cents + fee_cents
    deposit_cents = percent_of_cents(total_with_fee_cents, rates.deposit_rate)
    remaining_cents = total_with_fee_cents - deposit_cents
    installment_cents = remaining_cents // num_installments

    payments: List[ScheduledPayment] = [
        ScheduledPayment(
            kind=PaymentKind.DEPOSIT,
            sequence_num=0,
            amount_cents=deposit_cents,
            scheduled_at=enrollment_date,
        )
    ]

    for i in range(1, num_installments + 1):
        scheduled_at = add_calendar_days(enrollment_date, i * rates.installment_interval_days)

        # Last installment absorbs the truncated remainder
        if i == num_installments:
            amount = remaining_cents - installment_cents * (num_installments - 1)
        else:
            amount = installment_cents

        payments.append(
            ScheduledPayment(
                kind=PaymentKind.INSTALLMENT,
                sequence_num=i,
                amount_cents=amount,
                scheduled_at=scheduled_at,
            )
        )

    return PaymentSchedule(
        total_bill_cents=bill_amount_cents,
        fee_cents=fee_cents,
        total_with_fee_cents=total_with_fee_cents,
        deposit_cents=deposit_cents,
        remaining_cents=remaining_cents,
        installment_cents=installment_cents,
        num_installments=num_installments,
        payments=tuple(payments),
    )
