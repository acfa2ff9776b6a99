"""Allocation of collected owner payments between platform, reserve and clinic"""

from decimal import Decimal

from fuzzycat_gateway.domain.constants import BusinessRates, DEFAULT_RATES
from fuzzycat_gateway.domain.exceptions import InvalidAmountError
from fuzzycat_gateway.domain.models import PaymentSchedule, PayoutBreakdown
from fuzzycat_gateway.domain.money import percent_of_cents, round_half_up


def calculate_payout_breakdown(
    payment_amount_cents: int,
    rates: BusinessRates = DEFAULT_RATES,
) -> PayoutBreakdown:
    """
    Split one owner payment (deposit or installment) into its allocations.

    The payment already includes the platform fee, so the bill portion is
    recovered as payment / (1 + fee rate). From there:
    - platform fee: payment - bill portion
    - platform reserve: reserve rate of the bill portion
    - clinic share: clinic share rate of the full payment
    - transfer to clinic: bill portion - reserve + clinic share

    Example:
        13250 (deposit on a $500 bill) → bill portion 12500, fee 750,
        reserve 125, clinic share 398, transfer 12773
    """
    if (
        not isinstance(payment_amount_cents, int)
        or isinstance(payment_amount_cents, bool)
        or payment_amount_cents <= 0
    ):
        raise InvalidAmountError(f"Invalid payment amount {payment_amount_cents!r}")

    fee_multiplier = 1 + Decimal(str(rates.platform_fee_rate))
    bill_portion_cents = round_half_up(Decimal(payment_amount_cents) / fee_multiplier)
    platform_fee_cents = payment_amount_cents - bill_portion_cents
    platform_reserve_cents = percent_of_cents(bill_portion_cents, rates.platform_reserve_rate)
    clinic_share_cents = percent_of_cents(payment_amount_cents, rates.clinic_share_rate)

    return PayoutBreakdown(
        payment_amount_cents=payment_amount_cents,
        platform_fee_cents=platform_fee_cents,
        platform_reserve_cents=platform_reserve_cents,
        clinic_share_cents=clinic_share_cents,
        transfer_amount_cents=bill_portion_cents - platform_reserve_cents + clinic_share_cents,
    )


def calculate_reserve_contribution(
    schedule: PaymentSchedule,
    rates: BusinessRates = DEFAULT_RATES,
) -> int:
    """Platform reserve allocated when an enrollment is created (reserve rate of bill + fee)"""
    return percent_of_cents(schedule.total_with_fee_cents, rates.platform_reserve_rate)
