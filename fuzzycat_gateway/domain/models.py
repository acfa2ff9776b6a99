"""Domain models - pure Python dataclasses representing business entities"""

from dataclasses import dataclass
from datetime import date
from enum import Enum
from typing import Tuple


class PaymentKind(str, Enum):
    DEPOSIT = "deposit"
    INSTALLMENT = "installment"


@dataclass(frozen=True)
class ScheduledPayment:
    """Single payment in a plan's timeline"""

    kind: PaymentKind
    sequence_num: int  # 0 for the deposit, 1..N for installments
    amount_cents: int
    scheduled_at: date  # date or datetime, whatever the enrollment date was


@dataclass(frozen=True)
class PaymentSchedule:
    """Complete payment schedule for one enrollment"""

    total_bill_cents: int
    fee_cents: int
    total_with_fee_cents: int
    deposit_cents: int
    remaining_cents: int
    installment_cents: int  # floored base amount; the last installment may be larger
    num_installments: int
    payments: Tuple[ScheduledPayment, ...]

    @property
    def deposit(self) -> ScheduledPayment:
        return self.payments[0]

    @property
    def installments(self) -> Tuple[ScheduledPayment, ...]:
        return self.payments[1:]


@dataclass(frozen=True)
class PayoutBreakdown:
    """How one collected owner payment is split between platform and clinic"""

    payment_amount_cents: int
    platform_fee_cents: int
    platform_reserve_cents: int
    clinic_share_cents: int
    transfer_amount_cents: int
