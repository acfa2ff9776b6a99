"""FuzzyCat business constants.

All rates are decimals (0.06 = 6%). Monetary values are integer cents.
These are versioned with the code and never read from the environment.
"""

import math
from dataclasses import dataclass

from fuzzycat_gateway.domain.exceptions import InvalidRatesError

# Platform fee charged to the pet owner on top of the bill
PLATFORM_FEE_RATE = 0.06

# Upfront deposit as a fraction of bill + fee
DEPOSIT_RATE = 0.25

# Revenue share paid to the clinic
CLINIC_SHARE_RATE = 0.03

# Fraction of each transaction allocated to the platform reserve
PLATFORM_RESERVE_RATE = 0.01

# Biweekly installments collected after the deposit
NUM_INSTALLMENTS = 6
INSTALLMENT_INTERVAL_DAYS = 14

MIN_BILL_CENTS = 50_000  # $500, below this the platform loses money
MAX_BILL_CENTS = 2_500_000  # $25,000, risk exposure cap


@dataclass(frozen=True)
class BusinessRates:
    """Immutable bundle of the rates that define a plan's financial contract"""

    platform_fee_rate: float = PLATFORM_FEE_RATE
    deposit_rate: float = DEPOSIT_RATE
    clinic_share_rate: float = CLINIC_SHARE_RATE
    platform_reserve_rate: float = PLATFORM_RESERVE_RATE
    num_installments: int = NUM_INSTALLMENTS
    installment_interval_days: int = INSTALLMENT_INTERVAL_DAYS
    min_bill_cents: int = MIN_BILL_CENTS
    max_bill_cents: int = MAX_BILL_CENTS

    def __post_init__(self) -> None:
        rates = {
            "platform_fee_rate": self.platform_fee_rate,
            "deposit_rate": self.deposit_rate,
            "clinic_share_rate": self.clinic_share_rate,
            "platform_reserve_rate": self.platform_reserve_rate,
        }
        for name, value in rates.items():
            if not isinstance(value, (int, float)) or isinstance(value, bool):
                raise InvalidRatesError(f"{name} must be a number, got {value!r}")
            if not math.isfinite(value) or value < 0:
                raise InvalidRatesError(f"{name} must be a non-negative finite number, got {value}")

        counts = {
            "num_installments": self.num_installments,
            "installment_interval_days": self.installment_interval_days,
            "min_bill_cents": self.min_bill_cents,
            "max_bill_cents": self.max_bill_cents,
        }
        for name, value in counts.items():
            if not isinstance(value, int) or isinstance(value, bool):
                raise InvalidRatesError(f"{name} must be an integer, got {value!r}")

        if self.deposit_rate > 1:
            raise InvalidRatesError(f"deposit_rate cannot exceed 1, got {self.deposit_rate}")
        if self.num_installments < 1:
            raise InvalidRatesError(f"num_installments must be at least 1, got {self.num_installments}")
        if self.installment_interval_days < 1:
            raise InvalidRatesError(
                f"installment_interval_days must be positive, got {self.installment_interval_days}"
            )
        if not 0 < self.min_bill_cents <= self.max_bill_cents:
            raise InvalidRatesError(
                f"Bill bounds must satisfy 0 < min <= max, got {self.min_bill_cents}..{self.max_bill_cents}"
            )

        # Platform keeps a positive margin after clinic share and reserve
        if self.clinic_share_rate + self.platform_reserve_rate >= self.platform_fee_rate:
            raise InvalidRatesError(
                "clinic_share_rate + platform_reserve_rate must be below platform_fee_rate"
            )

    @property
    def platform_margin_rate(self) -> float:
        """Fee fraction left to the platform before processing costs"""
        return self.platform_fee_rate - self.clinic_share_rate - self.platform_reserve_rate


DEFAULT_RATES = BusinessRates()
