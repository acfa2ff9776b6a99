"""Integer cents helpers - all monetary values are integer cents, never float dollars"""

import math
from decimal import Decimal, ROUND_HALF_UP
from typing import Union

from fuzzycat_gateway.domain.exceptions import InvalidAmountError

Number = Union[int, float, Decimal]


def _is_number(value: object) -> bool:
    # bool is an int subclass but never a money amount
    return isinstance(value, (int, float, Decimal)) and not isinstance(value, bool)


def _is_finite(value: Number) -> bool:
    if isinstance(value, Decimal):
        return value.is_finite()
    return math.isfinite(value)


def _to_decimal(value: Number) -> Decimal:
    """Exact decimal for a number, using the shortest repr for floats (0.06 -> Decimal('0.06'))"""
    if isinstance(value, Decimal):
        return value
    return Decimal(str(value))


def round_half_up(value: Decimal) -> int:
    """
    Round a decimal to a whole number of cents, ties away from zero.

    50.5 -> 51 and -2.5 -> -3; the built-in round() would give 50 and -2.
    """
    return int(value.quantize(Decimal("1"), rounding=ROUND_HALF_UP))


def to_cents(dollars: Number) -> int:
    """Convert a dollar amount to integer cents (12.5 -> 1250)"""
    if not _is_number(dollars) or not _is_finite(dollars) or dollars < 0:
        raise InvalidAmountError(f"to_cents: invalid dollar amount {dollars!r}")
    return round_half_up(_to_decimal(dollars) * 100)


def format_cents(cents: Number) -> str:
    """
    Format integer cents as a USD currency string.

    Examples:
        1250 → "$12.50"
        120000 → "$1,200.00"
    """
    if not _is_number(cents) or not _is_finite(cents) or cents != int(cents) or cents < 0:
        raise InvalidAmountError(f"format_cents: invalid cents value {cents!r}")

    dollars, remainder = divmod(int(cents), 100)
    return f"${dollars:,}.{remainder:02d}"


def add_cents(*amounts: int) -> int:
    """Sum any number of cent amounts. Returns 0 for no args."""
    total = 0
    for amount in amounts:
        if not isinstance(amount, int) or isinstance(amount, bool):
            raise InvalidAmountError(f"add_cents: invalid cents value {amount!r}")
        total += amount
    return total


def percent_of_cents(cents: Number, rate: Number) -> int:
    """
    Calculate a percentage of a cent amount, rounded to the nearest cent.

    Each call rounds independently: a fee and a deposit derived from it are
    two separate rounding steps, never one chained float computation.
    """
    if not _is_number(cents) or not _is_finite(cents) or cents < 0:
        raise InvalidAmountError(f"percent_of_cents: invalid cents value {cents!r}")
    if not _is_number(rate) or not _is_finite(rate) or rate < 0:
        raise InvalidAmountError(f"percent_of_cents: invalid rate {rate!r}")

    return round_half_up(_to_decimal(cents) * _to_decimal(rate))
