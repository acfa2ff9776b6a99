"""Unit tests for integer cents helpers"""

import math
import pytest
from decimal import Decimal
from fuzzycat_gateway.domain.exceptions import InvalidAmountError
from fuzzycat_gateway.domain.money import (
    add_cents,
    format_cents,
    percent_of_cents,
    round_half_up,
    to_cents,
)


def test_to_cents_whole_and_fractional_dollars():
    """Test conversion of common dollar amounts"""
    assert to_cents(1) == 100
    assert to_cents(1200) == 120_000
    assert to_cents(12.5) == 1250
    assert to_cents(9.99) == 999
    assert to_cents(0.01) == 1
    assert to_cents(0) == 0


def test_to_cents_float_noise():
    """Test 0.1 + 0.2 does not leak float error into cents"""
    assert to_cents(0.1 + 0.2) == 30


def test_to_cents_large_value():
    assert to_cents(100_000) == 10_000_000


@pytest.mark.parametrize("dollars", [-1, -0.01, math.nan, math.inf, -math.inf, "12", None, True])
def test_to_cents_rejects_invalid(dollars):
    """Test negative, non-finite and non-numeric input is a validation error"""
    with pytest.raises(InvalidAmountError):
        to_cents(dollars)


def test_format_cents_standard_amounts():
    assert format_cents(1250) == "$12.50"
    assert format_cents(100) == "$1.00"
    assert format_cents(999) == "$9.99"
    assert format_cents(7200) == "$72.00"
    assert format_cents(0) == "$0.00"


def test_format_cents_comma_grouping():
    """Test thousands separators"""
    assert format_cents(120_000) == "$1,200.00"
    assert format_cents(1_000_000) == "$10,000.00"
    assert format_cents(2_500_000) == "$25,000.00"


def test_format_cents_accepts_integral_float():
    assert format_cents(7200.0) == "$72.00"


@pytest.mark.parametrize("cents", [-1, -1500, 12.5, math.nan, math.inf, "7200", True])
def test_format_cents_rejects_invalid(cents):
    """Test negative or non-integer cents is a validation error"""
    with pytest.raises(InvalidAmountError):
        format_cents(cents)


def test_invalid_amount_error_is_value_error():
    """Callers catching ValueError see money validation failures"""
    with pytest.raises(ValueError):
        format_cents(12.5)


def test_add_cents():
    assert add_cents(100, 200, 300) == 600
    assert add_cents(500) == 500
    assert add_cents(0, 0, 100) == 100
    assert add_cents(1_000_000, 2_000_000, 3_000_000) == 6_000_000


def test_add_cents_no_arguments():
    assert add_cents() == 0


@pytest.mark.parametrize("amounts", [(1.5,), (100, 0.5), (100, "200"), (True,), (100, None)])
def test_add_cents_rejects_non_integer(amounts):
    """Test the sum stays in integer cents"""
    with pytest.raises(InvalidAmountError):
        add_cents(*amounts)


def test_percent_of_cents_business_rates():
    """Test 6% of $1,200 and 25% of $1,272"""
    assert percent_of_cents(120_000, 0.06) == 7200
    assert percent_of_cents(127_200, 0.25) == 31_800


def test_percent_of_cents_rounds_half_up():
    """Test ties round away from zero, not to even"""
    assert percent_of_cents(100, 0.5) == 50
    assert percent_of_cents(101, 0.5) == 51  # 50.5 → 51
    assert percent_of_cents(1, 0.5) == 1  # banker's rounding would give 0
    assert percent_of_cents(5, 0.5) == 3  # banker's rounding would give 2


def test_percent_of_cents_rounds_to_nearest():
    assert percent_of_cents(100, 0.03) == 3
    assert percent_of_cents(777, 0.06) == 47  # 46.62 → 47


def test_percent_of_cents_zero_and_full_rate():
    assert percent_of_cents(0, 0.06) == 0
    assert percent_of_cents(120_000, 0) == 0
    assert percent_of_cents(120_000, 1) == 120_000


@pytest.mark.parametrize(
    "cents,rate",
    [
        (-100, 0.06),
        (100, -0.06),
        (math.inf, 0.06),
        (math.nan, 0.06),
        (100, math.inf),
        (100, math.nan),
    ],
)
def test_percent_of_cents_rejects_invalid(cents, rate):
    with pytest.raises(InvalidAmountError):
        percent_of_cents(cents, rate)


def test_round_half_up_ties_away_from_zero():
    assert round_half_up(Decimal("2.5")) == 3
    assert round_half_up(Decimal("2.4999")) == 2
    assert round_half_up(Decimal("-2.5")) == -3
