"""Unit tests for business constants and rate configuration"""

import dataclasses
import pytest
from fuzzycat_gateway.domain import constants
from fuzzycat_gateway.domain.constants import BusinessRates, DEFAULT_RATES
from fuzzycat_gateway.domain.exceptions import InvalidRatesError


def test_business_constant_values():
    assert constants.PLATFORM_FEE_RATE == 0.06
    assert constants.DEPOSIT_RATE == 0.25
    assert constants.CLINIC_SHARE_RATE == 0.03
    assert constants.PLATFORM_RESERVE_RATE == 0.01
    assert constants.NUM_INSTALLMENTS == 6
    assert constants.INSTALLMENT_INTERVAL_DAYS == 14
    assert constants.MIN_BILL_CENTS == 50_000
    assert constants.MAX_BILL_CENTS == 2_500_000


def test_platform_retains_margin():
    """Clinic share + reserve stays below the fee charged to the owner"""
    assert constants.CLINIC_SHARE_RATE + constants.PLATFORM_RESERVE_RATE < constants.PLATFORM_FEE_RATE
    assert DEFAULT_RATES.platform_margin_rate > 0


def test_default_rates_mirror_constants():
    assert DEFAULT_RATES == BusinessRates(
        platform_fee_rate=0.06,
        deposit_rate=0.25,
        clinic_share_rate=0.03,
        platform_reserve_rate=0.01,
        num_installments=6,
        installment_interval_days=14,
        min_bill_cents=50_000,
        max_bill_cents=2_500_000,
    )


def test_rates_are_immutable():
    with pytest.raises(dataclasses.FrozenInstanceError):
        DEFAULT_RATES.platform_fee_rate = 0.1


@pytest.mark.parametrize(
    "overrides",
    [
        {"clinic_share_rate": 0.05},  # 0.05 + 0.01 leaves no margin
        {"platform_fee_rate": 0.03},
        {"platform_fee_rate": -0.06},
        {"deposit_rate": 1.5},
        {"deposit_rate": float("nan")},
        {"num_installments": 0},
        {"installment_interval_days": 0},
        {"min_bill_cents": 0},
        {"min_bill_cents": 3_000_000},
        {"num_installments": 6.0},
        {"num_installments": True},
        {"installment_interval_days": 14.0},
        {"min_bill_cents": 50_000.0},
        {"max_bill_cents": "2500000"},
        {"platform_fee_rate": "0.06"},
        {"deposit_rate": None},
        {"clinic_share_rate": False},
    ],
)
def test_invalid_rates_rejected(overrides):
    with pytest.raises(InvalidRatesError):
        BusinessRates(**overrides)


def test_alternate_regime_allowed():
    rates = BusinessRates(num_installments=4, installment_interval_days=7)
    assert rates.num_installments == 4
    assert rates.platform_fee_rate == DEFAULT_RATES.platform_fee_rate
