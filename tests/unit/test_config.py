"""Unit tests for settings validation"""

import pytest
from pydantic import ValidationError
from fuzzycat_gateway.config import Settings


def test_default_schedule_timezone(monkeypatch):
    monkeypatch.delenv("SCHEDULE_TIMEZONE", raising=False)
    assert Settings().schedule_timezone == "UTC"


def test_schedule_timezone_from_environment(monkeypatch):
    monkeypatch.setenv("SCHEDULE_TIMEZONE", "America/New_York")
    assert Settings().schedule_timezone == "America/New_York"


@pytest.mark.parametrize("zone", ["Mars/Base", "Europe/Atlantis"])
def test_unknown_schedule_timezone_rejected(monkeypatch, zone):
    """Test a zone the clock cannot resolve fails when settings load"""
    monkeypatch.setenv("SCHEDULE_TIMEZONE", zone)
    with pytest.raises(ValidationError):
        Settings()
