"""Date manipulation utilities"""

from datetime import date, datetime, timedelta
from typing import TypeVar
from zoneinfo import ZoneInfo

D = TypeVar("D", date, datetime)


def add_calendar_days(from_date: D, days: int) -> D:
    """Add calendar days (weekends included) to a date or datetime, keeping its type and tzinfo"""
    return from_date + timedelta(days=days)


def now_in(timezone_name: str = "UTC") -> datetime:
    """Current wall-clock instant as an aware datetime in the given IANA zone"""
    return datetime.now(ZoneInfo(timezone_name))
