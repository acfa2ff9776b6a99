"""Dependency injection for FastAPI endpoints"""

from datetime import datetime

from fastapi import Request
from fuzzycat_gateway.config import settings
from fuzzycat_gateway.domain.constants import BusinessRates, DEFAULT_RATES
from fuzzycat_gateway.utils.date_utils import now_in


def get_request_id(request: Request) -> str:
    """Extract request ID from request state"""
    return getattr(request.state, "request_id", "unknown")


def get_business_rates() -> BusinessRates:
    """Provide the rates plans are priced with"""
    return DEFAULT_RATES


def get_current_time() -> datetime:
    """Provide the server clock, used as enrollment date when a request omits one"""
    return now_in(settings.schedule_timezone)
