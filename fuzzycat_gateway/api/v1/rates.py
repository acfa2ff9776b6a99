"""GET /v1/rates - Active business rates"""

from dataclasses import asdict
from fastapi import APIRouter, Depends

from fuzzycat_gateway.api.v1.schemas import RatesResponse
from fuzzycat_gateway.api.dependencies import get_business_rates
from fuzzycat_gateway.domain.constants import BusinessRates

router = APIRouter()


@router.get("/rates", response_model=RatesResponse)
def get_rates(rates: BusinessRates = Depends(get_business_rates)):
    """Expose the rates quotes are priced with so clients can show the terms"""
    return RatesResponse(**asdict(rates))
