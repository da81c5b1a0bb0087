"""
Currency API endpoints.
"""

from fastapi import APIRouter

from api.schemas import CurrencyListResponse
from config.settings import settings
from report.currency import list_currencies

router = APIRouter()


@router.get("", response_model=CurrencyListResponse)
async def get_currencies():
    """Supported currency codes with their display symbols."""
    return CurrencyListResponse(
        default=settings.default_currency,
        currencies=list_currencies(),
    )
