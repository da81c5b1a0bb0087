"""
Financial ratios API endpoints.
"""

from fastapi import APIRouter

from api.schemas import FinancialInputsRequest, GuideResponse, RatiosResponse
from config.settings import settings
from engine.ratios import compute_ratios, interpretation_guide

router = APIRouter()


@router.post("/compute", response_model=RatiosResponse)
async def compute_ratios_endpoint(request: FinancialInputsRequest):
    """
    Compute the current, quick, debt-to-equity and debt-to-assets ratios.

    A zero denominator yields a null value with an explanatory
    classification; non-numeric fields fail the whole request with 422.
    """
    ratios = compute_ratios(request.amounts())
    return RatiosResponse(ratios=ratios.as_dict())


@router.get("/guide", response_model=GuideResponse)
async def get_interpretation_guide():
    """Threshold ranges used to classify each ratio."""
    return GuideResponse(guide=interpretation_guide(), disclaimer=settings.disclaimer)
