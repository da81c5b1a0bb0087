"""
FastAPI dependencies for the API.
"""

from fastapi import Body

from api.schemas import AnalysisRequest
from engine.ratios import compute_ratios
from report.models import AnalysisReport, build_analysis_report


def get_analysis_report(request: AnalysisRequest = Body(...)) -> AnalysisReport:
    """
    Compute ratios for the request and wrap them in a report.

    Raises engine.ValidationError, turned into a 422 by the app's handler.
    """
    amounts = request.amounts()
    ratios = compute_ratios(amounts)
    return build_analysis_report(
        ratios,
        amounts,
        company_ticker=request.company_ticker,
        currency=request.currency,
        report_date=request.report_date,
    )
