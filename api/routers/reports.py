"""
Analysis report API endpoints.
"""

from fastapi import APIRouter, Depends, HTTPException, Query
from fastapi.responses import HTMLResponse, PlainTextResponse

from api.dependencies import get_analysis_report
from api.schemas import ReportResponse
from config.logging_config import get_logger
from report.models import AnalysisReport
from report.renderers import RendererRegistry

logger = get_logger(__name__)

router = APIRouter()


@router.post("", response_model=ReportResponse)
async def create_report(report: AnalysisReport = Depends(get_analysis_report)):
    """
    Build a full analysis report.

    Echoes the inputs with the currency symbol, and returns the ratios,
    interpretation guide and disclaimer.
    """
    data = report.to_dict()
    data["data_timestamp"] = data.pop("generated_at")
    return ReportResponse(**data)


@router.post("/print")
async def print_report(
    report: AnalysisReport = Depends(get_analysis_report),
    format: str = Query("html", enum=["html", "text"]),
):
    """
    Render the report as a standalone printable document.

    The HTML version is ready for a browser's print or save-as-PDF dialog.
    """
    try:
        renderer = RendererRegistry.get(format)
    except KeyError as e:
        raise HTTPException(status_code=400, detail=str(e.args[0]))

    content = renderer.render(report)
    filename = renderer.build_filename(report)
    logger.info(f"Rendered {format} report for {report.company_ticker or 'unnamed company'}")

    headers = {"Content-Disposition": f'inline; filename="{filename}"'}
    if format == "html":
        return HTMLResponse(content=content, headers=headers)
    return PlainTextResponse(content=content, headers=headers)
