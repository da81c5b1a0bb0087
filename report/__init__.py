"""Presentation layer: formatting, form state and printable reports."""

from report.currency import get_currency_symbol, list_currencies
from report.form import AnalyzerForm
from report.models import AnalysisReport, build_analysis_report
from report.renderers import BaseRenderer, HtmlRenderer, RendererRegistry, TextRenderer

__all__ = [
    "get_currency_symbol",
    "list_currencies",
    "AnalyzerForm",
    "AnalysisReport",
    "build_analysis_report",
    "BaseRenderer",
    "HtmlRenderer",
    "RendererRegistry",
    "TextRenderer",
]
