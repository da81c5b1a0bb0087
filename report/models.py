"""
Report view model shared by every renderer and the API.

An AnalysisReport is everything needed to print one analysis: who and when,
the echoed inputs with currency symbols, the four ratios, the interpretation
guide and the disclaimer. Renderers only read it.
"""

from dataclasses import dataclass, field
from datetime import date, datetime
from typing import Any, Mapping, Optional, Union

from config.logging_config import get_logger
from config.settings import settings
from engine.ratios import FinancialInputs, RatioReport, interpretation_guide
from report.currency import get_currency_symbol, is_supported_currency, normalize_currency
from report.formatting import format_amount, format_report_date

logger = get_logger(__name__)

INPUT_LABELS = {
    "current_assets": "Current Assets",
    "current_liabilities": "Current Liabilities",
    "inventory": "Inventory",
    "total_assets": "Total Assets",
    "total_liabilities": "Total Liabilities",
    "shareholders_equity": "Shareholders' Equity",
}

CATEGORY_TITLES = {
    "liquidity": "Liquidity Ratios",
    "solvency": "Solvency / Leverage Ratios",
}


@dataclass(frozen=True)
class InputLine:
    """One echoed input field."""

    key: str
    label: str
    display: str


@dataclass
class AnalysisReport:
    """A rendered-ready analysis of one company."""

    company_ticker: str
    currency: str
    currency_symbol: str
    report_date: str
    inputs: list[InputLine]
    ratios: RatioReport
    guide: list[dict[str, Any]] = field(default_factory=interpretation_guide)
    disclaimer: str = ""
    title: str = ""
    generated_at: datetime = field(default_factory=datetime.now)

    def to_dict(self) -> dict[str, Any]:
        return {
            "title": self.title,
            "company_ticker": self.company_ticker,
            "currency": self.currency,
            "currency_symbol": self.currency_symbol,
            "report_date": self.report_date,
            "inputs": [
                {"key": line.key, "label": line.label, "display": line.display}
                for line in self.inputs
            ],
            "ratios": self.ratios.as_dict(),
            "guide": self.guide,
            "disclaimer": self.disclaimer,
            "generated_at": self.generated_at.isoformat(),
        }


def build_analysis_report(
    ratios: RatioReport,
    inputs: Union[FinancialInputs, Mapping[str, Any]],
    company_ticker: str = "",
    currency: Optional[str] = None,
    report_date: Union[str, date, None] = None,
) -> AnalysisReport:
    """
    Assemble an AnalysisReport.

    Args:
        ratios: Result of compute_ratios
        inputs: The values to echo; raw strings keep the way they were typed
        company_ticker: Free-text company identifier
        currency: Currency code, display only
        report_date: Report date in any readable form
    """
    if isinstance(inputs, FinancialInputs):
        raw_values = inputs.to_dict()
    else:
        raw_values = dict(inputs)

    code = normalize_currency(currency or settings.default_currency)
    if not is_supported_currency(code):
        logger.warning(f"Unknown currency {code!r}, amounts shown without a symbol")
    lines = [
        InputLine(key=key, label=label, display=format_amount(raw_values.get(key), code))
        for key, label in INPUT_LABELS.items()
    ]

    return AnalysisReport(
        company_ticker=(company_ticker or "").strip().upper(),
        currency=code,
        currency_symbol=get_currency_symbol(code),
        report_date=format_report_date(report_date),
        inputs=lines,
        ratios=ratios,
        disclaimer=settings.disclaimer,
        title=settings.report_title,
    )
