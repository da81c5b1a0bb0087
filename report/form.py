"""
Form state for an interactive analysis.

AnalyzerForm holds what a user has typed (ticker, currency, date and the six
balance-sheet amounts as sanitized strings), runs the engine on request and
keeps either the latest report or the latest error, never both.
"""

from dataclasses import dataclass, field
from pathlib import Path
from typing import Optional

from config.logging_config import get_logger
from config.settings import settings
from engine.ratios import FinancialInputs, ValidationError, compute_ratios
from report.formatting import format_amount, format_display_number, sanitize_numeric_input
from report.models import AnalysisReport, build_analysis_report
from report.renderers import RendererRegistry

logger = get_logger(__name__)

NUMERIC_FIELDS = tuple(FinancialInputs.field_names())


def _empty_amounts() -> dict[str, str]:
    return {name: "" for name in NUMERIC_FIELDS}


@dataclass
class AnalyzerForm:
    """Mutable form behind one analysis session."""

    company_ticker: str = ""
    currency: str = field(default_factory=lambda: settings.default_currency)
    report_date: str = ""
    amounts: dict[str, str] = field(default_factory=_empty_amounts)
    report: Optional[AnalysisReport] = None
    error: str = ""

    def set_ticker(self, text: str) -> str:
        """Store the company ticker upper-cased, as it is shown on reports."""
        self.company_ticker = (text or "").upper()
        return self.company_ticker

    def set_field(self, name: str, text: str) -> str:
        """
        Store a typed amount after sanitizing it.

        Returns:
            The stored value

        Raises:
            KeyError: If ``name`` is not one of the six amount fields
        """
        if name not in self.amounts:
            raise KeyError(f"Unknown field: {name}")
        cleaned = sanitize_numeric_input(text)
        self.amounts[name] = cleaned
        return cleaned

    def display_value(self, name: str) -> str:
        """Formatted amount for an input box."""
        return format_display_number(self.amounts[name])

    def echo_value(self, name: str) -> str:
        """Formatted amount with the currency symbol."""
        return format_amount(self.amounts[name], self.currency)

    def calculate(self) -> Optional[AnalysisReport]:
        """
        Compute the ratios for the current form values.

        Any previous error or report is cleared first. On invalid input the
        error message is kept and no report is produced.
        """
        self.error = ""
        self.report = None

        try:
            ratios = compute_ratios(dict(self.amounts))
        except ValidationError as e:
            logger.warning(f"Invalid form input in fields: {', '.join(e.fields)}")
            self.error = e.message
            return None

        self.report = build_analysis_report(
            ratios,
            self.amounts,
            company_ticker=self.company_ticker,
            currency=self.currency,
            report_date=self.report_date,
        )
        return self.report

    def clear(self) -> None:
        """Reset every field and drop results and errors."""
        self.company_ticker = ""
        self.currency = settings.default_currency
        self.report_date = ""
        self.amounts = _empty_amounts()
        self.report = None
        self.error = ""

    @property
    def has_results(self) -> bool:
        return self.report is not None and not self.error

    def render(self, format_name: str = "html") -> str:
        """
        Render the current report as a printable document.

        Raises:
            RuntimeError: If there is no report to render
        """
        if not self.has_results:
            raise RuntimeError("Nothing to render: calculate a report first")
        return RendererRegistry.get(format_name).render(self.report)

    def export(self, output_dir: Path, format_name: str = "html") -> Path:
        """Write the current report to ``output_dir``."""
        if not self.has_results:
            raise RuntimeError("Nothing to export: calculate a report first")
        return RendererRegistry.get(format_name).write(self.report, Path(output_dir))
