"""
Report renderers.

Each renderer turns an AnalysisReport into a standalone document. The HTML
renderer produces the printable version (what a browser prints or saves as
PDF); the text renderer is used on the console.

To add a new format:
1. Subclass BaseRenderer
2. Implement render()
3. Register via RendererRegistry.register()
"""

import html
import re
from abc import ABC, abstractmethod
from pathlib import Path

from config.logging_config import get_logger
from config.settings import settings
from report.models import CATEGORY_TITLES, AnalysisReport

logger = get_logger(__name__)

LINE_WIDTH = 70
DIVIDER = "=" * LINE_WIDTH
SUB_DIVIDER = "-" * LINE_WIDTH

_UNSAFE_FILENAME_CHARS = re.compile(r"[^A-Za-z0-9_-]+")


class BaseRenderer(ABC):
    """Abstract base for report renderers."""

    @property
    @abstractmethod
    def format_name(self) -> str:
        """Short name for this format (e.g., 'html', 'text')."""

    @property
    @abstractmethod
    def file_extension(self) -> str:
        """File extension including dot (e.g., '.html')."""

    @abstractmethod
    def render(self, report: AnalysisReport) -> str:
        """Render report to string."""

    def write(self, report: AnalysisReport, output_dir: Path) -> Path:
        """
        Write report to a file in ``output_dir``.

        Returns:
            Path to the written file
        """
        output_dir.mkdir(parents=True, exist_ok=True)
        filepath = output_dir / self.build_filename(report)
        filepath.write_text(self.render(report), encoding="utf-8")
        logger.info(f"Report written to {filepath}")
        return filepath

    def build_filename(self, report: AnalysisReport) -> str:
        """Build output filename from report metadata."""
        company = _slug(report.company_ticker) or "report"
        stamp = _slug(report.report_date) or report.generated_at.strftime("%Y-%m-%d")
        return f"financial_health_{company}_{stamp}{self.file_extension}"


def _slug(text: str) -> str:
    """ASCII-only filename component; anything else collapses to '_'."""
    return _UNSAFE_FILENAME_CHARS.sub("_", text).strip("_")


class TextRenderer(BaseRenderer):
    """Renders the report as plain text for the console."""

    @property
    def format_name(self) -> str:
        return "text"

    @property
    def file_extension(self) -> str:
        return ".txt"

    def render(self, report: AnalysisReport) -> str:
        lines = ["", DIVIDER, f"  {report.title.upper()}"]
        if report.company_ticker:
            lines.append(f"  Results for: {report.company_ticker}")
        if report.report_date:
            lines.append(f"  Report date: {report.report_date}")
        lines.append(f"  Currency: {report.currency}")
        lines.append(DIVIDER)

        lines.append("")
        lines.append("  INPUT DATA:")
        lines.append(SUB_DIVIDER)
        for line in report.inputs:
            lines.append(f"    {line.label:25s}  {line.display}")

        for category, title in CATEGORY_TITLES.items():
            lines.append("")
            lines.append(f"  {title.upper()}:")
            lines.append(SUB_DIVIDER)
            for result in report.ratios.by_category(category):
                lines.append(
                    f"    {result.name:25s}  {result.display_value:>10s}  {result.classification}"
                )

        lines.append("")
        lines.append("  INTERPRETATION GUIDE:")
        lines.append(SUB_DIVIDER)
        for entry in report.guide:
            ranges = " | ".join(f"{b['range']}: {b['rating']}" for b in entry["bands"])
            lines.append(f"    {entry['name']:25s}  {ranges}")

        lines.append("")
        lines.append(DIVIDER)
        if report.disclaimer:
            lines.append(f"  *Note: {report.disclaimer}")
        lines.append(f"  Generated: {report.generated_at.strftime('%Y-%m-%d %H:%M')}")
        lines.append("")
        return "\n".join(lines)


class HtmlRenderer(BaseRenderer):
    """Renders the report as a standalone, print-ready HTML document."""

    @property
    def format_name(self) -> str:
        return "html"

    @property
    def file_extension(self) -> str:
        return ".html"

    def render(self, report: AnalysisReport) -> str:
        esc = html.escape
        body = [f"<h1>{esc(report.title)}</h1>"]

        if report.company_ticker:
            body.append(
                f'<h2>Results for: <span class="ticker">{esc(report.company_ticker)}</span></h2>'
            )
        if report.report_date:
            body.append(f"<p>Report date: {esc(report.report_date)}</p>")
        body.append(f"<p>Currency: {esc(report.currency)}</p>")

        body.append("<h3>Input Data</h3>")
        for line in report.inputs:
            body.append(
                f'<p><span class="label">{esc(line.label)}:</span> {esc(line.display)}</p>'
            )

        for category, title in CATEGORY_TITLES.items():
            body.append(f"<h3>{esc(title)}</h3>")
            for result in report.ratios.by_category(category):
                rating = f" {result.rating.emoji}" if result.is_defined else ""
                body.append(
                    f'<p class="ratio" data-ratio="{esc(result.key)}">'
                    f'<span class="label">{esc(result.name)}:</span> '
                    f"{esc(result.display_value)} ({esc(result.description)}) - "
                    f"{esc(result.classification)}{rating}</p>"
                )

        body.append('<div class="guide"><h3>Ratio Interpretation Guide</h3>')
        for entry in report.guide:
            body.append(f"<h4>{esc(entry['name'])}</h4><ul>")
            for band in entry["bands"]:
                body.append(
                    f"<li><span class=\"label\">{esc(band['range'])}:</span> "
                    f"{esc(band['rating'])} {band['emoji']}</li>"
                )
            body.append("</ul>")
        body.append("</div>")

        if report.disclaimer:
            body.append(f'<p class="disclaimer">*Note: {esc(report.disclaimer)}</p>')

        return _HTML_TEMPLATE.format(
            title=esc(report.title),
            margin=settings.print_margin_mm,
            body="\n    ".join(body),
        )


_HTML_TEMPLATE = """<!DOCTYPE html>
<html>
<head>
  <meta charset="utf-8">
  <title>{title}</title>
  <style>
    body {{
      font-family: sans-serif;
      margin: {margin}mm;
      background-color: white !important;
      color: black !important;
    }}
    #printable-content * {{
      color: black !important;
    }}
    .label {{ font-weight: bold; }}
    .disclaimer {{ font-size: 0.8em; }}
    @page {{ margin: {margin}mm; }}
  </style>
</head>
<body>
  <div id="printable-content">
    {body}
  </div>
</body>
</html>
"""


class RendererRegistry:
    """Registry of available renderers, looked up by format name."""

    _renderers: dict[str, type[BaseRenderer]] = {}

    @classmethod
    def register(cls, renderer_class: type[BaseRenderer]) -> None:
        """Register a renderer class."""
        cls._renderers[renderer_class().format_name] = renderer_class

    @classmethod
    def get(cls, format_name: str) -> BaseRenderer:
        """
        Get a renderer instance by name.

        Raises:
            KeyError: If no renderer is registered under ``format_name``
        """
        try:
            return cls._renderers[format_name]()
        except KeyError:
            raise KeyError(f"Unknown report format: {format_name}") from None

    @classmethod
    def get_available(cls) -> list[str]:
        """Return list of registered format names."""
        return list(cls._renderers.keys())


RendererRegistry.register(HtmlRenderer)
RendererRegistry.register(TextRenderer)
