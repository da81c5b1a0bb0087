#!/usr/bin/env python
"""
Analyze one balance sheet from the command line.

Computes the four liquidity/solvency ratios for the given figures and prints
the text report, or writes the chosen format to a directory.

Example:
    python scripts/analyze_company.py 150,000,000 80,000,000 30,000,000 \\
        500,000,000 300,000,000 200,000,000 --ticker BIMBOA --currency MXN \\
        --date 2024-12-31 --format html --output reports/
"""

import sys
from pathlib import Path
from typing import Optional

# Add parent directory to path
sys.path.insert(0, str(Path(__file__).parent.parent))

from config.logging_config import setup_logging, get_logger
from report.form import AnalyzerForm
from report.renderers import RendererRegistry

logger = get_logger(__name__)


def analyze_company(
    amounts: dict[str, str],
    ticker: str = "",
    currency: Optional[str] = None,
    report_date: str = "",
    format_name: str = "text",
    output_dir: Optional[Path] = None,
) -> int:
    """Run one analysis. Returns the process exit code."""
    logger.info(f"Analyzing {ticker or 'unnamed company'}")

    form = AnalyzerForm()
    form.set_ticker(ticker)
    if currency:
        form.currency = currency.upper()
    form.report_date = report_date
    for name, text in amounts.items():
        form.set_field(name, text)

    if form.calculate() is None:
        print(form.error, file=sys.stderr)
        return 1

    if output_dir is not None:
        path = form.export(output_dir, format_name)
        print(f"Report written to {path}")
    else:
        print(form.render(format_name))

    return 0


if __name__ == "__main__":
    import argparse

    parser = argparse.ArgumentParser(description="Compute balance-sheet health ratios")
    parser.add_argument("current_assets", help="Current assets")
    parser.add_argument("current_liabilities", help="Current liabilities")
    parser.add_argument("inventory", help="Inventory")
    parser.add_argument("total_assets", help="Total assets")
    parser.add_argument("total_liabilities", help="Total liabilities")
    parser.add_argument("shareholders_equity", help="Shareholders' equity")
    parser.add_argument("--ticker", default="", help="Company ticker")
    parser.add_argument("--currency", default=None, help="Currency code, e.g. USD")
    parser.add_argument("--date", default="", help="Report date, e.g. 31-Dec-2024")
    parser.add_argument(
        "--format",
        default="text",
        choices=RendererRegistry.get_available(),
        help="Report format",
    )
    parser.add_argument(
        "--output",
        type=Path,
        default=None,
        help="Directory to write the report to instead of printing it",
    )
    parser.add_argument(
        "--log-level",
        default=None,
        choices=["DEBUG", "INFO", "WARNING", "ERROR"],
        help="Override the configured log level",
    )

    args = parser.parse_args()
    setup_logging(args.log_level)

    sys.exit(
        analyze_company(
            amounts={
                "current_assets": args.current_assets,
                "current_liabilities": args.current_liabilities,
                "inventory": args.inventory,
                "total_assets": args.total_assets,
                "total_liabilities": args.total_liabilities,
                "shareholders_equity": args.shareholders_equity,
            },
            ticker=args.ticker,
            currency=args.currency,
            report_date=args.date,
            format_name=args.format,
            output_dir=args.output,
        )
    )
