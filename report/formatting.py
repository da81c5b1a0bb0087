"""
Display formatting for amounts and report dates.

Amounts are shown with en-US grouping ("1,234,567.89") regardless of the
currency, and report dates as DD-MMM-YYYY ("31-Dec-2024").
"""

import math
import re
from datetime import date, datetime
from decimal import ROUND_HALF_UP, Decimal, localcontext
from typing import Optional, Union

from dateutil.parser import parse as parse_date

from report.currency import get_currency_symbol

MONTH_ABBREVIATIONS = [
    "Jan", "Feb", "Mar", "Apr", "May", "Jun",
    "Jul", "Aug", "Sep", "Oct", "Nov", "Dec",
]

# Spanish abbreviations are accepted as already-formatted dates
_KNOWN_MONTHS = {m.lower() for m in MONTH_ABBREVIATIONS} | {
    "ene", "feb", "mar", "abr", "may", "jun",
    "jul", "ago", "sep", "oct", "nov", "dic",
}

_SPANISH_TO_NUMBER = {
    "ene": 1, "feb": 2, "mar": 3, "abr": 4, "may": 5, "jun": 6,
    "jul": 7, "ago": 8, "sep": 9, "oct": 10, "nov": 11, "dic": 12,
}

_DISPLAY_DATE = re.compile(r"^(\d{1,2})-([A-Za-z]{3})-(\d{4})$")
_LEADING_NUMBER = re.compile(r"^[+-]?(?:\d+\.?\d*|\.\d+)")

TWO_PLACES = Decimal("0.01")

Amount = Union[str, int, float, None]


def sanitize_numeric_input(text: Optional[str]) -> str:
    """
    Clean a typed amount for storage.

    Thousands separators are dropped and only digits, '.' and '-' are kept,
    so "1,234.5" becomes "1234.5" and "$ 12a" becomes "12".
    """
    if not text:
        return ""
    return re.sub(r"[^0-9.\-]", "", text.replace(",", ""))


def format_display_number(raw: Amount) -> str:
    """
    Format an amount with thousands separators.

    Two decimals are shown when the raw text contains a decimal point,
    none otherwise; never more than two. Text that does not start with a
    number is returned unchanged (e.g. a lone "-" while typing).
    """
    if raw is None or isinstance(raw, bool):
        return ""

    if isinstance(raw, (int, float)):
        if isinstance(raw, float) and not math.isfinite(raw):
            return str(raw)
        number_text = repr(raw)
        show_cents = isinstance(raw, float) and not raw.is_integer()
        precision = 400
    else:
        text = str(raw).strip()
        if text == "":
            return ""
        match = _LEADING_NUMBER.match(text)
        if not match:
            return text
        number_text = match.group(0)
        show_cents = "." in text
        precision = len(number_text) + 4

    try:
        with localcontext() as ctx:
            ctx.prec = max(precision, 28)
            amount = Decimal(number_text).quantize(TWO_PLACES, rounding=ROUND_HALF_UP)
    except ArithmeticError:
        return str(raw)

    formatted = f"{amount:,.2f}"
    if not show_cents:
        formatted = formatted.rstrip("0").rstrip(".")
    return formatted


def format_amount(raw: Amount, currency: Optional[str] = None) -> str:
    """Formatted amount followed by the currency symbol, when there is one."""
    formatted = format_display_number(raw)
    symbol = get_currency_symbol(currency)
    if formatted and symbol:
        return f"{formatted} {symbol}"
    return formatted


def parse_report_date(value: Union[str, date, None]) -> Optional[date]:
    """Parse a report date, returning None when it cannot be read."""
    if value is None or value == "":
        return None
    if isinstance(value, datetime):
        return value.date()
    if isinstance(value, date):
        return value

    text = value.strip()
    match = _DISPLAY_DATE.match(text)
    if match:
        day, month, year = match.groups()
        month_lower = month.lower()
        if month_lower in _SPANISH_TO_NUMBER:
            try:
                return date(int(year), _SPANISH_TO_NUMBER[month_lower], int(day))
            except ValueError:
                return None

    try:
        return parse_date(text).date()
    except (ValueError, OverflowError):
        return None


def format_report_date(value: Union[str, date, None]) -> str:
    """
    Format a report date as DD-MMM-YYYY.

    Text already in DD-MMM-YYYY form is kept as typed; other readable dates
    are reformatted; unreadable text is returned unchanged.
    """
    if value is None or value == "":
        return ""

    if isinstance(value, str):
        text = value.strip()
        match = _DISPLAY_DATE.match(text)
        if match and match.group(2).lower() in _KNOWN_MONTHS:
            return text

    parsed = parse_report_date(value)
    if parsed is None:
        return str(value)
    return f"{parsed.day:02d}-{MONTH_ABBREVIATIONS[parsed.month - 1]}-{parsed.year}"
