"""
Currency codes accepted by the analyzer.

Currencies are used for display only; amounts are never converted.
"""

from typing import Optional

# Code: (display symbol, display name)
CURRENCIES = {
    "USD": ("$", "US Dollar"),
    "MXN": ("MXN$", "Mexican Peso"),
    "EUR": ("€", "Euro"),
    "JPY": ("¥", "Japanese Yen"),
    "GBP": ("£", "Pound Sterling"),
    "CAD": ("C$", "Canadian Dollar"),
    "AUD": ("A$", "Australian Dollar"),
    "CHF": ("CHF", "Swiss Franc"),
    "CNY": ("¥", "Chinese Yuan"),  # same glyph as JPY
    "INR": ("₹", "Indian Rupee"),
    "BRL": ("R$", "Brazilian Real"),
    "RUB": ("₽", "Russian Ruble"),
    "ZAR": ("R", "South African Rand"),
}


def normalize_currency(code: Optional[str]) -> str:
    """Upper-case and strip a currency code."""
    if not code:
        return ""
    return code.strip().upper()


def get_currency_symbol(code: Optional[str]) -> str:
    """
    Return the display symbol for a currency code.

    Unrecognized codes have no symbol and return an empty string.
    """
    entry = CURRENCIES.get(normalize_currency(code))
    return entry[0] if entry else ""


def is_supported_currency(code: Optional[str]) -> bool:
    return normalize_currency(code) in CURRENCIES


def list_currencies() -> list[dict[str, str]]:
    """All supported currencies, in selector order."""
    return [
        {"code": code, "symbol": symbol, "name": name}
        for code, (symbol, name) in CURRENCIES.items()
    ]
