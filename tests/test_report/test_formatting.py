"""Tests for amount, date and currency formatting."""

from datetime import date

import pytest
from report.currency import get_currency_symbol, is_supported_currency, list_currencies
from report.formatting import (
    format_amount,
    format_display_number,
    format_report_date,
    parse_report_date,
    sanitize_numeric_input,
)


class TestSanitizeNumericInput:
    """Tests for cleaning typed amounts."""

    def test_strips_commas(self):
        assert sanitize_numeric_input("1,234,567.89") == "1234567.89"

    def test_keeps_sign_and_point(self):
        assert sanitize_numeric_input("-12.5") == "-12.5"

    def test_drops_other_characters(self):
        assert sanitize_numeric_input("$ 12a") == "12"

    def test_empty(self):
        assert sanitize_numeric_input("") == ""
        assert sanitize_numeric_input(None) == ""


class TestFormatDisplayNumber:
    """Tests for thousands grouping."""

    def test_integer_grouping(self):
        assert format_display_number("1234567") == "1,234,567"

    def test_decimal_point_shows_cents(self):
        assert format_display_number("1234567.8") == "1,234,567.80"
        assert format_display_number("150.") == "150.00"

    def test_at_most_two_decimals(self):
        assert format_display_number("0.125") == "0.13"

    def test_negative(self):
        assert format_display_number("-2500") == "-2,500"

    def test_partial_input_returned_unchanged(self):
        assert format_display_number("-") == "-"

    def test_empty(self):
        assert format_display_number("") == ""
        assert format_display_number(None) == ""

    def test_numbers(self):
        assert format_display_number(1500000) == "1,500,000"
        assert format_display_number(1500000.0) == "1,500,000"
        assert format_display_number(0.5) == "0.50"


class TestFormatAmount:
    """Tests for amounts with a currency symbol."""

    def test_symbol_appended(self):
        assert format_amount("150000000", "USD") == "150,000,000 $"
        assert format_amount("1000", "mxn") == "1,000 MXN$"

    def test_unknown_currency_has_no_symbol(self):
        assert format_amount("1000", "XYZ") == "1,000"

    def test_empty_amount_has_no_symbol(self):
        assert format_amount("", "EUR") == ""


class TestReportDate:
    """Tests for DD-MMM-YYYY report dates."""

    def test_iso_date(self):
        assert format_report_date("2024-12-31") == "31-Dec-2024"

    def test_date_object(self):
        assert format_report_date(date(2024, 3, 5)) == "05-Mar-2024"

    def test_already_formatted_kept(self):
        assert format_report_date("31-dic-2024") == "31-dic-2024"
        assert format_report_date("31-Dec-2024") == "31-Dec-2024"

    def test_unreadable_returned_unchanged(self):
        assert format_report_date("end of year") == "end of year"

    def test_empty(self):
        assert format_report_date("") == ""
        assert format_report_date(None) == ""

    def test_parse_spanish_month(self):
        assert parse_report_date("31-dic-2024") == date(2024, 12, 31)
        assert parse_report_date("15-ago-2023") == date(2023, 8, 15)

    def test_parse_invalid(self):
        assert parse_report_date("not a date") is None


class TestCurrency:
    """Tests for the currency table."""

    @pytest.mark.parametrize(
        "code,symbol",
        [
            ("USD", "$"),
            ("MXN", "MXN$"),
            ("EUR", "€"),
            ("JPY", "¥"),
            ("GBP", "£"),
            ("CAD", "C$"),
            ("AUD", "A$"),
            ("CHF", "CHF"),
            ("CNY", "¥"),
            ("INR", "₹"),
            ("BRL", "R$"),
            ("RUB", "₽"),
            ("ZAR", "R"),
        ],
    )
    def test_symbols(self, code, symbol):
        assert get_currency_symbol(code) == symbol

    def test_unknown_code(self):
        assert get_currency_symbol("XYZ") == ""
        assert get_currency_symbol(None) == ""
        assert not is_supported_currency("XYZ")

    def test_case_insensitive(self):
        assert get_currency_symbol("eur") == "€"

    def test_list_currencies(self):
        currencies = list_currencies()
        assert len(currencies) == 13
        assert currencies[0] == {"code": "USD", "symbol": "$", "name": "US Dollar"}
