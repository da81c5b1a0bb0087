"""Tests for the analyzer form and report renderers."""

import re

import pytest
from report.form import AnalyzerForm
from report.renderers import HtmlRenderer, RendererRegistry, TextRenderer

SAMPLE_AMOUNTS = {
    "current_assets": "150,000,000",
    "current_liabilities": "80,000,000",
    "inventory": "30,000,000",
    "total_assets": "500,000,000",
    "total_liabilities": "300,000,000",
    "shareholders_equity": "200,000,000",
}


@pytest.fixture
def filled_form():
    form = AnalyzerForm()
    form.set_ticker("bimboa")
    form.currency = "MXN"
    form.report_date = "2024-12-31"
    for name, text in SAMPLE_AMOUNTS.items():
        form.set_field(name, text)
    return form


class TestAnalyzerForm:
    """Tests for form state handling."""

    def test_defaults(self):
        form = AnalyzerForm()
        assert form.currency == "USD"
        assert form.company_ticker == ""
        assert all(value == "" for value in form.amounts.values())
        assert form.report is None
        assert form.error == ""

    def test_ticker_upper_cased(self):
        form = AnalyzerForm()
        assert form.set_ticker("xyz") == "XYZ"
        assert form.company_ticker == "XYZ"

    def test_set_field_sanitizes(self, filled_form):
        assert filled_form.amounts["current_assets"] == "150000000"
        assert filled_form.display_value("current_assets") == "150,000,000"
        assert filled_form.echo_value("current_assets") == "150,000,000 MXN$"

    def test_set_unknown_field(self):
        with pytest.raises(KeyError):
            AnalyzerForm().set_field("revenue", "100")

    def test_calculate(self, filled_form):
        report = filled_form.calculate()

        assert report is not None
        assert filled_form.has_results
        assert report.company_ticker == "BIMBOA"
        assert report.currency_symbol == "MXN$"
        assert report.report_date == "31-Dec-2024"
        assert report.ratios.current.display_value == "1.88"
        assert report.ratios.quick.classification == "Good"
        assert report.inputs[0].display == "150,000,000 MXN$"

    def test_calculate_invalid_suppresses_results(self, filled_form):
        filled_form.calculate()
        filled_form.set_field("inventory", "")

        assert filled_form.calculate() is None
        assert filled_form.error == "All fields must contain valid numeric values."
        assert filled_form.report is None
        assert not filled_form.has_results

    def test_unknown_currency_logged(self, filled_form, caplog):
        filled_form.currency = "XYZ"
        with caplog.at_level("WARNING", logger="report.models"):
            report = filled_form.calculate()

        assert report.currency_symbol == ""
        assert "Unknown currency 'XYZ'" in caplog.text

    def test_recalculate_clears_error(self, filled_form):
        filled_form.set_field("inventory", "-")
        filled_form.calculate()
        assert filled_form.error

        filled_form.set_field("inventory", "30000000")
        assert filled_form.calculate() is not None
        assert filled_form.error == ""

    def test_clear(self, filled_form):
        filled_form.calculate()
        filled_form.clear()

        assert filled_form.company_ticker == ""
        assert filled_form.currency == "USD"
        assert filled_form.report_date == ""
        assert all(value == "" for value in filled_form.amounts.values())
        assert filled_form.report is None
        assert filled_form.error == ""

    def test_render_without_results(self):
        with pytest.raises(RuntimeError):
            AnalyzerForm().render()


class TestRenderers:
    """Tests for printable report rendering."""

    def test_registry(self):
        assert set(RendererRegistry.get_available()) >= {"html", "text"}
        assert isinstance(RendererRegistry.get("html"), HtmlRenderer)
        assert isinstance(RendererRegistry.get("text"), TextRenderer)
        with pytest.raises(KeyError):
            RendererRegistry.get("pdf")

    def test_html_document(self, filled_form):
        filled_form.calculate()
        document = filled_form.render("html")

        assert document.startswith("<!DOCTYPE html>")
        assert "<title>Financial Health Report</title>" in document
        assert "margin: 20mm;" in document
        assert "BIMBOA" in document
        assert "31-Dec-2024" in document
        assert "150,000,000 MXN$" in document
        assert 'data-ratio="current_ratio"' in document
        assert "1.88" in document
        assert "Ratio Interpretation Guide" in document

    def test_html_escapes_user_text(self, filled_form):
        filled_form.set_ticker("<script>")
        filled_form.calculate()
        document = filled_form.render("html")
        assert "<SCRIPT>" not in document
        assert "&lt;SCRIPT&gt;" in document

    def test_text_report(self, filled_form):
        filled_form.calculate()
        text = filled_form.render("text")

        assert "FINANCIAL HEALTH REPORT" in text
        assert "Results for: BIMBOA" in text
        assert "LIQUIDITY RATIOS:" in text
        assert "SOLVENCY / LEVERAGE RATIOS:" in text
        assert "Debt-to-Assets Ratio" in text

    def test_undefined_ratio_rendered(self, filled_form):
        filled_form.set_field("current_liabilities", "0")
        filled_form.calculate()
        text = filled_form.render("text")
        assert "N/A" in text
        assert "current liabilities is zero" in text

    def test_export(self, filled_form, tmp_path):
        filled_form.calculate()
        path = filled_form.export(tmp_path, "html")

        assert path.name == "financial_health_BIMBOA_31-Dec-2024.html"
        assert path.read_text(encoding="utf-8").startswith("<!DOCTYPE html>")


SAFE_FILENAME = re.compile(r"^financial_health_[A-Za-z0-9_-]+\.(html|txt)$")


class TestExportFilenames:
    """Exported filenames built from free-text ticker and date."""

    @pytest.mark.parametrize(
        "ticker,report_date",
        [
            ("BRK/A", "2024-12-31"),
            ("ACME", "Q4/2024"),
            ("../../x", ""),
            ("日本郵船", "31-Dec-2024"),
            ("ŠKODA", 'Q4 "final"'),
            ('AC"ME\nCORP', "year\\end"),
        ],
    )
    @pytest.mark.parametrize("format_name", ["html", "text"])
    def test_export_stays_in_output_dir(self, filled_form, tmp_path, ticker, report_date, format_name):
        filled_form.set_ticker(ticker)
        filled_form.report_date = report_date
        filled_form.calculate()

        path = filled_form.export(tmp_path, format_name)

        assert path.parent == tmp_path
        assert path.is_file()
        assert SAFE_FILENAME.match(path.name)

    def test_slash_replaced(self, filled_form, tmp_path):
        filled_form.set_ticker("BRK/A")
        filled_form.calculate()

        path = filled_form.export(tmp_path, "text")
        assert path.name == "financial_health_BRK_A_31-Dec-2024.txt"

    def test_non_ascii_ticker_falls_back_to_report(self, filled_form):
        filled_form.set_ticker("日本郵船")
        filled_form.calculate()

        name = HtmlRenderer().build_filename(filled_form.report)
        assert name == "financial_health_report_31-Dec-2024.html"

    def test_traversal_collapsed(self, filled_form):
        filled_form.set_ticker("../../x")
        filled_form.calculate()

        name = TextRenderer().build_filename(filled_form.report)
        assert name == "financial_health_X_31-Dec-2024.txt"
