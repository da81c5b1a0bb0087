"""Tests for the command-line analysis script."""

import importlib.util
from pathlib import Path

import pytest

SCRIPT = Path(__file__).resolve().parents[2] / "scripts" / "analyze_company.py"

AMOUNTS = {
    "current_assets": "150,000,000",
    "current_liabilities": "80,000,000",
    "inventory": "30,000,000",
    "total_assets": "500,000,000",
    "total_liabilities": "300,000,000",
    "shareholders_equity": "200,000,000",
}


@pytest.fixture(scope="module")
def script():
    spec = importlib.util.spec_from_file_location("analyze_company", SCRIPT)
    module = importlib.util.module_from_spec(spec)
    spec.loader.exec_module(module)
    return module


class TestAnalyzeCompany:
    """Tests for analyze_company()."""

    def test_prints_text_report(self, script, capsys):
        code = script.analyze_company(AMOUNTS, ticker="bimboa", currency="mxn")
        out = capsys.readouterr().out

        assert code == 0
        assert "Results for: BIMBOA" in out
        assert "Currency: MXN" in out
        assert "1.88" in out

    def test_invalid_input_exits_with_error(self, script, capsys):
        code = script.analyze_company(dict(AMOUNTS, inventory="n/a"))
        err = capsys.readouterr().err

        assert code == 1
        assert "All fields must contain valid numeric values." in err

    def test_writes_html_file(self, script, tmp_path, capsys):
        code = script.analyze_company(
            AMOUNTS,
            ticker="ACME",
            report_date="31-Dec-2024",
            format_name="html",
            output_dir=tmp_path,
        )

        assert code == 0
        written = tmp_path / "financial_health_ACME_31-Dec-2024.html"
        assert written.exists()
        assert str(written) in capsys.readouterr().out

    def test_writes_file_for_ticker_with_slash(self, script, tmp_path):
        code = script.analyze_company(
            AMOUNTS,
            ticker="brk/a",
            report_date="Q4/2024",
            output_dir=tmp_path,
        )

        assert code == 0
        written = list(tmp_path.iterdir())
        assert len(written) == 1
        assert written[0].name.startswith("financial_health_BRK_A_")
        assert written[0].suffix == ".txt"
