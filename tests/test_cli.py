"""Tests for the command-line interface."""

import json
from pathlib import Path

import pytest
from typer.testing import CliRunner

from wealthdash import __version__
from wealthdash.cli import app

SNAPSHOT_PATH = str(Path(__file__).resolve().parents[1] / "examples" / "personal" / "snapshot.json")

runner = CliRunner()


@pytest.fixture(autouse=True)
def _clean_env(monkeypatch: pytest.MonkeyPatch) -> None:
    for name in ("WEALTHDASH_CURRENCY", "WEALTHDASH_NET_WORTH_BASELINE", "WEALTHDASH_LOG_LEVEL"):
        monkeypatch.delenv(name, raising=False)


class TestCLI:
    def test_version(self) -> None:
        result = runner.invoke(app, ["--version"])
        assert result.exit_code == 0
        assert __version__ in result.stdout

    def test_currencies(self) -> None:
        result = runner.invoke(app, ["currencies"])
        assert result.exit_code == 0
        assert "INR" in result.stdout
        assert "Indian Rupee" in result.stdout

    def test_summary(self) -> None:
        result = runner.invoke(app, ["summary", "--data", SNAPSHOT_PATH, "--month", "2023-11"])
        assert result.exit_code == 0
        assert "Net Worth" in result.stdout
        assert "$17,754.40" in result.stdout

    def test_summary_in_inr(self) -> None:
        result = runner.invoke(app, ["summary", "--data", SNAPSHOT_PATH, "--currency", "INR", "--month", "2023-11"])
        assert result.exit_code == 0
        assert "₹" in result.stdout

    def test_budgets(self) -> None:
        result = runner.invoke(app, ["budgets", "--data", SNAPSHOT_PATH, "--month", "2023-11"])
        assert result.exit_code == 0
        assert "Rent" in result.stdout
        assert "100%" in result.stdout

    def test_portfolio(self) -> None:
        result = runner.invoke(app, ["portfolio", "--data", SNAPSHOT_PATH, "--currency", "EUR"])
        assert result.exit_code == 0
        assert "AAPL" in result.stdout
        assert "€" in result.stdout

    def test_portfolio_loss_sign_before_symbol(self, tmp_path: Path) -> None:
        path = tmp_path / "loss.json"
        path.write_text(json.dumps({
            "investments": [
                {"id": "1", "symbol": "XYZ", "name": "Loser Corp", "shares": 1,
                 "avg_cost": 100, "current_price": 88, "type": "STOCK"},
            ],
        }))

        result = runner.invoke(app, ["portfolio", "--data", str(path)])
        assert result.exit_code == 0
        assert "gain -$12.00" in result.stdout
        assert "$-" not in result.stdout

    def test_summary_shows_tax_and_sips(self) -> None:
        result = runner.invoke(app, ["summary", "--data", SNAPSHOT_PATH, "--month", "2023-11"])
        assert result.exit_code == 0
        assert "$1,320.00" in result.stdout
        assert "Bitcoin DCA" in result.stdout

    def test_unknown_currency_fails(self) -> None:
        result = runner.invoke(app, ["portfolio", "--data", SNAPSHOT_PATH, "--currency", "XYZ"])
        assert result.exit_code == 1
        assert "Error" in result.stdout

    def test_missing_snapshot_fails(self, tmp_path: Path) -> None:
        result = runner.invoke(app, ["summary", "--data", str(tmp_path / "missing.json")])
        assert result.exit_code == 1
        assert "not found" in result.stdout

    def test_bad_month_fails(self) -> None:
        result = runner.invoke(app, ["budgets", "--data", SNAPSHOT_PATH, "--month", "May 2024"])
        assert result.exit_code == 1

    def test_summary_help(self) -> None:
        result = runner.invoke(app, ["summary", "--help"])
        assert result.exit_code == 0
        assert "--currency" in result.stdout
