"""Mini README: Tests for the Typer entry point.

Runs the ``summary`` command against a temporary JSON store configured
through ``PENNYWISE_*`` environment variables.
"""

from __future__ import annotations

import pytest
from typer.testing import CliRunner

from main_finance_tracker import cli
from pennywise.configuration import get_settings
from pennywise.state import AppState


@pytest.fixture()
def configured(tmp_path, monkeypatch):
    monkeypatch.setenv("PENNYWISE_DATA_DIRECTORY", str(tmp_path))
    monkeypatch.setenv("PENNYWISE_STORAGE_BACKEND", "json")
    get_settings.cache_clear()
    yield get_settings()
    get_settings.cache_clear()


def test_summary_prints_totals_and_storage_location(configured) -> None:
    state = AppState.from_settings(configured)
    state.ledger.add("Salary", "2000", "Salary", "2024-03-01", "Income")
    state.ledger.add("Coffee", "5", "Food", "2024-03-02", "Expense")
    state.ledger.add("Rent", "700", "Bills", "2024-04-01", "Expense")

    result = CliRunner().invoke(cli, ["summary", "--month", "2024-03"])

    assert result.exit_code == 0, result.output
    assert f"Storage:  json ({configured.storage_path})" in result.output
    assert "Month:    2024-03" in result.output
    assert "Expenses: $5.00" in result.output
    assert "Balance:  $1995.00" in result.output
    assert "Food" in result.output
    assert "Bills" not in result.output


def test_summary_rejects_malformed_month(configured) -> None:
    result = CliRunner().invoke(cli, ["summary", "--month", "March"])
    assert result.exit_code != 0
