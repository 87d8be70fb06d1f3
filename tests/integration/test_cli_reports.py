#!/usr/bin/env python3
"""
Integration tests for the overview and export commands.
"""

import pytest
from click.testing import CliRunner

from budget.cli.main import main
from budget.core.json_utils import read_json


@pytest.mark.integration
@pytest.mark.cli
class TestOverviewCommand:
    """Test budget overview."""

    def setup_method(self):
        self.runner = CliRunner()

    def test_overview_year(self, sample_data_dir):
        result = self.runner.invoke(main, ["overview", "2024"])

        assert result.exit_code == 0
        assert "Overview of 2024" in result.output
        assert "Mar" in result.output
        assert "$2810.45" in result.output
        assert "$3917.01" in result.output

    def test_overview_by_account(self, sample_data_dir):
        result = self.runner.invoke(main, ["overview", "2024", "--by-account"])

        assert result.exit_code == 0
        assert "Expenses by Account" in result.output
        assert "1214.99" in result.output
        assert "92.35" in result.output

    def test_overview_empty_ledger(self):
        result = self.runner.invoke(main, ["overview", "2024", "--by-account"])

        assert result.exit_code == 0
        assert "No expenses" in result.output


@pytest.mark.integration
@pytest.mark.cli
class TestExportCommand:
    """Test budget export."""

    def setup_method(self):
        self.runner = CliRunner()

    def test_export(self, sample_data_dir, tmp_path):
        dest = tmp_path / "json"
        result = self.runner.invoke(main, ["export", str(dest)])

        assert result.exit_code == 0
        assert result.output.count("Wrote ") == 4
        accounts = read_json(dest / "accounts.json")
        assert [a["name"] for a in accounts] == ["Salary", "Housing", "Food", "Food"]
