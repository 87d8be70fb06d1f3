#!/usr/bin/env python3
"""
Integration tests for CLI Main Entry Point

Tests end-to-end CLI command execution with real command invocation.
"""

import pytest
from click.testing import CliRunner

from budget.cli.main import handle, main


@pytest.mark.integration
@pytest.mark.cli
class TestCLIMainIntegration:
    """Test main CLI entry point with real command execution."""

    def setup_method(self):
        """Set up test environment."""
        self.runner = CliRunner()

    def test_help_command_lists_all_subcommands(self):
        """Test budget --help shows all registered subcommands."""
        result = self.runner.invoke(main, ["--help"])

        assert result.exit_code == 0
        assert "Personal Finance Ledger" in result.output
        for command in ["account", "earning", "expense", "debt", "overview", "export", "status"]:
            assert command in result.output

    def test_version_command_shows_version_info(self):
        result = self.runner.invoke(main, ["version"])

        assert result.exit_code == 0
        assert "Budget Ledger v" in result.output
        assert "Author:" in result.output

    def test_config_command_shows_configuration(self, data_dir):
        result = self.runner.invoke(main, ["config"])

        assert result.exit_code == 0
        assert "Current Configuration:" in result.output
        assert "Environment: test" in result.output
        assert str(data_dir.resolve()) in result.output

    def test_data_dir_option(self, tmp_path):
        other = tmp_path / "other"
        result = self.runner.invoke(main, ["--data-dir", str(other), "config"])

        assert result.exit_code == 0
        assert str(other.resolve()) in result.output

    def test_status_reports_files(self, sample_data_dir):
        result = self.runner.invoke(main, ["status"])

        assert result.exit_code == 0
        assert "earnings.data: 3 earnings" in result.output
        assert "accounts.data: 4 accounts" in result.output

    def test_status_without_files(self):
        result = self.runner.invoke(main, ["status"])
        assert "No debts file found" in result.output

    def test_invalid_command_shows_error(self):
        result = self.runner.invoke(main, ["nonexistent-command"])

        assert result.exit_code != 0
        assert "No such command" in result.output


@pytest.mark.integration
@pytest.mark.cli
class TestHandle:
    """Test the exit codes of the argument-list dispatcher."""

    def test_success(self, sample_data_dir, capsys):
        assert handle(["earning", "show", "3", "2024"]) == 0
        assert "Tax refund" in capsys.readouterr().out

    def test_unknown_id_exits_1(self, sample_data_dir, capsys):
        assert handle(["earning", "delete", "99"]) == 1
        assert "There is no earning with id 99" in capsys.readouterr().err

    def test_corrupt_store_exits_1(self, data_dir, capsys):
        (data_dir / "earnings.data").write_text("1:broken\n", encoding="utf-8")

        assert handle(["earning", "all"]) == 1
        assert "earnings.data:1" in capsys.readouterr().err

    def test_usage_error_exits_2(self, sample_data_dir, capsys):
        assert handle(["earning", "show", "13"]) == 2

    def test_refused_operation_exits_2(self, sample_data_dir, capsys):
        assert handle(["account", "delete", "1"]) == 2
        assert "still used by earnings" in capsys.readouterr().err

    def test_bad_option_value_exits_2(self, sample_data_dir, capsys):
        code = handle(
            ["earning", "add", "--date", "2024-03-05", "--account", "Salary", "--name", "X", "--amount", "abc"]
        )
        assert code == 2

    def test_invalid_utf8_exits_1(self, data_dir, capsys):
        (data_dir / "earnings.data").write_bytes(b"1:g:1:Sal\xffary:10.00:2024-01-01\n")

        assert handle(["earning", "all"]) == 1
        assert "invalid UTF-8" in capsys.readouterr().err

    def test_status_with_invalid_utf8(self, data_dir, capsys):
        (data_dir / "earnings.data").write_bytes(b"1:g:1:Sal\xffary:10.00:2024-01-01\n")

        assert handle(["status"]) == 0
        assert "earnings.data: 1 earnings" in capsys.readouterr().out

    def test_random_mode_refuses_changes(self, sample_data_dir, monkeypatch, capsys):
        """Test random amounts are never written over the real ones."""
        monkeypatch.setenv("BUDGET_RANDOM", "1")
        original = (sample_data_dir / "earnings.data").read_bytes()

        code = handle(
            ["earning", "add", "--date", "2024-03-05", "--account", "Salary", "--name", "Gift", "--amount", "5"]
        )

        assert code == 2
        assert "random amounts" in capsys.readouterr().err
        assert (sample_data_dir / "earnings.data").read_bytes() == original

    def test_data_dir_option_does_not_leak(self, sample_data_dir, tmp_path, capsys):
        """Test --data-dir applies to one invocation only."""
        other = tmp_path / "other"

        assert handle(["--data-dir", str(other), "status"]) == 0
        assert "No earnings file found" in capsys.readouterr().out

        assert handle(["status"]) == 0
        assert "earnings.data: 3 earnings" in capsys.readouterr().out
