#!/usr/bin/env python3
"""Tests for the JSON export."""

import pytest

from budget.core.json_utils import read_json
from budget.export import export_ledger


@pytest.mark.unit
class TestExportLedger:
    """Test exporting every store as JSON."""

    def test_writes_one_file_per_store(self, ledger, tmp_path):
        dest = tmp_path / "export"
        with ledger.activated():
            written = export_ledger(ledger, dest)

        assert sorted(p.name for p in written) == [
            "accounts.json",
            "debts.json",
            "earnings.json",
            "expenses.json",
        ]

    def test_values_use_storage_text(self, ledger, tmp_path):
        with ledger.activated():
            export_ledger(ledger, tmp_path)

        earnings = read_json(tmp_path / "earnings.json")
        assert earnings[1] == {
            "id": "2",
            "guid": "e0000000-0000-4000-8000-000000000002",
            "account": "1",
            "name": "Tax refund",
            "amount": "310.45",
            "date": "2024-03-15",
        }

        debts = read_json(tmp_path / "debts.json")
        assert debts[1]["state"] == "1"
        assert debts[1]["direction"] == "from"

    def test_export_does_not_modify_data_files(self, ledger, sample_data_dir, tmp_path):
        before = {p.name: p.read_bytes() for p in sample_data_dir.glob("*.data")}
        with ledger.activated():
            export_ledger(ledger, tmp_path / "out")
        after = {p.name: p.read_bytes() for p in sample_data_dir.glob("*.data")}
        assert before == after
