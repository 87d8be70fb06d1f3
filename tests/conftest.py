"""
Pytest Configuration and Shared Fixtures

Provides common test fixtures and configuration for the entire test suite.
"""

from pathlib import Path

import pytest

from budget.ledger import Ledger
from tests.fixtures.ledger_data import write_sample_ledger


@pytest.fixture(autouse=True)
def setup_test_environment(monkeypatch, tmp_path):
    """Point configuration at a fresh data directory for every test."""
    data_dir = tmp_path / "budget_data"
    monkeypatch.setenv("BUDGET_ENV", "test")
    monkeypatch.setenv("BUDGET_DATA_DIR", str(data_dir))
    monkeypatch.delenv("BUDGET_RANDOM", raising=False)
    monkeypatch.delenv("BUDGET_CURRENCY", raising=False)
    monkeypatch.delenv("LOG_LEVEL", raising=False)

    # Drop any configuration cached by a previous test
    monkeypatch.setattr("budget.core.config._config", None)


@pytest.fixture
def data_dir(tmp_path) -> Path:
    """The data directory the test configuration points at."""
    path = tmp_path / "budget_data"
    path.mkdir(parents=True, exist_ok=True)
    return path


@pytest.fixture
def sample_data_dir(data_dir) -> Path:
    """Data directory pre-filled with accounts, earnings, expenses and debts."""
    write_sample_ledger(data_dir)
    return data_dir


@pytest.fixture
def ledger(sample_data_dir) -> Ledger:
    """Unloaded ledger over the sample data."""
    return Ledger(sample_data_dir)


# Test markers for categorizing tests
def pytest_configure(config):
    """Configure custom pytest markers."""
    config.addinivalue_line("markers", "unit: Unit tests for individual components")
    config.addinivalue_line("markers", "integration: Integration tests for complete workflows")
    config.addinivalue_line("markers", "currency: Tests for currency handling and precision")
    config.addinivalue_line("markers", "store: Tests for record persistence")
    config.addinivalue_line("markers", "cli: Tests for the command line interface")
