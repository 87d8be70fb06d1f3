#!/usr/bin/env python3
"""Tests for configuration loading."""

from pathlib import Path

import pytest

from budget.core.config import Config, Environment, get_config, load_rc_file, reload_config


@pytest.mark.unit
class TestConfigFromEnvironment:
    """Test the environment and rc-file layers."""

    def test_defaults_in_test_environment(self, data_dir):
        config = Config.from_environment()

        assert config.environment == Environment.TEST
        assert config.data_dir == data_dir.resolve()
        assert config.random is False
        assert config.currency == "$"
        assert config.log_level == "INFO"

    def test_explicit_data_dir_wins(self, tmp_path):
        explicit = tmp_path / "elsewhere"
        config = Config.from_environment(data_dir=explicit)

        assert config.data_dir == explicit.resolve()
        assert explicit.is_dir()

    def test_environment_switches(self, monkeypatch):
        monkeypatch.setenv("BUDGET_RANDOM", "yes")
        monkeypatch.setenv("BUDGET_CURRENCY", "€")
        monkeypatch.setenv("LOG_LEVEL", "debug")

        config = Config.from_environment()

        assert config.random is True
        assert config.currency == "€"
        assert config.log_level == "DEBUG"

    def test_rc_file_values(self, data_dir):
        (data_dir / "budgetrc.yaml").write_text("random: true\ncurrency: CHF\n", encoding="utf-8")

        config = Config.from_environment()

        assert config.random is True
        assert config.currency == "CHF"

    def test_environment_overrides_rc_file(self, data_dir, monkeypatch):
        (data_dir / "budgetrc.yaml").write_text("random: true\n", encoding="utf-8")
        monkeypatch.setenv("BUDGET_RANDOM", "0")

        assert Config.from_environment().random is False

    def test_rc_file_must_be_mapping(self, tmp_path):
        rc = tmp_path / "budgetrc.yaml"
        rc.write_text("- just\n- a list\n", encoding="utf-8")
        with pytest.raises(ValueError):
            load_rc_file(rc)

    def test_missing_rc_file(self, tmp_path):
        assert load_rc_file(tmp_path / "nope.yaml") == {}


@pytest.mark.unit
class TestConfigValidation:
    """Test validation and the global instance."""

    def test_valid_config(self, tmp_path):
        config = Config(environment=Environment.TEST, data_dir=tmp_path)
        assert config.validate() == []

    def test_invalid_values(self, tmp_path):
        config = Config(
            environment=Environment.TEST,
            data_dir=tmp_path / "missing",
            currency="a:b",
            log_level="LOUD",
        )
        errors = config.validate()
        assert len(errors) == 3

    def test_get_config_caches_and_reload_rebuilds(self, monkeypatch, tmp_path):
        first = get_config()
        assert get_config() is first

        monkeypatch.setenv("BUDGET_DATA_DIR", str(tmp_path / "other"))
        second = reload_config()
        assert second is not first
        assert second.data_dir == (tmp_path / "other").resolve()

    def test_get_config_rejects_invalid(self, monkeypatch):
        monkeypatch.setenv("LOG_LEVEL", "LOUD")
        with pytest.raises(ValueError, match="Invalid log level"):
            get_config()

    def test_to_dict(self, tmp_path):
        data = Config(environment=Environment.TEST, data_dir=Path(tmp_path)).to_dict()
        assert data["environment"] == "test"
        assert data["data_dir"] == str(tmp_path)
