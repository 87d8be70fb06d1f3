#!/usr/bin/env python3
"""
Configuration Management for the Budget Ledger

Settings come from three layers, later ones winning:
1. Built-in defaults
2. budgetrc.yaml in the data directory
3. Environment variables (a .env file is loaded first)
"""

import logging
import os
import tempfile
from dataclasses import dataclass
from enum import Enum
from pathlib import Path
from typing import Any

import yaml
from dotenv import load_dotenv

# Load environment variables from .env file
load_dotenv()

RC_FILE_NAME = "budgetrc.yaml"

logger = logging.getLogger(__name__)


class Environment(Enum):
    """Application environment types."""

    DEVELOPMENT = "development"
    TEST = "test"
    PRODUCTION = "production"


@dataclass
class Config:
    """
    Main configuration class for the ledger.

    Loads configuration from environment variables and the optional rc file,
    with validation.
    """

    environment: Environment
    data_dir: Path

    # Replace stored amounts with synthetic values when loading (demo datasets)
    random: bool = False
    currency: str = "$"

    debug: bool = False
    log_level: str = "INFO"

    @classmethod
    def from_environment(cls, data_dir: Path | None = None, environment: Environment | None = None) -> "Config":
        """
        Create configuration from environment variables and the rc file.

        Args:
            data_dir: Explicit data directory, overriding BUDGET_DATA_DIR
            environment: Explicit environment, overriding BUDGET_ENV
        """
        env = environment or Environment(os.getenv("BUDGET_ENV", "development"))

        if data_dir is None:
            if env == Environment.TEST:
                default_dir = Path(tempfile.gettempdir()) / "test_budget"
            else:
                default_dir = Path("~/.budget")
            data_dir = Path(os.getenv("BUDGET_DATA_DIR", str(default_dir)))
        data_dir = Path(data_dir).expanduser().resolve()
        data_dir.mkdir(parents=True, exist_ok=True)

        rc = load_rc_file(data_dir / RC_FILE_NAME)

        return cls(
            environment=env,
            data_dir=data_dir,
            random=_parse_bool(os.getenv("BUDGET_RANDOM"), rc.get("random", False)),
            currency=os.getenv("BUDGET_CURRENCY", str(rc.get("currency", "$"))),
            debug=_parse_bool(os.getenv("DEBUG"), rc.get("debug", False)),
            log_level=os.getenv("LOG_LEVEL", str(rc.get("log_level", "INFO"))).upper(),
        )

    def validate(self) -> list:
        """Validate configuration and return list of errors."""
        errors = []

        if not self.data_dir.is_dir():
            errors.append(f"data_dir is not a directory: {self.data_dir}")

        if self.log_level not in ("DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"):
            errors.append(f"Invalid log level: {self.log_level}")

        if not self.currency or ":" in self.currency:
            errors.append(f"Invalid currency symbol: {self.currency!r}")

        return errors

    def setup_logging(self) -> None:
        """Configure logging based on configuration."""
        level = getattr(logging, self.log_level, logging.INFO)

        if self.environment == Environment.DEVELOPMENT:
            format_str = "%(asctime)s - %(name)s - %(levelname)s - %(message)s"
        else:
            format_str = "%(asctime)s - %(levelname)s - %(message)s"

        logging.basicConfig(level=level, format=format_str, datefmt="%Y-%m-%d %H:%M:%S")

    def to_dict(self) -> dict[str, Any]:
        """Convert configuration to a plain dictionary for display."""
        result: dict[str, Any] = {}
        for field_name, field_value in self.__dict__.items():
            if isinstance(field_value, Path):
                result[field_name] = str(field_value)
            elif isinstance(field_value, Enum):
                result[field_name] = field_value.value
            else:
                result[field_name] = field_value
        return result


def load_rc_file(path: Path) -> dict[str, Any]:
    """
    Read the optional YAML settings file.

    Raises:
        ValueError: If the file exists but is not a YAML mapping
    """
    if not path.exists():
        return {}

    with open(path, encoding="utf-8") as f:
        data = yaml.safe_load(f) or {}

    if not isinstance(data, dict):
        raise ValueError(f"{path} must contain a mapping of settings")

    logger.debug(f"Loaded settings from {path}: {sorted(data)}")
    return data


def _parse_bool(value: str | None, default: Any = False) -> bool:
    """Parse an environment switch, falling back to a default when unset."""
    if value is None:
        return bool(default)
    return value.strip().lower() in ("1", "true", "yes", "on")


def load_config(data_dir: Path | None = None, environment: Environment | None = None) -> Config:
    """
    Build and validate a configuration without touching the global instance.

    Raises:
        ValueError: If validation reports any problem
    """
    config = Config.from_environment(data_dir=data_dir, environment=environment)

    errors = config.validate()
    if errors:
        raise ValueError(f"Configuration validation failed: {'; '.join(errors)}")

    config.setup_logging()
    return config


# Global configuration instance
_config: Config | None = None


def get_config() -> Config:
    """Get the global configuration instance."""
    global _config
    if _config is None:
        _config = load_config()
    return _config


def reload_config() -> Config:
    """Reload configuration from environment (useful for testing)."""
    global _config
    _config = None
    return get_config()


def get_data_dir() -> Path:
    """Get the data directory path."""
    return get_config().data_dir
