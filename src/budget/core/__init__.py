"""
Core Utilities Package

The record-store abstraction every entity is built on, and the primitives it
persists.

This package provides:
- Money and FinancialDate primitives with canonical text forms
- RecordCodec for one-record-per-line text encoding
- RecordStore for id assignment, dirty-tracking and atomic persistence
- Error types and configuration management
"""

from .codec import DELIMITER, Field, RecordCodec, validate_text
from .config import Config, Environment, get_config, get_data_dir, load_config, reload_config
from .dates import FinancialDate
from .errors import (
    BudgetError,
    CorruptStoreError,
    MalformedRecordError,
    NotFoundError,
    ParseError,
    StoreStateError,
    UsageError,
)
from .money import Money
from .store import RecordStore, generate_guid

__all__ = [
    "DELIMITER",
    # Errors
    "BudgetError",
    # Configuration
    "Config",
    "CorruptStoreError",
    "Environment",
    "Field",
    "FinancialDate",
    "MalformedRecordError",
    "Money",
    "NotFoundError",
    "ParseError",
    # Persistence
    "RecordCodec",
    "RecordStore",
    "StoreStateError",
    "UsageError",
    "generate_guid",
    "get_config",
    "get_data_dir",
    "load_config",
    "reload_config",
    "validate_text",
]
