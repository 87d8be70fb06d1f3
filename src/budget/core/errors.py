#!/usr/bin/env python3
"""
Error Types for the Budget Ledger

All errors raised by the ledger derive from BudgetError so the command
dispatcher can convert them into a printed message and an exit code.
"""

from pathlib import Path


class BudgetError(Exception):
    """Base class for all ledger errors."""

    exit_code = 1


class NotFoundError(BudgetError):
    """An operation referenced a record id that does not exist."""

    def __init__(self, kind: str, record_id: int):
        super().__init__(f"There is no {kind} with id {record_id}")
        self.kind = kind
        self.record_id = record_id


class ParseError(BudgetError, ValueError):
    """A field value could not be converted to its semantic type."""


class MalformedRecordError(BudgetError):
    """A line does not match the record schema (wrong number of fields)."""


class CorruptStoreError(BudgetError):
    """
    A backing file could not be loaded.

    Carries the file, the 1-based line number and the offending content so the
    user can repair the file by hand.
    """

    def __init__(self, path: Path, line_number: int, line: str, reason: str):
        super().__init__(f"{path}:{line_number}: {reason} (line: {line!r})")
        self.path = path
        self.line_number = line_number
        self.line = line
        self.reason = reason


class UsageError(BudgetError):
    """Wrong arguments, or an operation refused because of its arguments."""

    exit_code = 2


class StoreStateError(BudgetError):
    """A store was used before load() or after unload()."""
