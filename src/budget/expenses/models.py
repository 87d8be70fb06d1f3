#!/usr/bin/env python3
"""
Expense Models
"""

from dataclasses import dataclass

from ..core.codec import RecordCodec
from ..core.entries import LedgerEntry, entry_schema


@dataclass
class Expense(LedgerEntry):
    """Money spent from an account."""


def expense_codec() -> RecordCodec[Expense]:
    """Codec for id:guid:account:name:amount:date lines."""
    return RecordCodec(Expense, entry_schema())
