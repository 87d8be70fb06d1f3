#!/usr/bin/env python3
"""
Earning Models
"""

from dataclasses import dataclass

from ..core.codec import RecordCodec
from ..core.entries import LedgerEntry, entry_schema


@dataclass
class Earning(LedgerEntry):
    """Money received into an account (salary, refund, gift)."""


def earning_codec() -> RecordCodec[Earning]:
    """Codec for id:guid:account:name:amount:date lines."""
    return RecordCodec(Earning, entry_schema())
