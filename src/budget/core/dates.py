#!/usr/bin/env python3
"""
FinancialDate Primitive Type

Immutable date wrapper with the ledger's canonical YYYY-MM-DD format.
"""

from dataclasses import dataclass
from datetime import date, datetime

from .errors import ParseError

ISO_FORMAT = "%Y-%m-%d"


@dataclass(frozen=True, order=True)
class FinancialDate:
    """Immutable financial date wrapper with consistent formatting."""

    date: date

    @classmethod
    def from_string(cls, date_str: str, date_format: str = ISO_FORMAT) -> "FinancialDate":
        """
        Parse from string in specified format.

        Raises:
            ParseError: If the string does not match the format or is not a real date
        """
        try:
            return cls(date=datetime.strptime(date_str.strip(), date_format).date())
        except ValueError as e:
            raise ParseError(f"Invalid date {date_str!r} (expected {date_format}): {e}") from e

    @classmethod
    def of(cls, year: int, month: int, day: int) -> "FinancialDate":
        return cls(date=date(year, month, day))

    @classmethod
    def today(cls) -> "FinancialDate":
        """Get today's date."""
        return cls(date=date.today())

    @property
    def year(self) -> int:
        return self.date.year

    @property
    def month(self) -> int:
        return self.date.month

    def in_period(self, month: int, year: int) -> bool:
        """Check whether the date falls in the given month of the given year."""
        return self.date.year == year and self.date.month == month

    def to_iso_string(self) -> str:
        """Format as YYYY-MM-DD (zero-padded, four-digit year)."""
        return f"{self.date.year:04d}-{self.date.month:02d}-{self.date.day:02d}"

    def __str__(self) -> str:
        return self.to_iso_string()

    def __repr__(self) -> str:
        return f"FinancialDate(date={self.date!r})"


def validate_month(month: int) -> int:
    """Check a month number is between 1 and 12."""
    if not 1 <= month <= 12:
        raise ParseError(f"Invalid month: {month}")
    return month
