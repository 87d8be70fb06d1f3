#!/usr/bin/env python3
"""
Money Primitive Type

Immutable currency value wrapper that uses integer cents internally.
Prevents floating-point errors and provides type-safe currency operations.
"""

import random
from collections.abc import Iterable
from dataclasses import dataclass

from .currency import cents_to_dollars_str, format_cents, parse_dollars_to_cents


@dataclass(frozen=True)
class Money:
    """
    Immutable money value in cents.

    Examples:
        >>> salary = Money.from_string("2500.00")
        >>> str(salary)
        '$2500.00'
        >>> salary.to_storage_string()
        '2500.00'
        >>> (salary - Money.from_cents(250001)).to_storage_string()
        '-0.01'
    """

    cents: int = 0

    @classmethod
    def from_cents(cls, cents: int) -> "Money":
        """Create Money from cents."""
        return cls(cents=cents)

    @classmethod
    def from_string(cls, text: str) -> "Money":
        """
        Parse from a dollar string like '$123.45', '1,234.5' or '12'.

        Raises:
            ParseError: If the text is not a valid amount
        """
        return cls(cents=parse_dollars_to_cents(text))

    @classmethod
    def random(cls, low: int, high: int, rng: random.Random | None = None) -> "Money":
        """
        Create a pseudo-random amount between two whole-dollar bounds.

        Used to anonymize datasets for demos and exports.
        """
        rng = rng or random
        return cls(cents=rng.randint(low * 100, high * 100))

    @classmethod
    def sum(cls, amounts: Iterable["Money"]) -> "Money":
        """Sum an iterable of Money values exactly."""
        return cls(cents=sum(amount.cents for amount in amounts))

    def to_cents(self) -> int:
        """Get value in cents."""
        return self.cents

    def to_storage_string(self) -> str:
        """Fixed-point string with exactly two fractional digits."""
        return cents_to_dollars_str(self.cents)

    def format(self, symbol: str = "$") -> str:
        """Display string with the given currency symbol."""
        return format_cents(self.cents, symbol)

    def is_negative(self) -> bool:
        return self.cents < 0

    def abs(self) -> "Money":
        """Return absolute value of Money."""
        return Money(cents=abs(self.cents))

    def __add__(self, other: "Money") -> "Money":
        """Add two Money objects."""
        return Money(cents=self.cents + other.cents)

    def __sub__(self, other: "Money") -> "Money":
        """Subtract two Money objects."""
        return Money(cents=self.cents - other.cents)

    def __neg__(self) -> "Money":
        return Money(cents=-self.cents)

    def __mul__(self, scalar: int) -> "Money":
        """Multiply Money by integer scalar."""
        return Money(cents=self.cents * scalar)

    def __lt__(self, other: "Money") -> bool:
        return self.cents < other.cents

    def __le__(self, other: "Money") -> bool:
        return self.cents <= other.cents

    def __gt__(self, other: "Money") -> bool:
        return self.cents > other.cents

    def __ge__(self, other: "Money") -> bool:
        return self.cents >= other.cents

    def __str__(self) -> str:
        """Format as dollar string."""
        return self.format()

    def __repr__(self) -> str:
        return f"Money(cents={self.cents})"
