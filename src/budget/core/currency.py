#!/usr/bin/env python3
"""
Currency Parsing and Formatting Utilities

All amounts are handled as integer cents. Floating-point values never enter
a calculation.

Formats:
- Storage uses fixed-point strings with two fractional digits: "12.34"
- Display prefixes a currency symbol: "$12.34"
- User input may carry a symbol and thousands separators: "$1,234.5"
"""

import re

from .errors import ParseError

_AMOUNT_PATTERN = re.compile(r"^(-?)(\d+)(?:\.(\d{1,2}))?$")


def cents_to_dollars_str(cents: int) -> str:
    """
    Convert cents to a fixed-point string using pure integer arithmetic.

    Example:
        cents_to_dollars_str(4599) -> "45.99"
        cents_to_dollars_str(-5) -> "-0.05"
    """
    is_negative = cents < 0
    abs_cents = abs(int(cents))

    dollars = abs_cents // 100
    remainder = abs_cents % 100

    if is_negative:
        return f"-{dollars}.{remainder:02d}"
    return f"{dollars}.{remainder:02d}"


def parse_dollars_to_cents(dollars_str: str) -> int:
    """
    Parse a dollar string to cents.

    Accepts an optional currency symbol, thousands separators and up to two
    fractional digits. Anything else is rejected rather than truncated.

    Examples:
        parse_dollars_to_cents("12.34") -> 1234
        parse_dollars_to_cents("$1,234.5") -> 123450
        parse_dollars_to_cents("-12") -> -1200

    Raises:
        ParseError: If the string is not a valid amount
    """
    clean = dollars_str.replace("$", "").replace(",", "").strip()

    match = _AMOUNT_PATTERN.match(clean)
    if match is None:
        raise ParseError(f"Invalid amount: {dollars_str!r}")

    sign, dollars, fraction = match.groups()
    total = int(dollars) * 100 + int((fraction or "").ljust(2, "0"))

    return -total if sign else total


def format_cents(cents: int, symbol: str = "$") -> str:
    """Format cents as a display string with a currency prefix."""
    if cents < 0:
        return f"-{symbol}{cents_to_dollars_str(-cents)}"
    return f"{symbol}{cents_to_dollars_str(cents)}"
