#!/usr/bin/env python3
"""
Unit tests for currency utilities.

Covers the integer-cents conversions every stored amount goes through.
"""

import pytest

from budget.core.currency import cents_to_dollars_str, format_cents, parse_dollars_to_cents
from budget.core.errors import ParseError


class TestCurrencyConversion:
    """Test currency conversion functions."""

    @pytest.mark.currency
    def test_cents_to_dollars_str(self):
        """Test cents to fixed-point string."""
        assert cents_to_dollars_str(4599) == "45.99"
        assert cents_to_dollars_str(0) == "0.00"
        assert cents_to_dollars_str(-5) == "-0.05"
        assert cents_to_dollars_str(100000) == "1000.00"

    @pytest.mark.currency
    def test_parse_dollars_to_cents(self):
        """Test parsing dollar strings to cents."""
        assert parse_dollars_to_cents("45.99") == 4599
        assert parse_dollars_to_cents("$1,234.56") == 123456
        assert parse_dollars_to_cents("-0.05") == -5
        assert parse_dollars_to_cents("7.5") == 750

    @pytest.mark.currency
    @pytest.mark.parametrize("text", ["", "$", "1e3", "12.", ".5", "12.345", "twelve"])
    def test_parse_rejects_invalid(self, text):
        """Test invalid amounts raise ParseError."""
        with pytest.raises(ParseError):
            parse_dollars_to_cents(text)

    @pytest.mark.currency
    def test_format_cents(self):
        """Test display formatting with symbol."""
        assert format_cents(1234) == "$12.34"
        assert format_cents(-1234) == "-$12.34"
        assert format_cents(1234, "CHF ") == "CHF 12.34"
