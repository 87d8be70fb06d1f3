#!/usr/bin/env python3
"""
Interactive Field Entry

Values come from command-line options when given; otherwise the user is
prompted. Invalid input at a prompt is reported and asked again. Invalid
option values are usage errors.
"""

from collections.abc import Callable
from typing import TypeVar

import click

from ..core.codec import validate_text
from ..core.dates import FinancialDate
from ..core.errors import ParseError
from ..core.money import Money

V = TypeVar("V")


def ask(
    label: str,
    parser: Callable[[str], V],
    given: str | None = None,
    default: str | None = None,
    option: str | None = None,
) -> V:
    """
    Get one field value from an option or an interactive prompt.

    Args:
        label: Prompt label ("Amount")
        parser: Converts text to the field value, raising ParseError
        given: Value passed on the command line, if any
        default: Prompt default (current value when editing)
        option: Option name used in usage errors (default: --<label>)
    """
    if given is not None:
        try:
            return parser(given)
        except ParseError as e:
            raise click.BadParameter(str(e), param_hint=option or f"--{label.lower()}") from e

    while True:
        text = click.prompt(label, default=default, show_default=default is not None, type=str)
        try:
            return parser(text)
        except ParseError as e:
            click.echo(f"  Invalid value: {e}")


def parse_name(text: str) -> str:
    """Non-empty text that can be stored."""
    text = text.strip()
    if not text:
        raise ParseError("must not be empty")
    return validate_text(text)


def parse_optional_text(text: str) -> str:
    return validate_text(text.strip())


def parse_amount(text: str) -> Money:
    """A non-negative amount."""
    amount = Money.from_string(text)
    if amount.is_negative():
        raise ParseError("must not be negative")
    return amount


def parse_date(text: str) -> FinancialDate:
    return FinancialDate.from_string(text)
