#!/usr/bin/env python3
"""
Record Codec - one typed record to and from one line of delimited text.

Every entity type declares its schema as an ordered list of Field objects.
The order is the on-disk order and must not change without a migration.

Example (earning):
    1:0b9e...:2:Salary:2500.00:2024-03-01
"""

import logging
import re
from collections.abc import Callable, Sequence
from dataclasses import dataclass, fields
from enum import Enum
from typing import Any, Generic, TypeVar

from .dates import FinancialDate
from .errors import MalformedRecordError, ParseError
from .money import Money

logger = logging.getLogger(__name__)

T = TypeVar("T")

DELIMITER = ":"

# Bounds of randomized amounts, in whole currency units
RANDOM_LOW = 10
RANDOM_HIGH = 5000

_UNSIGNED_PATTERN = re.compile(r"^[0-9]+$")

# Fields that are never editable once a record exists
IDENTITY_FIELDS = ("id", "guid")


def parse_unsigned(text: str) -> int:
    """Parse a non-negative decimal integer."""
    if not _UNSIGNED_PATTERN.match(text):
        raise ParseError(f"Invalid number: {text!r}")
    return int(text)


def validate_text(value: str, delimiter: str = DELIMITER) -> str:
    """
    Check that a free-text value can be stored.

    Raises:
        ParseError: If the value contains the delimiter or a line break
    """
    if delimiter in value:
        raise ParseError(f"{value!r} must not contain {delimiter!r}")
    if "\n" in value or "\r" in value:
        raise ParseError(f"{value!r} must not contain a line break")
    return value


@dataclass(frozen=True)
class Field:
    """One column of a record schema."""

    name: str
    parse: Callable[[str], Any]
    format: Callable[[Any], str]
    is_text: bool = False
    randomizable: bool = False


def int_field(name: str) -> Field:
    return Field(name, parse_unsigned, str)


def text_field(name: str) -> Field:
    return Field(name, str, str, is_text=True)


def money_field(name: str, randomizable: bool = False) -> Field:
    return Field(name, Money.from_string, Money.to_storage_string, randomizable=randomizable)


def date_field(name: str) -> Field:
    return Field(name, FinancialDate.from_string, FinancialDate.to_iso_string)


def enum_field(name: str, enum_type: type[Enum]) -> Field:
    """Field stored as the string form of the enum member's value."""
    by_token = {str(member.value): member for member in enum_type}

    def parse(text: str) -> Enum:
        try:
            return by_token[text]
        except KeyError:
            raise ParseError(f"Invalid {enum_type.__name__}: {text!r}") from None

    return Field(name, parse, lambda member: str(member.value))


class RecordCodec(Generic[T]):
    """
    Bijective mapping between a record dataclass and a line of text.

    Contract: decode(encode(r)) == r for every valid record r.
    """

    def __init__(self, record_type: type[T], schema: Sequence[Field], delimiter: str = DELIMITER):
        names = {f.name for f in fields(record_type)}  # type: ignore[arg-type]
        unknown = [field.name for field in schema if field.name not in names]
        if unknown:
            raise ValueError(f"{record_type.__name__} has no fields {unknown}")
        if len(schema) != len(names):
            raise ValueError(f"Schema for {record_type.__name__} must cover all {len(names)} fields")

        self.record_type = record_type
        self.schema = tuple(schema)
        self.delimiter = delimiter

    @property
    def field_count(self) -> int:
        return len(self.schema)

    @property
    def editable_fields(self) -> tuple[str, ...]:
        """Names of the fields an edit may change."""
        return tuple(f.name for f in self.schema if f.name not in IDENTITY_FIELDS)

    def encode(self, record: T) -> str:
        """
        Render a record as one line (without line terminator).

        Raises:
            MalformedRecordError: If a text field contains the delimiter or a line break
        """
        parts = []
        for field in self.schema:
            value = field.format(getattr(record, field.name))
            if field.is_text:
                try:
                    validate_text(value, self.delimiter)
                except ParseError as e:
                    raise MalformedRecordError(f"Cannot encode {field.name} of record {record!r}: {e}") from e
            parts.append(value)
        return self.delimiter.join(parts)

    def to_dict(self, record: T) -> dict[str, str]:
        """Canonical text of each field, keyed by field name, in schema order."""
        return {field.name: field.format(getattr(record, field.name)) for field in self.schema}

    def decode(self, line: str, randomize: bool = False) -> T:
        """
        Parse one line into a record.

        Args:
            line: Encoded record, optionally with its line terminator
            randomize: Replace randomizable money fields by a synthetic amount

        Raises:
            MalformedRecordError: If the number of parts does not match the schema
            ParseError: If a field cannot be converted
        """
        parts = line.rstrip("\r\n").split(self.delimiter)
        if len(parts) != self.field_count:
            raise MalformedRecordError(
                f"Expected {self.field_count} fields for {self.record_type.__name__}, found {len(parts)}"
            )

        values = {}
        for field, text in zip(self.schema, parts):
            try:
                value = field.parse(text)
            except ParseError as e:
                raise ParseError(f"Field {field.name}: {e}") from e
            if randomize and field.randomizable:
                value = Money.random(RANDOM_LOW, RANDOM_HIGH)
            values[field.name] = value

        return self.record_type(**values)
