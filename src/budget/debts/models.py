#!/usr/bin/env python3
"""
Debt Models

A debt is money lent to someone ("to") or borrowed from someone ("from"),
tracked until it is paid back.
"""

from dataclasses import dataclass, field
from enum import Enum

from ..core.codec import Field, RecordCodec, date_field, enum_field, int_field, money_field, text_field
from ..core.dates import FinancialDate
from ..core.money import Money


class DebtState(Enum):
    """Repayment state, stored as 0 or 1."""

    OPEN = 0
    PAID = 1


class DebtDirection(Enum):
    """Who owes whom."""

    TO = "to"  # the other person owes me
    FROM = "from"  # I owe the other person


@dataclass
class Debt:
    """Money owed between me and another person."""

    id: int = 0
    state: DebtState = DebtState.OPEN
    guid: str = ""
    date: FinancialDate = field(default_factory=FinancialDate.today)
    direction: DebtDirection = DebtDirection.TO
    name: str = ""
    amount: Money = Money()
    title: str = ""

    @property
    def is_paid(self) -> bool:
        return self.state == DebtState.PAID


DEBT_SCHEMA: list[Field] = [
    int_field("id"),
    enum_field("state", DebtState),
    text_field("guid"),
    date_field("date"),
    enum_field("direction", DebtDirection),
    text_field("name"),
    money_field("amount", randomizable=True),
    text_field("title"),
]


def debt_codec() -> RecordCodec[Debt]:
    """Codec for id:state:guid:date:direction:name:amount:title lines."""
    return RecordCodec(Debt, DEBT_SCHEMA)
