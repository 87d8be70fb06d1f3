#!/usr/bin/env python3
"""
Account Models

An account is a budget envelope (e.g. "Food", "Salary") with a monthly
budgeted amount. Changing an account's budget closes the old account record
and opens a new one, so each record carries the period it is valid for.
"""

from dataclasses import dataclass, field

from ..core.codec import Field, RecordCodec, date_field, int_field, money_field, text_field
from ..core.dates import FinancialDate
from ..core.money import Money

# Upper bound used as the end date of accounts that are still open
OPEN_UNTIL = FinancialDate.of(2099, 12, 31)


@dataclass
class Account:
    """A budget account valid between two dates (inclusive)."""

    id: int = 0
    guid: str = ""
    name: str = ""
    amount: Money = Money()
    since: FinancialDate = field(default_factory=FinancialDate.today)
    until: FinancialDate = OPEN_UNTIL

    def is_active(self, on: FinancialDate) -> bool:
        """Check whether the account is valid on a date."""
        return self.since <= on <= self.until

    @property
    def is_open(self) -> bool:
        return self.until == OPEN_UNTIL


ACCOUNT_SCHEMA: list[Field] = [
    int_field("id"),
    text_field("guid"),
    text_field("name"),
    money_field("amount", randomizable=True),
    date_field("since"),
    date_field("until"),
]


def account_codec() -> RecordCodec[Account]:
    """Codec for id:guid:name:amount:since:until lines."""
    return RecordCodec(Account, ACCOUNT_SCHEMA)
