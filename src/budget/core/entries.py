#!/usr/bin/env python3
"""
Account-Linked Entries

Earnings and expenses share one shape: a dated, named amount booked against
an account. This module holds that shape, its codec schema and the module
logic both entity types reuse.
"""

import logging
from dataclasses import dataclass, field
from typing import TypeVar

from .codec import Field, date_field, int_field, money_field, text_field
from .dates import FinancialDate, validate_month
from .errors import NotFoundError
from .module import EntityModule
from .money import Money
from .store import RecordStore

logger = logging.getLogger(__name__)


@dataclass
class LedgerEntry:
    """A dated amount booked against an account."""

    id: int = 0
    guid: str = ""
    account: int = 0
    name: str = ""
    amount: Money = Money()
    date: FinancialDate = field(default_factory=FinancialDate.today)


E = TypeVar("E", bound=LedgerEntry)


def entry_schema() -> list[Field]:
    """On-disk field order: id:guid:account:name:amount:date."""
    return [
        int_field("id"),
        text_field("guid"),
        int_field("account"),
        text_field("name"),
        money_field("amount", randomizable=True),
        date_field("date"),
    ]


class EntryModule(EntityModule[E]):
    """
    Module logic shared by earnings and expenses.

    Args:
        store: Store of the entries
        accounts: Store of the accounts the entries reference
    """

    def __init__(self, store: RecordStore[E], accounts: RecordStore):
        super().__init__(store, accounts)
        self.accounts = accounts

    def for_period(self, month: int, year: int) -> list[E]:
        """Entries dated in the given month of the given year."""
        validate_month(month)
        return [entry for entry in self.store if entry.date.in_period(month, year)]

    def for_year(self, year: int) -> list[E]:
        return [entry for entry in self.store if entry.date.year == year]

    def for_account(self, account_id: int) -> list[E]:
        return [entry for entry in self.store if entry.account == account_id]

    def add(self, entry: E) -> int:
        """
        Add an entry after checking its account exists.

        Raises:
            NotFoundError: If the account does not exist
        """
        self._check_account(entry.account)
        entry_id = self.store.add(entry)
        logger.info(f"Created {self.kind} {entry_id}: {entry.name} {entry.amount}")
        return entry_id

    def edit(self, entry: E) -> bool:
        """
        Replace an entry's fields after checking its account exists.

        Returns:
            True if any field changed

        Raises:
            NotFoundError: If the entry or the account does not exist
        """
        if not self.store.exists(entry.id):
            raise NotFoundError(self.kind, entry.id)
        self._check_account(entry.account)
        modified = self.store.edit(entry)
        logger.info(f"Edited {self.kind} {entry.id} (modified: {modified})")
        return modified

    def _check_account(self, account_id: int) -> None:
        if not self.accounts.exists(account_id):
            raise NotFoundError("account", account_id)
