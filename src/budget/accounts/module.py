#!/usr/bin/env python3
"""
Accounts Module

Account lookups used to validate the account references of earnings and
expenses, plus budget changes that keep the history of monthly amounts.
"""

import logging
from datetime import timedelta

from ..core.dates import FinancialDate
from ..core.errors import ParseError, UsageError
from ..core.module import EntityModule
from ..core.money import Money
from ..core.store import RecordStore
from .models import OPEN_UNTIL, Account

logger = logging.getLogger(__name__)


class AccountsModule(EntityModule[Account]):
    """
    Queries and mutations over the account store.

    Args:
        store: Store of the accounts
        referencing: Stores whose records reference accounts by id; deleting
            a referenced account is refused
    """

    def __init__(self, store: RecordStore[Account], *referencing: RecordStore):
        super().__init__(store, *referencing)
        self.referencing = referencing

    def all_account_names(self) -> list[str]:
        """Distinct account names, sorted."""
        return sorted({account.name for account in self.store.all()})

    def current_accounts(self, on: FinancialDate | None = None) -> list[Account]:
        """Accounts valid on a date (default today)."""
        on = on or FinancialDate.today()
        return [account for account in self.store.all() if account.is_active(on)]

    def find_active(self, name: str, on: FinancialDate) -> Account | None:
        """The account with this name valid on a date, ignoring case."""
        for account in self.store.all():
            if account.name.lower() == name.lower() and account.is_active(on):
                return account
        return None

    def resolve(self, name: str, on: FinancialDate) -> Account:
        """
        Resolve a user-supplied account name to the account valid on a date.

        Raises:
            ParseError: If no such account is valid on that date
        """
        account = self.find_active(name, on)
        if account is None:
            raise ParseError(f"No account named {name!r} is valid on {on}")
        return account

    def total_budget(self, on: FinancialDate | None = None) -> Money:
        """Sum of the monthly amounts of the accounts valid on a date."""
        return self.total(self.current_accounts(on))

    def add(self, account: Account) -> int:
        """
        Open a new account.

        Raises:
            UsageError: If the name is empty or an account with the same name
                is already valid on the start date
        """
        if not account.name.strip():
            raise UsageError("Account name must not be empty")
        if self.find_active(account.name, account.since) is not None:
            raise UsageError(f"An account named {account.name!r} already exists on {account.since}")
        if account.until < account.since:
            raise UsageError("An account cannot end before it starts")

        account_id = self.store.add(account)
        logger.info(f"Created account {account_id}: {account.name}")
        return account_id

    def edit(self, account: Account) -> bool:
        """Replace an account's fields, returning whether any changed."""
        if account.until < account.since:
            raise UsageError("An account cannot end before it starts")
        return self.store.edit(account)

    def change_amount(self, account_id: int, amount: Money, on: FinancialDate | None = None) -> int:
        """
        Change the monthly amount of an open account from a date on.

        The current record is closed the day before and a new record with the
        same name is opened, so past months keep their original budget.

        Returns:
            Id of the newly opened account
        """
        on = on or FinancialDate.today()
        current = self.store.get(account_id)

        if not current.is_open:
            raise UsageError(f"Account {account_id} is already closed")
        if on <= current.since:
            raise UsageError(f"The new amount must start after {current.since}")

        def close(account: Account) -> None:
            account.until = FinancialDate(date=on.date - timedelta(days=1))

        self.store.update(account_id, close)

        new_id = self.store.add(Account(name=current.name, amount=amount, since=on, until=OPEN_UNTIL))
        logger.info(f"Account {current.name} changed from {current.amount} to {amount} on {on}")
        return new_id

    def delete(self, record_id: int) -> None:
        """
        Delete an account no record references.

        Raises:
            NotFoundError: If the account does not exist
            UsageError: If earnings or expenses still reference it
        """
        self.store.get(record_id)
        for store in self.referencing:
            if any(record.account == record_id for record in store.all()):
                raise UsageError(f"Account {record_id} is still used by {store.label}")
        super().delete(record_id)
