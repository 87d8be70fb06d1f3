#!/usr/bin/env python3
"""
Ledger - the stores and modules of one data directory.

The ledger is built explicitly and passed to whatever needs it (the CLI, the
overview report, tests). Two ledgers over two directories are fully
independent.
"""

import logging
from collections.abc import Iterator
from contextlib import contextmanager
from pathlib import Path

from .accounts import Account, AccountsModule, account_codec
from .core.config import Config
from .core.store import RecordStore
from .debts import Debt, DebtsModule, debt_codec
from .earnings import Earning, EarningsModule, earning_codec
from .expenses import Expense, ExpensesModule, expense_codec

logger = logging.getLogger(__name__)


class Ledger:
    """
    All record stores of a data directory and the modules built on them.

    Args:
        data_dir: Directory holding the *.data files
        randomize: Replace stored amounts with synthetic values on load
    """

    def __init__(self, data_dir: Path, randomize: bool = False):
        self.data_dir = Path(data_dir)

        self.account_store: RecordStore[Account] = RecordStore(
            "account", self.data_dir / "accounts.data", account_codec(), randomize
        )
        self.earning_store: RecordStore[Earning] = RecordStore(
            "earning", self.data_dir / "earnings.data", earning_codec(), randomize
        )
        self.expense_store: RecordStore[Expense] = RecordStore(
            "expense", self.data_dir / "expenses.data", expense_codec(), randomize
        )
        self.debt_store: RecordStore[Debt] = RecordStore("debt", self.data_dir / "debts.data", debt_codec(), randomize)

        self.accounts = AccountsModule(self.account_store, self.earning_store, self.expense_store)
        self.earnings = EarningsModule(self.earning_store, self.account_store)
        self.expenses = ExpensesModule(self.expense_store, self.account_store)
        self.debts = DebtsModule(self.debt_store)

    @classmethod
    def from_config(cls, config: Config) -> "Ledger":
        return cls(config.data_dir, randomize=config.random)

    @property
    def stores(self) -> list[RecordStore]:
        return [self.account_store, self.earning_store, self.expense_store, self.debt_store]

    @contextmanager
    def activated(self) -> Iterator["Ledger"]:
        """Load every store for the duration of a command, flushing at the end."""
        try:
            for store in self.stores:
                store.load()
            yield self
        finally:
            for store in self.stores:
                store.unload()
