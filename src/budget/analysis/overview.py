#!/usr/bin/env python3
"""
Yearly Overview

Month-by-month earnings, expenses, budget and balance for one year, built
from the stores with pandas. All columns hold integer cents so totals stay
exact.
"""

import logging
from dataclasses import dataclass

import pandas as pd

from ..core.dates import FinancialDate
from ..core.money import Money
from ..ledger import Ledger

logger = logging.getLogger(__name__)

MONTHS = range(1, 13)
COLUMNS = ["earnings", "expenses", "budget", "balance"]


@dataclass
class MonthSummary:
    """Totals of one month."""

    month: int
    earnings: Money
    expenses: Money
    budget: Money

    @property
    def balance(self) -> Money:
        return self.earnings - self.expenses

    @property
    def remaining_budget(self) -> Money:
        return self.budget - self.expenses


class YearOverview:
    """
    Aggregates a loaded ledger into monthly totals.

    The ledger's stores must be loaded (see Ledger.activated()).
    """

    def __init__(self, ledger: Ledger, year: int):
        self.ledger = ledger
        self.year = year

    def _monthly_cents(self, records: list) -> pd.Series:
        """Sum of amounts per month, zero for months without records."""
        if not records:
            return pd.Series(0, index=MONTHS, dtype="int64")

        frame = pd.DataFrame(
            {
                "month": [record.date.month for record in records],
                "cents": [record.amount.to_cents() for record in records],
            },
            columns=["month", "cents"],
        )
        series = frame.groupby("month")["cents"].sum()
        return series.reindex(MONTHS, fill_value=0).astype("int64")

    def _monthly_budget(self) -> pd.Series:
        budgets = [
            self.ledger.accounts.total_budget(FinancialDate.of(self.year, month, 1)).to_cents() for month in MONTHS
        ]
        return pd.Series(budgets, index=MONTHS, dtype="int64")

    def to_frame(self) -> pd.DataFrame:
        """
        Monthly totals as a DataFrame indexed by month number (1-12).

        Columns (cents): earnings, expenses, budget, balance
        """
        frame = pd.DataFrame(
            {
                "earnings": self._monthly_cents(self.ledger.earnings.for_year(self.year)),
                "expenses": self._monthly_cents(self.ledger.expenses.for_year(self.year)),
                "budget": self._monthly_budget(),
            }
        )
        frame["balance"] = frame["earnings"] - frame["expenses"]
        frame.index.name = "month"

        logger.debug(f"Computed overview for {self.year}")
        return frame[COLUMNS]

    def months(self) -> list[MonthSummary]:
        """Monthly totals as Money values."""
        frame = self.to_frame()
        return [
            MonthSummary(
                month=int(month),
                earnings=Money.from_cents(int(row["earnings"])),
                expenses=Money.from_cents(int(row["expenses"])),
                budget=Money.from_cents(int(row["budget"])),
            )
            for month, row in frame.iterrows()
        ]

    def totals(self) -> MonthSummary:
        """Whole-year totals; the month field is 0."""
        sums = self.to_frame().sum()
        return MonthSummary(
            month=0,
            earnings=Money.from_cents(int(sums["earnings"])),
            expenses=Money.from_cents(int(sums["expenses"])),
            budget=Money.from_cents(int(sums["budget"])),
        )

    def expenses_by_account(self) -> pd.DataFrame:
        """
        Expenses per account name (rows) and month (columns), in cents.

        Accounts sharing a name across budget changes are merged.
        """
        names = {account.id: account.name for account in self.ledger.accounts.all()}
        expenses = self.ledger.expenses.for_year(self.year)
        if not expenses:
            return pd.DataFrame(0, index=pd.Index([], name="account"), columns=list(MONTHS), dtype="int64")

        frame = pd.DataFrame(
            {
                "account": [names.get(e.account, f"#{e.account}") for e in expenses],
                "month": [e.date.month for e in expenses],
                "cents": [e.amount.to_cents() for e in expenses],
            },
            columns=["account", "month", "cents"],
        )
        table = frame.pivot_table(index="account", columns="month", values="cents", aggfunc="sum", fill_value=0)
        return table.reindex(columns=MONTHS, fill_value=0).astype("int64")
