#!/usr/bin/env python3
"""
Expenses Module

Month/year listings, name search and totals over recorded expenses, plus the
per-account spending used to compare against account budgets.
"""

from collections import defaultdict

from ..core.entries import EntryModule
from ..core.money import Money
from .models import Expense


class ExpensesModule(EntryModule[Expense]):
    """Queries over the expenses store."""

    def spending(self, month: int, year: int) -> Money:
        """Total spent in a month."""
        return self.total(self.for_period(month, year))

    def spending_by_account(self, month: int, year: int) -> dict[int, Money]:
        """Amount spent in a month per account id."""
        totals: dict[int, Money] = defaultdict(Money)
        for expense in self.for_period(month, year):
            totals[expense.account] += expense.amount
        return dict(totals)
