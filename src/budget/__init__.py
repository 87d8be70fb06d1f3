"""
Budget - Personal Finance Ledger

A command-line ledger that tracks earnings, expenses, debts and accounts as
typed records persisted to plain text files.

Domain Packages:
- core: Record codec and store, money and dates, configuration, errors
- accounts: Budget accounts with monthly amounts and validity periods
- earnings: Money received
- expenses: Money spent
- debts: Money lent and borrowed
- analysis: Yearly overview report
- cli: The `budget` command

Example Usage:
    from budget import Ledger
    from budget.earnings import Earning

    ledger = Ledger(Path("~/.budget").expanduser())
    with ledger.earnings.activated():
        ledger.earnings.search("salary")
"""

__version__ = "0.3.0"
__author__ = "Budget Ledger Developers"

from .core.config import Environment, get_config
from .core.dates import FinancialDate
from .core.money import Money
from .ledger import Ledger

__all__ = [
    "Environment",
    "FinancialDate",
    "Ledger",
    "Money",
    "get_config",
]
