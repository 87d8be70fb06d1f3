"""
Expenses Package

Money spent, booked against accounts.
"""

from .models import Expense, expense_codec
from .module import ExpensesModule

__all__ = [
    "Expense",
    "ExpensesModule",
    "expense_codec",
]
