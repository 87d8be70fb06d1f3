"""
Debts Package

Money lent and borrowed, tracked until paid back.
"""

from .models import Debt, DebtDirection, DebtState, debt_codec
from .module import DebtsModule

__all__ = [
    "Debt",
    "DebtDirection",
    "DebtState",
    "DebtsModule",
    "debt_codec",
]
