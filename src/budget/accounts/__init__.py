"""
Accounts Package

Budget accounts with validity periods and monthly amounts.
"""

from .models import OPEN_UNTIL, Account, account_codec
from .module import AccountsModule

__all__ = [
    "OPEN_UNTIL",
    "Account",
    "AccountsModule",
    "account_codec",
]
