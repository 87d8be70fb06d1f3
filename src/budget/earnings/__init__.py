"""
Earnings Package

Money received, booked against accounts.
"""

from .models import Earning, earning_codec
from .module import EarningsModule

__all__ = [
    "Earning",
    "EarningsModule",
    "earning_codec",
]
