"""
Analysis Package

Reports computed from the ledger's stores.
"""

from .overview import MonthSummary, YearOverview

__all__ = [
    "MonthSummary",
    "YearOverview",
]
