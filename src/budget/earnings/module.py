#!/usr/bin/env python3
"""
Earnings Module

Month/year listings, name search and totals over recorded earnings.
"""

from ..core.entries import EntryModule
from ..core.money import Money
from .models import Earning


class EarningsModule(EntryModule[Earning]):
    """Queries over the earnings store."""

    def income(self, month: int, year: int) -> Money:
        """Total earned in a month."""
        return self.total(self.for_period(month, year))

    def yearly_income(self, year: int) -> Money:
        return self.total(self.for_year(year))
