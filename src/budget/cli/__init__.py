"""
Command Line Interface Package

The `budget` command: one click group per entity type plus reports.

Command Structure:
- budget account: budget accounts and monthly amounts
- budget earning / budget expense: dated amounts booked against accounts
- budget debt: money lent and borrowed
- budget overview: monthly totals for a year
- budget export: JSON export of every store
- budget version / config / status: utility commands
"""

from .main import handle, main

__all__ = ["handle", "main"]
