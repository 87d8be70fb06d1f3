#!/usr/bin/env python3
"""
Reports CLI - yearly overview and JSON export.
"""

import calendar
from pathlib import Path

import click

from ..analysis import YearOverview
from ..core.currency import cents_to_dollars_str
from ..core.dates import FinancialDate
from ..export import export_ledger
from .render import echo_table, echo_title


@click.command()
@click.argument("year", type=click.IntRange(1, 9999), required=False)
@click.option("--by-account", is_flag=True, help="Break expenses down per account")
@click.pass_context
def overview(ctx: click.Context, year: int | None, by_account: bool) -> None:
    """
    Monthly earnings, expenses, budget and balance for a year.

    Examples:
      budget overview
      budget overview 2024 --by-account
    """
    year = year or FinancialDate.today().year
    symbol = ctx.obj["config"].currency
    ledger = ctx.obj["ledger"]

    with ledger.activated():
        report = YearOverview(ledger, year)

        echo_title(f"Overview of {year}")
        rows = [
            [
                calendar.month_abbr[m.month],
                m.earnings.format(symbol),
                m.expenses.format(symbol),
                m.budget.format(symbol),
                m.balance.format(symbol),
            ]
            for m in report.months()
        ]
        totals = report.totals()
        rows.append(
            [
                "Total",
                totals.earnings.format(symbol),
                totals.expenses.format(symbol),
                totals.budget.format(symbol),
                totals.balance.format(symbol),
            ]
        )
        echo_table(["Month", "Earnings", "Expenses", "Budget", "Balance"], rows, right_align=[1, 2, 3, 4])

        if by_account:
            table = report.expenses_by_account()
            click.echo()
            echo_title("Expenses by Account")
            if table.empty:
                click.echo("No expenses")
                return
            account_rows = [
                [str(name), *(cents_to_dollars_str(int(cents)) for cents in row)]
                for name, row in table.iterrows()
            ]
            echo_table(
                ["Account", *(calendar.month_abbr[m] for m in table.columns)],
                account_rows,
                right_align=list(range(1, 13)),
            )


@click.command()
@click.argument("dest", type=click.Path(file_okay=False, path_type=Path))
@click.pass_context
def export(ctx: click.Context, dest: Path) -> None:
    """Export every store as JSON files into DEST."""
    ledger = ctx.obj["ledger"]
    with ledger.activated():
        for path in export_ledger(ledger, dest):
            click.echo(f"Wrote {path}")
