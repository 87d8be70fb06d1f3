#!/usr/bin/env python3
"""
Earnings and Expenses CLI

Both entity types take the same commands, so one factory builds the click
group for each:

    budget earning [show [MONTH [YEAR]]]
    budget earning all
    budget earning add [--date D] [--account A] [--name N] [--amount X]
    budget earning edit ID [...same options]
    budget earning delete ID
    budget earning search TEXT
"""

import calendar
from collections.abc import Callable

import click

from ..core.dates import FinancialDate
from ..core.entries import EntryModule, LedgerEntry
from ..ledger import Ledger
from .prompts import ask, parse_amount, parse_date, parse_name
from .render import echo_table, echo_title

COLUMNS = ["ID", "Date", "Account", "Name", "Amount"]


def _rows(ledger: Ledger, entries: list[LedgerEntry], symbol: str) -> list[list[str]]:
    names = {account.id: account.name for account in ledger.accounts.all()}
    return [
        [str(e.id), str(e.date), names.get(e.account, "?"), e.name, e.amount.format(symbol)] for e in entries
    ]


def _echo_entries(ledger: Ledger, entries: list[LedgerEntry], symbol: str, with_total: bool = True) -> None:
    rows = _rows(ledger, entries, symbol)
    if with_total:
        rows.append(["", "", "", "Total", EntryModule.total(entries).format(symbol)])
    echo_table(COLUMNS, rows, right_align=[4])


def entry_group(kind: str, module_of: Callable[[Ledger], EntryModule], factory: Callable[[], LedgerEntry]) -> click.Group:
    """
    Build the command group of an account-linked entry type.

    Args:
        kind: Singular entity name ("earning")
        module_of: Selects the entity module from the ledger
        factory: Creates an empty record of the entity type
    """
    plural = f"{kind}s"
    title = plural.capitalize()

    @click.group(name=kind, invoke_without_command=True, help=f"Manage {plural}. Shows this month by default.")
    @click.pass_context
    def group(ctx: click.Context) -> None:
        if ctx.invoked_subcommand is None:
            ctx.invoke(show)

    def activated(ctx: click.Context):
        return module_of(ctx.obj["ledger"]).activated()

    @group.command()
    @click.argument("month", type=click.IntRange(1, 12), required=False)
    @click.argument("year", type=click.IntRange(1, 9999), required=False)
    @click.pass_context
    def show(ctx: click.Context, month: int | None, year: int | None) -> None:
        """Show the entries of a month (default: current month)."""
        today = FinancialDate.today()
        month = month or today.month
        year = year or today.year
        ledger: Ledger = ctx.obj["ledger"]
        symbol = ctx.obj["config"].currency

        with activated(ctx) as module:
            entries = module.for_period(month, year)
            echo_title(f"{title} of {calendar.month_name[month]} {year}")
            if not entries:
                click.echo(f"No {plural} for {month}-{year}")
                return
            _echo_entries(ledger, entries, symbol)

    @group.command(name="all")
    @click.pass_context
    def all_entries(ctx: click.Context) -> None:
        """Show every entry."""
        ledger: Ledger = ctx.obj["ledger"]
        with activated(ctx) as module:
            echo_title(f"All {title}")
            _echo_entries(ledger, module.all(), ctx.obj["config"].currency, with_total=False)

    @group.command()
    @click.argument("text")
    @click.pass_context
    def search(ctx: click.Context, text: str) -> None:
        """Find entries whose name contains TEXT (case-insensitive)."""
        ledger: Ledger = ctx.obj["ledger"]
        with activated(ctx) as module:
            entries = module.search(text)
            echo_title("Results")
            if not entries:
                click.echo(f"No {plural} found")
                return
            _echo_entries(ledger, entries, ctx.obj["config"].currency)

    def fill(ledger: Ledger, entry: LedgerEntry, options: dict, editing: bool) -> None:
        """Set the entry's fields from options or prompts."""
        entry.date = ask("Date", parse_date, options["date"], str(entry.date))

        current_account = ""
        if editing and ledger.account_store.exists(entry.account):
            current_account = ledger.account_store.get(entry.account).name
        on = entry.date
        entry.account = ask(
            "Account",
            lambda name: ledger.accounts.resolve(name.strip(), on).id,
            options["account"],
            current_account or None,
        )

        entry.name = ask("Name", parse_name, options["name"], entry.name or None)
        entry.amount = ask(
            "Amount", parse_amount, options["amount"], entry.amount.to_storage_string() if editing else None
        )

    def field_options(command: Callable) -> Callable:
        for name in ("amount", "name", "account", "date"):
            command = click.option(f"--{name}", help=f"{name.capitalize()} (prompted when omitted)")(command)
        return command

    @group.command()
    @field_options
    @click.pass_context
    def add(ctx: click.Context, **options: str | None) -> None:
        """Record a new entry."""
        ledger: Ledger = ctx.obj["ledger"]
        with activated(ctx) as module:
            entry = factory()
            fill(ledger, entry, options, editing=False)
            entry_id = module.add(entry)
            click.echo(f"{kind.capitalize()} {entry_id} has been created")

    @group.command()
    @click.argument("entry_id", metavar="ID", type=int)
    @field_options
    @click.pass_context
    def edit(ctx: click.Context, entry_id: int, **options: str | None) -> None:
        """Edit an entry, prompting with the current values."""
        ledger: Ledger = ctx.obj["ledger"]
        with activated(ctx) as module:
            entry = module.get(entry_id)
            fill(ledger, entry, options, editing=True)
            if module.edit(entry):
                click.echo(f"{kind.capitalize()} {entry_id} has been modified")
            else:
                click.echo(f"No changes to {kind} {entry_id}")

    @group.command()
    @click.argument("entry_id", metavar="ID", type=int)
    @click.pass_context
    def delete(ctx: click.Context, entry_id: int) -> None:
        """Delete an entry."""
        with activated(ctx) as module:
            module.delete(entry_id)
            click.echo(f"{kind.capitalize()} {entry_id} has been deleted")

    return group

