#!/usr/bin/env python3
"""
Debts CLI - money lent and borrowed.
"""

import click

from ..core.errors import ParseError
from ..debts import Debt, DebtDirection, DebtsModule
from .prompts import ask, parse_amount, parse_date, parse_name, parse_optional_text
from .render import echo_table, echo_title

COLUMNS = ["ID", "Date", "Direction", "Name", "Amount", "Title", "Paid"]


def _module(ctx: click.Context) -> DebtsModule:
    return ctx.obj["ledger"].debts


def parse_direction(text: str) -> DebtDirection:
    try:
        return DebtDirection(text.strip().lower())
    except ValueError:
        raise ParseError("must be 'to' or 'from'") from None


def _echo_debts(debts: list[Debt], symbol: str) -> None:
    rows = [
        [
            str(debt.id),
            str(debt.date),
            debt.direction.value,
            debt.name,
            debt.amount.format(symbol),
            debt.title,
            "yes" if debt.is_paid else "",
        ]
        for debt in debts
    ]
    echo_table(COLUMNS, rows, right_align=[4])


@click.group(invoke_without_command=True)
@click.pass_context
def debt(ctx: click.Context) -> None:
    """Manage debts. Shows open debts by default."""
    if ctx.invoked_subcommand is None:
        ctx.invoke(show)


@debt.command()
@click.pass_context
def show(ctx: click.Context) -> None:
    """Show open debts and the net balance."""
    symbol = ctx.obj["config"].currency
    with _module(ctx).activated() as module:
        debts = module.open_debts()
        echo_title("Open Debts")
        if not debts:
            click.echo("No open debts")
            return
        _echo_debts(debts, symbol)
        click.echo(f"\nOwed to me: {module.owed_to_me().format(symbol)}")
        click.echo(f"Owed by me: {module.owed_by_me().format(symbol)}")
        click.echo(f"Balance: {module.balance().format(symbol)}")


@debt.command(name="all")
@click.pass_context
def all_debts(ctx: click.Context) -> None:
    """Show every debt, paid or not."""
    with _module(ctx).activated() as module:
        echo_title("All Debts")
        _echo_debts(module.all(), ctx.obj["config"].currency)


def _debt_options(command):
    command = click.option("--title", help="Description (prompted when omitted)")(command)
    command = click.option("--amount", help="Amount (prompted when omitted)")(command)
    command = click.option("--name", help="Other person (prompted when omitted)")(command)
    command = click.option("--direction", help="'to' if they owe me, 'from' if I owe them")(command)
    command = click.option("--date", "date_str", help="Date, YYYY-MM-DD")(command)
    return command


def _fill(record: Debt, date_str, direction, name, amount, title, editing: bool) -> None:
    record.date = ask("Date", parse_date, date_str, str(record.date), option="--date")
    record.direction = ask("Direction", parse_direction, direction, record.direction.value)
    record.name = ask("Name", parse_name, name, record.name or None)
    record.amount = ask("Amount", parse_amount, amount, record.amount.to_storage_string() if editing else None)
    record.title = ask("Title", parse_optional_text, title, record.title)


@debt.command()
@_debt_options
@click.pass_context
def add(ctx: click.Context, date_str, direction, name, amount, title) -> None:
    """Record a new debt."""
    with _module(ctx).activated() as module:
        record = Debt()
        _fill(record, date_str, direction, name, amount, title, editing=False)
        debt_id = module.add(record)
        click.echo(f"Debt {debt_id} has been created")


@debt.command()
@click.argument("debt_id", metavar="ID", type=int)
@_debt_options
@click.pass_context
def edit(ctx: click.Context, debt_id: int, date_str, direction, name, amount, title) -> None:
    """Edit a debt, prompting with the current values."""
    with _module(ctx).activated() as module:
        record = module.get(debt_id)
        _fill(record, date_str, direction, name, amount, title, editing=True)
        if module.edit(record):
            click.echo(f"Debt {debt_id} has been modified")
        else:
            click.echo(f"No changes to debt {debt_id}")


@debt.command()
@click.argument("debt_id", metavar="ID", type=int)
@click.pass_context
def paid(ctx: click.Context, debt_id: int) -> None:
    """Mark a debt as paid back."""
    with _module(ctx).activated() as module:
        module.mark_paid(debt_id)
        click.echo(f"Debt {debt_id} has been paid")


@debt.command()
@click.argument("debt_id", metavar="ID", type=int)
@click.pass_context
def delete(ctx: click.Context, debt_id: int) -> None:
    """Delete a debt."""
    with _module(ctx).activated() as module:
        module.delete(debt_id)
        click.echo(f"Debt {debt_id} has been deleted")
