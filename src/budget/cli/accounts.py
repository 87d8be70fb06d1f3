#!/usr/bin/env python3
"""
Accounts CLI - budget accounts and their monthly amounts.
"""

import click

from ..accounts import Account, AccountsModule
from ..core.dates import FinancialDate
from .prompts import ask, parse_amount, parse_date, parse_name
from .render import echo_table, echo_title


def _module(ctx: click.Context) -> AccountsModule:
    return ctx.obj["ledger"].accounts


def _echo_accounts(accounts: list[Account], symbol: str, with_period: bool) -> None:
    columns = ["ID", "Name", "Amount"]
    if with_period:
        columns += ["Since", "Until"]

    rows = []
    for account in accounts:
        row = [str(account.id), account.name, account.amount.format(symbol)]
        if with_period:
            row += [str(account.since), str(account.until) if not account.is_open else ""]
        rows.append(row)
    echo_table(columns, rows, right_align=[2])


@click.group(invoke_without_command=True)
@click.pass_context
def account(ctx: click.Context) -> None:
    """Manage budget accounts. Shows current accounts by default."""
    if ctx.invoked_subcommand is None:
        ctx.invoke(show)


@account.command()
@click.pass_context
def show(ctx: click.Context) -> None:
    """Show the accounts valid today and the total monthly budget."""
    symbol = ctx.obj["config"].currency
    with _module(ctx).activated() as module:
        accounts = module.current_accounts()
        echo_title("Accounts")
        if not accounts:
            click.echo("No accounts")
            return
        _echo_accounts(accounts, symbol, with_period=False)
        click.echo(f"\nTotal budget: {module.total_budget().format(symbol)}")


@account.command(name="all")
@click.pass_context
def all_accounts(ctx: click.Context) -> None:
    """Show every account, including closed ones."""
    with _module(ctx).activated() as module:
        echo_title("All Accounts")
        _echo_accounts(module.all(), ctx.obj["config"].currency, with_period=True)


@account.command()
@click.option("--name", help="Account name (prompted when omitted)")
@click.option("--amount", help="Monthly amount (prompted when omitted)")
@click.option("--since", help="Start date, YYYY-MM-DD (default: today)")
@click.pass_context
def add(ctx: click.Context, name: str | None, amount: str | None, since: str | None) -> None:
    """Open a new account."""
    with _module(ctx).activated() as module:
        new = Account(
            name=ask("Name", parse_name, name),
            amount=ask("Amount", parse_amount, amount),
            since=ask("Since", parse_date, since or str(FinancialDate.today())),
        )
        account_id = module.add(new)
        click.echo(f"Account {account_id} has been created")


@account.command()
@click.argument("account_id", metavar="ID", type=int)
@click.option("--name", help="Account name (prompted when omitted)")
@click.option("--amount", help="Monthly amount (prompted when omitted)")
@click.pass_context
def edit(ctx: click.Context, account_id: int, name: str | None, amount: str | None) -> None:
    """Edit an account in place (rewrites its whole history)."""
    with _module(ctx).activated() as module:
        current = module.get(account_id)
        current.name = ask("Name", parse_name, name, current.name)
        current.amount = ask("Amount", parse_amount, amount, current.amount.to_storage_string())
        if module.edit(current):
            click.echo(f"Account {account_id} has been modified")
        else:
            click.echo(f"No changes to account {account_id}")


@account.command()
@click.argument("account_id", metavar="ID", type=int)
@click.option("--amount", help="New monthly amount (prompted when omitted)")
@click.option("--date", "date_str", help="First day of the new amount, YYYY-MM-DD (default: today)")
@click.pass_context
def change(ctx: click.Context, account_id: int, amount: str | None, date_str: str | None) -> None:
    """Change the monthly amount from a date on, keeping past months intact."""
    with _module(ctx).activated() as module:
        new_amount = ask("Amount", parse_amount, amount)
        on = ask("Date", parse_date, date_str or str(FinancialDate.today()), option="--date")
        new_id = module.change_amount(account_id, new_amount, on)
        click.echo(f"Account {account_id} has been closed, account {new_id} continues it from {on}")


@account.command()
@click.argument("account_id", metavar="ID", type=int)
@click.pass_context
def delete(ctx: click.Context, account_id: int) -> None:
    """Delete an account that no earning or expense uses."""
    with _module(ctx).activated() as module:
        module.delete(account_id)
        click.echo(f"Account {account_id} has been deleted")
