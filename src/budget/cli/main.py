#!/usr/bin/env python3
"""
Main CLI Entry Point for the Budget Ledger

Maps command-line verbs to module operations. Ledger errors are turned into
a printed message and a non-zero exit code here; nothing below this layer
prints errors itself.
"""

import logging
import sys
from collections.abc import Sequence
from pathlib import Path

import click

from ..core.config import Environment, get_config, load_config
from ..core.errors import BudgetError
from ..earnings import Earning
from ..expenses import Expense
from ..ledger import Ledger
from .accounts import account
from .debts import debt
from .entries import entry_group
from .reports import export, overview

logger = logging.getLogger(__name__)


class LedgerCommandError(click.ClickException):
    """A BudgetError surfaced to the user, keeping its exit code."""

    def __init__(self, error: BudgetError):
        super().__init__(str(error))
        self.exit_code = error.exit_code


class BudgetGroup(click.Group):
    """Root group converting ledger errors into click errors."""

    def invoke(self, ctx: click.Context):
        try:
            return super().invoke(ctx)
        except BudgetError as e:
            logger.debug(f"Command failed: {e!r}")
            raise LedgerCommandError(e) from e


@click.group(cls=BudgetGroup)
@click.option(
    "--data-dir",
    type=click.Path(file_okay=False),
    help="Directory holding the ledger files (default: $BUDGET_DATA_DIR or ~/.budget)",
)
@click.option(
    "--config-env",
    type=click.Choice(["development", "test", "production"]),
    help="Override environment configuration",
)
@click.option("--verbose", "-v", is_flag=True, help="Enable verbose output")
@click.option("--debug", is_flag=True, help="Enable debug logging")
@click.pass_context
def main(ctx: click.Context, data_dir: str | None, config_env: str | None, verbose: bool, debug: bool) -> None:
    """
    Budget - Personal Finance Ledger

    Track earnings, expenses, debts and accounts in plain text files.
    """
    ctx.ensure_object(dict)

    try:
        if data_dir or config_env:
            config = load_config(
                data_dir=Path(data_dir) if data_dir else None,
                environment=Environment(config_env) if config_env else None,
            )
        else:
            config = get_config()
    except ValueError as e:
        raise click.ClickException(str(e)) from e

    if debug:
        logging.getLogger().setLevel(logging.DEBUG)
        logging.getLogger("budget").setLevel(logging.DEBUG)

    ctx.obj["verbose"] = verbose
    ctx.obj["debug"] = debug
    ctx.obj["config"] = config
    ctx.obj["ledger"] = Ledger.from_config(config)

    if verbose:
        click.echo(f"Environment: {config.environment.value}")
        click.echo(f"Data directory: {config.data_dir}")

    if debug:
        click.echo("Debug logging enabled")


@main.command()
def version() -> None:
    """Show version information."""
    from budget import __author__, __version__

    click.echo(f"Budget Ledger v{__version__}")
    click.echo(f"Author: {__author__}")


@main.command()
@click.pass_context
def config(ctx: click.Context) -> None:
    """Show current configuration."""
    config_obj = ctx.obj["config"]

    click.echo("Current Configuration:")
    click.echo(f"  Environment: {config_obj.environment.value}")
    click.echo(f"  Data Directory: {config_obj.data_dir}")
    click.echo(f"  Random Amounts: {config_obj.random}")
    click.echo(f"  Currency: {config_obj.currency}")
    click.echo(f"  Debug Mode: {config_obj.debug}")
    click.echo(f"  Log Level: {config_obj.log_level}")


@main.command()
@click.pass_context
def status(ctx: click.Context) -> None:
    """Show what is saved in each ledger file."""
    ledger: Ledger = ctx.obj["ledger"]
    for store in ledger.stores:
        click.echo(f"{store.path.name}: {store.summary_text()}")


main.add_command(account)
main.add_command(entry_group("earning", lambda ledger: ledger.earnings, Earning))
main.add_command(entry_group("expense", lambda ledger: ledger.expenses, Expense))
main.add_command(debt)
main.add_command(overview)
main.add_command(export)


def handle(args: Sequence[str]) -> int:
    """
    Run one command from a tokenized argument list.

    Errors are printed rather than raised.

    Returns:
        Process exit code: 0 on success, 1 for ledger errors (unknown id,
        corrupt file), 2 for usage errors
    """
    try:
        rv = main.main(args=list(args), prog_name="budget", standalone_mode=False)
    except click.exceptions.Abort:
        click.echo("Aborted!", err=True)
        return 1
    except click.ClickException as e:
        e.show()
        return e.exit_code
    return rv if isinstance(rv, int) else 0


def run() -> None:
    """Console script entry point."""
    sys.exit(handle(sys.argv[1:]))


if __name__ == "__main__":
    run()
