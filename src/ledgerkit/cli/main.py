"""Main CLI entry point."""

import logging

import click
from ledgerkit.domain.factories import create_ledger_engine

# Import and register all commands at module level
from ledgerkit.cli.commands import (
    account,
    record,
    view,
    balance_sheet,
    demo,
    session,
)

LOG_LEVELS = ["DEBUG", "INFO", "WARNING", "ERROR"]


@click.group()
@click.option(
    "--currency",
    default="$",
    show_default=True,
    envvar="LEDGERKIT_CURRENCY",
    help="Currency symbol used when displaying amounts (overrides LEDGERKIT_CURRENCY)",
)
@click.option(
    "--log-level",
    type=click.Choice(LOG_LEVELS, case_sensitive=False),
    default="WARNING",
    show_default=True,
    envvar="LEDGERKIT_LOG_LEVEL",
    help="Logging verbosity (overrides LEDGERKIT_LOG_LEVEL)",
)
@click.pass_context
def cli(ctx, currency: str, log_level: str):
    """Ledgerkit - Double-entry bookkeeping ledger.

    Record balanced transactions against a chart of accounts and view the
    general journal, per-account ledgers and the balance sheet. The ledger is
    kept in memory; use 'session' to work with one ledger across commands.
    """
    ctx.ensure_object(dict)

    level = getattr(logging, log_level.upper())
    logging.basicConfig(level=level, format="%(levelname)s %(name)s: %(message)s")
    # basicConfig is a no-op once the root logger has handlers
    logging.getLogger("ledgerkit").setLevel(level)

    # Build the ledger only when actually running a command (not for help)
    if ctx.invoked_subcommand is not None:
        ctx.obj.setdefault("engine", create_ledger_engine())
        ctx.obj.setdefault("currency", currency)


# Register all commands
account.register_commands(cli)
record.register_commands(cli)
view.register_commands(cli)
balance_sheet.register_commands(cli)
demo.register_commands(cli)
session.register_commands(cli)


def main():
    """Main entry point for CLI."""
    cli()


if __name__ == "__main__":
    main()
