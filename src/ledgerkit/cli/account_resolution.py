"""CLI helpers for account resolution and error handling."""

from __future__ import annotations

import click
from ledgerkit.domain.entities import Account
from ledgerkit.domain.ledger import LedgerEngine
from ledgerkit.utils.account_resolver import resolve_account


def resolve_account_or_exit(
    ctx: click.Context, engine: LedgerEngine, account: str
) -> Account:
    """Resolve an account name, or exit with a CLI error.

    This keeps error messaging and exit behavior consistent across commands.
    """
    try:
        return resolve_account(engine, account)
    except ValueError as exc:
        click.echo(f"Error: {exc}", err=True)
        ctx.exit(1)
