"""Transaction, journal and ledger viewing commands."""

import click
from ledgerkit.cli.account_resolution import resolve_account_or_exit
from ledgerkit.utils.amount_parser import format_amount


@click.command("transactions")
@click.pass_context
def view_transactions(ctx):
    """List recorded transactions in recording order."""
    engine = ctx.obj["engine"]
    currency = ctx.obj["currency"]

    transactions = engine.get_transactions()
    if not transactions:
        click.echo("No transactions found.")
        return

    click.echo(f"\nFound {len(transactions)} transaction(s):")
    click.echo("-" * 110)
    click.echo(
        f"{'Date':<12} {'Description':<30} {'Debit':<22} {'Credit':<22} {'Amount':>18}"
    )
    click.echo("-" * 110)
    for txn in transactions:
        click.echo(
            f"{str(txn.date):<12} {txn.description[:30]:<30} {txn.debit_account:<22} "
            f"{txn.credit_account:<22} {format_amount(txn.amount, currency):>18}"
        )


@click.command("journal")
@click.pass_context
def view_journal(ctx):
    """Show the general journal.

    Each transaction takes two lines: the debit line carries the date and
    description, the credit line is indented beneath it.
    """
    engine = ctx.obj["engine"]
    currency = ctx.obj["currency"]

    entries = engine.get_general_journal()
    if not entries:
        click.echo("General journal is empty.")
        return

    click.echo("\nGeneral Journal:")
    click.echo("-" * 110)
    click.echo(
        f"{'Date':<12} {'Description':<30} {'Account':<26} {'Debit':>18} {'Credit':>18}"
    )
    click.echo("-" * 110)
    for entry in entries:
        entry_date = str(entry.date) if entry.date is not None else ""
        description = (entry.description or "")[:30]
        account_name = entry.account_name if entry.is_debit else f"    {entry.account_name}"
        click.echo(
            f"{entry_date:<12} {description:<30} {account_name:<26} "
            f"{format_amount(entry.debit_amount, currency):>18} "
            f"{format_amount(entry.credit_amount, currency):>18}"
        )


@click.command("ledger")
@click.argument("account", metavar="ACCOUNT")
@click.pass_context
def view_ledger(ctx, account: str):
    """Show the ledger of one account with its running balance.

    ACCOUNT is an account name (case-insensitive).

    Examples:
        ledgerkit ledger Cash
    """
    engine = ctx.obj["engine"]
    currency = ctx.obj["currency"]

    acc = resolve_account_or_exit(ctx, engine, account)
    lines = engine.get_account_ledger(acc.name)

    click.echo(f"\nGeneral Ledger: {acc}")
    if not lines:
        click.echo("No transactions found.")
        return

    click.echo("-" * 100)
    click.echo(
        f"{'Date':<12} {'Description':<30} {'Debit':>18} {'Credit':>18} {'Balance':>18}"
    )
    click.echo("-" * 100)
    for line in lines:
        click.echo(
            f"{str(line.date):<12} {line.description[:30]:<30} "
            f"{format_amount(line.debit, currency):>18} "
            f"{format_amount(line.credit, currency):>18} "
            f"{format_amount(line.balance, currency):>18}"
        )


def register_commands(cli):
    """Register view commands with main CLI."""
    cli.add_command(view_transactions)
    cli.add_command(view_journal)
    cli.add_command(view_ledger)
