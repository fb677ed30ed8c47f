"""Chart of accounts commands."""

import click
from ledgerkit.cli.account_resolution import resolve_account_or_exit
from ledgerkit.utils.amount_parser import format_amount


@click.group()
def account_group():
    """Inspect the chart of accounts."""
    pass


@account_group.command("list")
@click.pass_context
def list_accounts(ctx):
    """List all accounts with their type and balance."""
    engine = ctx.obj["engine"]
    currency = ctx.obj["currency"]

    accounts = engine.get_chart_of_accounts()
    if not accounts:
        click.echo("No accounts found.")
        return

    click.echo("\nChart of Accounts:")
    click.echo("-" * 60)
    click.echo(f"{'Account':<25} {'Type':<12} {'Balance':>20}")
    click.echo("-" * 60)
    for acc in accounts:
        click.echo(
            f"{acc.name:<25} {acc.type.label:<12} "
            f"{format_amount(acc.balance, currency):>20}"
        )


@account_group.command("show")
@click.argument("account", metavar="ACCOUNT")
@click.pass_context
def show_account(ctx, account: str) -> None:
    """Show one account.

    ACCOUNT is an account name (case-insensitive).

    Examples:
        ledgerkit account show Cash
        ledgerkit account show "owner's capital"
    """
    engine = ctx.obj["engine"]
    currency = ctx.obj["currency"]

    acc = resolve_account_or_exit(ctx, engine, account)
    normal = "Debit" if acc.type.is_debit_normal else "Credit"
    postings = len(engine.get_transactions_for_account(acc.name))

    click.echo(f"Account: {acc}")
    click.echo(f"  Type: {acc.type.label}")
    click.echo(f"  Normal balance: {normal}")
    click.echo(f"  Balance: {format_amount(acc.balance, currency)}")
    click.echo(f"  Transactions: {postings}")


def register_commands(cli):
    """Register account commands with main CLI."""
    cli.add_command(account_group, name="account")
