"""Record transaction command."""

import click
from ledgerkit.cli.account_resolution import resolve_account_or_exit
from ledgerkit.cli.error_handling import handle_domain_error
from ledgerkit.domain.errors import DomainError
from ledgerkit.utils.amount_parser import format_amount, parse_amount
from ledgerkit.utils.date_parser import parse_date


@click.command("record")
@click.option(
    "--date",
    default="today",
    show_default=True,
    help="Transaction date (YYYY-MM-DD or relative like 'today', 'yesterday')",
)
@click.option("--description", required=True, help="Transaction description")
@click.option("--debit", required=True, help="Account to debit")
@click.option("--credit", required=True, help="Account to credit")
@click.option("--amount", required=True, help="Transaction amount (e.g., 2000 or 1,250.50)")
@click.pass_context
def record_transaction(
    ctx,
    date: str,
    description: str,
    debit: str,
    credit: str,
    amount: str,
):
    """Record a balanced transaction.

    Examples:
        ledgerkit record --date 2024-01-01 --description "Owner investment" --debit Cash --credit "Owner's Capital" --amount 10000
        ledgerkit record --description "Pay rent" --debit "Rent Expense" --credit Cash --amount 2,000.00
    """
    engine = ctx.obj["engine"]
    currency = ctx.obj["currency"]

    if not description.strip():
        click.echo("Error: Description cannot be empty", err=True)
        ctx.exit(1)

    try:
        txn_date = parse_date(date)
    except ValueError as e:
        click.echo(f"Error: Invalid date format: {e}", err=True)
        ctx.exit(1)

    try:
        txn_amount = parse_amount(amount)
    except ValueError as e:
        click.echo(f"Error: Invalid amount format: {e}", err=True)
        ctx.exit(1)

    debit_account = resolve_account_or_exit(ctx, engine, debit)
    credit_account = resolve_account_or_exit(ctx, engine, credit)

    try:
        txn = engine.record_transaction(
            date=txn_date,
            description=description.strip(),
            debit_account=debit_account,
            credit_account=credit_account,
            amount=txn_amount,
        )
    except DomainError as e:
        handle_domain_error(ctx, e)
        return

    click.echo("Recorded transaction")
    click.echo(f"  Date: {txn.date}")
    click.echo(f"  Description: {txn.description}")
    click.echo(f"  Debit: {txn.debit_account}")
    click.echo(f"  Credit: {txn.credit_account}")
    click.echo(f"  Amount: {format_amount(txn.amount, currency)}")


def register_commands(cli):
    """Register record command with main CLI."""
    cli.add_command(record_transaction)
