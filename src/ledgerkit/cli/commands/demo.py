"""Demo command: record a sample month of transactions."""

from datetime import date
from decimal import Decimal

import click
from ledgerkit.cli.commands.balance_sheet import show_balance_sheet
from ledgerkit.cli.commands.view import view_journal

# (date, description, debit account, credit account, amount)
SAMPLE_TRANSACTIONS = [
    (date(2024, 1, 1), "Owner investment", "Cash", "Owner's Capital", Decimal("10000.00")),
    (date(2024, 1, 2), "Pay rent", "Rent Expense", "Cash", Decimal("2000.00")),
    (date(2024, 1, 5), "Buy equipment on note", "Equipment", "Notes Payable", Decimal("5000.00")),
    (date(2024, 1, 10), "Consulting services", "Accounts Receivable", "Service Revenue", Decimal("3500.00")),
    (date(2024, 1, 15), "Buy inventory on account", "Inventory", "Accounts Payable", Decimal("1200.00")),
    (date(2024, 1, 20), "Collect receivable", "Cash", "Accounts Receivable", Decimal("1500.00")),
    (date(2024, 1, 31), "Pay salaries", "Salaries Expense", "Cash", Decimal("1800.00")),
]


@click.command("demo")
@click.pass_context
def run_demo(ctx):
    """Record sample transactions and show the journal and balance sheet.

    The sample uses the reference chart of accounts.
    """
    engine = ctx.obj["engine"]

    for txn_date, description, debit, credit, amount in SAMPLE_TRANSACTIONS:
        engine.record_transaction(txn_date, description, debit, credit, amount)
    click.echo(f"Recorded {len(SAMPLE_TRANSACTIONS)} sample transactions")

    ctx.invoke(view_journal)
    ctx.invoke(show_balance_sheet)


def register_commands(cli):
    """Register demo command with main CLI."""
    cli.add_command(run_demo)
