"""Balance sheet command."""

import click
from ledgerkit.utils.amount_parser import format_amount


def _display_lines(lines, currency: str) -> None:
    for name, balance in lines:
        click.echo(f"  {name:<25} {format_amount(balance, currency):>18}")


@click.command("balance-sheet")
@click.pass_context
def show_balance_sheet(ctx):
    """Show the balance sheet.

    Equity includes the net income of income and expense accounts, so total
    assets always equal total liabilities plus equity.
    """
    engine = ctx.obj["engine"]
    currency = ctx.obj["currency"]

    sheet = engine.balance_sheet()

    click.echo("\nBalance Sheet")
    click.echo("=" * 47)
    click.echo("Assets")
    _display_lines(sheet.assets, currency)
    click.echo(f"{'Total Assets':<27} {format_amount(sheet.total_assets, currency):>18}")

    click.echo("\nLiabilities")
    _display_lines(sheet.liabilities, currency)
    click.echo(
        f"{'Total Liabilities':<27} {format_amount(sheet.total_liabilities, currency):>18}"
    )

    click.echo("\nEquity")
    _display_lines(sheet.equity, currency)
    click.echo(f"  {'Net Income':<25} {format_amount(sheet.net_income, currency):>18}")
    click.echo(f"{'Total Equity':<27} {format_amount(sheet.total_equity, currency):>18}")

    click.echo("=" * 47)
    click.echo(
        f"{'Total L & E':<27} "
        f"{format_amount(sheet.total_liabilities_and_equity, currency):>18}"
    )
    if not sheet.is_balanced:
        click.echo("Warning: balance sheet does not balance", err=True)


def register_commands(cli):
    """Register balance sheet command with main CLI."""
    cli.add_command(show_balance_sheet)
