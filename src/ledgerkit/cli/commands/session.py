"""Interactive session command."""

import shlex

import click

EXIT_WORDS = {"quit", "exit"}
# Commands that make no sense inside a running session
EXCLUDED_COMMANDS = {"session"}


def _available_commands(ctx: click.Context) -> list[str]:
    root = ctx.find_root().command
    return [
        name for name in root.list_commands(ctx) if name not in EXCLUDED_COMMANDS
    ]


def run_session_line(ctx: click.Context, line: str) -> int:
    """Run one session line against the session's ledger.

    Args:
        ctx: Context of the session command
        line: Command line as typed, e.g. 'ledger Cash'

    Returns:
        Exit code of the command (0 on success)
    """
    try:
        argv = shlex.split(line)
    except ValueError as e:
        click.echo(f"Error: {e}", err=True)
        return 1
    if not argv:
        return 0

    name, args = argv[0], argv[1:]
    if name == "help":
        click.echo("Commands: " + ", ".join(_available_commands(ctx) + sorted(EXIT_WORDS)))
        click.echo("Use '<command> --help' for details.")
        return 0

    root = ctx.find_root().command
    command = None if name in EXCLUDED_COMMANDS else root.get_command(ctx, name)
    if command is None:
        click.echo(f"Error: Unknown command '{name}'. Type 'help' for a list.", err=True)
        return 1

    try:
        code = command.main(
            args=args, prog_name=name, standalone_mode=False, obj=ctx.obj
        )
    except click.ClickException as e:
        e.show()
        return e.exit_code
    return code if isinstance(code, int) else 0


@click.command("session")
@click.pass_context
def run_session(ctx):
    """Work with one in-memory ledger interactively.

    Every line is a ledgerkit command (record, journal, ledger, balance-sheet,
    account, transactions, demo). Type 'help' for a list and 'quit' to leave.
    The ledger is discarded when the session ends.

    Examples:
        ledger> record --description "Owner investment" --debit Cash --credit "Owner's Capital" --amount 10000
        ledger> ledger Cash
        ledger> balance-sheet
    """
    click.echo("Ledgerkit session. Type 'help' for commands, 'quit' to exit.")
    while True:
        try:
            line = click.prompt(
                "ledger", prompt_suffix="> ", default="", show_default=False
            )
        except click.Abort:
            # End of input
            click.echo()
            break

        if line.strip().lower() in EXIT_WORDS:
            break
        run_session_line(ctx, line)

    count = len(ctx.obj["engine"].get_transactions())
    click.echo(f"Session ended ({count} transaction(s) recorded).")


def register_commands(cli):
    """Register session command with main CLI."""
    cli.add_command(run_session)
