"""Export command."""

import io
from datetime import datetime, UTC
from pathlib import Path

import click

from splitledger.domain.exchange import dump_bundle, write_csv


@click.command("export")
@click.argument("path", type=click.Path(dir_okay=False), required=False)
@click.option(
    "--format",
    "fmt",
    type=click.Choice(["json", "csv"]),
    default="json",
    show_default=True,
    help="json: expenses, export date and balances; csv: sheet rows",
)
@click.pass_context
def export_ledger(ctx, path: str | None, fmt: str):
    """Export the ledger to PATH, or to stdout when no path is given.

    Examples:
        splitledger export expense-data.json
        splitledger export --format csv > expenses.csv
    """
    ledger = ctx.obj["ledger"]
    expenses = ledger.all()

    if fmt == "csv":
        buffer = io.StringIO()
        write_csv(expenses, buffer)
        content = buffer.getvalue()
    else:
        content = dump_bundle(expenses, datetime.now(UTC)) + "\n"

    if path is None:
        click.echo(content, nl=False)
        return

    try:
        Path(path).write_text(content, encoding="utf-8", newline="")
    except OSError as e:
        click.echo(f"Error: Could not write {path}: {e}", err=True)
        ctx.exit(1)
    click.echo(f"Exported {len(expenses)} expense(s) to {path}")


def register_commands(cli):
    """Register export command with main CLI."""
    cli.add_command(export_ledger)
