"""Import command."""

from pathlib import Path

import click

from splitledger.cli.error_handling import handle_domain_error, report_persistence
from splitledger.domain.errors import DomainError
from splitledger.domain.exchange import load_bundle, read_csv


@click.command("import")
@click.argument("path", type=click.Path(exists=True, dir_okay=False))
@click.option(
    "--format",
    "fmt",
    type=click.Choice(["json", "csv"]),
    help="File format; guessed from the extension when omitted",
)
@click.option("--yes", "-y", is_flag=True, help="Do not ask before replacing the ledger")
@click.pass_context
def import_ledger(ctx, path: str, fmt: str | None, yes: bool):
    """Replace the ledger with expenses from an export file or sheet CSV."""
    ledger = ctx.obj["ledger"]
    if fmt is None:
        fmt = "csv" if Path(path).suffix.lower() == ".csv" else "json"

    try:
        if fmt == "csv":
            with open(path, "r", encoding="utf-8-sig", newline="") as f:
                expenses = read_csv(f)
        else:
            expenses = load_bundle(Path(path).read_text(encoding="utf-8"))
    except DomainError as e:
        handle_domain_error(ctx, e)

    current = len(ledger.all())
    if current and not yes and not click.confirm(
        f"Replace {current} existing expense(s) with {len(expenses)} from {path}?",
        default=False,
    ):
        click.echo("Aborted.")
        return

    try:
        count = ledger.replace_all(expenses)
    except DomainError as e:
        handle_domain_error(ctx, e)

    click.echo(f"Imported {count} expense(s) from {path}")
    report_persistence(ledger)


def register_commands(cli):
    """Register import command with main CLI."""
    cli.add_command(import_ledger)
