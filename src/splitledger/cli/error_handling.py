"""CLI error handling helpers."""

import click

from splitledger.domain.errors import DomainError
from splitledger.domain.ledger import LedgerService


def handle_domain_error(ctx: click.Context, error: DomainError | ValueError) -> None:
    """Render a domain error and exit with failure."""
    click.echo(f"Error: {error}", err=True)
    ctx.exit(1)


def report_persistence(ledger: LedgerService) -> None:
    """Tell the user when the last change only reached the local ledger."""
    if not ledger.last_persist_ok:
        click.echo(
            f"Warning: changes saved locally only; could not sync to {ledger.store.describe()}",
            err=True,
        )
