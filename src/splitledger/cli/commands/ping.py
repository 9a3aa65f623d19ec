"""Remote connectivity command."""

import click

from splitledger.domain.errors import StorageError
from splitledger.storage.remote import FallbackStore


@click.command("ping")
@click.pass_context
def ping_remote(ctx):
    """Check that the spreadsheet proxy of the remote backend is reachable."""
    store = ctx.obj["store"]
    if not isinstance(store, FallbackStore):
        click.echo("Error: ping needs the remote backend (--backend remote --remote-url URL)", err=True)
        ctx.exit(1)

    try:
        message = store.remote.ping()
    except StorageError as e:
        click.echo(f"Error: {e}", err=True)
        ctx.exit(1)

    click.echo(f"{store.remote.describe()}: {message}")


def register_commands(cli):
    """Register ping command with main CLI."""
    cli.add_command(ping_remote)
