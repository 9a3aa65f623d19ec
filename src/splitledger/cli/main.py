"""Main CLI entry point."""

import warnings

import click

from splitledger.cli.error_handling import handle_domain_error
from splitledger.cli.logging_setup import setup_logging
from splitledger.config import BACKENDS, Settings
from splitledger.domain.errors import PersistenceWarning
from splitledger.domain.ledger import LedgerService
from splitledger.storage.factories import create_store

# Import and register all commands at module level
from splitledger.cli.commands import (
    add,
    expense,
    view,
    summary,
    export_cmd,
    import_cmd,
    ping,
)


@click.group()
@click.option(
    "--backend",
    type=click.Choice(BACKENDS),
    help="Storage backend (overrides SPLITLEDGER_BACKEND environment variable)",
    envvar="SPLITLEDGER_BACKEND",
)
@click.option(
    "--data-path",
    type=click.Path(),
    help="Path to the ledger file (overrides SPLITLEDGER_DATA_PATH environment variable)",
    envvar="SPLITLEDGER_DATA_PATH",
)
@click.option(
    "--remote-url",
    help="Spreadsheet proxy URL for the remote backend (overrides SPLITLEDGER_REMOTE_URL)",
    envvar="SPLITLEDGER_REMOTE_URL",
)
@click.option("--verbose", "-v", is_flag=True, help="Show debug logging")
@click.pass_context
def cli(ctx, backend: str | None, data_path: str | None, remote_url: str | None, verbose: bool):
    """Splitledger - shared expenses for two.

    Log who paid for what, split costs equally, by preset (60-40, 70-30, ...)
    or by custom percentages, and see who owes whom.
    """
    ctx.ensure_object(dict)
    setup_logging(verbose)
    # Failed syncs are reported by the commands themselves
    warnings.simplefilter("ignore", PersistenceWarning)

    # Open the ledger only when actually running a command (not when showing help)
    if ctx.invoked_subcommand is not None:
        try:
            settings = Settings.from_env(
                backend=backend, data_path=data_path, remote_url=remote_url
            )
            store = create_store(settings)
        except ValueError as e:
            handle_domain_error(ctx, e)
        ctx.obj["settings"] = settings
        ctx.obj["store"] = store
        ctx.obj["ledger"] = LedgerService(store)


# Register all commands
add.register_commands(cli)
expense.register_commands(cli)
view.register_commands(cli)
summary.register_commands(cli)
export_cmd.register_commands(cli)
import_cmd.register_commands(cli)
ping.register_commands(cli)


def main():
    """Main entry point for CLI."""
    cli()


if __name__ == "__main__":
    main()
