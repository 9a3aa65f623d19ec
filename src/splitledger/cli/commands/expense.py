"""Expense management commands: edit, delete and clear."""

import click

from splitledger.cli.error_handling import handle_domain_error, report_persistence
from splitledger.cli.expense_resolution import resolve_expense_or_exit
from splitledger.domain.errors import DomainError
from splitledger.utils.amount_parser import parse_amount
from splitledger.utils.party_parser import parse_party


@click.command("edit")
@click.argument("expense_id")
@click.option("--description", help="New description (category is re-inferred)")
@click.option("--amount", help="New amount")
@click.option("--paid-by", "-p", help="New payer: sharath (a) or thejas (b)")
@click.pass_context
def edit_expense(
    ctx,
    expense_id: str,
    description: str | None,
    amount: str | None,
    paid_by: str | None,
) -> None:
    """Edit an expense.

    Updates only the fields that are provided. The split of an existing
    expense cannot be changed; delete and re-add it instead.

    With the remote backend the change is local only: the spreadsheet is
    append-only and its rows replace the local copy on the next load.

    Examples:
        splitledger edit 3f2a --amount 950
        splitledger edit 3f2a --description "Groceries and milk" --paid-by thejas
    """
    ledger = ctx.obj["ledger"]

    if description is None and amount is None and paid_by is None:
        click.echo("Error: Nothing to update. Use --description, --amount or --paid-by.", err=True)
        ctx.exit(1)

    full_id = resolve_expense_or_exit(ctx, ledger, expense_id)

    new_amount = None
    if amount is not None:
        try:
            new_amount = parse_amount(amount)
        except ValueError as e:
            click.echo(f"Error: Invalid amount format: {e}", err=True)
            ctx.exit(1)

    new_payer = None
    if paid_by is not None:
        try:
            new_payer = parse_party(paid_by)
        except ValueError as e:
            click.echo(f"Error: {e}", err=True)
            ctx.exit(1)

    try:
        updated = ledger.edit(
            full_id, description=description, amount=new_amount, paid_by=new_payer
        )
    except DomainError as e:
        handle_domain_error(ctx, e)

    click.echo(f"Updated expense {updated.id}")
    click.echo(f"  {updated.description}: {updated.amount:,.2f} paid by {updated.paid_by.display_name}")
    report_persistence(ledger)


@click.command("delete")
@click.argument("expense_id")
@click.option("--yes", "-y", is_flag=True, help="Do not ask for confirmation")
@click.pass_context
def delete_expense(ctx, expense_id: str, yes: bool) -> None:
    """Delete an expense.

    With the remote backend the deletion is local only: the spreadsheet is
    append-only and the expense returns on the next load.
    """
    ledger = ctx.obj["ledger"]
    full_id = resolve_expense_or_exit(ctx, ledger, expense_id)
    expense = ledger.get(full_id)

    if not yes and not click.confirm(
        f"Delete '{expense.description}' ({expense.amount:,.2f})?", default=False
    ):
        click.echo("Aborted.")
        return

    try:
        ledger.delete(full_id)
    except DomainError as e:
        handle_domain_error(ctx, e)

    click.echo(f"Deleted expense {full_id}")
    report_persistence(ledger)


@click.command("clear")
@click.option("--yes", "-y", is_flag=True, help="Do not ask for confirmation")
@click.pass_context
def clear_expenses(ctx, yes: bool) -> None:
    """Delete every expense. This cannot be undone.

    With the remote backend only the local copy is cleared: the spreadsheet
    is append-only and its rows return on the next load.
    """
    ledger = ctx.obj["ledger"]
    count = len(ledger.all())

    if not yes and not click.confirm(
        f"Clear all {count} expense(s)? This cannot be undone.", default=False
    ):
        click.echo("Aborted.")
        return

    ledger.clear()
    click.echo(f"Cleared {count} expense(s).")
    report_persistence(ledger)


def register_commands(cli):
    """Register expense commands with main CLI."""
    cli.add_command(edit_expense)
    cli.add_command(delete_expense)
    cli.add_command(clear_expenses)
