"""Expense listing command."""

import click

from splitledger.domain.balance import filter_expenses, split_label
from splitledger.domain.category import category_icon


@click.command("list")
@click.option("--search", "-s", help="Only show expenses whose description, payer or category contains this text")
@click.option("--verbose", "-v", is_flag=True, help="Show all fields including full id and timestamp")
@click.pass_context
def list_expenses(ctx, search: str | None, verbose: bool):
    """List expenses, newest first.

    Use --search to filter by description, payer or category.
    """
    ledger = ctx.obj["ledger"]
    expenses = filter_expenses(ledger.all(), search)

    if not expenses:
        if search:
            click.echo(f"No expenses match '{search}'.")
        else:
            click.echo("No expenses yet.")
        return

    click.echo(f"\nFound {len(expenses)} expense(s):")

    if verbose:
        click.echo("=" * 80)
        for expense in expenses:
            click.echo(f"\nExpense ID: {expense.id}")
            click.echo(f"  Description: {expense.description}")
            click.echo(f"  Amount: {expense.amount:,.2f}")
            click.echo(f"  Paid by: {expense.paid_by.display_name}")
            click.echo(f"  Date: {expense.date}")
            click.echo(f"  Split: {split_label(expense)} ({expense.split_type.value})")
            click.echo(f"  Category: {category_icon(expense.category)} {expense.category.value}")
            click.echo(f"  Created: {expense.timestamp.isoformat()}")
            click.echo("-" * 80)
        return

    click.echo("-" * 90)
    click.echo(
        f"{'ID':<10} {'Date':<12} {'Amount':>12}  {'Paid by':<9} {'Split':<7} {'Description':<34}"
    )
    click.echo("-" * 90)
    for expense in expenses:
        amount_str = f"{expense.amount:,.2f}"
        description = f"{category_icon(expense.category)} {expense.description}"[:34]
        click.echo(
            f"{expense.id[:8]:<10} {str(expense.date):<12} {amount_str:>12}  "
            f"{expense.paid_by.display_name:<9} {split_label(expense):<7} {description:<34}"
        )


def register_commands(cli):
    """Register list command with main CLI."""
    cli.add_command(list_expenses)
