"""Add expense command."""

import click

from splitledger.cli.error_handling import handle_domain_error, report_persistence
from splitledger.domain.balance import compute_balances, settlement, split_label
from splitledger.domain.category import category_icon
from splitledger.domain.entities import SplitType
from splitledger.domain.errors import DomainError
from splitledger.utils.amount_parser import parse_amount
from splitledger.utils.date_parser import parse_date
from splitledger.utils.party_parser import parse_party


def resolve_custom_split(percent_a: int | None, percent_b: int | None) -> tuple[int, int] | None:
    """Fill in the missing half of a custom split, as the entry form does."""
    if percent_a is None and percent_b is None:
        return None
    if percent_b is None:
        return percent_a, 100 - percent_a
    if percent_a is None:
        return 100 - percent_b, percent_b
    return percent_a, percent_b


@click.command("add")
@click.argument("description")
@click.argument("amount")
@click.option("--paid-by", "-p", required=True, help="Who paid: sharath (a) or thejas (b)")
@click.option(
    "--date",
    help="Expense date (YYYY-MM-DD or relative like 'today', 'yesterday', 'last friday'); defaults to today",
)
@click.option(
    "--split",
    "split_type",
    type=click.Choice([s.value for s in SplitType]),
    default=SplitType.EQUAL.value,
    show_default=True,
    help="Split preset; the first number is the payer's share",
)
@click.option("--percent-a", type=int, help="Sharath's percentage for a custom split")
@click.option("--percent-b", type=int, help="Thejas's percentage for a custom split")
@click.pass_context
def add_expense(
    ctx,
    description: str,
    amount: str,
    paid_by: str,
    date: str | None,
    split_type: str,
    percent_a: int | None,
    percent_b: int | None,
):
    """Add an expense.

    Examples:
        splitledger add "Monthly rent" 12000 --paid-by sharath
        splitledger add "Groceries" 850 --paid-by b --split 60-40
        splitledger add "Internet" 999 -p a --split custom --percent-a 70 --percent-b 30
    """
    ledger = ctx.obj["ledger"]

    try:
        payer = parse_party(paid_by)
    except ValueError as e:
        click.echo(f"Error: {e}", err=True)
        ctx.exit(1)

    try:
        expense_amount = parse_amount(amount)
    except ValueError as e:
        click.echo(f"Error: Invalid amount format: {e}", err=True)
        ctx.exit(1)

    expense_date = None
    if date:
        try:
            expense_date = parse_date(date)
        except ValueError as e:
            click.echo(f"Error: Invalid date format: {e}", err=True)
            ctx.exit(1)

    custom_split = None
    if split_type == SplitType.CUSTOM.value:
        custom_split = resolve_custom_split(percent_a, percent_b)
    elif percent_a is not None or percent_b is not None:
        click.echo("Error: --percent-a/--percent-b can only be used with --split custom", err=True)
        ctx.exit(1)

    try:
        expense = ledger.add(
            description=description,
            amount=expense_amount,
            paid_by=payer,
            date=expense_date,
            split_type=split_type,
            custom_split=custom_split,
        )
    except DomainError as e:
        handle_domain_error(ctx, e)

    click.echo(f"Added expense {expense.id}")
    click.echo(f"  {category_icon(expense.category)} {expense.description}")
    click.echo(f"  Amount: {expense.amount:,.2f}")
    click.echo(f"  Paid by: {expense.paid_by.display_name}")
    click.echo(f"  Date: {expense.date}")
    click.echo(f"  Split: {split_label(expense)} ({expense.split_type.value})")
    click.echo(f"  Category: {expense.category.value}")
    click.echo(settlement(compute_balances(ledger.all())).message)
    report_persistence(ledger)


def register_commands(cli):
    """Register add command with main CLI."""
    cli.add_command(add_expense)
