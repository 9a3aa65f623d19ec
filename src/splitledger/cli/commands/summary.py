"""Balance and statistics commands."""

from datetime import date

import click

from splitledger.domain.balance import compute_balances, month_summary, settlement
from splitledger.domain.entities import Party
from splitledger.utils.date_parser import parse_date


def _net_label(net) -> str:
    if net > 0:
        return f"gets back {net:,.2f}"
    if net < 0:
        return f"owes {-net:,.2f}"
    return "even"


@click.command("balance")
@click.pass_context
def show_balance(ctx):
    """Show what each person paid, their fair share, and who owes whom."""
    ledger = ctx.obj["ledger"]
    summary = compute_balances(ledger.all())

    rows = (
        (Party.A, summary.paid_a, summary.share_a, summary.net_a),
        (Party.B, summary.paid_b, summary.share_b, summary.net_b),
    )

    click.echo("\nBalances")
    click.echo("-" * 64)
    click.echo(f"{'Person':<10} {'Paid':>14} {'Share':>14}  {'Net':<20}")
    click.echo("-" * 64)
    for party, paid, share, net in rows:
        click.echo(
            f"{party.display_name:<10} {paid:>14,.2f} {share:>14,.2f}  {_net_label(net):<20}"
        )
    click.echo("-" * 64)
    click.echo(f"{'Total':<10} {summary.paid_a + summary.paid_b:>14,.2f} {summary.total_expenses:>14,.2f}")
    click.echo()
    click.echo(settlement(summary).message)


@click.command("stats")
@click.option(
    "--month",
    help="Reference date (YYYY-MM-DD or 'today', 'last month'); defaults to today",
)
@click.pass_context
def show_stats(ctx, month: str | None):
    """Show total spend, spend this month and the daily average.

    The daily average divides the month's spend by the reference day of the
    month, i.e. spend per elapsed day.
    """
    ledger = ctx.obj["ledger"]

    month_ref = date.today()
    if month:
        try:
            month_ref = parse_date(month)
        except ValueError as e:
            click.echo(f"Error: Invalid date: {e}", err=True)
            ctx.exit(1)

    stats = month_summary(ledger.all(), month_ref)

    click.echo(f"\nStatistics for {month_ref.strftime('%B %Y')} (through day {month_ref.day})")
    click.echo("-" * 40)
    click.echo(f"{'Total expenses':<20} {stats.total_expenses:>18,.2f}")
    click.echo(f"{'This month':<20} {stats.month_total:>18,.2f}")
    click.echo(f"{'Daily average':<20} {stats.daily_average:>18,.2f}")
    click.echo(f"{'Expenses this month':<20} {stats.month_count:>18}")


def register_commands(cli):
    """Register balance and stats commands with main CLI."""
    cli.add_command(show_balance)
    cli.add_command(show_stats)
