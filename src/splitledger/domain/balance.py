"""Balance engine: pure projections over a ledger snapshot.

Nothing in this module mutates its input or reads a clock. Callers pass the
reference date for monthly statistics.
"""

from datetime import date
from decimal import Decimal
from typing import Iterable, Sequence

from splitledger.domain.entities import (
    BalanceSummary,
    Expense,
    MonthSummary,
    Party,
    Settlement,
)

SETTLED_TOLERANCE = Decimal("0.01")

ZERO = Decimal("0")


def compute_balances(expenses: Iterable[Expense]) -> BalanceSummary:
    """Derive per-party totals and net balances.

    Args:
        expenses: Ledger snapshot in any order

    Returns:
        BalanceSummary; all zeros for an empty ledger
    """
    paid_a = paid_b = share_a = share_b = ZERO
    count = 0

    for expense in expenses:
        share_a += expense.share_a()
        share_b += expense.share_b()
        if expense.paid_by is Party.A:
            paid_a += expense.amount
        else:
            paid_b += expense.amount
        count += 1

    return BalanceSummary(
        paid_a=paid_a,
        paid_b=paid_b,
        share_a=share_a,
        share_b=share_b,
        net_a=paid_a - share_a,
        net_b=paid_b - share_b,
        total_expenses=share_a + share_b,
        count=count,
    )


def settlement(summary: BalanceSummary) -> Settlement:
    """Turn a balance summary into a single who-owes-whom statement."""
    if abs(summary.net_a) < SETTLED_TOLERANCE:
        return Settlement(debtor=None, creditor=None)
    if summary.net_a > 0:
        return Settlement(debtor=Party.B, creditor=Party.A, amount=summary.net_a)
    return Settlement(debtor=Party.A, creditor=Party.B, amount=-summary.net_a)


def filter_expenses(expenses: Sequence[Expense], term: str | None) -> Sequence[Expense]:
    """Case-insensitive search over description, payer and category.

    An empty or blank term returns the input unchanged.
    """
    if term is None or not term.strip():
        return expenses

    needle = term.lower()
    return [
        expense
        for expense in expenses
        if needle in expense.description.lower()
        or needle in expense.paid_by.value.lower()
        or needle in expense.category.value.lower()
    ]


def in_month(expense: Expense, month_ref: date) -> bool:
    """Whether the expense date falls in the same calendar month as month_ref."""
    return expense.date.year == month_ref.year and expense.date.month == month_ref.month


def month_total(expenses: Iterable[Expense], month_ref: date) -> Decimal:
    """Sum of amounts dated in the month containing month_ref."""
    return sum((e.amount for e in expenses if in_month(e, month_ref)), ZERO)


def daily_average(expenses: Iterable[Expense], month_ref: date) -> Decimal:
    """Month-to-date spend per elapsed day.

    Divides by month_ref's day of month, not by the length of the month.
    """
    return month_total(expenses, month_ref) / month_ref.day


def month_summary(expenses: Sequence[Expense], month_ref: date) -> MonthSummary:
    """Bundle the overall total with month-to-date statistics."""
    total = month_total(expenses, month_ref)
    return MonthSummary(
        month_ref=month_ref,
        total_expenses=compute_balances(expenses).total_expenses,
        month_total=total,
        daily_average=total / month_ref.day,
        month_count=sum(1 for e in expenses if in_month(e, month_ref)),
    )


def split_label(expense: Expense) -> str:
    """Short label for an expense's split, e.g. "50/50" or "70/30"."""
    return f"{expense.percent_a}/{expense.percent_b}"
