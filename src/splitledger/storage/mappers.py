"""Mapper functions to convert between domain models and SQLAlchemy models.

This layer isolates the conversion logic, so the table layout can change
without touching the domain entities.
"""

from datetime import UTC

from splitledger.domain.entities import Category, Expense, Party, SplitType
from splitledger.storage.models import ExpenseRow


def expense_to_domain(row: ExpenseRow) -> Expense:
    """Convert SQLAlchemy ExpenseRow model to domain Expense entity."""
    timestamp = row.timestamp
    if timestamp.tzinfo is None:
        # SQLite drops the offset; rows are always written in UTC
        timestamp = timestamp.replace(tzinfo=UTC)
    return Expense(
        id=row.id,
        description=row.description,
        amount=row.amount,
        paid_by=Party(row.paid_by),
        date=row.date,
        split_type=SplitType(row.split_type),
        percent_a=row.sharath_percent,
        percent_b=row.thejas_percent,
        category=Category(row.category),
        timestamp=timestamp,
    )


def expense_to_row(expense: Expense, position: int) -> ExpenseRow:
    """Convert domain Expense entity to a new SQLAlchemy ExpenseRow."""
    timestamp = expense.timestamp
    if timestamp.tzinfo is not None:
        timestamp = timestamp.astimezone(UTC).replace(tzinfo=None)
    return ExpenseRow(
        id=expense.id,
        position=position,
        description=expense.description,
        amount=expense.amount,
        paid_by=expense.paid_by.value,
        date=expense.date,
        split_type=expense.split_type.value,
        sharath_percent=expense.percent_a,
        thejas_percent=expense.percent_b,
        category=expense.category.value,
        timestamp=timestamp,
    )
