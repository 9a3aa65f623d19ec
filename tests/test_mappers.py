"""Tests for database mappers."""

from datetime import date, datetime, timezone, timedelta, UTC
from decimal import Decimal

from splitledger.domain.entities import Category, Expense, Party, SplitType
from splitledger.storage.mappers import expense_to_domain, expense_to_row
from splitledger.storage.models import ExpenseRow


class TestExpenseMapper:
    """Tests for Expense mapper."""

    def test_expense_to_domain(self):
        """Test converting ORM ExpenseRow to domain Expense."""
        row = ExpenseRow(
            id="exp-1",
            position=0,
            description="Groceries",
            amount=Decimal("850.50"),
            paid_by="thejas",
            date=date(2024, 2, 27),
            split_type="60-40",
            sharath_percent=40,
            thejas_percent=60,
            category="groceries",
            timestamp=datetime(2024, 2, 27, 9, 0),
        )
        expense = expense_to_domain(row)

        assert isinstance(expense, Expense)
        assert expense.id == "exp-1"
        assert expense.amount == Decimal("850.50")
        assert expense.paid_by is Party.B
        assert expense.split_type is SplitType.SIXTY_FORTY
        assert (expense.percent_a, expense.percent_b) == (40, 60)
        assert expense.category is Category.GROCERIES
        assert expense.timestamp == datetime(2024, 2, 27, 9, 0, tzinfo=UTC)

    def test_expense_to_row(self, make_expense):
        """Test converting domain Expense to ORM ExpenseRow."""
        expense = make_expense("exp-3", "Wifi bill", "999", Party.A, date(2024, 3, 2), SplitType.CUSTOM, 80, 20)
        row = expense_to_row(expense, position=2)

        assert row.id == "exp-3"
        assert row.position == 2
        assert row.paid_by == "sharath"
        assert row.split_type == "custom"
        assert row.sharath_percent == 80
        assert row.thejas_percent == 20
        assert row.category == "wifi"
        assert row.timestamp.tzinfo is None

    def test_timestamp_stored_as_utc(self, make_expense):
        """Test offset timestamps are normalised to naive UTC."""
        ist = timezone(timedelta(hours=5, minutes=30))
        expense = make_expense(timestamp=datetime(2024, 3, 10, 18, 0, tzinfo=ist))

        row = expense_to_row(expense, position=0)

        assert row.timestamp == datetime(2024, 3, 10, 12, 30)

    def test_round_trip(self, sample_expenses):
        """Test domain -> row -> domain keeps the entity."""
        for position, expense in enumerate(sample_expenses):
            assert expense_to_domain(expense_to_row(expense, position)) == expense
