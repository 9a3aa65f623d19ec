"""Shared pytest fixtures for splitledger tests."""

import itertools
from datetime import date, datetime, UTC
from decimal import Decimal

import pytest

from splitledger.domain.category import categorize
from splitledger.domain.entities import Expense, Party, SplitType
from splitledger.domain.ledger import LedgerService
from splitledger.storage.base import MemoryStore

FIXED_NOW = datetime(2024, 3, 10, 12, 30, tzinfo=UTC)


@pytest.fixture
def fixed_now():
    """The instant the test ledger clock always returns."""
    return FIXED_NOW


@pytest.fixture
def memory_store():
    """Create an empty in-memory store."""
    return MemoryStore()


@pytest.fixture
def id_factory():
    """Return a callable producing exp-001, exp-002, ..."""
    counter = itertools.count(1)
    return lambda: f"exp-{next(counter):03d}"


@pytest.fixture
def ledger(memory_store, id_factory):
    """Create a LedgerService over an in-memory store with a fixed clock."""
    return LedgerService(memory_store, id_factory=id_factory, clock=lambda: FIXED_NOW)


@pytest.fixture
def make_expense():
    """Build Expense entities directly, bypassing the ledger."""

    def _make(
        expense_id="exp-x",
        description="Groceries",
        amount="100",
        paid_by=Party.A,
        day=date(2024, 3, 5),
        split_type=SplitType.EQUAL,
        percent_a=50,
        percent_b=50,
        timestamp=FIXED_NOW,
    ):
        return Expense(
            id=expense_id,
            description=description,
            amount=Decimal(amount),
            paid_by=paid_by,
            date=day,
            split_type=split_type,
            percent_a=percent_a,
            percent_b=percent_b,
            category=categorize(description),
            timestamp=timestamp,
        )

    return _make


@pytest.fixture
def sample_expenses(make_expense):
    """A small mixed ledger, newest first."""
    return [
        make_expense("exp-4", "Uber to airport", "450", Party.B, date(2024, 3, 8), SplitType.SEVENTY_THIRTY, 30, 70),
        make_expense("exp-3", "Wifi bill", "999", Party.A, date(2024, 3, 2), SplitType.CUSTOM, 80, 20),
        make_expense("exp-2", "Monthly rent", "12000", Party.A, date(2024, 3, 1)),
        make_expense("exp-1", "Groceries", "850.50", Party.B, date(2024, 2, 27), SplitType.SIXTY_FORTY, 40, 60),
    ]


@pytest.fixture
def data_path(tmp_path):
    """Path for a JSON ledger file inside a temporary directory."""
    return tmp_path / "ledger.json"


@pytest.fixture
def cli_runner():
    """Create a Click CLI test runner."""
    from click.testing import CliRunner

    return CliRunner()
