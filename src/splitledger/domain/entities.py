"""Domain model entities for splitledger.

These are pure data classes representing the ledger, independent of how a
store persists them. Stores and the exchange layer convert to and from these.
"""

from dataclasses import dataclass, field, replace
from datetime import date, datetime
from decimal import Decimal
from enum import Enum


class Party(str, Enum):
    """One of the two fixed participants in the ledger."""

    A = "sharath"
    B = "thejas"

    @property
    def display_name(self) -> str:
        return self.value.capitalize()

    @property
    def other(self) -> "Party":
        return Party.B if self is Party.A else Party.A


class SplitType(str, Enum):
    """How the cost of one expense is divided between the parties."""

    EQUAL = "equal"
    SIXTY_FORTY = "60-40"
    FORTY_SIXTY = "40-60"
    SEVENTY_THIRTY = "70-30"
    THIRTY_SEVENTY = "30-70"
    CUSTOM = "custom"


class Category(str, Enum):
    """Expense category inferred from the description."""

    RENT = "rent"
    ELECTRICITY = "electricity"
    WIFI = "wifi"
    WATER = "water"
    COOK = "cook"
    GROCERIES = "groceries"
    TRANSPORT = "transport"
    MEDICAL = "medical"
    OTHER = "other"


@dataclass(frozen=True)
class Expense:
    """A single shared expense.

    ``percent_a`` and ``percent_b`` are the shares of party A and party B and
    always sum to 100.
    """

    id: str
    description: str
    amount: Decimal
    paid_by: Party
    date: date
    split_type: SplitType
    percent_a: int
    percent_b: int
    category: Category
    timestamp: datetime

    def share_a(self) -> Decimal:
        """Party A's fair portion of this expense."""
        return self.amount * self.percent_a / 100

    def share_b(self) -> Decimal:
        """Party B's fair portion of this expense."""
        return self.amount * self.percent_b / 100

    def with_changes(self, **changes) -> "Expense":
        return replace(self, **changes)


@dataclass(frozen=True)
class BalanceSummary:
    """Per-party totals and net balances derived from a ledger snapshot."""

    paid_a: Decimal = Decimal("0")
    paid_b: Decimal = Decimal("0")
    share_a: Decimal = Decimal("0")
    share_b: Decimal = Decimal("0")
    net_a: Decimal = Decimal("0")
    net_b: Decimal = Decimal("0")
    total_expenses: Decimal = Decimal("0")
    count: int = 0


@dataclass(frozen=True)
class Settlement:
    """Which party owes the other, and how much."""

    debtor: Party | None
    creditor: Party | None
    amount: Decimal = field(default=Decimal("0"))

    @property
    def is_settled(self) -> bool:
        return self.debtor is None

    @property
    def message(self) -> str:
        if self.is_settled:
            return "All settled up!"
        return f"{self.debtor.display_name} owes {self.creditor.display_name} {self.amount:.2f}"


@dataclass(frozen=True)
class MonthSummary:
    """Spending statistics for the month containing a reference date."""

    month_ref: date
    total_expenses: Decimal
    month_total: Decimal
    daily_average: Decimal
    month_count: int
