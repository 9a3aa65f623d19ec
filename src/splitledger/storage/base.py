"""Abstract ledger store interface."""

from abc import ABC, abstractmethod
from typing import Sequence

# Import entities directly to avoid circular import through domain/__init__.py
from splitledger.domain.entities import Expense


class LedgerStore(ABC):
    """Durable home of the ledger snapshot.

    Implementations must not raise out of ``load`` or ``save``: an unreadable
    or unreachable backend loads as an empty ledger and saves as ``False``.
    """

    @abstractmethod
    def load(self) -> list[Expense]:
        """Load the ledger, newest-first. Empty if nothing is stored."""
        pass

    @abstractmethod
    def save(self, expenses: Sequence[Expense]) -> bool:
        """Persist the full ledger. Returns True on success."""
        pass

    def describe(self) -> str:
        """Short human-readable description of where data lives."""
        return type(self).__name__


class MemoryStore(LedgerStore):
    """Store that keeps the last saved snapshot in memory."""

    def __init__(self, expenses: Sequence[Expense] = ()):
        self.expenses: list[Expense] = list(expenses)
        self.save_count = 0

    def load(self) -> list[Expense]:
        return list(self.expenses)

    def save(self, expenses: Sequence[Expense]) -> bool:
        self.expenses = list(expenses)
        self.save_count += 1
        return True

    def describe(self) -> str:
        return "memory"
