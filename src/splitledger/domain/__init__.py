"""Domain layer for splitledger application."""

from splitledger.domain.entities import Expense, Party, SplitType, Category
from splitledger.domain.ledger import LedgerService
from splitledger.domain.balance import compute_balances, settlement

__all__ = [
    "Expense",
    "Party",
    "SplitType",
    "Category",
    "LedgerService",
    "compute_balances",
    "settlement",
]
