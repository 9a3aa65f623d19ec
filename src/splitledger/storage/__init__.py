"""Storage layer for splitledger application."""

from splitledger.storage.base import LedgerStore, MemoryStore
from splitledger.storage.factories import create_store

__all__ = ["LedgerStore", "MemoryStore", "create_store"]
