"""Local JSON file store."""

import logging
import os
import tempfile
from pathlib import Path
from typing import Sequence

from splitledger.domain.entities import Expense
from splitledger.domain.errors import DomainError
from splitledger.domain.exchange import dump_expenses, load_expenses
from splitledger.storage.base import LedgerStore

logger = logging.getLogger(__name__)


class JsonFileStore(LedgerStore):
    """Store the ledger as a JSON array in a single file."""

    def __init__(self, path: str | Path):
        """Initialize JSON file store.

        Args:
            path: Path to the ledger file; parent directories are created on save
        """
        self.path = Path(path)

    def load(self) -> list[Expense]:
        """Load the ledger, or an empty list if the file is missing or unreadable."""
        if not self.path.exists():
            return []
        try:
            return load_expenses(self.path.read_text(encoding="utf-8"))
        except (OSError, DomainError) as e:
            logger.warning("Could not read ledger from %s: %s", self.path, e)
            return []

    def save(self, expenses: Sequence[Expense]) -> bool:
        """Write the ledger atomically (temp file, then rename)."""
        try:
            self.path.parent.mkdir(parents=True, exist_ok=True)
            fd, tmp_path = tempfile.mkstemp(dir=self.path.parent, suffix=".tmp")
            try:
                with os.fdopen(fd, "w", encoding="utf-8") as f:
                    f.write(dump_expenses(expenses))
                os.replace(tmp_path, self.path)
            finally:
                if os.path.exists(tmp_path):
                    os.unlink(tmp_path)
        except OSError as e:
            logger.warning("Could not write ledger to %s: %s", self.path, e)
            return False
        return True

    def describe(self) -> str:
        return str(self.path)
