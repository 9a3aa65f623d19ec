"""Remote spreadsheet-proxy store with local fallback.

The proxy is a small web app in front of a spreadsheet. It answers GET
requests selected by an ``action`` parameter:

- ``action=get``: ``{"success": true, "expenses": [...]}``, newest first
- ``action=add``: append one row built from the remaining query parameters
- ``action=test``: connectivity check

The sheet is append-only, so edits and deletions stay local. The proxy
stores a percentage of 0 as 50 (its default for a blank cell), so a custom
100/0 split comes back as 100/50; ``repair_sheet_percents`` undoes that.
"""

import logging
from decimal import Decimal
from typing import Any, Optional, Sequence

import httpx

from splitledger.domain.entities import Expense
from splitledger.domain.errors import DomainError, StorageError
from splitledger.domain.exchange import expense_from_dict, expense_to_dict
from splitledger.storage.base import LedgerStore

logger = logging.getLogger(__name__)

SHEET_DEFAULT_PERCENT = 50


def repair_sheet_percents(row: dict[str, Any]) -> dict[str, Any]:
    """Undo the proxy's 0-to-50 substitution in a fetched row.

    When the pair does not sum to 100 and one side is the default 50, that
    side is rebuilt from the other. Any other pair is returned unchanged.
    """
    try:
        percent_a = int(row["sharathPercent"])
        percent_b = int(row["thejasPercent"])
    except (KeyError, TypeError, ValueError):
        return row

    if percent_a + percent_b == 100:
        return row
    if percent_b == SHEET_DEFAULT_PERCENT and 0 <= percent_a <= 100:
        percent_b = 100 - percent_a
    elif percent_a == SHEET_DEFAULT_PERCENT and 0 <= percent_b <= 100:
        percent_a = 100 - percent_b
    else:
        return row
    return {**row, "sharathPercent": percent_a, "thejasPercent": percent_b}


class RemoteSheetStore(LedgerStore):
    """Store backed by the spreadsheet proxy."""

    def __init__(
        self,
        url: str,
        timeout: float = 10.0,
        client: Optional[httpx.Client] = None,
    ):
        """Initialize remote store.

        Args:
            url: Proxy web app URL
            timeout: Request timeout in seconds
            client: Optional preconfigured httpx client (used by tests)
        """
        if not url:
            raise ValueError("Remote store requires a proxy URL")
        self.url = url
        self.timeout = timeout
        self._client = client

    def _get_client(self) -> httpx.Client:
        if self._client is None:
            self._client = httpx.Client(timeout=self.timeout, follow_redirects=True)
        return self._client

    def close(self) -> None:
        if self._client is not None:
            self._client.close()
            self._client = None

    def _request(self, params: dict[str, Any]) -> dict[str, Any]:
        """Send one proxy request and return its decoded success payload.

        Raises:
            StorageError: On transport errors, HTTP errors, bad JSON or success=false
        """
        try:
            response = self._get_client().get(self.url, params=params)
            response.raise_for_status()
            payload = response.json(parse_float=Decimal)
        except httpx.HTTPError as e:
            raise StorageError(f"Remote request failed: {e}") from e
        except ValueError as e:
            raise StorageError(f"Remote returned invalid JSON: {e}") from e

        if not isinstance(payload, dict) or not payload.get("success"):
            error = payload.get("error") if isinstance(payload, dict) else None
            raise StorageError(f"Remote reported failure: {error or 'unknown error'}")
        return payload

    def ping(self) -> str:
        """Check connectivity. Returns the proxy's message.

        Raises:
            StorageError: If the proxy is unreachable or reports failure
        """
        payload = self._request({"action": "test"})
        return str(payload.get("message", "Connection successful!"))

    def fetch_rows(self) -> list[dict[str, Any]]:
        """Fetch the raw sheet rows, newest first.

        Raises:
            StorageError: If the request fails or the payload has no row list
        """
        payload = self._request({"action": "get"})
        rows = payload.get("expenses") or []
        if not isinstance(rows, list) or not all(isinstance(row, dict) for row in rows):
            raise StorageError("Remote returned a malformed expense list")
        return rows

    def fetch(self) -> list[Expense]:
        """Fetch all remote expenses.

        Rows that cannot be read as expenses are logged and skipped.

        Raises:
            StorageError: If the request fails
        """
        expenses = []
        for row in self.fetch_rows():
            try:
                expenses.append(expense_from_dict(repair_sheet_percents(row)))
            except DomainError as e:
                logger.warning("Skipping malformed remote expense %s: %s", row.get("id"), e)
        return expenses

    def append(self, expense: Expense) -> None:
        """Append one expense row to the sheet.

        Raises:
            StorageError: If the request fails
        """
        params = {"action": "add", **expense_to_dict(expense)}
        params["amount"] = str(expense.amount)
        self._request(params)

    def load(self) -> list[Expense]:
        try:
            return self.fetch()
        except StorageError as e:
            logger.warning("Could not load ledger from remote: %s", e)
            return []

    def save(self, expenses: Sequence[Expense]) -> bool:
        """Append the expenses the sheet does not have yet.

        Sheet order is append order, so missing rows go oldest first.
        """
        try:
            known = {str(row.get("id")) for row in self.fetch_rows()}
            missing = [expense for expense in reversed(expenses) if expense.id not in known]
            for expense in missing:
                self.append(expense)
        except StorageError as e:
            logger.warning("Could not save ledger to remote: %s", e)
            return False
        if missing:
            logger.info("Appended %d expense(s) to remote", len(missing))
        return True

    def describe(self) -> str:
        return self.url


class FallbackStore(LedgerStore):
    """Remote store mirrored into a local store.

    Loads prefer the remote and refresh the local copy; when the remote is
    unreachable the local copy is used. Saves always go to the local store
    first and report failure if the remote could not be updated.
    """

    def __init__(self, remote: RemoteSheetStore, local: LedgerStore):
        self.remote = remote
        self.local = local
        self.last_load_remote = False

    def load(self) -> list[Expense]:
        try:
            expenses = self.remote.fetch()
        except StorageError as e:
            logger.warning("Remote unavailable, using local copy at %s: %s", self.local.describe(), e)
            self.last_load_remote = False
            return self.local.load()

        self.last_load_remote = True
        if not self.local.save(expenses):
            logger.warning("Could not refresh local copy at %s", self.local.describe())
        return expenses

    def save(self, expenses: Sequence[Expense]) -> bool:
        local_ok = self.local.save(expenses)
        remote_ok = self.remote.save(expenses)
        return local_ok and remote_ok

    def describe(self) -> str:
        return f"{self.remote.describe()} (local copy: {self.local.describe()})"
