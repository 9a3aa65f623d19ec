"""Ledger domain service."""

import logging
import uuid
import warnings
from datetime import date, datetime, UTC
from decimal import Decimal, InvalidOperation
from typing import TYPE_CHECKING, Callable, Iterable, Optional

from splitledger.domain.category import categorize
from splitledger.domain.entities import Expense, Party, SplitType
from splitledger.domain.errors import (
    NotFoundError,
    PersistenceWarning,
    ValidationError,
    expense_not_found,
)
from splitledger.domain.splits import (
    coerce_party,
    coerce_split_type,
    resolve_split,
    validate_percentages,
)

if TYPE_CHECKING:
    from splitledger.storage.base import LedgerStore

logger = logging.getLogger(__name__)


def _new_id() -> str:
    return uuid.uuid4().hex


def _utc_now() -> datetime:
    return datetime.now(UTC)


def validate_description(description: Optional[str]) -> str:
    """Return the trimmed description.

    Raises:
        ValidationError: If the description is missing or blank
    """
    if description is None or not str(description).strip():
        raise ValidationError("Description is required")
    return str(description).strip()


def validate_amount(amount: Decimal | int | float | str | None) -> Decimal:
    """Return amount as a positive, finite Decimal.

    Raises:
        ValidationError: If the amount is missing, not numeric, not finite or not positive
    """
    if amount is None or isinstance(amount, bool):
        raise ValidationError("Amount is required")
    try:
        value = amount if isinstance(amount, Decimal) else Decimal(str(amount))
    except InvalidOperation:
        raise ValidationError(f"Amount '{amount}' is not a number") from None
    if not value.is_finite():
        raise ValidationError(f"Amount must be a finite number, got '{amount}'")
    if value <= 0:
        raise ValidationError(f"Amount must be greater than zero, got {value}")
    return value


def validate_expense(expense: Expense) -> Expense:
    """Check the per-record invariants of an already-built expense.

    Raises:
        ValidationError: If any invariant does not hold
    """
    if not expense.id:
        raise ValidationError("Expense id is required")
    validate_description(expense.description)
    validate_amount(expense.amount)
    coerce_party(expense.paid_by)
    coerce_split_type(expense.split_type)
    validate_percentages(expense.percent_a, expense.percent_b)
    if not isinstance(expense.date, date):
        raise ValidationError(f"Expense '{expense.id}' has no date")
    return expense


class LedgerService:
    """Service owning the ordered collection of expenses.

    The newest expense is first. Every mutation validates before touching the
    collection and then asks the store to persist the full snapshot. A failed
    save is reported as a PersistenceWarning; the in-memory ledger stays the
    source of truth.
    """

    def __init__(
        self,
        store: "LedgerStore",
        id_factory: Callable[[], str] = _new_id,
        clock: Callable[[], datetime] = _utc_now,
    ):
        """Initialize ledger service.

        Args:
            store: Store to load from and persist to
            id_factory: Callable returning a fresh expense id
            clock: Callable returning the current instant
        """
        self.store = store
        self.id_factory = id_factory
        self.clock = clock
        self.last_persist_ok = True
        self._expenses: list[Expense] = list(store.load())
        logger.debug("Loaded %d expense(s) from %s", len(self._expenses), store.describe())

    def add(
        self,
        description: str,
        amount: Decimal | int | float | str,
        paid_by: Party | str,
        date: Optional[date] = None,
        split_type: SplitType | str = SplitType.EQUAL,
        custom_split: Optional[tuple[int, int]] = None,
    ) -> Expense:
        """Add an expense to the top of the ledger.

        Args:
            description: Expense description
            amount: Positive amount
            paid_by: Paying party
            date: Effective date; defaults to today
            split_type: How the cost is divided
            custom_split: (percent_a, percent_b), required for custom splits

        Returns:
            The created Expense

        Raises:
            ValidationError: If any field is invalid; the ledger is unchanged
        """
        description = validate_description(description)
        amount = validate_amount(amount)
        paid_by = coerce_party(paid_by)
        split_type = coerce_split_type(split_type)
        percent_a, percent_b = resolve_split(split_type, paid_by, custom_split)

        now = self.clock()
        expense = Expense(
            id=self.id_factory(),
            description=description,
            amount=amount,
            paid_by=paid_by,
            date=date if date is not None else now.date(),
            split_type=split_type,
            percent_a=percent_a,
            percent_b=percent_b,
            category=categorize(description),
            timestamp=now,
        )

        self._expenses.insert(0, expense)
        logger.info("Added expense %s (%s, %s)", expense.id, expense.amount, expense.paid_by.value)
        self._persist()
        return expense

    def get(self, expense_id: str) -> Expense:
        """Get expense by ID.

        Raises:
            NotFoundError: If no expense has this ID
        """
        return self._expenses[self._index_of(expense_id)]

    def edit(
        self,
        expense_id: str,
        description: Optional[str] = None,
        amount: Decimal | int | float | str | None = None,
        paid_by: Party | str | None = None,
    ) -> Expense:
        """Update description, amount or payer of an expense.

        Only supplied fields change. The category follows the description;
        split fields are never touched.

        Raises:
            NotFoundError: If the expense doesn't exist
            ValidationError: If a supplied field is invalid; the expense is unchanged
        """
        index = self._index_of(expense_id)
        current = self._expenses[index]

        changes = {}
        if description is not None:
            changes["description"] = validate_description(description)
            changes["category"] = categorize(changes["description"])
        if amount is not None:
            changes["amount"] = validate_amount(amount)
        if paid_by is not None:
            changes["paid_by"] = coerce_party(paid_by)

        updated = current.with_changes(**changes)
        self._expenses[index] = updated
        logger.info("Edited expense %s (%s)", expense_id, ", ".join(sorted(changes)) or "no changes")
        self._persist()
        return updated

    def delete(self, expense_id: str) -> None:
        """Delete an expense.

        Raises:
            NotFoundError: If the expense doesn't exist
        """
        index = self._index_of(expense_id)
        del self._expenses[index]
        logger.info("Deleted expense %s", expense_id)
        self._persist()

    def all(self) -> tuple[Expense, ...]:
        """Read-only snapshot of the ledger, newest first."""
        return tuple(self._expenses)

    def clear(self) -> None:
        """Remove every expense. Callers confirm before calling this."""
        count = len(self._expenses)
        self._expenses = []
        logger.info("Cleared %d expense(s)", count)
        self._persist()

    def replace_all(self, expenses: Iterable[Expense]) -> int:
        """Replace the ledger with imported expenses.

        Every record is validated before anything changes.

        Returns:
            Number of expenses now in the ledger

        Raises:
            ValidationError: If any record breaks an invariant or ids repeat
        """
        incoming = [validate_expense(expense) for expense in expenses]
        ids = [expense.id for expense in incoming]
        if len(set(ids)) != len(ids):
            raise ValidationError("Imported expenses contain duplicate ids")

        self._expenses = incoming
        logger.info("Replaced ledger with %d expense(s)", len(incoming))
        self._persist()
        return len(incoming)

    def _index_of(self, expense_id: str) -> int:
        for index, expense in enumerate(self._expenses):
            if expense.id == expense_id:
                return index
        raise NotFoundError(expense_not_found(expense_id))

    def _persist(self) -> None:
        self.last_persist_ok = self.store.save(self.all())
        if not self.last_persist_ok:
            message = f"Changes kept locally but could not be saved to {self.store.describe()}"
            logger.warning(message)
            warnings.warn(message, PersistenceWarning, stacklevel=3)
