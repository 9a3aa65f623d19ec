"""Utility for resolving expense id prefixes to full ids."""

from splitledger.domain.errors import NotFoundError, ValidationError, expense_not_found
from splitledger.domain.ledger import LedgerService


def resolve_expense_id(ledger: LedgerService, reference: str) -> str:
    """Resolve a full expense id or a unique prefix of one.

    Args:
        ledger: LedgerService instance
        reference: Full id or leading characters of an id

    Returns:
        Full expense id

    Raises:
        NotFoundError: If no expense id starts with reference
        ValidationError: If more than one expense id starts with reference
    """
    reference = reference.strip()
    if not reference:
        raise ValidationError("Expense id is required")

    ids = [expense.id for expense in ledger.all()]
    if reference in ids:
        return reference

    matches = [expense_id for expense_id in ids if expense_id.startswith(reference)]
    if not matches:
        raise NotFoundError(expense_not_found(reference))
    if len(matches) > 1:
        raise ValidationError(
            f"Expense id '{reference}' is ambiguous ({len(matches)} matches); use more characters"
        )
    return matches[0]
