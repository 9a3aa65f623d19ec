"""Shared domain error messages and error types."""


class DomainError(ValueError):
    """Base class for domain-level errors.

    Subclasses provide semantic categories while preserving ValueError
    compatibility for existing error handling.
    """


class ValidationError(DomainError):
    """Invalid input or failed validation in domain logic."""


class NotFoundError(DomainError):
    """Requested expense does not exist."""


class StorageError(DomainError):
    """A store could not read or write its backing medium."""


class PersistenceWarning(UserWarning):
    """A ledger change was kept locally but could not be persisted everywhere."""


def expense_not_found(expense_id: str) -> str:
    """Return message for missing expense."""
    return f"Expense '{expense_id}' not found"


def unknown_party(value: object) -> str:
    """Return message for an unrecognized payer."""
    return f"Unknown party '{value}'. Expected one of: sharath, thejas"


def unknown_split_type(value: object) -> str:
    """Return message for an unrecognized split type."""
    return (
        f"Unknown split type '{value}'. "
        "Expected one of: equal, 60-40, 40-60, 70-30, 30-70, custom"
    )


def percentages_must_sum(percent_a: int, percent_b: int) -> str:
    """Return message when custom split percentages do not total 100."""
    return f"Percentages must add up to 100 (got {percent_a} + {percent_b} = {percent_a + percent_b})"
