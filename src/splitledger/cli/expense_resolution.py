"""CLI helpers for expense resolution."""

from __future__ import annotations

import click

from splitledger.cli.error_handling import handle_domain_error
from splitledger.domain.errors import DomainError
from splitledger.domain.ledger import LedgerService
from splitledger.utils.expense_resolver import resolve_expense_id


def resolve_expense_or_exit(ctx: click.Context, ledger: LedgerService, reference: str) -> str:
    """Resolve an expense id or prefix, or exit with a CLI error."""
    try:
        return resolve_expense_id(ledger, reference)
    except DomainError as exc:
        handle_domain_error(ctx, exc)
