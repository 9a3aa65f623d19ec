"""Serialization of ledger snapshots: stored records, export bundles and CSV.

Field names on the wire are the ones the ledger has always used
(``paidBy``, ``splitType``, ``sharathPercent``, ...), so files written by
older copies of the ledger import unchanged.
"""

import csv
import json
from datetime import date, datetime, time, UTC
from decimal import Decimal, InvalidOperation
from typing import Any, Iterable, Sequence, TextIO

from dateutil.parser import isoparse

from splitledger.domain.balance import compute_balances
from splitledger.domain.category import categorize
from splitledger.domain.entities import BalanceSummary, Category, Expense, SplitType
from splitledger.domain.errors import ValidationError
from splitledger.domain.splits import coerce_party, coerce_split_type, validate_percentages

CSV_COLUMNS = (
    "ID",
    "Description",
    "Amount",
    "Paid By",
    "Date",
    "Split Type",
    "Sharath %",
    "Thejas %",
    "Category",
    "Timestamp",
)


def amount_to_json(amount: Decimal) -> float | str:
    """Return amount as a JSON number when a float holds it exactly, else as a string.

    Readers accept both forms, so no digits are lost either way.
    """
    as_float = float(amount)
    if Decimal(repr(as_float)) == amount:
        return as_float
    return str(amount)


def expense_to_dict(expense: Expense) -> dict[str, Any]:
    """Convert an Expense to its stored/exported dict form."""
    return {
        "id": expense.id,
        "description": expense.description,
        "amount": amount_to_json(expense.amount),
        "paidBy": expense.paid_by.value,
        "date": expense.date.isoformat(),
        "splitType": expense.split_type.value,
        "sharathPercent": expense.percent_a,
        "thejasPercent": expense.percent_b,
        "category": expense.category.value,
        "timestamp": expense.timestamp.isoformat(),
    }


def _parse_amount(value: Any) -> Decimal:
    try:
        return Decimal(str(value))
    except InvalidOperation:
        raise ValidationError(f"Invalid amount '{value}'") from None


def _parse_day(value: Any) -> date:
    if isinstance(value, date):
        return value
    try:
        return isoparse(str(value)).date()
    except (ValueError, OverflowError):
        raise ValidationError(f"Invalid date '{value}'") from None


def _parse_timestamp(value: Any, fallback_day: date) -> datetime:
    if not value:
        return datetime.combine(fallback_day, time(), UTC)
    try:
        return isoparse(str(value))
    except (ValueError, OverflowError):
        raise ValidationError(f"Invalid timestamp '{value}'") from None


def _parse_percent(value: Any) -> int:
    if isinstance(value, int) and not isinstance(value, bool):
        return value
    try:
        number = float(value)
    except (TypeError, ValueError):
        raise ValidationError(f"Invalid percentage '{value}'") from None
    if not number.is_integer():
        raise ValidationError(f"Percentage must be a whole number, got '{value}'")
    return int(number)


def _parse_category(value: Any, description: str) -> Category:
    try:
        return Category(value)
    except ValueError:
        return categorize(description)


def expense_from_dict(data: dict[str, Any]) -> Expense:
    """Build an Expense from its stored/exported dict form.

    Missing split fields default to an equal split and a missing category is
    inferred from the description.

    Raises:
        ValidationError: If a required field is missing or malformed
    """
    missing = [key for key in ("id", "description", "amount", "paidBy", "date") if data.get(key) in (None, "")]
    if missing:
        raise ValidationError(f"Expense record is missing: {', '.join(missing)}")

    description = str(data["description"])
    day = _parse_day(data["date"])
    percent_a, percent_b = validate_percentages(
        _parse_percent(data.get("sharathPercent", 50)),
        _parse_percent(data.get("thejasPercent", 50)),
    )
    return Expense(
        id=str(data["id"]),
        description=description,
        amount=_parse_amount(data["amount"]),
        paid_by=coerce_party(data["paidBy"]),
        date=day,
        split_type=coerce_split_type(data.get("splitType") or SplitType.EQUAL),
        percent_a=percent_a,
        percent_b=percent_b,
        category=_parse_category(data.get("category"), description),
        timestamp=_parse_timestamp(data.get("timestamp"), day),
    )


def balances_to_dict(summary: BalanceSummary) -> dict[str, float]:
    """Convert a BalanceSummary to the exported balances object."""
    return {
        "sharath": float(summary.net_a),
        "thejas": float(summary.net_b),
        "sharathPaid": float(summary.paid_a),
        "thejasPaid": float(summary.paid_b),
        "totalExpenses": float(summary.total_expenses),
        "sharathTotal": float(summary.share_a),
        "thejasTotal": float(summary.share_b),
    }


def dump_expenses(expenses: Iterable[Expense]) -> str:
    """Serialize a ledger snapshot as a JSON array."""
    return json.dumps([expense_to_dict(e) for e in expenses], indent=2, ensure_ascii=False)


def load_expenses(text: str) -> list[Expense]:
    """Parse a JSON array written by dump_expenses.

    Raises:
        ValidationError: If the text is not a JSON array of valid expenses
    """
    try:
        data = json.loads(text, parse_float=Decimal)
    except json.JSONDecodeError as e:
        raise ValidationError(f"Ledger file is not valid JSON: {e}") from e
    if not isinstance(data, list):
        raise ValidationError("Ledger file must contain a list of expenses")
    return [expense_from_dict(item) for item in data]


def export_bundle(expenses: Sequence[Expense], export_date: datetime) -> dict[str, Any]:
    """Build the export document: expenses, export instant and balances."""
    return {
        "expenses": [expense_to_dict(e) for e in expenses],
        "exportDate": export_date.isoformat(),
        "balances": balances_to_dict(compute_balances(expenses)),
    }


def dump_bundle(expenses: Sequence[Expense], export_date: datetime) -> str:
    """Serialize the export document as pretty-printed JSON."""
    return json.dumps(export_bundle(expenses, export_date), indent=2, ensure_ascii=False)


def import_bundle(data: dict[str, Any] | list[Any]) -> list[Expense]:
    """Read expenses from an export document or a bare expense list.

    Balances in the document are ignored; they are always recomputed.

    Raises:
        ValidationError: If the document has no expenses list or a record is invalid
    """
    if isinstance(data, dict):
        data = data.get("expenses")
    if not isinstance(data, list):
        raise ValidationError("Import document has no 'expenses' list")
    return [expense_from_dict(item) for item in data]


def load_bundle(text: str) -> list[Expense]:
    """Parse an export document (or bare list) from JSON text."""
    try:
        data = json.loads(text, parse_float=Decimal)
    except json.JSONDecodeError as e:
        raise ValidationError(f"Import file is not valid JSON: {e}") from e
    return import_bundle(data)


def write_csv(expenses: Iterable[Expense], stream: TextIO) -> int:
    """Write expenses as rows in the shared sheet layout.

    Returns:
        Number of rows written (excluding the header)
    """
    writer = csv.writer(stream)
    writer.writerow(CSV_COLUMNS)
    count = 0
    for expense in expenses:
        record = expense_to_dict(expense)
        writer.writerow(
            [
                record["id"],
                record["description"],
                f"{expense.amount}",
                record["paidBy"],
                record["date"],
                record["splitType"],
                record["sharathPercent"],
                record["thejasPercent"],
                record["category"],
                record["timestamp"],
            ]
        )
        count += 1
    return count


def sheet_row_to_dict(row: Sequence[Any]) -> dict[str, Any]:
    """Map a positional sheet row to the expense dict form.

    Blank cells take the sheet's defaults: equal split, 50/50, category other.
    """
    cells = list(row) + [""] * (len(CSV_COLUMNS) - len(row))
    return {
        "id": cells[0],
        "description": cells[1],
        "amount": cells[2],
        "paidBy": cells[3],
        "date": cells[4],
        "splitType": cells[5] or SplitType.EQUAL.value,
        "sharathPercent": cells[6] if cells[6] not in ("", None) else 50,
        "thejasPercent": cells[7] if cells[7] not in ("", None) else 50,
        "category": cells[8] or Category.OTHER.value,
        "timestamp": cells[9],
    }


def read_csv(stream: TextIO) -> list[Expense]:
    """Read expenses from CSV in the shared sheet layout.

    A leading header row is skipped, as are rows with an empty ID.

    Raises:
        ValidationError: If a row cannot be turned into a valid expense
    """
    expenses = []
    for line_number, row in enumerate(csv.reader(stream), start=1):
        if not row or not row[0].strip():
            continue
        if line_number == 1 and row[0] == CSV_COLUMNS[0]:
            continue
        try:
            expenses.append(expense_from_dict(sheet_row_to_dict(row)))
        except ValidationError as e:
            raise ValidationError(f"Row {line_number}: {e}") from e
    return expenses
