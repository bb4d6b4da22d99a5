"""Input-boundary checks for expense and category records."""

from __future__ import annotations

import logging
import math
from dataclasses import replace
from typing import Any, Iterable, Sequence, Tuple

from core.models import CategoryBudget, ExpenseRecord

__all__ = [
    "MalformedRecordError",
    "coerce_amount",
    "partition_expenses",
    "validate_categories",
    "validate_expenses",
]

logger = logging.getLogger(__name__)


class MalformedRecordError(ValueError):
    """Raised when a record carries an unusable monetary amount."""

    def __init__(self, record_id: Any, reason: str):
        super().__init__(f"Malformed record {record_id!r}: {reason}")
        self.record_id = record_id
        self.reason = reason


def coerce_amount(value: Any, record_id: Any = None) -> float:
    """Return ``value`` as a finite, non-negative float or raise ``MalformedRecordError``."""

    if isinstance(value, bool):
        raise MalformedRecordError(record_id, f"non-numeric amount {value!r}")
    try:
        amount = float(value)
    except (TypeError, ValueError):
        raise MalformedRecordError(record_id, f"non-numeric amount {value!r}") from None

    if not math.isfinite(amount):
        raise MalformedRecordError(record_id, f"non-finite amount {value!r}")
    if amount < 0:
        raise MalformedRecordError(record_id, f"negative amount {value!r}")
    return amount


def partition_expenses(
    expenses: Iterable[ExpenseRecord],
) -> Tuple[list[ExpenseRecord], list[ExpenseRecord]]:
    """Split expenses into ``(valid, rejected)`` preserving input order.

    Valid records come back with their amount normalised to ``float``.
    Rejected records are logged and returned untouched so callers can report
    them.
    """

    valid: list[ExpenseRecord] = []
    rejected: list[ExpenseRecord] = []
    for record in expenses:
        try:
            amount = coerce_amount(record.amount, record.id)
        except MalformedRecordError as exc:
            logger.warning("Skipping expense: %s", exc)
            rejected.append(record)
            continue
        valid.append(replace(record, amount=amount))
    return valid, rejected


def validate_expenses(
    expenses: Iterable[ExpenseRecord],
    *,
    strict: bool = False,
) -> list[ExpenseRecord]:
    """Return the valid expenses; with ``strict`` the first malformed one raises."""

    if strict:
        return [replace(record, amount=coerce_amount(record.amount, record.id)) for record in expenses]
    valid, _ = partition_expenses(expenses)
    return valid


def validate_categories(categories: Sequence[CategoryBudget]) -> list[CategoryBudget]:
    """Normalise category budgets, raising on any malformed ``monthly_budget``.

    Categories are never skipped: the progress list must show every configured
    category exactly once.
    """

    return [
        replace(category, monthly_budget=coerce_amount(category.monthly_budget, category.id))
        for category in categories
    ]
