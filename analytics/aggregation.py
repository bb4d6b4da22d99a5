"""Category grouping and whole-dashboard totals."""

from __future__ import annotations

import logging
from typing import Literal, Mapping, Optional, Sequence

import pandas as pd

from core.models import (
    OTHER_CATEGORY_COLOR,
    OTHER_CATEGORY_KEY,
    OTHER_CATEGORY_NAME,
    CategoryBudget,
    CategorySpend,
    DashboardTotals,
    ExpenseRecord,
)

__all__ = [
    "GroupBy",
    "EXPENSE_COLUMNS",
    "aggregate_category_spend",
    "category_key",
    "compute_dashboard_totals",
    "expenses_to_frame",
    "resolve_category",
]

logger = logging.getLogger(__name__)

GroupBy = Literal["name", "id"]

EXPENSE_COLUMNS = (
    "expense_id",
    "date",
    "amount",
    "category_key",
    "category_name",
    "category_color",
)


def resolve_category(expense: ExpenseRecord) -> tuple[str, str]:
    """Return ``(name, color)`` for an expense, falling back to "Other"."""

    category = expense.category
    if category is None or not category.name:
        return OTHER_CATEGORY_NAME, OTHER_CATEGORY_COLOR
    return category.name, category.color or OTHER_CATEGORY_COLOR


def category_key(expense: ExpenseRecord, group_by: GroupBy = "name") -> str:
    """Return the bucket key used to group ``expense``.

    Name grouping matches categories by exact label, so two categories sharing
    a name share a bucket. Id grouping keeps them apart; uncategorised spend
    and refs without an id land in a dedicated "Other" bucket.
    """

    name, _ = resolve_category(expense)
    if group_by == "name":
        return name
    if group_by != "id":
        raise ValueError(f"Unsupported group_by: {group_by!r}")

    category = expense.category
    if category is None or not category.name or category.id is None:
        return OTHER_CATEGORY_KEY
    return str(category.id)


def expenses_to_frame(expenses: Sequence[ExpenseRecord], group_by: GroupBy = "name") -> pd.DataFrame:
    records: list[dict[str, object]] = []
    for expense in expenses:
        key = category_key(expense, group_by)
        if key == OTHER_CATEGORY_KEY:
            name, color = OTHER_CATEGORY_NAME, OTHER_CATEGORY_COLOR
        else:
            name, color = resolve_category(expense)
        records.append(
            {
                "expense_id": expense.id,
                "date": expense.date,
                "amount": float(expense.amount),
                "category_key": key,
                "category_name": name,
                "category_color": color,
            }
        )

    frame = pd.DataFrame.from_records(records, columns=list(EXPENSE_COLUMNS))
    frame["amount"] = frame["amount"].astype(float)
    return frame


def aggregate_category_spend(
    expenses: Sequence[ExpenseRecord],
    group_by: GroupBy = "name",
) -> dict[str, CategorySpend]:
    """Sum spend per category bucket in order of first appearance.

    Each bucket keeps the color of the first expense seen for it.
    """

    frame = expenses_to_frame(expenses, group_by)
    if frame.empty:
        return {}

    grouped = frame.groupby("category_key", sort=False).agg(
        name=("category_name", "first"),
        color=("category_color", "first"),
        spent_amount=("amount", "sum"),
    )

    category_spend: dict[str, CategorySpend] = {}
    for key, row in grouped.iterrows():
        category_spend[str(key)] = {
            "name": str(row["name"]),
            "color": str(row["color"]),
            "spent_amount": float(row["spent_amount"]),
        }

    logger.debug("Aggregated %d expenses into %d buckets", len(frame), len(category_spend))
    return category_spend


def compute_dashboard_totals(
    expenses: Sequence[ExpenseRecord],
    categories: Sequence[CategoryBudget],
    category_spend: Optional[Mapping[str, CategorySpend]] = None,
    group_by: GroupBy = "name",
) -> DashboardTotals:
    """Return the whole-dashboard totals.

    ``total_spent`` is summed from the category buckets so it always equals the
    sum of the per-category spend exactly. Pass ``category_spend`` to reuse an
    aggregation already computed with the same ``group_by``.
    """

    if category_spend is None:
        category_spend = aggregate_category_spend(expenses, group_by)
    total_spent = float(sum(bucket["spent_amount"] for bucket in category_spend.values()))
    transaction_count = len(expenses)
    average_transaction = total_spent / transaction_count if transaction_count > 0 else 0.0
    total_budget = float(sum(float(category.monthly_budget) for category in categories))

    return {
        "total_spent": total_spent,
        "transaction_count": transaction_count,
        "average_transaction": average_transaction,
        "total_budget": total_budget,
        "budget_remaining": total_budget - total_spent,
    }
