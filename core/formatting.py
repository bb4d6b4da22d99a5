"""Formatting helpers for BudgetPulse summaries."""

from __future__ import annotations

from typing import Sequence, Tuple

from core.models import (
    OTHER_CATEGORY_COLOR,
    OTHER_CATEGORY_NAME,
    BudgetClassification,
    BudgetTier,
    DashboardIndicators,
    DashboardTotals,
    ExpenseRecord,
    IndicatorVariant,
    RecentTransaction,
    StatCard,
)

__all__ = [
    "build_recent_transactions",
    "build_stat_cards",
    "format_currency",
    "progress_value",
    "tier_status_text",
    "tier_variant",
]

_TIER_TEXT = {
    BudgetTier.ON_TRACK: "On track",
    BudgetTier.NEAR_LIMIT: "Near limit",
    BudgetTier.OVER_BUDGET: "Over budget",
    BudgetTier.NO_BUDGET: "No budget set",
}

# Tier -> card styling only; the dashboard indicators are classified separately.
_TIER_VARIANT = {
    BudgetTier.ON_TRACK: IndicatorVariant.SUCCESS,
    BudgetTier.NEAR_LIMIT: IndicatorVariant.WARNING,
    BudgetTier.OVER_BUDGET: IndicatorVariant.DANGER,
    BudgetTier.NO_BUDGET: IndicatorVariant.DEFAULT,
}


def format_currency(value: float, symbol: str = "$") -> str:
    sign = "-" if value < 0 else ""
    return f"{sign}{symbol}{abs(value):,.2f}"


def tier_status_text(tier: BudgetTier) -> str:
    return _TIER_TEXT[tier]


def tier_variant(tier: BudgetTier) -> IndicatorVariant:
    return _TIER_VARIANT[tier]


def progress_value(classification: BudgetClassification) -> float:
    """Return the bar fill percentage; categories without a budget render empty."""

    if classification.display_percentage is None:
        return 0.0
    return float(classification.display_percentage)


def build_stat_cards(
    totals: DashboardTotals,
    indicators: DashboardIndicators,
    symbol: str = "$",
) -> list[StatCard]:
    return [
        {
            "title": "Total Spent",
            "value": format_currency(totals["total_spent"], symbol),
            "description": "This month",
            "variant": indicators["total_spent"],
        },
        {
            "title": "Transactions",
            "value": str(totals["transaction_count"]),
            "description": "This month",
            "variant": IndicatorVariant.DEFAULT,
        },
        {
            "title": "Average per Transaction",
            "value": format_currency(totals["average_transaction"], symbol),
            "description": "This month",
            "variant": IndicatorVariant.DEFAULT,
        },
        {
            "title": "Budget Remaining",
            "value": format_currency(totals["budget_remaining"], symbol),
            "description": f"of {format_currency(totals['total_budget'], symbol)}",
            "variant": indicators["budget_remaining"],
        },
    ]


def build_recent_transactions(
    expenses: Sequence[ExpenseRecord],
    limit: int = 5,
) -> Tuple[list[RecentTransaction], bool]:
    """Return the first ``limit`` expenses as display rows plus a "has more" flag.

    Expenses arrive sorted newest first, so no re-sorting happens here.
    """

    rows: list[RecentTransaction] = []
    for expense in expenses[: max(limit, 0)]:
        category = expense.category
        rows.append(
            {
                "id": str(expense.id),
                "label": expense.description or expense.merchant,
                "category_name": category.name if category is not None and category.name else OTHER_CATEGORY_NAME,
                "color": category.color if category is not None and category.color else OTHER_CATEGORY_COLOR,
                "date": expense.date,
                "amount": float(expense.amount),
            }
        )
    return rows, len(expenses) > len(rows)
