"""Core logic for assembling BudgetPulse dashboard summaries."""

from __future__ import annotations

import logging
from typing import Sequence

from analytics.aggregation import GroupBy, aggregate_category_spend, compute_dashboard_totals
from analytics.classification import classify_dashboard
from analytics.projection import build_chart_slices, build_progress_rows
from analytics.validation import partition_expenses, validate_categories, validate_expenses
from core.formatting import build_recent_transactions
from core.models import CategoryBudget, DashboardData, ExpenseRecord

__all__ = ["prepare_dashboard_data"]

logger = logging.getLogger(__name__)


def prepare_dashboard_data(
    expenses: Sequence[ExpenseRecord],
    categories: Sequence[CategoryBudget],
    *,
    group_by: GroupBy = "name",
    recent_limit: int = 5,
    strict: bool = False,
) -> DashboardData:
    """Recompute every dashboard aggregate from a fresh snapshot.

    ``expenses`` must already be scoped to the reporting period and sorted
    newest first. Nothing is cached between calls.
    """

    if strict:
        valid_expenses = validate_expenses(expenses, strict=True)
        rejected: list[ExpenseRecord] = []
    else:
        valid_expenses, rejected = partition_expenses(expenses)
    budgets = validate_categories(categories)

    category_spend = aggregate_category_spend(valid_expenses, group_by)
    totals = compute_dashboard_totals(valid_expenses, budgets, category_spend, group_by)
    indicators = classify_dashboard(totals)
    chart_slices = build_chart_slices(category_spend)
    progress_rows = build_progress_rows(budgets, category_spend, group_by)
    recent_transactions, has_more = build_recent_transactions(valid_expenses, recent_limit)

    if rejected:
        logger.warning("Excluded %d malformed expense(s) from the dashboard", len(rejected))
    logger.debug(
        "Prepared dashboard: %d expenses, %d categories, %d chart slices",
        totals["transaction_count"],
        len(progress_rows),
        len(chart_slices),
    )

    return {
        "totals": totals,
        "indicators": indicators,
        "category_spend": category_spend,
        "chart_slices": chart_slices,
        "progress_rows": progress_rows,
        "recent_transactions": recent_transactions,
        "has_more_transactions": has_more,
        "rejected_expenses": rejected,
    }
