"""Budget aggregation and classification helpers shared across BudgetPulse services."""

from analytics.aggregation import (
    GroupBy,
    aggregate_category_spend,
    category_key,
    compute_dashboard_totals,
    expenses_to_frame,
    resolve_category,
)
from analytics.classification import (
    classify_budget,
    classify_budget_remaining,
    classify_dashboard,
    classify_total_spent,
)
from analytics.projection import build_chart_slices, build_progress_rows
from analytics.validation import (
    MalformedRecordError,
    coerce_amount,
    partition_expenses,
    validate_categories,
    validate_expenses,
)

__all__ = [
    "GroupBy",
    "aggregate_category_spend",
    "category_key",
    "compute_dashboard_totals",
    "expenses_to_frame",
    "resolve_category",
    "classify_budget",
    "classify_budget_remaining",
    "classify_dashboard",
    "classify_total_spent",
    "build_chart_slices",
    "build_progress_rows",
    "MalformedRecordError",
    "coerce_amount",
    "partition_expenses",
    "validate_categories",
    "validate_expenses",
]
