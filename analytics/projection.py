"""Shape aggregated spend into chart and progress rows."""

from __future__ import annotations

from typing import Mapping, Sequence

from analytics.aggregation import GroupBy
from analytics.classification import classify_budget
from core.formatting import progress_value, tier_status_text, tier_variant
from core.models import CategoryBudget, CategorySpend, ChartSlice, ProgressRow

__all__ = ["build_chart_slices", "build_progress_rows", "progress_lookup_key"]


def build_chart_slices(category_spend: Mapping[str, CategorySpend]) -> list[ChartSlice]:
    return [
        {"name": spend["name"], "value": spend["spent_amount"], "color": spend["color"]}
        for spend in category_spend.values()
    ]


def progress_lookup_key(category: CategoryBudget, group_by: GroupBy = "name") -> str:
    if group_by == "id":
        return str(category.id)
    return category.name


def build_progress_rows(
    categories: Sequence[CategoryBudget],
    category_spend: Mapping[str, CategorySpend],
    group_by: GroupBy = "name",
) -> list[ProgressRow]:
    """Return one classified row per configured category, in input order.

    Categories without spend this period report ``spent == 0``.
    """

    rows: list[ProgressRow] = []
    for category in categories:
        bucket = category_spend.get(progress_lookup_key(category, group_by))
        spent = bucket["spent_amount"] if bucket is not None else 0.0
        budget = float(category.monthly_budget)
        classification = classify_budget(spent, budget)
        rows.append(
            {
                "category_id": str(category.id),
                "name": category.name,
                "color": category.color,
                "spent": spent,
                "budget": budget,
                "tier": classification.tier,
                "display_percentage": classification.display_percentage,
                "status_text": tier_status_text(classification.tier),
                "variant": tier_variant(classification.tier),
                "progress_value": progress_value(classification),
            }
        )
    return rows
