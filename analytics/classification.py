"""Budget health classification.

Two independent policies live here. ``classify_budget`` grades a single
category against its own budget using :class:`BudgetTier`. The dashboard-level
helpers colour the headline stat cards using :class:`IndicatorVariant`; they
use their own thresholds and must not be expressed through the per-category
tiers.
"""

from __future__ import annotations

from core.models import BudgetClassification, BudgetTier, DashboardIndicators, DashboardTotals, IndicatorVariant

__all__ = [
    "DISPLAY_PERCENTAGE_CAP",
    "NEAR_LIMIT_PERCENTAGE",
    "OVER_BUDGET_PERCENTAGE",
    "REMAINING_WARNING_RATIO",
    "classify_budget",
    "classify_budget_remaining",
    "classify_dashboard",
    "classify_total_spent",
]

NEAR_LIMIT_PERCENTAGE = 80.0
OVER_BUDGET_PERCENTAGE = 100.0
DISPLAY_PERCENTAGE_CAP = 150.0
REMAINING_WARNING_RATIO = 0.2


def classify_budget(spent: float, budget: float) -> BudgetClassification:
    """Return the tier and capped display percentage for ``spent`` against ``budget``.

    The cap only bounds the progress bar; the tier is decided on the raw
    percentage.
    """

    if budget == 0:
        return BudgetClassification(BudgetTier.NO_BUDGET, None)

    raw_percentage = (spent / budget) * 100
    if raw_percentage >= OVER_BUDGET_PERCENTAGE:
        return BudgetClassification(
            BudgetTier.OVER_BUDGET, min(raw_percentage, DISPLAY_PERCENTAGE_CAP)
        )
    if raw_percentage >= NEAR_LIMIT_PERCENTAGE:
        return BudgetClassification(BudgetTier.NEAR_LIMIT, raw_percentage)
    return BudgetClassification(BudgetTier.ON_TRACK, raw_percentage)


def classify_total_spent(total_spent: float, total_budget: float) -> IndicatorVariant:
    if total_spent > total_budget:
        return IndicatorVariant.DANGER
    return IndicatorVariant.DEFAULT


def classify_budget_remaining(budget_remaining: float, total_budget: float) -> IndicatorVariant:
    if budget_remaining < 0:
        return IndicatorVariant.DANGER
    if budget_remaining < total_budget * REMAINING_WARNING_RATIO:
        return IndicatorVariant.WARNING
    return IndicatorVariant.SUCCESS


def classify_dashboard(totals: DashboardTotals) -> DashboardIndicators:
    return {
        "total_spent": classify_total_spent(totals["total_spent"], totals["total_budget"]),
        "budget_remaining": classify_budget_remaining(
            totals["budget_remaining"], totals["total_budget"]
        ),
    }
