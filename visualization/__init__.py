"""Visualization utilities for BudgetPulse dashboards."""

from .charts import build_budget_chart, build_category_chart
from .theme import ThemeTokens, theme_tokens

__all__ = [
    "build_budget_chart",
    "build_category_chart",
    "ThemeTokens",
    "theme_tokens",
]
