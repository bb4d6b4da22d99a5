"""Core domain package for the BudgetPulse application."""

from .models import (
    BudgetClassification,
    BudgetTier,
    CategoryBudget,
    CategoryRef,
    CategorySpend,
    ChartSlice,
    DashboardData,
    DashboardIndicators,
    DashboardTotals,
    ExpenseRecord,
    IndicatorVariant,
    ProgressRow,
    RecentTransaction,
    StatCard,
)

__all__ = [
    "BudgetClassification",
    "BudgetTier",
    "CategoryBudget",
    "CategoryRef",
    "CategorySpend",
    "ChartSlice",
    "DashboardData",
    "DashboardIndicators",
    "DashboardTotals",
    "ExpenseRecord",
    "IndicatorVariant",
    "ProgressRow",
    "RecentTransaction",
    "StatCard",
]
