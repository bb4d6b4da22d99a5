"""Shared data model definitions for the BudgetPulse dashboard."""

from __future__ import annotations

from dataclasses import dataclass
from datetime import date
from enum import Enum
from typing import Optional, TypedDict

OTHER_CATEGORY_NAME = "Other"
OTHER_CATEGORY_COLOR = "#6B7280"
OTHER_CATEGORY_KEY = "__other__"


class BudgetTier(str, Enum):
    """Per-category budget health."""

    ON_TRACK = "on-track"
    NEAR_LIMIT = "near-limit"
    OVER_BUDGET = "over-budget"
    NO_BUDGET = "no-budget"


class IndicatorVariant(str, Enum):
    """Whole-dashboard indicator coloring; not interchangeable with ``BudgetTier``."""

    DEFAULT = "default"
    SUCCESS = "success"
    WARNING = "warning"
    DANGER = "danger"


@dataclass(frozen=True)
class CategoryRef:
    name: str
    color: str
    id: Optional[str] = None


@dataclass(frozen=True)
class ExpenseRecord:
    id: str
    amount: float
    date: date
    description: str = ""
    merchant: str = ""
    category: Optional[CategoryRef] = None


@dataclass(frozen=True)
class CategoryBudget:
    id: str
    name: str
    color: str
    monthly_budget: float = 0.0
    icon: str = ""


@dataclass(frozen=True)
class BudgetClassification:
    tier: BudgetTier
    display_percentage: Optional[float]


class CategorySpend(TypedDict):
    name: str
    color: str
    spent_amount: float


class ChartSlice(TypedDict):
    name: str
    value: float
    color: str


class ProgressRow(TypedDict):
    category_id: str
    name: str
    color: str
    spent: float
    budget: float
    tier: BudgetTier
    display_percentage: Optional[float]
    status_text: str
    variant: IndicatorVariant
    progress_value: float


class DashboardTotals(TypedDict):
    total_spent: float
    transaction_count: int
    average_transaction: float
    total_budget: float
    budget_remaining: float


class DashboardIndicators(TypedDict):
    total_spent: IndicatorVariant
    budget_remaining: IndicatorVariant


class StatCard(TypedDict):
    title: str
    value: str
    description: str
    variant: IndicatorVariant


class RecentTransaction(TypedDict):
    id: str
    label: str
    category_name: str
    color: str
    date: date
    amount: float


class DashboardData(TypedDict):
    totals: DashboardTotals
    indicators: DashboardIndicators
    category_spend: dict[str, CategorySpend]
    chart_slices: list[ChartSlice]
    progress_rows: list[ProgressRow]
    recent_transactions: list[RecentTransaction]
    has_more_transactions: bool
    rejected_expenses: list[ExpenseRecord]


__all__ = [
    "OTHER_CATEGORY_COLOR",
    "OTHER_CATEGORY_KEY",
    "OTHER_CATEGORY_NAME",
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
