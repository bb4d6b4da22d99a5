"""Data loading utilities for BudgetPulse's dashboard pipeline.

The CSV files stand in for the remote expense store: every load returns a
snapshot already scoped to the current reporting period, or raises
``DataLoadError``.
"""

from __future__ import annotations

import logging
from datetime import date
from pathlib import Path
from typing import Any, Mapping, Optional, Tuple

import pandas as pd

from config.settings import Settings
from core.models import CategoryBudget, CategoryRef, ExpenseRecord

__all__ = [
    "CATEGORY_COLUMNS",
    "DataLoadError",
    "EXPENSE_CSV_COLUMNS",
    "load_categories",
    "load_expenses",
    "load_snapshot",
    "reporting_period",
]

logger = logging.getLogger(__name__)

EXPENSE_CSV_COLUMNS: Tuple[str, ...] = (
    "id",
    "amount",
    "description",
    "merchant",
    "expense_date",
    "category_id",
    "category_name",
    "category_color",
)

CATEGORY_COLUMNS: Tuple[str, ...] = ("id", "name", "color", "monthly_budget", "icon")

_TEXT_DTYPES = {
    "id": str,
    "description": str,
    "merchant": str,
    "category_id": str,
    "category_name": str,
    "category_color": str,
    "name": str,
    "color": str,
    "icon": str,
}


class DataLoadError(RuntimeError):
    """Raised when expense or category data cannot be loaded."""


def reporting_period(today: Optional[date] = None) -> Tuple[date, date]:
    """Return the inclusive ``(first_of_month, today)`` window."""

    today = today or date.today()
    return today.replace(day=1), today


def _read_csv(path: Path, columns: Tuple[str, ...]) -> pd.DataFrame:
    if not path.exists():
        raise DataLoadError(f"CSV file not found: {path}")

    try:
        df = pd.read_csv(path, dtype={k: v for k, v in _TEXT_DTYPES.items() if k in columns})
    except (OSError, ValueError, pd.errors.ParserError) as exc:
        raise DataLoadError(f"Could not read {path}: {exc}") from exc

    missing = [column for column in columns if column not in df.columns]
    if missing:
        raise DataLoadError(f"{path} is missing columns: {', '.join(missing)}")
    return df


def _text(value: Any) -> str:
    if value is None or pd.isna(value):
        return ""
    return str(value)


def _category_ref(row: Mapping[str, Any]) -> Optional[CategoryRef]:
    name = _text(row["category_name"])
    if not name:
        return None
    category_id = _text(row["category_id"]) or None
    return CategoryRef(name=name, color=_text(row["category_color"]), id=category_id)


def load_expenses(csv_path: str | Path, today: Optional[date] = None) -> list[ExpenseRecord]:
    """Return expenses from the current reporting period, newest first."""

    path = Path(csv_path)
    df = _read_csv(path, EXPENSE_CSV_COLUMNS)

    df["expense_date"] = pd.to_datetime(df["expense_date"], errors="coerce").dt.normalize()
    df = df.dropna(subset=["expense_date"])
    # Non-numeric amounts become NaN and are rejected by the validation step.
    df["amount"] = pd.to_numeric(df["amount"], errors="coerce")

    start, end = reporting_period(today)
    mask = (df["expense_date"] >= pd.Timestamp(start)) & (df["expense_date"] <= pd.Timestamp(end))
    df = df.loc[mask].sort_values("expense_date", ascending=False, kind="stable")

    expenses = [
        ExpenseRecord(
            id=_text(row["id"]),
            amount=float(row["amount"]),
            date=row["expense_date"].date(),
            description=_text(row["description"]),
            merchant=_text(row["merchant"]),
            category=_category_ref(row),
        )
        for row in df.to_dict(orient="records")
    ]
    logger.info("Loaded %d expenses for %s..%s from %s", len(expenses), start, end, path)
    return expenses


def load_categories(csv_path: str | Path) -> list[CategoryBudget]:
    """Return every configured category ordered by name."""

    path = Path(csv_path)
    df = _read_csv(path, CATEGORY_COLUMNS)
    df["monthly_budget"] = pd.to_numeric(df["monthly_budget"], errors="coerce").fillna(0.0)
    df = df.sort_values("name", kind="stable")

    categories = [
        CategoryBudget(
            id=_text(row["id"]),
            name=_text(row["name"]),
            color=_text(row["color"]),
            monthly_budget=float(row["monthly_budget"]),
            icon=_text(row["icon"]),
        )
        for row in df.to_dict(orient="records")
    ]
    logger.info("Loaded %d categories from %s", len(categories), path)
    return categories


def load_snapshot(
    settings: Settings,
    today: Optional[date] = None,
) -> Tuple[list[ExpenseRecord], list[CategoryBudget]]:
    """Load a consistent ``(expenses, categories)`` pair or raise ``DataLoadError``."""

    expenses = load_expenses(settings.expenses_path, today=today)
    categories = load_categories(settings.categories_path)
    return expenses, categories
