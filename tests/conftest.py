"""Shared pytest fixtures for the BudgetPulse test suite."""

from __future__ import annotations

import sys
from datetime import date
from pathlib import Path

import pytest
import streamlit as st

ROOT = Path(__file__).resolve().parent.parent
if str(ROOT) not in sys.path:
    sys.path.insert(0, str(ROOT))

from core.models import CategoryBudget, CategoryRef, ExpenseRecord  # noqa: E402

GROCERIES = CategoryRef(name="Groceries", color="#22C55E", id="cat-groceries")
DINING = CategoryRef(name="Dining Out", color="#F97316", id="cat-dining")


@pytest.fixture(autouse=True)
def clear_streamlit_secrets(monkeypatch):
    """Provide an empty secrets mapping so tests don't rely on Streamlit runtime."""

    monkeypatch.setattr(st, "secrets", {}, raising=False)


@pytest.fixture()
def sample_expenses() -> list[ExpenseRecord]:
    return [
        ExpenseRecord("e1", 40.0, date(2024, 1, 14), "Weekly shop", "Whole Foods", GROCERIES),
        ExpenseRecord("e2", 25.5, date(2024, 1, 12), "", "Chipotle", DINING),
        ExpenseRecord("e3", 60.0, date(2024, 1, 10), "Big shop", "Costco", GROCERIES),
        ExpenseRecord("e4", 12.0, date(2024, 1, 8), "Stamps", "Post Office", None),
        ExpenseRecord("e5", 150.0, date(2024, 1, 3), "Birthday dinner", "Bistro", DINING),
    ]


@pytest.fixture()
def sample_categories() -> list[CategoryBudget]:
    return [
        CategoryBudget("cat-dining", "Dining Out", "#F97316", 150.0),
        CategoryBudget("cat-groceries", "Groceries", "#22C55E", 400.0),
        CategoryBudget("cat-travel", "Travel", "#0EA5E9", 300.0),
        CategoryBudget("cat-fun", "Entertainment", "#FACC15", 0.0),
    ]
