"""End-to-end tests for the dashboard summary service."""

from __future__ import annotations

from datetime import date

import pytest

from analytics.validation import MalformedRecordError
from core.models import BudgetTier, ExpenseRecord, IndicatorVariant
from core.summary_service import prepare_dashboard_data


def test_prepare_dashboard_data_basic(sample_expenses, sample_categories):
    data = prepare_dashboard_data(sample_expenses, sample_categories)

    assert data["totals"]["total_spent"] == pytest.approx(287.5)
    assert data["indicators"] == {
        "total_spent": IndicatorVariant.DEFAULT,
        "budget_remaining": IndicatorVariant.SUCCESS,
    }
    assert [row["name"] for row in data["chart_slices"]] == ["Groceries", "Dining Out", "Other"]
    assert len(data["progress_rows"]) == len(sample_categories)
    assert data["progress_rows"][0]["tier"] is BudgetTier.OVER_BUDGET
    assert data["rejected_expenses"] == []


def test_recent_transactions_keep_input_order_and_fallbacks(sample_expenses, sample_categories):
    data = prepare_dashboard_data(sample_expenses, sample_categories, recent_limit=4)

    recent = data["recent_transactions"]
    assert [row["id"] for row in recent] == ["e1", "e2", "e3", "e4"]
    assert recent[1]["label"] == "Chipotle"
    assert recent[3]["category_name"] == "Other"
    assert recent[3]["color"] == "#6B7280"
    assert data["has_more_transactions"] is True


def test_malformed_expenses_are_excluded_from_every_output(sample_expenses, sample_categories):
    bad = ExpenseRecord("bad", -500.0, date(2024, 1, 15), "Refund?", "Shop", None)

    data = prepare_dashboard_data([bad, *sample_expenses], sample_categories)

    assert data["totals"]["transaction_count"] == 5
    assert data["totals"]["total_spent"] == pytest.approx(287.5)
    assert data["category_spend"]["Other"]["spent_amount"] == pytest.approx(12.0)
    assert [record.id for record in data["rejected_expenses"]] == ["bad"]
    assert all(row["id"] != "bad" for row in data["recent_transactions"])


def test_strict_mode_raises_on_malformed(sample_expenses, sample_categories):
    bad = ExpenseRecord("bad", float("nan"), date(2024, 1, 15))

    with pytest.raises(MalformedRecordError):
        prepare_dashboard_data([*sample_expenses, bad], sample_categories, strict=True)


def test_empty_snapshot(sample_categories):
    data = prepare_dashboard_data([], sample_categories)

    assert data["totals"]["average_transaction"] == 0.0
    assert data["chart_slices"] == []
    assert [row["spent"] for row in data["progress_rows"]] == [0.0] * len(sample_categories)
    assert data["recent_transactions"] == []
    assert data["has_more_transactions"] is False


def test_over_budget_dashboard_turns_indicators_red(sample_expenses, sample_categories):
    data = prepare_dashboard_data(sample_expenses, sample_categories[:1])

    assert data["indicators"]["total_spent"] is IndicatorVariant.DANGER
    assert data["indicators"]["budget_remaining"] is IndicatorVariant.DANGER


def test_recompute_is_idempotent(sample_expenses, sample_categories):
    first = prepare_dashboard_data(sample_expenses, sample_categories)
    second = prepare_dashboard_data(sample_expenses, sample_categories)

    assert repr(first) == repr(second)
