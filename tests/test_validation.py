"""Tests for input-boundary validation of expense and category records."""

from __future__ import annotations

import logging
import math
from datetime import date
from decimal import Decimal

import pytest

from analytics.validation import (
    MalformedRecordError,
    coerce_amount,
    partition_expenses,
    validate_categories,
    validate_expenses,
)
from core.models import CategoryBudget, ExpenseRecord


def _expense(record_id: str, amount) -> ExpenseRecord:
    return ExpenseRecord(record_id, amount, date(2024, 1, 5))


@pytest.mark.parametrize("value", [-1.0, "abc", None, math.nan, math.inf, True])
def test_coerce_amount_rejects_malformed_values(value):
    with pytest.raises(MalformedRecordError):
        coerce_amount(value, "x")


@pytest.mark.parametrize(("value", "expected"), [(0, 0.0), ("12.50", 12.5), (Decimal("3.10"), 3.1)])
def test_coerce_amount_normalises_numbers(value, expected):
    assert coerce_amount(value) == pytest.approx(expected)


def test_partition_skips_and_logs_malformed(caplog):
    expenses = [_expense("ok", 10), _expense("neg", -5.0), _expense("nan", math.nan), _expense("txt", "n/a")]

    with caplog.at_level(logging.WARNING, logger="analytics.validation"):
        valid, rejected = partition_expenses(expenses)

    assert [record.id for record in valid] == ["ok"]
    assert valid[0].amount == 10.0 and isinstance(valid[0].amount, float)
    assert [record.id for record in rejected] == ["neg", "nan", "txt"]
    assert "neg" in caplog.text


def test_malformed_error_carries_record_id():
    with pytest.raises(MalformedRecordError) as excinfo:
        validate_expenses([_expense("bad", -1)], strict=True)

    assert excinfo.value.record_id == "bad"
    assert isinstance(excinfo.value, ValueError)


def test_non_strict_validation_drops_malformed():
    assert [record.id for record in validate_expenses([_expense("a", 1), _expense("b", -1)])] == ["a"]


def test_validate_categories_raises_instead_of_dropping():
    good = CategoryBudget("c1", "Food", "#111111", 100)
    bad = CategoryBudget("c2", "Fun", "#222222", -10)

    assert validate_categories([good])[0].monthly_budget == 100.0
    with pytest.raises(MalformedRecordError):
        validate_categories([good, bad])
