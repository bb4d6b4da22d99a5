"""Tests for display formatting helpers."""

from __future__ import annotations

from core.formatting import build_stat_cards, format_currency, tier_status_text, tier_variant
from core.models import BudgetTier, IndicatorVariant


def test_format_currency():
    assert format_currency(1234.5) == "$1,234.50"
    assert format_currency(-20) == "-$20.00"
    assert format_currency(3, "£") == "£3.00"


def test_tier_text_and_variant():
    assert tier_status_text(BudgetTier.NEAR_LIMIT) == "Near limit"
    assert tier_variant(BudgetTier.NEAR_LIMIT) is IndicatorVariant.WARNING
    assert tier_variant(BudgetTier.NO_BUDGET) is IndicatorVariant.DEFAULT


def test_build_stat_cards():
    cards = build_stat_cards(
        {
            "total_spent": 1200.0,
            "transaction_count": 3,
            "average_transaction": 400.0,
            "total_budget": 1000.0,
            "budget_remaining": -200.0,
        },
        {"total_spent": IndicatorVariant.DANGER, "budget_remaining": IndicatorVariant.DANGER},
    )

    assert [card["title"] for card in cards] == [
        "Total Spent",
        "Transactions",
        "Average per Transaction",
        "Budget Remaining",
    ]
    assert cards[0]["variant"] is IndicatorVariant.DANGER
    assert cards[1]["value"] == "3"
    assert cards[3]["value"] == "-$200.00"
    assert cards[3]["description"] == "of $1,000.00"
