"""Tests for the HTML fragments the dashboard renders."""

from __future__ import annotations

from app.layout import card_head_markup, stat_card_markup
from app.pages.overview import progress_row_markup
from core.models import BudgetTier, IndicatorVariant


def test_card_head_escapes_title_and_suffix():
    markup = card_head_markup("<b>Spend</b>", suffix="<i>This month</i>")

    assert "<b>" not in markup
    assert "&lt;b&gt;Spend&lt;/b&gt;" in markup
    assert "&lt;i&gt;This month&lt;/i&gt;" in markup
    assert 'class="ps-chip"' in markup


def test_card_head_omits_chip_without_suffix():
    assert "ps-chip" not in card_head_markup("Recent Transactions")


def test_progress_row_escapes_name_and_status_text():
    row = {
        "category_id": "c1",
        "name": "Food & <Drink>",
        "color": "#111111",
        "spent": 90.0,
        "budget": 100.0,
        "tier": BudgetTier.NEAR_LIMIT,
        "display_percentage": 90.0,
        "status_text": "<script>alert(1)</script>",
        "variant": IndicatorVariant.WARNING,
        "progress_value": 90.0,
    }

    markup = progress_row_markup(row)

    assert "<script>" not in markup
    assert "&lt;script&gt;alert(1)&lt;/script&gt;" in markup
    assert "Food &amp; &lt;Drink&gt;" in markup
    assert "$90.00 / $100.00" in markup


def test_stat_card_escapes_text():
    markup = stat_card_markup(
        {"title": "<Total>", "value": "$1.00", "description": "a & b", "variant": IndicatorVariant.SUCCESS}
    )

    assert "&lt;Total&gt;" in markup
    assert "a &amp; b" in markup
