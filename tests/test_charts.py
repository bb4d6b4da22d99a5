"""Smoke tests for the Plotly chart builders."""

from __future__ import annotations

import plotly.graph_objects as go

from analytics.aggregation import aggregate_category_spend
from analytics.projection import build_chart_slices, build_progress_rows
from visualization import build_budget_chart, build_category_chart, theme_tokens


def test_category_chart_uses_category_colors(sample_expenses):
    fig = build_category_chart(build_chart_slices(aggregate_category_spend(sample_expenses)))

    assert isinstance(fig, go.Figure)
    pie = fig.data[0]
    assert list(pie.labels) == ["Groceries", "Dining Out", "Other"]
    assert list(pie.marker.colors) == ["#22C55E", "#F97316", "#6B7280"]


def test_budget_chart_colours_spend_by_tier(sample_expenses, sample_categories):
    rows = build_progress_rows(sample_categories, aggregate_category_spend(sample_expenses))

    fig = build_budget_chart(rows)

    tokens = theme_tokens()
    spent_trace = fig.data[1]
    assert spent_trace.name == "Spent"
    assert list(spent_trace.marker.color)[:2] == [tokens.budget_danger, tokens.budget_safe]


def test_empty_inputs_render_placeholder():
    assert len(build_category_chart([]).data) == 0
    assert len(build_budget_chart([]).data) == 0
