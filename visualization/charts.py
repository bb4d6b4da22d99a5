"""Plotly chart builders for the BudgetPulse dashboard."""

from __future__ import annotations

from typing import Sequence

import plotly.graph_objects as go

from core.models import ChartSlice, ProgressRow

from .theme import theme_tokens

TOKENS = theme_tokens()

__all__ = [
    "build_budget_chart",
    "build_category_chart",
]


def _empty_plotly_figure(message: str) -> go.Figure:
    fig = go.Figure()
    fig.update_layout(
        annotations=[
            dict(
                text=message,
                x=0.5,
                y=0.5,
                xref="paper",
                yref="paper",
                showarrow=False,
                font=dict(color=TOKENS.neutral_grey, size=14, family=TOKENS.label_font),
            )
        ],
        xaxis=dict(visible=False),
        yaxis=dict(visible=False),
        margin=dict(l=0, r=0, t=20, b=0),
        plot_bgcolor="rgba(0,0,0,0)",
        paper_bgcolor="rgba(0,0,0,0)",
    )
    return fig


def build_category_chart(
    chart_slices: Sequence[ChartSlice],
    currency_symbol: str = "$",
) -> go.Figure:
    """Render a donut chart of spend per category, coloured by each category's own colour."""

    if not chart_slices:
        return _empty_plotly_figure("No expenses recorded this month.")

    fig = go.Figure(
        go.Pie(
            labels=[row["name"] for row in chart_slices],
            values=[row["value"] for row in chart_slices],
            hole=0.55,
            sort=False,
            marker=dict(
                colors=[row["color"] for row in chart_slices],
                line=dict(color=TOKENS.neutral_white, width=2),
            ),
            textposition="inside",
            texttemplate="%{label}<br>%{percent:.1%}",
            hovertemplate=f"%{{label}}<br>Spend: {currency_symbol}%{{value:,.2f}}<extra></extra>",
        )
    )

    fig.update_layout(
        margin=dict(l=0, r=0, t=0, b=0),
        legend=dict(
            title="",
            orientation="v",
            yanchor="middle",
            y=0.5,
            xanchor="left",
            x=1.05,
            font=dict(color=TOKENS.label_color, family=TOKENS.label_font, size=TOKENS.label_size),
        ),
        showlegend=True,
    )

    return fig


def build_budget_chart(
    progress_rows: Sequence[ProgressRow],
    currency_symbol: str = "$",
) -> go.Figure:
    """Render spent-versus-budget bars per category, coloured by budget tier."""

    if not progress_rows:
        return _empty_plotly_figure("No budget data available.")

    names = [row["name"] for row in progress_rows]
    hover_template = f"%{{y}}<br>%{{fullData.name}}: {currency_symbol}%{{x:,.2f}}<extra></extra>"

    fig = go.Figure()
    fig.add_trace(
        go.Bar(
            x=[row["budget"] for row in progress_rows],
            y=names,
            orientation="h",
            name="Budget",
            marker=dict(color=TOKENS.budget_track),
            hovertemplate=hover_template,
        )
    )
    fig.add_trace(
        go.Bar(
            x=[row["spent"] for row in progress_rows],
            y=names,
            orientation="h",
            name="Spent",
            marker=dict(color=[TOKENS.tier_color(row["tier"]) for row in progress_rows]),
            customdata=[row["status_text"] for row in progress_rows],
            hovertemplate=(
                f"%{{y}}<br>Spent: {currency_symbol}%{{x:,.2f}}<br>%{{customdata}}<extra></extra>"
            ),
        )
    )

    fig.update_layout(
        barmode="overlay",
        bargap=0.35,
        margin=dict(l=0, r=10, t=20, b=0),
        legend=dict(orientation="h", yanchor="bottom", y=1.02, xanchor="right", x=1.0),
        xaxis=dict(
            title=f"Amount ({currency_symbol})",
            showgrid=True,
            gridcolor=TOKENS.neutral_background,
            zeroline=False,
        ),
        yaxis=dict(automargin=True, autorange="reversed"),
        plot_bgcolor="rgba(0,0,0,0)",
        paper_bgcolor="rgba(0,0,0,0)",
        height=max(240, 48 * len(progress_rows)),
    )

    return fig
