"""Overview dashboard page layout."""

from __future__ import annotations

from html import escape

import streamlit as st

from app.layout import card, color_dot, stat_card_markup
from core.formatting import build_stat_cards, format_currency
from core.models import DashboardData, ProgressRow, RecentTransaction
from visualization import build_budget_chart, build_category_chart


def _render_stat_cards(data: DashboardData, currency_symbol: str) -> None:
    stats = build_stat_cards(data["totals"], data["indicators"], currency_symbol)
    columns = st.columns(len(stats), gap="medium")
    for column, stat in zip(columns, stats):
        column.markdown(stat_card_markup(stat), unsafe_allow_html=True)


def progress_row_markup(row: ProgressRow, currency_symbol: str = "$") -> str:
    spent_label = format_currency(row["spent"], currency_symbol)
    budget_label = format_currency(row["budget"], currency_symbol)
    return (
        f"<div class='ps-progress-row'><span>{color_dot(row['color'])}{escape(row['name'])}</span>"
        f"<span>{escape(spent_label)} / {escape(budget_label)} "
        f"<span class='ps-muted'>{escape(row['status_text'])}</span></span></div>"
    )


def _render_budget_progress(progress_rows: list[ProgressRow], currency_symbol: str) -> None:
    if not progress_rows:
        st.info("No budget data available")
        return

    for row in progress_rows:
        st.markdown(progress_row_markup(row, currency_symbol), unsafe_allow_html=True)
        # The capped display percentage can reach 150; the widget only accepts 0-100.
        fill = min(row["progress_value"], 100.0) / 100
        st.progress(fill, text=f"{round(row['progress_value'])}%")


def _render_recent_transactions(
    rows: list[RecentTransaction],
    has_more: bool,
    currency_symbol: str,
) -> None:
    if not rows:
        st.info("No transactions this month. Start by adding your first expense!")
        return

    for row in rows:
        st.markdown(
            f"<div class='ps-progress-row'><span>{color_dot(row['color'])}{escape(row['label'])}"
            f"<br /><span class='ps-muted'>{escape(row['category_name'])} · {row['date']:%d %b %Y}</span></span>"
            f"<span>{format_currency(row['amount'], currency_symbol)}</span></div>",
            unsafe_allow_html=True,
        )
    if has_more:
        st.caption("Showing the most recent transactions only.")


def render_page(data: DashboardData, currency_symbol: str = "$") -> None:
    """Render the overview dashboard page."""

    st.title("Dashboard")
    st.caption("Track your spending and manage your budget")

    _render_stat_cards(data, currency_symbol)

    chart_col, progress_col = st.columns(2, gap="medium")
    with chart_col:
        with card("Spend by category", suffix="This month"):
            st.plotly_chart(
                build_category_chart(data["chart_slices"], currency_symbol),
                use_container_width=True,
                key="category-donut",
            )
    with progress_col:
        with card("Budget Progress", suffix="This month"):
            _render_budget_progress(data["progress_rows"], currency_symbol)

    if data["progress_rows"]:
        with card("Spent vs budget"):
            st.plotly_chart(
                build_budget_chart(data["progress_rows"], currency_symbol),
                use_container_width=True,
                key="budget-bars",
            )

    with card("Recent Transactions"):
        _render_recent_transactions(
            data["recent_transactions"],
            data["has_more_transactions"],
            currency_symbol,
        )

    rejected = data["rejected_expenses"]
    if rejected:
        st.warning(f"{len(rejected)} expense(s) with invalid amounts were left out of these totals.")


__all__ = ["progress_row_markup", "render_page"]
