"""Shared layout primitives for the BudgetPulse Streamlit app."""

from __future__ import annotations

from contextlib import contextmanager
from html import escape

import streamlit as st

from core.models import IndicatorVariant, StatCard

VARIANT_ACCENTS: dict[IndicatorVariant, str] = {
    IndicatorVariant.DEFAULT: "#2563EB",
    IndicatorVariant.SUCCESS: "#16A34A",
    IndicatorVariant.WARNING: "#F59E0B",
    IndicatorVariant.DANGER: "#DC2626",
}


def inject_css() -> None:
    """Inject global CSS tokens and component styling into the Streamlit app."""

    st.markdown(
        """
        <style>
          :root {
            --gap: 16px;
            --radius: 12px;
            --card-bg: #FFFFFF;
            --border: #E6EAF2;
            --shadow: 0 1px 2px rgba(16, 24, 40, 0.05), 0 1px 3px rgba(16, 24, 40, 0.06);
          }

          body, [data-testid="stAppViewContainer"] > .main {
            background: #F4F6FB;
          }

          .block-container {
            max-width: 1200px;
            padding-top: 2.5rem;
            padding-bottom: 4rem;
          }

          .ps-nav {
            display: flex;
            align-items: center;
            justify-content: space-between;
            gap: 2rem;
            padding: 0.9rem 0;
          }

          .ps-nav__brand {
            font-size: 1.5rem;
            font-weight: 700;
            color: #0B3FD6;
          }

          .ps-card-anchor {
            display: none;
          }

          [data-testid="stVerticalBlock"]:has(> .ps-card-anchor) {
            background: var(--card-bg);
            border: 1px solid var(--border);
            border-radius: var(--radius);
            box-shadow: var(--shadow);
            padding: 16px;
            margin-bottom: var(--gap);
            display: flex;
            flex-direction: column;
            gap: 12px;
          }

          .ps-card__head {
            display: flex;
            align-items: center;
            justify-content: space-between;
            gap: 12px;
            font-weight: 600;
            color: #111827;
            margin-bottom: 4px;
            flex-wrap: wrap;
          }

          .ps-card__title {
            font-size: 1.05rem;
          }

          .ps-chip {
            font-size: 12px;
            padding: 2px 8px;
            border-radius: 999px;
            border: 1px solid #D6DEFF;
            background: #F0F4FF;
            color: #3346FF;
            white-space: nowrap;
          }

          .ps-stat {
            background: var(--card-bg);
            border: 1px solid var(--border);
            border-top: 3px solid var(--accent);
            border-radius: var(--radius);
            box-shadow: var(--shadow);
            padding: 16px;
          }

          .ps-stat__title {
            font-size: 0.85rem;
            font-weight: 600;
            color: #5C6478;
          }

          .ps-stat__value {
            font-size: 1.6rem;
            font-weight: 700;
            color: #111827;
          }

          .ps-stat__desc {
            font-size: 0.75rem;
            color: #6B7280;
          }

          .ps-progress-row {
            display: flex;
            align-items: center;
            justify-content: space-between;
            font-weight: 600;
            color: #1F2937;
            margin-top: 12px;
            margin-bottom: 4px;
          }

          .ps-dot {
            display: inline-block;
            width: 0.75rem;
            height: 0.75rem;
            border-radius: 999px;
            margin-right: 0.5rem;
          }

          .ps-muted {
            color: #6B7280;
            font-size: 0.8rem;
            font-weight: 400;
          }

          @media (min-width: 1200px) {
            [data-testid="stVerticalBlock"]:has(> .ps-card-anchor) {
              padding: 24px;
            }
            :root {
              --gap: 24px;
            }
          }
        </style>
        """,
        unsafe_allow_html=True,
    )


@contextmanager
def card(title: str, suffix: str | None = None):
    """Render content inside a reusable BudgetPulse card."""

    container = st.container()
    with container:
        st.markdown('<div class="ps-card-anchor"></div>', unsafe_allow_html=True)
        st.markdown(card_head_markup(title, suffix), unsafe_allow_html=True)
        yield


def card_head_markup(title: str, suffix: str | None = None) -> str:
    chip_html = f'<span class="ps-chip">{escape(suffix)}</span>' if suffix else ""
    return (
        f'<div class="ps-card__head"><span class="ps-card__title">{escape(title)}</span>'
        f'{chip_html}</div>'
    )


def color_dot(color: str) -> str:
    return f"<span class='ps-dot' style='background:{escape(color)}'></span>"


def stat_card_markup(stat: StatCard) -> str:
    """Return stat card markup accented by the card's indicator variant."""

    accent = VARIANT_ACCENTS[stat["variant"]]
    return (
        f"<div class='ps-stat' style='--accent:{accent}'>"
        f"<div class='ps-stat__title'>{escape(stat['title'])}</div>"
        f"<div class='ps-stat__value'>{escape(stat['value'])}</div>"
        f"<div class='ps-stat__desc'>{escape(stat['description'])}</div>"
        "</div>"
    )


def render_navbar() -> None:
    st.markdown(
        """
        <nav class="ps-nav">
            <div class="ps-nav__brand">BudgetPulse</div>
        </nav>
        """,
        unsafe_allow_html=True,
    )


__all__ = [
    "VARIANT_ACCENTS",
    "card",
    "card_head_markup",
    "color_dot",
    "inject_css",
    "render_navbar",
    "stat_card_markup",
]
