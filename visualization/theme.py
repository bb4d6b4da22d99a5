"""Shared Plotly theme tokens for BudgetPulse visualizations."""

from __future__ import annotations

from dataclasses import dataclass

from core.models import BudgetTier


@dataclass(frozen=True)
class ThemeTokens:
    label_color: str = "#475569"
    label_font: str = "Inter"
    label_size: int = 12
    brand_blue: str = "#2563EB"
    neutral_grey: str = "#94A3B8"
    neutral_white: str = "#FFFFFF"
    neutral_background: str = "rgba(148, 163, 184, 0.25)"
    budget_safe: str = "#16A34A"
    budget_warning: str = "#F59E0B"
    budget_danger: str = "#DC2626"
    budget_track: str = "#E2E8F0"

    def tier_color(self, tier: BudgetTier) -> str:
        if tier is BudgetTier.ON_TRACK:
            return self.budget_safe
        if tier is BudgetTier.NEAR_LIMIT:
            return self.budget_warning
        if tier is BudgetTier.OVER_BUDGET:
            return self.budget_danger
        return self.brand_blue


_TOKENS = ThemeTokens()


def theme_tokens() -> ThemeTokens:
    """Return the shared visualization tokens.

    The tokens are frozen to keep styling consistent between charts and other
    Plotly artefacts.
    """

    return _TOKENS
