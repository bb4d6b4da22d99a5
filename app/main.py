"""BudgetPulse dashboard with responsive card layout."""

from __future__ import annotations

import logging
from datetime import date
from pathlib import Path

import streamlit as st

from app.layout import inject_css, render_navbar
from app.pages import render_overview_page
from config import Settings, get_settings
from core.data_loader import DataLoadError, load_snapshot
from core.models import DashboardData
from core.summary_service import prepare_dashboard_data
from data.synth import write_seed_files

logger = logging.getLogger(__name__)

FETCH_FAILED_MESSAGE = "Failed to load dashboard data"


def configure_logging(level: str) -> None:
    logging.basicConfig(
        level=getattr(logging, level.upper(), logging.INFO),
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
    )


def _ensure_seed_data(settings: Settings) -> None:
    """Write synthetic CSVs when neither data file exists yet."""

    if settings.expenses_path.exists() or settings.categories_path.exists():
        return
    logger.info("No data files found in %s; writing synthetic seed data", settings.data_dir)
    write_seed_files(
        settings.data_dir,
        seed=settings.seed,
        expenses_file=settings.expenses_file,
        categories_file=settings.categories_file,
    )


def _mtime(path: Path) -> float:
    try:
        return path.stat().st_mtime
    except OSError:
        return 0.0


@st.cache_data(show_spinner=False)
def _load_dashboard_data(
    today: date,
    expenses_mtime: float,
    categories_mtime: float,
) -> DashboardData:
    """Load a fresh snapshot and recompute the dashboard.

    The modification times only take part in the cache key so edited CSVs are
    picked up on the next rerun.
    """

    settings = get_settings()
    expenses, categories = load_snapshot(settings, today=today)
    return prepare_dashboard_data(
        expenses,
        categories,
        group_by=settings.group_by,
        recent_limit=settings.recent_limit,
        strict=settings.strict_validation,
    )


def main() -> None:
    """Application entrypoint for the BudgetPulse dashboard."""

    settings = get_settings()
    configure_logging(settings.log_level)

    st.set_page_config(
        page_title="BudgetPulse | Dashboard",
        page_icon="💸",
        layout="wide",
        initial_sidebar_state="collapsed",
    )
    inject_css()
    render_navbar()

    try:
        _ensure_seed_data(settings)
        with st.spinner("Loading…"):
            data = _load_dashboard_data(
                date.today(),
                _mtime(settings.expenses_path),
                _mtime(settings.categories_path),
            )
    except (DataLoadError, ValueError, OSError):
        logger.exception("Dashboard data could not be loaded")
        st.error(FETCH_FAILED_MESSAGE)
        return

    render_overview_page(data, settings.currency_symbol)


if __name__ == "__main__":
    main()
