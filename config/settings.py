"""Centralised configuration handling for BudgetPulse."""

from __future__ import annotations

from functools import lru_cache
from pathlib import Path
from typing import Any, Literal, Mapping

import streamlit as st
from pydantic_settings import BaseSettings, SettingsConfigDict

DEFAULT_DATA_DIR = Path(__file__).resolve().parent.parent / "data"


def _streamlit_section(name: str) -> Mapping[str, Any] | None:
    """Return a mapping from Streamlit secrets for the given section."""

    try:
        if hasattr(st, "secrets") and name in st.secrets:
            section = st.secrets[name]
            if isinstance(section, Mapping):
                return section
            return dict(section)
    except Exception:  # pragma: no cover - accessing secrets may fail in tests
        return None
    return None


class Settings(BaseSettings):
    """Application settings sourced from env vars and Streamlit secrets."""

    data_dir: Path = DEFAULT_DATA_DIR
    expenses_file: str = "expenses.csv"
    categories_file: str = "categories.csv"
    currency_symbol: str = "$"
    group_by: Literal["name", "id"] = "name"
    recent_limit: int = 5
    strict_validation: bool = False
    log_level: str = "INFO"
    seed: int = 7

    model_config = SettingsConfigDict(env_prefix="BUDGETPULSE_", extra="ignore")

    @property
    def expenses_path(self) -> Path:
        return Path(self.data_dir) / self.expenses_file

    @property
    def categories_path(self) -> Path:
        return Path(self.data_dir) / self.categories_file


@lru_cache
def get_settings() -> Settings:
    """Load and cache application settings."""

    overrides: dict[str, Any] = {}
    secrets_section = _streamlit_section("budgetpulse")
    if secrets_section:
        overrides = {key: secrets_section.get(key) for key in Settings.model_fields}

    return Settings(**{k: v for k, v in overrides.items() if v is not None})
