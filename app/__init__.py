"""Streamlit application package for BudgetPulse."""

from .main import main

__all__ = ["main"]
