"""Synthetic seed data for local BudgetPulse runs."""
