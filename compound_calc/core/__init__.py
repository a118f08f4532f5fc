"""Compound-interest solver: forward projection and inverse solvers."""

from compound_calc.core.calculator import (
    compute_future_value,
    solve_required_contribution,
    solve_required_principal,
    solve_required_rate,
    solve_required_time,
    years_until,
)
from compound_calc.core.formatting import format_currency, format_number

__all__ = [
    "compute_future_value",
    "solve_required_principal",
    "solve_required_contribution",
    "solve_required_rate",
    "solve_required_time",
    "years_until",
    "format_currency",
    "format_number",
]
