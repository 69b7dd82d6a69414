"""General utilities for firecalc

Contents
--------
- Validation helpers
- Real/nominal value conversions (today's dollars ↔ future dollars)
- Rate conversions (Fisher relation between real and nominal returns)
- Text formatters (format_currency, format_percentage)
"""

from __future__ import annotations

import numpy as np

__all__ = [
    # Validation
    "check_non_negative",
    # Values
    "to_nominal",
    "to_today",
    # Rates
    "nominal_return_rate",
    "real_return_rate",
    # Formatters
    "format_currency",
    "format_percentage",
]

# ---------------------------------------------------------------------------
# Validation helpers
# ---------------------------------------------------------------------------

def check_non_negative(name: str, value: float) -> None:
    """Raise if *value* is negative (strict)."""
    if value < 0:
        raise ValueError(f"{name} must be non-negative (got {value}).")


# ---------------------------------------------------------------------------
# Value conversions
# ---------------------------------------------------------------------------

def to_nominal(today_value: float, inflation_rate: float, years: int) -> float:
    """Convert a today's-dollar amount to future (nominal) dollars.

    Uses: today_value * (1 + inflation_rate) ** years. ``years == 0`` returns
    the value unchanged.
    """
    if years == 0:
        return today_value
    return today_value * (1.0 + inflation_rate) ** years


def to_today(nominal_value: float, inflation_rate: float, years: int) -> float:
    """Convert a future (nominal) amount back to today's dollars.

    Uses: nominal_value / (1 + inflation_rate) ** years. Exact inverse of
    `to_nominal` up to floating-point rounding.
    """
    if years == 0:
        return nominal_value
    return nominal_value / (1.0 + inflation_rate) ** years


# ---------------------------------------------------------------------------
# Rate conversions (Fisher relation)
# ---------------------------------------------------------------------------

def nominal_return_rate(real_return: float, inflation_rate: float) -> float:
    """Nominal compounding rate implied by a real return and inflation.

    Uses: (1 + r_real) * (1 + inflation) - 1.
    """
    return float((1.0 + real_return) * (1.0 + inflation_rate) - 1.0)


def real_return_rate(nominal_return: float, inflation_rate: float) -> float:
    """Inverse of `nominal_return_rate`: (1 + r_nom) / (1 + inflation) - 1."""
    return float((1.0 + nominal_return) / (1.0 + inflation_rate) - 1.0)


# ---------------------------------------------------------------------------
# Formatters
# ---------------------------------------------------------------------------

def format_currency(value: float, decimals: int = 0, symbol: str = "$") -> str:
    """
    Format a dollar amount for tables and summaries.

    Parameters
    ----------
    value : float
        Amount in dollars (today's or nominal, caller decides).
    decimals : int, default 0
        Number of decimal places to display.
    symbol : str, default '$'
        Currency symbol prefix.

    Returns
    -------
    str
        Formatted string with thousands separators; negative amounts carry
        the sign before the symbol.

    Examples
    --------
    >>> format_currency(685_714.29)
    '$685,714'
    >>> format_currency(-1234.5, decimals=2)
    '-$1,234.50'
    """
    if value is None or not np.isfinite(value):
        return "n/a"
    sign = "-" if value < 0 else ""
    return f"{sign}{symbol}{abs(value):,.{decimals}f}"


def format_percentage(value: float, decimals: int = 1) -> str:
    """Format a decimal rate as a percentage: 0.07 → '7.0%'."""
    return f"{value * 100:.{decimals}f}%"
