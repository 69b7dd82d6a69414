"""
Global constants for firecalc.

Purpose
-------
Centralizes default values and magic numbers used throughout the firecalc
codebase: search bounds, the end-of-life checking horizon, the safety margin
of the sustainability rule and the reference profile used by `firecalc init`.

Usage
-----
>>> from firecalc.constants import END_OF_LIFE_AGE, DEFAULT_SAFETY_MARGIN
>>> horizon = max(END_OF_LIFE_AGE, current_age + DEFAULT_SEARCH_YEARS)

Categories
----------
- Search: candidate age range, strategy, tolerance
- Sustainability: safety margin, end-of-life horizon
- Profile defaults: reference profile values
- Validation: accepted age and rate ranges
"""

from typing import Dict, Tuple, Union

__all__ = [
    # Search
    "DEFAULT_SEARCH_YEARS",
    "DEFAULT_SEARCH_STRATEGY",
    "DEFAULT_TOLERANCE",
    # Sustainability
    "END_OF_LIFE_AGE",
    "DEFAULT_SAFETY_MARGIN",
    # Profile defaults
    "DEFAULT_PROFILE",
    # Validation
    "MAX_AGE",
    "RATE_BOUNDS",
]


# =============================================================================
# Search Defaults
# =============================================================================

DEFAULT_SEARCH_YEARS: int = 50
"""Number of years after the current age searched for a FIRE age.

Also the length of the reported projection horizon (current age + 50).
"""

DEFAULT_SEARCH_STRATEGY: str = "binary"
"""Default FIRE age search strategy.

Options: "binary" (O(log N) simulations), "linear" (scan upward).
"""

DEFAULT_TOLERANCE: float = 1e-6
"""Absolute tolerance (today's dollars) for the non-decreasing net worth rule."""


# =============================================================================
# Sustainability Defaults
# =============================================================================

END_OF_LIFE_AGE: int = 90
"""Deterministic end-of-life age used when checking sustainability."""

DEFAULT_SAFETY_MARGIN: float = 1.2
"""Multiplier over the net worth whose real return covers peak expenses (20%)."""


# =============================================================================
# Profile Defaults
# =============================================================================

DEFAULT_PROFILE: Dict[str, Union[int, float]] = {
    "current_age": 25,
    "current_savings": 10_000.0,
    "current_liabilities": 0.0,
    "annual_income": 60_000.0,
    "annual_expenses": 40_000.0,
    "investment_return": 0.07,
    "inflation_rate": 0.03,
    "tax_rate": 0.25,
    "career_growth_rate": 0.03,
    "career_growth_slowdown_age": 45,
}
"""Reference profile used by `firecalc init` and throughout the tests."""


# =============================================================================
# Validation Ranges
# =============================================================================

MAX_AGE: int = 120
"""Largest age accepted for any age field."""

RATE_BOUNDS: Dict[str, Tuple[float, float]] = {
    "investment_return": (-0.5, 0.5),
    "inflation_rate": (0.0, 0.5),
    "tax_rate": (0.0, 1.0),
    "career_growth_rate": (-0.5, 0.5),
}
"""Inclusive (low, high) range accepted for each decimal rate field."""

