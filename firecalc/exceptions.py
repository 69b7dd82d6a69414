"""
Custom exceptions for firecalc.

Purpose
-------
Provides a unified exception hierarchy for consistent error handling
across all firecalc modules. All exceptions inherit from FireCalcError,
enabling catch-all handling when needed.

The projection engine itself is total for valid numeric ranges: nothing
inside the simulation loop raises. These exceptions belong to the layers
around it (configuration, ingestion, caller-side validation).

Exception Hierarchy
-------------------
FireCalcError (base)
├── ConfigurationError - Invalid solver or application parameters
└── ValidationError - Data validation failures
    ├── ProfileValidationError - Caller-side range checks on a Profile
    └── ExpenseStreamError - Malformed expense stream at ingestion

Usage
-----
>>> from firecalc.exceptions import ProfileValidationError
>>>
>>> try:
...     ensure_valid_profile(profile)
... except ProfileValidationError as e:
...     for field, message in e.errors.items():
...         print(f"{field}: {message}")
"""

from typing import Dict, Optional


class FireCalcError(Exception):
    """
    Base exception for all firecalc errors.

    Examples
    --------
    >>> try:
    ...     result = calculate_fire_projections(load_profile(path))
    ... except FireCalcError as e:
    ...     logger.error(f"FIRE calculation failed: {e}")
    """
    pass


class ConfigurationError(FireCalcError):
    """
    Invalid configuration or parameters.

    Raised when solver configuration is invalid, such as:
    - search_years < 1
    - safety_margin below 1.0
    - Unknown search strategy

    Examples
    --------
    >>> raise ConfigurationError(
    ...     "search_years must be >= 1, got 0. "
    ...     "The solver needs at least one candidate retirement age."
    ... )
    """
    pass


class ValidationError(FireCalcError):
    """
    Data validation failures.

    Raised when input data fails validation checks, such as
    out-of-range ages, negative balances or malformed records.
    """
    pass


class ProfileValidationError(ValidationError):
    """
    Caller-side range checks failed for a Profile.

    Carries every failure as a ``field -> message`` mapping so that a
    form or CLI can report them all at once.

    Parameters
    ----------
    errors : Dict[str, str]
        Failed checks keyed by profile field name.

    Examples
    --------
    >>> raise ProfileValidationError({
    ...     "annual_expenses": "Annual expenses cannot exceed annual income",
    ... })
    """

    def __init__(self, errors: Dict[str, str], message: Optional[str] = None):
        self.errors = dict(errors)
        if message is None:
            details = "; ".join(f"{k}: {v}" for k, v in self.errors.items())
            message = f"Invalid profile ({len(self.errors)} error(s)): {details}"
        super().__init__(message)


class ExpenseStreamError(ValidationError):
    """
    Malformed expense stream at ingestion.

    Raised by the file/config layer when a stream's end age precedes its
    start age. The engine never raises this: it treats such a stream as
    always inactive.

    Examples
    --------
    >>> raise ExpenseStreamError(
    ...     "Expense stream 'kid1' ends at 40 before it starts at 48."
    ... )
    """
    pass
