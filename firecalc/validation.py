"""
Caller-side profile validation for firecalc.

The projection engine assumes a pre-validated profile and never rejects
input itself. The guards a form applies before calling it live here so that
every front end (CLI, notebooks, services) shares them:

- money fields are non-negative;
- ages lie in [0, MAX_AGE];
- decimal rates lie in their accepted ranges;
- annual expenses do not exceed annual income;
- the career-growth slowdown age comes after the current age;
- every expense stream starts at a valid age and has an end age
  no earlier than its start age.

`validate_profile` returns the failures keyed by field so they can all be
shown at once; `ensure_valid_profile` raises them as one
`ProfileValidationError`.
"""

from __future__ import annotations

from typing import Dict, Iterable

from .constants import MAX_AGE, RATE_BOUNDS
from .exceptions import ProfileValidationError
from .expenses import ExpenseStream
from .profile import Profile

__all__ = ["validate_profile", "ensure_valid_profile"]


def _check_streams(
    errors: Dict[str, str], field: str, streams: Iterable[ExpenseStream]
) -> None:
    for i, stream in enumerate(streams):
        key = f"{field}[{i}]"
        label = stream.name or stream.id
        if not (0 <= stream.start_age <= MAX_AGE):
            errors[key] = f"{label}: start age must be between 0 and {MAX_AGE}"
        elif stream.end_age is not None and stream.end_age < stream.start_age:
            errors[key] = f"{label}: end age cannot be before start age"


def validate_profile(profile: Profile) -> Dict[str, str]:
    """
    Run every caller-side guard on *profile*.

    Returns
    -------
    Dict[str, str]
        Failed checks keyed by field name (empty when the profile is valid).

    Examples
    --------
    >>> errors = validate_profile(profile.with_changes(annual_expenses=90_000))
    >>> errors["annual_expenses"]
    'Annual expenses cannot exceed annual income'
    """
    errors: Dict[str, str] = {}

    if not (0 <= profile.current_age <= MAX_AGE):
        errors["current_age"] = f"Current age must be between 0 and {MAX_AGE}"

    for name in ("current_savings", "current_liabilities", "annual_income", "annual_expenses"):
        if getattr(profile, name) < 0:
            errors[name] = f"{name.replace('_', ' ').capitalize()} cannot be negative"

    if "annual_expenses" not in errors and profile.annual_expenses > profile.annual_income:
        errors["annual_expenses"] = "Annual expenses cannot exceed annual income"

    for name, (low, high) in RATE_BOUNDS.items():
        value = getattr(profile, name)
        if not (low <= value <= high):
            errors[name] = f"{name.replace('_', ' ').capitalize()} must be between {low:.0%} and {high:.0%}"

    if profile.career_growth_slowdown_age <= profile.current_age:
        errors["career_growth_slowdown_age"] = (
            "Career growth slowdown age must be after current age"
        )
    elif profile.career_growth_slowdown_age > MAX_AGE:
        errors["career_growth_slowdown_age"] = (
            f"Career growth slowdown age must be at most {MAX_AGE}"
        )

    _check_streams(errors, "additional_retirement_expenses", profile.additional_retirement_expenses)
    if profile.has_kids_expenses:
        _check_streams(errors, "kids_expenses", profile.kids_expenses)
    if profile.has_parents_care:
        _check_streams(errors, "parents_care_expenses", profile.parents_care_expenses)

    return errors


def ensure_valid_profile(profile: Profile) -> Profile:
    """Return *profile* unchanged, or raise `ProfileValidationError`."""
    errors = validate_profile(profile)
    if errors:
        raise ProfileValidationError(errors)
    return profile
