"""
Serialization module for firecalc.

Purpose
-------
Provides JSON serialization and deserialization for profiles and results,
enabling import/export, sharing and reproducible reports.

Supports serialization of:
- ExpenseStream (interchange keys id, name, amount, startAge, endAge)
- Profile (flat object mirroring the profile's attributes, camelCase keys,
  arrays of objects for the three expense-stream lists)
- FireResult (summary figures + yearly projections, versioned)

Design Principles
-----------------
- Type-safe: Uses Pydantic configs for validation at ingestion
- Human-readable: indented JSON for easy editing
- Compatible: a profile exported by the web calculator loads unchanged
- Versioned results: result files carry a schema version

Example
-------
>>> from pathlib import Path
>>> from firecalc.serialization import save_profile, load_profile
>>> save_profile(profile, Path("profile.json"))
>>> loaded = load_profile(Path("profile.json"))
>>> loaded == profile
True
"""

from __future__ import annotations
from typing import Dict, Any, List, TYPE_CHECKING
from pathlib import Path
import json
import warnings

import pandas as pd
from pydantic import ValidationError as PydanticValidationError

from .config import ExpenseStreamConfig, ProfileConfig
from .exceptions import ExpenseStreamError, ValidationError
from .types import ExpenseStreamDict, FireResultDict, ProfileDict, ProjectionDict

if TYPE_CHECKING:
    from .expenses import ExpenseStream
    from .profile import Profile
    from .solver import FireResult

__all__ = [
    "SCHEMA_VERSION",
    "stream_to_dict",
    "stream_from_dict",
    "profile_to_dict",
    "profile_from_dict",
    "profile_to_json",
    "profile_from_json",
    "save_profile",
    "load_profile",
    "result_to_dict",
    "save_result",
    "load_result",
    "projections_from_dict",
]


# ---------------------------------------------------------------------------
# Schema Version
# ---------------------------------------------------------------------------

SCHEMA_VERSION = "0.1.0"


# ---------------------------------------------------------------------------
# Expense Stream Serialization
# ---------------------------------------------------------------------------

def stream_to_dict(stream: ExpenseStream) -> ExpenseStreamDict:
    """
    Convert ExpenseStream to its interchange representation.

    ``endAge`` is omitted for open-ended streams.
    """
    data: ExpenseStreamDict = {
        "id": stream.id,
        "name": stream.name,
        "amount": stream.amount,
        "startAge": stream.start_age,
    }
    if stream.end_age is not None:
        data["endAge"] = stream.end_age
    return data


def stream_from_dict(data: Dict[str, Any]) -> ExpenseStream:
    """
    Create ExpenseStream from its interchange representation.

    Raises
    ------
    ExpenseStreamError
        If the entry is malformed (missing fields, negative amount, end age
        before start age).
    """
    try:
        config = ExpenseStreamConfig.model_validate(data)
    except PydanticValidationError as e:
        label = data.get("name") or data.get("id")
        raise ExpenseStreamError(f"Invalid expense stream {label!r}: {e}") from e
    return config.to_stream()


# ---------------------------------------------------------------------------
# Profile Serialization
# ---------------------------------------------------------------------------

def profile_to_dict(profile: Profile) -> ProfileDict:
    """
    Convert Profile to the flat interchange format.

    Returns
    -------
    dict
        camelCase keys mirroring the profile's attributes; the three expense
        lists are always present (possibly empty).
    """
    return {
        "currentAge": profile.current_age,
        "currentSavings": profile.current_savings,
        "currentLiabilities": profile.current_liabilities,
        "annualIncome": profile.annual_income,
        "annualExpenses": profile.annual_expenses,
        "investmentReturn": profile.investment_return,
        "inflationRate": profile.inflation_rate,
        "taxRate": profile.tax_rate,
        "careerGrowthRate": profile.career_growth_rate,
        "careerGrowthSlowdownAge": profile.career_growth_slowdown_age,
        "additionalRetirementExpenses": [stream_to_dict(s) for s in profile.additional_retirement_expenses],
        "hasKidsExpenses": profile.has_kids_expenses,
        "kidsExpenses": [stream_to_dict(s) for s in profile.kids_expenses],
        "hasParentsCare": profile.has_parents_care,
        "parentsCareExpenses": [stream_to_dict(s) for s in profile.parents_care_expenses],
    }


def profile_from_dict(data: Dict[str, Any]) -> Profile:
    """
    Create Profile from the flat interchange format.

    Parameters
    ----------
    data : dict
        camelCase (or snake_case) keys; see `firecalc.config.ProfileConfig`.

    Returns
    -------
    Profile

    Raises
    ------
    ExpenseStreamError
        If any expense stream is malformed.
    ValidationError
        If any other field is missing or has the wrong type or range.
    """
    if not isinstance(data, dict):
        raise ValidationError(
            f"Invalid input format: expected an object, got {type(data).__name__}"
        )

    # Streams first so that stream errors are reported as such
    for key in ("additionalRetirementExpenses", "kidsExpenses", "parentsCareExpenses"):
        entries = data.get(key)
        if isinstance(entries, list):
            for entry in entries:
                if isinstance(entry, dict):
                    stream_from_dict(entry)

    try:
        config = ProfileConfig.model_validate(data)
    except PydanticValidationError as e:
        raise ValidationError(f"Invalid profile data: {e}") from e
    return config.to_profile()


def profile_to_json(profile: Profile) -> str:
    """Profile as indented interchange JSON (what an export copies out)."""
    return json.dumps(profile_to_dict(profile), indent=2)


def profile_from_json(text: str) -> Profile:
    """Parse interchange JSON (what an import pastes in)."""
    try:
        data = json.loads(text)
    except json.JSONDecodeError as e:
        raise ValidationError(f"Invalid input format: {e}") from e
    return profile_from_dict(data)


def save_profile(profile: Profile, path: Path) -> None:
    """
    Save Profile to a JSON file.

    Examples
    --------
    >>> save_profile(profile, Path("profiles/me.json"))
    """
    path = Path(path)
    path.parent.mkdir(parents=True, exist_ok=True)
    with open(path, "w") as f:
        json.dump(profile_to_dict(profile), f, indent=2)


def load_profile(path: Path) -> Profile:
    """
    Load Profile from a JSON file.

    Examples
    --------
    >>> profile = load_profile(Path("profiles/me.json"))
    """
    with open(path, "r") as f:
        return profile_from_json(f.read())


# ---------------------------------------------------------------------------
# FireResult Serialization
# ---------------------------------------------------------------------------

def result_to_dict(result: FireResult, include_projections: bool = True) -> FireResultDict:
    """
    Convert FireResult to a JSON-ready dictionary.

    Parameters
    ----------
    result : FireResult
        Result to serialize.
    include_projections : bool
        Whether to include the yearly projection records.
    """
    config: FireResultDict = {
        "schema_version": SCHEMA_VERSION,
        "fireAge": result.fire_age,
        "yearsToFire": result.years_to_fire,
        "finalNetWorth": result.final_net_worth,
        "projectedAnnualExpensesAtFire": result.projected_annual_expenses_at_fire,
        "realInvestmentReturn": result.real_investment_return,
        "nominalReturnRate": result.nominal_return_rate,
        "requiredNetWorth": result.required_net_worth,
        "sustainable": result.sustainable,
        "iterations": result.iterations,
    }

    if include_projections:
        config["yearlyProjections"] = [_projection_to_dict(p) for p in result.yearly_projections]

    return config


def _projection_to_dict(projection) -> ProjectionDict:
    data = projection.to_dict(drop_none=True)
    keys = {
        "age": "age",
        "net_worth": "netWorth",
        "annual_expenses": "annualExpenses",
        "annual_income": "annualIncome",
        "investment_returns": "investmentReturns",
        "net_savings": "netSavings",
        "base_expenses": "baseExpenses",
        "retirement_expenses": "retirementExpenses",
        "kids_expenses": "kidsExpenses",
        "parents_care_expenses": "parentsCareExpenses",
    }
    return {keys[k]: v for k, v in data.items()}


def save_result(result: FireResult, path: Path, include_projections: bool = True) -> None:
    """
    Save FireResult to a JSON file.

    Examples
    --------
    >>> save_result(result, Path("results/fire_result.json"))
    """
    path = Path(path)
    path.parent.mkdir(parents=True, exist_ok=True)
    with open(path, "w") as f:
        json.dump(result_to_dict(result, include_projections), f, indent=2)


def load_result(path: Path) -> Dict[str, Any]:
    """
    Load a saved FireResult as a dictionary.

    Note: Returns a dictionary instead of FireResult because a result is only
    meaningful next to the profile that produced it; re-solve to rebuild one.

    Examples
    --------
    >>> data = load_result(Path("results/fire_result.json"))
    >>> data["fireAge"]
    """
    with open(path, "r") as f:
        config = json.load(f)

    # Check schema version
    schema_version = config.get("schema_version", "0.0.0")
    if schema_version != SCHEMA_VERSION:
        warnings.warn(
            f"Result schema version {schema_version} differs from current "
            f"version {SCHEMA_VERSION}. May encounter compatibility issues.",
            UserWarning,
        )

    return config


def projections_from_dict(records: List[ProjectionDict]) -> pd.DataFrame:
    """Tabulate serialized projection records as a DataFrame indexed by age."""
    if not records:
        return pd.DataFrame()
    return pd.DataFrame(records).set_index("age")
