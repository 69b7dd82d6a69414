"""
Configuration management module for firecalc.

Purpose
-------
Centralized configuration using Pydantic models for type-safe parameter
management, validation and serialization:

- ExpenseStreamConfig / ProfileConfig: ingestion schema of a financial
  profile. Field names are snake_case in Python and camelCase on the wire, so
  a profile exported by the web calculator loads unchanged.
- SolverConfig: FIRE age search parameters.
- AppSettings: environment-driven application settings (FIRECALC_ prefix).

Design Principles
-----------------
- Type-safe: Pydantic enforces types and validates ranges
- Immutable: Frozen models prevent accidental mutation
- Serializable: model_dump(by_alias=True) yields the interchange format
- Strict at ingestion: malformed streams are rejected here, while the engine
  itself stays total

Example
-------
>>> from firecalc.config import ProfileConfig, SolverConfig
>>> config = ProfileConfig.model_validate({
...     "currentAge": 25, "currentSavings": 10000, "annualIncome": 60000,
...     "annualExpenses": 40000, "investmentReturn": 0.07,
...     "inflationRate": 0.03, "taxRate": 0.25, "careerGrowthRate": 0.03,
...     "careerGrowthSlowdownAge": 45,
... })
>>> profile = config.to_profile()
>>> solver = SolverConfig(search_strategy="linear")
"""

from __future__ import annotations
from typing import Optional, Literal, List
from pathlib import Path

from pydantic import BaseModel, Field, field_validator, model_validator, ConfigDict
from pydantic.alias_generators import to_camel
from pydantic_settings import BaseSettings, SettingsConfigDict

from .constants import (
    DEFAULT_SAFETY_MARGIN,
    DEFAULT_SEARCH_STRATEGY,
    DEFAULT_SEARCH_YEARS,
    DEFAULT_TOLERANCE,
    END_OF_LIFE_AGE,
    MAX_AGE,
)
from .expenses import ExpenseStream
from .profile import Profile

__all__ = [
    "ExpenseStreamConfig",
    "ProfileConfig",
    "SolverConfig",
    "AppSettings",
]


_WIRE_CONFIG = ConfigDict(
    frozen=True,
    extra="forbid",
    alias_generator=to_camel,
    populate_by_name=True,
)


# ---------------------------------------------------------------------------
# Profile Configuration
# ---------------------------------------------------------------------------

class ExpenseStreamConfig(BaseModel):
    """
    Configuration for one recurring expense stream.

    Attributes
    ----------
    id : str
        Stream identifier.
    name : str
        Display name.
    amount : float
        Annual amount in today's dollars.
    start_age : int
        First paid age (inclusive). Wire name ``startAge``.
    end_age : int, optional
        Last paid age (inclusive). Wire name ``endAge``; omitted = indefinite.

    Examples
    --------
    >>> ExpenseStreamConfig.model_validate(
    ...     {"id": "kid1", "name": "Child 1", "amount": 10000,
    ...      "startAge": 30, "endAge": 48}
    ... )
    """

    model_config = _WIRE_CONFIG

    id: str = Field(
        min_length=1,
        max_length=100,
        description="Stream identifier"
    )
    name: str = Field(
        default="",
        max_length=200,
        description="Display name"
    )
    amount: float = Field(
        ge=0,
        description="Annual amount in today's dollars"
    )
    start_age: int = Field(
        ge=0,
        le=MAX_AGE,
        description="First paid age (inclusive)"
    )
    end_age: Optional[int] = Field(
        default=None,
        ge=0,
        le=MAX_AGE,
        description="Last paid age (inclusive); None = indefinite"
    )

    @model_validator(mode="after")
    def validate_age_window(self):
        """Reject streams that end before they start."""
        if self.end_age is not None and self.end_age < self.start_age:
            raise ValueError(
                f"endAge ({self.end_age}) must be >= startAge ({self.start_age})"
            )
        return self

    def to_stream(self) -> ExpenseStream:
        return ExpenseStream(
            id=self.id,
            name=self.name,
            amount=self.amount,
            start_age=self.start_age,
            end_age=self.end_age,
        )


class ProfileConfig(BaseModel):
    """
    Ingestion schema of a financial profile.

    Mirrors `firecalc.profile.Profile` field for field. On the wire the keys
    are camelCase (``currentAge``, ``hasKidsExpenses``, ...); in Python either
    spelling is accepted.

    Only type and range checks live here. Relational guards such as
    "expenses must not exceed income" are caller-side checks in
    `firecalc.validation`.
    """

    model_config = _WIRE_CONFIG

    current_age: int = Field(
        ge=0,
        le=MAX_AGE,
        description="Age today"
    )
    current_savings: float = Field(
        ge=0,
        description="Investable balance today"
    )
    current_liabilities: float = Field(
        default=0.0,
        ge=0,
        description="Debts today (reported, not deducted)"
    )
    annual_income: float = Field(
        ge=0,
        description="Gross annual income today"
    )
    annual_expenses: float = Field(
        ge=0,
        description="Base annual expenses today"
    )
    investment_return: float = Field(
        ge=-0.5,
        le=0.5,
        description="Real annual investment return (e.g., 0.07 for 7%)"
    )
    inflation_rate: float = Field(
        ge=0,
        le=0.5,
        description="Annual inflation rate"
    )
    tax_rate: float = Field(
        ge=0,
        le=1,
        description="Flat effective tax rate"
    )
    career_growth_rate: float = Field(
        ge=-0.5,
        le=0.5,
        description="Annual income growth until the slowdown age"
    )
    career_growth_slowdown_age: int = Field(
        ge=0,
        le=MAX_AGE,
        description="Age after which income only tracks inflation"
    )
    additional_retirement_expenses: List[ExpenseStreamConfig] = Field(
        default_factory=list,
        description="Always-enabled additional expenses"
    )
    has_kids_expenses: bool = Field(
        default=False,
        description="Enable kids expenses"
    )
    kids_expenses: List[ExpenseStreamConfig] = Field(
        default_factory=list,
        description="Kids expense streams"
    )
    has_parents_care: bool = Field(
        default=False,
        description="Enable parents care expenses"
    )
    parents_care_expenses: List[ExpenseStreamConfig] = Field(
        default_factory=list,
        description="Parents care expense streams"
    )

    @field_validator("additional_retirement_expenses", "kids_expenses", "parents_care_expenses", mode="before")
    @classmethod
    def validate_stream_list(cls, v):
        """Treat an explicit null list as empty."""
        return [] if v is None else v

    def to_profile(self) -> Profile:
        """Build the immutable engine input."""
        return Profile(
            current_age=self.current_age,
            current_savings=self.current_savings,
            current_liabilities=self.current_liabilities,
            annual_income=self.annual_income,
            annual_expenses=self.annual_expenses,
            investment_return=self.investment_return,
            inflation_rate=self.inflation_rate,
            tax_rate=self.tax_rate,
            career_growth_rate=self.career_growth_rate,
            career_growth_slowdown_age=self.career_growth_slowdown_age,
            additional_retirement_expenses=tuple(s.to_stream() for s in self.additional_retirement_expenses),
            has_kids_expenses=self.has_kids_expenses,
            kids_expenses=tuple(s.to_stream() for s in self.kids_expenses),
            has_parents_care=self.has_parents_care,
            parents_care_expenses=tuple(s.to_stream() for s in self.parents_care_expenses),
        )


# ---------------------------------------------------------------------------
# Solver Configuration
# ---------------------------------------------------------------------------

class SolverConfig(BaseModel):
    """
    Configuration for the FIRE age search.

    Attributes
    ----------
    search_years : int
        Candidate ages are current_age .. current_age + search_years (1-100).
    end_of_life_age : int
        Age through which sustainability is checked.
    safety_margin : float
        Multiplier of the sufficiency rule (>= 1.0).
    search_strategy : str
        "binary" (default) or "linear".
    tolerance : float
        Allowed rounding decline in the non-decreasing net worth rule.

    Examples
    --------
    >>> config = SolverConfig(safety_margin=1.5)
    >>> config.search_years
    50
    """

    model_config = ConfigDict(frozen=True, extra="forbid")

    search_years: int = Field(
        default=DEFAULT_SEARCH_YEARS,
        ge=1,
        le=100,
        description="Years searched after the current age"
    )
    end_of_life_age: int = Field(
        default=END_OF_LIFE_AGE,
        ge=1,
        le=MAX_AGE,
        description="End-of-life age for sustainability checks"
    )
    safety_margin: float = Field(
        default=DEFAULT_SAFETY_MARGIN,
        ge=1.0,
        le=5.0,
        description="Safety margin over break-even net worth"
    )
    search_strategy: Literal["binary", "linear"] = Field(
        default=DEFAULT_SEARCH_STRATEGY,
        description="FIRE age search strategy"
    )
    tolerance: float = Field(
        default=DEFAULT_TOLERANCE,
        ge=0,
        le=1.0,
        description="Net worth decline tolerance (today's dollars)"
    )


# ---------------------------------------------------------------------------
# Application Settings (Environment Variables)
# ---------------------------------------------------------------------------

class AppSettings(BaseSettings):
    """
    Global application settings loaded from environment variables.

    Supports .env files for local development. Environment variables
    should be prefixed with FIRECALC_ (e.g., FIRECALC_LOG_LEVEL=DEBUG).

    Attributes
    ----------
    debug : bool
        Enable debug mode (forces DEBUG logging).
    log_level : str
        Logging level: "DEBUG", "INFO", "WARNING", "ERROR".
    output_dir : Path
        Default directory for CLI outputs.

    Examples
    --------
    >>> settings = AppSettings()
    >>> settings.log_level
    'WARNING'
    """

    model_config = SettingsConfigDict(
        env_prefix="FIRECALC_",
        env_file=".env",
        env_file_encoding="utf-8",
        extra="ignore",
    )

    debug: bool = Field(
        default=False,
        description="Enable debug mode"
    )
    log_level: Literal["DEBUG", "INFO", "WARNING", "ERROR"] = Field(
        default="WARNING",
        description="Logging level"
    )
    output_dir: Path = Field(
        default=Path("results"),
        description="Default directory for CLI outputs"
    )

    @property
    def effective_log_level(self) -> str:
        return "DEBUG" if self.debug else self.log_level
