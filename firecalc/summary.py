"""
Result summaries for firecalc.

Collects the figures that explain a FIRE result: where the person starts,
what they must accumulate, and what retirement costs. Consumed by the CLI
report and by any front end that narrates a result.

Example
-------
>>> result = calculate_fire_projections(profile)
>>> s = summarize(profile, result)
>>> s.starting_net_worth == profile.current_savings - profile.current_liabilities
True
>>> s.to_frame()
"""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Dict, Tuple

import numpy as np
import pandas as pd

from .expenses import ExpenseStream
from .profile import Profile
from .solver import FireResult

__all__ = ["FireSummary", "summarize"]


@dataclass(frozen=True)
class FireSummary:
    """Headline figures of a FIRE result (money in today's dollars)."""
    current_age: int
    fire_age: int
    years_to_fire: int
    sustainable: bool
    starting_net_worth: float
    net_worth_at_fire: float
    required_net_worth: float
    final_net_worth: float
    expenses_at_fire: float
    peak_expenses_after_fire: float
    total_income_until_fire: float
    total_investment_returns: float
    real_return: float
    nominal_return_rate: float
    inflation_rate: float
    streams_starting_now: Tuple[Tuple[str, ExpenseStream], ...] = field(default_factory=tuple)

    def to_dict(self) -> Dict[str, float]:
        return {
            "current_age": self.current_age,
            "fire_age": self.fire_age,
            "years_to_fire": self.years_to_fire,
            "sustainable": self.sustainable,
            "starting_net_worth": self.starting_net_worth,
            "net_worth_at_fire": self.net_worth_at_fire,
            "required_net_worth": self.required_net_worth,
            "final_net_worth": self.final_net_worth,
            "expenses_at_fire": self.expenses_at_fire,
            "peak_expenses_after_fire": self.peak_expenses_after_fire,
            "total_income_until_fire": self.total_income_until_fire,
            "total_investment_returns": self.total_investment_returns,
            "real_return": self.real_return,
            "nominal_return_rate": self.nominal_return_rate,
            "inflation_rate": self.inflation_rate,
        }

    def to_frame(self) -> pd.DataFrame:
        """Two-column (metric, value) table."""
        return pd.DataFrame(
            list(self.to_dict().items()), columns=["metric", "value"]
        ).set_index("metric")


def summarize(profile: Profile, result: FireResult) -> FireSummary:
    """Build the `FireSummary` of *result* for *profile*."""
    frame = result.to_frame()
    ages = frame.index.to_numpy()
    working = ages < result.fire_age
    retired = ~working

    at_fire = result.projection_at(result.fire_age)
    peak = float(frame.loc[retired, "annual_expenses"].max()) if retired.any() else 0.0

    starting = tuple(
        (name, stream)
        for name, category in profile.expense_categories.items()
        for stream in category.starting_at(profile.current_age)
    )

    return FireSummary(
        current_age=profile.current_age,
        fire_age=result.fire_age,
        years_to_fire=result.years_to_fire,
        sustainable=result.sustainable,
        starting_net_worth=profile.net_worth,
        net_worth_at_fire=at_fire.net_worth if at_fire else float("nan"),
        required_net_worth=result.required_net_worth,
        final_net_worth=result.final_net_worth,
        expenses_at_fire=result.projected_annual_expenses_at_fire,
        peak_expenses_after_fire=peak,
        total_income_until_fire=float(np.sum(frame.loc[working, "annual_income"].to_numpy())),
        total_investment_returns=float(np.sum(frame["investment_returns"].to_numpy())),
        real_return=result.real_investment_return,
        nominal_return_rate=result.nominal_return_rate,
        inflation_rate=profile.inflation_rate,
        streams_starting_now=starting,
    )
