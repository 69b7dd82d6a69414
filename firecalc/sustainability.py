"""
Sustainability checks for firecalc.

Purpose
-------
Decides whether retiring at a candidate FIRE age is sustainable, given a
completed projection that runs through the end-of-life horizon. Two rules
must both hold:

1. Sufficiency: real net worth at the FIRE age is at least the required net
   worth

       required = max_{a >= fire_age} E_a / r_real * safety_margin

   i.e. a 20% margin (by default) over the balance whose real return alone
   covers the single most expensive year from the FIRE age onward.

2. Monotonicity: for every age strictly after the FIRE age, real net worth is
   non-decreasing. Principal is never allowed to erode.

The checker is a pure function of the projection; it never simulates.

Example
-------
>>> projections = LifetimeSimulator(profile).run(fire_age=60, end_age=90)
>>> required = required_net_worth(projections, 60, profile.investment_return)
>>> report = check_sustainability(projections, 60, required)
>>> report.satisfied
True
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Optional, Sequence

import numpy as np

from .constants import DEFAULT_SAFETY_MARGIN, DEFAULT_TOLERANCE
from .simulation import YearlyProjection

__all__ = [
    "SustainabilityReport",
    "peak_expenses",
    "required_net_worth",
    "check_sustainability",
]


@dataclass(frozen=True)
class SustainabilityReport:
    """
    Outcome of checking one candidate FIRE age.

    Attributes
    ----------
    fire_age : int
        Candidate retirement age.
    required_net_worth : float
        Threshold of the sufficiency rule (today's dollars).
    net_worth_at_fire : float
        Real net worth at the candidate age (NaN if outside the projection).
    sufficient : bool
        Sufficiency rule holds.
    monotonic : bool
        Monotonicity rule holds.
    first_decline_age : Optional[int]
        First age after the FIRE age whose net worth fell, if any.
    """
    fire_age: int
    required_net_worth: float
    net_worth_at_fire: float
    sufficient: bool
    monotonic: bool
    first_decline_age: Optional[int] = None

    @property
    def satisfied(self) -> bool:
        """Both rules hold."""
        return self.sufficient and self.monotonic

    @property
    def margin(self) -> float:
        """Net worth at the FIRE age minus the requirement (positive → sufficient)."""
        return self.net_worth_at_fire - self.required_net_worth

    def __bool__(self) -> bool:
        return self.satisfied


def peak_expenses(projections: Sequence[YearlyProjection], fire_age: int) -> float:
    """Largest annual expense (today's dollars) at or after *fire_age*.

    Returns 0.0 when no projected year reaches *fire_age*.
    """
    expenses = [p.annual_expenses for p in projections if p.age >= fire_age]
    if not expenses:
        return 0.0
    return float(np.max(expenses))


def required_net_worth(
    projections: Sequence[YearlyProjection],
    fire_age: int,
    real_return: float,
    safety_margin: float = DEFAULT_SAFETY_MARGIN,
) -> float:
    """
    Net worth required at *fire_age* for the sufficiency rule.

    Parameters
    ----------
    projections : Sequence[YearlyProjection]
        Projection running through the end-of-life horizon.
    fire_age : int
        Candidate retirement age.
    real_return : float
        Real investment return (decimal).
    safety_margin : float, default 1.2
        Multiplier over the break-even balance.

    Returns
    -------
    float
        ``peak / real_return * safety_margin``. With a non-positive real
        return no finite balance qualifies: returns ``inf`` (or 0.0 when
        there is nothing to fund).
    """
    peak = peak_expenses(projections, fire_age)
    if peak <= 0:
        return 0.0
    if real_return <= 0:
        return float("inf")
    return peak / real_return * safety_margin


def check_sustainability(
    projections: Sequence[YearlyProjection],
    fire_age: int,
    required: float,
    tolerance: float = DEFAULT_TOLERANCE,
) -> SustainabilityReport:
    """
    Check both sustainability rules for a candidate FIRE age.

    Parameters
    ----------
    projections : Sequence[YearlyProjection]
        Projection for a run that retired at *fire_age*, ordered by age.
    fire_age : int
        Candidate retirement age.
    required : float
        Required net worth at *fire_age* (see `required_net_worth`).
    tolerance : float, default 1e-6
        Allowed year-over-year decline (today's dollars) attributed to
        floating-point rounding.

    Returns
    -------
    SustainabilityReport
        A candidate age outside the projection is reported insufficient.
    """
    ages = np.array([p.age for p in projections], dtype=int)
    net_worth = np.array([p.net_worth for p in projections], dtype=float)

    at_fire = np.flatnonzero(ages == fire_age)
    if at_fire.size == 0:
        return SustainabilityReport(
            fire_age=fire_age,
            required_net_worth=required,
            net_worth_at_fire=float("nan"),
            sufficient=False,
            monotonic=False,
        )

    idx = int(at_fire[0])
    nw_fire = float(net_worth[idx])
    sufficient = bool(nw_fire >= required)

    # Year-over-year changes strictly after the FIRE age
    changes = np.diff(net_worth[idx:])
    declines = np.flatnonzero(changes < -tolerance)
    monotonic = declines.size == 0
    first_decline = None if monotonic else int(ages[idx + 1 + declines[0]])

    return SustainabilityReport(
        fire_age=fire_age,
        required_net_worth=required,
        net_worth_at_fire=nw_fire,
        sufficient=sufficient,
        monotonic=bool(monotonic),
        first_decline_age=first_decline,
    )
