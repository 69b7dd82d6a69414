"""
FIRE age search for firecalc.

Purpose
-------
Finds the earliest sustainable retirement age for a profile and returns the
projection leading up to and beyond it.

Search Problem
--------------
    min a ∈ [current_age, current_age + 50]
    s.t. simulate(retire at a, through end of life) is sustainable

Oracle: `LifetimeSimulator.run` + `check_sustainability`.
Binary search assumes monotonicity (if retiring at a is sustainable, so is
retiring at a + 1), which holds for profiles with non-negative savings while
working. If no candidate is sustainable the search saturates at the upper
bound and `FireResult.sustainable` is False; no exception is raised.

Key Components
--------------
- FireResult: solved age, summary figures and the projection sequence
- FireAgeSolver: binary/linear search over candidate ages
- calculate_fire_projections: single entry point used by callers

Example
-------
>>> from firecalc import Profile, calculate_fire_projections
>>> result = calculate_fire_projections(profile)
>>> result.years_to_fire == result.fire_age - profile.current_age
True
>>> result.to_frame().loc[result.fire_age, "net_worth"]
"""

from __future__ import annotations

import logging
from dataclasses import dataclass
from typing import Dict, Optional, Tuple

import pandas as pd

from .config import SolverConfig
from .exceptions import ConfigurationError
from .profile import Profile
from .simulation import LifetimeSimulator, YearlyProjection, projections_to_frame
from .sustainability import SustainabilityReport, check_sustainability, required_net_worth

__all__ = [
    "FireResult",
    "FireAgeSolver",
    "calculate_fire_projections",
]

logger = logging.getLogger(__name__)


# ---------------------------------------------------------------------------
# Result
# ---------------------------------------------------------------------------

@dataclass(frozen=True)
class FireResult:
    """
    Outcome of a FIRE calculation.

    Attributes
    ----------
    fire_age : int
        Solved (or saturated) FIRE age.
    years_to_fire : int
        fire_age - current_age.
    final_net_worth : float
        Real net worth at the last projected age.
    projected_annual_expenses_at_fire : float
        Total expenses at the FIRE age (today's dollars).
    real_investment_return : float
        Real return used (the profile's input).
    yearly_projections : Tuple[YearlyProjection, ...]
        Projection from the current age to current_age + search_years.
    sustainable : bool
        False when the search saturated without a sustainable age.
    required_net_worth : float
        Sufficiency threshold at the FIRE age (today's dollars).
    nominal_return_rate : float
        Compounding rate derived from the real return and inflation.
    iterations : int
        Number of oracle simulations run by the search.
    """
    fire_age: int
    years_to_fire: int
    final_net_worth: float
    projected_annual_expenses_at_fire: float
    real_investment_return: float
    yearly_projections: Tuple[YearlyProjection, ...]
    sustainable: bool = True
    required_net_worth: float = 0.0
    nominal_return_rate: float = 0.0
    iterations: int = 0

    def projection_at(self, age: int) -> Optional[YearlyProjection]:
        """Projection for *age*, or None outside the horizon."""
        for p in self.yearly_projections:
            if p.age == age:
                return p
        return None

    def to_frame(self) -> pd.DataFrame:
        """Yearly projections as a DataFrame indexed by age."""
        return projections_to_frame(self.yearly_projections)

    def summary(self) -> Dict[str, float]:
        return {
            "fire_age": self.fire_age,
            "years_to_fire": self.years_to_fire,
            "final_net_worth": self.final_net_worth,
            "projected_annual_expenses_at_fire": self.projected_annual_expenses_at_fire,
            "real_investment_return": self.real_investment_return,
            "nominal_return_rate": self.nominal_return_rate,
            "required_net_worth": self.required_net_worth,
            "sustainable": self.sustainable,
        }


# ---------------------------------------------------------------------------
# Solver
# ---------------------------------------------------------------------------

class FireAgeSolver:
    """
    Search for the minimum sustainable FIRE age.

    Parameters
    ----------
    config : SolverConfig, optional
        Search bounds, horizon, safety margin and strategy. Defaults to
        `SolverConfig()`.

    Examples
    --------
    >>> solver = FireAgeSolver(SolverConfig(search_strategy="linear"))
    >>> result = solver.solve(profile)
    >>> report = solver.check(profile, result.fire_age)
    >>> report.satisfied
    True
    """

    def __init__(self, config: Optional[SolverConfig] = None):
        if config is None:
            config = SolverConfig()
        if not isinstance(config, SolverConfig):
            raise ConfigurationError(
                f"config must be a SolverConfig, got {type(config).__name__}"
            )
        self.config = config

    def _simulator(self, profile: Profile) -> LifetimeSimulator:
        return LifetimeSimulator(
            profile,
            search_years=self.config.search_years,
            end_of_life_age=self.config.end_of_life_age,
        )

    # -------------------- Oracle --------------------
    def check(self, profile: Profile, fire_age: int) -> SustainabilityReport:
        """Simulate retirement at *fire_age* through end of life and check it."""
        sim = self._simulator(profile)
        projections = sim.run(fire_age=fire_age, end_age=sim.end_of_life_age)
        required = required_net_worth(
            projections, fire_age, profile.investment_return, self.config.safety_margin
        )
        return check_sustainability(projections, fire_age, required, self.config.tolerance)

    # -------------------- Search --------------------
    def solve(self, profile: Profile) -> FireResult:
        """
        Find the minimum sustainable FIRE age and project it.

        Parameters
        ----------
        profile : Profile
            Pre-validated profile (see `firecalc.validation`).

        Returns
        -------
        FireResult
            Result at the minimum sustainable age, or at the upper bound with
            ``sustainable=False`` when none exists.
        """
        lower = profile.current_age
        upper = profile.current_age + self.config.search_years

        logger.debug(
            "Searching FIRE age in [%d, %d] (%s)", lower, upper, self.config.search_strategy
        )
        if self.config.search_strategy == "linear":
            fire_age, report, iterations = self._linear_search(profile, lower, upper)
        else:
            fire_age, report, iterations = self._binary_search(profile, lower, upper)

        if report is None or not report.satisfied:
            logger.info(
                "No sustainable FIRE age in [%d, %d]; saturating at %d", lower, upper, upper
            )
            fire_age = upper
            if report is None or report.fire_age != upper:
                report = self.check(profile, upper)
                iterations += 1
        else:
            logger.info("FIRE age %d found after %d simulations", fire_age, iterations)

        return self._build_result(profile, fire_age, report, iterations)

    def _linear_search(
        self, profile: Profile, lower: int, upper: int
    ) -> Tuple[int, Optional[SustainabilityReport], int]:
        """Scan a = lower, lower + 1, ... and stop at the first sustainable age."""
        report = None
        iterations = 0
        for age in range(lower, upper + 1):
            iterations += 1
            report = self.check(profile, age)
            logger.debug("[Iter %d] age=%d sustainable=%s", iterations, age, report.satisfied)
            if report.satisfied:
                return age, report, iterations
        return upper, report, iterations

    def _binary_search(
        self, profile: Profile, lower: int, upper: int
    ) -> Tuple[int, Optional[SustainabilityReport], int]:
        """
        Binary search for the minimum sustainable age.

        Algorithm
        ---------
        1. Initialize: left = lower, right = upper
        2. While left < right:
           a. mid = (left + right) // 2
           b. Check sustainability at mid
           c. If sustainable: right = mid (search lower half)
           d. If not: left = mid + 1 (search upper half)
        3. Verify left if it was never probed
        """
        left, right = lower, upper
        best: Optional[SustainabilityReport] = None
        iterations = 0

        while left < right:
            iterations += 1
            mid = (left + right) // 2
            report = self.check(profile, mid)
            logger.debug(
                "[Iter %d] age=%d range=[%d, %d] sustainable=%s margin=%.2f",
                iterations, mid, left, right, report.satisfied, report.margin,
            )
            if report.satisfied:
                best = report
                right = mid
            else:
                left = mid + 1

        if best is not None and best.fire_age == left:
            return left, best, iterations

        # left == upper and never probed
        iterations += 1
        report = self.check(profile, left)
        return left, report, iterations

    # -------------------- Final run --------------------
    def _build_result(
        self,
        profile: Profile,
        fire_age: int,
        report: SustainabilityReport,
        iterations: int,
    ) -> FireResult:
        sim = self._simulator(profile)
        projections = sim.run(fire_age=fire_age)

        at_fire = next((p for p in projections if p.age == fire_age), None)
        return FireResult(
            fire_age=fire_age,
            years_to_fire=fire_age - profile.current_age,
            final_net_worth=projections[-1].net_worth if projections else profile.current_savings,
            projected_annual_expenses_at_fire=at_fire.annual_expenses if at_fire else 0.0,
            real_investment_return=profile.investment_return,
            yearly_projections=projections,
            sustainable=report.satisfied,
            required_net_worth=report.required_net_worth,
            nominal_return_rate=sim.nominal_rate,
            iterations=iterations,
        )


def calculate_fire_projections(
    profile: Profile,
    config: Optional[SolverConfig] = None,
) -> FireResult:
    """
    Solve the FIRE age for *profile* and project its lifetime trajectory.

    Deterministic and bounded-time; safe to call concurrently with different
    profiles.

    Parameters
    ----------
    profile : Profile
        Pre-validated financial profile.
    config : SolverConfig, optional
        Search parameters (defaults to 50 years searched, end of life at 90,
        20% safety margin, binary search).

    Returns
    -------
    FireResult
    """
    return FireAgeSolver(config).solve(profile)
