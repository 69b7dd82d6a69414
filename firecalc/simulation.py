"""Lifetime simulation for firecalc

Drives a year-by-year loop from the profile's current age to a horizon,
threading one running nominal net-worth balance through income, expenses and
investment returns, and emits one `YearlyProjection` (today's dollars) per
simulated age.

Timing convention
-----------------
For the year at age ``a`` (``y = a - current_age`` years from today):

- ``net_worth`` is the balance held at the start of the year, so the first
  projection reports exactly ``current_savings``;
- income, expenses and net savings are priced at the price level of age ``a``
  and converted back to today's dollars at ``y`` years;
- the balance earns ``balance * nominal_rate`` with the nominal rate derived
  from the real return by the Fisher relation;
- ``investment_returns`` is the real gain of the year, i.e. the nominal return
  net of inflation's erosion of the starting balance
  (``real net worth * investment_return``).

    B_{y+1} = B_y * (1 + n) + [I_y * (1 - τ) - E_y]   while a < fire_age
    B_{y+1} = B_y * (1 + n) - E_y                     once  a >= fire_age

Negative balances are valid intermediate states and never raise.

Typical usage
-------------
>>> sim = LifetimeSimulator(profile)
>>> projections = sim.run(fire_age=55)
>>> projections[0].net_worth == profile.current_savings
True
>>> frame = projections_to_frame(projections)
"""
from __future__ import annotations

import logging
from dataclasses import asdict, dataclass
from typing import Dict, Iterable, Optional, Tuple

import pandas as pd

from .constants import DEFAULT_SEARCH_YEARS, END_OF_LIFE_AGE
from .profile import Profile
from .utils import nominal_return_rate, to_nominal, to_today

__all__ = [
    "YearlyProjection",
    "LifetimeSimulator",
    "projections_to_frame",
]

logger = logging.getLogger(__name__)

# Expense category → YearlyProjection breakdown field
_BREAKDOWN_FIELDS: Dict[str, str] = {
    "retirement": "retirement_expenses",
    "kids": "kids_expenses",
    "parents_care": "parents_care_expenses",
}


# ---------------------------------------------------------------------------
# Results
# ---------------------------------------------------------------------------

@dataclass(frozen=True)
class YearlyProjection:
    """One simulated year, all money in today's dollars.

    Category breakdown fields are None when the category is disabled.
    """
    age: int
    net_worth: float
    annual_expenses: float
    annual_income: float
    investment_returns: float
    net_savings: float
    base_expenses: float
    retirement_expenses: Optional[float] = None
    kids_expenses: Optional[float] = None
    parents_care_expenses: Optional[float] = None

    def to_dict(self, *, drop_none: bool = True) -> Dict[str, Optional[float]]:
        data = asdict(self)
        if drop_none:
            data = {k: v for k, v in data.items() if v is not None}
        return data


def projections_to_frame(projections: Iterable[YearlyProjection]) -> pd.DataFrame:
    """Tabulate projections as a DataFrame indexed by age.

    Disabled categories appear as NaN columns so that frames of different
    profiles share one schema.
    """
    rows = [p.to_dict(drop_none=False) for p in projections]
    if not rows:
        columns = [f for f in YearlyProjection.__dataclass_fields__ if f != "age"]
        return pd.DataFrame(columns=columns, index=pd.Index([], name="age"), dtype=float)
    return pd.DataFrame(rows).set_index("age").astype(float)


# ---------------------------------------------------------------------------
# Simulator
# ---------------------------------------------------------------------------

class LifetimeSimulator:
    """Year-by-year lifetime projection for one profile.

    The simulator holds only the (immutable) profile and horizon settings;
    every call to `run` owns its own running balance, so one simulator can be
    shared by concurrent callers.

    Parameters
    ----------
    profile : Profile
        Input profile (never mutated).
    search_years : int, default 50
        Years after the current age covered by the reporting horizon.
    end_of_life_age : int, default 90
        Age through which sustainability is checked. Extended to the
        reporting horizon when the latter is later.
    """

    def __init__(
        self,
        profile: Profile,
        search_years: int = DEFAULT_SEARCH_YEARS,
        end_of_life_age: int = END_OF_LIFE_AGE,
    ):
        if search_years < 0:
            raise ValueError(f"search_years must be non-negative, got {search_years}.")
        self.profile = profile
        self.search_years = int(search_years)
        self._end_of_life_age = int(end_of_life_age)
        self.nominal_rate = nominal_return_rate(profile.investment_return, profile.inflation_rate)

    # -------------------- Horizons --------------------
    @property
    def projection_end_age(self) -> int:
        """Last age of the reported projection (current age + search years)."""
        return self.profile.current_age + self.search_years

    @property
    def end_of_life_age(self) -> int:
        """Last age simulated when checking sustainability."""
        return max(self._end_of_life_age, self.projection_end_age)

    # -------------------- Simulation --------------------
    def run(
        self,
        fire_age: Optional[int] = None,
        end_age: Optional[int] = None,
    ) -> Tuple[YearlyProjection, ...]:
        """
        Simulate from the current age through *end_age*.

        Parameters
        ----------
        fire_age : Optional[int], default None
            Candidate retirement age. Income stops and the year becomes a pure
            drawdown from this age on. None simulates a full working life.
        end_age : Optional[int], default None
            Last simulated age (inclusive). Defaults to `projection_end_age`.

        Returns
        -------
        Tuple[YearlyProjection, ...]
            One projection per age, ordered by age. Empty when *end_age*
            precedes the current age.
        """
        p = self.profile
        if end_age is None:
            end_age = self.projection_end_age

        inflation = p.inflation_rate
        career = p.career
        categories = p.expense_categories

        balance = float(p.current_savings)
        projections = []

        for age in range(p.current_age, end_age + 1):
            years = age - p.current_age
            retired = fire_age is not None and age >= fire_age

            # Nominal flows for this age
            income = career.nominal(age, fire_age)
            base = to_nominal(p.annual_expenses, inflation, years)
            by_category = {
                name: (cat.nominal_total(age, p.current_age, inflation) if cat.enabled else None)
                for name, cat in categories.items()
            }
            expenses = base + sum(v for v in by_category.values() if v is not None)

            investment_return = balance * self.nominal_rate
            if retired:
                net_cash_flow = -expenses
            else:
                net_cash_flow = income * (1.0 - p.tax_rate) - expenses

            start_balance = balance
            balance = balance + investment_return + net_cash_flow

            breakdown = {
                _BREAKDOWN_FIELDS[name]: (None if v is None else to_today(v, inflation, years))
                for name, v in by_category.items()
            }
            projections.append(
                YearlyProjection(
                    age=age,
                    net_worth=to_today(start_balance, inflation, years),
                    annual_expenses=to_today(expenses, inflation, years),
                    annual_income=to_today(income, inflation, years),
                    investment_returns=(
                        to_today(start_balance + investment_return, inflation, years + 1)
                        - to_today(start_balance, inflation, years)
                    ),
                    net_savings=to_today(net_cash_flow, inflation, years),
                    base_expenses=to_today(base, inflation, years),
                    **breakdown,
                )
            )

        logger.debug(
            "Simulated ages %d-%d (fire_age=%s): closing nominal balance %.2f",
            p.current_age, end_age, fire_age, balance,
        )
        return tuple(projections)
