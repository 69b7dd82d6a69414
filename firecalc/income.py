"""
Income modeling module for firecalc.

Purpose
-------
Projects employment income across a career. Income starts from today's
annual salary and follows two regimes separated by a hard switch at the
career-growth slowdown age:

- Growth phase (current age → slowdown age): compounds at the career growth
  rate (raises, promotions; a nominal rate).
- Stagnant phase (slowdown age → retirement): compounds at the inflation rate
  only, so purchasing power is held flat.

From the retirement (FIRE) age onward income is zero; there is no partial
income in the year of retirement.

    I(age) = base * (1 + g) ** years_growing * (1 + π) ** years_stagnant

Key components
--------------
- income_for_age: pure function returning nominal income at an age.
- CareerIncome: frozen facade bundling a profile's income parameters.

Example
-------
>>> from firecalc.income import CareerIncome
>>> career = CareerIncome(base=60_000, current_age=25, career_growth_rate=0.05,
...                       slowdown_age=45, inflation_rate=0.03)
>>> career.nominal(45) > career.nominal(25)
True
>>> career.nominal(50, retirement_age=50)
0.0
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Optional

from .utils import check_non_negative, to_today

__all__ = [
    "income_for_age",
    "CareerIncome",
]


def income_for_age(
    base_income: float,
    current_age: int,
    target_age: int,
    career_growth_rate: float,
    slowdown_age: int,
    inflation_rate: float,
    retirement_age: Optional[int] = None,
) -> float:
    """
    Nominal annual income at *target_age*.

    Parameters
    ----------
    base_income : float
        Annual income today (today's dollars).
    current_age : int
        Age at which `base_income` is earned.
    target_age : int
        Age to project to (>= current_age).
    career_growth_rate : float
        Annual growth rate while the career is growing (decimal).
    slowdown_age : int
        Age at which real growth stops and income only tracks inflation.
    inflation_rate : float
        Annual inflation rate (decimal).
    retirement_age : Optional[int], default None
        Hypothesised retirement age. None means not retired (used while a
        retirement age is still being searched for).

    Returns
    -------
    float
        Nominal income, 0.0 at and after `retirement_age`.

    Notes
    -----
    A slowdown age at or before the current age collapses the growth phase
    to zero years: income grows with inflation only from the first year.
    """
    if retirement_age is not None and target_age >= retirement_age:
        return 0.0

    elapsed = max(0, target_age - current_age)
    years_growing = max(0, min(elapsed, slowdown_age - current_age))
    years_stagnant = max(0, target_age - max(slowdown_age, current_age))

    income = base_income * (1.0 + career_growth_rate) ** years_growing
    return income * (1.0 + inflation_rate) ** years_stagnant


@dataclass(frozen=True)
class CareerIncome:
    """
    Career income parameters of a profile.

    Parameters
    ----------
    base : float
        Annual income today (today's dollars). Must be non-negative.
    current_age : int
        Age at which `base` is earned.
    career_growth_rate : float
        Annual growth rate during the growth phase.
    slowdown_age : int
        Switch from career growth to inflation-only growth.
    inflation_rate : float
        Annual inflation rate.
    tax_rate : float, default 0.0
        Flat effective tax rate applied to income.
    """
    base: float
    current_age: int
    career_growth_rate: float
    slowdown_age: int
    inflation_rate: float
    tax_rate: float = 0.0

    def __post_init__(self) -> None:
        check_non_negative("base", self.base)

    def nominal(self, age: int, retirement_age: Optional[int] = None) -> float:
        """Nominal gross income at *age*."""
        return income_for_age(
            self.base,
            self.current_age,
            age,
            self.career_growth_rate,
            self.slowdown_age,
            self.inflation_rate,
            retirement_age,
        )

    def after_tax(self, age: int, retirement_age: Optional[int] = None) -> float:
        """Nominal income net of the flat effective tax rate."""
        return self.nominal(age, retirement_age) * (1.0 - self.tax_rate)

    def real(self, age: int, retirement_age: Optional[int] = None) -> float:
        """Gross income at *age* expressed in today's dollars."""
        return to_today(self.nominal(age, retirement_age), self.inflation_rate, age - self.current_age)
