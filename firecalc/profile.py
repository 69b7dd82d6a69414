"""
Financial profile for firecalc.

Purpose
-------
`Profile` is the immutable input of one FIRE calculation: the person's age,
balances, income, base expenses, economic assumptions and the three
independent expense categories. The engine reads it and never mutates it.

The optional expense categories are always-present tuples guarded by a
boolean flag (`has_kids_expenses`, `has_parents_care`); additional retirement
expenses are always enabled. A disabled category keeps its streams but
contributes nothing.

Example
-------
>>> from firecalc.profile import Profile
>>> from firecalc.expenses import ExpenseStream
>>> profile = Profile(
...     current_age=25, current_savings=10_000, annual_income=60_000,
...     annual_expenses=40_000, investment_return=0.07, inflation_rate=0.03,
...     tax_rate=0.25, career_growth_rate=0.03, career_growth_slowdown_age=45,
...     has_kids_expenses=True,
...     kids_expenses=(ExpenseStream("kid1", "Child 1", 10_000, 30, 48),),
... )
>>> profile.net_worth
10000.0
"""

from __future__ import annotations

from dataclasses import dataclass, field, replace
from typing import Dict, Tuple

from .expenses import ExpenseCategory, ExpenseStream
from .income import CareerIncome

__all__ = ["Profile"]


@dataclass(frozen=True)
class Profile:
    """
    Immutable financial profile consumed by the projection engine.

    Parameters
    ----------
    current_age : int
        Age today; the time origin of every projection.
    current_savings : float
        Investable balance today. Seeds the simulated net worth.
    annual_income : float
        Gross annual income today (today's dollars).
    annual_expenses : float
        Base annual living expenses (today's dollars).
    investment_return : float
        Real (inflation-adjusted) annual investment return, decimal.
    inflation_rate : float
        Annual inflation rate, decimal.
    tax_rate : float
        Flat effective tax rate on income, decimal.
    career_growth_rate : float
        Annual income growth until the slowdown age, decimal.
    career_growth_slowdown_age : int
        Age after which income only keeps pace with inflation.
    current_liabilities : float, default 0.0
        Debts today. Reported in the starting net worth, never deducted
        from the simulated investable balance.
    additional_retirement_expenses : Tuple[ExpenseStream, ...]
        Always-enabled streams (e.g. travel in retirement).
    has_kids_expenses : bool, default False
        Enables `kids_expenses`.
    kids_expenses : Tuple[ExpenseStream, ...]
    has_parents_care : bool, default False
        Enables `parents_care_expenses`.
    parents_care_expenses : Tuple[ExpenseStream, ...]
    """
    current_age: int
    current_savings: float
    annual_income: float
    annual_expenses: float
    investment_return: float
    inflation_rate: float
    tax_rate: float
    career_growth_rate: float
    career_growth_slowdown_age: int
    current_liabilities: float = 0.0
    additional_retirement_expenses: Tuple[ExpenseStream, ...] = field(default_factory=tuple)
    has_kids_expenses: bool = False
    kids_expenses: Tuple[ExpenseStream, ...] = field(default_factory=tuple)
    has_parents_care: bool = False
    parents_care_expenses: Tuple[ExpenseStream, ...] = field(default_factory=tuple)

    def __post_init__(self) -> None:
        # Lists are accepted for convenience; stored as tuples.
        for name in ("additional_retirement_expenses", "kids_expenses", "parents_care_expenses"):
            object.__setattr__(self, name, tuple(getattr(self, name) or ()))

    # -------------------- Derived views --------------------
    @property
    def net_worth(self) -> float:
        """Starting net worth: savings minus liabilities."""
        return self.current_savings - self.current_liabilities

    @property
    def career(self) -> CareerIncome:
        """Income parameters bundled for projection."""
        return CareerIncome(
            base=self.annual_income,
            current_age=self.current_age,
            career_growth_rate=self.career_growth_rate,
            slowdown_age=self.career_growth_slowdown_age,
            inflation_rate=self.inflation_rate,
            tax_rate=self.tax_rate,
        )

    @property
    def expense_categories(self) -> Dict[str, ExpenseCategory]:
        """The three expense categories keyed by name, with their flags."""
        return {
            "retirement": ExpenseCategory(
                "retirement", self.additional_retirement_expenses, enabled=True
            ),
            "kids": ExpenseCategory(
                "kids", self.kids_expenses, enabled=self.has_kids_expenses
            ),
            "parents_care": ExpenseCategory(
                "parents_care", self.parents_care_expenses, enabled=self.has_parents_care
            ),
        }

    def with_changes(self, **changes) -> Profile:
        """Return a copy with the given fields replaced."""
        return replace(self, **changes)
