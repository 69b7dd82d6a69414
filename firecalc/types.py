"""
Type definitions for firecalc.

Purpose
-------
TypedDict definitions of the JSON interchange records read and written by
`firecalc.serialization`. Keys are the camelCase wire names.

Usage
-----
>>> from firecalc.types import ExpenseStreamDict
>>> kid: ExpenseStreamDict = {
...     "id": "kid1", "name": "Child 1", "amount": 10000,
...     "startAge": 30, "endAge": 48,
... }

Type Definitions
----------------
ExpenseStreamDict
    One expense stream: {"id", "name", "amount", "startAge", "endAge"?}

ProfileDict
    Flat profile export with three lists of ExpenseStreamDict

ProjectionDict
    One yearly projection record; category keys present only when enabled

FireResultDict
    Saved FIRE result (summary figures + optional projections)
"""

from typing import List
from typing_extensions import TypedDict, NotRequired

__all__ = [
    "ExpenseStreamDict",
    "ProfileDict",
    "ProjectionDict",
    "FireResultDict",
]


class ExpenseStreamDict(TypedDict):
    """
    Interchange form of `firecalc.expenses.ExpenseStream`.

    ``endAge`` is omitted for a stream that lasts indefinitely.
    """

    id: str
    name: str
    amount: float
    startAge: int
    endAge: NotRequired[int]


class ProfileDict(TypedDict):
    """Interchange form of `firecalc.profile.Profile`."""

    currentAge: int
    currentSavings: float
    currentLiabilities: float
    annualIncome: float
    annualExpenses: float
    investmentReturn: float
    inflationRate: float
    taxRate: float
    careerGrowthRate: float
    careerGrowthSlowdownAge: int
    additionalRetirementExpenses: List[ExpenseStreamDict]
    hasKidsExpenses: bool
    kidsExpenses: List[ExpenseStreamDict]
    hasParentsCare: bool
    parentsCareExpenses: List[ExpenseStreamDict]


class ProjectionDict(TypedDict):
    """
    One serialized `firecalc.simulation.YearlyProjection` (today's dollars).
    """

    age: int
    netWorth: float
    annualExpenses: float
    annualIncome: float
    investmentReturns: float
    netSavings: float
    baseExpenses: float
    retirementExpenses: NotRequired[float]
    kidsExpenses: NotRequired[float]
    parentsCareExpenses: NotRequired[float]


class FireResultDict(TypedDict):
    """Saved `firecalc.solver.FireResult`."""

    schema_version: str
    fireAge: int
    yearsToFire: int
    finalNetWorth: float
    projectedAnnualExpensesAtFire: float
    realInvestmentReturn: float
    nominalReturnRate: float
    requiredNetWorth: float
    sustainable: bool
    iterations: int
    yearlyProjections: NotRequired[List[ProjectionDict]]
