"""
firecalc: FIRE (Financial Independence, Retire Early) calculator

Finds the earliest age at which a person can stop working and live off
their investments, and projects net worth, income and expenses year by year
in today's dollars.

Modules
-------
- expenses       : Expense streams, categories and yearly totals
- income         : Career income with growth and slowdown phases
- profile        : Immutable financial profile
- simulation     : Year-by-year lifetime projection
- sustainability : Sufficiency and non-decreasing net worth rules
- solver         : FIRE age search (calculate_fire_projections)
- summary        : Headline figures of a result
- config         : Pydantic ingestion schemas and settings
- validation     : Caller-side profile guards
- serialization  : JSON import/export
- utils          : Value/rate conversions and formatters

"""

from .expenses import ExpenseStream, ExpenseCategory, total_expenses_for_age
from .income import CareerIncome, income_for_age
from .profile import Profile
from .simulation import LifetimeSimulator, YearlyProjection
from .solver import FireAgeSolver, FireResult, calculate_fire_projections
from .config import SolverConfig
from . import utils

__version__ = "0.1.0"

__all__ = [
    "ExpenseStream",
    "ExpenseCategory",
    "total_expenses_for_age",
    "CareerIncome",
    "income_for_age",
    "Profile",
    "LifetimeSimulator",
    "YearlyProjection",
    "FireAgeSolver",
    "FireResult",
    "calculate_fire_projections",
    "SolverConfig",
    "utils",
]
