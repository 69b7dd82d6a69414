"""
Pytest configuration and fixtures for the firecalc test suite.

The reference profile (age 25, $10k saved, $60k income, $40k expenses,
7% real return, 3% inflation, 25% tax, 3% career growth until 45) is used
across modules. With career growth equal to inflation its real income,
expenses and savings stay flat at $60k / $40k / $5k per year, which keeps
expected values easy to derive by hand.
"""

from typing import Any, Dict

import pytest

from firecalc.config import SolverConfig
from firecalc.constants import DEFAULT_PROFILE
from firecalc.expenses import ExpenseStream
from firecalc.profile import Profile


# ---------------------------------------------------------------------------
# Expense Stream Fixtures
# ---------------------------------------------------------------------------

@pytest.fixture
def kid_stream() -> ExpenseStream:
    """Child costs of $10k/year from age 30 through 48."""
    return ExpenseStream(id="kid1", name="Child 1", amount=10_000.0, start_age=30, end_age=48)


@pytest.fixture
def parents_stream() -> ExpenseStream:
    """Parents care of $12k/year from age 55 through 65."""
    return ExpenseStream(id="parents", name="Parents care", amount=12_000.0, start_age=55, end_age=65)


@pytest.fixture
def retirement_stream() -> ExpenseStream:
    """Open-ended $10k/year retirement expense from age 65."""
    return ExpenseStream(id="travel", name="Travel", amount=10_000.0, start_age=65)


# ---------------------------------------------------------------------------
# Profile Fixtures
# ---------------------------------------------------------------------------

@pytest.fixture
def reference_profile() -> Profile:
    """Reference profile; solves to a FIRE age of 59."""
    return Profile(**DEFAULT_PROFILE)


@pytest.fixture
def zero_savings_profile(reference_profile) -> Profile:
    """Reference profile starting from nothing."""
    return reference_profile.with_changes(current_savings=0.0)


@pytest.fixture
def wealthy_profile(reference_profile) -> Profile:
    """Already financially independent at the current age."""
    return reference_profile.with_changes(current_savings=10_000_000.0)


@pytest.fixture
def family_profile(reference_profile, kid_stream, parents_stream, retirement_stream) -> Profile:
    """Reference profile with every expense category enabled."""
    return reference_profile.with_changes(
        annual_income=90_000.0,
        additional_retirement_expenses=(retirement_stream,),
        has_kids_expenses=True,
        kids_expenses=(kid_stream,),
        has_parents_care=True,
        parents_care_expenses=(parents_stream,),
    )


@pytest.fixture
def profile_dict() -> Dict[str, Any]:
    """Reference profile in the camelCase interchange format."""
    return {
        "currentAge": 25,
        "currentSavings": 10000,
        "currentLiabilities": 0,
        "annualIncome": 60000,
        "annualExpenses": 40000,
        "investmentReturn": 0.07,
        "inflationRate": 0.03,
        "taxRate": 0.25,
        "careerGrowthRate": 0.03,
        "careerGrowthSlowdownAge": 45,
        "additionalRetirementExpenses": [],
        "hasKidsExpenses": True,
        "kidsExpenses": [
            {"id": "kid1", "name": "Child 1", "amount": 10000, "startAge": 30, "endAge": 48},
        ],
        "hasParentsCare": False,
        "parentsCareExpenses": [],
    }


# ---------------------------------------------------------------------------
# Solver Fixtures
# ---------------------------------------------------------------------------

@pytest.fixture
def linear_config() -> SolverConfig:
    """Solver configuration scanning ages one by one."""
    return SolverConfig(search_strategy="linear")
