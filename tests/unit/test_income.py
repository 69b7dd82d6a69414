"""
Unit tests for income.py module.

Tests income_for_age and CareerIncome.
"""

import pytest

from firecalc.income import income_for_age, CareerIncome


# ============================================================================
# INCOME_FOR_AGE TESTS
# ============================================================================

class TestIncomeForAge:
    """Test the two-phase income projection."""

    def test_current_age_is_base(self):
        assert income_for_age(60_000, 25, 25, 0.05, 45, 0.03) == 60_000

    def test_growth_phase(self):
        assert income_for_age(60_000, 25, 35, 0.05, 45, 0.03) == pytest.approx(60_000 * 1.05 ** 10)

    def test_growth_stops_at_slowdown(self):
        at_slowdown = income_for_age(60_000, 25, 45, 0.05, 45, 0.03)
        assert at_slowdown == pytest.approx(60_000 * 1.05 ** 20)

    def test_stagnant_phase_tracks_inflation(self):
        income = income_for_age(60_000, 25, 50, 0.05, 45, 0.03)
        assert income == pytest.approx(60_000 * 1.05 ** 20 * 1.03 ** 5)

    def test_slowdown_before_current_age(self):
        """Growth phase collapses to zero years."""
        income = income_for_age(60_000, 50, 55, 0.05, 45, 0.03)
        assert income == pytest.approx(60_000 * 1.03 ** 5)

    def test_zero_at_and_after_retirement(self):
        assert income_for_age(60_000, 25, 50, 0.05, 45, 0.03, retirement_age=50) == 0.0
        assert income_for_age(60_000, 25, 60, 0.05, 45, 0.03, retirement_age=50) == 0.0

    def test_paid_before_retirement(self):
        assert income_for_age(60_000, 25, 49, 0.05, 45, 0.03, retirement_age=50) > 0

    def test_zero_growth_and_inflation(self):
        assert income_for_age(60_000, 25, 70, 0.0, 45, 0.0) == pytest.approx(60_000)


# ============================================================================
# CAREERINCOME TESTS
# ============================================================================

class TestCareerIncome:
    """Test the CareerIncome facade."""

    @pytest.fixture
    def career(self) -> CareerIncome:
        return CareerIncome(
            base=60_000, current_age=25, career_growth_rate=0.05,
            slowdown_age=45, inflation_rate=0.03, tax_rate=0.25,
        )

    def test_negative_base_raises(self):
        with pytest.raises(ValueError, match="non-negative"):
            CareerIncome(base=-1, current_age=25, career_growth_rate=0.0,
                         slowdown_age=45, inflation_rate=0.03)

    def test_after_tax(self, career):
        assert career.after_tax(25) == pytest.approx(45_000)

    def test_real_income_grows_until_slowdown(self, career):
        assert career.real(45) > career.real(35) > career.real(25)

    def test_real_income_flat_after_slowdown(self, career):
        assert career.real(55) == pytest.approx(career.real(45))

    def test_growth_equal_to_inflation_keeps_real_income_flat(self):
        career = CareerIncome(base=60_000, current_age=25, career_growth_rate=0.03,
                              slowdown_age=45, inflation_rate=0.03)
        assert career.real(40) == pytest.approx(60_000)
        assert career.real(60) == pytest.approx(60_000)

    def test_retired(self, career):
        assert career.nominal(40, retirement_age=40) == 0.0
        assert career.real(41, retirement_age=40) == 0.0
