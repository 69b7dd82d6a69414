"""
Unit tests for profile.py module.
"""

import pytest

from firecalc.profile import Profile
from firecalc.income import CareerIncome


class TestProfile:
    """Test Profile construction and derived views."""

    def test_defaults(self, reference_profile):
        assert reference_profile.current_liabilities == 0.0
        assert reference_profile.kids_expenses == ()
        assert not reference_profile.has_kids_expenses
        assert not reference_profile.has_parents_care

    def test_lists_stored_as_tuples(self, reference_profile, kid_stream):
        profile = reference_profile.with_changes(kids_expenses=[kid_stream])
        assert profile.kids_expenses == (kid_stream,)

    def test_net_worth_subtracts_liabilities(self, reference_profile):
        profile = reference_profile.with_changes(current_liabilities=2_500.0)
        assert profile.net_worth == 7_500.0

    def test_career(self, reference_profile):
        career = reference_profile.career
        assert isinstance(career, CareerIncome)
        assert career.base == 60_000.0
        assert career.slowdown_age == 45
        assert career.tax_rate == 0.25

    def test_expense_categories_follow_flags(self, family_profile):
        categories = family_profile.expense_categories
        assert list(categories) == ["retirement", "kids", "parents_care"]
        assert all(c.enabled for c in categories.values())

        off = family_profile.with_changes(has_kids_expenses=False, has_parents_care=False)
        categories = off.expense_categories
        assert categories["retirement"].enabled
        assert not categories["kids"].enabled
        assert not categories["parents_care"].enabled
        # Streams are kept while disabled
        assert categories["kids"].streams == family_profile.kids_expenses

    def test_with_changes_leaves_original(self, reference_profile):
        changed = reference_profile.with_changes(current_age=30)
        assert changed.current_age == 30
        assert reference_profile.current_age == 25

    def test_frozen(self, reference_profile):
        with pytest.raises(Exception):
            reference_profile.current_age = 40

    def test_equality(self, reference_profile):
        assert reference_profile == Profile(
            current_age=25, current_savings=10_000.0, annual_income=60_000.0,
            annual_expenses=40_000.0, investment_return=0.07, inflation_rate=0.03,
            tax_rate=0.25, career_growth_rate=0.03, career_growth_slowdown_age=45,
        )
