"""
Integration test for the full firecalc workflow.

Tests the pipeline from an exported profile through validation, the FIRE
age search, summaries and persisted results.
"""

import json

import numpy as np
import pytest

from firecalc import calculate_fire_projections, FireAgeSolver, SolverConfig
from firecalc.serialization import profile_from_json, profile_to_json, save_result, load_result
from firecalc.summary import summarize
from firecalc.validation import ensure_valid_profile


EXPORTED_PROFILE = {
    "currentAge": 30,
    "currentSavings": 50000,
    "currentLiabilities": 15000,
    "annualIncome": 85000,
    "annualExpenses": 45000,
    "investmentReturn": 0.06,
    "inflationRate": 0.025,
    "taxRate": 0.28,
    "careerGrowthRate": 0.04,
    "careerGrowthSlowdownAge": 50,
    "additionalRetirementExpenses": [
        {"id": "travel", "name": "Travel", "amount": 6000, "startAge": 60, "endAge": 80},
    ],
    "hasKidsExpenses": True,
    "kidsExpenses": [
        {"id": "kid1", "name": "Child 1", "amount": 9000, "startAge": 32, "endAge": 50},
    ],
    "hasParentsCare": True,
    "parentsCareExpenses": [
        {"id": "mom", "name": "Mom", "amount": 10000, "startAge": 58},
    ],
}


@pytest.mark.integration
class TestFullWorkflow:
    """Integration tests for the complete calculation workflow."""

    @pytest.fixture
    def profile(self):
        return ensure_valid_profile(profile_from_json(json.dumps(EXPORTED_PROFILE)))

    def test_exported_profile_solves(self, profile):
        result = calculate_fire_projections(profile)

        assert 30 <= result.fire_age <= 80
        assert result.years_to_fire == result.fire_age - 30
        assert len(result.yearly_projections) == 51
        assert result.yearly_projections[0].net_worth == 50_000.0

        # The reported result agrees with an independent check of its age
        report = FireAgeSolver().check(profile, result.fire_age)
        assert report.satisfied == result.sustainable

    def test_result_properties(self, profile):
        result = calculate_fire_projections(profile)
        frame = result.to_frame()

        # Income stops at the FIRE age
        assert (frame.loc[result.fire_age:, "annual_income"] == 0).all()
        # Expenses never drop below base
        assert (frame["annual_expenses"] >= frame["base_expenses"] - 1e-9).all()
        # Categories are broken out
        assert frame.loc[32, "kids_expenses"] == pytest.approx(9_000)
        assert frame.loc[58, "parents_care_expenses"] == pytest.approx(10_000)

        if result.sustainable:
            after = frame.loc[result.fire_age:, "net_worth"].to_numpy()
            assert np.all(np.diff(after) >= -1e-6)
            assert frame.loc[result.fire_age, "net_worth"] >= result.required_net_worth

    def test_strategies_agree(self, profile):
        binary = calculate_fire_projections(profile)
        linear = calculate_fire_projections(profile, SolverConfig(search_strategy="linear"))
        assert binary.fire_age == linear.fire_age

    def test_disabling_categories_never_delays_fire(self, profile):
        full = calculate_fire_projections(profile)
        lean = calculate_fire_projections(
            profile.with_changes(has_kids_expenses=False, has_parents_care=False)
        )
        assert lean.fire_age <= full.fire_age

    def test_summary_and_persistence(self, profile, tmp_path):
        result = calculate_fire_projections(profile)
        summary = summarize(profile, result)
        assert summary.starting_net_worth == 35_000.0
        assert summary.fire_age == result.fire_age

        path = tmp_path / "result.json"
        save_result(result, path)
        data = load_result(path)
        assert data["fireAge"] == result.fire_age
        assert len(data["yearlyProjections"]) == 51

    def test_export_round_trip_reproduces_result(self, profile):
        reloaded = profile_from_json(profile_to_json(profile))
        assert calculate_fire_projections(reloaded) == calculate_fire_projections(profile)
