"""
Unit tests for serialization.py module.

Tests profile import/export and result persistence.
"""

import json

import pandas as pd
import pytest

from firecalc.exceptions import ExpenseStreamError, ValidationError
from firecalc.expenses import ExpenseStream
from firecalc.serialization import (
    SCHEMA_VERSION,
    stream_to_dict,
    stream_from_dict,
    profile_to_dict,
    profile_from_dict,
    profile_to_json,
    profile_from_json,
    save_profile,
    load_profile,
    result_to_dict,
    save_result,
    load_result,
    projections_from_dict,
)
from firecalc.solver import calculate_fire_projections


# ============================================================================
# EXPENSE STREAM SERIALIZATION TESTS
# ============================================================================

class TestStreamSerialization:
    """Test stream_to_dict / stream_from_dict."""

    def test_to_dict(self, kid_stream):
        assert stream_to_dict(kid_stream) == {
            "id": "kid1", "name": "Child 1", "amount": 10_000.0, "startAge": 30, "endAge": 48,
        }

    def test_open_ended_omits_end_age(self, retirement_stream):
        assert "endAge" not in stream_to_dict(retirement_stream)

    def test_from_dict(self):
        stream = stream_from_dict({"id": "p", "name": "Parents", "amount": 12000, "startAge": 55})
        assert stream == ExpenseStream("p", "Parents", 12_000.0, 55)

    def test_end_before_start_rejected(self):
        with pytest.raises(ExpenseStreamError, match="Child 1"):
            stream_from_dict({"id": "kid1", "name": "Child 1", "amount": 1, "startAge": 48, "endAge": 40})

    def test_missing_field_rejected(self):
        with pytest.raises(ExpenseStreamError):
            stream_from_dict({"id": "kid1", "amount": 1})


# ============================================================================
# PROFILE SERIALIZATION TESTS
# ============================================================================

class TestProfileSerialization:
    """Test profile import/export."""

    def test_to_dict_keys(self, reference_profile):
        data = profile_to_dict(reference_profile)
        assert data["currentAge"] == 25
        assert data["careerGrowthSlowdownAge"] == 45
        assert data["kidsExpenses"] == []
        assert data["hasParentsCare"] is False

    def test_from_dict(self, profile_dict, kid_stream):
        profile = profile_from_dict(profile_dict)
        assert profile.current_savings == 10_000.0
        assert profile.kids_expenses == (kid_stream,)

    def test_export_import_preserves_profile(self, family_profile):
        assert profile_from_json(profile_to_json(family_profile)) == family_profile

    def test_json_is_indented(self, reference_profile):
        assert "\n  " in profile_to_json(reference_profile)

    def test_not_an_object(self):
        with pytest.raises(ValidationError, match="Invalid input format"):
            profile_from_dict([1, 2, 3])

    def test_malformed_json(self):
        with pytest.raises(ValidationError, match="Invalid input format"):
            profile_from_json("{not json")

    def test_missing_field(self, profile_dict):
        profile_dict.pop("currentAge")
        with pytest.raises(ValidationError, match="Invalid profile data"):
            profile_from_dict(profile_dict)

    def test_bad_stream_reported_as_stream_error(self, profile_dict):
        profile_dict["kidsExpenses"][0]["endAge"] = 20
        with pytest.raises(ExpenseStreamError):
            profile_from_dict(profile_dict)

    def test_save_and_load(self, family_profile, tmp_path):
        path = tmp_path / "profiles" / "family.json"
        save_profile(family_profile, path)
        assert path.exists()
        assert load_profile(path) == family_profile


# ============================================================================
# RESULT SERIALIZATION TESTS
# ============================================================================

class TestResultSerialization:
    """Test result persistence."""

    @pytest.fixture
    def result(self, reference_profile):
        return calculate_fire_projections(reference_profile)

    def test_result_to_dict(self, result):
        data = result_to_dict(result)
        assert data["schema_version"] == SCHEMA_VERSION
        assert data["fireAge"] == 59
        assert data["yearsToFire"] == 34
        assert data["sustainable"] is True
        assert len(data["yearlyProjections"]) == 51

    def test_projection_records_camel_case(self, result):
        record = result_to_dict(result)["yearlyProjections"][0]
        assert record["age"] == 25
        assert record["netWorth"] == 10_000.0
        assert "investmentReturns" in record
        assert "kidsExpenses" not in record
        assert record["retirementExpenses"] == 0.0

    def test_without_projections(self, result):
        assert "yearlyProjections" not in result_to_dict(result, include_projections=False)

    def test_save_and_load(self, result, tmp_path):
        path = tmp_path / "out" / "result.json"
        save_result(result, path)
        data = load_result(path)
        assert data["fireAge"] == 59
        assert data["requiredNetWorth"] == pytest.approx(result.required_net_worth)

    def test_schema_mismatch_warns(self, result, tmp_path):
        path = tmp_path / "old.json"
        data = result_to_dict(result, include_projections=False)
        data["schema_version"] = "0.0.1"
        path.write_text(json.dumps(data))
        with pytest.warns(UserWarning, match="schema version"):
            load_result(path)

    def test_projections_from_dict(self, result):
        frame = projections_from_dict(result_to_dict(result)["yearlyProjections"])
        assert isinstance(frame, pd.DataFrame)
        assert frame.index.name == "age"
        assert frame.loc[25, "netWorth"] == 10_000.0

    def test_projections_from_empty(self):
        assert projections_from_dict([]).empty
