"""
Unit tests for utils.py module.

Tests value/rate conversions and formatters.
"""

import pytest

from firecalc.utils import (
    check_non_negative,
    to_nominal,
    to_today,
    nominal_return_rate,
    real_return_rate,
    format_currency,
    format_percentage,
)


# ============================================================================
# VALUE CONVERSION TESTS
# ============================================================================

class TestValueConversions:
    """Test to_nominal / to_today."""

    def test_zero_years_is_identity(self):
        assert to_nominal(1234.5, 0.03, 0) == 1234.5
        assert to_today(1234.5, 0.03, 0) == 1234.5

    def test_to_nominal_compounds(self):
        assert to_nominal(100.0, 0.03, 2) == pytest.approx(106.09)

    def test_to_today_discounts(self):
        assert to_today(106.09, 0.03, 2) == pytest.approx(100.0)

    def test_ten_year_reference_values(self):
        assert to_nominal(1000, 0.03, 10) == pytest.approx(1343.92, abs=0.01)
        assert to_today(1343.92, 0.03, 10) == pytest.approx(1000, abs=0.01)

    @pytest.mark.parametrize("years", [1, 10, 50])
    def test_inverse(self, years):
        """Converting forward then back recovers the value."""
        value = 40_000.0
        assert to_today(to_nominal(value, 0.03, years), 0.03, years) == pytest.approx(value)

    def test_zero_inflation(self):
        assert to_nominal(500.0, 0.0, 30) == pytest.approx(500.0)


# ============================================================================
# RATE CONVERSION TESTS
# ============================================================================

class TestRateConversions:
    """Test the Fisher relation helpers."""

    def test_nominal_rate(self):
        assert nominal_return_rate(0.07, 0.03) == pytest.approx(0.1021)

    def test_nominal_rate_no_inflation(self):
        assert nominal_return_rate(0.07, 0.0) == pytest.approx(0.07)

    def test_real_rate_inverts_nominal(self):
        assert real_return_rate(nominal_return_rate(0.05, 0.02), 0.02) == pytest.approx(0.05)


# ============================================================================
# VALIDATION / FORMATTER TESTS
# ============================================================================

class TestHelpers:
    """Test validation and formatting helpers."""

    def test_check_non_negative_accepts_zero(self):
        check_non_negative("amount", 0.0)

    def test_check_non_negative_raises(self):
        with pytest.raises(ValueError, match="non-negative"):
            check_non_negative("amount", -1.0)

    def test_format_currency(self):
        assert format_currency(685_714.29) == "$685,714"
        assert format_currency(-1234.5, decimals=2) == "-$1,234.50"

    def test_format_currency_non_finite(self):
        assert format_currency(float("inf")) == "n/a"
        assert format_currency(float("nan")) == "n/a"

    def test_format_percentage(self):
        assert format_percentage(0.07) == "7.0%"
        assert format_percentage(0.1021, decimals=2) == "10.21%"
