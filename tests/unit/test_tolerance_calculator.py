"""Tests for the tolerance calculator."""

import logging

import pytest
from pydantic import ValidationError

from tolcalc.core.calculator import ResultStatus, ToleranceResult, calculate, default_grade
from tolcalc.core.errors import ErrorCode
from tolcalc.core.knowledge import ToleranceGrade


class TestCalculate:
    """Tests for calculate()."""

    def test_medium_ten_millimetres(self):
        result = calculate("10", ToleranceGrade.MEDIUM)

        assert result.ok
        assert result.status is ResultStatus.OK
        assert result.dimension == 10.0
        assert result.tolerance == 0.2
        assert result.upper_limit == 10.2
        assert result.lower_limit == 9.8
        assert result.error_code is None

    def test_invalid_dimension(self):
        result = calculate("0.4", ToleranceGrade.MEDIUM)

        assert not result.ok
        assert result.status is ResultStatus.INVALID_DIMENSION
        assert result.error_code is ErrorCode.INVALID_DIMENSION
        assert result.dimension is None
        assert result.tolerance is None
        assert result.upper_limit is None
        assert result.lower_limit is None

    def test_unparseable_dimension(self):
        assert calculate("abc", "m").status is ResultStatus.INVALID_DIMENSION
        assert calculate("", "m").status is ResultStatus.INVALID_DIMENSION

    def test_unspecified_tolerance_keeps_dimension(self):
        result = calculate("3000", ToleranceGrade.FINE)

        assert result.status is ResultStatus.UNSPECIFIED_TOLERANCE
        assert result.error_code is ErrorCode.UNSPECIFIED_TOLERANCE
        assert result.dimension == 3000.0
        assert result.tolerance is None
        assert result.upper_limit is None
        assert result.lower_limit is None

    def test_absence_states_are_distinct(self):
        invalid = calculate("5000", ToleranceGrade.FINE)
        unspecified = calculate("3000", ToleranceGrade.FINE)
        assert invalid.status is not unspecified.status
        assert invalid.error_code is not unspecified.error_code

    def test_max_dimension_is_valid(self):
        result = calculate("4000", ToleranceGrade.COARSE)
        assert result.ok
        assert result.tolerance == 4.0
        assert (result.upper_limit, result.lower_limit) == (4004.0, 3996.0)

    def test_first_bucket_boundary(self):
        assert calculate("3", "c").tolerance == 0.2
        assert calculate("3.0001", "c").tolerance == 0.3

    def test_default_grade_is_medium(self):
        result = calculate("10")
        assert result.grade is ToleranceGrade.MEDIUM
        assert result.tolerance == 0.2

    def test_default_grade_from_settings(self, monkeypatch):
        monkeypatch.setenv("TOLCALC_DEFAULT_GRADE", "v")
        result = calculate("10")
        assert result.grade is ToleranceGrade.VERY_COARSE
        assert result.tolerance == 1.0

    def test_unknown_default_grade_falls_back_to_medium(self, monkeypatch, caplog):
        monkeypatch.setenv("TOLCALC_DEFAULT_GRADE", "bogus")
        with caplog.at_level(logging.WARNING, logger="tolcalc.core.calculator"):
            assert default_grade() is ToleranceGrade.MEDIUM
        assert "Unknown default grade" in caplog.text

    @pytest.mark.parametrize(
        "name,grade,tolerance",
        [
            ("fine", ToleranceGrade.FINE, 0.1),
            ("medium", ToleranceGrade.MEDIUM, 0.2),
            ("coarse", ToleranceGrade.COARSE, 0.5),
            ("very-coarse", ToleranceGrade.VERY_COARSE, 1.0),
        ],
    )
    def test_accepts_grade_names(self, name, grade, tolerance):
        result = calculate("10", name)
        assert result.ok
        assert result.grade is grade
        assert result.tolerance == tolerance

    def test_unknown_grade_is_a_result_not_an_error(self):
        result = calculate("10", "extra-fine")

        assert result.status is ResultStatus.INVALID_GRADE
        assert result.error_code is ErrorCode.INVALID_GRADE
        assert result.grade is None
        assert result.tolerance is None

    def test_underscore_digits_are_invalid(self):
        assert calculate("1_0", "m").status is ResultStatus.INVALID_DIMENSION

    def test_accepts_numeric_input(self):
        assert calculate(50, "m").tolerance == 0.3

    def test_result_serializes(self):
        data = calculate("10", ToleranceGrade.MEDIUM).model_dump(mode="json")
        assert data["status"] == "ok"
        assert data["grade"] == "m"
        assert data["tolerance"] == 0.2
        assert data["source"].startswith("JIS B 0405")

    def test_same_input_same_result(self):
        assert calculate("123.4", "c") == calculate("123.4", "c")

    def test_logs_outcome_with_structured_fields(self, caplog):
        with caplog.at_level(logging.DEBUG, logger="tolcalc.core.calculator"):
            calculate("3000", ToleranceGrade.FINE)
        record = next(r for r in caplog.records if r.message == "Tolerance not specified")
        assert record.error_code == ErrorCode.UNSPECIFIED_TOLERANCE.value
        assert record.grade == "f"


class TestToleranceResult:
    """Tests for the result record."""

    def test_requires_status(self):
        with pytest.raises(ValidationError):
            ToleranceResult()

    def test_numbers_default_to_none(self):
        result = ToleranceResult(status=ResultStatus.INVALID_DIMENSION, grade="m")
        assert result.grade is ToleranceGrade.MEDIUM
        assert result.tolerance is None
