"""Tests for health metric range validation."""

from __future__ import annotations

import dataclasses

import pytest

from workout_engine.analysis.validation import validate_metrics
from workout_engine.exceptions import InvalidMetricError, WorkoutEngineError
from workout_engine.models.health_metrics import MacroNutrients


class TestValidateMetrics:
    def test_healthy_passes(self, healthy_metrics) -> None:
        validate_metrics(healthy_metrics)

    def test_bounds_inclusive(self, make_metrics) -> None:
        validate_metrics(
            make_metrics(sleep_score=0.0, recovery_score=100.0, stress_level=10.0)
        )
        validate_metrics(make_metrics(stress_level=1.0, activity_level=0.0))

    @pytest.mark.parametrize(
        "field_name,value",
        [
            ("sleep_score", 101.0),
            ("recovery_score", -1.0),
            ("activity_level", 150.0),
            ("stress_level", 11.0),
            ("stress_level", 0.5),
            ("heart_rate", -5.0),
            ("heart_rate_variability", -1.0),
            ("water_intake_ml", -100.0),
        ],
    )
    def test_out_of_range_rejected(self, make_metrics, field_name: str, value: float) -> None:
        with pytest.raises(InvalidMetricError) as exc_info:
            validate_metrics(make_metrics(**{field_name: value}))
        assert exc_info.value.field_name == field_name
        assert exc_info.value.value == value

    def test_nan_rejected(self, make_metrics) -> None:
        with pytest.raises(InvalidMetricError):
            validate_metrics(make_metrics(sleep_score=float("nan")))

    def test_negative_macro_rejected(self, healthy_metrics) -> None:
        metrics = dataclasses.replace(healthy_metrics, macronutrients=MacroNutrients(protein=-1.0))
        with pytest.raises(InvalidMetricError, match="macronutrients.protein"):
            validate_metrics(metrics)

    def test_error_hierarchy(self, make_metrics) -> None:
        with pytest.raises(WorkoutEngineError):
            validate_metrics(make_metrics(sleep_score=-3.0))
        with pytest.raises(ValueError):
            validate_metrics(make_metrics(sleep_score=-3.0))
