"""Tests for the readiness score."""

from __future__ import annotations

import itertools

import pytest

from workout_engine.exceptions import InvalidMetricError
from workout_engine.math.readiness import (
    calculate_readiness_score,
    normalize_activity,
    normalize_hrv,
    normalize_stress,
)
from workout_engine.math.rounding import round_half_up


class TestNormalization:
    def test_stress_inverted(self) -> None:
        assert normalize_stress(3.0) == pytest.approx(70.0)

    def test_stress_floor_at_zero(self) -> None:
        assert normalize_stress(10.0) == pytest.approx(0.0)

    def test_hrv_scaled_and_capped(self) -> None:
        assert normalize_hrv(30.0) == pytest.approx(60.0)
        assert normalize_hrv(80.0) == 100.0

    def test_activity_capped(self) -> None:
        assert normalize_activity(100.0) == 100.0


class TestRoundHalfUp:
    def test_half_goes_up(self) -> None:
        assert round_half_up(2.5) == 3
        assert round_half_up(0.5) == 1

    def test_below_half_goes_down(self) -> None:
        assert round_half_up(2.4) == 2


class TestReadinessScore:
    def test_weighted_composite(self, make_metrics) -> None:
        # 24 + 20 + 14 + 13.5 + 7.5 = 79
        metrics = make_metrics(activity_level=75.0)
        assert calculate_readiness_score(metrics) == 79

    def test_best_case(self, make_metrics) -> None:
        metrics = make_metrics(
            recovery_score=100.0,
            sleep_score=100.0,
            stress_level=1.0,
            heart_rate_variability=50.0,
            activity_level=100.0,
        )
        assert calculate_readiness_score(metrics) == 98

    def test_worst_case_is_zero(self, make_metrics) -> None:
        metrics = make_metrics(
            recovery_score=0.0,
            sleep_score=0.0,
            stress_level=10.0,
            heart_rate_variability=0.0,
            activity_level=0.0,
        )
        assert calculate_readiness_score(metrics) == 0

    def test_returns_int(self, healthy_metrics) -> None:
        assert isinstance(calculate_readiness_score(healthy_metrics), int)

    def test_always_within_bounds(self, make_metrics) -> None:
        scores = (0.0, 35.0, 50.0, 100.0)
        for recovery, sleep, stress, hrv in itertools.product(
            scores, scores, (1.0, 5.0, 10.0), (0.0, 25.0, 200.0)
        ):
            metrics = make_metrics(
                recovery_score=recovery,
                sleep_score=sleep,
                stress_level=stress,
                heart_rate_variability=hrv,
            )
            assert 0 <= calculate_readiness_score(metrics) <= 100

    def test_rejects_out_of_range(self, make_metrics) -> None:
        with pytest.raises(InvalidMetricError):
            calculate_readiness_score(make_metrics(sleep_score=120.0))
