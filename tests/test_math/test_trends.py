"""Tests for session history aggregates."""

from __future__ import annotations

from datetime import datetime

import pytest

from workout_engine.math.trends import average, duration_slope, weekly_calorie_totals


class TestWeeklyCalorieTotals:
    def test_groups_by_calendar_week(self) -> None:
        totals = weekly_calorie_totals(
            [datetime(2026, 3, 2, 7), datetime(2026, 3, 4, 7), datetime(2026, 3, 9, 7)],
            [300.0, 200.0, 250.0],
        )
        assert list(totals.values) == [500.0, 250.0]
        assert totals.index[0].date().isoformat() == "2026-03-08"

    def test_unsorted_input(self) -> None:
        totals = weekly_calorie_totals(
            [datetime(2026, 3, 9, 7), datetime(2026, 3, 2, 7)],
            [250.0, 300.0],
        )
        assert list(totals.values) == [300.0, 250.0]

    def test_empty(self) -> None:
        assert weekly_calorie_totals([], []).empty

    def test_length_mismatch(self) -> None:
        with pytest.raises(ValueError):
            weekly_calorie_totals([datetime(2026, 3, 2)], [])


class TestDurationSlope:
    def test_linear_increase(self) -> None:
        times = [datetime(2026, 3, d, 7) for d in (2, 3, 4)]
        assert duration_slope(times, [20.0, 30.0, 40.0]) == pytest.approx(10.0)

    def test_decrease(self) -> None:
        times = [datetime(2026, 3, d, 7) for d in (2, 4)]
        assert duration_slope(times, [40.0, 30.0]) == pytest.approx(-5.0)

    def test_single_session_flat(self) -> None:
        assert duration_slope([datetime(2026, 3, 2)], [30.0]) == 0.0

    def test_same_timestamp_flat(self) -> None:
        t = datetime(2026, 3, 2, 7)
        assert duration_slope([t, t], [20.0, 40.0]) == 0.0


class TestAverage:
    def test_mean(self) -> None:
        assert average([20.0, 40.0]) == pytest.approx(30.0)

    def test_empty(self) -> None:
        assert average([]) == 0.0
