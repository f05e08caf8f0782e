"""Shared test fixtures: health snapshots, catalog, plans."""

from __future__ import annotations

from datetime import date, datetime
from typing import Callable

import pytest

from workout_engine.catalog.repository import ExerciseCatalog
from workout_engine.engine import WorkoutEngine
from workout_engine.models.enums import Intensity
from workout_engine.models.health_metrics import HealthMetricSnapshot
from workout_engine.models.workout_plan import DailyWorkout, WorkoutPlan


@pytest.fixture
def make_metrics() -> Callable[..., HealthMetricSnapshot]:
    """Factory for snapshots that trigger nothing unless overridden."""

    def _make(**overrides: float) -> HealthMetricSnapshot:
        values = dict(
            heart_rate=62.0,
            heart_rate_variability=45.0,
            sleep_score=80.0,
            recovery_score=80.0,
            stress_level=3.0,
            activity_level=70.0,
        )
        values.update(overrides)
        return HealthMetricSnapshot(timestamp=datetime(2026, 3, 2, 7, 0), **values)

    return _make


@pytest.fixture
def healthy_metrics(make_metrics: Callable[..., HealthMetricSnapshot]) -> HealthMetricSnapshot:
    return make_metrics()


@pytest.fixture
def catalog() -> ExerciseCatalog:
    return ExerciseCatalog.default(on=date(2026, 3, 2))


@pytest.fixture
def engine(catalog: ExerciseCatalog) -> WorkoutEngine:
    return WorkoutEngine(catalog=catalog)


@pytest.fixture
def hard_plan(catalog: ExerciseCatalog) -> WorkoutPlan:
    """Two 45-minute high-intensity days."""
    hiit = catalog.get_exercise("hiit-bodyweight")
    running = catalog.get_exercise("running")
    return WorkoutPlan(
        id="plan-test",
        name="Test Plan",
        daily_workouts=(
            DailyWorkout(
                id="day-1",
                date=date(2026, 3, 2),
                exercises=(hiit,),
                duration_min=45,
                intensity=Intensity.HIGH,
            ),
            DailyWorkout(
                id="day-2",
                date=date(2026, 3, 4),
                exercises=(running,),
                duration_min=45,
                intensity=Intensity.HIGH,
            ),
        ),
        created_at=datetime(2026, 3, 1, 9, 0),
        updated_at=datetime(2026, 3, 1, 9, 0),
    )
