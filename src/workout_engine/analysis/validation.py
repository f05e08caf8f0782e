"""Range validation for health-metric snapshots."""

from __future__ import annotations

from workout_engine.exceptions import InvalidMetricError
from workout_engine.models.enums import SCORE_RANGE, STRESS_RANGE
from workout_engine.models.health_metrics import HealthMetricSnapshot

# field name → (low, high); high=None means unbounded above
_BOUNDED_FIELDS: dict[str, tuple[float, float | None]] = {
    "sleep_score": SCORE_RANGE,
    "recovery_score": SCORE_RANGE,
    "activity_level": SCORE_RANGE,
    "stress_level": STRESS_RANGE,
    "heart_rate": (0.0, None),
    "heart_rate_variability": (0.0, None),
    "calories_consumed": (0.0, None),
    "calories_burned": (0.0, None),
    "water_intake_ml": (0.0, None),
}

_MACRO_FIELDS = ("protein", "carbohydrates", "fats", "fiber", "sugar")


def validate_metrics(metrics: HealthMetricSnapshot) -> None:
    """Raise InvalidMetricError for the first out-of-range field.

    NaN never satisfies a range check, so it is rejected too.
    """
    for field_name, (low, high) in _BOUNDED_FIELDS.items():
        _check(field_name, getattr(metrics, field_name), low, high)

    for field_name in _MACRO_FIELDS:
        _check(
            f"macronutrients.{field_name}",
            getattr(metrics.macronutrients, field_name),
            0.0,
            None,
        )


def _check(field_name: str, value: float, low: float, high: float | None) -> None:
    in_range = value >= low and (high is None or value <= high)
    if not in_range:
        raise InvalidMetricError(field_name, value, (low, high))
