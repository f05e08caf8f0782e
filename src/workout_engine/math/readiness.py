"""Readiness score: weighted composite of recovery, sleep, stress, HRV and activity.

All inputs are normalized onto a 0-100 scale before weighting:
    - stress (1-10) is inverted: 100 - stress * 10, floored at 0
    - HRV (ms) is scaled x2 and capped at 100
    - activity level is capped at 100
"""

from __future__ import annotations

from workout_engine.analysis.validation import validate_metrics
from workout_engine.math.rounding import round_half_up
from workout_engine.models.enums import (
    HRV_NORMALIZATION_FACTOR,
    NORMALIZED_MAX,
    READINESS_WEIGHT_ACTIVITY,
    READINESS_WEIGHT_HRV,
    READINESS_WEIGHT_RECOVERY,
    READINESS_WEIGHT_SLEEP,
    READINESS_WEIGHT_STRESS,
    STRESS_NORMALIZATION_FACTOR,
)
from workout_engine.models.health_metrics import HealthMetricSnapshot


def normalize_stress(stress_level: float) -> float:
    """Invert a 1-10 stress level so that low stress scores high."""
    return max(0.0, NORMALIZED_MAX - stress_level * STRESS_NORMALIZATION_FACTOR)


def normalize_hrv(hrv: float) -> float:
    return min(float(NORMALIZED_MAX), hrv * HRV_NORMALIZATION_FACTOR)


def normalize_activity(activity_level: float) -> float:
    return min(float(NORMALIZED_MAX), activity_level)


def calculate_readiness_score(metrics: HealthMetricSnapshot) -> int:
    """Compute a 0-100 readiness score from a metric snapshot.

    Recomputed on every call; nothing is cached because snapshots change
    between calls.

    Args:
        metrics: Frozen health-metric snapshot.

    Returns:
        Integer readiness score in [0, 100].

    Raises:
        InvalidMetricError: If any metric is outside its valid range.
    """
    validate_metrics(metrics)

    score = (
        metrics.recovery_score * READINESS_WEIGHT_RECOVERY
        + metrics.sleep_score * READINESS_WEIGHT_SLEEP
        + normalize_stress(metrics.stress_level) * READINESS_WEIGHT_STRESS
        + normalize_hrv(metrics.heart_rate_variability) * READINESS_WEIGHT_HRV
        + normalize_activity(metrics.activity_level) * READINESS_WEIGHT_ACTIVITY
    )
    return round_half_up(max(0.0, min(float(NORMALIZED_MAX), score)))
