"""Wellbeing rule: high perceived stress.

Stress is on a 1-10 scale where higher is worse: stress >= 8 → HIGH,
6 <= stress < 8 → MODERATE.
"""

from __future__ import annotations

from workout_engine.models.enums import (
    STRESS_HIGH_THRESHOLD,
    STRESS_MODERATE_THRESHOLD,
    AdaptationReason,
    Severity,
)
from workout_engine.rules.base import MetricRule


class HighStressRule(MetricRule):
    rule_id = "high_stress"
    version = "1.0.0"
    reason = AdaptationReason.HIGH_STRESS
    metric_field = "stress_level"

    def classify(self, value: float) -> Severity | None:
        if value >= STRESS_HIGH_THRESHOLD:
            return Severity.HIGH
        if value >= STRESS_MODERATE_THRESHOLD:
            return Severity.MODERATE
        return None
