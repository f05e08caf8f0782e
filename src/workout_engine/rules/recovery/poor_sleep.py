"""Recovery rule: poor sleep quality.

sleep < 50 → HIGH, 50 <= sleep < 70 → MODERATE.
"""

from __future__ import annotations

from workout_engine.models.enums import (
    SLEEP_HIGH_THRESHOLD,
    SLEEP_MODERATE_THRESHOLD,
    AdaptationReason,
    Severity,
)
from workout_engine.rules.base import MetricRule


class PoorSleepRule(MetricRule):
    """Flags poor sleep from the 0-100 sleep score."""

    rule_id = "poor_sleep"
    version = "1.0.0"
    reason = AdaptationReason.POOR_SLEEP
    metric_field = "sleep_score"

    def classify(self, value: float) -> Severity | None:
        if value < SLEEP_HIGH_THRESHOLD:
            return Severity.HIGH
        if value < SLEEP_MODERATE_THRESHOLD:
            return Severity.MODERATE
        return None
