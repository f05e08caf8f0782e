"""Recovery rule: low readiness from the device recovery score.

recovery < 40 → HIGH, 40 <= recovery < 60 → MODERATE.
"""

from __future__ import annotations

from workout_engine.models.enums import (
    RECOVERY_HIGH_THRESHOLD,
    RECOVERY_MODERATE_THRESHOLD,
    AdaptationReason,
    Severity,
)
from workout_engine.rules.base import MetricRule


class LowReadinessRule(MetricRule):
    """Flags low readiness when the recovery score is depressed."""

    rule_id = "low_readiness"
    version = "1.0.0"
    reason = AdaptationReason.LOW_READINESS
    metric_field = "recovery_score"

    def classify(self, value: float) -> Severity | None:
        if value < RECOVERY_HIGH_THRESHOLD:
            return Severity.HIGH
        if value < RECOVERY_MODERATE_THRESHOLD:
            return Severity.MODERATE
        return None
