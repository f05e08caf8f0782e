"""Recovery rule: overtraining from suppressed heart-rate variability.

Lower HRV indicates accumulated fatigue. HRV < 20 → HIGH,
20 <= HRV < 30 → MODERATE.
"""

from __future__ import annotations

from workout_engine.models.enums import (
    HRV_HIGH_THRESHOLD,
    HRV_MODERATE_THRESHOLD,
    AdaptationReason,
    Severity,
)
from workout_engine.rules.base import MetricRule


class OvertrainingRule(MetricRule):
    """Flags overtraining when HRV is suppressed."""

    rule_id = "overtraining"
    version = "1.0.0"
    reason = AdaptationReason.OVERTRAINING
    metric_field = "heart_rate_variability"

    def classify(self, value: float) -> Severity | None:
        if value < HRV_HIGH_THRESHOLD:
            return Severity.HIGH
        if value < HRV_MODERATE_THRESHOLD:
            return Severity.MODERATE
        return None
