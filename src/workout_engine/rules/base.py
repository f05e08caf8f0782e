"""Abstract base class for metric threshold rules."""

from __future__ import annotations

from abc import ABC, abstractmethod

from workout_engine.models.adaptation import MetricFinding
from workout_engine.models.enums import AdaptationReason, Severity
from workout_engine.models.health_metrics import HealthMetricSnapshot


class MetricRule(ABC):
    """Base class for all metric rules used by the MetricsAnalyzer.

    Each rule watches one metric and maps it to exactly one
    AdaptationReason. Rules are discovered automatically by the
    RuleRegistry.

    Subclasses must define:
        rule_id: unique identifier (e.g. "poor_sleep")
        version: semantic version string
        reason: the AdaptationReason this rule raises
        metric_field: the HealthMetricSnapshot field this rule reads
        classify(): maps the metric value to a Severity, or None
    """

    rule_id: str
    version: str
    reason: AdaptationReason
    metric_field: str

    @abstractmethod
    def classify(self, value: float) -> Severity | None:
        """Return the severity this metric value warrants, or None if healthy."""
        ...

    def evaluate(self, metrics: HealthMetricSnapshot) -> MetricFinding | None:
        """Evaluate this rule against a snapshot.

        Returns a MetricFinding if the rule fires, or None otherwise.
        """
        value = getattr(metrics, self.metric_field)
        severity = self.classify(value)
        if severity is None:
            return None
        return MetricFinding(
            rule_id=self.rule_id,
            reason=self.reason,
            severity=severity,
            metric_value=value,
            explanation=self.explain(value, severity),
        )

    def explain(self, value: float, severity: Severity) -> str:
        return (
            f"{self.metric_field} {value:g} triggers {self.reason.value} "
            f"({severity.name.lower()} severity)."
        )
