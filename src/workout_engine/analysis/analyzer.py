"""MetricsAnalyzer: turns a health snapshot into adaptation reasons and a severity."""

from __future__ import annotations

import logging

from workout_engine.analysis.validation import validate_metrics
from workout_engine.models.adaptation import MetricFinding, MetricsAnalysis
from workout_engine.models.enums import Severity
from workout_engine.models.health_metrics import HealthMetricSnapshot
from workout_engine.registry import RuleRegistry

logger = logging.getLogger(__name__)


class MetricsAnalyzer:
    """Evaluates every registered metric rule against a snapshot.

    Several reasons may fire for one snapshot. The overall severity is the
    maximum over all findings, so a single HIGH finding locks the result to
    HIGH regardless of any MODERATE ones.

    Usage::

        analyzer = MetricsAnalyzer()
        analysis = analyzer.analyze(snapshot)
    """

    def __init__(self, registry: RuleRegistry | None = None) -> None:
        self.registry = registry or RuleRegistry()

        # Auto-discover rules if using default registry
        if registry is None:
            self.registry.discover_rules()

    def analyze(self, metrics: HealthMetricSnapshot) -> MetricsAnalysis:
        """Analyze a snapshot.

        Args:
            metrics: Frozen health-metric snapshot.

        Returns:
            MetricsAnalysis with findings in reason order and the
            escalated overall severity.

        Raises:
            InvalidMetricError: If any metric is outside its valid range.
        """
        validate_metrics(metrics)

        findings: list[MetricFinding] = []
        severity = Severity.LOW
        for rule in self.registry.get_all_rules():
            finding = rule.evaluate(metrics)
            if finding is None:
                continue
            logger.debug("Rule %s fired: %s", rule.rule_id, finding.explanation)
            findings.append(finding)
            severity = max(severity, finding.severity)

        if findings:
            logger.info(
                "Metrics need adaptation: %s (%s severity)",
                ", ".join(f.reason.value for f in findings),
                severity.name.lower(),
            )
        return MetricsAnalysis(findings=tuple(findings), severity=severity)
