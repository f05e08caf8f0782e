"""Tests for MetricsAnalyzer: reasons, severity escalation, audit trail."""

from __future__ import annotations

import pytest

from workout_engine.analysis.analyzer import MetricsAnalyzer
from workout_engine.exceptions import InvalidMetricError
from workout_engine.models.enums import AdaptationReason, Severity
from workout_engine.registry import RuleRegistry
from workout_engine.rules.recovery.poor_sleep import PoorSleepRule


class TestMetricsAnalyzer:
    def setup_method(self) -> None:
        self.analyzer = MetricsAnalyzer()

    def test_healthy_needs_nothing(self, healthy_metrics) -> None:
        analysis = self.analyzer.analyze(healthy_metrics)
        assert analysis.needs_adaptation is False
        assert analysis.reasons == ()
        assert analysis.severity == Severity.LOW

    def test_low_recovery_only(self, make_metrics) -> None:
        metrics = make_metrics(
            recovery_score=35.0, sleep_score=80.0, stress_level=3.0, heart_rate_variability=45.0
        )
        analysis = self.analyzer.analyze(metrics)
        assert analysis.needs_adaptation is True
        assert analysis.reasons == (AdaptationReason.LOW_READINESS,)
        assert analysis.severity == Severity.HIGH

    def test_moderate_only(self, make_metrics) -> None:
        analysis = self.analyzer.analyze(make_metrics(sleep_score=60.0))
        assert analysis.reasons == (AdaptationReason.POOR_SLEEP,)
        assert analysis.severity == Severity.MODERATE

    def test_high_locks_severity(self, make_metrics) -> None:
        # Moderate sleep and stress, high overtraining
        metrics = make_metrics(sleep_score=60.0, stress_level=7.0, heart_rate_variability=15.0)
        analysis = self.analyzer.analyze(metrics)
        assert analysis.severity == Severity.HIGH
        assert all(analysis.severity >= f.severity for f in analysis.findings)

    def test_reasons_in_fixed_order(self, make_metrics) -> None:
        metrics = make_metrics(
            recovery_score=30.0,
            sleep_score=40.0,
            stress_level=9.0,
            heart_rate_variability=10.0,
        )
        analysis = self.analyzer.analyze(metrics)
        assert analysis.reasons == (
            AdaptationReason.LOW_READINESS,
            AdaptationReason.POOR_SLEEP,
            AdaptationReason.HIGH_STRESS,
            AdaptationReason.OVERTRAINING,
        )

    def test_findings_carry_values(self, make_metrics) -> None:
        analysis = self.analyzer.analyze(make_metrics(stress_level=8.0))
        (finding,) = analysis.findings
        assert finding.rule_id == "high_stress"
        assert finding.metric_value == 8.0

    def test_invalid_metrics_rejected(self, make_metrics) -> None:
        with pytest.raises(InvalidMetricError):
            self.analyzer.analyze(make_metrics(stress_level=0.0))

    def test_custom_registry(self, make_metrics) -> None:
        registry = RuleRegistry()
        registry.register(PoorSleepRule())
        analyzer = MetricsAnalyzer(registry)
        # Low recovery is ignored without its rule
        analysis = analyzer.analyze(make_metrics(recovery_score=10.0, sleep_score=45.0))
        assert analysis.reasons == (AdaptationReason.POOR_SLEEP,)
