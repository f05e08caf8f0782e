"""Tests for LowReadinessRule: recovery score thresholds."""

from __future__ import annotations

from workout_engine.models.enums import AdaptationReason, Severity
from workout_engine.rules.recovery.low_readiness import LowReadinessRule


class TestLowReadinessRule:
    def setup_method(self) -> None:
        self.rule = LowReadinessRule()

    def test_reason(self) -> None:
        assert self.rule.reason == AdaptationReason.LOW_READINESS

    def test_high_below_40(self) -> None:
        assert self.rule.classify(35.0) == Severity.HIGH

    def test_boundary_40_is_moderate(self) -> None:
        assert self.rule.classify(40.0) == Severity.MODERATE

    def test_moderate_below_60(self) -> None:
        assert self.rule.classify(59.9) == Severity.MODERATE

    def test_no_action_at_60(self) -> None:
        assert self.rule.classify(60.0) is None

    def test_evaluate_records_metric_value(self, make_metrics) -> None:
        finding = self.rule.evaluate(make_metrics(recovery_score=35.0))
        assert finding is not None
        assert finding.rule_id == "low_readiness"
        assert finding.metric_value == 35.0
        assert finding.severity == Severity.HIGH
        assert "recovery_score" in finding.explanation

    def test_evaluate_healthy_returns_none(self, healthy_metrics) -> None:
        assert self.rule.evaluate(healthy_metrics) is None
