"""Tests for OvertrainingRule: HRV thresholds."""

from __future__ import annotations

from workout_engine.models.enums import AdaptationReason, Severity
from workout_engine.rules.recovery.overtraining import OvertrainingRule


class TestOvertrainingRule:
    def setup_method(self) -> None:
        self.rule = OvertrainingRule()

    def test_reason(self) -> None:
        assert self.rule.reason == AdaptationReason.OVERTRAINING

    def test_high_below_20(self) -> None:
        assert self.rule.classify(15.0) == Severity.HIGH

    def test_boundary_20_is_moderate(self) -> None:
        assert self.rule.classify(20.0) == Severity.MODERATE

    def test_no_action_at_30(self) -> None:
        assert self.rule.classify(30.0) is None
