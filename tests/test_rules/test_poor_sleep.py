"""Tests for PoorSleepRule: sleep score thresholds."""

from __future__ import annotations

from workout_engine.models.enums import AdaptationReason, Severity
from workout_engine.rules.recovery.poor_sleep import PoorSleepRule


class TestPoorSleepRule:
    def setup_method(self) -> None:
        self.rule = PoorSleepRule()

    def test_reason(self) -> None:
        assert self.rule.reason == AdaptationReason.POOR_SLEEP

    def test_high_below_50(self) -> None:
        assert self.rule.classify(45.0) == Severity.HIGH

    def test_boundary_50_is_moderate(self) -> None:
        assert self.rule.classify(50.0) == Severity.MODERATE

    def test_no_action_at_70(self) -> None:
        assert self.rule.classify(70.0) is None
