"""AdaptationGenerator: metrics and feedback → ordered adaptation records."""

from __future__ import annotations

import logging
import uuid
from datetime import datetime

from workout_engine.adaptation.feedback import FEEDBACK_RULES, FeedbackRule, match_feedback
from workout_engine.adaptation.templates import ADAPTATION_DURATION_DAYS, get_changes
from workout_engine.analysis.analyzer import MetricsAnalyzer
from workout_engine.models.adaptation import Adaptation
from workout_engine.models.enums import AdaptationReason, Severity
from workout_engine.models.health_metrics import HealthMetricSnapshot
from workout_engine.models.workout_plan import WorkoutPlan

logger = logging.getLogger(__name__)


def _adaptation_id(prefix: str) -> str:
    return f"adaptation-{prefix}-{uuid.uuid4().hex[:12]}"


class AdaptationGenerator:
    """Synthesizes adaptations for a plan from a metrics snapshot and feedback.

    Metric-driven adaptations come first, one per fired reason in reason
    order, all built at the analysis' overall severity. A feedback string
    contributes at most one more adaptation, appended last.
    """

    def __init__(
        self,
        analyzer: MetricsAnalyzer | None = None,
        feedback_rules: tuple[FeedbackRule, ...] = FEEDBACK_RULES,
    ) -> None:
        self.analyzer = analyzer or MetricsAnalyzer()
        self.feedback_rules = feedback_rules

    def generate(
        self,
        plan: WorkoutPlan,
        metrics: HealthMetricSnapshot,
        feedback: str | None = None,
    ) -> list[Adaptation]:
        """Generate the adaptations a plan needs.

        Args:
            plan: The plan being evaluated.
            metrics: Frozen health-metric snapshot.
            feedback: Optional free-text feedback from the user.

        Returns:
            Ordered list of Adaptation records (possibly empty).

        Raises:
            InvalidMetricError: If any metric is outside its valid range.
        """
        analysis = self.analyzer.analyze(metrics)
        adaptations = [
            self.for_reason(reason, analysis.severity) for reason in analysis.reasons
        ]

        if feedback:
            feedback_adaptation = self.from_feedback(feedback)
            if feedback_adaptation is not None:
                adaptations.append(feedback_adaptation)

        logger.info("Generated %d adaptations for plan %s", len(adaptations), plan.id)
        return adaptations

    def for_reason(
        self,
        reason: AdaptationReason,
        severity: Severity,
        applied_at: datetime | None = None,
    ) -> Adaptation:
        """Build the templated adaptation for one reason."""
        return Adaptation(
            id=_adaptation_id(reason.value),
            reason=reason,
            changes=get_changes(reason, severity),
            applied_at=applied_at or datetime.now(),
            duration_days=ADAPTATION_DURATION_DAYS.get(reason),
        )

    def from_feedback(self, feedback: str) -> Adaptation | None:
        """Build an adaptation from free-text feedback, or None if nothing matches."""
        rule = match_feedback(feedback, self.feedback_rules)
        if rule is None:
            logger.debug("Feedback matched no rule: %r", feedback)
            return None
        logger.debug("Feedback matched rule %s", rule.rule_id)
        return Adaptation(
            id=_adaptation_id("feedback"),
            reason=rule.reason,
            changes=(rule.change,),
            applied_at=datetime.now(),
        )
