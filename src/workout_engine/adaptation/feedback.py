"""Free-text feedback rules.

An ordered table of ``FeedbackRule`` entries evaluated first-match: the
first rule whose keywords appear (case-insensitive substring) in the
feedback decides the adaptation, later rules are not consulted.
"""

from __future__ import annotations

from dataclasses import dataclass

from workout_engine.models.adaptation import AdaptationChange
from workout_engine.models.enums import AdaptationReason, ChangeType


@dataclass(frozen=True)
class FeedbackRule:
    rule_id: str
    keywords: tuple[str, ...]
    reason: AdaptationReason
    change: AdaptationChange

    def matches(self, feedback: str) -> bool:
        lowered = feedback.lower()
        return any(keyword in lowered for keyword in self.keywords)


FEEDBACK_RULES: tuple[FeedbackRule, ...] = (
    FeedbackRule(
        rule_id="too_hard",
        keywords=("too hard", "difficult"),
        reason=AdaptationReason.LOW_READINESS,
        # No absolute target: the applier drops each workout one level
        change=AdaptationChange(
            change_type=ChangeType.INTENSITY_REDUCTION,
            description="Reduced intensity based on user feedback",
            original_value="Current intensity",
            new_value="Easier level",
        ),
    ),
    FeedbackRule(
        rule_id="short_on_time",
        keywords=("too long", "no time", "enough time"),
        reason=AdaptationReason.TIME_CONSTRAINT,
        change=AdaptationChange(
            change_type=ChangeType.DURATION_REDUCTION,
            description="Shortened workout based on time constraints",
            original_value="Full duration",
            new_value="Shortened version",
        ),
    ),
    FeedbackRule(
        rule_id="discomfort",
        keywords=("injury", "pain"),
        reason=AdaptationReason.INJURY,
        change=AdaptationChange(
            change_type=ChangeType.EXERCISE_SUBSTITUTION,
            description="Modified exercises due to reported discomfort",
            original_value="Original exercises",
            new_value="Low-impact alternatives",
        ),
    ),
)


def match_feedback(
    feedback: str, rules: tuple[FeedbackRule, ...] = FEEDBACK_RULES
) -> FeedbackRule | None:
    """Return the first rule matching the feedback, or None."""
    for rule in rules:
        if rule.matches(feedback):
            return rule
    return None
