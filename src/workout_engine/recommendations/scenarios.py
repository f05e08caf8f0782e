"""Chat scenario table: trigger phrases → fixed recommendation plans.

Order matters: the first scenario with a matching phrase wins, so a
message mentioning both back pain and tiredness selects back_pain.
"""

from __future__ import annotations

from dataclasses import dataclass

from workout_engine.models.enums import RecommendationPriority, Scenario


@dataclass(frozen=True)
class ScenarioMapping:
    scenario: Scenario
    trigger_phrases: tuple[str, ...]
    plan_id: str
    reason: str
    priority: RecommendationPriority = RecommendationPriority.HIGH

    def matches(self, text: str) -> bool:
        """Case-insensitive substring match against any trigger phrase."""
        lowered = text.lower()
        return any(phrase.lower() in lowered for phrase in self.trigger_phrases)


SCENARIO_BASED_ON: tuple[str, ...] = ("chat_input", "demo_scenario")

SCENARIO_MAPPINGS: tuple[ScenarioMapping, ...] = (
    ScenarioMapping(
        scenario=Scenario.BACK_PAIN,
        trigger_phrases=(
            "my back feels sore",
            "back pain",
            "sore back",
            "back hurts",
            "back is tight",
            "lower back pain",
        ),
        plan_id="core-stability-light-cardio",
        reason=(
            "Perfect for your sore back! This gentle routine focuses on core "
            "stability and light cardio to support recovery."
        ),
    ),
    ScenarioMapping(
        scenario=Scenario.FATIGUE,
        trigger_phrases=(
            "feeling tired",
            "tired",
            "low energy",
            "exhausted",
            "fatigue",
            "drained",
            "no energy",
        ),
        plan_id="gentle-movement",
        reason=(
            "When energy is low, gentle movement can help boost circulation "
            "and mood without draining you further."
        ),
    ),
    ScenarioMapping(
        scenario=Scenario.HIGH_ENERGY,
        trigger_phrases=(
            "feeling great",
            "high energy",
            "energetic",
            "amazing",
            "pumped up",
            "ready to go",
            "motivated",
        ),
        plan_id="high-intensity-challenge",
        reason=(
            "Your high energy levels are perfect for this challenging HIIT "
            "workout that will maximize your results!"
        ),
    ),
)


def match_scenario(
    text: str, mappings: tuple[ScenarioMapping, ...] = SCENARIO_MAPPINGS
) -> ScenarioMapping | None:
    """Return the first scenario whose trigger phrases appear in ``text``."""
    return next((m for m in mappings if m.matches(text)), None)
