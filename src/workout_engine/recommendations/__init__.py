"""Priority-ordered workout recommendations with chat-triggered overrides."""

from workout_engine.recommendations.selector import (
    DefaultState,
    RecommendationSelector,
    ScenarioActive,
    process_message,
)

__all__ = ["DefaultState", "RecommendationSelector", "ScenarioActive", "process_message"]
