"""RecommendationSelector: default recommendations plus a chat-driven override.

The selector state is a small tagged union: either nothing is active
(``DefaultState``) or a chat message has activated a scenario
(``ScenarioActive``). ``process_message`` is a pure transition function;
``RecommendationSelector`` wraps one caller-owned state for convenience.
"""

from __future__ import annotations

import logging
import uuid
from dataclasses import dataclass
from datetime import datetime
from typing import Union

from workout_engine import config
from workout_engine.catalog.repository import ExerciseCatalog
from workout_engine.models.enums import Difficulty, RecommendationPriority, Scenario
from workout_engine.models.recommendation import WorkoutPreferences, WorkoutRecommendation
from workout_engine.models.workout_plan import WorkoutPlan
from workout_engine.recommendations.scenarios import (
    SCENARIO_BASED_ON,
    SCENARIO_MAPPINGS,
    ScenarioMapping,
    match_scenario,
)

logger = logging.getLogger(__name__)

DEFAULT_REASON = "Based on your fitness goals and preferences"
DEFAULT_BASED_ON: tuple[str, ...] = ("fitness_goals", "preferences")

_DIFFICULTY_RANK = {
    Difficulty.BEGINNER: 0,
    Difficulty.INTERMEDIATE: 1,
    Difficulty.ADVANCED: 2,
}


@dataclass(frozen=True)
class DefaultState:
    """No scenario active; only default recommendations are served."""


@dataclass(frozen=True)
class ScenarioActive:
    scenario: Scenario
    recommendation: WorkoutRecommendation


SelectorState = Union[DefaultState, ScenarioActive]


def process_message(
    state: SelectorState,
    text: str,
    catalog: ExerciseCatalog,
    mappings: tuple[ScenarioMapping, ...] = SCENARIO_MAPPINGS,
    now: datetime | None = None,
) -> tuple[SelectorState, bool]:
    """Transition the selector state for one chat message.

    A matching message replaces whatever was active; an unmatched one
    leaves the state untouched.

    Returns:
        (new_state, matched)
    """
    mapping = match_scenario(text, mappings)
    if mapping is None:
        return state, False

    recommendation = WorkoutRecommendation(
        id=f"demo-rec-{uuid.uuid4().hex[:12]}",
        workout_plan=catalog.get_plan(mapping.plan_id),
        reason=mapping.reason,
        priority=mapping.priority,
        based_on=SCENARIO_BASED_ON,
        scheduled_for=now or datetime.now(),
    )
    logger.info("Chat message activated scenario %s", mapping.scenario.value)
    return ScenarioActive(mapping.scenario, recommendation), True


def _plan_fits(plan: WorkoutPlan, preferences: WorkoutPreferences) -> bool:
    if preferences.available_equipment is not None:
        available = set(preferences.available_equipment)
        if not all(ex.requires_only(available) for ex in plan.exercises):
            return False
    if preferences.fitness_level is not None:
        if _DIFFICULTY_RANK[plan.difficulty] > _DIFFICULTY_RANK[preferences.fitness_level]:
            return False
    if preferences.preferred_duration_min is not None:
        if plan.total_duration_min > preferences.preferred_duration_min:
            return False
    if preferences.disliked_exercises:
        disliked = set(preferences.disliked_exercises)
        if any(ex.id in disliked for ex in plan.exercises):
            return False
    return True


def default_recommendations(
    catalog: ExerciseCatalog,
    preferences: WorkoutPreferences | None = None,
    now: datetime | None = None,
) -> list[WorkoutRecommendation]:
    """The catalog's default plans as recommendations.

    The first plan left after preference filtering is high priority, the
    rest medium.
    """
    plans = list(catalog.default_plans)
    if preferences is not None:
        plans = [plan for plan in plans if _plan_fits(plan, preferences)]
    scheduled = now or datetime.now()
    return [
        WorkoutRecommendation(
            id=f"fallback-rec-{index}",
            workout_plan=plan,
            reason=DEFAULT_REASON,
            priority=RecommendationPriority.HIGH if index == 0 else RecommendationPriority.MEDIUM,
            based_on=DEFAULT_BASED_ON,
            scheduled_for=scheduled,
        )
        for index, plan in enumerate(plans)
    ]


class RecommendationSelector:
    """Holds one selector state and serves recommendations from it.

    Usage::

        selector = RecommendationSelector(ExerciseCatalog.default())
        selector.process_message("My back feels sore today")
        selector.get_recommendations()[0].workout_plan.name
    """

    def __init__(
        self,
        catalog: ExerciseCatalog,
        mappings: tuple[ScenarioMapping, ...] = SCENARIO_MAPPINGS,
        max_recommendations: int | None = None,
    ) -> None:
        self.catalog = catalog
        self.mappings = mappings
        self.max_recommendations = (
            config.MAX_RECOMMENDATIONS if max_recommendations is None else max_recommendations
        )
        self.state: SelectorState = DefaultState()

    def process_message(self, text: str) -> bool:
        """Feed a chat message; True if it activated a scenario."""
        self.state, matched = process_message(self.state, text, self.catalog, self.mappings)
        return matched

    def reset(self) -> None:
        self.state = DefaultState()

    @property
    def current_recommendation(self) -> WorkoutRecommendation | None:
        if isinstance(self.state, ScenarioActive):
            return self.state.recommendation
        return None

    def get_recommendations(
        self, preferences: WorkoutPreferences | None = None
    ) -> list[WorkoutRecommendation]:
        """Active scenario recommendation first, then defaults, capped."""
        recommendations: list[WorkoutRecommendation] = []
        if self.current_recommendation is not None:
            recommendations.append(self.current_recommendation)
        remaining = max(0, self.max_recommendations - len(recommendations))
        recommendations.extend(default_recommendations(self.catalog, preferences)[:remaining])
        return recommendations
