"""Workout recommendations and the preferences that filter them."""

from __future__ import annotations

from dataclasses import dataclass, field
from datetime import datetime

from workout_engine.models.enums import (
    Difficulty,
    Equipment,
    RecommendationPriority,
    WorkoutGoal,
)
from workout_engine.models.workout_plan import WorkoutPlan


@dataclass(frozen=True)
class WorkoutRecommendation:
    """Read-only projection of a plan suggested to the user."""

    id: str
    workout_plan: WorkoutPlan
    reason: str
    priority: RecommendationPriority
    based_on: tuple[str, ...] = field(default_factory=tuple)
    scheduled_for: datetime | None = None


@dataclass(frozen=True)
class WorkoutPreferences:
    """User preferences used to narrow the default recommendations.

    Any field left as None does not filter.
    """

    preferred_duration_min: int | None = None
    preferred_time: str | None = None  # "morning" | "afternoon" | "evening"
    available_equipment: tuple[Equipment, ...] | None = None
    fitness_level: Difficulty | None = None
    goals: tuple[WorkoutGoal, ...] = field(default_factory=tuple)
    disliked_exercises: tuple[str, ...] = field(default_factory=tuple)
