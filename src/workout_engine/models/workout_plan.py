"""Workout plan models: DailyWorkout, WeeklyGoal, ProgressMetric, WorkoutPlan."""

from __future__ import annotations

from dataclasses import dataclass, field
from datetime import date, datetime

from workout_engine.models.adaptation import Adaptation
from workout_engine.models.enums import (
    AdaptationReason,
    Difficulty,
    Equipment,
    ExerciseCategory,
    GoalType,
    Intensity,
    RecommendationPriority,
)
from workout_engine.models.exercise import Exercise


@dataclass(frozen=True)
class DailyWorkout:
    """One scheduled day of a plan."""

    id: str
    date: date
    exercises: tuple[Exercise, ...] = field(default_factory=tuple)
    duration_min: int = 0
    intensity: Intensity = Intensity.MODERATE
    completed: bool = False
    adapted_for: AdaptationReason | None = None
    notes: str | None = None

    def __post_init__(self) -> None:
        if self.duration_min < 0:
            raise ValueError(
                f"DailyWorkout {self.id!r} duration cannot be negative, got {self.duration_min}"
            )


@dataclass(frozen=True)
class WeeklyGoal:
    """A typed weekly target."""

    id: str
    goal_type: GoalType
    target: float
    unit: str
    deadline: datetime
    current: float = 0.0
    priority: RecommendationPriority = RecommendationPriority.HIGH


@dataclass(frozen=True)
class ProgressMetric:
    """A single tracked performance measurement."""

    id: str
    metric: str
    value: float
    unit: str
    date: datetime
    notes: str | None = None


@dataclass(frozen=True)
class WorkoutPlan:
    """A structured multi-day exercise schedule.

    Created once by WorkoutPlanGenerator (or taken from the catalog) and
    afterwards only replaced by AdaptationApplier. ``adaptations`` is an
    append-only history.
    """

    id: str
    name: str
    description: str = ""
    user_id: str = ""
    weekly_goals: tuple[WeeklyGoal, ...] = field(default_factory=tuple)
    daily_workouts: tuple[DailyWorkout, ...] = field(default_factory=tuple)
    adaptations: tuple[Adaptation, ...] = field(default_factory=tuple)
    progress_metrics: tuple[ProgressMetric, ...] = field(default_factory=tuple)
    equipment: tuple[Equipment, ...] = (Equipment.NONE,)
    category: ExerciseCategory | None = None
    difficulty: Difficulty = Difficulty.BEGINNER
    tags: tuple[str, ...] = field(default_factory=tuple)
    estimated_calories: float = 0.0
    created_at: datetime = field(default_factory=datetime.now)
    updated_at: datetime = field(default_factory=datetime.now)
    is_active: bool = True

    @property
    def total_duration_min(self) -> int:
        """Duration of a single session (the longest daily workout)."""
        return max((d.duration_min for d in self.daily_workouts), default=0)

    @property
    def exercises(self) -> tuple[Exercise, ...]:
        """Distinct exercises across all daily workouts, in first-seen order."""
        seen: dict[str, Exercise] = {}
        for daily in self.daily_workouts:
            for exercise in daily.exercises:
                seen.setdefault(exercise.id, exercise)
        return tuple(seen.values())
