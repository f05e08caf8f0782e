"""Workout session tracking models."""

from __future__ import annotations

from dataclasses import dataclass, field
from datetime import date, datetime

from workout_engine.models.workout_plan import ProgressMetric


@dataclass(frozen=True)
class CompletedExercise:
    exercise_id: str
    exercise_name: str
    duration_min: float
    sets: int | None = None
    reps: int | None = None
    weight_kg: float | None = None
    distance_km: float | None = None
    notes: str | None = None


@dataclass(frozen=True)
class WorkoutSession:
    """A started or completed workout."""

    id: str
    workout_plan_id: str
    workout_name: str
    start_time: datetime
    end_time: datetime | None = None
    duration_min: float = 0.0
    calories_burned: float = 0.0
    exercises: tuple[CompletedExercise, ...] = field(default_factory=tuple)
    rating: int | None = None  # 1-5
    notes: str | None = None
    completed: bool = False
    progress: tuple[ProgressMetric, ...] = field(default_factory=tuple)


@dataclass(frozen=True)
class WorkoutStreak:
    current_streak: int
    longest_streak: int
    last_workout_date: date | None
    weekly_goal: int
    weekly_completed: int


@dataclass(frozen=True)
class Achievement:
    id: str
    title: str
    description: str
    category: str  # "streak" | "calories" | "milestone"
    target: float
    progress: float  # 0-100
    unlocked_at: datetime | None = None

    @property
    def unlocked(self) -> bool:
        return self.unlocked_at is not None


@dataclass(frozen=True)
class PerformanceTrends:
    trends: tuple[ProgressMetric, ...] = field(default_factory=tuple)
    insights: tuple[str, ...] = field(default_factory=tuple)
    recommendations: tuple[str, ...] = field(default_factory=tuple)
