"""Exercise catalog entries."""

from __future__ import annotations

from dataclasses import dataclass, field

from workout_engine.models.enums import (
    Difficulty,
    Equipment,
    ExerciseCategory,
    ModificationType,
    MuscleGroup,
)


@dataclass(frozen=True)
class ExerciseModification:
    """A pre-authored easier / harder / injury variant of an exercise."""

    modification_type: ModificationType
    description: str
    target_condition: str | None = None


@dataclass(frozen=True)
class Exercise:
    """A single exercise in the catalog.

    Attributes:
        equipment: Everything the exercise needs. ``(Equipment.NONE,)``
            marks a bodyweight exercise.
        duration_min: Nominal duration in minutes.
        calories_per_minute: Average energy expenditure.
        modifications: Pre-authored variants, see ExerciseModification.
    """

    id: str
    name: str
    description: str
    category: ExerciseCategory
    equipment: tuple[Equipment, ...]
    difficulty: Difficulty
    duration_min: int
    calories_per_minute: float
    instructions: tuple[str, ...] = field(default_factory=tuple)
    muscle_groups: tuple[MuscleGroup, ...] = field(default_factory=tuple)
    modifications: tuple[ExerciseModification, ...] = field(default_factory=tuple)
    sets: int | None = None
    reps: int | None = None
    rest_seconds: int | None = None

    @property
    def estimated_calories(self) -> float:
        return self.duration_min * self.calories_per_minute

    def requires_only(self, available: frozenset[Equipment] | set[Equipment]) -> bool:
        """True if every piece of required equipment is available (or none is needed)."""
        return all(eq == Equipment.NONE or eq in available for eq in self.equipment)
