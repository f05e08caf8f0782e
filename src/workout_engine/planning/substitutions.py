"""Injury-safe exercise alternatives and pre-authored exercise variants."""

from __future__ import annotations

import dataclasses
import logging
from dataclasses import dataclass
from typing import Iterable

from workout_engine.models.enums import (
    Difficulty,
    Equipment,
    ExerciseCategory,
    ModificationType,
    MuscleGroup,
)
from workout_engine.models.exercise import Exercise

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class SubstituteTemplate:
    """Blueprint for an alternative derived from the original exercise.

    ``calorie_factor`` scales the original's calories per minute; duration
    and difficulty are always inherited from the original.
    """

    name: str
    description: str
    category: ExerciseCategory
    equipment: tuple[Equipment, ...]
    calorie_factor: float
    instructions: tuple[str, ...]
    muscle_groups: tuple[MuscleGroup, ...]


INJURY_SUBSTITUTES: dict[str, tuple[SubstituteTemplate, ...]] = {
    "knee_injury": (
        SubstituteTemplate(
            name="Seated Upper Body",
            description="Upper body exercises that can be done seated",
            category=ExerciseCategory.STRENGTH,
            equipment=(Equipment.DUMBBELLS,),
            calorie_factor=0.7,
            instructions=(
                "Perform all exercises while seated",
                "Focus on upper body movements",
                "Maintain good posture throughout",
            ),
            muscle_groups=(
                MuscleGroup.CHEST,
                MuscleGroup.SHOULDERS,
                MuscleGroup.BICEPS,
                MuscleGroup.TRICEPS,
            ),
        ),
    ),
    "back_injury": (
        SubstituteTemplate(
            name="Low Impact Cardio",
            description="Gentle cardio exercises that minimize back strain",
            category=ExerciseCategory.CARDIO,
            equipment=(Equipment.NONE,),
            calorie_factor=0.6,
            instructions=(
                "Keep movements controlled and gentle",
                "Avoid twisting or bending motions",
                "Stop if you feel any discomfort",
            ),
            muscle_groups=(MuscleGroup.FULL_BODY,),
        ),
    ),
    "shoulder_injury": (
        SubstituteTemplate(
            name="Lower Body Focus",
            description="Exercises targeting legs and core without shoulder involvement",
            category=ExerciseCategory.STRENGTH,
            equipment=(Equipment.NONE,),
            calorie_factor=0.8,
            instructions=(
                "Focus on squats, lunges, and leg exercises",
                "Avoid overhead or pushing movements",
                "Keep arms relaxed at sides",
            ),
            muscle_groups=(
                MuscleGroup.QUADRICEPS,
                MuscleGroup.HAMSTRINGS,
                MuscleGroup.GLUTES,
                MuscleGroup.CORE,
            ),
        ),
    ),
}


def get_alternative_exercises(
    exercise: Exercise,
    injury_category: str,
    equipment: Iterable[Equipment] | None = None,
) -> list[Exercise]:
    """Build injury-safe alternatives for an exercise.

    Args:
        exercise: The exercise to replace.
        injury_category: Key such as ``"knee_injury"``. Unknown keys yield
            an empty list.
        equipment: Optional available equipment. Alternatives that need
            anything outside it are dropped.

    Returns:
        Alternatives with ids ``"{exercise.id}-alt-{i}"``, keeping the
        original duration and difficulty.
    """
    templates = INJURY_SUBSTITUTES.get(injury_category)
    if templates is None:
        logger.warning("No substitutes known for injury category %r", injury_category)
        return []

    alternatives = [
        dataclasses.replace(
            exercise,
            id=f"{exercise.id}-alt-{i}",
            name=template.name,
            description=template.description,
            category=template.category,
            equipment=template.equipment,
            calories_per_minute=exercise.calories_per_minute * template.calorie_factor,
            instructions=template.instructions,
            muscle_groups=template.muscle_groups,
            modifications=(),
        )
        for i, template in enumerate(templates)
    ]

    if equipment is not None:
        available = set(equipment)
        alternatives = [alt for alt in alternatives if alt.requires_only(available)]

    logger.debug(
        "%d alternatives for %s (%s)", len(alternatives), exercise.id, injury_category
    )
    return alternatives


_MODIFIED_DIFFICULTY = {
    ModificationType.EASIER: Difficulty.BEGINNER,
    ModificationType.HARDER: Difficulty.ADVANCED,
}


def get_exercise_modifications(
    exercise: Exercise, condition: str | None = None
) -> list[Exercise]:
    """Expand an exercise's pre-authored modifications into exercise variants.

    With ``condition`` set, only modifications targeting that condition are
    returned. Easier variants become beginner, harder ones advanced.
    """
    return [
        dataclasses.replace(
            exercise,
            id=f"{exercise.id}-{mod.modification_type.value}",
            name=f"{exercise.name} ({mod.modification_type.value})",
            description=mod.description,
            difficulty=_MODIFIED_DIFFICULTY.get(mod.modification_type, exercise.difficulty),
        )
        for mod in exercise.modifications
        if condition is None or mod.target_condition == condition
    ]
