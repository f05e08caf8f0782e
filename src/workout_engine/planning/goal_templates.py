"""Goal → exercise category lookup used by plan generation."""

from __future__ import annotations

from workout_engine.models.enums import ExerciseCategory, WorkoutGoal

GOAL_CATEGORIES: dict[WorkoutGoal, tuple[ExerciseCategory, ...]] = {
    WorkoutGoal.WEIGHT_LOSS: (ExerciseCategory.CARDIO, ExerciseCategory.HIIT),
    WorkoutGoal.MUSCLE_GAIN: (ExerciseCategory.STRENGTH,),
    WorkoutGoal.ENDURANCE: (ExerciseCategory.CARDIO,),
    WorkoutGoal.STRENGTH: (ExerciseCategory.STRENGTH,),
    WorkoutGoal.FLEXIBILITY: (ExerciseCategory.YOGA, ExerciseCategory.FLEXIBILITY),
    WorkoutGoal.GENERAL_FITNESS: (
        ExerciseCategory.CARDIO,
        ExerciseCategory.STRENGTH,
        ExerciseCategory.HIIT,
    ),
}

FALLBACK_CATEGORIES: tuple[ExerciseCategory, ...] = (ExerciseCategory.CARDIO,)


def get_goal_categories(goal: WorkoutGoal | str) -> tuple[ExerciseCategory, ...]:
    """Look up the categories for a goal; unrecognised goals fall back to cardio."""
    try:
        return GOAL_CATEGORIES[WorkoutGoal(goal)]
    except ValueError:
        return FALLBACK_CATEGORIES
