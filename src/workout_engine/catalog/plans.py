"""Default single-session workout plans shown as recommendations."""

from __future__ import annotations

from datetime import date

from workout_engine.models.enums import (
    Difficulty,
    Equipment,
    ExerciseCategory,
    Intensity,
    MuscleGroup,
)
from workout_engine.models.exercise import Exercise
from workout_engine.models.workout_plan import DailyWorkout, WorkoutPlan

# Exercises only used by chat-scenario plans; not part of the general library
SCENARIO_EXERCISES: tuple[Exercise, ...] = (
    Exercise(
        id="core-stability",
        name="Core Stability Routine",
        description="Gentle core exercises to support back health",
        category=ExerciseCategory.STRENGTH,
        equipment=(Equipment.NONE,),
        difficulty=Difficulty.BEGINNER,
        duration_min=20,
        calories_per_minute=4.0,
        instructions=(
            "Start with gentle pelvic tilts and bird dogs",
            "Progress to modified planks and dead bugs",
            "Focus on controlled movements and breathing",
            "Avoid any movements that cause pain",
        ),
        muscle_groups=(MuscleGroup.CORE, MuscleGroup.BACK),
    ),
    Exercise(
        id="gentle-flow",
        name="Gentle Movement",
        description="Light stretching and mobility work",
        category=ExerciseCategory.FLEXIBILITY,
        equipment=(Equipment.NONE,),
        difficulty=Difficulty.BEGINNER,
        duration_min=15,
        calories_per_minute=3.0,
        instructions=(
            "Start with gentle neck and shoulder rolls",
            "Move through easy spinal twists",
            "Include light leg swings and arm circles",
            "Focus on breathing and gentle movement",
        ),
        muscle_groups=(MuscleGroup.FULL_BODY,),
    ),
    Exercise(
        id="hiit-challenge",
        name="HIIT Challenge",
        description="High-intensity interval training for maximum impact",
        category=ExerciseCategory.HIIT,
        equipment=(Equipment.NONE,),
        difficulty=Difficulty.ADVANCED,
        duration_min=30,
        calories_per_minute=15.0,
        instructions=(
            "Warm up with dynamic movements for 5 minutes",
            "Perform 8 rounds of 30 seconds work, 15 seconds rest",
            "Include burpees, mountain climbers, jump squats, and push-ups",
            "Cool down with stretching for 5 minutes",
        ),
        muscle_groups=(MuscleGroup.FULL_BODY,),
    ),
)


def single_session_plan(
    plan_id: str,
    name: str,
    description: str,
    exercises: tuple[Exercise, ...],
    duration_min: int,
    intensity: Intensity,
    estimated_calories: float,
    difficulty: Difficulty,
    equipment: tuple[Equipment, ...],
    category: ExerciseCategory,
    tags: tuple[str, ...],
    on: date | None = None,
) -> WorkoutPlan:
    """Build a plan that consists of one daily workout."""
    session = DailyWorkout(
        id=f"{plan_id}-day-1",
        date=on or date.today(),
        exercises=exercises,
        duration_min=duration_min,
        intensity=intensity,
    )
    return WorkoutPlan(
        id=plan_id,
        name=name,
        description=description,
        daily_workouts=(session,),
        equipment=equipment,
        category=category,
        difficulty=difficulty,
        tags=tags,
        estimated_calories=estimated_calories,
    )


def build_default_plans(
    exercises: dict[str, Exercise], on: date | None = None
) -> tuple[WorkoutPlan, ...]:
    """Build the default recommendation plans, priority order first.

    Args:
        exercises: Exercise lookup by id; must contain the library and
            scenario exercises referenced below.
        on: Date of each plan's single session (defaults to today).
    """
    return (
        single_session_plan(
            "morning-hiit",
            "Morning HIIT Blast",
            "Perfect for your energy level today! This workout will boost your "
            "metabolism and improve cardiovascular health.",
            (exercises["hiit-bodyweight"],),
            duration_min=25,
            intensity=Intensity.HIGH,
            estimated_calories=300,
            difficulty=Difficulty.INTERMEDIATE,
            equipment=(Equipment.NONE,),
            category=ExerciseCategory.HIIT,
            tags=("morning", "energy-boost", "metabolism"),
            on=on,
        ),
        single_session_plan(
            "cardio-endurance",
            "Cardio Endurance",
            "Build your cardiovascular endurance with this steady-state workout",
            (exercises["running"],),
            duration_min=30,
            intensity=Intensity.MODERATE,
            estimated_calories=300,
            difficulty=Difficulty.BEGINNER,
            equipment=(Equipment.NONE,),
            category=ExerciseCategory.CARDIO,
            tags=("endurance", "fat-burn", "beginner-friendly"),
            on=on,
        ),
        single_session_plan(
            "strength-builder",
            "Strength Builder",
            "Build lean muscle with this comprehensive strength workout",
            (exercises["strength-dumbbells"],),
            duration_min=35,
            intensity=Intensity.MODERATE,
            estimated_calories=210,
            difficulty=Difficulty.INTERMEDIATE,
            equipment=(Equipment.DUMBBELLS,),
            category=ExerciseCategory.STRENGTH,
            tags=("muscle-building", "strength", "full-body"),
            on=on,
        ),
    )


def build_scenario_plans(
    exercises: dict[str, Exercise], on: date | None = None
) -> tuple[WorkoutPlan, ...]:
    """Build the fixed plans served by chat-triggered scenarios."""
    return (
        single_session_plan(
            "core-stability-light-cardio",
            "Core Stability & Light Cardio",
            "Gentle core strengthening and low-impact cardio to support your back "
            "recovery while maintaining fitness.",
            (exercises["core-stability"],),
            duration_min=25,
            intensity=Intensity.LOW,
            estimated_calories=100,
            difficulty=Difficulty.BEGINNER,
            equipment=(Equipment.NONE,),
            category=ExerciseCategory.STRENGTH,
            tags=("back-friendly", "core", "recovery", "gentle"),
            on=on,
        ),
        single_session_plan(
            "gentle-movement",
            "Gentle Movement Flow",
            "Light stretching and easy movement to boost energy without "
            "overwhelming your system.",
            (exercises["gentle-flow"],),
            duration_min=15,
            intensity=Intensity.LOW,
            estimated_calories=45,
            difficulty=Difficulty.BEGINNER,
            equipment=(Equipment.NONE,),
            category=ExerciseCategory.FLEXIBILITY,
            tags=("energy-boost", "gentle", "recovery", "mobility"),
            on=on,
        ),
        single_session_plan(
            "high-intensity-challenge",
            "High-Intensity Challenge",
            "Channel that energy into an intense workout that will push your "
            "limits and maximize results.",
            (exercises["hiit-challenge"],),
            duration_min=30,
            intensity=Intensity.HIGH,
            estimated_calories=450,
            difficulty=Difficulty.ADVANCED,
            equipment=(Equipment.NONE,),
            category=ExerciseCategory.HIIT,
            tags=("high-intensity", "challenge", "energy-burn", "advanced"),
            on=on,
        ),
    )
