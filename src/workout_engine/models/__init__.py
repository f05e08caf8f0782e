"""Data models for the workout engine."""

from workout_engine.models.adaptation import (
    Adaptation,
    AdaptationChange,
    MetricFinding,
    MetricsAnalysis,
)
from workout_engine.models.enums import (
    AdaptationReason,
    ChangeType,
    Difficulty,
    Equipment,
    ExerciseCategory,
    Intensity,
    MuscleGroup,
    RecommendationPriority,
    Scenario,
    Severity,
    WorkoutGoal,
)
from workout_engine.models.exercise import Exercise, ExerciseModification
from workout_engine.models.health_metrics import HealthMetricSnapshot, MacroNutrients
from workout_engine.models.recommendation import WorkoutPreferences, WorkoutRecommendation
from workout_engine.models.session import (
    Achievement,
    CompletedExercise,
    PerformanceTrends,
    WorkoutSession,
    WorkoutStreak,
)
from workout_engine.models.workout_plan import (
    DailyWorkout,
    ProgressMetric,
    WeeklyGoal,
    WorkoutPlan,
)

__all__ = [
    "Achievement",
    "Adaptation",
    "AdaptationChange",
    "AdaptationReason",
    "ChangeType",
    "CompletedExercise",
    "DailyWorkout",
    "Difficulty",
    "Equipment",
    "Exercise",
    "ExerciseCategory",
    "ExerciseModification",
    "HealthMetricSnapshot",
    "Intensity",
    "MacroNutrients",
    "MetricFinding",
    "MetricsAnalysis",
    "MuscleGroup",
    "PerformanceTrends",
    "ProgressMetric",
    "RecommendationPriority",
    "Scenario",
    "Severity",
    "WeeklyGoal",
    "WorkoutGoal",
    "WorkoutPlan",
    "WorkoutPreferences",
    "WorkoutRecommendation",
    "WorkoutSession",
    "WorkoutStreak",
]
