"""JSON-compatible dict conversion for snapshots, plans and recommendations.

Enums are written as their string values and dates/datetimes as ISO-8601
strings. Snapshot input accepts either the app's camelCase keys
(``heartRateVariability``) or snake_case (``heart_rate_variability``).

All functions are pure (no I/O).
"""

from __future__ import annotations

import json
from datetime import date, datetime
from typing import Any

from workout_engine.exceptions import InvalidMetricError
from workout_engine.models.adaptation import Adaptation, AdaptationChange, MetricsAnalysis
from workout_engine.models.enums import (
    AdaptationReason,
    ChangeType,
    Difficulty,
    Equipment,
    ExerciseCategory,
    GoalType,
    Intensity,
    ModificationType,
    MuscleGroup,
    RecommendationPriority,
)
from workout_engine.models.exercise import Exercise, ExerciseModification
from workout_engine.models.health_metrics import HealthMetricSnapshot, MacroNutrients
from workout_engine.models.recommendation import WorkoutRecommendation
from workout_engine.models.workout_plan import (
    DailyWorkout,
    ProgressMetric,
    WeeklyGoal,
    WorkoutPlan,
)

# camelCase → snapshot field name
_SNAPSHOT_KEYS = {
    "heartRate": "heart_rate",
    "heartRateVariability": "heart_rate_variability",
    "sleepScore": "sleep_score",
    "recoveryScore": "recovery_score",
    "stressLevel": "stress_level",
    "activityLevel": "activity_level",
    "caloriesConsumed": "calories_consumed",
    "caloriesBurned": "calories_burned",
    "waterIntake": "water_intake_ml",
    "waterIntakeMl": "water_intake_ml",
}
_REQUIRED_SNAPSHOT_FIELDS = (
    "heart_rate",
    "heart_rate_variability",
    "sleep_score",
    "recovery_score",
    "stress_level",
    "activity_level",
)
_MACRO_FIELDS = ("protein", "carbohydrates", "fats", "fiber", "sugar")


def _iso(value: date | datetime | None) -> str | None:
    return value.isoformat() if value is not None else None


def _parse_datetime(value: str | None) -> datetime | None:
    return datetime.fromisoformat(value) if value else None


# ---------------------------------------------------------------------------
# Health metrics
# ---------------------------------------------------------------------------


def _metric(name: str, value: Any) -> float:
    if isinstance(value, bool):
        raise InvalidMetricError(name, value)
    try:
        return float(value)
    except (TypeError, ValueError):
        raise InvalidMetricError(name, value) from None


def snapshot_from_dict(data: dict[str, Any]) -> HealthMetricSnapshot:
    """Build a HealthMetricSnapshot from a camelCase or snake_case dict.

    Range checking is left to metric validation.

    Raises:
        InvalidMetricError: If a required metric is missing or a metric is
            not a number.
    """
    normalized = {_SNAPSHOT_KEYS.get(key, key): value for key, value in data.items()}
    for name in _REQUIRED_SNAPSHOT_FIELDS:
        if normalized.get(name) is None:
            raise InvalidMetricError(name, None)

    kwargs: dict[str, Any] = {
        name: _metric(name, normalized[name]) for name in _REQUIRED_SNAPSHOT_FIELDS
    }
    for name in ("calories_consumed", "calories_burned", "water_intake_ml"):
        if normalized.get(name) is not None:
            kwargs[name] = _metric(name, normalized[name])

    macros = normalized.get("macronutrients")
    if macros:
        kwargs["macronutrients"] = MacroNutrients(
            **{name: _metric(name, macros[name]) for name in _MACRO_FIELDS if name in macros}
        )
    timestamp = _parse_datetime(normalized.get("timestamp"))
    if timestamp is not None:
        kwargs["timestamp"] = timestamp
    return HealthMetricSnapshot(**kwargs)


def snapshot_to_dict(metrics: HealthMetricSnapshot) -> dict[str, Any]:
    return {
        "heart_rate": metrics.heart_rate,
        "heart_rate_variability": metrics.heart_rate_variability,
        "sleep_score": metrics.sleep_score,
        "recovery_score": metrics.recovery_score,
        "stress_level": metrics.stress_level,
        "activity_level": metrics.activity_level,
        "calories_consumed": metrics.calories_consumed,
        "calories_burned": metrics.calories_burned,
        "water_intake_ml": metrics.water_intake_ml,
        "macronutrients": {
            name: getattr(metrics.macronutrients, name) for name in _MACRO_FIELDS
        },
        "timestamp": _iso(metrics.timestamp),
    }


def analysis_to_dict(analysis: MetricsAnalysis) -> dict[str, Any]:
    return {
        "needs_adaptation": analysis.needs_adaptation,
        "reasons": [reason.value for reason in analysis.reasons],
        "severity": analysis.severity.name.lower(),
        "findings": [
            {
                "rule_id": f.rule_id,
                "reason": f.reason.value,
                "severity": f.severity.name.lower(),
                "metric_value": f.metric_value,
                "explanation": f.explanation,
            }
            for f in analysis.findings
        ],
    }


# ---------------------------------------------------------------------------
# Exercises
# ---------------------------------------------------------------------------


def exercise_to_dict(exercise: Exercise) -> dict[str, Any]:
    return {
        "id": exercise.id,
        "name": exercise.name,
        "description": exercise.description,
        "category": exercise.category.value,
        "equipment": [eq.value for eq in exercise.equipment],
        "difficulty": exercise.difficulty.value,
        "duration_min": exercise.duration_min,
        "calories_per_minute": exercise.calories_per_minute,
        "instructions": list(exercise.instructions),
        "muscle_groups": [mg.value for mg in exercise.muscle_groups],
        "modifications": [
            {
                "type": mod.modification_type.value,
                "description": mod.description,
                "target_condition": mod.target_condition,
            }
            for mod in exercise.modifications
        ],
        "sets": exercise.sets,
        "reps": exercise.reps,
        "rest_seconds": exercise.rest_seconds,
    }


def exercise_from_dict(data: dict[str, Any]) -> Exercise:
    return Exercise(
        id=data["id"],
        name=data["name"],
        description=data.get("description", ""),
        category=ExerciseCategory(data["category"]),
        equipment=tuple(Equipment(eq) for eq in data.get("equipment", ["none"])),
        difficulty=Difficulty(data.get("difficulty", "beginner")),
        duration_min=int(data["duration_min"]),
        calories_per_minute=float(data.get("calories_per_minute", 0.0)),
        instructions=tuple(data.get("instructions", ())),
        muscle_groups=tuple(MuscleGroup(mg) for mg in data.get("muscle_groups", ())),
        modifications=tuple(
            ExerciseModification(
                ModificationType(mod["type"]),
                mod["description"],
                mod.get("target_condition"),
            )
            for mod in data.get("modifications", ())
        ),
        sets=data.get("sets"),
        reps=data.get("reps"),
        rest_seconds=data.get("rest_seconds"),
    )


# ---------------------------------------------------------------------------
# Plans
# ---------------------------------------------------------------------------


def _change_to_dict(change: AdaptationChange) -> dict[str, Any]:
    return {
        "type": change.change_type.value,
        "description": change.description,
        "original_value": change.original_value,
        "new_value": change.new_value,
        "target_intensity": change.target_intensity.value if change.target_intensity else None,
        "target_duration_min": change.target_duration_min,
    }


def _change_from_dict(data: dict[str, Any]) -> AdaptationChange:
    target = data.get("target_intensity")
    return AdaptationChange(
        change_type=ChangeType(data["type"]),
        description=data.get("description", ""),
        original_value=data.get("original_value", ""),
        new_value=data.get("new_value", ""),
        target_intensity=Intensity(target) if target else None,
        target_duration_min=data.get("target_duration_min"),
    )


def adaptation_to_dict(adaptation: Adaptation) -> dict[str, Any]:
    return {
        "id": adaptation.id,
        "reason": adaptation.reason.value,
        "changes": [_change_to_dict(c) for c in adaptation.changes],
        "applied_at": _iso(adaptation.applied_at),
        "duration_days": adaptation.duration_days,
    }


def _adaptation_from_dict(data: dict[str, Any]) -> Adaptation:
    return Adaptation(
        id=data["id"],
        reason=AdaptationReason(data["reason"]),
        changes=tuple(_change_from_dict(c) for c in data["changes"]),
        applied_at=_parse_datetime(data.get("applied_at")) or datetime.now(),
        duration_days=data.get("duration_days"),
    )


def _daily_to_dict(daily: DailyWorkout) -> dict[str, Any]:
    return {
        "id": daily.id,
        "date": _iso(daily.date),
        "exercises": [exercise_to_dict(ex) for ex in daily.exercises],
        "duration_min": daily.duration_min,
        "intensity": daily.intensity.value,
        "completed": daily.completed,
        "adapted_for": daily.adapted_for.value if daily.adapted_for else None,
        "notes": daily.notes,
    }


def _daily_from_dict(data: dict[str, Any]) -> DailyWorkout:
    adapted_for = data.get("adapted_for")
    return DailyWorkout(
        id=data["id"],
        date=date.fromisoformat(data["date"]),
        exercises=tuple(exercise_from_dict(ex) for ex in data.get("exercises", ())),
        duration_min=int(data.get("duration_min", 0)),
        intensity=Intensity(data.get("intensity", "moderate")),
        completed=bool(data.get("completed", False)),
        adapted_for=AdaptationReason(adapted_for) if adapted_for else None,
        notes=data.get("notes"),
    )


def plan_to_dict(plan: WorkoutPlan) -> dict[str, Any]:
    """Convert a WorkoutPlan (with its history) to a JSON-compatible dict."""
    return {
        "id": plan.id,
        "user_id": plan.user_id,
        "name": plan.name,
        "description": plan.description,
        "weekly_goals": [
            {
                "id": goal.id,
                "type": goal.goal_type.value,
                "target": goal.target,
                "current": goal.current,
                "unit": goal.unit,
                "deadline": _iso(goal.deadline),
                "priority": goal.priority.value,
            }
            for goal in plan.weekly_goals
        ],
        "daily_workouts": [_daily_to_dict(d) for d in plan.daily_workouts],
        "adaptations": [adaptation_to_dict(a) for a in plan.adaptations],
        "progress_metrics": [
            {
                "id": m.id,
                "metric": m.metric,
                "value": m.value,
                "unit": m.unit,
                "date": _iso(m.date),
                "notes": m.notes,
            }
            for m in plan.progress_metrics
        ],
        "equipment": [eq.value for eq in plan.equipment],
        "category": plan.category.value if plan.category else None,
        "difficulty": plan.difficulty.value,
        "tags": list(plan.tags),
        "estimated_calories": plan.estimated_calories,
        "total_duration_min": plan.total_duration_min,
        "created_at": _iso(plan.created_at),
        "updated_at": _iso(plan.updated_at),
        "is_active": plan.is_active,
    }


def plan_from_dict(data: dict[str, Any]) -> WorkoutPlan:
    """Rebuild a WorkoutPlan from ``plan_to_dict`` output.

    Derived keys such as ``total_duration_min`` are ignored.
    """
    category = data.get("category")
    now = datetime.now()
    return WorkoutPlan(
        id=data["id"],
        name=data["name"],
        description=data.get("description", ""),
        user_id=data.get("user_id", ""),
        weekly_goals=tuple(
            WeeklyGoal(
                id=goal["id"],
                goal_type=GoalType(goal["type"]),
                target=float(goal["target"]),
                unit=goal["unit"],
                deadline=_parse_datetime(goal["deadline"]) or now,
                current=float(goal.get("current", 0.0)),
                priority=RecommendationPriority(goal.get("priority", "high")),
            )
            for goal in data.get("weekly_goals", ())
        ),
        daily_workouts=tuple(_daily_from_dict(d) for d in data.get("daily_workouts", ())),
        adaptations=tuple(_adaptation_from_dict(a) for a in data.get("adaptations", ())),
        progress_metrics=tuple(
            ProgressMetric(
                id=m["id"],
                metric=m["metric"],
                value=float(m["value"]),
                unit=m["unit"],
                date=_parse_datetime(m["date"]) or now,
                notes=m.get("notes"),
            )
            for m in data.get("progress_metrics", ())
        ),
        equipment=tuple(Equipment(eq) for eq in data.get("equipment", ["none"])),
        category=ExerciseCategory(category) if category else None,
        difficulty=Difficulty(data.get("difficulty", "beginner")),
        tags=tuple(data.get("tags", ())),
        estimated_calories=float(data.get("estimated_calories", 0.0)),
        created_at=_parse_datetime(data.get("created_at")) or now,
        updated_at=_parse_datetime(data.get("updated_at")) or now,
        is_active=bool(data.get("is_active", True)),
    )


def recommendation_to_dict(recommendation: WorkoutRecommendation) -> dict[str, Any]:
    return {
        "id": recommendation.id,
        "workout_plan": plan_to_dict(recommendation.workout_plan),
        "reason": recommendation.reason,
        "priority": recommendation.priority.value,
        "based_on": list(recommendation.based_on),
        "scheduled_for": _iso(recommendation.scheduled_for),
    }


def to_json_string(data: Any, indent: int = 2) -> str:
    """Serialize an already-converted dict/list to a JSON string."""
    return json.dumps(data, indent=indent)
