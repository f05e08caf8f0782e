"""AdaptationApplier: applies adaptation records to a plan without mutating it."""

from __future__ import annotations

import dataclasses
import logging
from datetime import datetime
from typing import Iterable

from workout_engine.math.rounding import round_half_up
from workout_engine.models.adaptation import Adaptation, AdaptationChange
from workout_engine.models.enums import (
    DEFAULT_REDUCTION_FACTOR,
    REST_DAY_NOTE,
    SHORT_SESSION_REDUCTION_FACTOR,
    SHORT_SESSION_TARGET_MIN,
    ChangeType,
    Intensity,
)
from workout_engine.models.workout_plan import DailyWorkout, WorkoutPlan

logger = logging.getLogger(__name__)


def duration_reduction_factor(change: AdaptationChange) -> float:
    """0.5 for a 20-minute target, 0.75 for anything else."""
    if change.target_duration_min == SHORT_SESSION_TARGET_MIN:
        return SHORT_SESSION_REDUCTION_FACTOR
    return DEFAULT_REDUCTION_FACTOR


def _apply_change(
    daily: DailyWorkout, change: AdaptationChange, adaptation: Adaptation
) -> DailyWorkout:
    if change.change_type == ChangeType.INTENSITY_REDUCTION:
        target = change.target_intensity or daily.intensity.step_down()
        return dataclasses.replace(daily, intensity=target)

    if change.change_type == ChangeType.DURATION_REDUCTION:
        factor = duration_reduction_factor(change)
        return dataclasses.replace(daily, duration_min=round_half_up(daily.duration_min * factor))

    if change.change_type == ChangeType.EXERCISE_SUBSTITUTION:
        # Exercise lists are resolved by the caller via get_alternative_exercises
        return dataclasses.replace(daily, adapted_for=adaptation.reason)

    if change.change_type == ChangeType.REST_DAY:
        return dataclasses.replace(
            daily,
            exercises=(),
            duration_min=0,
            intensity=Intensity.LOW,
            adapted_for=adaptation.reason,
            notes=REST_DAY_NOTE,
        )

    raise ValueError(f"Unknown change type: {change.change_type!r}")


def apply_adaptations(
    plan: WorkoutPlan,
    adaptations: Iterable[Adaptation],
    now: datetime | None = None,
) -> WorkoutPlan:
    """Apply adaptations in order and return a new plan.

    Changes are applied in list order to every daily workout, so a later
    change may overwrite an earlier one's effect on the same field. All
    adaptations are appended to the plan's history and ``updated_at`` is
    refreshed. The input plan is left untouched.

    Args:
        plan: The plan to adapt.
        adaptations: Ordered adaptation records.
        now: Timestamp for ``updated_at`` (defaults to the current time).

    Returns:
        The adapted WorkoutPlan.
    """
    adaptations = tuple(adaptations)
    daily_workouts = plan.daily_workouts

    for adaptation in adaptations:
        for change in adaptation.changes:
            logger.debug(
                "Applying %s (%s) to plan %s",
                change.change_type.value,
                adaptation.reason.value,
                plan.id,
            )
            daily_workouts = tuple(
                _apply_change(daily, change, adaptation) for daily in daily_workouts
            )

    return dataclasses.replace(
        plan,
        daily_workouts=daily_workouts,
        adaptations=plan.adaptations + adaptations,
        updated_at=now or datetime.now(),
    )
