"""Adaptation templates: the fixed reason → change table.

Each template builds the AdaptationChange(s) for one AdaptationReason.
Severity only changes a change's target value, never its type.
"""

from __future__ import annotations

from typing import Callable

from workout_engine.models.adaptation import AdaptationChange
from workout_engine.models.enums import (
    BASELINE_SESSION_MIN,
    ILLNESS_ADAPTATION_DAYS,
    MODERATE_SESSION_TARGET_MIN,
    SHORT_SESSION_TARGET_MIN,
    AdaptationReason,
    ChangeType,
    Intensity,
    Severity,
)

ChangeTemplate = Callable[[Severity], tuple[AdaptationChange, ...]]


def _low_readiness(severity: Severity) -> tuple[AdaptationChange, ...]:
    target = Intensity.LOW if severity == Severity.HIGH else Intensity.MODERATE
    return (
        AdaptationChange(
            change_type=ChangeType.INTENSITY_REDUCTION,
            description=f"Reduced intensity due to {severity.name.lower()} readiness scores",
            original_value=Intensity.HIGH.value,
            new_value=target.value,
            target_intensity=target,
        ),
    )


def _poor_sleep(severity: Severity) -> tuple[AdaptationChange, ...]:
    target_min = (
        SHORT_SESSION_TARGET_MIN if severity == Severity.HIGH else MODERATE_SESSION_TARGET_MIN
    )
    return (
        AdaptationChange(
            change_type=ChangeType.DURATION_REDUCTION,
            description=f"Shortened workout due to {severity.name.lower()} sleep quality",
            original_value=f"{BASELINE_SESSION_MIN} min",
            new_value=f"{target_min} min",
            target_duration_min=target_min,
        ),
    )


def _high_stress(severity: Severity) -> tuple[AdaptationChange, ...]:
    return (
        AdaptationChange(
            change_type=ChangeType.EXERCISE_SUBSTITUTION,
            description="Replaced high-intensity with stress-reducing exercises",
            original_value="HIIT/Strength",
            new_value="Yoga/Walking",
        ),
    )


def _overtraining(severity: Severity) -> tuple[AdaptationChange, ...]:
    return (
        AdaptationChange(
            change_type=ChangeType.REST_DAY,
            description="Recommended rest day due to overtraining indicators",
            original_value="Planned workout",
            new_value="Active recovery",
        ),
    )


def _injury(severity: Severity) -> tuple[AdaptationChange, ...]:
    return (
        AdaptationChange(
            change_type=ChangeType.EXERCISE_SUBSTITUTION,
            description="Modified exercises to accommodate injury",
            original_value="Original exercises",
            new_value="Injury-safe alternatives",
        ),
    )


def _illness(severity: Severity) -> tuple[AdaptationChange, ...]:
    return (
        AdaptationChange(
            change_type=ChangeType.REST_DAY,
            description="Rest recommended during illness recovery",
            original_value="Planned workout",
            new_value="Complete rest",
        ),
    )


def _equipment_unavailable(severity: Severity) -> tuple[AdaptationChange, ...]:
    return (
        AdaptationChange(
            change_type=ChangeType.EXERCISE_SUBSTITUTION,
            description="Substituted exercises based on available equipment",
            original_value="Equipment-based exercises",
            new_value="Bodyweight alternatives",
        ),
    )


def _time_constraint(severity: Severity) -> tuple[AdaptationChange, ...]:
    return (
        AdaptationChange(
            change_type=ChangeType.DURATION_REDUCTION,
            description="Shortened workout to fit available time",
            original_value="Full workout",
            new_value="Express version",
        ),
    )


ADAPTATION_TEMPLATES: dict[AdaptationReason, ChangeTemplate] = {
    AdaptationReason.LOW_READINESS: _low_readiness,
    AdaptationReason.POOR_SLEEP: _poor_sleep,
    AdaptationReason.HIGH_STRESS: _high_stress,
    AdaptationReason.OVERTRAINING: _overtraining,
    AdaptationReason.INJURY: _injury,
    AdaptationReason.ILLNESS: _illness,
    AdaptationReason.EQUIPMENT_UNAVAILABLE: _equipment_unavailable,
    AdaptationReason.TIME_CONSTRAINT: _time_constraint,
}

# Reasons whose adaptations persist beyond a single session (days)
ADAPTATION_DURATION_DAYS: dict[AdaptationReason, int] = {
    AdaptationReason.ILLNESS: ILLNESS_ADAPTATION_DAYS,
}


def get_changes(reason: AdaptationReason, severity: Severity) -> tuple[AdaptationChange, ...]:
    """Build the changes for a reason at a given severity.

    Raises:
        KeyError: If no template is defined for the reason.
    """
    return ADAPTATION_TEMPLATES[reason](severity)
