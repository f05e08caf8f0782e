"""Custom exception hierarchy for the workout engine."""

from __future__ import annotations


class WorkoutEngineError(Exception):
    """Base exception for all workout_engine errors."""


class InvalidMetricError(WorkoutEngineError, ValueError):
    """A health metric is missing, not a number, or outside its valid range.

    ``valid_range`` is None when the value could not be read at all.
    """

    def __init__(
        self,
        field_name: str,
        value: object,
        valid_range: tuple[float, float | None] | None = None,
    ) -> None:
        if valid_range is not None:
            low, high = valid_range
            bounds = f">= {low}" if high is None else f"in [{low}, {high}]"
            message = f"Invalid metric {field_name}={value!r}: must be {bounds}"
        elif value is None:
            message = f"Missing health metric: {field_name}"
        else:
            message = f"Invalid metric {field_name}={value!r}: must be a number"
        super().__init__(message)
        self.field_name = field_name
        self.value = value
        self.valid_range = valid_range


class PlanNotFoundError(WorkoutEngineError, LookupError):
    """No workout plan with the requested identifier exists."""

    def __init__(self, plan_id: str) -> None:
        super().__init__(f"Workout plan not found: {plan_id}")
        self.plan_id = plan_id


class SessionNotFoundError(WorkoutEngineError, LookupError):
    """No workout session with the requested identifier exists."""

    def __init__(self, session_id: str) -> None:
        super().__init__(f"Workout session not found: {session_id}")
        self.session_id = session_id
