"""Serialization module: convert engine values to and from JSON-compatible dicts."""

from workout_engine.serialization.json_io import (
    analysis_to_dict,
    exercise_from_dict,
    exercise_to_dict,
    plan_from_dict,
    plan_to_dict,
    recommendation_to_dict,
    snapshot_from_dict,
    snapshot_to_dict,
    to_json_string,
)

__all__ = [
    "analysis_to_dict",
    "exercise_from_dict",
    "exercise_to_dict",
    "plan_from_dict",
    "plan_to_dict",
    "recommendation_to_dict",
    "snapshot_from_dict",
    "snapshot_to_dict",
    "to_json_string",
]
