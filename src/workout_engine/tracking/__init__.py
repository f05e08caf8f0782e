"""Workout session tracking."""

from workout_engine.tracking.sessions import SessionTracker

__all__ = ["SessionTracker"]
