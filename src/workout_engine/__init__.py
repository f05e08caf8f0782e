"""Workout adaptation and recommendation engine."""

from workout_engine.engine import WorkoutEngine

__version__ = "0.1.0"

__all__ = ["WorkoutEngine", "__version__"]
