"""Exercise and plan catalog."""

from workout_engine.catalog.repository import ExerciseCatalog

__all__ = ["ExerciseCatalog"]
