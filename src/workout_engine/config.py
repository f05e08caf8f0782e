"""Environment-variable-based configuration for the workout engine."""

from __future__ import annotations

import os

DEFAULT_USER_ID: str = os.environ.get("WORKOUT_ENGINE_USER_ID", "current-user")
LOG_LEVEL: str = os.environ.get("WORKOUT_ENGINE_LOG_LEVEL", "INFO").upper()
MAX_RECOMMENDATIONS: int = int(os.environ.get("WORKOUT_ENGINE_MAX_RECOMMENDATIONS", "3"))
WEEKLY_WORKOUT_GOAL: int = int(os.environ.get("WORKOUT_ENGINE_WEEKLY_GOAL", "4"))
