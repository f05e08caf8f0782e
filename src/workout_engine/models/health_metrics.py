"""Frozen health-metric snapshot: the sole physiological input to the engine."""

from __future__ import annotations

from dataclasses import dataclass, field
from datetime import datetime


@dataclass(frozen=True)
class MacroNutrients:
    """Daily macronutrient intake in grams."""

    protein: float = 0.0
    carbohydrates: float = 0.0
    fats: float = 0.0
    fiber: float = 0.0
    sugar: float = 0.0


@dataclass(frozen=True)
class HealthMetricSnapshot:
    """Immutable snapshot of a user's health signals for one evaluation.

    Produced by the device / health-platform layer once per evaluation and
    never mutated afterwards. Ranges are checked by
    ``workout_engine.analysis.validation.validate_metrics`` rather than
    here, so a snapshot can be built from raw data and rejected with a
    precise error at the analysis boundary.
    """

    heart_rate: float
    heart_rate_variability: float  # RMSSD, ms
    sleep_score: float  # 0-100
    recovery_score: float  # 0-100
    stress_level: float  # 1-10
    activity_level: float  # 0-100

    # Nutrition / energy balance
    calories_consumed: float = 0.0
    calories_burned: float = 0.0
    water_intake_ml: float = 0.0
    macronutrients: MacroNutrients = field(default_factory=MacroNutrients)

    timestamp: datetime = field(default_factory=datetime.now)
