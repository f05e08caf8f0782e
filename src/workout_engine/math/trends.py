"""Session history aggregates: weekly calorie totals and duration trend."""

from __future__ import annotations

from datetime import datetime
from typing import Sequence

import numpy as np
import pandas as pd

_SECONDS_PER_DAY = 86_400.0


def weekly_calorie_totals(
    timestamps: Sequence[datetime], calories: Sequence[float]
) -> pd.Series:
    """Sum calories per calendar week (weeks end on Sunday).

    Args:
        timestamps: Session start times.
        calories: Calories burned per session, aligned with ``timestamps``.

    Returns:
        Series indexed by week-ending timestamp, oldest first. Empty if
        there are no sessions.
    """
    if len(timestamps) != len(calories):
        raise ValueError("timestamps and calories must have the same length")
    if not timestamps:
        return pd.Series(dtype=np.float64)
    series = pd.Series(
        np.asarray(calories, dtype=np.float64),
        index=pd.DatetimeIndex(timestamps),
    ).sort_index()
    return series.resample("W").sum()


def duration_slope(timestamps: Sequence[datetime], durations: Sequence[float]) -> float:
    """Least-squares slope of session duration in minutes per day.

    Returns 0.0 when fewer than two sessions exist or all sessions share
    the same timestamp.
    """
    if len(timestamps) != len(durations):
        raise ValueError("timestamps and durations must have the same length")
    if len(timestamps) < 2:
        return 0.0

    origin = min(timestamps)
    days = np.array(
        [(t - origin).total_seconds() / _SECONDS_PER_DAY for t in timestamps],
        dtype=np.float64,
    )
    if np.ptp(days) == 0:
        return 0.0
    values = np.asarray(durations, dtype=np.float64)
    slope, _intercept = np.polyfit(days, values, 1)
    return float(slope)


def average(values: Sequence[float]) -> float:
    """Mean of ``values``, 0.0 for an empty sequence."""
    if not values:
        return 0.0
    return float(np.mean(np.asarray(values, dtype=np.float64)))
