"""SessionTracker: in-memory workout history, streaks, achievements, trends.

History lives on the tracker instance, newest session first. Nothing is
persisted; create one tracker per user session.
"""

from __future__ import annotations

import dataclasses
import logging
import uuid
from datetime import date, datetime, timedelta
from typing import Iterable

from workout_engine import config
from workout_engine.catalog.repository import ExerciseCatalog
from workout_engine.exceptions import SessionNotFoundError
from workout_engine.math.trends import average, duration_slope, weekly_calorie_totals
from workout_engine.models.enums import (
    ACHIEVEMENT_CALORIE_CRUSHER_KCAL,
    ACHIEVEMENT_WEEK_WARRIOR_SESSIONS,
    TRENDS_TIMEFRAME_DAYS,
)
from workout_engine.models.session import (
    Achievement,
    CompletedExercise,
    PerformanceTrends,
    WorkoutSession,
    WorkoutStreak,
)
from workout_engine.models.workout_plan import ProgressMetric

logger = logging.getLogger(__name__)

MIN_RATING = 1
MAX_RATING = 5

# A duration trend flatter than this (minutes per day) is reported as steady
_STEADY_SLOPE = 0.05


def _streak_lengths(days: list[date]) -> list[tuple[date, int]]:
    """Runs of consecutive days as (last_day, length), oldest run first."""
    runs: list[tuple[date, int]] = []
    for day in days:
        if runs and day - runs[-1][0] == timedelta(days=1):
            runs[-1] = (day, runs[-1][1] + 1)
        else:
            runs.append((day, 1))
    return runs


def _progress(value: float, target: float) -> float:
    return min(100.0, value / target * 100.0)


class SessionTracker:
    """Tracks started and completed workout sessions for one user."""

    def __init__(self, catalog: ExerciseCatalog, weekly_goal: int | None = None) -> None:
        self.catalog = catalog
        self.weekly_goal = config.WEEKLY_WORKOUT_GOAL if weekly_goal is None else weekly_goal
        self._history: list[WorkoutSession] = []
        self._active: dict[str, WorkoutSession] = {}

    def start_workout(self, plan_id: str, now: datetime | None = None) -> WorkoutSession:
        """Open a session for a plan the catalog can resolve.

        Plans built by WorkoutEngine.generate_workout_plan are registered on
        the engine catalog and can be started too.

        Raises:
            PlanNotFoundError: If the plan id is unknown.
        """
        plan = self.catalog.get_plan(plan_id)
        session = WorkoutSession(
            id=f"session-{uuid.uuid4().hex[:12]}",
            workout_plan_id=plan.id,
            workout_name=plan.name,
            start_time=now or datetime.now(),
        )
        self._active[session.id] = session
        logger.info("Started session %s for plan %s", session.id, plan.id)
        return session

    def complete_workout(
        self,
        session: WorkoutSession,
        duration_min: float,
        calories_burned: float,
        exercises: Iterable[CompletedExercise] = (),
        rating: int | None = None,
        notes: str | None = None,
        now: datetime | None = None,
    ) -> WorkoutSession:
        """Close an active session and prepend it to the history.

        Raises:
            ValueError: If rating is outside 1-5 or duration/calories are negative.
            SessionNotFoundError: If the session is not active, which includes
                sessions that were already completed.
        """
        if rating is not None and not MIN_RATING <= rating <= MAX_RATING:
            raise ValueError(f"rating must be in [{MIN_RATING}, {MAX_RATING}], got {rating}")
        if duration_min < 0 or calories_burned < 0:
            raise ValueError("duration_min and calories_burned cannot be negative")

        if session.id not in self._active:
            raise SessionNotFoundError(session.id)
        active = self._active.pop(session.id)
        completed = dataclasses.replace(
            active,
            end_time=now or datetime.now(),
            duration_min=duration_min,
            calories_burned=calories_burned,
            exercises=tuple(exercises),
            rating=rating,
            notes=notes,
            completed=True,
        )
        self._history.insert(0, completed)
        logger.info(
            "Completed session %s: %.0f min, %.0f kcal",
            completed.id,
            duration_min,
            calories_burned,
        )
        return completed

    def get_workout_history(self, limit: int = 10) -> list[WorkoutSession]:
        """Completed sessions, newest first."""
        return self._history[:limit]

    def _find_session(self, session_id: str) -> tuple[int | None, WorkoutSession]:
        if session_id in self._active:
            return None, self._active[session_id]
        for index, session in enumerate(self._history):
            if session.id == session_id:
                return index, session
        raise SessionNotFoundError(session_id)

    def track_progress(
        self, session_id: str, exercise_id: str, metric: ProgressMetric
    ) -> WorkoutSession:
        """Attach a progress measurement to a session.

        Raises:
            SessionNotFoundError: If the session is neither active nor in history.
        """
        index, session = self._find_session(session_id)
        updated = dataclasses.replace(session, progress=session.progress + (metric,))
        if index is None:
            self._active[session_id] = updated
        else:
            self._history[index] = updated
        logger.info(
            "Progress tracked for session %s, exercise %s: %s=%s %s",
            session_id,
            exercise_id,
            metric.metric,
            metric.value,
            metric.unit,
        )
        return updated

    def get_workout_streak(self, today: date | None = None) -> WorkoutStreak:
        """Consecutive-day streaks over completed sessions.

        The current streak is alive while the last workout was today or
        yesterday.
        """
        today = today or date.today()
        days = sorted({s.start_time.date() for s in self._history if s.completed})
        if not days:
            return WorkoutStreak(0, 0, None, self.weekly_goal, 0)

        runs = _streak_lengths(days)
        last_day, last_run = runs[-1]
        current = last_run if today - last_day <= timedelta(days=1) else 0
        week_start = today - timedelta(days=6)
        weekly_completed = sum(
            1
            for s in self._history
            if s.completed and week_start <= s.start_time.date() <= today
        )
        return WorkoutStreak(
            current_streak=current,
            longest_streak=max(length for _, length in runs),
            last_workout_date=last_day,
            weekly_goal=self.weekly_goal,
            weekly_completed=weekly_completed,
        )

    def get_achievements(self, now: datetime | None = None) -> list[Achievement]:
        """Milestone, streak and calorie achievements with 0-100 progress.

        Only sessions started at or before ``now`` count.
        """
        now = now or datetime.now()
        completed = [s for s in self._history if s.completed and s.start_time <= now]
        last_finish = max((s.end_time for s in completed), default=None)
        week_start = now - timedelta(days=7)
        sessions_this_week = sum(1 for s in completed if week_start <= s.start_time <= now)
        total_calories = sum(s.calories_burned for s in completed)

        specs = (
            ("first-workout", "First Steps", "Complete your first workout", "milestone",
             1.0, float(len(completed))),
            ("week-warrior", "Week Warrior",
             f"Complete {ACHIEVEMENT_WEEK_WARRIOR_SESSIONS} workouts in a week", "streak",
             float(ACHIEVEMENT_WEEK_WARRIOR_SESSIONS), float(sessions_this_week)),
            ("calorie-crusher", "Calorie Crusher",
             f"Burn {ACHIEVEMENT_CALORIE_CRUSHER_KCAL} calories in total", "calories",
             float(ACHIEVEMENT_CALORIE_CRUSHER_KCAL), float(total_calories)),
        )
        achievements = []
        for achievement_id, title, description, category, target, value in specs:
            progress = _progress(value, target)
            achievements.append(
                Achievement(
                    id=achievement_id,
                    title=title,
                    description=description,
                    category=category,
                    target=target,
                    progress=progress,
                    unlocked_at=last_finish if progress >= 100.0 else None,
                )
            )
        return achievements

    def get_performance_trends(
        self, timeframe: str = "month", now: datetime | None = None
    ) -> PerformanceTrends:
        """Aggregate the completed sessions inside ``timeframe``.

        Args:
            timeframe: "week", "month" or "quarter".
            now: End of the window (defaults to the current time).

        Raises:
            ValueError: If timeframe is unknown.
        """
        if timeframe not in TRENDS_TIMEFRAME_DAYS:
            raise ValueError(
                f"Unknown timeframe {timeframe!r}, expected one of {sorted(TRENDS_TIMEFRAME_DAYS)}"
            )
        now = now or datetime.now()
        window_days = TRENDS_TIMEFRAME_DAYS[timeframe]
        since = now - timedelta(days=window_days)
        sessions = sorted(
            (s for s in self._history if s.completed and since <= s.start_time <= now),
            key=lambda s: s.start_time,
        )
        if not sessions:
            return PerformanceTrends(
                insights=(f"No completed workouts in the last {timeframe}",),
                recommendations=("Complete a workout to start tracking your trends",),
            )

        times = [s.start_time for s in sessions]
        durations = [s.duration_min for s in sessions]
        weekly = weekly_calorie_totals(times, [s.calories_burned for s in sessions])
        avg_duration = average(durations)
        slope = duration_slope(times, durations)

        trends = [
            ProgressMetric(
                id=f"trend-calories-{week_end.date().isoformat()}",
                metric="calories_burned",
                value=float(total),
                unit="calories",
                date=week_end.to_pydatetime(),
                notes="Weekly total",
            )
            for week_end, total in weekly.items()
        ]
        trends.append(
            ProgressMetric(
                id="trend-average-duration",
                metric="average_duration",
                value=avg_duration,
                unit="minutes",
                date=now,
                notes="Average session length",
            )
        )
        trends.append(
            ProgressMetric(
                id="trend-duration-slope",
                metric="duration_trend",
                value=slope,
                unit="minutes/day",
                date=now,
                notes="Least-squares change in session length",
            )
        )

        insights = [
            f"You completed {len(sessions)} workouts in the last {timeframe}",
            f"Average session length is {avg_duration:.0f} minutes",
        ]
        if slope > _STEADY_SLOPE:
            insights.append("Your sessions are getting longer")
        elif slope < -_STEADY_SLOPE:
            insights.append("Your sessions are getting shorter")
        else:
            insights.append("Your session length is steady")

        recommendations = []
        expected = self.weekly_goal * window_days / 7
        if len(sessions) < expected:
            recommendations.append(
                f"Aim for {self.weekly_goal} workouts per week to reach your goal"
            )
        if slope < -_STEADY_SLOPE:
            recommendations.append("Check your recovery metrics before adding intensity")
        if not recommendations:
            recommendations.append("Great consistency, consider progressing intensity")

        logger.debug("Trends for %s: %d sessions, slope %.3f", timeframe, len(sessions), slope)
        return PerformanceTrends(
            trends=tuple(trends),
            insights=tuple(insights),
            recommendations=tuple(recommendations),
        )
