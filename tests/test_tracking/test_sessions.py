"""Tests for SessionTracker: history, streaks, achievements, trends."""

from __future__ import annotations

from datetime import date, datetime

import pytest

from workout_engine.catalog.repository import ExerciseCatalog
from workout_engine.exceptions import PlanNotFoundError, SessionNotFoundError
from workout_engine.models.session import CompletedExercise, WorkoutSession
from workout_engine.models.workout_plan import ProgressMetric
from workout_engine.tracking.sessions import SessionTracker


class TestSessionLifecycle:
    def setup_method(self) -> None:
        self.tracker = SessionTracker(ExerciseCatalog.default())

    def test_start_workout(self) -> None:
        session = self.tracker.start_workout("morning-hiit", now=datetime(2026, 3, 2, 7))
        assert session.workout_name == "Morning HIIT Blast"
        assert session.completed is False
        assert session.start_time == datetime(2026, 3, 2, 7)

    def test_start_unknown_plan(self) -> None:
        with pytest.raises(PlanNotFoundError, match="Workout plan not found"):
            self.tracker.start_workout("nope")

    def test_complete_prepends_history(self) -> None:
        first = self.tracker.start_workout("morning-hiit")
        second = self.tracker.start_workout("cardio-endurance")
        self.tracker.complete_workout(first, 25, 300)
        done = self.tracker.complete_workout(
            second,
            30,
            280,
            exercises=[CompletedExercise("running", "Running", 30, distance_km=5.0)],
            rating=4,
            notes="Felt good",
        )
        assert done.completed is True
        assert done.end_time is not None
        assert done.exercises[0].distance_km == 5.0
        assert [s.id for s in self.tracker.get_workout_history()] == [second.id, first.id]

    def test_history_limit(self) -> None:
        for _ in range(4):
            self.tracker.complete_workout(self.tracker.start_workout("morning-hiit"), 25, 300)
        assert len(self.tracker.get_workout_history(limit=2)) == 2

    @pytest.mark.parametrize("rating", [0, 6])
    def test_rating_out_of_range(self, rating: int) -> None:
        session = self.tracker.start_workout("morning-hiit")
        with pytest.raises(ValueError):
            self.tracker.complete_workout(session, 25, 300, rating=rating)

    def test_negative_duration_rejected(self) -> None:
        session = self.tracker.start_workout("morning-hiit")
        with pytest.raises(ValueError):
            self.tracker.complete_workout(session, -5, 300)

    def test_track_progress_on_completed_session(self) -> None:
        session = self.tracker.complete_workout(
            self.tracker.start_workout("strength-builder"), 35, 210
        )
        metric = ProgressMetric(
            id="pm-1", metric="weight_lifted", value=20.0, unit="kg", date=datetime(2026, 3, 2)
        )
        updated = self.tracker.track_progress(session.id, "strength-dumbbells", metric)
        assert updated.progress == (metric,)
        assert self.tracker.get_workout_history()[0].progress == (metric,)

    def test_track_progress_on_active_session(self) -> None:
        session = self.tracker.start_workout("morning-hiit")
        metric = ProgressMetric(
            id="pm-2", metric="rounds", value=4, unit="rounds", date=datetime(2026, 3, 2)
        )
        self.tracker.track_progress(session.id, "hiit-bodyweight", metric)
        done = self.tracker.complete_workout(session, 25, 300)
        assert done.progress == (metric,)

    def test_complete_twice_rejected(self) -> None:
        session = self.tracker.start_workout("morning-hiit")
        self.tracker.complete_workout(session, 25, 300)
        with pytest.raises(SessionNotFoundError):
            self.tracker.complete_workout(session, 25, 300)
        assert [s.id for s in self.tracker.get_workout_history()] == [session.id]

    def test_complete_unstarted_session_rejected(self) -> None:
        stray = WorkoutSession(
            id="session-stray",
            workout_plan_id="morning-hiit",
            workout_name="Morning HIIT Blast",
            start_time=datetime(2026, 3, 2, 7),
        )
        with pytest.raises(SessionNotFoundError):
            self.tracker.complete_workout(stray, 25, 300)
        assert self.tracker.get_workout_history() == []

    def test_explicit_zero_weekly_goal_kept(self) -> None:
        tracker = SessionTracker(ExerciseCatalog.default(), weekly_goal=0)
        assert tracker.weekly_goal == 0

    def test_track_progress_unknown_session(self) -> None:
        metric = ProgressMetric(
            id="pm-3", metric="x", value=1, unit="u", date=datetime(2026, 3, 2)
        )
        with pytest.raises(SessionNotFoundError):
            self.tracker.track_progress("session-missing", "running", metric)


class TestStreaksAndAchievements:
    def setup_method(self) -> None:
        self.tracker = SessionTracker(ExerciseCatalog.default(), weekly_goal=4)
        for day, minutes in ((2, 20), (3, 25), (4, 30), (7, 30), (8, 35)):
            self._complete(day, minutes, 250)

    def _complete(self, day: int, minutes: float, calories: float) -> WorkoutSession:
        start = datetime(2026, 3, day, 7, 0)
        session = self.tracker.start_workout("morning-hiit", now=start)
        return self.tracker.complete_workout(
            session, minutes, calories, now=start.replace(hour=8)
        )

    def test_empty_streak(self) -> None:
        streak = SessionTracker(ExerciseCatalog.default()).get_workout_streak()
        assert streak.current_streak == 0
        assert streak.longest_streak == 0
        assert streak.last_workout_date is None

    def test_current_streak_alive_yesterday(self) -> None:
        streak = self.tracker.get_workout_streak(today=date(2026, 3, 9))
        assert streak.current_streak == 2
        assert streak.longest_streak == 3
        assert streak.last_workout_date == date(2026, 3, 8)
        assert streak.weekly_goal == 4
        assert streak.weekly_completed == 4

    def test_current_streak_broken(self) -> None:
        streak = self.tracker.get_workout_streak(today=date(2026, 3, 11))
        assert streak.current_streak == 0
        assert streak.longest_streak == 3

    def test_two_sessions_same_day_count_once(self) -> None:
        self._complete(8, 20, 100)
        assert self.tracker.get_workout_streak(today=date(2026, 3, 8)).current_streak == 2

    def test_achievements(self) -> None:
        achievements = {
            a.id: a for a in self.tracker.get_achievements(now=datetime(2026, 3, 9, 8, 0))
        }
        assert achievements["first-workout"].unlocked
        assert achievements["calorie-crusher"].progress == 100.0
        # Mar 2 07:00 falls outside the 7-day window
        assert achievements["week-warrior"].progress == pytest.approx(80.0)
        assert not achievements["week-warrior"].unlocked

    def test_sessions_after_now_ignored(self) -> None:
        tracker = SessionTracker(ExerciseCatalog.default())
        for day in range(1, 6):
            start = datetime(2026, 4, day, 7, 0)
            session = tracker.start_workout("morning-hiit", now=start)
            tracker.complete_workout(session, 25, 300, now=start.replace(hour=8))
        achievements = {
            a.id: a for a in tracker.get_achievements(now=datetime(2026, 3, 2, 12, 0))
        }
        assert achievements["week-warrior"].progress == 0.0
        assert not achievements["week-warrior"].unlocked
        assert not achievements["first-workout"].unlocked

    def test_week_warrior_unlocks_at_latest_finish(self) -> None:
        self._complete(9, 30, 250)
        achievements = {
            a.id: a for a in self.tracker.get_achievements(now=datetime(2026, 3, 9, 12, 0))
        }
        assert achievements["week-warrior"].unlocked
        assert achievements["week-warrior"].unlocked_at == datetime(2026, 3, 9, 8, 0)

    def test_no_achievements_without_history(self) -> None:
        achievements = SessionTracker(ExerciseCatalog.default()).get_achievements()
        assert all(a.progress == 0.0 and not a.unlocked for a in achievements)


class TestPerformanceTrends:
    def setup_method(self) -> None:
        self.tracker = SessionTracker(ExerciseCatalog.default(), weekly_goal=4)
        for day, minutes in ((2, 20), (3, 20), (4, 25), (7, 30), (8, 35)):
            start = datetime(2026, 3, day, 7, 0)
            session = self.tracker.start_workout("cardio-endurance", now=start)
            self.tracker.complete_workout(session, minutes, 250, now=start.replace(hour=8))

    def test_week_window(self) -> None:
        trends = self.tracker.get_performance_trends("week", now=datetime(2026, 3, 9, 12, 0))
        metrics = [t.metric for t in trends.trends]
        assert metrics == ["calories_burned", "average_duration", "duration_trend"]
        weekly = trends.trends[0]
        assert weekly.value == pytest.approx(1000.0)
        assert weekly.date.date() == date(2026, 3, 8)
        assert trends.trends[1].value == pytest.approx(27.5)
        assert trends.trends[2].value > 0
        assert "Your sessions are getting longer" in trends.insights

    def test_month_window_spans_two_weeks(self) -> None:
        trends = self.tracker.get_performance_trends("month", now=datetime(2026, 3, 9, 12, 0))
        weekly = [t for t in trends.trends if t.metric == "calories_burned"]
        # Mar 2 is a Monday, so every session falls in the week ending Mar 8
        assert [w.value for w in weekly] == [1250.0]

    def test_low_frequency_recommendation(self) -> None:
        trends = self.tracker.get_performance_trends("quarter", now=datetime(2026, 3, 9, 12, 0))
        assert any("4 workouts per week" in r for r in trends.recommendations)

    def test_empty_window(self) -> None:
        trends = self.tracker.get_performance_trends("week", now=datetime(2026, 6, 1))
        assert trends.trends == ()
        assert trends.insights == ("No completed workouts in the last week",)

    def test_unknown_timeframe(self) -> None:
        with pytest.raises(ValueError):
            self.tracker.get_performance_trends("decade")
