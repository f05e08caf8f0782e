"""WorkoutPlanGenerator: builds a weekly plan from goals and constraints.

Exercise selection is a greedy first-fit over the catalog: for each goal,
for each of its categories, the first not-yet-selected eligible exercise
that still fits the session's time budget is taken. No backtracking, so a
long exercise early in the catalog can crowd out later ones.
"""

from __future__ import annotations

import logging
import uuid
from datetime import date, datetime, timedelta
from typing import Iterable, Sequence

from workout_engine import config
from workout_engine.catalog.repository import ExerciseCatalog
from workout_engine.models.enums import (
    GOAL_DEADLINE_DAYS,
    MAX_SESSIONS_PER_WEEK,
    WEIGHT_LOSS_WEEKLY_CALORIE_TARGET,
    Difficulty,
    Equipment,
    ExerciseCategory,
    GoalType,
    Intensity,
    RecommendationPriority,
    WorkoutGoal,
)
from workout_engine.models.exercise import Exercise
from workout_engine.models.workout_plan import DailyWorkout, WeeklyGoal, WorkoutPlan
from workout_engine.planning.goal_templates import get_goal_categories

logger = logging.getLogger(__name__)

_DAYS_PER_WEEK = 7


def _goal_value(goal: WorkoutGoal | str) -> str:
    return goal.value if isinstance(goal, WorkoutGoal) else str(goal)


def _session_intensity(exercises: Sequence[Exercise]) -> Intensity:
    categories = {ex.category for ex in exercises}
    if ExerciseCategory.HIIT in categories:
        return Intensity.HIGH
    if categories and categories <= {ExerciseCategory.YOGA, ExerciseCategory.FLEXIBILITY}:
        return Intensity.LOW
    return Intensity.MODERATE


def session_offsets(sessions_per_week: int) -> list[int]:
    """Day offsets (0-6) that spread the sessions evenly across a week."""
    return [i * _DAYS_PER_WEEK // sessions_per_week for i in range(sessions_per_week)]


def weekly_goal_for(
    goal: WorkoutGoal | str, sessions_per_week: int, now: datetime
) -> WeeklyGoal:
    """Weight loss tracks calories; every other goal tracks session count."""
    deadline = now + timedelta(days=GOAL_DEADLINE_DAYS)
    if _goal_value(goal) == WorkoutGoal.WEIGHT_LOSS.value:
        return WeeklyGoal(
            id=f"goal-{_goal_value(goal)}",
            goal_type=GoalType.CALORIES_BURNED,
            target=WEIGHT_LOSS_WEEKLY_CALORIE_TARGET,
            unit="calories",
            deadline=deadline,
            priority=RecommendationPriority.HIGH,
        )
    return WeeklyGoal(
        id=f"goal-{_goal_value(goal)}",
        goal_type=GoalType.WEEKLY_WORKOUTS,
        target=sessions_per_week,
        unit="sessions",
        deadline=deadline,
        priority=RecommendationPriority.HIGH,
    )


class WorkoutPlanGenerator:
    """Generates goal-driven workout plans from an exercise catalog.

    Usage::

        generator = WorkoutPlanGenerator(ExerciseCatalog.default())
        plan = generator.generate(
            [WorkoutGoal.WEIGHT_LOSS], [Equipment.NONE], Difficulty.BEGINNER, 30, 3
        )
    """

    def __init__(self, catalog: ExerciseCatalog, user_id: str | None = None) -> None:
        self.catalog = catalog
        self.user_id = user_id or config.DEFAULT_USER_ID

    def eligible_exercises(
        self,
        equipment: Iterable[Equipment],
        fitness_level: Difficulty,
        session_minutes: int,
    ) -> list[Exercise]:
        """Exercises the user can do with this equipment, level and time."""
        available = set(equipment)
        return [
            ex
            for ex in self.catalog.exercises
            if ex.requires_only(available)
            and (fitness_level == Difficulty.ADVANCED or ex.difficulty != Difficulty.ADVANCED)
            and ex.duration_min <= session_minutes
        ]

    def select_exercises(
        self,
        eligible: Sequence[Exercise],
        goals: Sequence[WorkoutGoal | str],
        session_minutes: int,
    ) -> list[Exercise]:
        """First-fit selection: at most one exercise per goal category."""
        selected: list[Exercise] = []
        total = 0
        for goal in goals:
            for category in get_goal_categories(goal):
                for exercise in eligible:
                    if exercise.category != category or exercise in selected:
                        continue
                    if total + exercise.duration_min <= session_minutes:
                        selected.append(exercise)
                        total += exercise.duration_min
                        break
        return selected

    def generate(
        self,
        goals: Sequence[WorkoutGoal | str],
        equipment: Iterable[Equipment],
        fitness_level: Difficulty,
        session_minutes: int,
        sessions_per_week: int,
        start_date: date | None = None,
    ) -> WorkoutPlan:
        """Generate a personalised weekly plan.

        Args:
            goals: Training goals in priority order.
            equipment: Equipment the user has available.
            fitness_level: Advanced exercises are only chosen for advanced users.
            session_minutes: Time budget per session.
            sessions_per_week: Number of daily workouts, 1-7.
            start_date: First day of the plan (defaults to today).

        Returns:
            A WorkoutPlan. It may have no exercises if nothing is eligible.

        Raises:
            ValueError: If session_minutes or sessions_per_week is invalid.
        """
        if session_minutes <= 0:
            raise ValueError(f"session_minutes must be positive, got {session_minutes}")
        if not 0 < sessions_per_week <= MAX_SESSIONS_PER_WEEK:
            raise ValueError(
                f"sessions_per_week must be in [1, {MAX_SESSIONS_PER_WEEK}], "
                f"got {sessions_per_week}"
            )

        equipment = tuple(equipment)
        eligible = self.eligible_exercises(equipment, fitness_level, session_minutes)
        selected = tuple(self.select_exercises(eligible, goals, session_minutes))
        if not selected:
            logger.warning(
                "No eligible exercises for goals %s within %d min",
                [_goal_value(g) for g in goals],
                session_minutes,
            )

        now = datetime.now()
        start = start_date or now.date()
        plan_id = f"plan-{uuid.uuid4().hex[:12]}"
        duration = sum(ex.duration_min for ex in selected)
        intensity = _session_intensity(selected)

        daily_workouts = tuple(
            DailyWorkout(
                id=f"{plan_id}-day-{offset + 1}",
                date=start + timedelta(days=offset),
                exercises=selected,
                duration_min=duration,
                intensity=intensity,
            )
            for offset in session_offsets(sessions_per_week)
        )

        goal_words = [_goal_value(g).replace("_", " ") for g in goals]
        plan = WorkoutPlan(
            id=plan_id,
            user_id=self.user_id,
            name=f"{' & '.join(w.title() for w in goal_words)} Plan",
            description=(
                f"Personalized {sessions_per_week}x/week plan for {' and '.join(goal_words)}"
            ),
            weekly_goals=tuple(weekly_goal_for(g, sessions_per_week, now) for g in goals),
            daily_workouts=daily_workouts,
            equipment=equipment or (Equipment.NONE,),
            difficulty=fitness_level,
            estimated_calories=sum(ex.estimated_calories for ex in selected),
            created_at=now,
            updated_at=now,
        )
        logger.info(
            "Generated plan %s: %d exercises, %d sessions of %d min",
            plan.id,
            len(selected),
            sessions_per_week,
            duration,
        )
        return plan
