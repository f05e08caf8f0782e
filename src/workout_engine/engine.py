"""WorkoutEngine: the façade the app layer talks to."""

from __future__ import annotations

import logging
from datetime import date, datetime
from typing import Iterable, Sequence

from workout_engine.adaptation.applier import apply_adaptations
from workout_engine.adaptation.generator import AdaptationGenerator
from workout_engine.analysis.analyzer import MetricsAnalyzer
from workout_engine.catalog.repository import ExerciseCatalog
from workout_engine.math.readiness import calculate_readiness_score
from workout_engine.models.adaptation import MetricsAnalysis
from workout_engine.models.enums import (
    Difficulty,
    Equipment,
    ExerciseCategory,
    MuscleGroup,
    WorkoutGoal,
)
from workout_engine.models.exercise import Exercise
from workout_engine.models.health_metrics import HealthMetricSnapshot
from workout_engine.models.recommendation import WorkoutPreferences, WorkoutRecommendation
from workout_engine.models.session import (
    Achievement,
    CompletedExercise,
    PerformanceTrends,
    WorkoutSession,
    WorkoutStreak,
)
from workout_engine.models.workout_plan import ProgressMetric, WorkoutPlan
from workout_engine.planning.plan_generator import WorkoutPlanGenerator
from workout_engine.planning.substitutions import (
    get_alternative_exercises,
    get_exercise_modifications,
)
from workout_engine.recommendations.selector import RecommendationSelector
from workout_engine.registry import RuleRegistry
from workout_engine.tracking.sessions import SessionTracker

logger = logging.getLogger(__name__)


class WorkoutEngine:
    """Readiness scoring, plan adaptation, plan generation and recommendations.

    Every piece of mutable state (catalog, chat scenario, session history)
    belongs to the engine instance.

    Usage:
        engine = WorkoutEngine()
        score = engine.calculate_readiness_score(snapshot)
        adapted = engine.adapt_workout(plan, snapshot, "too hard")
        engine.process_chat_message("My back feels sore today")
        recommendations = engine.get_recommended_workouts()
    """

    def __init__(
        self,
        catalog: ExerciseCatalog | None = None,
        registry: RuleRegistry | None = None,
        user_id: str | None = None,
    ) -> None:
        self.catalog = catalog or ExerciseCatalog.default()
        self.analyzer = MetricsAnalyzer(registry)
        self.generator = AdaptationGenerator(self.analyzer)
        self.plan_generator = WorkoutPlanGenerator(self.catalog, user_id)
        self.selector = RecommendationSelector(self.catalog)
        self.tracker = SessionTracker(self.catalog)

    # --- Health metrics ---------------------------------------------------

    def calculate_readiness_score(self, metrics: HealthMetricSnapshot) -> int:
        return calculate_readiness_score(metrics)

    def analyze_health_metrics(self, metrics: HealthMetricSnapshot) -> MetricsAnalysis:
        return self.analyzer.analyze(metrics)

    # --- Plans and adaptation ---------------------------------------------

    def adapt_workout(
        self,
        plan: WorkoutPlan,
        metrics: HealthMetricSnapshot,
        feedback: str | None = None,
    ) -> WorkoutPlan:
        """Generate and apply the adaptations a plan needs.

        Returns the plan unchanged apart from ``updated_at`` when nothing
        needs adapting.

        Raises:
            InvalidMetricError: If any metric is outside its valid range.
        """
        adaptations = self.generator.generate(plan, metrics, feedback)
        return apply_adaptations(plan, adaptations)

    def generate_workout_plan(
        self,
        goals: Sequence[WorkoutGoal | str],
        equipment: Iterable[Equipment],
        fitness_level: Difficulty,
        session_minutes: int,
        sessions_per_week: int,
        start_date: date | None = None,
    ) -> WorkoutPlan:
        """Generate a plan and register it so it can be fetched and started by id."""
        plan = self.plan_generator.generate(
            goals, equipment, fitness_level, session_minutes, sessions_per_week, start_date
        )
        self.catalog.add_plan(plan)
        return plan

    def get_workout_plan(self, plan_id: str) -> WorkoutPlan:
        """Catalog or previously generated plan.

        Raises:
            PlanNotFoundError: For unknown ids.
        """
        return self.catalog.get_plan(plan_id)

    def get_workouts_by_equipment(self, equipment: Iterable[Equipment]) -> list[WorkoutPlan]:
        return self.catalog.plans_for_equipment(equipment)

    # --- Exercises --------------------------------------------------------

    def get_exercise_library(self) -> list[Exercise]:
        return list(self.catalog.exercises)

    def get_exercises_by_category(
        self,
        category: ExerciseCategory | None = None,
        muscle_groups: Iterable[MuscleGroup] | None = None,
        equipment: Iterable[Equipment] | None = None,
    ) -> list[Exercise]:
        return self.catalog.filter_exercises(category, muscle_groups, equipment)

    def get_alternative_exercises(
        self,
        exercise_id: str,
        injury_category: str | None = None,
        equipment: Iterable[Equipment] | None = None,
    ) -> list[Exercise]:
        """Injury alternatives, or the exercise's own variants without a category.

        Unknown exercise ids yield an empty list.
        """
        exercise = self.catalog.get_exercise(exercise_id)
        if exercise is None:
            logger.warning("Unknown exercise %r", exercise_id)
            return []
        if injury_category:
            return get_alternative_exercises(exercise, injury_category, equipment)
        return get_exercise_modifications(exercise)

    def get_exercise_modifications(
        self, exercise_id: str, condition: str | None = None
    ) -> list[Exercise]:
        exercise = self.catalog.get_exercise(exercise_id)
        if exercise is None:
            return []
        return get_exercise_modifications(exercise, condition)

    # --- Recommendations --------------------------------------------------

    def get_recommended_workouts(
        self, preferences: WorkoutPreferences | None = None
    ) -> list[WorkoutRecommendation]:
        return self.selector.get_recommendations(preferences)

    def process_chat_message(self, text: str) -> bool:
        return self.selector.process_message(text)

    def reset_demo_state(self) -> None:
        self.selector.reset()

    def get_current_demo_recommendation(self) -> WorkoutRecommendation | None:
        return self.selector.current_recommendation

    # --- Session tracking -------------------------------------------------

    def start_workout(self, plan_id: str, now: datetime | None = None) -> WorkoutSession:
        return self.tracker.start_workout(plan_id, now)

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
        return self.tracker.complete_workout(
            session, duration_min, calories_burned, exercises, rating, notes, now
        )

    def track_progress(
        self, session_id: str, exercise_id: str, metric: ProgressMetric
    ) -> WorkoutSession:
        return self.tracker.track_progress(session_id, exercise_id, metric)

    def get_workout_history(self, limit: int = 10) -> list[WorkoutSession]:
        return self.tracker.get_workout_history(limit)

    def get_workout_streak(self, today: date | None = None) -> WorkoutStreak:
        return self.tracker.get_workout_streak(today)

    def get_achievements(self, now: datetime | None = None) -> list[Achievement]:
        return self.tracker.get_achievements(now)

    def get_performance_trends(
        self, timeframe: str = "month", now: datetime | None = None
    ) -> PerformanceTrends:
        return self.tracker.get_performance_trends(timeframe, now)
