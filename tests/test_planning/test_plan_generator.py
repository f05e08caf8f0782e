"""Tests for WorkoutPlanGenerator: eligibility, first-fit selection, goals."""

from __future__ import annotations

from datetime import date

import pytest

from workout_engine.catalog.repository import ExerciseCatalog
from workout_engine.models.enums import (
    Difficulty,
    Equipment,
    ExerciseCategory,
    GoalType,
    Intensity,
    WorkoutGoal,
)
from workout_engine.models.workout_plan import WorkoutPlan
from workout_engine.planning.goal_templates import get_goal_categories
from workout_engine.planning.plan_generator import WorkoutPlanGenerator, session_offsets

START = date(2026, 3, 2)


class TestGoalCategories:
    def test_weight_loss(self) -> None:
        assert get_goal_categories(WorkoutGoal.WEIGHT_LOSS) == (
            ExerciseCategory.CARDIO,
            ExerciseCategory.HIIT,
        )

    def test_string_goal(self) -> None:
        assert get_goal_categories("flexibility") == (
            ExerciseCategory.YOGA,
            ExerciseCategory.FLEXIBILITY,
        )

    def test_unknown_falls_back_to_cardio(self) -> None:
        assert get_goal_categories("parkour") == (ExerciseCategory.CARDIO,)


class TestSessionOffsets:
    def test_spread(self) -> None:
        assert session_offsets(3) == [0, 2, 4]

    def test_every_day(self) -> None:
        assert session_offsets(7) == list(range(7))


class TestWorkoutPlanGenerator:
    def setup_method(self) -> None:
        self.generator = WorkoutPlanGenerator(ExerciseCatalog.default(on=START))

    def _generate(
        self,
        goals: list[WorkoutGoal],
        equipment: list[Equipment],
        level: Difficulty,
        minutes: int,
        sessions: int,
    ) -> WorkoutPlan:
        return self.generator.generate(goals, equipment, level, minutes, sessions, START)

    def test_short_weight_loss_session(self) -> None:
        plan = self._generate(
            [WorkoutGoal.WEIGHT_LOSS], [Equipment.NONE], Difficulty.BEGINNER, 20, 3
        )
        assert [ex.id for ex in plan.exercises] == ["brisk-walk"]
        assert all(ex.duration_min <= 20 for ex in plan.exercises)
        assert plan.total_duration_min <= 20

    def test_first_fit_general_fitness(self) -> None:
        plan = self._generate(
            [WorkoutGoal.GENERAL_FITNESS],
            [Equipment.NONE, Equipment.DUMBBELLS],
            Difficulty.INTERMEDIATE,
            60,
            3,
        )
        # Dumbbell strength (35) and HIIT (25) no longer fit after running (30)
        assert [ex.id for ex in plan.exercises] == ["running", "push-ups", "tabata-express"]
        assert plan.daily_workouts[0].duration_min == 55
        assert plan.daily_workouts[0].intensity == Intensity.HIGH

    def test_equipment_constraint(self) -> None:
        plan = self._generate(
            [WorkoutGoal.ENDURANCE, WorkoutGoal.STRENGTH, WorkoutGoal.FLEXIBILITY],
            [Equipment.NONE],
            Difficulty.INTERMEDIATE,
            90,
            2,
        )
        for exercise in plan.exercises:
            assert all(eq == Equipment.NONE for eq in exercise.equipment)

    def test_advanced_excluded_for_beginners(self) -> None:
        eligible = self.generator.eligible_exercises(
            [Equipment.KETTLEBELL], Difficulty.INTERMEDIATE, 60
        )
        assert "kettlebell-complex" not in [ex.id for ex in eligible]
        eligible = self.generator.eligible_exercises(
            [Equipment.KETTLEBELL], Difficulty.ADVANCED, 60
        )
        assert "kettlebell-complex" in [ex.id for ex in eligible]

    def test_daily_workouts_spread_over_week(self) -> None:
        plan = self._generate(
            [WorkoutGoal.ENDURANCE], [Equipment.NONE], Difficulty.BEGINNER, 30, 3
        )
        assert [d.date for d in plan.daily_workouts] == [
            date(2026, 3, 2),
            date(2026, 3, 4),
            date(2026, 3, 6),
        ]
        assert len({d.id for d in plan.daily_workouts}) == 3

    def test_weekly_goals(self) -> None:
        plan = self._generate(
            [WorkoutGoal.WEIGHT_LOSS, WorkoutGoal.STRENGTH],
            [Equipment.NONE],
            Difficulty.BEGINNER,
            30,
            4,
        )
        calories, sessions = plan.weekly_goals
        assert calories.goal_type == GoalType.CALORIES_BURNED
        assert calories.target == 2000
        assert calories.unit == "calories"
        assert sessions.goal_type == GoalType.WEEKLY_WORKOUTS
        assert sessions.target == 4
        assert (calories.deadline - plan.created_at).days == 7

    def test_name_and_description(self) -> None:
        plan = self._generate(
            [WorkoutGoal.WEIGHT_LOSS], [Equipment.NONE], Difficulty.BEGINNER, 30, 3
        )
        assert plan.name == "Weight Loss Plan"
        assert plan.description == "Personalized 3x/week plan for weight loss"
        assert plan.user_id == "current-user"

    def test_nothing_eligible_gives_empty_sessions(self) -> None:
        plan = self._generate(
            [WorkoutGoal.FLEXIBILITY], [Equipment.NONE], Difficulty.BEGINNER, 5, 2
        )
        assert plan.exercises == ()
        assert all(d.duration_min == 0 for d in plan.daily_workouts)

    @pytest.mark.parametrize("minutes,sessions", [(0, 3), (-10, 3), (30, 0), (30, 8)])
    def test_invalid_inputs(self, minutes: int, sessions: int) -> None:
        with pytest.raises(ValueError):
            self._generate([WorkoutGoal.ENDURANCE], [Equipment.NONE], Difficulty.BEGINNER,
                           minutes, sessions)


_EQUIPMENT_SETS = [
    (Equipment.NONE,),
    (Equipment.DUMBBELLS,),
    (Equipment.NONE, Equipment.YOGA_MAT),
    (Equipment.KETTLEBELL, Equipment.STATIONARY_BIKE),
    tuple(Equipment),
]
_GOAL_SETS = [[goal] for goal in WorkoutGoal] + [list(WorkoutGoal)]


class TestGeneratedPlanConstraints:
    """Every generated plan respects equipment, level and time budget."""

    def setup_method(self) -> None:
        self.generator = WorkoutPlanGenerator(ExerciseCatalog.default(on=START))

    @pytest.mark.parametrize("goals", _GOAL_SETS, ids=lambda g: "+".join(x.value for x in g))
    @pytest.mark.parametrize(
        "equipment", _EQUIPMENT_SETS, ids=lambda e: "+".join(x.value for x in e)
    )
    @pytest.mark.parametrize("level", list(Difficulty), ids=lambda d: d.value)
    @pytest.mark.parametrize("minutes", [10, 20, 30, 45, 90])
    def test_constraints_hold(
        self,
        goals: list[WorkoutGoal],
        equipment: tuple[Equipment, ...],
        level: Difficulty,
        minutes: int,
    ) -> None:
        plan = self.generator.generate(goals, equipment, level, minutes, 3, START)
        available = set(equipment)
        for exercise in plan.exercises:
            assert exercise.requires_only(available)
            assert exercise.duration_min <= minutes
            if level != Difficulty.ADVANCED:
                assert exercise.difficulty != Difficulty.ADVANCED
        for daily in plan.daily_workouts:
            assert daily.duration_min <= minutes
            assert sum(ex.duration_min for ex in daily.exercises) == daily.duration_min
