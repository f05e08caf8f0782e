"""ExerciseCatalog: the in-memory exercise and plan repository.

One catalog value is created by the caller and handed to every component
that needs it, so parallel engines (or tests) never share state.
"""

from __future__ import annotations

from datetime import date
from typing import Iterable

from workout_engine.catalog.exercises import DEFAULT_EXERCISES
from workout_engine.catalog.plans import (
    SCENARIO_EXERCISES,
    build_default_plans,
    build_scenario_plans,
)
from workout_engine.exceptions import PlanNotFoundError
from workout_engine.models.enums import Equipment, ExerciseCategory, MuscleGroup
from workout_engine.models.exercise import Exercise
from workout_engine.models.workout_plan import WorkoutPlan


class ExerciseCatalog:
    """Holds the exercise library and the named workout plans.

    Usage::

        catalog = ExerciseCatalog.default()
        catalog.get_exercise("running")
        catalog.get_plan("morning-hiit")
    """

    def __init__(
        self,
        exercises: Iterable[Exercise],
        default_plans: Iterable[WorkoutPlan] = (),
        scenario_plans: Iterable[WorkoutPlan] = (),
    ) -> None:
        self._exercises: dict[str, Exercise] = {ex.id: ex for ex in exercises}
        self.default_plans: tuple[WorkoutPlan, ...] = tuple(default_plans)
        self.scenario_plans: tuple[WorkoutPlan, ...] = tuple(scenario_plans)
        self._plans: dict[str, WorkoutPlan] = {
            plan.id: plan for plan in self.default_plans + self.scenario_plans
        }

    @classmethod
    def default(cls, on: date | None = None) -> ExerciseCatalog:
        """Build the stock catalog with the default library and plans."""
        lookup = {ex.id: ex for ex in DEFAULT_EXERCISES + SCENARIO_EXERCISES}
        return cls(
            exercises=DEFAULT_EXERCISES,
            default_plans=build_default_plans(lookup, on),
            scenario_plans=build_scenario_plans(lookup, on),
        )

    @property
    def exercises(self) -> tuple[Exercise, ...]:
        return tuple(self._exercises.values())

    @property
    def plans(self) -> tuple[WorkoutPlan, ...]:
        return tuple(self._plans.values())

    def get_exercise(self, exercise_id: str) -> Exercise | None:
        """Retrieve an exercise by id, or None."""
        return self._exercises.get(exercise_id)

    def get_plan(self, plan_id: str) -> WorkoutPlan:
        """Retrieve a plan by id.

        Raises:
            PlanNotFoundError: If no plan has this id.
        """
        try:
            return self._plans[plan_id]
        except KeyError:
            raise PlanNotFoundError(plan_id) from None

    def add_plan(self, plan: WorkoutPlan) -> None:
        """Make a plan resolvable by id, replacing any plan with the same id.

        Added plans are not served as default recommendations.
        """
        self._plans[plan.id] = plan

    def filter_exercises(
        self,
        category: ExerciseCategory | None = None,
        muscle_groups: Iterable[MuscleGroup] | None = None,
        equipment: Iterable[Equipment] | None = None,
    ) -> list[Exercise]:
        """Filter the library. Each filter left as None (or empty) is ignored.

        Muscle groups match if the exercise targets any of them; equipment
        matches if everything the exercise needs is in the given set.
        """
        wanted_muscles = set(muscle_groups or ())
        available = set(equipment or ())

        result = list(self._exercises.values())
        if category is not None:
            result = [ex for ex in result if ex.category == category]
        if wanted_muscles:
            result = [ex for ex in result if wanted_muscles.intersection(ex.muscle_groups)]
        if available:
            result = [ex for ex in result if ex.requires_only(available)]
        return result

    def plans_for_equipment(self, equipment: Iterable[Equipment]) -> list[WorkoutPlan]:
        """Default plans whose equipment is entirely available."""
        available = set(equipment)
        return [
            plan
            for plan in self.default_plans
            if all(eq == Equipment.NONE or eq in available for eq in plan.equipment)
        ]
