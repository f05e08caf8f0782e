"""Command-line interface to the workout engine.

Usage:
    workout-engine readiness snapshot.json
    workout-engine analyze snapshot.json
    workout-engine plan --goal weight_loss --equipment none --level beginner \
        --minutes 20 --sessions 3
    workout-engine adapt snapshot.json --plan morning-hiit --feedback "too hard"
    workout-engine recommend --message "My back feels sore today"
    workout-engine alternatives running --injury knee_injury

Snapshots and plan files are JSON; pass ``-`` to read a snapshot from stdin.
All results are printed to stdout as JSON. Unreadable or invalid input
exits with status 2.
"""

from __future__ import annotations

import argparse
import json
import logging
import sys
from typing import Any, Sequence

from workout_engine import config
from workout_engine.engine import WorkoutEngine
from workout_engine.exceptions import WorkoutEngineError
from workout_engine.models.enums import Difficulty, Equipment, WorkoutGoal
from workout_engine.models.health_metrics import HealthMetricSnapshot
from workout_engine.serialization import (
    analysis_to_dict,
    exercise_to_dict,
    plan_from_dict,
    plan_to_dict,
    recommendation_to_dict,
    snapshot_from_dict,
    to_json_string,
)

logger = logging.getLogger(__name__)

EXIT_OK = 0
EXIT_INVALID_INPUT = 2


def _load_json(path: str) -> Any:
    if path == "-":
        return json.load(sys.stdin)
    with open(path) as f:
        return json.load(f)


def _load_snapshot(path: str) -> HealthMetricSnapshot:
    return snapshot_from_dict(_load_json(path))


def _cmd_readiness(engine: WorkoutEngine, args: argparse.Namespace) -> Any:
    return {"readiness_score": engine.calculate_readiness_score(_load_snapshot(args.snapshot))}


def _cmd_analyze(engine: WorkoutEngine, args: argparse.Namespace) -> Any:
    return analysis_to_dict(engine.analyze_health_metrics(_load_snapshot(args.snapshot)))


def _cmd_plan(engine: WorkoutEngine, args: argparse.Namespace) -> Any:
    plan = engine.generate_workout_plan(
        goals=[WorkoutGoal(g) for g in args.goal],
        equipment=[Equipment(e) for e in args.equipment or [Equipment.NONE.value]],
        fitness_level=Difficulty(args.level),
        session_minutes=args.minutes,
        sessions_per_week=args.sessions,
    )
    return plan_to_dict(plan)


def _cmd_adapt(engine: WorkoutEngine, args: argparse.Namespace) -> Any:
    metrics = _load_snapshot(args.snapshot)
    if args.plan_file:
        plan = plan_from_dict(_load_json(args.plan_file))
    else:
        plan = engine.get_workout_plan(args.plan)
    return plan_to_dict(engine.adapt_workout(plan, metrics, args.feedback))


def _cmd_recommend(engine: WorkoutEngine, args: argparse.Namespace) -> Any:
    matched = engine.process_chat_message(args.message) if args.message else False
    return {
        "scenario_matched": matched,
        "recommendations": [recommendation_to_dict(r) for r in engine.get_recommended_workouts()],
    }


def _cmd_alternatives(engine: WorkoutEngine, args: argparse.Namespace) -> Any:
    equipment = [Equipment(e) for e in args.equipment] if args.equipment else None
    alternatives = engine.get_alternative_exercises(args.exercise_id, args.injury, equipment)
    return [exercise_to_dict(ex) for ex in alternatives]


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="workout-engine",
        description="Readiness scoring, workout adaptation and recommendations",
    )
    parser.add_argument("--log-level", default=config.LOG_LEVEL, help="Logging level")
    sub = parser.add_subparsers(dest="command", required=True)

    p = sub.add_parser("readiness", help="Compute the 0-100 readiness score")
    p.add_argument("snapshot", help="Health metric snapshot JSON file, or - for stdin")
    p.set_defaults(handler=_cmd_readiness)

    p = sub.add_parser("analyze", help="Analyze health metrics for adaptation reasons")
    p.add_argument("snapshot", help="Health metric snapshot JSON file, or - for stdin")
    p.set_defaults(handler=_cmd_analyze)

    p = sub.add_parser("plan", help="Generate a goal-driven weekly plan")
    p.add_argument(
        "--goal", action="append", required=True, choices=[g.value for g in WorkoutGoal]
    )
    p.add_argument(
        "--equipment", action="append", default=None, choices=[e.value for e in Equipment]
    )
    p.add_argument(
        "--level", default=Difficulty.BEGINNER.value, choices=[d.value for d in Difficulty]
    )
    p.add_argument("--minutes", type=int, required=True, help="Minutes per session")
    p.add_argument("--sessions", type=int, required=True, help="Sessions per week (1-7)")
    p.set_defaults(handler=_cmd_plan)

    p = sub.add_parser("adapt", help="Adapt a plan to health metrics and feedback")
    p.add_argument("snapshot", help="Health metric snapshot JSON file, or - for stdin")
    group = p.add_mutually_exclusive_group(required=True)
    group.add_argument("--plan", help="Catalog plan id")
    group.add_argument("--plan-file", help="Plan JSON file")
    p.add_argument("--feedback", help="Free-text feedback on the last workout")
    p.set_defaults(handler=_cmd_adapt)

    p = sub.add_parser("recommend", help="List recommended workouts")
    p.add_argument("--message", help="Chat message that may activate a scenario")
    p.set_defaults(handler=_cmd_recommend)

    p = sub.add_parser("alternatives", help="Injury-safe alternatives or variants")
    p.add_argument("exercise_id")
    p.add_argument("--injury", help="Injury category, e.g. knee_injury")
    p.add_argument(
        "--equipment", action="append", default=None, choices=[e.value for e in Equipment]
    )
    p.set_defaults(handler=_cmd_alternatives)

    return parser


def main(argv: Sequence[str] | None = None) -> int:
    parser = build_parser()
    args = parser.parse_args(argv)
    logging.basicConfig(
        level=args.log_level.upper(),
        format="%(asctime)s [%(levelname)s] %(name)s: %(message)s",
    )

    engine = WorkoutEngine()
    try:
        result = args.handler(engine, args)
    except (WorkoutEngineError, KeyError, ValueError, OSError) as exc:
        logger.error("%s", exc)
        return EXIT_INVALID_INPUT

    print(to_json_string(result))
    return EXIT_OK


if __name__ == "__main__":
    sys.exit(main())
