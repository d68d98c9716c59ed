"""Command-line interface."""

from __future__ import annotations

import argparse
import json
import sys
from typing import Any
from uuid import uuid4

from goalstack.config import Settings
from goalstack.errors import ProblemFormatError, SearchDepthExceeded
from goalstack.examples import EXAMPLES
from goalstack.problem import Problem, load_problem
from goalstack.solver import Planner
from goalstack.trace import TraceRecorder
from goalstack.util.logging import configure_level, get_logger

logger = get_logger(__name__)

EXIT_NO_PLAN = 1
EXIT_BAD_INPUT = 2
EXIT_DEPTH_EXCEEDED = 3


def parse_args(argv: list[str] | None = None) -> argparse.Namespace:
    parser = argparse.ArgumentParser(description="goalstack planner")
    source = parser.add_mutually_exclusive_group(required=True)
    source.add_argument("problem", nargs="?", help="Path to a JSON problem description")
    source.add_argument("--example", choices=sorted(EXAMPLES), dest="example")
    parser.add_argument("--detect-cycles", action="store_true", dest="detect_cycles")
    parser.add_argument("--max-depth", type=int, dest="max_depth")
    parser.add_argument("--trace-dir", dest="trace_dir")
    parser.add_argument("--log-level", dest="log_level")
    parser.add_argument("--json", action="store_true", dest="as_json")
    return parser.parse_args(argv)


def apply_overrides(settings: Settings, args: argparse.Namespace) -> Settings:
    data: dict[str, Any] = settings.model_dump()
    if args.detect_cycles:
        data["detect_cycles"] = True
    if args.max_depth is not None:
        data["max_depth"] = args.max_depth
    if args.trace_dir:
        data["trace_dir"] = args.trace_dir
    if args.log_level:
        data["log_level"] = args.log_level
    return Settings(**data)


def _load(args: argparse.Namespace) -> Problem:
    if args.example:
        return EXAMPLES[args.example]()
    return load_problem(args.problem)


def render_plan(plan: list[Any] | None, as_json: bool = False) -> str:
    if as_json:
        return json.dumps({"plan": plan})
    if plan is None:
        return "No plan found."
    if not plan:
        return "Goals already hold; nothing to do."
    return "\n".join(f"{index}. {action}" for index, action in enumerate(plan, start=1))


def _write_trace(trace: TraceRecorder) -> None:
    try:
        trace_path = trace.finalize({"events": len(trace.events)})
    except OSError as exc:
        logger.error("Could not write trace %s: %s", trace.trace_id, exc)
        return
    logger.info("Trace written to %s", trace_path)


def main(argv: list[str] | None = None) -> int:
    args = parse_args(argv)
    try:
        settings = apply_overrides(Settings(), args)
        configure_level(settings.log_level)
    except ValueError as exc:
        print(f"Invalid settings: {exc}", file=sys.stderr)
        return EXIT_BAD_INPUT
    try:
        problem = _load(args)
    except ProblemFormatError as exc:
        print(f"Invalid problem: {exc}", file=sys.stderr)
        return EXIT_BAD_INPUT

    trace = None
    if settings.trace_dir:
        trace = TraceRecorder(trace_id=uuid4().hex, trace_dir=settings.trace_dir)
    planner = Planner.from_settings(problem.ops, settings, trace=trace)
    try:
        plan = planner.solve(problem.start, problem.finish)
    except SearchDepthExceeded as exc:
        logger.warning("Search aborted: %s", exc)
        print(f"Search aborted: {exc}", file=sys.stderr)
        return EXIT_DEPTH_EXCEEDED
    finally:
        if trace is not None:
            _write_trace(trace)

    if plan is None:
        logger.info("No plan found for %s", problem.finish)
    else:
        logger.info("Plan found with %d actions", len(plan))
    print(render_plan(plan, as_json=args.as_json))
    return EXIT_NO_PLAN if plan is None else 0


if __name__ == "__main__":
    raise SystemExit(main())
