"""Means-ends analysis planner.

The search is a depth-first recursion over goals:

    solve -> achieve_all(goals) -> achieve(goal) -> apply_operator(op)
          -> achieve_all(op.preconds) -> ...

A state is a list of facts. Facts only need equality, so the planner works
with the strings of a parsed :class:`~goalstack.problem.Problem` as well as
any other comparable values, and any object exposing ``action``,
``preconds``, ``add`` and ``delete`` can serve as an operator.
"""

from __future__ import annotations

from typing import Any, Iterable, Sequence

from goalstack.config import Settings
from goalstack.errors import SearchDepthExceeded
from goalstack.problem import Operator
from goalstack.trace import TraceRecorder
from goalstack.util.logging import get_logger

logger = get_logger(__name__)

DEFAULT_MAX_DEPTH = 100


def appropriate(goal: Any, op: Operator) -> bool:
    """Return True when ``op`` adds ``goal``."""
    return goal in op.add


class Planner:
    """Goal-stack planner over a fixed, ordered list of operators.

    Operator order matters: for each goal the first operator whose add-list
    contains it and whose preconditions can be achieved wins.

    Args:
        operators: Candidate operators, tried in the given order.
        detect_cycles: Fail a goal that is already being pursued higher up
            the goal stack instead of recursing into it again.
        max_depth: Largest goal stack allowed before the search is aborted
            with :class:`SearchDepthExceeded`.
        trace: Optional recorder receiving one event per search step.
    """

    def __init__(
        self,
        operators: Iterable[Operator],
        detect_cycles: bool = False,
        max_depth: int = DEFAULT_MAX_DEPTH,
        trace: TraceRecorder | None = None,
    ) -> None:
        if max_depth < 1:
            raise ValueError("max_depth must be at least 1")
        self.operators = list(operators)
        self.detect_cycles = detect_cycles
        self.max_depth = max_depth
        self.trace = trace

    @classmethod
    def from_settings(
        cls,
        operators: Iterable[Operator],
        settings: Settings,
        trace: TraceRecorder | None = None,
    ) -> "Planner":
        return cls(
            operators,
            detect_cycles=settings.detect_cycles,
            max_depth=settings.max_depth,
            trace=trace,
        )

    def solve(self, start: Sequence[Any], goals: Sequence[Any]) -> list[Any] | None:
        """Return the actions that reach ``goals`` from ``start``, or None."""
        actions: list[Any] = []
        try:
            final_state = self.achieve_all(list(start), goals, [], actions)
        except RecursionError as exc:
            # Each goal-stack level costs several frames, so a large
            # max_depth can outrun the interpreter limit.
            raise SearchDepthExceeded(self.max_depth) from exc
        if final_state is None:
            logger.debug("No plan for goals %s", list(goals))
            return None
        logger.debug("Plan found with %d actions", len(actions))
        return actions

    def achieve_all(
        self,
        state: list[Any],
        goals: Sequence[Any],
        goal_stack: list[Any],
        actions: list[Any],
    ) -> list[Any] | None:
        """Achieve ``goals`` in order, then check that none was undone."""
        current = state
        for goal in goals:
            result = self.achieve(current, goal, goal_stack, actions)
            if result is None:
                return None
            current = result
        undone = [goal for goal in goals if goal not in current]
        if undone:
            # A later goal deleted an earlier one.
            logger.debug("Goals undone by later operators: %s", undone)
            if self.trace is not None:
                self.trace.record_goals_undone(undone)
            return None
        return current

    def achieve(
        self,
        state: list[Any],
        goal: Any,
        goal_stack: list[Any],
        actions: list[Any],
    ) -> list[Any] | None:
        depth = len(goal_stack)
        if self.trace is not None:
            self.trace.record_goal(goal, depth)
        if goal in state:
            return state
        if self.detect_cycles and goal in goal_stack:
            logger.debug("Goal %r is already on the goal stack", goal)
            if self.trace is not None:
                self.trace.record_goal_failed(goal, "cycle")
            return None
        logger.debug("%sconsidering goal %r", "  " * depth, goal)
        for op in self.operators:
            if not appropriate(goal, op):
                continue
            if self.trace is not None:
                self.trace.record_attempt(op.action, goal, depth)
            checkpoint = len(actions)
            result = self.apply_operator(op, state, goal, goal_stack, actions)
            if result is not None:
                return result
            discarded = actions[checkpoint:]
            del actions[checkpoint:]
            if self.trace is not None:
                self.trace.record_failed(op.action, goal, discarded)
        if self.trace is not None:
            self.trace.record_goal_failed(goal, "no applicable operator")
        return None

    def apply_operator(
        self,
        op: Operator,
        state: list[Any],
        goal: Any,
        goal_stack: list[Any],
        actions: list[Any],
    ) -> list[Any] | None:
        stack = [*goal_stack, goal]
        if len(stack) > self.max_depth:
            raise SearchDepthExceeded(self.max_depth, stack)
        result = self.achieve_all(state, op.preconds, stack, actions)
        if result is None:
            return None
        logger.debug("%sapplying %r", "  " * len(goal_stack), op.action)
        actions.append(op.action)
        if self.trace is not None:
            self.trace.record_applied(op.action, len(goal_stack))
        return [fact for fact in result if fact not in op.delete] + list(op.add)


def problem_solver(
    start: Sequence[Any],
    goals: Sequence[Any],
    operators: Iterable[Operator],
    detect_cycles: bool = False,
    max_depth: int = DEFAULT_MAX_DEPTH,
) -> list[Any] | None:
    """Find a plan reaching ``goals`` from ``start`` using ``operators``."""
    planner = Planner(operators, detect_cycles=detect_cycles, max_depth=max_depth)
    return planner.solve(start, goals)


def achieve_all(
    state: Sequence[Any],
    operators: Iterable[Operator],
    goals: Sequence[Any],
    goal_stack: Sequence[Any] = (),
    actions: list[Any] | None = None,
) -> list[Any] | None:
    """Functional form of :meth:`Planner.achieve_all`.

    Applied actions are appended to ``actions`` when it is given.
    """
    if actions is None:
        actions = []
    return Planner(operators).achieve_all(list(state), goals, list(goal_stack), actions)


def achieve(
    state: Sequence[Any],
    operators: Iterable[Operator],
    goal: Any,
    goal_stack: Sequence[Any] = (),
    actions: list[Any] | None = None,
) -> list[Any] | None:
    if actions is None:
        actions = []
    return Planner(operators).achieve(list(state), goal, list(goal_stack), actions)


def apply_operator(
    op: Operator,
    state: Sequence[Any],
    operators: Iterable[Operator],
    goal: Any,
    goal_stack: Sequence[Any] = (),
    actions: list[Any] | None = None,
) -> list[Any] | None:
    if actions is None:
        actions = []
    return Planner(operators).apply_operator(op, list(state), goal, list(goal_stack), actions)
