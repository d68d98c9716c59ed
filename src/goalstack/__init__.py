"""Means-ends analysis planner for STRIPS-style problems."""

from goalstack.errors import PlannerError, ProblemFormatError, SearchDepthExceeded
from goalstack.problem import (
    Operator,
    Problem,
    load_problem,
    parse_problem,
    validate_problem_payload,
)
from goalstack.solver import (
    Planner,
    achieve,
    achieve_all,
    apply_operator,
    appropriate,
    problem_solver,
)

__all__ = [
    "Operator",
    "Planner",
    "PlannerError",
    "Problem",
    "ProblemFormatError",
    "SearchDepthExceeded",
    "achieve",
    "achieve_all",
    "apply_operator",
    "appropriate",
    "load_problem",
    "parse_problem",
    "problem_solver",
    "validate_problem_payload",
]
