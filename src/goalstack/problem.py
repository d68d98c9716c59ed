"""Problem and operator models with strict schema validation."""

from __future__ import annotations

import json
from pathlib import Path
from typing import TYPE_CHECKING, Any

from pydantic import BaseModel, ConfigDict, ValidationError

from goalstack.errors import ProblemFormatError

if TYPE_CHECKING:
    from goalstack.solver import Planner


class Operator(BaseModel):
    """STRIPS operator: fires once ``preconds`` hold, then deletes and adds facts."""

    model_config = ConfigDict(extra="forbid", frozen=True)

    action: str
    preconds: list[str]
    add: list[str]
    delete: list[str]


class Problem(BaseModel):
    model_config = ConfigDict(extra="forbid")

    start: list[str]
    finish: list[str]
    ops: list[Operator]

    def solve(self, planner: Planner | None = None) -> list[str] | None:
        """Solve with ``planner`` or a default planner over this problem's operators."""
        from goalstack.solver import Planner

        if planner is None:
            planner = Planner(self.ops)
        return planner.solve(self.start, self.finish)


def validate_problem_payload(payload: Any) -> Problem:
    """Validate a raw problem payload and coerce into Problem."""
    if not isinstance(payload, dict):
        raise ProblemFormatError("Problem description must be a JSON object.")
    try:
        return Problem.model_validate(payload)
    except ValidationError as exc:
        raise ProblemFormatError(str(exc)) from exc


def parse_problem(text: str) -> Problem:
    try:
        payload = json.loads(text)
    except json.JSONDecodeError as exc:
        raise ProblemFormatError(f"Invalid JSON: {exc}") from exc
    return validate_problem_payload(payload)


def load_problem(path: str | Path) -> Problem:
    path_obj = Path(path)
    try:
        text = path_obj.read_text(encoding="utf-8")
    except OSError as exc:
        raise ProblemFormatError(f"Cannot read problem file {path_obj}: {exc}") from exc
    return parse_problem(text)
