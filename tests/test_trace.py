from __future__ import annotations

import json
from pathlib import Path

import pytest

from goalstack.problem import Operator
from goalstack.solver import Planner
from goalstack.trace import TraceRecorder


def _op(action, preconds=(), add=(), delete=()):  # noqa: ANN001, ANN202
    return Operator(action=action, preconds=list(preconds), add=list(add), delete=list(delete))


def test_trace_records_successful_step() -> None:
    trace = TraceRecorder(trace_id="ok")
    planner = Planner([_op(action="make g", add=["g"])], trace=trace)
    assert planner.solve([], ["g"]) == ["make g"]
    assert trace.event_types() == ["goal", "operator_attempt", "operator_applied"]


def test_trace_records_failed_branch() -> None:
    trace = TraceRecorder(trace_id="fail")
    planner = Planner([_op(action="make g", preconds=["missing"], add=["g"])], trace=trace)
    assert planner.solve([], ["g"]) is None
    assert trace.event_types() == [
        "goal",
        "operator_attempt",
        "goal",
        "goal_failed",
        "operator_failed",
        "goal_failed",
    ]
    failed = trace.events[4]["payload"]
    assert failed == {"action": "make g", "goal": "g", "discarded": []}


def test_trace_records_undone_goals() -> None:
    trace = TraceRecorder(trace_id="undone")
    ops = [
        _op(action="make g1", add=["g1"]),
        _op(action="make g2", add=["g2"], delete=["g1"]),
    ]
    assert Planner(ops, trace=trace).solve([], ["g1", "g2"]) is None
    assert trace.events[-1]["type"] == "goal_undone"
    assert trace.events[-1]["payload"] == {"goals": ["g1"]}


def test_finalize_writes_json(tmp_path: Path) -> None:
    trace = TraceRecorder(trace_id="run-1", trace_dir=str(tmp_path / "traces"))
    trace.record_goal("g", 0)
    path = trace.finalize({"events": 1})
    payload = json.loads(Path(path).read_text(encoding="utf-8"))
    assert payload["trace_id"] == "run-1"
    assert payload["stats"] == {"events": 1}
    assert payload["events"][0]["payload"] == {"goal": "g", "depth": 0}


def test_finalize_requires_trace_dir() -> None:
    with pytest.raises(ValueError):
        TraceRecorder(trace_id="nowhere").finalize({})
