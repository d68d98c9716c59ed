from __future__ import annotations

import pytest
from pydantic import ValidationError

from goalstack.config import Settings
from goalstack.problem import Operator
from goalstack.solver import Planner


def _op(action, preconds=(), add=(), delete=()):  # noqa: ANN001, ANN202
    return Operator(action=action, preconds=list(preconds), add=list(add), delete=list(delete))


def test_settings_read_environment(monkeypatch: pytest.MonkeyPatch) -> None:
    monkeypatch.setenv("GOALSTACK_DETECT_CYCLES", "true")
    monkeypatch.setenv("GOALSTACK_MAX_DEPTH", "12")
    settings = Settings()
    assert settings.detect_cycles is True
    assert settings.max_depth == 12


def test_settings_reject_non_positive_depth() -> None:
    with pytest.raises(ValidationError):
        Settings(max_depth=0)


def test_planner_from_settings() -> None:
    ops = [_op(action="make g", add=["g"])]
    planner = Planner.from_settings(ops, Settings(detect_cycles=True, max_depth=3))
    assert planner.detect_cycles is True
    assert planner.max_depth == 3
    assert planner.solve([], ["g"]) == ["make g"]
