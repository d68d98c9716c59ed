"""Trace recorder for planner runs."""

from __future__ import annotations

import json
import time
from dataclasses import dataclass, field
from pathlib import Path
from typing import Any


@dataclass
class TraceRecorder:
    trace_id: str
    trace_dir: str | None = None
    started_at: float = field(default_factory=time.time)
    events: list[dict[str, Any]] = field(default_factory=list)

    def record(self, event_type: str, payload: dict[str, Any]) -> None:
        self.events.append(
            {
                "type": event_type,
                "timestamp": time.time(),
                "payload": payload,
            }
        )

    def record_goal(self, goal: Any, depth: int) -> None:
        self.record("goal", {"goal": str(goal), "depth": depth})

    def record_attempt(self, action: Any, goal: Any, depth: int) -> None:
        self.record(
            "operator_attempt",
            {"action": str(action), "goal": str(goal), "depth": depth},
        )

    def record_applied(self, action: Any, depth: int) -> None:
        self.record("operator_applied", {"action": str(action), "depth": depth})

    def record_failed(self, action: Any, goal: Any, discarded: list[Any]) -> None:
        self.record(
            "operator_failed",
            {
                "action": str(action),
                "goal": str(goal),
                "discarded": [str(item) for item in discarded],
            },
        )

    def record_goal_failed(self, goal: Any, reason: str) -> None:
        self.record("goal_failed", {"goal": str(goal), "reason": reason})

    def record_goals_undone(self, goals: list[Any]) -> None:
        self.record("goal_undone", {"goals": [str(goal) for goal in goals]})

    def event_types(self) -> list[str]:
        return [event["type"] for event in self.events]

    def finalize(self, stats: dict[str, Any]) -> str:
        if self.trace_dir is None:
            raise ValueError("trace_dir is not set")
        trace_dir = Path(self.trace_dir)
        trace_dir.mkdir(parents=True, exist_ok=True)
        trace_path = trace_dir / f"{self.trace_id}.json"
        payload = {
            "trace_id": self.trace_id,
            "started_at": self.started_at,
            "ended_at": time.time(),
            "stats": stats,
            "events": self.events,
        }
        trace_path.write_text(json.dumps(payload, indent=2), encoding="utf-8")
        return str(trace_path)
