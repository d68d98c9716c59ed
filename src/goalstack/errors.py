"""Exception types raised around the planner."""

from __future__ import annotations


class PlannerError(RuntimeError):
    pass


class SearchDepthExceeded(PlannerError):
    """Raised when the goal stack grows past the configured depth.

    Also raised when the interpreter's recursion limit is reached first, in
    which case ``goal_stack`` is empty.
    """

    def __init__(self, depth: int, goal_stack: list | None = None) -> None:
        self.depth = depth
        self.goal_stack = list(goal_stack or [])
        if self.goal_stack:
            chain = " -> ".join(str(goal) for goal in self.goal_stack[-5:])
            message = f"Search depth {depth} exceeded while pursuing: {chain}"
        else:
            message = f"Recursion limit reached before search depth {depth}"
        super().__init__(message)


class ProblemFormatError(ValueError):
    """Raised when a problem description cannot be parsed."""
