"""Actions an actor can carry out, and their result status."""

from __future__ import annotations

import enum
from typing import TYPE_CHECKING, Callable

if TYPE_CHECKING:
    from stealthai.blackboard import BrainBlackboard
    from stealthai.reasoner import Reasoner


class ActionStatus(enum.Enum):
    """Outcome of performing an action."""

    IDLE = enum.auto()
    RUNNING = enum.auto()
    SUCCESS = enum.auto()
    FAILURE = enum.auto()


ActionFunction = Callable[["BrainBlackboard"], ActionStatus]


class Action:
    """A named behaviour, run by calling its function with a blackboard."""

    def __init__(self, action_id: str, function: ActionFunction | None) -> None:
        self.action_id = action_id
        self.function = function

    def perform(self, context: BrainBlackboard) -> ActionStatus:
        """Run the action against ``context`` and return its status."""
        if self.function is None:
            raise RuntimeError(f"action {self.action_id!r} has no function")
        return self.function(context)

    def reset(self) -> None:
        """Return the action to its initial state; plain actions keep none."""

    def __repr__(self) -> str:
        return f"{type(self).__name__}({self.action_id!r})"


class SubReasonerAction(Action):
    """An action that delegates its decision to a nested reasoner."""

    def __init__(
        self,
        action_id: str,
        function: ActionFunction | None,
        child_reasoner: Reasoner,
    ) -> None:
        super().__init__(action_id, function)
        self.child_reasoner = child_reasoner

    def perform(self, context: BrainBlackboard) -> ActionStatus:
        """Let the child reasoner decide and act; return its status."""
        return self.child_reasoner.update()

    def reset(self) -> None:
        """Reset the child reasoner."""
        self.child_reasoner.reset()