"""Base class for entities in the scene that use AI to decide."""

from __future__ import annotations

from typing import TYPE_CHECKING, Callable

if TYPE_CHECKING:
    from stealthai.blackboard import BrainBlackboard
    from stealthai.brain import Brain


class Actor:
    """An AI-driven entity; its brain is assigned by subclasses or callers."""

    def __init__(self, actor_id: str) -> None:
        self.actor_id = actor_id
        self.brain: Brain | None = None
        self.transition_hooks: list[Callable[[Actor], None]] = []

    def _blackboard(self) -> BrainBlackboard:
        if self.brain is None:
            raise RuntimeError(f"actor {self.actor_id!r} has no brain")
        return self.brain.blackboard

    def update(self, dt: float) -> None:
        """Make and carry out one decision."""
        if self.brain is None:
            raise RuntimeError(f"actor {self.actor_id!r} has no brain")
        self.brain.update()

    def pre_transition(self) -> None:
        """Run every registered transition hook before a state change."""
        for hook in self.transition_hooks:
            hook(self)

    def add_bb_value(self, key: str, value: float) -> None:
        """Store a value on the brain's blackboard."""
        self._blackboard().add_value(key, value)

    def edit_bb_value(self, key: str, new_value: float) -> None:
        """Replace a value on the brain's blackboard."""
        self._blackboard().edit_value(key, new_value)

    def delete_bb_value(self, key: str) -> None:
        """Remove a value from the brain's blackboard."""
        self._blackboard().delete_value(key)

    def get_bb_value(self, key: str) -> float:
        """Read a value from the brain's blackboard (0.0 when absent)."""
        return self._blackboard().get_value(key)