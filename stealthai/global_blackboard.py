"""A single blackboard value shared by every AI in the game."""

from __future__ import annotations

from typing import ClassVar


class GlobalBlackboard:
    """Shared integer store; use ``GlobalBlackboard.instance()`` to reach it."""

    _shared: ClassVar[GlobalBlackboard | None] = None

    def __init__(self) -> None:
        self.value: int = 0

    @staticmethod
    def instance() -> GlobalBlackboard:
        """Return the shared blackboard, creating it on first use."""
        if GlobalBlackboard._shared is None:
            GlobalBlackboard._shared = GlobalBlackboard()
        return GlobalBlackboard._shared