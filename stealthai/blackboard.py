"""Per-actor key/value store that a reasoner consults when deciding."""

from __future__ import annotations

from typing import Any


class BrainBlackboard:
    """Named float values belonging to one actor's brain.

    Reading a name that was never stored gives 0.0.
    """

    def __init__(self, actor_context: Any) -> None:
        self.actor_context = actor_context
        self._data: dict[str, float] = {}

    def __contains__(self, name: object) -> bool:
        return name in self._data

    def __len__(self) -> int:
        return len(self._data)

    def add_value(self, name: str, data: float) -> None:
        """Store ``data`` under ``name``, replacing any existing value."""
        self._data[name] = float(data)

    def get_value(self, name: str) -> float:
        """Return the value stored under ``name``, or 0.0 if there is none."""
        return self._data.get(name, 0.0)

    def get_and_delete_value(self, name: str) -> int:
        """Remove ``name`` and return its value truncated to an integer."""
        return int(self._data.pop(name, 0.0))

    def edit_value(self, name: str, new_value: float) -> None:
        """Replace the value stored under ``name``."""
        self._data.pop(name, None)
        self._data[name] = float(new_value)

    def delete_value(self, name: str) -> None:
        """Remove ``name`` if present."""
        self._data.pop(name, None)