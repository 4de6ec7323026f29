"""An actor's brain: its blackboard together with its reasoner."""

from __future__ import annotations

from typing import TYPE_CHECKING, Any

from stealthai.blackboard import BrainBlackboard

if TYPE_CHECKING:
    from stealthai.actions import ActionStatus
    from stealthai.reasoner import Reasoner


class Brain:
    """Holds the data used for decisions and the logic that makes them.

    The brain owns a fresh blackboard bound to ``actor_context``. The
    reasoner may be given now or assigned later, once it has been built
    around ``brain.blackboard``.
    """

    def __init__(self, actor_context: Any, reasoner: Reasoner | None = None) -> None:
        self.blackboard = BrainBlackboard(actor_context)
        self.reasoner = reasoner

    def update(self) -> ActionStatus:
        """Run one decision cycle of the reasoner."""
        if self.reasoner is None:
            raise RuntimeError("brain has no reasoner")
        return self.reasoner.update()