"""Base reasoner: chooses an option and carries out its action."""

from __future__ import annotations

from abc import ABC, abstractmethod
from typing import TYPE_CHECKING, Callable, Iterable

if TYPE_CHECKING:
    from stealthai.actions import ActionStatus
    from stealthai.blackboard import BrainBlackboard
    from stealthai.options import Option


class NoOptionSelectedError(RuntimeError):
    """Raised when a reasoner is asked to act with no option selected."""


class Reasoner(ABC):
    """Selects one of its options each update and performs its action."""

    def __init__(self, reasoner_id: str, blackboard: BrainBlackboard) -> None:
        self.reasoner_id = reasoner_id
        self.blackboard = blackboard
        self.options: list[Option] = []
        self.selected_option: Option | None = None
        self.sensors: list[Callable[[BrainBlackboard], None]] = []
        self.reset_hooks: list[Callable[[Reasoner], None]] = []

    def set_options(self, options: Iterable[Option]) -> None:
        """Replace the options this reasoner chooses from."""
        self.options = list(options)

    def clear_options(self) -> None:
        """Remove every option."""
        self.options.clear()

    def get_option_by_name(self, name: str) -> Option | None:
        """Return the first option with id ``name``, or None."""
        return next((o for o in self.options if o.option_id == name), None)

    def update(self) -> ActionStatus:
        """Sense, think, then act; return the action's status."""
        self.sense()
        self.think()
        return self.act()

    def sense(self) -> None:
        """Run every registered sensor against the blackboard."""
        for sensor in self.sensors:
            sensor(self.blackboard)

    @abstractmethod
    def think(self) -> None:
        """Choose ``selected_option``."""

    def act(self) -> ActionStatus:
        """Perform the selected option's action."""
        option = self.selected_option
        if option is None:
            raise NoOptionSelectedError(
                f"reasoner {self.reasoner_id!r} has no selected option"
            )
        if option.action is None:
            raise NoOptionSelectedError(
                f"option {option.option_id!r} has no action"
            )
        return option.action.perform(self.blackboard)

    def reset(self) -> None:
        """Run every registered reset hook with this reasoner."""
        for hook in self.reset_hooks:
            hook(self)