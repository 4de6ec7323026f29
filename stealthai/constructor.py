"""Registry of the actions, considerations and options an AI may use."""

from __future__ import annotations

from abc import ABC, abstractmethod
from typing import Iterable

from stealthai.actions import Action
from stealthai.options import Consideration, Option


class AIConstructor(ABC):
    """Defines the AI's building blocks; subclasses fill in the definitions."""

    def __init__(self) -> None:
        self.actions: dict[str, Action] = {}
        self.considerations: dict[str, Consideration] = {}
        self.options: dict[str, Option] = {}

    @abstractmethod
    def define_actions(self) -> None:
        """Register every action."""

    @abstractmethod
    def define_considerations(self) -> None:
        """Register every consideration."""

    @abstractmethod
    def define_options(self) -> None:
        """Register every option, linking actions and considerations."""

    def define_ai(self) -> None:
        """Define actions, then considerations, then options."""
        self.define_actions()
        self.define_considerations()
        self.define_options()

    def option_list(self, selected: Iterable[str] | None = None) -> list[Option]:
        """Return the named options in the order asked for, or all of them.

        Raises KeyError for a name that was never defined.
        """
        if selected is None:
            return list(self.options.values())
        return [self.options[option_id] for option_id in selected]