"""Options a reasoner selects from, and the rules that qualify them."""

from __future__ import annotations

from typing import TYPE_CHECKING, Callable

if TYPE_CHECKING:
    from stealthai.actions import Action
    from stealthai.blackboard import BrainBlackboard


Rule = Callable[["BrainBlackboard"], bool]


class Consideration:
    """A named logic rule evaluated against a blackboard."""

    def __init__(self, consideration_id: str, rule: Rule) -> None:
        self.consideration_id = consideration_id
        self.rule = rule

    def calculate(self, blackboard: BrainBlackboard) -> bool:
        """Evaluate the rule for ``blackboard``."""
        return bool(self.rule(blackboard))

    def __repr__(self) -> str:
        return f"Consideration({self.consideration_id!r})"


class Option:
    """One choice available to a reasoner: an action plus its considerations."""

    def __init__(self, option_id: str, action: Action | None) -> None:
        self.option_id = option_id
        self.action = action
        self.considerations: list[Consideration] = []

    def add_consideration(self, consideration: Consideration) -> None:
        """Attach a consideration to this option."""
        self.considerations.append(consideration)

    def __repr__(self) -> str:
        return f"Option({self.option_id!r})"