"""The actions and options available to the stealth game's guards."""

from __future__ import annotations

from typing import TYPE_CHECKING

from stealthai.actions import Action, ActionFunction, ActionStatus
from stealthai.constructor import AIConstructor
from stealthai.options import Option

if TYPE_CHECKING:
    from stealthai.blackboard import BrainBlackboard


def _behaviour(method_name: str) -> ActionFunction:
    def run(blackboard: BrainBlackboard) -> ActionStatus:
        getattr(blackboard.actor_context, method_name)()
        return ActionStatus.SUCCESS

    return run


class StealthConstructor(AIConstructor):
    """Defines the guard behaviours the FSM reasoner chooses between."""

    def define_actions(self) -> None:
        """Register rest, patrol, chase and investigate actions."""
        self.add_action("ActionRest", _behaviour("rest"))
        self.add_action("ActionPatrol", _behaviour("patrol"))
        self.add_action("ActionChase", _behaviour("chase"))
        self.add_action("ActionInvestigate", _behaviour("investigate"))

    def define_considerations(self) -> None:
        """The state machine needs no considerations."""

    def define_options(self) -> None:
        """Link the rest and patrol options to their actions."""
        self.add_option("OptionRest", "ActionRest")
        self.add_option("OptionPatrol", "ActionPatrol")

    def add_action(self, action_name: str, function: ActionFunction) -> None:
        """Register an action; an existing action of that name is kept."""
        self.actions.setdefault(action_name, Action(action_name, function))

    def add_option(self, option_name: str, action_name: str) -> None:
        """Register an option for a named action; an existing option is kept.

        An unknown action name leaves the option without an action.
        """
        self.options.setdefault(
            option_name, Option(option_name, self.actions.get(action_name))
        )