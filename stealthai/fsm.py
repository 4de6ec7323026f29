"""Finite-state-machine reasoner for the guards, and the brain that uses it."""

from __future__ import annotations

import enum
from typing import TYPE_CHECKING, Any, Iterable

from stealthai.brain import Brain
from stealthai.options import Consideration, Option
from stealthai.reasoner import Reasoner

if TYPE_CHECKING:
    from stealthai.blackboard import BrainBlackboard
    from stealthai.constructor import AIConstructor


class FSMState(enum.Enum):
    """States a guard's state machine can be in."""

    RESTING = enum.auto()
    PATROLLING = enum.auto()
    INVESTIGATING = enum.auto()
    CHASING = enum.auto()
    SPRINTING = enum.auto()
    ALARM = enum.auto()


class FSMReasoner(Reasoner):
    """Chooses an option by following state transitions on blackboard values."""

    def __init__(self, reasoner_id: str, blackboard: BrainBlackboard) -> None:
        super().__init__(reasoner_id, blackboard)
        self.current_state = FSMState.RESTING

    def set_options(self, options: Iterable[Option]) -> None:
        """Take private copies of ``options`` and their considerations."""
        copies = []
        for source in options:
            option = Option(source.option_id, source.action)
            for consideration in source.considerations:
                option.add_consideration(
                    Consideration(consideration.consideration_id, consideration.rule)
                )
            copies.append(option)
        self.options.extend(copies)

    def set_starting_state(self, state: FSMState, option_name: str) -> None:
        """Enter ``state`` with the option named ``option_name`` selected."""
        self.current_state = state
        self.selected_option = self.get_option_by_name(option_name)

    def think(self) -> None:
        """Apply the transition rules for the current state."""
        last_state = self.current_state
        energy = self.blackboard.get_value("Energy")

        if self.current_state is FSMState.PATROLLING:
            if energy < 1:
                self.current_state = FSMState.RESTING
                self.selected_option = self.get_option_by_name("OptionRest")
        elif self.current_state is FSMState.RESTING:
            if energy >= 20:
                self.current_state = FSMState.PATROLLING
                self.selected_option = self.get_option_by_name("OptionPatrol")

        if last_state is not self.current_state:
            self.blackboard.actor_context.pre_transition()


def make_fsm_brain(constructor: AIConstructor, actor: Any) -> Brain:
    """Build a brain for ``actor`` driven by an FSM over the constructor's options.

    The machine starts resting, with ``OptionRest`` selected.
    """
    brain = Brain(actor)
    reasoner = FSMReasoner("FMS Reasoner", brain.blackboard)
    reasoner.set_options(constructor.option_list())
    reasoner.set_starting_state(FSMState.RESTING, "OptionRest")
    brain.reasoner = reasoner
    return brain