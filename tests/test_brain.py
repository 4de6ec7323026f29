import pytest

from stealthai.actions import Action, ActionStatus
from stealthai.brain import Brain
from stealthai.options import Option
from stealthai.reasoner import Reasoner


class _Fixed(Reasoner):
    def think(self):
        self.selected_option = self.options[0]


def test_brain_blackboard_bound_to_actor():
    actor = object()
    brain = Brain(actor)
    assert brain.blackboard.actor_context is actor
    assert brain.reasoner is None


def test_update_runs_reasoner_on_brain_blackboard():
    brain = Brain("actor")
    seen = []
    reasoner = _Fixed("r", brain.blackboard)
    reasoner.set_options(
        [Option("O", Action("A", lambda bb: seen.append(bb) or ActionStatus.SUCCESS))]
    )
    brain.reasoner = reasoner
    assert brain.update() is ActionStatus.SUCCESS
    assert seen == [brain.blackboard]


def test_reasoner_given_at_construction_is_used():
    reasoner = _Fixed("r", None)
    reasoner.set_options([Option("O", Action("A", lambda bb: ActionStatus.FAILURE))])
    brain = Brain("actor", reasoner)
    assert brain.reasoner is reasoner
    assert brain.update() is ActionStatus.FAILURE


def test_update_without_reasoner_raises():
    brain = Brain("actor")
    with pytest.raises(RuntimeError):
        brain.update()