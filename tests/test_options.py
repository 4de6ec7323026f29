from stealthai.actions import Action, ActionStatus
from stealthai.blackboard import BrainBlackboard
from stealthai.options import Consideration, Option


def test_consideration_evaluates_rule_on_blackboard():
    bb = BrainBlackboard(None)
    bb.add_value("Energy", 20)
    low_energy = Consideration("LowEnergy", lambda b: b.get_value("Energy") < 1)
    assert low_energy.calculate(bb) is False
    bb.edit_value("Energy", 0)
    assert low_energy.calculate(bb) is True


def test_consideration_result_is_bool():
    cons = Consideration("c", lambda b: 1)
    assert cons.calculate(None) is True


def test_consideration_keeps_id_and_rule():
    def rule(b):
        return False

    cons = Consideration("Seen", rule)
    assert cons.consideration_id == "Seen"
    assert cons.rule is rule


def test_option_keeps_id_and_action():
    action = Action("ActionRest", lambda b: ActionStatus.SUCCESS)
    option = Option("OptionRest", action)
    assert option.option_id == "OptionRest"
    assert option.action is action
    assert option.considerations == []


def test_option_considerations_keep_order():
    option = Option("OptionPatrol", None)
    first = Consideration("a", lambda b: True)
    second = Consideration("b", lambda b: False)
    option.add_consideration(first)
    option.add_consideration(second)
    assert option.considerations == [first, second]