import pytest

from stealthai.actions import Action, ActionStatus
from stealthai.constructor import AIConstructor
from stealthai.options import Consideration, Option


class _Sample(AIConstructor):
    def __init__(self):
        super().__init__()
        self.steps = []

    def define_actions(self):
        self.steps.append("actions")
        self.actions["ActionRest"] = Action("ActionRest", lambda bb: ActionStatus.SUCCESS)
        self.actions["ActionPatrol"] = Action("ActionPatrol", lambda bb: ActionStatus.SUCCESS)

    def define_considerations(self):
        self.steps.append("considerations")
        self.considerations["Tired"] = Consideration("Tired", lambda bb: True)

    def define_options(self):
        self.steps.append("options")
        self.options["OptionRest"] = Option("OptionRest", self.actions["ActionRest"])
        self.options["OptionPatrol"] = Option("OptionPatrol", self.actions["ActionPatrol"])


def test_define_ai_runs_steps_in_order():
    c = _Sample()
    AIConstructor.define_ai(c)
    assert c.steps == ["actions", "considerations", "options"]
    assert set(c.actions) == {"ActionRest", "ActionPatrol"}
    assert list(c.considerations) == ["Tired"]


def test_option_list_all():
    c = _Sample()
    AIConstructor.define_ai(c)
    ids = [o.option_id for o in AIConstructor.option_list(c)]
    assert ids == ["OptionRest", "OptionPatrol"]


def test_option_list_selected_in_requested_order():
    c = _Sample()
    AIConstructor.define_ai(c)
    selected = AIConstructor.option_list(c, ["OptionPatrol", "OptionRest"])
    assert [o.option_id for o in selected] == ["OptionPatrol", "OptionRest"]


def test_option_list_links_actions():
    c = _Sample()
    AIConstructor.define_ai(c)
    (rest,) = AIConstructor.option_list(c, ["OptionRest"])
    assert rest.action is c.actions["ActionRest"]


def test_option_list_unknown_name_raises():
    c = _Sample()
    AIConstructor.define_ai(c)
    with pytest.raises(KeyError):
        AIConstructor.option_list(c, ["OptionChase"])


def test_empty_before_definition():
    c = _Sample()
    assert AIConstructor.option_list(c) == []


def test_base_constructor_is_abstract():
    with pytest.raises(TypeError):
        AIConstructor()