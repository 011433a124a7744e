import pytest

from basekit.study import Spec, new_study


def test_new_study_speak():
    student = new_study("zhang")
    assert student.speak("aa") == "zhang 说 aa"


def test_actions_use_name_and_message():
    student = new_study("zhang")
    actions = [student.listen, student.speak, student.read, student.write]
    lines = [action("aa") for action in actions]
    for line in lines:
        assert line.startswith("zhang ")
        assert line.endswith(" aa")
    assert len(set(lines)) == 4
    assert student.listen("aa") == "zhang 听 aa"


def test_new_study_requires_name():
    with pytest.raises(ValueError, match="name required"):
        new_study("")


def test_study_keeps_name():
    assert new_study("李白").name == "李白"


def test_spec_fields_and_hidden_model():
    spec = Spec(maker="apple", price=50000)
    assert spec.maker == "apple"
    assert spec.price == 50000
    assert spec.model == ""
    spec.model = "Mac Mini"
    assert "Mac Mini" not in repr(spec)
    assert "apple" in repr(spec)