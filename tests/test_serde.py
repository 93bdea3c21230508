"""Tests for the JSON snapshot codec."""

import json
import logging

import pytest

from pyqt_formbuilder.core import AppState, AppView, EditTab, Form, OptionAxis, QuestionKind
from pyqt_formbuilder.core.question_types import DayPeriod
from pyqt_formbuilder.io import DeserializationError, load, parse_state, save
from pyqt_formbuilder.io.serde import FORMAT_VERSION, question_from_dict, question_to_dict


def _answered_demo_form():
    """Demo form with a non-default config and answer for every kind."""
    form = Form.demo()
    form.title = "Everything"
    form.description = "One of each"
    q = {question.kind: question for question in form.questions}

    q[QuestionKind.SHORT_ANSWER].value.text = "short"
    q[QuestionKind.PARAGRAPH].value.text = "line one\nline two"
    q[QuestionKind.MULTIPLE_CHOICE].add_option()
    q[QuestionKind.MULTIPLE_CHOICE].value.choice = "Option 2"
    q[QuestionKind.CHECKBOXES].add_option()
    q[QuestionKind.CHECKBOXES].reset_value()
    q[QuestionKind.CHECKBOXES].value.choices[1] = True
    q[QuestionKind.DROPDOWN].value.choice = "Option 1"
    q[QuestionKind.LINEAR_SCALE].config.set_end(7)
    q[QuestionKind.LINEAR_SCALE].config.start_label = "Poor"
    q[QuestionKind.LINEAR_SCALE].value.value = 6
    q[QuestionKind.MULTIPLE_CHOICE_GRID].add_option(OptionAxis.COLUMNS)
    q[QuestionKind.MULTIPLE_CHOICE_GRID].value.choices = ["Column 2"]
    q[QuestionKind.CHECKBOX_GRID].add_option(OptionAxis.ROWS)
    q[QuestionKind.CHECKBOX_GRID].reset_value()
    q[QuestionKind.CHECKBOX_GRID].value.choices[1][0] = True
    q[QuestionKind.DATE].value.year = 1999
    q[QuestionKind.DATE].value.month = 12
    q[QuestionKind.DATE].value.day = 31
    q[QuestionKind.TIME].value.hour = 11
    q[QuestionKind.TIME].value.minute = 45
    q[QuestionKind.TIME].value.period = DayPeriod.PM
    return form


def test_round_trip_every_kind():
    form = _answered_demo_form()
    form.submit_response()
    state = AppState(forms=[form, Form(title="")])
    restored = load(save(state))
    assert restored == state
    assert restored.forms[0].responses[0].answers == form.questions


def test_round_trip_view_position():
    state = AppState(forms=[Form.demo()])
    state.open_form(0)
    state.select_tab(EditTab.PREVIEW)
    state.focus_question(3)
    restored = parse_state(save(state))
    assert restored.view is AppView.EDITING
    assert restored.form_index == 0
    assert restored.edit_tab is EditTab.PREVIEW
    assert restored.focused_question == 3


def test_blob_carries_version_and_kind_tags():
    data = json.loads(save(AppState(forms=[Form.demo()])))
    assert data["version"] == FORMAT_VERSION
    kinds = [q["kind"] for q in data["forms"][0]["questions"]]
    assert kinds == [kind.value for kind in QuestionKind]


OVERSIZED_INTEGER_BLOB = '{"forms": [], "form_index": ' + "9" * 5000 + "}"
DEEPLY_NESTED_BLOB = "[" * 200000 + "]" * 200000


@pytest.mark.parametrize("blob", [
    None, "", "not json", "[]", '{"forms": 3}', OVERSIZED_INTEGER_BLOB, DEEPLY_NESTED_BLOB,
])
def test_load_falls_back_to_empty_state(blob):
    assert load(blob) == AppState()


def test_parse_state_is_strict():
    with pytest.raises(DeserializationError):
        parse_state("{")
    with pytest.raises(DeserializationError):
        parse_state(json.dumps({"version": FORMAT_VERSION + 1, "forms": []}))


def test_unknown_kind_rejected():
    data = question_to_dict(Form.demo().questions[0])
    data["kind"] = "slider"
    with pytest.raises(DeserializationError):
        question_from_dict(data)


def test_field_types_checked():
    data = question_to_dict(Form.demo().questions[5])
    data["value"]["value"] = True
    with pytest.raises(DeserializationError):
        question_from_dict(data)

    data = question_to_dict(Form.demo().questions[3])
    data["value"]["choices"] = ["yes"]
    with pytest.raises(DeserializationError):
        question_from_dict(data)


def test_missing_fields_use_defaults():
    question = question_from_dict({"name": "Pick", "kind": "dropdown"})
    assert question.kind is QuestionKind.DROPDOWN
    assert question.config.options == ["Option 1"]
    assert question.value.choice == ""


def test_out_of_shape_value_reset_on_load(caplog):
    data = question_to_dict(Form.demo().questions[3])
    data["value"]["choices"] = [True, True, True]
    with caplog.at_level(logging.WARNING, logger="pyqt_formbuilder.io.serde"):
        question = question_from_dict(data)
    assert question.value.choices == [False]
    assert "resetting" in caplog.text


def test_stale_editor_position_returns_to_catalog():
    data = json.loads(save(AppState(forms=[Form()])))
    data.update(view="editing", form_index=4, edit_tab="settings")
    state = parse_state(json.dumps(data))
    assert state.view is AppView.CATALOG
    assert state.form_index is None
    assert len(state.forms) == 1


def test_stale_focus_cleared():
    state = AppState(forms=[Form.demo()])
    state.open_form(0)
    data = json.loads(save(state))
    data["focused_question"] = 99
    assert parse_state(json.dumps(data)).focused_question is None
