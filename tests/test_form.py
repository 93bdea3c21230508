"""Tests for Form and responses."""

import pytest

from pyqt_formbuilder.core import Form, IndexOutOfRangeError, QuestionKind


def _form_with(*names):
    form = Form(title="Survey")
    for name in names:
        form.add_question().name = name
    return form


def test_new_form_defaults():
    form = Form()
    assert form.title == "Untitled form"
    assert form.questions == []
    assert form.responses == []


def test_demo_has_every_kind_in_order():
    form = Form.demo()
    assert [q.kind for q in form.questions] == list(QuestionKind)


def test_add_question_defaults_to_short_answer():
    form = Form()
    question = form.add_question()
    assert question.kind is QuestionKind.SHORT_ANSWER
    assert form.add_question(QuestionKind.DATE).kind is QuestionKind.DATE
    assert len(form.questions) == 2


def test_remove_question():
    form = _form_with("a", "b", "c")
    removed = form.remove_question(1)
    assert removed.name == "b"
    assert [q.name for q in form.questions] == ["a", "c"]
    with pytest.raises(IndexOutOfRangeError):
        form.remove_question(2)


def test_duplicate_question_inserts_after_original():
    form = _form_with("a", "b")
    duplicate = form.duplicate_question(0)
    assert [q.name for q in form.questions] == ["a", "a", "b"]
    assert duplicate is not form.questions[0]
    duplicate.name = "changed"
    assert form.questions[0].name == "a"


def test_move_question():
    form = _form_with("a", "b", "c")
    form.move_question(0, 2)
    assert [q.name for q in form.questions] == ["b", "c", "a"]
    form.move_question(2, 1)
    assert [q.name for q in form.questions] == ["b", "a", "c"]
    with pytest.raises(IndexOutOfRangeError):
        form.move_question(0, 3)


def test_duplicate_form():
    form = _form_with("a")
    form.description = "About you"
    form.submit_response()
    copy = form.duplicate()
    assert copy.title == "Survey Copy"
    assert copy.description == "About you"
    assert copy.questions == form.questions
    assert copy.questions[0] is not form.questions[0]
    assert copy.responses == []


def test_duplicate_untitled_form_keeps_empty_title():
    assert Form(title="").duplicate().title == ""


def test_reset_all_preview_values():
    form = Form.demo()
    form.questions[0].value.text = "typed"
    form.questions[2].value.choice = "Option 1"
    form.reset_all_preview_values()
    assert form.questions[0].value.text == ""
    assert form.questions[2].value.choice == ""


def test_submit_response_snapshots_answers():
    form = _form_with("Name")
    form.questions[0].value.text = "Ada"
    first = form.submit_response()
    form.questions[0].value.text = "Grace"
    second = form.submit_response()

    assert (first.response_id, second.response_id) == (1, 2)
    assert first.answers[0].answer_text() == "Ada"
    assert second.answers[0].answer_text() == "Grace"


def test_response_ids_continue_after_removal():
    form = _form_with("Name")
    form.submit_response()
    form.submit_response()
    del form.responses[0]
    assert form.submit_response().response_id == 3


def test_clear_responses():
    form = _form_with("Name")
    form.submit_response()
    form.clear_responses()
    assert form.responses == []
    assert form.submit_response().response_id == 1
