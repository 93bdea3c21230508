"""
JSON snapshot codec for the application state.

Layout (format version 1):

    {
      "version": 1,
      "view": "editing", "form_index": 0, "edit_tab": "preview",
      "focused_question": null,
      "forms": [
        {"title": ..., "description": ...,
         "questions": [{"name": ..., "kind": "checkboxes",
                        "config": {"options": [...]},
                        "value": {"choices": [...]}}],
         "responses": [{"response_id": 1, "answers": [<question>, ...]}]}
      ]
    }

Every question carries its kind tag, and the config and value are rebuilt
from the classes registered for that kind, so they always come back as a
matching pair. Field types are checked against the dataclass annotations.

load() is best-effort and falls back to an empty AppState. parse_state()
is the strict variant and raises DeserializationError.
"""

import dataclasses
import json
import logging
from enum import Enum
from typing import Any, Dict, Optional, get_args, get_origin, get_type_hints

from pyqt_formbuilder.core.app_state import AppState, AppView, EditTab
from pyqt_formbuilder.core.form import Form, FormResponse
from pyqt_formbuilder.core.question import Question
from pyqt_formbuilder.core.question_kind import QuestionKind, config_class, value_class
from pyqt_formbuilder.io.exceptions import DeserializationError

logger = logging.getLogger(__name__)

FORMAT_VERSION = 1


# ========== ENCODING ==========


def _encode(value: Any) -> Any:
    if isinstance(value, Enum):
        return value.value
    if isinstance(value, list):
        return [_encode(item) for item in value]
    return value


def _part_to_dict(part: Any) -> Dict[str, Any]:
    return {f.name: _encode(getattr(part, f.name)) for f in dataclasses.fields(part)}


def question_to_dict(question: Question) -> Dict[str, Any]:
    return {
        "name": question.name,
        "kind": question.kind.value,
        "config": _part_to_dict(question.config),
        "value": _part_to_dict(question.value),
    }


def form_to_dict(form: Form) -> Dict[str, Any]:
    return {
        "title": form.title,
        "description": form.description,
        "questions": [question_to_dict(q) for q in form.questions],
        "responses": [
            {
                "response_id": response.response_id,
                "answers": [question_to_dict(q) for q in response.answers],
            }
            for response in form.responses
        ],
    }


def state_to_dict(state: AppState) -> Dict[str, Any]:
    return {
        "version": FORMAT_VERSION,
        "view": state.view.value,
        "form_index": state.form_index,
        "edit_tab": state.edit_tab.value,
        "focused_question": state.focused_question,
        "forms": [form_to_dict(form) for form in state.forms],
    }


def save(state: AppState) -> str:
    """Serialize the whole application state to a JSON blob."""
    return json.dumps(state_to_dict(state))


# ========== DECODING ==========


def _decode(expected: Any, raw: Any, where: str) -> Any:
    """Check ``raw`` against an annotation and convert enums/lists."""
    origin = get_origin(expected)
    if origin is list:
        if not isinstance(raw, list):
            raise DeserializationError(f"{where}: expected a list, got {type(raw).__name__}")
        (item_type,) = get_args(expected)
        return [_decode(item_type, item, f"{where}[{i}]") for i, item in enumerate(raw)]
    if isinstance(expected, type) and issubclass(expected, Enum):
        try:
            return expected(raw)
        except ValueError as e:
            raise DeserializationError(f"{where}: {e}") from e
    if expected is bool:
        if not isinstance(raw, bool):
            raise DeserializationError(f"{where}: expected a bool, got {raw!r}")
        return raw
    if expected is int:
        # bool is an int subclass; a stray true/false is still a type error
        if isinstance(raw, bool) or not isinstance(raw, int):
            raise DeserializationError(f"{where}: expected an int, got {raw!r}")
        return raw
    if expected is str:
        if not isinstance(raw, str):
            raise DeserializationError(f"{where}: expected a string, got {raw!r}")
        return raw
    raise DeserializationError(f"{where}: unsupported field type {expected!r}")


def _part_from_dict(cls: type, data: Any, where: str) -> Any:
    if not isinstance(data, dict):
        raise DeserializationError(f"{where}: expected an object, got {type(data).__name__}")
    hints = get_type_hints(cls)
    kwargs = {}
    for f in dataclasses.fields(cls):
        if f.name in data:
            kwargs[f.name] = _decode(hints[f.name], data[f.name], f"{where}.{f.name}")
    return cls(**kwargs)


def question_from_dict(data: Any, where: str = "question") -> Question:
    """
    Rebuild a question from its kind tag.

    A value that no longer fits its config (hand-edited or older save) is
    reset and a warning is logged.
    """
    if not isinstance(data, dict):
        raise DeserializationError(f"{where}: expected an object")
    try:
        kind = QuestionKind(data["kind"])
    except KeyError as e:
        raise DeserializationError(f"{where}: missing kind") from e
    except ValueError as e:
        raise DeserializationError(f"{where}: {e}") from e

    name = _decode(str, data.get("name", ""), f"{where}.name")
    config = _part_from_dict(config_class(kind), data.get("config", {}), f"{where}.config")
    value = _part_from_dict(value_class(kind), data.get("value", {}), f"{where}.value")
    question = Question(name=name, config=config, value=value)

    if not question.is_consistent():
        logger.warning(f"{where} ('{name}'): saved {kind.value} answer does not fit its config, resetting")
        question.reset_value()
    return question


def _list_field(data: Dict[str, Any], key: str, where: str) -> list:
    items = data.get(key, [])
    if not isinstance(items, list):
        raise DeserializationError(f"{where}.{key}: expected a list")
    return items


def form_from_dict(data: Any, where: str = "form") -> Form:
    if not isinstance(data, dict):
        raise DeserializationError(f"{where}: expected an object")
    form = Form(
        title=_decode(str, data.get("title", ""), f"{where}.title"),
        description=_decode(str, data.get("description", ""), f"{where}.description"),
    )
    form.questions = [
        question_from_dict(q, f"{where}.questions[{i}]")
        for i, q in enumerate(_list_field(data, "questions", where))
    ]
    for i, raw in enumerate(_list_field(data, "responses", where)):
        response_where = f"{where}.responses[{i}]"
        if not isinstance(raw, dict) or "response_id" not in raw:
            raise DeserializationError(f"{response_where}: expected an object with response_id")
        form.responses.append(FormResponse(
            response_id=_decode(int, raw["response_id"], f"{response_where}.response_id"),
            answers=[
                question_from_dict(q, f"{response_where}.answers[{j}]")
                for j, q in enumerate(_list_field(raw, "answers", response_where))
            ],
        ))
    return form


def _optional_index(data: Dict[str, Any], key: str) -> Optional[int]:
    raw = data.get(key)
    if raw is None:
        return None
    return _decode(int, raw, key)


def state_from_dict(data: Any) -> AppState:
    if not isinstance(data, dict):
        raise DeserializationError("state: expected an object")
    version = data.get("version", FORMAT_VERSION)
    if version != FORMAT_VERSION:
        raise DeserializationError(f"state: unsupported format version {version!r}")

    state = AppState(
        forms=[form_from_dict(f, f"forms[{i}]") for i, f in enumerate(_list_field(data, "forms", "state"))],
        view=_decode(AppView, data.get("view", AppView.CATALOG.value), "view"),
        form_index=_optional_index(data, "form_index"),
        edit_tab=_decode(EditTab, data.get("edit_tab", EditTab.QUESTIONS.value), "edit_tab"),
        focused_question=_optional_index(data, "focused_question"),
    )

    # A stale view position is not worth failing the whole load over
    form = None
    if state.view is AppView.EDITING and state.form_index is not None and 0 <= state.form_index < len(state.forms):
        form = state.forms[state.form_index]
    if form is None:
        if state.view is AppView.EDITING:
            logger.warning(f"Saved editor position {state.form_index} is invalid, returning to catalog")
        state.back()
    elif state.focused_question is not None and not 0 <= state.focused_question < len(form.questions):
        state.focused_question = None
    return state


def parse_state(blob: str) -> AppState:
    """
    Strictly decode a blob produced by save().

    Raises:
        DeserializationError: On malformed JSON or a shape mismatch
    """
    try:
        data = json.loads(blob)
    except (ValueError, TypeError, RecursionError) as e:
        # ValueError covers JSONDecodeError and oversized integer literals
        raise DeserializationError(f"state: not valid JSON ({e})") from e
    return state_from_dict(data)


def load(blob: Optional[str]) -> AppState:
    """
    Decode a saved blob, falling back to an empty state.

    Missing or corrupt data must not stop the application from starting, so
    decode failures are logged and replaced by AppState().
    """
    if not blob:
        return AppState()
    try:
        state = parse_state(blob)
    except DeserializationError as e:
        logger.warning(f"Discarding unreadable saved state: {e}")
        return AppState()
    logger.info(f"Loaded {len(state.forms)} forms from saved state")
    return state
