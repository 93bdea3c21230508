"""
Core form model.

Question kinds, per-kind configs and values, questions, forms and the
application state machine. Nothing here imports Qt except DebounceTimer,
which is loaded on first access.
"""

from __future__ import annotations

import importlib
from typing import TYPE_CHECKING

from .errors import (
    FormBuilderError,
    IndexOutOfRangeError,
    KindMismatchError,
    UnsupportedOperationError,
)
from .question_kind import (
    QuestionKind,
    all_kinds,
    defaults_for,
    display_name,
    same_kind,
)
from .question_types import (
    DayPeriod,
    OptionAxis,
    QuestionConfig,
    QuestionValue,
)
from .question import Question
from .form import Form, FormResponse
from .app_state import AppState, AppView, EditTab

if TYPE_CHECKING:
    from .debounce_timer import DebounceTimer

_LAZY_EXPORTS = {
    "DebounceTimer": ("pyqt_formbuilder.core.debounce_timer", "DebounceTimer"),
}


def __getattr__(name: str):
    if name in _LAZY_EXPORTS:
        module_name, attr = _LAZY_EXPORTS[name]
        module = importlib.import_module(module_name)
        value = getattr(module, attr)
        globals()[name] = value
        return value
    raise AttributeError(f"module {__name__!r} has no attribute {name!r}")


__all__ = [
    "FormBuilderError",
    "IndexOutOfRangeError",
    "KindMismatchError",
    "UnsupportedOperationError",
    "QuestionKind",
    "all_kinds",
    "defaults_for",
    "display_name",
    "same_kind",
    "DayPeriod",
    "OptionAxis",
    "QuestionConfig",
    "QuestionValue",
    "Question",
    "Form",
    "FormResponse",
    "AppState",
    "AppView",
    "EditTab",
    "DebounceTimer",
]
