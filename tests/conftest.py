"""pytest configuration and fixtures for pyqt-formbuilder tests."""

import os
from collections import Counter
from contextlib import contextmanager
from typing import Any, Dict, List, Optional, Tuple

import pytest

os.environ.setdefault("QT_QPA_PLATFORM", "offscreen")

from pyqt_formbuilder.protocols.render_surface import RenderSurface


@pytest.fixture(scope="session")
def qapp():
    """Create QApplication instance for tests."""
    from PyQt6.QtWidgets import QApplication

    app = QApplication.instance() or QApplication([])
    yield app
    # Don't quit - may cause issues with other tests


class ScriptedSurface(RenderSurface):
    """
    RenderSurface test double.

    Records every element drawn in the current frame and plays back
    scripted user input. Input is keyed by element type, element text
    (label for buttons/radios/checkboxes/menus, hint for text fields, None
    for drag values) and the occurrence of that pair within the frame.
    Each scripted response is used once.
    """

    def __init__(self):
        self.elements: List[Tuple[str, Optional[str]]] = []
        self._responses: Dict[Tuple[str, Optional[str], int], Any] = {}
        self._seen: Counter = Counter()

    def respond(self, element: str, text: Optional[str], value: Any, occurrence: int = 0) -> None:
        self._responses[(element, text, occurrence)] = value

    def click(self, text: str, occurrence: int = 0) -> None:
        self.respond("button", text, True, occurrence)

    def new_frame(self) -> None:
        self.elements = []
        self._seen = Counter()

    def texts(self, element: str) -> List[Optional[str]]:
        return [text for kind, text in self.elements if kind == element]

    @property
    def unused_responses(self) -> Dict[Tuple[str, Optional[str], int], Any]:
        return dict(self._responses)

    def _answer(self, element: str, text: Optional[str], default: Any) -> Any:
        occurrence = self._seen[(element, text)]
        self._seen[(element, text)] += 1
        self.elements.append((element, text))
        return self._responses.pop((element, text, occurrence), default)

    def label(self, text):
        self.elements.append(("label", text))

    def heading(self, text):
        self.elements.append(("heading", text))

    def separator(self):
        self.elements.append(("separator", None))

    def text_field(self, text, hint="", multiline=False):
        return self._answer("text_field", hint, text)

    def button(self, text):
        return self._answer("button", text, False)

    def checkbox(self, checked, text=""):
        return self._answer("checkbox", text, checked)

    def radio(self, selected, text=""):
        return self._answer("radio", text, False)

    def drag_value(self, value, minimum, maximum):
        return max(minimum, min(maximum, self._answer("drag_value", None, value)))

    def menu(self, label, items):
        return self._answer("menu", label, None)

    @contextmanager
    def row(self):
        self.elements.append(("row", None))
        yield

    @contextmanager
    def group(self):
        self.elements.append(("group", None))
        yield

    @contextmanager
    def grid(self):
        self.elements.append(("grid", None))
        yield

    def end_row(self):
        self.elements.append(("end_row", None))


@pytest.fixture
def surface():
    """Fresh scripted surface."""
    return ScriptedSurface()
