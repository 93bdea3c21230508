"""
Top-level application state and its view state machine.

The host holds exactly one AppState and passes it to the persistence layer
at the process boundary. There is no module-level singleton.

View states:
- CATALOG: the list of forms
- EDITING: one form open, on one of four tabs; within the Questions tab at
  most one question has its editor expanded (``focused_question``)

Every transition is a method here, triggered by a host-reported click.
"""

import logging
from dataclasses import dataclass, field
from enum import Enum
from typing import List, Optional

from pyqt_formbuilder.core.errors import IndexOutOfRangeError
from pyqt_formbuilder.core.form import Form
from pyqt_formbuilder.core.question import Question

logger = logging.getLogger(__name__)


class AppView(Enum):
    CATALOG = "catalog"
    EDITING = "editing"


class EditTab(Enum):
    QUESTIONS = "questions"
    PREVIEW = "preview"
    RESPONSES = "responses"
    SETTINGS = "settings"

    @property
    def label(self) -> str:
        return self.value.capitalize()


@dataclass
class AppState:
    forms: List[Form] = field(default_factory=list)
    view: AppView = AppView.CATALOG
    form_index: Optional[int] = None
    edit_tab: EditTab = EditTab.QUESTIONS
    focused_question: Optional[int] = None

    @property
    def current_form(self) -> Optional[Form]:
        if self.view is AppView.EDITING and self.form_index is not None:
            return self.forms[self.form_index]
        return None

    def _check_form_index(self, index: int) -> None:
        if not 0 <= index < len(self.forms):
            raise IndexOutOfRangeError("form", index, len(self.forms))

    def _require_form(self) -> Form:
        form = self.current_form
        if form is None:
            raise RuntimeError("No form is open")
        return form

    # ========== CATALOG ==========

    def new_form(self) -> Form:
        """Append a blank form and open it."""
        form = Form()
        self.forms.append(form)
        self.open_form(len(self.forms) - 1)
        return form

    def open_form(self, index: int) -> None:
        self._check_form_index(index)
        self.view = AppView.EDITING
        self.form_index = index
        self.edit_tab = EditTab.QUESTIONS
        self.focused_question = None
        logger.debug(f"Opened form {index} ('{self.forms[index].title}')")

    def back(self) -> None:
        """Return to the catalog."""
        self.view = AppView.CATALOG
        self.form_index = None
        self.edit_tab = EditTab.QUESTIONS
        self.focused_question = None

    def remove_form(self, index: int) -> Form:
        """Delete a form; leaves the editor if that form was open."""
        self._check_form_index(index)
        form = self.forms.pop(index)
        if self.form_index == index:
            self.back()
        elif self.form_index is not None and self.form_index > index:
            self.form_index -= 1
        logger.info(f"Removed form {index} ('{form.title}')")
        return form

    def duplicate_form(self, index: int) -> Form:
        """Append a copy of a form and open the copy."""
        self._check_form_index(index)
        duplicate = self.forms[index].duplicate()
        self.forms.append(duplicate)
        self.open_form(len(self.forms) - 1)
        return duplicate

    # ========== EDITING ==========

    def select_tab(self, tab: EditTab) -> None:
        """Switch tabs. Entering the preview starts from a blank form."""
        form = self._require_form()
        if tab is EditTab.PREVIEW and self.edit_tab is not EditTab.PREVIEW:
            form.reset_all_preview_values()
        self.edit_tab = tab

    def focus_question(self, index: int) -> None:
        form = self._require_form()
        if not 0 <= index < len(form.questions):
            raise IndexOutOfRangeError("question", index, len(form.questions))
        self.focused_question = index

    def clear_focus(self) -> None:
        self.focused_question = None

    def add_question(self) -> Question:
        """Append a question to the open form and expand its editor."""
        form = self._require_form()
        question = form.add_question()
        self.focused_question = len(form.questions) - 1
        return question

    def delete_question(self, index: int) -> Question:
        form = self._require_form()
        question = form.remove_question(index)
        if self.focused_question == index:
            self.focused_question = None
        elif self.focused_question is not None and self.focused_question > index:
            self.focused_question -= 1
        return question

    def duplicate_question(self, index: int) -> Question:
        """Copy a question in place and expand the copy."""
        form = self._require_form()
        question = form.duplicate_question(index)
        self.focused_question = index + 1
        return question

    def move_question(self, source: int, destination: int) -> None:
        """Reorder questions; focus follows the moved question."""
        form = self._require_form()
        form.move_question(source, destination)
        focused = self.focused_question
        if focused is None:
            return
        if focused == source:
            self.focused_question = destination
        elif source < focused <= destination:
            self.focused_question = focused - 1
        elif destination <= focused < source:
            self.focused_question = focused + 1
