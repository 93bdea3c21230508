"""
Application views: the form catalog and the four form tabs.

AppViewService draws the whole window content for one frame from an
AppState and applies the user's clicks as AppState transitions. Row-level
actions (open, remove, delete question) are collected while drawing and
applied after the loop that drew them.
"""

import logging
from typing import Optional

from pyqt_formbuilder.core.app_state import AppState, AppView, EditTab
from pyqt_formbuilder.protocols.render_surface import RenderSurface
from pyqt_formbuilder.services.enum_dispatch_service import EnumDispatchService

logger = logging.getLogger(__name__)


class FormTabService(EnumDispatchService[EditTab]):
    """Draws the body of the selected tab of the open form."""

    def __init__(self):
        super().__init__()
        self._register_handlers({
            EditTab.QUESTIONS: self._render_questions,
            EditTab.PREVIEW: self._render_preview,
            EditTab.RESPONSES: self._render_responses,
            EditTab.SETTINGS: self._render_settings,
        }, EditTab)

    def _determine_strategy(self, state: AppState, **kwargs) -> EditTab:
        return state.edit_tab

    def _render_questions(self, state: AppState, surface: RenderSurface) -> None:
        form = state.current_form
        delete_index: Optional[int] = None
        duplicate_index: Optional[int] = None
        move: Optional[tuple] = None
        focus_index: Optional[int] = None
        collapse = False

        for index, question in enumerate(form.questions):
            if state.focused_question == index:
                if question.edit(surface):
                    delete_index = index
                with surface.row():
                    if surface.button("Duplicate"):
                        duplicate_index = index
                    if index > 0 and surface.button("Move up"):
                        move = (index, index - 1)
                    if index < len(form.questions) - 1 and surface.button("Move down"):
                        move = (index, index + 1)
                    if surface.button("Done"):
                        collapse = True
            else:
                with surface.row():
                    surface.label(f"{question.name} ({question.kind.display_name})")
                    if surface.button("Edit"):
                        focus_index = index

        if delete_index is not None:
            state.delete_question(delete_index)
        elif duplicate_index is not None:
            state.duplicate_question(duplicate_index)
        elif move is not None:
            state.move_question(*move)
        elif focus_index is not None:
            state.focus_question(focus_index)
        elif collapse:
            state.clear_focus()

        if surface.button("Add question"):
            state.add_question()

    def _render_preview(self, state: AppState, surface: RenderSurface) -> None:
        form = state.current_form
        with surface.group():
            surface.heading(form.title)
            if form.description:
                surface.label(form.description)
        for question in form.questions:
            question.preview(surface)
        with surface.row():
            if surface.button("Submit"):
                form.submit_response()
                form.reset_all_preview_values()
            if surface.button("Clear form"):
                form.reset_all_preview_values()

    def _render_responses(self, state: AppState, surface: RenderSurface) -> None:
        form = state.current_form
        count = len(form.responses)
        surface.heading(f"{count} response" if count == 1 else f"{count} responses")
        for response in form.responses:
            with surface.group():
                surface.label(f"Response #{response.response_id}")
                for answer in response.answers:
                    surface.label(f"{answer.name}: {answer.answer_text()}")

    def _render_settings(self, state: AppState, surface: RenderSurface) -> None:
        form = state.current_form
        surface.label("Description")
        form.description = surface.text_field(form.description, hint="Form description", multiline=True)
        if surface.button("Delete all responses"):
            form.clear_responses()


class AppViewService:
    """Draws the catalog or the open form, depending on the view state."""

    def __init__(self):
        self.tabs = FormTabService()

    def render(self, state: AppState, surface: RenderSurface) -> None:
        if state.view is AppView.EDITING:
            self._render_form(state, surface)
        else:
            self._render_catalog(state, surface)

    def _render_catalog(self, state: AppState, surface: RenderSurface) -> None:
        with surface.group():
            surface.heading("Start a new form")
            if surface.button("Blank"):
                state.new_form()
                return

        open_index: Optional[int] = None
        duplicate_index: Optional[int] = None
        remove_index: Optional[int] = None
        with surface.group():
            surface.heading("Forms")
            with surface.grid():
                for index, form in enumerate(state.forms):
                    surface.label(form.title)
                    if surface.button("Open"):
                        open_index = index
                    if surface.button("Duplicate"):
                        duplicate_index = index
                    if surface.button("Remove"):
                        remove_index = index
                    surface.end_row()

        if remove_index is not None:
            state.remove_form(remove_index)
        elif duplicate_index is not None:
            state.duplicate_form(duplicate_index)
        elif open_index is not None:
            state.open_form(open_index)

    def _render_form(self, state: AppState, surface: RenderSurface) -> None:
        form = state.current_form
        with surface.row():
            if surface.button("Back"):
                state.back()
                return
            form.title = surface.text_field(form.title, hint="Form title")
        with surface.row():
            for tab in EditTab:
                if surface.radio(state.edit_tab is tab, tab.label):
                    state.select_tab(tab)
        surface.separator()
        self.tabs.dispatch(state, surface=surface)
