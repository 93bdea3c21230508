"""
Question editor and preview views.

Two dispatch services draw a question into a RenderSurface:
- QuestionEditorService: name field, kind menu, per-kind config editor,
  delete button
- QuestionPreviewService: the fill-in view, writing input into the value

Both dispatch on the question's kind, and both handler tables cover every
kind (checked at construction).
"""

import logging
from typing import Optional

from pyqt_formbuilder.core.question import Question
from pyqt_formbuilder.core.question_kind import QuestionKind, all_kinds
from pyqt_formbuilder.core.question_types import (
    DAY_RANGE,
    HOUR_RANGE,
    MINUTE_RANGE,
    MONTH_RANGE,
    SCALE_END_RANGE,
    SCALE_START_RANGE,
    YEAR_RANGE,
    DayPeriod,
    OptionAxis,
    QuestionConfig,
)
from pyqt_formbuilder.protocols.render_surface import RenderSurface
from pyqt_formbuilder.services.enum_dispatch_service import EnumDispatchService

logger = logging.getLogger(__name__)

REMOVE_LABEL = "✕"
LABEL_HINT = "Label (optional)"
ANSWER_HINT = "Your answer"
DROPDOWN_PLACEHOLDER = "Choose"

# Static hints shown in the editor for kinds without config
_PLACEHOLDER_HINTS = {
    QuestionKind.SHORT_ANSWER: "Short answer text",
    QuestionKind.PARAGRAPH: "Long answer text",
    QuestionKind.DATE: "Month, day, year",
    QuestionKind.TIME: "Time",
}


def edit_labels(surface: RenderSurface, config: QuestionConfig, axis: OptionAxis) -> None:
    """
    Draw an editable label list with per-entry remove and an add button.

    Removal and addition are applied after the list is drawn, so the loop
    never walks a list it is changing.
    """
    labels = config.labels(axis)
    surface.label(f"{axis.label}s")
    remove_index: Optional[int] = None
    for index, label in enumerate(labels):
        with surface.row():
            labels[index] = surface.text_field(label)
            if surface.button(REMOVE_LABEL):
                remove_index = index
    if remove_index is not None:
        config.remove_option(remove_index, axis)
    if surface.button(f"Add {axis.label.lower()}"):
        config.add_option(axis)


class QuestionEditorService(EnumDispatchService[QuestionKind]):
    """Draws the author-time editor of a question."""

    def __init__(self):
        super().__init__()
        self._register_handlers({
            QuestionKind.SHORT_ANSWER: self._edit_placeholder,
            QuestionKind.PARAGRAPH: self._edit_placeholder,
            QuestionKind.MULTIPLE_CHOICE: self._edit_options,
            QuestionKind.CHECKBOXES: self._edit_options,
            QuestionKind.DROPDOWN: self._edit_options,
            QuestionKind.LINEAR_SCALE: self._edit_linear_scale,
            QuestionKind.MULTIPLE_CHOICE_GRID: self._edit_grid,
            QuestionKind.CHECKBOX_GRID: self._edit_grid,
            QuestionKind.DATE: self._edit_placeholder,
            QuestionKind.TIME: self._edit_placeholder,
        }, QuestionKind)

    def _determine_strategy(self, question: Question, **kwargs) -> QuestionKind:
        return question.kind

    def edit(self, question: Question, surface: RenderSurface) -> bool:
        """
        Draw the full editor for one question.

        Returns:
            True if the Delete button was clicked
        """
        delete_requested = False
        kinds = all_kinds()
        with surface.group():
            with surface.row():
                question.name = surface.text_field(question.name, hint="Question")
                picked = surface.menu(question.kind.display_name, [kind.display_name for kind in kinds])
            if picked is not None:
                question.switch_kind(kinds[picked])
            self.dispatch(question, surface=surface)
            if surface.button("Delete"):
                delete_requested = True
        return delete_requested

    def _edit_placeholder(self, question: Question, surface: RenderSurface) -> None:
        surface.label(_PLACEHOLDER_HINTS[question.kind])

    def _edit_options(self, question: Question, surface: RenderSurface) -> None:
        edit_labels(surface, question.config, OptionAxis.OPTIONS)

    def _edit_linear_scale(self, question: Question, surface: RenderSurface) -> None:
        config = question.config
        with surface.row():
            config.set_start(surface.drag_value(config.start, *SCALE_START_RANGE))
            surface.label("to")
            config.set_end(surface.drag_value(config.end, *SCALE_END_RANGE))
        with surface.row():
            surface.label(str(config.start))
            config.start_label = surface.text_field(config.start_label, hint=LABEL_HINT)
        with surface.row():
            surface.label(str(config.end))
            config.end_label = surface.text_field(config.end_label, hint=LABEL_HINT)

    def _edit_grid(self, question: Question, surface: RenderSurface) -> None:
        with surface.row():
            with surface.group():
                edit_labels(surface, question.config, OptionAxis.ROWS)
            with surface.group():
                edit_labels(surface, question.config, OptionAxis.COLUMNS)


class QuestionPreviewService(EnumDispatchService[QuestionKind]):
    """Draws the respondent-time view of a question and records answers."""

    def __init__(self):
        super().__init__()
        self._register_handlers({
            QuestionKind.SHORT_ANSWER: self._preview_text,
            QuestionKind.PARAGRAPH: self._preview_text,
            QuestionKind.MULTIPLE_CHOICE: self._preview_multiple_choice,
            QuestionKind.CHECKBOXES: self._preview_checkboxes,
            QuestionKind.DROPDOWN: self._preview_dropdown,
            QuestionKind.LINEAR_SCALE: self._preview_linear_scale,
            QuestionKind.MULTIPLE_CHOICE_GRID: self._preview_multiple_choice_grid,
            QuestionKind.CHECKBOX_GRID: self._preview_checkbox_grid,
            QuestionKind.DATE: self._preview_date,
            QuestionKind.TIME: self._preview_time,
        }, QuestionKind)

    def _determine_strategy(self, question: Question, **kwargs) -> QuestionKind:
        return question.kind

    def preview(self, question: Question, surface: RenderSurface) -> None:
        """
        Draw the fill-in view for one question.

        A value left out of shape by config edits (options removed since the
        last reset) is reset first, so per-index controls stay in bounds.
        """
        if not question.is_consistent():
            logger.debug(f"Question '{question.name}' value out of shape, resetting before preview")
            question.reset_value()
        with surface.group():
            surface.heading(question.name)
            self.dispatch(question, surface=surface)

    def _preview_text(self, question: Question, surface: RenderSurface) -> None:
        value = question.value
        multiline = question.kind is QuestionKind.PARAGRAPH
        value.text = surface.text_field(value.text, hint=ANSWER_HINT, multiline=multiline)

    def _preview_multiple_choice(self, question: Question, surface: RenderSurface) -> None:
        value = question.value
        for option in question.config.options:
            if surface.radio(value.choice == option, option):
                value.choice = option

    def _preview_checkboxes(self, question: Question, surface: RenderSurface) -> None:
        value = question.value
        for index, option in enumerate(question.config.options):
            value.choices[index] = surface.checkbox(value.choices[index], option)

    def _preview_dropdown(self, question: Question, surface: RenderSurface) -> None:
        value = question.value
        options = question.config.options
        picked = surface.menu(value.choice or DROPDOWN_PLACEHOLDER, list(options))
        if picked is not None:
            value.choice = options[picked]

    def _preview_linear_scale(self, question: Question, surface: RenderSurface) -> None:
        config, value = question.config, question.value
        with surface.row():
            if config.start_label:
                surface.label(config.start_label)
            for point in config.points():
                if surface.radio(value.value == point, str(point)):
                    value.value = point
            if config.end_label:
                surface.label(config.end_label)

    def _preview_multiple_choice_grid(self, question: Question, surface: RenderSurface) -> None:
        config, value = question.config, question.value
        with surface.grid():
            surface.label("")
            for column in config.columns:
                surface.label(column)
            surface.end_row()
            for y, row in enumerate(config.rows):
                surface.label(row)
                for column in config.columns:
                    if surface.radio(value.choices[y] == column):
                        value.choices[y] = column
                surface.end_row()

    def _preview_checkbox_grid(self, question: Question, surface: RenderSurface) -> None:
        config, value = question.config, question.value
        with surface.grid():
            surface.label("")
            for column in config.columns:
                surface.label(column)
            surface.end_row()
            for y, row in enumerate(config.rows):
                surface.label(row)
                for x in range(len(config.columns)):
                    value.choices[y][x] = surface.checkbox(value.choices[y][x])
                surface.end_row()

    def _preview_date(self, question: Question, surface: RenderSurface) -> None:
        value = question.value
        surface.label("MM  DD  YYYY")
        with surface.row():
            value.month = surface.drag_value(value.month, *MONTH_RANGE)
            surface.label("/")
            value.day = surface.drag_value(value.day, *DAY_RANGE)
            surface.label("/")
            value.year = surface.drag_value(value.year, *YEAR_RANGE)

    def _preview_time(self, question: Question, surface: RenderSurface) -> None:
        value = question.value
        periods = list(DayPeriod)
        surface.label("Time")
        with surface.row():
            value.hour = surface.drag_value(value.hour, *HOUR_RANGE)
            surface.label(":")
            value.minute = surface.drag_value(value.minute, *MINUTE_RANGE)
            picked = surface.menu(value.period.value, [period.value for period in periods])
            if picked is not None:
                value.period = periods[picked]


class QuestionViewService:
    """Facade pairing the editor and preview services."""

    def __init__(self):
        self.editor = QuestionEditorService()
        self.previewer = QuestionPreviewService()

    def edit(self, question: Question, surface: RenderSurface) -> bool:
        return self.editor.edit(question, surface)

    def preview(self, question: Question, surface: RenderSurface) -> None:
        self.previewer.preview(question, surface)


_question_view_service: Optional[QuestionViewService] = None


def get_question_view_service() -> QuestionViewService:
    """Get the shared view service (stateless, built on first use)."""
    global _question_view_service
    if _question_view_service is None:
        _question_view_service = QuestionViewService()
    return _question_view_service
