"""Tests for the Qt host: render surface, main window and widgets."""

import pytest


@pytest.fixture
def host(qapp):
    """QtRenderSurface over a bare scroll area, counting interactions."""
    from PyQt6.QtWidgets import QScrollArea
    from pyqt_formbuilder.widgets import QtRenderSurface

    scroll_area = QScrollArea()
    scroll_area.setWidgetResizable(True)
    interactions = []
    surface = QtRenderSurface(scroll_area, on_interaction=lambda: interactions.append(1))
    yield surface, interactions
    scroll_area.deleteLater()


def _frame(surface, draw):
    surface.begin_frame()
    result = draw(surface)
    consumed = surface.end_frame()
    return result, consumed


def test_no_scroll_spinbox(qapp):
    """Test NoScrollSpinBox creation."""
    from pyqt_formbuilder.protocols import SpinBoxAdapter
    from pyqt_formbuilder.widgets import NoScrollSpinBox

    widget = NoScrollSpinBox()
    assert isinstance(widget, SpinBoxAdapter)
    assert not widget.keyboardTracking()


def test_button_click_reaches_next_frame(host):
    surface, interactions = host
    clicked, consumed = _frame(surface, lambda s: s.button("Go"))
    assert clicked is False and consumed is False

    surface.frame_widgets[0].click()
    assert interactions == [1]

    clicked, consumed = _frame(surface, lambda s: s.button("Go"))
    assert clicked is True and consumed is True

    clicked, consumed = _frame(surface, lambda s: s.button("Go"))
    assert clicked is False and consumed is False


def test_text_field_edit(host):
    from pyqt_formbuilder.protocols import LineEditAdapter

    surface, _ = host
    text, _ = _frame(surface, lambda s: s.text_field("abc", hint="Name"))
    widget = surface.frame_widgets[0]
    assert isinstance(widget, LineEditAdapter)
    assert widget.text() == "abc"
    assert widget.placeholderText() == "Name"

    widget.textEdited.emit("abcd")
    text, consumed = _frame(surface, lambda s: s.text_field("abc", hint="Name"))
    assert text == "abcd" and consumed


def test_multiline_text_field(host):
    from pyqt_formbuilder.protocols import PlainTextEditAdapter

    surface, _ = host
    _frame(surface, lambda s: s.text_field("", multiline=True))
    widget = surface.frame_widgets[0]
    assert isinstance(widget, PlainTextEditAdapter)

    widget.setPlainText("two\nlines")
    text, _ = _frame(surface, lambda s: s.text_field("", multiline=True))
    assert text == "two\nlines"


def test_checkbox_and_radio(host):
    surface, _ = host

    def draw(s):
        return s.checkbox(False, "Check"), s.radio(True, "Pick")

    (checked, picked), _ = _frame(surface, draw)
    assert (checked, picked) == (False, False)
    radio = surface.frame_widgets[1]
    assert radio.isChecked() and not radio.autoExclusive()

    surface.frame_widgets[0].click()
    radio.click()
    (checked, picked), _ = _frame(surface, draw)
    assert (checked, picked) == (True, True)


def test_drag_value_clamps_and_records(host):
    surface, _ = host
    value, _ = _frame(surface, lambda s: s.drag_value(50, 1, 12))
    assert value == 12
    spin = surface.frame_widgets[0]
    assert (spin.minimum(), spin.maximum(), spin.value()) == (1, 12, 12)

    spin.setValue(7)
    value, _ = _frame(surface, lambda s: s.drag_value(12, 1, 12))
    assert value == 7


def test_menu_pick(host):
    surface, _ = host
    picked, _ = _frame(surface, lambda s: s.menu("Kind", ["A", "B"]))
    assert picked is None

    button = surface.frame_widgets[0]
    assert button.text() == "Kind"
    button.menu().actions()[1].trigger()
    picked, _ = _frame(surface, lambda s: s.menu("Kind", ["A", "B"]))
    assert picked == 1


def test_layouts_nest(host):
    from PyQt6.QtWidgets import QGridLayout, QGroupBox

    surface, _ = host

    def draw(s):
        with s.group():
            s.heading("Title")
            with s.grid():
                s.label("a")
                s.button("b")
                s.end_row()
                s.button("c")
            with s.row():
                s.separator()

    _frame(surface, draw)
    root = surface._scroll_area.widget()
    group = root.findChild(QGroupBox)
    assert group is not None
    grid = group.findChild(QGridLayout)
    assert grid.rowCount() == 2


def test_stale_interaction_dropped(host):
    surface, _ = host

    def two_buttons(s):
        s.button("first")
        s.button("second")

    _frame(surface, two_buttons)
    surface.frame_widgets[1].click()
    clicked, consumed = _frame(surface, lambda s: s.button("first"))
    assert clicked is False and consumed is False


def test_frame_misuse(host):
    surface, _ = host
    with pytest.raises(RuntimeError):
        surface.end_frame()
    with pytest.raises(RuntimeError):
        surface.label("outside")
    surface.begin_frame()
    with pytest.raises(RuntimeError):
        surface.begin_frame()
    with pytest.raises(RuntimeError):
        surface.end_row()
    surface.end_frame()


# ========== MAIN WINDOW ==========


def _find_button(window, text, occurrence=0):
    from PyQt6.QtWidgets import QPushButton

    matches = [
        widget for widget in window.surface.frame_widgets.values()
        if isinstance(widget, QPushButton) and widget.text() == text
    ]
    return matches[occurrence]


@pytest.fixture
def window(qapp):
    from pyqt_formbuilder.core import AppState, Form
    from pyqt_formbuilder.io import MemoryStore
    from pyqt_formbuilder.widgets import FormBuilderWindow

    state = AppState(forms=[Form.demo()])
    window = FormBuilderWindow(state, MemoryStore())
    yield window
    window._refresh_timer.cancel()
    window.deleteLater()


def test_window_opens_form(window):
    from pyqt_formbuilder.core import AppView

    assert window.windowTitle() == "Forms"
    _find_button(window, "Open").click()
    window.refresh()
    assert window.state.view is AppView.EDITING
    _find_button(window, "Back")


def test_window_refresh_passes_are_bounded(window, monkeypatch):
    from pyqt_formbuilder.widgets.main_window import MAX_REFRESH_PASSES

    frames = []
    end_frame = window.surface.end_frame

    def always_consumed():
        frames.append(end_frame())
        return True

    monkeypatch.setattr(window.surface, "end_frame", always_consumed)
    window._refresh_timer.cancel()
    window.refresh()
    assert len(frames) == MAX_REFRESH_PASSES
    assert window._refresh_timer.is_pending


def test_window_preview_round(window):
    from pyqt_formbuilder.core import EditTab

    window.state.open_form(0)
    window.state.select_tab(EditTab.PREVIEW)
    window.refresh()
    _find_button(window, "Submit").click()
    window.refresh()
    assert len(window.state.current_form.responses) == 1


def test_window_saves_on_close(window):
    from PyQt6.QtGui import QCloseEvent
    from pyqt_formbuilder.io import load_app_state

    window.state.forms[0].title = "Saved title"
    window.closeEvent(QCloseEvent())
    assert load_app_state(window._store).forms[0].title == "Saved title"


def test_window_close_survives_storage_failure(qapp, caplog):
    from PyQt6.QtGui import QCloseEvent
    from pyqt_formbuilder.core import AppState
    from pyqt_formbuilder.io import StorageError
    from pyqt_formbuilder.widgets import FormBuilderWindow

    class FailingStore:
        def get_blob(self, key):
            return None

        def set_blob(self, key, blob):
            raise StorageError("disk full")

    window = FormBuilderWindow(AppState(), FailingStore())
    event = QCloseEvent()
    with caplog.at_level("ERROR", logger="pyqt_formbuilder.widgets.main_window"):
        window.closeEvent(event)
    assert event.isAccepted()
    assert "Failed to save state on close" in caplog.text
    window.deleteLater()
