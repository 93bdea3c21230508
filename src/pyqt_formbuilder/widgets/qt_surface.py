"""
Immediate-mode RenderSurface on top of PyQt6 widgets.

Qt is retained mode; the core draws immediate mode. This surface bridges
the two by rebuilding the whole widget tree every frame:

1. begin_frame() starts an empty root widget
2. every element call creates a widget, numbered in call order
3. widget signals record the user's edit under that number and ask the
   host for another frame
4. on the next frame, the element with the same number returns the
   recorded edit instead of the model's value
5. end_frame() swaps the new root into the scroll area and restores focus
   and scroll position

end_frame() reports whether any recorded edit was consumed. The model may
have changed halfway through that frame, so the host should draw once more.
"""

import logging
from contextlib import contextmanager
from dataclasses import dataclass
from typing import Any, Callable, Dict, Iterator, List, Optional, Tuple

from PyQt6.QtCore import QTimer
from PyQt6.QtWidgets import (
    QFrame,
    QGridLayout,
    QGroupBox,
    QHBoxLayout,
    QLabel,
    QLayout,
    QLineEdit,
    QMenu,
    QPlainTextEdit,
    QPushButton,
    QRadioButton,
    QScrollArea,
    QVBoxLayout,
    QWidget,
)

from pyqt_formbuilder.protocols.render_surface import RenderSurface
from pyqt_formbuilder.protocols.widget_adapters import (
    CheckBoxAdapter,
    LineEditAdapter,
    PlainTextEditAdapter,
)
from pyqt_formbuilder.widgets.no_scroll_spinbox import NoScrollSpinBox

logger = logging.getLogger(__name__)

MULTILINE_HEIGHT = 80
HEADING_SCALE = 1.25


@dataclass
class _LayoutFrame:
    """Layout being filled, with the next free cell when it is a grid."""
    layout: QLayout
    row: int = 0
    column: int = 0


class QtRenderSurface(RenderSurface):
    """
    RenderSurface that draws into a QScrollArea.

    Usage:
        surface = QtRenderSurface(scroll_area, on_interaction=timer.trigger)

        def refresh():
            surface.begin_frame()
            views.render(state, surface)
            if surface.end_frame():
                timer.trigger()
    """

    def __init__(self, scroll_area: QScrollArea, on_interaction: Callable[[], None]):
        self._scroll_area = scroll_area
        self._on_interaction = on_interaction
        self._pending: Dict[int, Any] = {}
        self._frame_widgets: Dict[int, QWidget] = {}
        self._layouts: List[_LayoutFrame] = []
        self._root: Optional[QWidget] = None
        self._next_id = 0
        self._consumed = False
        # (element id, cursor position) of the text field being typed into
        self._focus: Optional[Tuple[int, int]] = None
        self._scroll_value = 0
        # Scroll range is only known after the new root is laid out
        self._scroll_timer = QTimer(scroll_area)
        self._scroll_timer.setSingleShot(True)
        self._scroll_timer.timeout.connect(self._restore_scroll)

    @property
    def frame_widgets(self) -> Dict[int, QWidget]:
        """Element id -> widget for the last frame drawn."""
        return dict(self._frame_widgets)

    # ========== FRAME LIFECYCLE ==========

    def begin_frame(self) -> None:
        if self._root is not None:
            raise RuntimeError("begin_frame() called again before end_frame()")
        self._root = QWidget()
        self._layouts = [_LayoutFrame(QVBoxLayout(self._root))]
        self._frame_widgets = {}
        self._next_id = 0
        self._consumed = False

    def end_frame(self) -> bool:
        """
        Show the frame that was just drawn.

        Returns:
            True if recorded edits were applied, so another frame is needed
        """
        if self._root is None:
            raise RuntimeError("end_frame() called without begin_frame()")
        if len(self._layouts) != 1:
            raise RuntimeError(f"{len(self._layouts) - 1} layout contexts still open at end_frame()")

        self._layouts[0].layout.addStretch(1)
        self._scroll_value = self._scroll_area.verticalScrollBar().value()
        # setWidget() deletes the previous frame's root
        self._scroll_area.setWidget(self._root)
        self._scroll_timer.start(0)
        self._restore_focus()

        if self._pending:
            logger.debug(f"Dropping {len(self._pending)} edits for elements no longer drawn")
            self._pending.clear()
        self._root = None
        self._layouts = []
        return self._consumed

    def _restore_scroll(self) -> None:
        self._scroll_area.verticalScrollBar().setValue(self._scroll_value)

    def _restore_focus(self) -> None:
        if self._focus is None:
            return
        element_id, cursor = self._focus
        widget = self._frame_widgets.get(element_id)
        if isinstance(widget, QLineEdit):
            widget.setFocus()
            widget.setCursorPosition(cursor)
        elif isinstance(widget, QPlainTextEdit):
            widget.setFocus()
            text_cursor = widget.textCursor()
            text_cursor.setPosition(min(cursor, len(widget.toPlainText())))
            widget.setTextCursor(text_cursor)

    # ========== INTERACTION BOOKKEEPING ==========

    def _take(self, default: Any) -> Tuple[int, Any]:
        """Number the next element and return any edit recorded for it."""
        element_id = self._next_id
        self._next_id += 1
        if element_id in self._pending:
            self._consumed = True
            return element_id, self._pending.pop(element_id)
        return element_id, default

    def _record(self, element_id: int, value: Any, cursor: Optional[int] = None) -> None:
        self._pending[element_id] = value
        self._focus = (element_id, cursor) if cursor is not None else None
        self._on_interaction()

    def _add(self, widget: QWidget, element_id: Optional[int] = None) -> None:
        if not self._layouts:
            raise RuntimeError("Element drawn outside begin_frame()/end_frame()")
        frame = self._layouts[-1]
        if isinstance(frame.layout, QGridLayout):
            frame.layout.addWidget(widget, frame.row, frame.column)
            frame.column += 1
        else:
            frame.layout.addWidget(widget)
        if element_id is not None:
            self._frame_widgets[element_id] = widget

    # ========== DISPLAY ELEMENTS ==========

    def label(self, text: str) -> None:
        self._add(QLabel(text))

    def heading(self, text: str) -> None:
        widget = QLabel(text)
        font = widget.font()
        font.setBold(True)
        if font.pointSizeF() > 0:
            font.setPointSizeF(font.pointSizeF() * HEADING_SCALE)
        widget.setFont(font)
        self._add(widget)

    def separator(self) -> None:
        line = QFrame()
        line.setFrameShape(QFrame.Shape.HLine)
        line.setFrameShadow(QFrame.Shadow.Sunken)
        self._add(line)

    # ========== INPUT ELEMENTS ==========

    def text_field(self, text: str, hint: str = "", multiline: bool = False) -> str:
        element_id, text = self._take(text)
        if multiline:
            widget = PlainTextEditAdapter()
            widget.setFixedHeight(MULTILINE_HEIGHT)
            widget.setPlaceholderText(hint)
            widget.set_value(text)
            widget.connect_change_signal(
                lambda value, w=widget: self._record(element_id, value, w.textCursor().position())
            )
        else:
            widget = LineEditAdapter()
            widget.setPlaceholderText(hint)
            widget.set_value(text)
            widget.connect_change_signal(
                lambda value, w=widget: self._record(element_id, value, w.cursorPosition())
            )
        self._add(widget, element_id)
        return text

    def button(self, text: str) -> bool:
        element_id, clicked = self._take(False)
        widget = QPushButton(text)
        widget.clicked.connect(lambda _checked=False: self._record(element_id, True))
        self._add(widget, element_id)
        return bool(clicked)

    def checkbox(self, checked: bool, text: str = "") -> bool:
        element_id, checked = self._take(checked)
        widget = CheckBoxAdapter(text)
        widget.set_value(checked)
        widget.connect_change_signal(lambda value: self._record(element_id, value))
        self._add(widget, element_id)
        return bool(checked)

    def radio(self, selected: bool, text: str = "") -> bool:
        element_id, clicked = self._take(False)
        widget = QRadioButton(text)
        # Selection is owned by the model, not by Qt's button groups
        widget.setAutoExclusive(False)
        widget.setChecked(selected)
        widget.clicked.connect(lambda _checked=False: self._record(element_id, True))
        self._add(widget, element_id)
        return bool(clicked)

    def drag_value(self, value: int, minimum: int, maximum: int) -> int:
        element_id, value = self._take(value)
        value = max(minimum, min(maximum, int(value)))
        widget = NoScrollSpinBox()
        widget.configure_range(minimum, maximum)
        widget.set_value(value)
        widget.connect_change_signal(lambda new_value: self._record(element_id, new_value))
        self._add(widget, element_id)
        return value

    def menu(self, label: str, items: List[str]) -> Optional[int]:
        element_id, picked = self._take(None)
        widget = QPushButton(label)
        menu = QMenu(widget)
        for index, item in enumerate(items):
            action = menu.addAction(item)
            action.triggered.connect(
                lambda _checked=False, index=index: self._record(element_id, index)
            )
        widget.setMenu(menu)
        self._add(widget, element_id)
        if picked is not None and not 0 <= picked < len(items):
            logger.debug(f"Ignoring stale menu pick {picked} for '{label}'")
            return None
        return picked

    # ========== LAYOUT ==========

    @contextmanager
    def _nested(self, container: QWidget, layout: QLayout) -> Iterator[None]:
        self._add(container)
        self._layouts.append(_LayoutFrame(layout))
        try:
            yield
        finally:
            self._layouts.pop()

    @contextmanager
    def row(self) -> Iterator[None]:
        container = QWidget()
        layout = QHBoxLayout(container)
        layout.setContentsMargins(0, 0, 0, 0)
        with self._nested(container, layout):
            yield
            layout.addStretch(1)

    @contextmanager
    def group(self) -> Iterator[None]:
        container = QGroupBox()
        layout = QVBoxLayout(container)
        with self._nested(container, layout):
            yield

    @contextmanager
    def grid(self) -> Iterator[None]:
        container = QWidget()
        layout = QGridLayout(container)
        layout.setContentsMargins(0, 0, 0, 0)
        with self._nested(container, layout):
            yield

    def end_row(self) -> None:
        frame = self._layouts[-1] if self._layouts else None
        if frame is None or not isinstance(frame.layout, QGridLayout):
            raise RuntimeError("end_row() called outside grid()")
        frame.row += 1
        frame.column = 0
