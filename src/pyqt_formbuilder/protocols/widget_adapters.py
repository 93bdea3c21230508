"""
Widget adapters that wrap Qt widgets to implement the widget ABCs.

Normalizes Qt's inconsistent APIs:
- QLineEdit.text() vs QPlainTextEdit.toPlainText() vs QSpinBox.value()
- QLineEdit.setText() vs QPlainTextEdit.setPlainText() vs QCheckBox.setChecked()
- textEdited vs textChanged vs valueChanged vs clicked

Change signals report user edits only; set_value() never fires them, so
the surface can push model values into fresh widgets every frame.
"""

from contextlib import contextmanager
from typing import Any, Callable
from abc import ABCMeta

from PyQt6.QtWidgets import QCheckBox, QLineEdit, QPlainTextEdit, QSpinBox
from PyQt6.QtCore import QObject

from .widget_protocols import (
    ValueGettable, ValueSettable, RangeConfigurable, ChangeSignalEmitter
)

# PyQt-specific metaclass that combines ABCMeta with Qt's metaclass
_QtMetaclass = type(QObject)


class PyQtWidgetMeta(_QtMetaclass, ABCMeta):
    """Metaclass for PyQt widgets that need ABC support."""
    pass


@contextmanager
def _signals_blocked(widget: QObject):
    """Block a widget's signals for programmatic updates."""
    widget.blockSignals(True)
    try:
        yield
    finally:
        widget.blockSignals(False)


class LineEditAdapter(QLineEdit, ValueGettable, ValueSettable,
                      ChangeSignalEmitter, metaclass=PyQtWidgetMeta):
    """
    Single-line text adapter.

    Returns text exactly as typed (no stripping), since answers are stored
    verbatim.
    """

    def get_value(self) -> Any:
        return self.text()

    def set_value(self, value: Any) -> None:
        self.setText("" if value is None else str(value))

    def connect_change_signal(self, callback: Callable[[Any], None]) -> None:
        # textEdited fires for typing only, not for setText()
        self.textEdited.connect(lambda text: callback(text))


class PlainTextEditAdapter(QPlainTextEdit, ValueGettable, ValueSettable,
                           ChangeSignalEmitter, metaclass=PyQtWidgetMeta):
    """Multi-line text adapter for paragraph answers and descriptions."""

    def get_value(self) -> Any:
        return self.toPlainText()

    def set_value(self, value: Any) -> None:
        with _signals_blocked(self):
            self.setPlainText("" if value is None else str(value))

    def connect_change_signal(self, callback: Callable[[Any], None]) -> None:
        self.textChanged.connect(lambda: callback(self.get_value()))


class SpinBoxAdapter(QSpinBox, ValueGettable, ValueSettable, RangeConfigurable,
                     ChangeSignalEmitter, metaclass=PyQtWidgetMeta):
    """
    Integer spin box adapter with a hard range.

    Keyboard tracking is off so typing "12" commits once, not as 1 then 12.
    """

    def __init__(self, parent=None):
        super().__init__(parent)
        self.setKeyboardTracking(False)

    def get_value(self) -> Any:
        return self.value()

    def set_value(self, value: Any) -> None:
        with _signals_blocked(self):
            self.setValue(int(value))

    def configure_range(self, minimum: int, maximum: int) -> None:
        with _signals_blocked(self):
            self.setRange(int(minimum), int(maximum))

    def connect_change_signal(self, callback: Callable[[Any], None]) -> None:
        self.valueChanged.connect(lambda value: callback(value))


class CheckBoxAdapter(QCheckBox, ValueGettable, ValueSettable,
                      ChangeSignalEmitter, metaclass=PyQtWidgetMeta):
    """Checkbox adapter returning bool."""

    def get_value(self) -> Any:
        return self.isChecked()

    def set_value(self, value: Any) -> None:
        with _signals_blocked(self):
            self.setChecked(bool(value))

    def connect_change_signal(self, callback: Callable[[Any], None]) -> None:
        # clicked fires on user toggles only
        self.clicked.connect(lambda checked: callback(bool(checked)))
