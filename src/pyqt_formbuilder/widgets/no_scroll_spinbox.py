"""
No-scroll spinbox widget for PyQt6.

Prevents accidental value changes from mouse wheel events while the user
scrolls through a long form.
"""

from PyQt6.QtGui import QWheelEvent

from pyqt_formbuilder.protocols.widget_adapters import SpinBoxAdapter


class NoScrollSpinBox(SpinBoxAdapter):
    """SpinBox that ignores wheel events so scrolling the form never edits it.

    Inherits from SpinBoxAdapter which already implements the value ABCs.
    """

    def wheelEvent(self, event: QWheelEvent):
        """Ignore wheel events; the scroll area handles them instead."""
        event.ignore()
