"""
Qt host widgets.

The immediate-mode render surface, the main window that drives it, and
the widget subclasses it draws with.
"""

from .no_scroll_spinbox import NoScrollSpinBox
from .qt_surface import QtRenderSurface
from .main_window import FormBuilderWindow

__all__ = [
    "NoScrollSpinBox",
    "QtRenderSurface",
    "FormBuilderWindow",
]
