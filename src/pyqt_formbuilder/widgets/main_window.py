"""
Main window of the form builder.

Hosts a QtRenderSurface inside a scroll area and redraws the whole
application state after every user interaction. State is saved to the
configured store when the window closes.
"""

import logging
from typing import Optional

from PyQt6.QtWidgets import QMainWindow, QScrollArea, QWidget

from pyqt_formbuilder.core.app_state import AppState
from pyqt_formbuilder.core.debounce_timer import DebounceTimer
from pyqt_formbuilder.io.base import StateStore
from pyqt_formbuilder.io.exceptions import StorageError
from pyqt_formbuilder.io.settings_store import save_app_state
from pyqt_formbuilder.protocols.form_config import get_form_config
from pyqt_formbuilder.services.form_view_service import AppViewService
from pyqt_formbuilder.widgets.qt_surface import QtRenderSurface

logger = logging.getLogger(__name__)

MAX_REFRESH_PASSES = 3


class FormBuilderWindow(QMainWindow):
    """
    Top-level window drawing an AppState through AppViewService.

    Interactions are coalesced by a zero-delay DebounceTimer, so a burst of
    signals from one event loop pass costs one redraw.
    """

    def __init__(self, state: AppState, store: Optional[StateStore] = None,
                 parent: Optional[QWidget] = None):
        super().__init__(parent)
        config = get_form_config()
        self._state = state
        self._store = store
        self._views = AppViewService()

        self.setWindowTitle(config.window_title)
        self.resize(config.window_width, config.window_height)

        self.scroll_area = QScrollArea()
        self.scroll_area.setWidgetResizable(True)
        self.setCentralWidget(self.scroll_area)

        self._refresh_timer = DebounceTimer(0, self.refresh, parent=self)
        self.surface = QtRenderSurface(self.scroll_area, on_interaction=self._refresh_timer.trigger)
        self.refresh()

    @property
    def state(self) -> AppState:
        return self._state

    def refresh(self) -> None:
        """
        Draw until a frame applies no user edits.

        An edit applied partway through a frame leaves that frame stale, so
        the window redraws at once, up to MAX_REFRESH_PASSES times, and then
        leaves any further pass to the timer.
        """
        for _ in range(MAX_REFRESH_PASSES):
            self.surface.begin_frame()
            self._views.render(self._state, self.surface)
            if not self.surface.end_frame():
                return
        self._refresh_timer.trigger()

    def save_state(self) -> None:
        if self._store is None:
            return
        save_app_state(self._store, self._state)

    def closeEvent(self, event) -> None:
        """Save state before the window goes away."""
        self._refresh_timer.cancel()
        try:
            self.save_state()
        except StorageError:
            logger.exception("Failed to save state on close")
        super().closeEvent(event)
