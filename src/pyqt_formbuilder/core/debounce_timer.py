"""Coalescing refresh timer for the immediate-mode host."""

from typing import Callable, Optional
from PyQt6.QtCore import QObject, QTimer


class DebounceTimer:
    """
    Trailing debounce timer around a single reusable QTimer.

    Every trigger() restarts the countdown; the handler runs once after
    delay_ms of quiet. With delay_ms=0 this coalesces all interactions from
    one pass of the event loop into a single redraw.

    Usage:
        self._refresh = DebounceTimer(delay_ms=0, handler=self.refresh)

        def on_widget_changed(self):
            self._refresh.trigger()
    """

    def __init__(self, delay_ms: int, handler: Callable[[], None], parent: Optional[QObject] = None):
        self._handler = handler
        # A parented timer is deleted together with its parent
        self._timer = QTimer(parent)
        self._timer.setSingleShot(True)
        self._timer.setInterval(delay_ms)
        self._timer.timeout.connect(self._handler)

    @property
    def is_pending(self) -> bool:
        return self._timer.isActive()

    def trigger(self):
        """Restart the countdown."""
        self._timer.start()

    def cancel(self):
        """Drop a pending run."""
        self._timer.stop()

    def force(self):
        """Cancel the countdown and run the handler now."""
        self.cancel()
        self._handler()
