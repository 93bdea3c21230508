"""
Persistence boundary.

JSON snapshot codec for AppState and the key/value stores it is written
to. QSettingsStore (Qt) is loaded on first access.
"""

from __future__ import annotations

import importlib
from typing import TYPE_CHECKING

from .exceptions import DeserializationError, StorageError
from .base import StateStore, MemoryStore
from .serde import save, load, parse_state

if TYPE_CHECKING:
    from .settings_store import QSettingsStore, load_app_state, save_app_state

_LAZY_EXPORTS = {
    "QSettingsStore": ("pyqt_formbuilder.io.settings_store", "QSettingsStore"),
    "load_app_state": ("pyqt_formbuilder.io.settings_store", "load_app_state"),
    "save_app_state": ("pyqt_formbuilder.io.settings_store", "save_app_state"),
}


def __getattr__(name: str):
    if name in _LAZY_EXPORTS:
        module_name, attr = _LAZY_EXPORTS[name]
        module = importlib.import_module(module_name)
        value = getattr(module, attr)
        globals()[name] = value
        return value
    raise AttributeError(f"module {__name__!r} has no attribute {name!r}")


__all__ = [
    "DeserializationError",
    "StorageError",
    "StateStore",
    "MemoryStore",
    "save",
    "load",
    "parse_state",
    "QSettingsStore",
    "load_app_state",
    "save_app_state",
]
