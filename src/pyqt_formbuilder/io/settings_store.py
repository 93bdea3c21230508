"""
QSettings-backed state store.

Qt's generic key/value store holds the whole application state as one blob
under a fixed key. The blob is written as a QByteArray so the INI backend
stores it verbatim instead of splitting on commas.
"""

import logging
from typing import Optional

from PyQt6.QtCore import QByteArray, QSettings

from pyqt_formbuilder.core.app_state import AppState
from pyqt_formbuilder.core.form import Form
from pyqt_formbuilder.io import serde
from pyqt_formbuilder.io.base import StateStore
from pyqt_formbuilder.io.exceptions import StorageError
from pyqt_formbuilder.protocols.form_config import get_form_config

logger = logging.getLogger(__name__)


class QSettingsStore:
    """StateStore on top of QSettings."""

    def __init__(self, settings: Optional[QSettings] = None):
        """
        Initialize the store.

        Args:
            settings: QSettings to use; defaults to the organization and
                application names from the form builder config
        """
        if settings is None:
            config = get_form_config()
            settings = QSettings(config.settings_organization, config.settings_application)
        self._settings = settings
        logger.debug(f"QSettingsStore using {settings.fileName()}")

    def get_blob(self, key: str) -> Optional[str]:
        raw = self._settings.value(key)
        if raw is None:
            return None
        if isinstance(raw, QByteArray):
            raw = raw.data()
        if isinstance(raw, bytes):
            try:
                return raw.decode("utf-8")
            except UnicodeDecodeError as e:
                logger.warning(f"Stored value for '{key}' is not UTF-8: {e}")
                return None
        return str(raw)

    def set_blob(self, key: str, blob: str) -> None:
        self._settings.setValue(key, QByteArray(blob.encode("utf-8")))
        self._settings.sync()
        if self._settings.status() != QSettings.Status.NoError:
            raise StorageError(f"Failed to write '{key}' to {self._settings.fileName()}: {self._settings.status()}")


def load_app_state(store: StateStore, key: Optional[str] = None, seed_demo: bool = False) -> AppState:
    """
    Load the application state from a store.

    Args:
        store: Store to read from
        key: Storage key; defaults to the configured storage key
        seed_demo: On first launch (nothing saved), start with the demo form

    Returns:
        The saved state, a seeded state, or an empty state if the saved
        data cannot be read
    """
    key = key or get_form_config().storage_key
    blob = store.get_blob(key)
    if blob is None:
        logger.info(f"No saved state under '{key}'")
        return AppState(forms=[Form.demo()]) if seed_demo else AppState()
    return serde.load(blob)


def save_app_state(store: StateStore, state: AppState, key: Optional[str] = None) -> None:
    key = key or get_form_config().storage_key
    store.set_blob(key, serde.save(state))
    logger.info(f"Saved {len(state.forms)} forms under '{key}'")
