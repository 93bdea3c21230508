"""Application entry point."""

import logging
import sys
from typing import List, Optional

from PyQt6.QtWidgets import QApplication

from pyqt_formbuilder.core.log_utils import configure_logging
from pyqt_formbuilder.io.settings_store import QSettingsStore, load_app_state
from pyqt_formbuilder.protocols.form_config import get_form_config
from pyqt_formbuilder.widgets.main_window import FormBuilderWindow

logger = logging.getLogger(__name__)


def main(argv: Optional[List[str]] = None) -> int:
    """
    Start the form builder.

    Args:
        argv: Command line passed to QApplication; defaults to sys.argv

    Returns:
        Qt event loop exit code
    """
    config = get_form_config()
    configure_logging(config)

    app = QApplication(sys.argv if argv is None else argv)
    app.setOrganizationName(config.settings_organization)
    app.setApplicationName(config.settings_application)

    store = QSettingsStore()
    state = load_app_state(store, seed_demo=config.seed_demo_form)
    logger.info(f"Starting with {len(state.forms)} forms")

    window = FormBuilderWindow(state, store)
    window.show()
    return app.exec()
