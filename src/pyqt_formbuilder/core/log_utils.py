"""
Log setup utilities for pyqt-formbuilder.

Installs a console handler and a per-session log file under the configured
log directory, and lets the UI find the current log file again.
"""

import logging
import time
from pathlib import Path
from typing import List, Optional

from pyqt_formbuilder.protocols.form_config import FormBuilderConfig, get_form_config

logger = logging.getLogger(__name__)

LOG_FORMAT = "%(asctime)s - %(name)s - %(levelname)s - %(message)s"

# Marks handlers installed here so repeated setup replaces instead of stacking
_HANDLER_MARKER = "_pyqt_formbuilder_handler"


def _get_log_dir(config: FormBuilderConfig) -> Path:
    """Return configured log directory or default."""
    if config.log_dir:
        return Path(config.log_dir)
    return Path.home() / ".local" / "share" / "pyqt_formbuilder" / "logs"


def configure_logging(config: Optional[FormBuilderConfig] = None) -> Path:
    """
    Configure the package logger with a console and a file handler.

    Args:
        config: Configuration to use; defaults to get_form_config()

    Returns:
        Path of the log file for this session
    """
    config = config or get_form_config()
    log_dir = _get_log_dir(config)
    log_dir.mkdir(parents=True, exist_ok=True)
    log_file = log_dir / f"{config.log_prefix}{int(time.time())}.log"

    package_logger = logging.getLogger(config.log_logger_name)
    package_logger.setLevel(config.log_level.upper())

    for handler in list(package_logger.handlers):
        if getattr(handler, _HANDLER_MARKER, False):
            package_logger.removeHandler(handler)
            handler.close()

    formatter = logging.Formatter(LOG_FORMAT)
    file_handler = logging.FileHandler(log_file, encoding="utf-8")
    stream_handler = logging.StreamHandler()
    for handler in (file_handler, stream_handler):
        handler.setFormatter(formatter)
        setattr(handler, _HANDLER_MARKER, True)
        package_logger.addHandler(handler)

    logger.info(f"Logging to {log_file}")
    return log_file


def get_current_log_file_path(config: Optional[FormBuilderConfig] = None) -> Optional[Path]:
    """Return the file the package logger currently writes to, if any."""
    config = config or get_form_config()
    for handler in logging.getLogger(config.log_logger_name).handlers:
        if isinstance(handler, logging.FileHandler):
            return Path(handler.baseFilename)
    return None


def discover_logs(config: Optional[FormBuilderConfig] = None) -> List[Path]:
    """List this application's log files, newest first."""
    config = config or get_form_config()
    log_dir = _get_log_dir(config)
    if not log_dir.exists():
        return []
    return sorted(
        log_dir.glob(f"{config.log_prefix}*.log"),
        key=lambda path: path.stat().st_mtime,
        reverse=True,
    )
