"""Tests for core utilities."""

import logging

import pytest


def test_debounce_timer_coalesces(qapp):
    """Several triggers in one event loop pass run the handler once."""
    from PyQt6.QtTest import QTest
    from pyqt_formbuilder.core import DebounceTimer

    called = []
    timer = DebounceTimer(delay_ms=0, handler=lambda: called.append(1))
    timer.trigger()
    timer.trigger()
    assert timer.is_pending
    QTest.qWait(50)
    assert called == [1]
    assert not timer.is_pending


def test_debounce_timer_cancel_and_force(qapp):
    from PyQt6.QtTest import QTest
    from pyqt_formbuilder.core import DebounceTimer

    called = []
    timer = DebounceTimer(delay_ms=10, handler=lambda: called.append(1))
    timer.trigger()
    timer.cancel()
    QTest.qWait(50)
    assert called == []

    timer.trigger()
    timer.force()
    assert called == [1]
    assert not timer.is_pending


@pytest.fixture
def log_config(tmp_path):
    from pyqt_formbuilder.protocols import FormBuilderConfig

    config = FormBuilderConfig(log_dir=str(tmp_path / "logs"), log_logger_name="pyqt_formbuilder_test_logs")
    yield config
    test_logger = logging.getLogger(config.log_logger_name)
    for handler in list(test_logger.handlers):
        test_logger.removeHandler(handler)
        handler.close()


def test_configure_logging_writes_file(log_config):
    from pyqt_formbuilder.core.log_utils import configure_logging, get_current_log_file_path

    log_file = configure_logging(log_config)
    assert log_file.parent.name == "logs"
    assert log_file.name.startswith("pyqt_formbuilder_")
    assert get_current_log_file_path(log_config) == log_file

    logging.getLogger(f"{log_config.log_logger_name}.child").info("hello from a test")
    for handler in logging.getLogger(log_config.log_logger_name).handlers:
        handler.flush()
    assert "hello from a test" in log_file.read_text(encoding="utf-8")


def test_configure_logging_replaces_handlers(log_config):
    from pyqt_formbuilder.core.log_utils import configure_logging

    configure_logging(log_config)
    configure_logging(log_config)
    assert len(logging.getLogger(log_config.log_logger_name).handlers) == 2


def test_discover_logs(log_config, tmp_path):
    from pyqt_formbuilder.core.log_utils import configure_logging, discover_logs

    assert discover_logs(log_config) == []
    log_file = configure_logging(log_config)
    (tmp_path / "logs" / "unrelated.log").write_text("", encoding="utf-8")
    assert discover_logs(log_config) == [log_file]
    assert logging.getLogger(log_config.log_logger_name).level == logging.INFO
