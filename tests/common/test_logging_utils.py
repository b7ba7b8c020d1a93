"""
Tests for logging utilities.
"""

import logging
from logging.handlers import QueueHandler
from queue import Queue

import pytest

from countdown_toolkit.common.logging_utils import (
    configure_logging,
    configure_worker_logging,
    start_log_listener,
)


@pytest.fixture
def restore_root_logger():
    """Restore root handlers and level after a test rewires them."""
    root = logging.getLogger()
    handlers, level = list(root.handlers), root.level
    yield root
    root.handlers = handlers
    root.setLevel(level)


class TestConfigureLogging:
    """Tests for configure_logging()."""

    def test_configure_logging_when_verbose_then_debug_level(self, restore_root_logger):
        configure_logging(verbose=True)
        assert restore_root_logger.level == logging.DEBUG

    def test_configure_logging_when_not_verbose_then_info_level(self, restore_root_logger):
        configure_logging()
        assert restore_root_logger.level == logging.INFO


class TestWorkerLogging:
    """Tests for the queue-based worker logging helpers."""

    def test_configure_worker_logging_when_called_then_records_go_to_queue(self, restore_root_logger):
        log_queue = Queue()

        configure_worker_logging(log_queue, logging.INFO)
        logging.getLogger("countdown_toolkit.test").info("hello")

        assert len(restore_root_logger.handlers) == 1
        assert isinstance(restore_root_logger.handlers[0], QueueHandler)
        assert log_queue.get_nowait().getMessage() == "hello"

    def test_start_log_listener_when_record_queued_then_forwarded(self):
        log_queue = Queue()
        received = []

        class _Collect(logging.Handler):
            def emit(self, record):
                received.append(record.getMessage())

        target = logging.getLogger("countdown_toolkit.listener_test")
        handler = _Collect()
        target.addHandler(handler)
        target.setLevel(logging.INFO)
        try:
            listener = start_log_listener(log_queue, "countdown_toolkit.listener_test")
            log_queue.put(logging.makeLogRecord({"msg": "from worker", "levelno": logging.INFO}))
            listener.stop()
        finally:
            target.removeHandler(handler)
            target.setLevel(logging.NOTSET)

        assert received == ["from worker"]

    def test_start_log_listener_when_no_logger_name_then_uses_record_logger(self, caplog):
        log_queue = Queue()
        listener = start_log_listener(log_queue)
        # Capture is configured after the listener starts
        caplog.set_level(logging.DEBUG, logger="countdown_toolkit.worker_test")

        log_queue.put(logging.makeLogRecord({
            "name": "countdown_toolkit.worker_test",
            "msg": "chunk done",
            "levelno": logging.DEBUG,
            "levelname": "DEBUG",
        }))
        listener.stop()

        assert "chunk done" in caplog.messages

    def test_start_log_listener_when_level_disabled_then_dropped(self, caplog):
        log_queue = Queue()
        caplog.set_level(logging.WARNING, logger="countdown_toolkit.quiet_test")

        listener = start_log_listener(log_queue)
        log_queue.put(logging.makeLogRecord({
            "name": "countdown_toolkit.quiet_test",
            "msg": "noise",
            "levelno": logging.DEBUG,
        }))
        listener.stop()

        assert "noise" not in caplog.messages
