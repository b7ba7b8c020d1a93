"""
Logging utilities for the command line and for worker processes.
"""
from __future__ import annotations

import logging
import multiprocessing
from logging.handlers import QueueHandler, QueueListener
from typing import Optional


def configure_logging(verbose: bool = False, stream=None) -> None:
    """
    Configure root logging for command-line use.

    Args:
        verbose: Log DEBUG records instead of INFO.
        stream: Output stream (default stderr).
    """
    level = logging.DEBUG if verbose else logging.INFO
    # No-op for handlers if the host application already configured logging
    logging.basicConfig(level=level, format="%(message)s", stream=stream)
    logging.getLogger().setLevel(level)


# =============================================================================
# Multiprocessing Logging Support
# =============================================================================

def configure_worker_logging(mp_log_queue: multiprocessing.Queue, level: int = logging.DEBUG) -> None:
    """
    Configure logging in a child process to send logs to a multiprocessing queue.

    Call this as the initializer for ProcessPoolExecutor to enable log
    capture from worker processes.

    Args:
        mp_log_queue: Multiprocessing queue to send log records to.
        level: Level for the worker's root logger.

    Example:
        >>> with ProcessPoolExecutor(
        ...     max_workers=4,
        ...     initializer=configure_worker_logging,
        ...     initargs=(mp_log_queue, logging.INFO),
        ... ) as executor:
        ...     # workers will send logs to mp_log_queue
    """
    # Get root logger and remove all existing handlers
    root = logging.getLogger()
    root.handlers = []

    root.addHandler(QueueHandler(mp_log_queue))
    root.setLevel(level)


class _DispatchHandler(logging.Handler):
    """Replay a record through a logger in this process."""

    def __init__(self, logger_name: Optional[str] = None):
        super().__init__()
        self.logger_name = logger_name

    def emit(self, record: logging.LogRecord) -> None:
        name = self.logger_name if self.logger_name is not None else record.name
        target = logging.getLogger(name)
        if target.isEnabledFor(record.levelno):
            target.handle(record)


def start_log_listener(
    mp_log_queue: multiprocessing.Queue,
    logger_name: Optional[str] = None,
) -> QueueListener:
    """
    Start a listener that replays worker records into this process.

    Each record goes through ``logger_name``, or the logger it was
    emitted on when None, so handlers added after the pool starts
    (pytest caplog, a later configure_logging) still receive it.

    Returns:
        The started listener; call ``stop()`` once workers have finished.
    """
    listener = QueueListener(mp_log_queue, _DispatchHandler(logger_name))
    listener.start()
    return listener
