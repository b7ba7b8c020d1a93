"""Common utilities shared across the toolkit."""

from __future__ import annotations

from .logging_utils import (
    configure_logging,
    configure_worker_logging,
    start_log_listener,
)

__all__ = [
    "configure_logging",
    "configure_worker_logging",
    "start_log_listener",
]
