"""Logging setup for the ``retail`` logger hierarchy.

Library modules only create loggers; handlers are attached here, once,
by the CLI entry point.
"""

from __future__ import annotations

import logging
import sys
import threading
from typing import TextIO

_LOGGER_PREFIX = "retail"
_FORMAT = "%(asctime)s %(levelname)-7s %(name)s: %(message)s"

_lock = threading.Lock()
_configured = False


def configure_logging(verbose: bool = False, stream: TextIO | None = None) -> None:
    """Send ``retail.*`` records to stderr (idempotent)."""
    global _configured
    with _lock:
        if _configured:
            return
        _configured = True

    handler = logging.StreamHandler(stream or sys.stderr)
    handler.setFormatter(logging.Formatter(_FORMAT))

    root_logger = logging.getLogger(_LOGGER_PREFIX)
    root_logger.setLevel(logging.DEBUG if verbose else logging.WARNING)
    root_logger.propagate = False
    root_logger.addHandler(handler)


def reset_logging() -> None:
    """Undo ``configure_logging``.  FOR TESTING ONLY."""
    global _configured
    with _lock:
        _configured = False
    root_logger = logging.getLogger(_LOGGER_PREFIX)
    root_logger.handlers.clear()
    root_logger.setLevel(logging.NOTSET)
    root_logger.propagate = True
