# File: users_api/core/logging.py

"""
Centralized logging configuration.

Modules log through ``logging.getLogger(__name__)``; the entry point calls
``configure_logging`` once with the configured level.
"""

import logging
import sys

_LOG_FORMAT = "%(asctime)s | %(levelname)-8s | %(name)s | %(message)s"
_DATE_FORMAT = "%Y-%m-%d %H:%M:%S"
_initialized = False


def configure_logging(level: str = "INFO") -> None:
    """Configure the root logger once; later calls only adjust the level."""
    global _initialized
    root = logging.getLogger()
    root.setLevel(level)
    if _initialized:
        return
    handler = logging.StreamHandler(sys.stdout)
    handler.setFormatter(logging.Formatter(_LOG_FORMAT, _DATE_FORMAT))
    root.addHandler(handler)
    _initialized = True
