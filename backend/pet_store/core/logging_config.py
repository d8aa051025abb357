"""
Logging configuration.

WHAT: Configures the root logger once per process.

WHY: Every module logs through ``logging.getLogger(__name__)``; this is the
single place that decides where those records go and at which level.
"""

import logging


LOG_FORMAT = "%(asctime)s [%(levelname)s] %(name)s: %(message)s"
DATE_FORMAT = "%Y-%m-%d %H:%M:%S"


def setup_logging(level: str = "INFO") -> None:
    """
    Configure the root logger with a console handler.

    Calling this more than once is a no-op, which matters for tests that
    build the app repeatedly.

    Args:
        level: Logging level name (case insensitive)
    """
    root = logging.getLogger()
    if root.handlers:
        return

    root.setLevel(getattr(logging, level.upper(), logging.INFO))

    handler = logging.StreamHandler()
    handler.setFormatter(logging.Formatter(fmt=LOG_FORMAT, datefmt=DATE_FORMAT))
    root.addHandler(handler)
