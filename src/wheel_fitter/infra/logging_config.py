"""
Logging configuration for the service.

``setup_logging`` attaches a single console handler to the root logger.
Modules log through ``logging.getLogger(__name__)`` and pass structured
fields with ``extra=``.
"""

from __future__ import annotations

import logging
import os


def log_level() -> str:
    return os.getenv("LOG_LEVEL", "INFO")


def setup_logging(level: str | None = None) -> None:
    """Configure the root logger once.

    Repeated calls (tests building several apps) leave existing handlers alone.

    Args:
        level: Logging level name, case-insensitive. Defaults to LOG_LEVEL or INFO.
    """
    root = logging.getLogger()
    if root.handlers:
        return

    root.setLevel(getattr(logging, (level or log_level()).upper(), logging.INFO))

    handler = logging.StreamHandler()
    handler.setFormatter(
        logging.Formatter(
            fmt="%(asctime)s [%(levelname)s] %(name)s: %(message)s",
            datefmt="%Y-%m-%d %H:%M:%S",
        )
    )
    root.addHandler(handler)
