"""Logging utilities."""

from __future__ import annotations

import logging

from rich.logging import RichHandler


def configure_logging(level: str = "INFO") -> None:
    """Configure application logging.

    Args:
        level: Logging level name.
    """

    handler = RichHandler(rich_tracebacks=True, show_time=True, show_level=True)
    handler.setFormatter(logging.Formatter(fmt="%(name)s: %(message)s"))

    root = logging.getLogger()
    root.setLevel(level.upper())
    # Only one rich handler even if the app module is re-imported
    if not any(isinstance(h, RichHandler) for h in root.handlers):
        root.addHandler(handler)


def get_logger(name: str) -> logging.Logger:
    """Get a module logger."""

    return logging.getLogger(name)
