"""Logging utilities for the interactive solver."""

from __future__ import annotations

import logging
from typing import Optional, Union

# the HTTP stack logs every connection at DEBUG
NOISY_LOGGERS = ("urllib3",)


def resolve_level(level: Union[int, str]) -> int:
    """Map ``"info"``/``"DEBUG"``/``20`` style levels to a logging constant."""

    if isinstance(level, int):
        return level
    resolved = logging.getLevelName(level.strip().upper())
    if not isinstance(resolved, int):
        raise ValueError(f"Unknown log level {level!r}")
    return resolved


def configure_logging(level: Union[int, str] = logging.WARNING) -> None:
    """Send log records to stderr, below the shell's own output.

    The shell prints results itself, so the default level keeps solver chatter
    quiet. Pass ``"INFO"`` to follow every placement and lookup.
    """

    numeric = resolve_level(level)
    handler = logging.StreamHandler()
    handler.setFormatter(
        logging.Formatter(fmt="%(levelname)-7s | %(name)s | %(message)s")
    )

    root = logging.getLogger()
    root.handlers.clear()
    root.addHandler(handler)
    root.setLevel(numeric)
    for name in NOISY_LOGGERS:
        logging.getLogger(name).setLevel(max(numeric, logging.INFO))


def get_logger(name: Optional[str] = None) -> logging.Logger:
    """Return a namespaced logger, configuring defaults if needed."""

    if not logging.getLogger().handlers:
        configure_logging()
    return logging.getLogger(name or "kryss")
