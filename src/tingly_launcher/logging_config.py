"""Logging configuration for the launcher.

Diagnostic messages from the adapters go through the standard logging
module and are rendered on stderr with Rich, so they never mix with the
wrapped binary's stdout. The level comes from ``TINGLY_BOX_LOG_LEVEL``
via LauncherConfig and defaults to WARNING.

Repeated calls reuse the handler installed by the first one.
"""

from __future__ import annotations

import logging

from rich.console import Console
from rich.logging import RichHandler


_ROOT_LOGGER = "tingly_launcher"
_HANDLER_TAG = "_tingly_launcher_handler"


def resolve_level(level: str | int) -> int:
    """Convert a level name or number to a logging level.

    Unknown names fall back to WARNING.
    """
    if isinstance(level, int):
        return level
    value = logging.getLevelName(level.strip().upper())
    return value if isinstance(value, int) else logging.WARNING


def configure_logging(level: str | int = "WARNING") -> logging.Logger:
    """Install a Rich stderr handler on the package logger.

    Args:
        level: Level name (e.g., "DEBUG") or number.

    Returns:
        The configured package logger.
    """
    logger = logging.getLogger(_ROOT_LOGGER)
    logger.setLevel(resolve_level(level))

    if not any(getattr(h, _HANDLER_TAG, False) for h in logger.handlers):
        handler = RichHandler(
            console=Console(stderr=True),
            show_path=False,
            rich_tracebacks=False,
        )
        setattr(handler, _HANDLER_TAG, True)
        logger.addHandler(handler)

    return logger
