# SPDX-License-Identifier: MIT
# Copyright (c) 2025 Blackcat Informatics® Inc.
"""User-facing debug logging routed through the shared Rich console."""

from __future__ import annotations

import logging
from typing import Final

from rich.text import Text

from ..severity import STATUS_TAG
from ...runtime.console.manager import detect_tty, get_console_manager

DEBUG_PREFIX: Final[str] = f"{STATUS_TAG} DEBUG: "
ROOT_LOGGER_NAME: Final[str] = "imbdii"


class ConsoleDebugHandler(logging.Handler):
    """Render log records as ``IMBDII DEBUG:`` lines on standard error."""

    def __init__(self, *, use_color: bool | None = None) -> None:
        super().__init__(level=logging.DEBUG)
        self._use_color = use_color

    def emit(self, record: logging.LogRecord) -> None:
        """Print *record* through the cached stderr console.

        Args:
            record: Log record produced by any ``imbdii`` logger.
        """

        try:
            message = record.getMessage()
        except (TypeError, ValueError):
            self.handleError(record)
            return
        color_enabled = detect_tty(stderr=True) if self._use_color is None else self._use_color
        console = get_console_manager().get(color=color_enabled, stderr=True)
        text = Text(f"{DEBUG_PREFIX}{message}")
        if color_enabled:
            text.stylize("dim")
        console.print(text)


def configure_debug_logging(enabled: bool, *, use_color: bool | None = None) -> logging.Logger:
    """Attach or detach the console debug handler on the package logger.

    Args:
        enabled: ``True`` when ``-d`` was supplied on the command line.
        use_color: Optional explicit colour flag overriding TTY detection.

    Returns:
        logging.Logger: The configured ``imbdii`` package logger.
    """

    logger = reset_debug_logging()
    if enabled:
        logger.addHandler(ConsoleDebugHandler(use_color=use_color))
        logger.setLevel(logging.DEBUG)
    else:
        logger.setLevel(logging.WARNING)
    return logger


def reset_debug_logging() -> logging.Logger:
    """Remove handlers previously installed by :func:`configure_debug_logging`."""

    logger = logging.getLogger(ROOT_LOGGER_NAME)
    for handler in list(logger.handlers):
        if isinstance(handler, ConsoleDebugHandler):
            logger.removeHandler(handler)
    return logger


__all__ = [
    "DEBUG_PREFIX",
    "ROOT_LOGGER_NAME",
    "ConsoleDebugHandler",
    "configure_debug_logging",
    "reset_debug_logging",
]
