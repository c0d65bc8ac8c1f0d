# SPDX-License-Identifier: MIT
# Copyright (c) 2025 Blackcat Informatics® Inc.
"""Verdict related types and helpers."""

from __future__ import annotations

from enum import Enum
from typing import Final

STATUS_TAG: Final[str] = "IMBDII"


class Verdict(str, Enum):
    """Health verdicts understood by the host monitoring system."""

    OK = "ok"
    WARNING = "warning"
    CRITICAL = "critical"
    ERROR = "error"

    @property
    def exit_code(self) -> int:
        """Return the process exit status associated with the verdict."""

        return _VERDICT_TO_EXIT_CODE[self]

    @property
    def label(self) -> str:
        """Return the upper-case severity word used on the status line."""

        return self.value.upper()


_VERDICT_TO_EXIT_CODE: Final[dict[Verdict, int]] = {
    Verdict.OK: 0,
    Verdict.WARNING: 1,
    Verdict.CRITICAL: 2,
    Verdict.ERROR: 3,
}


def render_status_line(verdict: Verdict, message: str | None = None) -> str:
    """Return the single summary line printed for *verdict*.

    Args:
        verdict: Outcome of the probe run.
        message: Optional human readable reason appended after a colon.

    Returns:
        str: Line of the form ``IMBDII <LABEL>`` or ``IMBDII <LABEL>: <message>``.
    """

    head = f"{STATUS_TAG} {verdict.label}"
    if not message:
        return head
    return f"{head}: {message}"


__all__ = ["STATUS_TAG", "Verdict", "render_status_line"]
