# SPDX-License-Identifier: MIT
# Copyright (c) 2025 Blackcat Informatics® Inc.
"""Shell-free wrappers around ``subprocess`` execution for external clients."""

from __future__ import annotations

import shutil

# Bandit: subprocess usage is intentional; commands are argument lists built
# by the probe itself and never routed through a shell.
import subprocess  # nosec B404
from collections.abc import Sequence
from typing import Final

TIMEOUT_RETURNCODE: Final[int] = 124


def resolve_executable(name: str) -> str:
    """Return the absolute path of *name* on ``PATH``.

    Raises:
        FileNotFoundError: When the executable cannot be located.
    """

    resolved = shutil.which(name)
    if resolved is None:
        msg = f"Executable '{name}' was not found on PATH"
        raise FileNotFoundError(msg)
    return resolved


def _normalize_args(args: Sequence[str]) -> list[str]:
    if not args:
        msg = "subprocess command requires at least one argument"
        raise ValueError(msg)
    head, *rest = args
    return [resolve_executable(head), *rest]


def _ensure_text(value: str | bytes | None) -> str | None:
    if value is None or isinstance(value, str):
        return value
    return value.decode(errors="ignore")


def run_command(args: Sequence[str], *, timeout: float | None = None) -> subprocess.CompletedProcess[str]:
    """Execute *args* with captured text output and return the completed process.

    The exit status is never checked here; callers decide what a non-zero
    status means. A timeout is reported as a completed process with status
    :data:`TIMEOUT_RETURNCODE` rather than an exception.

    Args:
        args: Command and arguments; the head is resolved through ``PATH``.
        timeout: Optional wall-clock limit in seconds.

    Returns:
        subprocess.CompletedProcess[str]: Completed process with text streams.
    """

    normalized = _normalize_args(args)
    try:
        return subprocess.run(  # nosec B603
            normalized,
            check=False,
            capture_output=True,
            text=True,
            timeout=timeout,
            stdin=subprocess.DEVNULL,
        )
    except subprocess.TimeoutExpired as exc:
        stderr = _ensure_text(exc.stderr)
        timeout_msg = f"Command timed out after {timeout:.1f}s" if timeout is not None else "Command timed out"
        return subprocess.CompletedProcess(
            args=normalized,
            returncode=TIMEOUT_RETURNCODE,
            stdout=_ensure_text(exc.stdout) or "",
            stderr=f"{stderr}\n{timeout_msg}" if stderr else timeout_msg,
        )


__all__ = ["TIMEOUT_RETURNCODE", "resolve_executable", "run_command"]
