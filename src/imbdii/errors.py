# SPDX-License-Identifier: MIT
# Copyright (c) 2025 Blackcat Informatics® Inc.
"""Exception hierarchy mapping probe failures onto verdicts."""

from __future__ import annotations

from typing import ClassVar

from .core.severity import Verdict


class ProbeError(Exception):
    """Base class for failures that abort a probe run."""

    verdict: ClassVar[Verdict] = Verdict.ERROR


class UpstreamUnavailableError(ProbeError):
    """Raised when an upstream system cannot answer; the verdict is unknown."""

    verdict: ClassVar[Verdict] = Verdict.WARNING


class CatalogUnavailableError(UpstreamUnavailableError):
    """Raised when the image list cannot be fetched or yields nothing."""


class RegistryUnavailableError(UpstreamUnavailableError):
    """Raised when the directory service query fails at transport level."""

    def __init__(self, message: str, *, returncode: int | None = None, stderr: str | None = None) -> None:
        super().__init__(message)
        self.returncode = returncode
        self.stderr = stderr


class MissingToolError(ProbeError):
    """Raised when a required external executable is not installed."""

    def __init__(self, executable: str) -> None:
        super().__init__(f"Missing {executable} command. This is required by this script")
        self.executable = executable


__all__ = [
    "CatalogUnavailableError",
    "MissingToolError",
    "ProbeError",
    "RegistryUnavailableError",
    "UpstreamUnavailableError",
]
