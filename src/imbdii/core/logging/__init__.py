# SPDX-License-Identifier: MIT
# Copyright (c) 2025 Blackcat Informatics® Inc.

"""Shared logging helpers for the probe."""

from __future__ import annotations

from .public import DEBUG_PREFIX, ConsoleDebugHandler, configure_debug_logging, reset_debug_logging

__all__ = [
    "DEBUG_PREFIX",
    "ConsoleDebugHandler",
    "configure_debug_logging",
    "reset_debug_logging",
]
