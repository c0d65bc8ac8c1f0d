# SPDX-License-Identifier: MIT
# Copyright (c) 2025 Blackcat Informatics® Inc.
"""Command-line interface for the image list / BDII probe.

The Typer application lives at :data:`imbdii.cli.app.app`; the package only
re-exports the entry points so ``imbdii.cli.app`` keeps naming the module.
"""

from __future__ import annotations

from .app import main, run

__all__ = ["main", "run"]
