# SPDX-License-Identifier: MIT
# Copyright (c) 2025 Blackcat Informatics® Inc.
"""Allow ``python -m imbdii``."""

from __future__ import annotations

from .cli.app import run

if __name__ == "__main__":
    run()
