# SPDX-License-Identifier: MIT
# Copyright (c) 2025 Blackcat Informatics® Inc.

"""Shared pytest fixtures."""

from __future__ import annotations

from collections.abc import Iterator

import pytest

from imbdii.core.logging import reset_debug_logging
from imbdii.runtime.console import get_console_manager

from helpers.fakes import IMAGE_LIST


@pytest.fixture
def image_list() -> str:
    """Return a three-image vmcatcher image list."""
    return IMAGE_LIST


@pytest.fixture(autouse=True)
def _reset_logging() -> Iterator[None]:
    yield
    reset_debug_logging()
    get_console_manager().reset()
