# SPDX-License-Identifier: MIT
# Copyright (c) 2025 Blackcat Informatics® Inc.
"""Image list retrieval and parsing."""

from __future__ import annotations

from .fetch import fetch_catalog
from .parser import IMAGE_MARKER, IDLE, ImageRecord, ParserState, iter_image_records, split_chunks, step

__all__ = [
    "IDLE",
    "IMAGE_MARKER",
    "ImageRecord",
    "ParserState",
    "fetch_catalog",
    "iter_image_records",
    "split_chunks",
    "step",
]
