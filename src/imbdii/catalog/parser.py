# SPDX-License-Identifier: MIT
# Copyright (c) 2025 Blackcat Informatics® Inc.
"""Streaming parser turning a vmcatcher image list into per-image attribute maps.

The image list is scanned as a flat sequence of chunks delimited by ``,`` or
``{``. Each chunk is split on the field separator (a double quote by
default); field 1 holds an attribute name and field 3 its value, so a chunk
such as ``"ad:mpuri": "https://..."`` contributes ``ad:mpuri``. A chunk whose
name is ``hv:image`` opens a new record and a chunk containing ``}`` closes
the record being accumulated.
"""

from __future__ import annotations

import re
from collections.abc import Iterable, Iterator, Mapping
from dataclasses import dataclass
from typing import Final

from ..config import DEFAULT_FIELD_SEPARATOR

IMAGE_MARKER: Final[str] = "hv:image"
RECORD_CLOSE: Final[str] = "}"
NAME_FIELD: Final[int] = 1
VALUE_FIELD: Final[int] = 3

_CHUNK_DELIMITER: Final[re.Pattern[str]] = re.compile(r"[,{]")

AttributePair = tuple[str, str]


@dataclass(frozen=True, slots=True)
class ImageRecord(Mapping[str, str]):
    """Ordered, immutable attribute map describing one catalog image."""

    pairs: tuple[AttributePair, ...] = ()

    @classmethod
    def from_pairs(cls, pairs: Iterable[AttributePair]) -> ImageRecord:
        """Collapse *pairs* so repeated names keep their first position and last value."""

        merged: dict[str, str] = {}
        for name, value in pairs:
            merged[name] = value
        return cls(tuple(merged.items()))

    def __getitem__(self, key: str) -> str:
        for name, value in self.pairs:
            if name == key:
                return value
        raise KeyError(key)

    def __iter__(self) -> Iterator[str]:
        return (name for name, _ in self.pairs)

    def __len__(self) -> int:
        return len(self.pairs)

    def describe(self) -> str:
        """Return a stable ``name=value`` rendering for debug output."""

        return ", ".join(f"{name}={value}" for name, value in self.pairs)


@dataclass(frozen=True, slots=True)
class ParserState:
    """Scanner state: idle, or accumulating the attributes of one image."""

    accumulating: bool = False
    pairs: tuple[AttributePair, ...] = ()

    def opened(self) -> ParserState:
        """Return a fresh accumulating state, discarding any pending attributes."""

        return ParserState(accumulating=True)

    def with_pair(self, name: str, value: str) -> ParserState:
        """Return a copy with ``name=value`` appended while accumulating."""

        if not self.accumulating:
            return self
        return ParserState(accumulating=True, pairs=(*self.pairs, (name, value)))


IDLE: Final[ParserState] = ParserState()


def _field(fields: list[str], index: int) -> str:
    return fields[index] if len(fields) > index else ""


def step(
    state: ParserState,
    chunk: str,
    *,
    separator: str = DEFAULT_FIELD_SEPARATOR,
) -> tuple[ParserState, ImageRecord | None]:
    """Advance the scanner over one chunk.

    Args:
        state: Scanner state before *chunk*.
        chunk: Text between two record delimiters.
        separator: Field separator used inside a chunk.

    Returns:
        tuple[ParserState, ImageRecord | None]: The next state and, when
        *chunk* closes an image, the completed record.
    """

    fields = chunk.split(separator)
    name = _field(fields, NAME_FIELD)
    value = _field(fields, VALUE_FIELD)
    if name == IMAGE_MARKER:
        state = state.opened()
    if name and value:
        state = state.with_pair(name, value)
    if RECORD_CLOSE in chunk and state.accumulating:
        return IDLE, ImageRecord.from_pairs(state.pairs)
    return state, None


def split_chunks(text: str) -> Iterator[str]:
    """Yield the ``,``/``{`` delimited chunks of *text* lazily."""

    start = 0
    for match in _CHUNK_DELIMITER.finditer(text):
        yield text[start : match.start()]
        start = match.end()
    yield text[start:]


def iter_image_records(text: str, *, separator: str = DEFAULT_FIELD_SEPARATOR) -> Iterator[ImageRecord]:
    """Yield one :class:`ImageRecord` per image found in *text*, in catalog order."""

    state = IDLE
    for chunk in split_chunks(text):
        state, record = step(state, chunk, separator=separator)
        if record is not None:
            yield record


__all__ = [
    "IDLE",
    "IMAGE_MARKER",
    "ImageRecord",
    "ParserState",
    "iter_image_records",
    "split_chunks",
    "step",
]
