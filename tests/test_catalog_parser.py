# SPDX-License-Identifier: MIT
# Copyright (c) 2025 Blackcat Informatics® Inc.
"""Tests for the streaming image list parser."""

from __future__ import annotations

import pytest

from imbdii.catalog import IDLE, ImageRecord, ParserState, iter_image_records, split_chunks, step

from helpers.fakes import MPURIS


def test_parses_one_record_per_image(image_list: str) -> None:
    records = list(iter_image_records(image_list))

    assert len(records) == 3
    assert [record["ad:mpuri"] for record in records] == list(MPURIS)
    assert list(records[0]) == ["ad:mpuri", "dc:identifier", "dc:title", "hv:version"]


def test_attributes_outside_images_are_ignored(image_list: str) -> None:
    records = list(iter_image_records(image_list))

    for record in records:
        assert "dc:date:created" not in record
        assert "hv:images" not in record


def test_records_are_produced_lazily(image_list: str) -> None:
    records = iter_image_records(image_list)

    first = next(records)

    assert first["dc:identifier"] == "ubuntu-22.04"
    assert len(list(records)) == 2


@pytest.mark.parametrize("text", ["", "   \n", "<html><body>Service Unavailable</body></html>", '{"hv:imagelist": {}}'])
def test_unparseable_input_yields_no_records(text: str) -> None:
    assert list(iter_image_records(text)) == []


def test_empty_names_and_values_are_dropped() -> None:
    text = '{"hv:image": {"ad:mpuri": "", "": "orphan", "dc:title": "kept"}}'

    (record,) = iter_image_records(text)

    assert dict(record) == {"dc:title": "kept"}


def test_marker_resets_pending_attributes() -> None:
    text = '{"hv:image": "first", "dc:title": "dropped", "hv:image": "second", "dc:title": "kept"}'

    (record,) = iter_image_records(text)

    assert dict(record) == {"hv:image": "second", "dc:title": "kept"}


def test_closing_brace_without_open_record_is_ignored() -> None:
    text = '{"dc:title": "stray"}, {"hv:image": {"dc:title": "real"}}'

    records = list(iter_image_records(text))

    assert [dict(record) for record in records] == [{"dc:title": "real"}]


def test_custom_separator() -> None:
    text = "{'hv:image': {'ad:mpuri': 'https://example.org/img:1/'}}"

    (record,) = iter_image_records(text, separator="'")

    assert record["ad:mpuri"] == "https://example.org/img:1/"


def test_step_transitions() -> None:
    state, record = step(IDLE, ' "dc:title": "ignored while idle"')
    assert state == IDLE
    assert record is None

    state, record = step(state, ' "hv:image": "marker"')
    assert state == ParserState(accumulating=True, pairs=(("hv:image", "marker"),))
    assert record is None

    state, record = step(state, ' "dc:title": "Ubuntu"\n }')
    assert state == IDLE
    assert record == ImageRecord((("hv:image", "marker"), ("dc:title", "Ubuntu")))


def test_step_does_not_mutate_previous_state() -> None:
    opened, _ = step(IDLE, ' "hv:image": ')
    step(opened, ' "dc:title": "x"')

    assert opened.pairs == ()


def test_split_chunks_on_commas_and_braces() -> None:
    assert list(split_chunks('a,b{c')) == ["a", "b", "c"]
    assert list(split_chunks("")) == [""]


def test_image_record_keeps_first_position_and_last_value() -> None:
    record = ImageRecord.from_pairs([("a", "1"), ("b", "2"), ("a", "3")])

    assert list(record.items()) == [("a", "3"), ("b", "2")]
    assert record.describe() == "a=3, b=2"
    with pytest.raises(KeyError):
        record["missing"]
