# SPDX-License-Identifier: MIT
# Copyright (c) 2025 Blackcat Informatics® Inc.
"""Tests for tallying probe results and deriving verdicts."""

from __future__ import annotations

import pytest

from imbdii.core.severity import Verdict
from imbdii.errors import RegistryUnavailableError
from imbdii.filters import ImageCheck
from imbdii.reconcile import Tally, is_present, reconcile, verdict_for

from helpers.fakes import FakeProber, transport_failure

BASE = "GLUE2GroupID=cloud,GLUE2DomainID=SITE,GLUE2GroupID=grid,o=glue"


def _checks(count: int) -> list[ImageCheck]:
    return [
        ImageCheck(resolved=f"Repo=img-{index}", ldap_filter=f"(&(objectClass=Obj)(Repo=img-{index}))")
        for index in range(count)
    ]


@pytest.mark.parametrize(
    ("count", "expected"),
    [(None, False), (0, False), (1, False), (2, True), (5, True), (10**12, True)],
)
def test_presence_threshold(count: int | None, expected: bool) -> None:
    assert is_present(count) is expected


def test_tally_records_missing_filters_in_order() -> None:
    tally = Tally()

    tally.record("Repo=a", 5)
    tally.record("Repo=b", 1)
    tally.record("Repo=c", 0)

    assert (tally.ok, tally.missing, tally.total) == (1, 2, 3)
    assert tally.missing_filters == ["Repo=b", "Repo=c"]


def test_reconcile_counts_every_check() -> None:
    prober = FakeProber([5, 1, 5, 0])

    tally = reconcile(_checks(4), prober, BASE)

    assert tally.ok + tally.missing == 4
    assert tally.missing_filters == ["Repo=img-1", "Repo=img-3"]
    assert prober.calls[0] == (BASE, "(&(objectClass=Obj)(Repo=img-0))")


def test_reconcile_stops_at_first_transport_failure() -> None:
    prober = FakeProber([5, 5, transport_failure(), 5, 5, 5, 5, 5, 5, 5])

    with pytest.raises(RegistryUnavailableError):
        reconcile(_checks(10), prober, BASE)

    assert len(prober.calls) == 3


def test_verdict_ok() -> None:
    tally = Tally(ok=3)

    report = verdict_for(tally, empty_message="empty")

    assert report.verdict is Verdict.OK
    assert report.status_line() == "IMBDII OK"
    assert report.exit_code == 0


def test_verdict_critical_lists_missing_filters() -> None:
    tally = Tally(ok=2, missing=1, missing_filters=["Repo=img-1"])

    report = verdict_for(tally, empty_message="empty")

    assert report.verdict is Verdict.CRITICAL
    assert report.message == "1 images on 3 are not correctly updated (Missing attributes: Repo=img-1)"
    assert report.exit_code == 2


def test_verdict_critical_when_everything_missing() -> None:
    tally = Tally(missing=2, missing_filters=["Repo=a", "Repo=b"])

    report = verdict_for(tally, empty_message="empty")

    assert report.verdict is Verdict.CRITICAL
    assert report.message is not None
    assert "2 images on 2" in report.message
    assert "Repo=a,Repo=b" in report.message


def test_verdict_warning_without_records() -> None:
    report = verdict_for(Tally(), empty_message="Image list is empty")

    assert report.verdict is Verdict.WARNING
    assert report.status_line() == "IMBDII WARNING: Image list is empty"
    assert report.exit_code == 1
