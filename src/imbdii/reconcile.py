# SPDX-License-Identifier: MIT
# Copyright (c) 2025 Blackcat Informatics® Inc.
"""Aggregate per-image probe results into a verdict."""

from __future__ import annotations

import logging
from collections.abc import Iterable
from dataclasses import dataclass, field
from typing import Final

from .core.severity import Verdict, render_status_line
from .filters import ImageCheck
from .registry import RegistryProber

logger = logging.getLogger(__name__)

# A single entry is still reported missing: some BDII deployments return the
# numEntries control line itself as a spurious row.
PRESENCE_THRESHOLD: Final[int] = 1
MISSING_SEPARATOR: Final[str] = ","


def is_present(count: int | None) -> bool:
    """Return ``True`` when *count* shows the image is published."""

    return count is not None and count > PRESENCE_THRESHOLD


@dataclass(slots=True)
class Tally:
    """Running ok/missing counters for one probe run."""

    ok: int = 0
    missing: int = 0
    missing_filters: list[str] = field(default_factory=list)

    @property
    def total(self) -> int:
        return self.ok + self.missing

    def record(self, resolved: str, count: int | None) -> bool:
        """Classify one probe result and return whether the image is present."""

        if is_present(count):
            self.ok += 1
            return True
        self.missing += 1
        self.missing_filters.append(resolved)
        return False


@dataclass(frozen=True, slots=True)
class ProbeReport:
    """Final verdict and human readable reason."""

    verdict: Verdict
    message: str | None = None
    tally: Tally | None = None

    @property
    def exit_code(self) -> int:
        return self.verdict.exit_code

    def status_line(self) -> str:
        """Return the single line printed for the host monitoring system."""

        return render_status_line(self.verdict, self.message)


def reconcile(checks: Iterable[ImageCheck], prober: RegistryProber, base_dn: str) -> Tally:
    """Query the directory once per check, stopping at the first transport failure.

    Exceptions raised by *prober* propagate unchanged; no partial tally is
    returned in that case.
    """

    tally = Tally()
    for check in checks:
        logger.debug("Looking for image with base %s and attributes %s", base_dn, check.resolved)
        count = prober.count(base_dn, check.ldap_filter)
        if tally.record(check.resolved, count):
            logger.debug("Image %s seems to be published correctly on %s", check.resolved, base_dn)
        else:
            logger.debug("Image %s seems missing on %s (%s entries)", check.resolved, base_dn, count)
    return tally


def verdict_for(tally: Tally, *, empty_message: str) -> ProbeReport:
    """Derive the verdict for a completed *tally*.

    Args:
        tally: Counters accumulated over every image of the list.
        empty_message: Reason reported when no image was checked at all.

    Returns:
        ProbeReport: ``WARNING`` when nothing was checked, ``OK`` when every
        image is present, ``CRITICAL`` otherwise.
    """

    if tally.total == 0:
        return ProbeReport(Verdict.WARNING, empty_message, tally)
    if tally.ok > 0 and tally.missing == 0:
        return ProbeReport(Verdict.OK, None, tally)
    missing = MISSING_SEPARATOR.join(tally.missing_filters)
    message = (
        f"{tally.missing} images on {tally.total} are not correctly updated (Missing attributes: {missing})"
    )
    return ProbeReport(Verdict.CRITICAL, message, tally)


__all__ = [
    "MISSING_SEPARATOR",
    "PRESENCE_THRESHOLD",
    "ProbeReport",
    "Tally",
    "is_present",
    "reconcile",
    "verdict_for",
]
