# SPDX-License-Identifier: MIT
# Copyright (c) 2025 Blackcat Informatics® Inc.
"""End-to-end run: image list -> LDAP filters -> BDII lookups -> verdict."""

from __future__ import annotations

import logging
from collections.abc import Iterable, Iterator
from typing import Protocol

from .catalog.fetch import empty_list_message, fetch_catalog
from .catalog.parser import ImageRecord, iter_image_records
from .config import ProbeConfig
from .errors import ProbeError
from .filters import ImageCheck, build_check, resolve_base_dn
from .reconcile import ProbeReport, reconcile, verdict_for
from .registry import LdapSearchProber, RegistryProber

logger = logging.getLogger(__name__)


class CatalogFetcher(Protocol):
    """Callable returning the raw image list text."""

    def __call__(self, url: str, *, timeout: float, verify: bool = False) -> str: ...


def plan_checks(records: Iterable[ImageRecord], config: ProbeConfig) -> Iterator[ImageCheck]:
    """Yield one :class:`ImageCheck` per image carrying at least one attribute."""

    for record in records:
        if not record:
            logger.debug("Skipping image without attributes")
            continue
        check = build_check(record, config.check_list, config.image_object)
        if not check.resolved:
            logger.debug("Skipping image %s: check list resolved to nothing", record.describe())
            continue
        yield check


def run_probe(
    config: ProbeConfig,
    *,
    fetcher: CatalogFetcher = fetch_catalog,
    prober: RegistryProber | None = None,
) -> ProbeReport:
    """Execute one probe run and return its report.

    The first :class:`~imbdii.errors.ProbeError` raised anywhere in the chain
    ends the run and becomes the report; no partial verdict is produced.

    Args:
        config: Run configuration.
        fetcher: Image list retriever, :func:`fetch_catalog` by default.
        prober: Directory adapter. When omitted an :class:`LdapSearchProber`
            is built for ``config.bdii`` and checked for availability before
            any network activity.

    Returns:
        ProbeReport: Verdict, message and, when reconciliation ran, the tally.
    """

    try:
        if prober is None:
            ldap = LdapSearchProber(config.bdii, timeout=config.timeout)
            ldap.ensure_available()
            prober = ldap
        body = fetcher(config.image_list, timeout=config.timeout, verify=config.verify_tls)
        records = iter_image_records(body, separator=config.field_separator)
        base_dn = resolve_base_dn(config.base_dn, config.site)
        logger.debug("Looking for images in the LDAP under %s", base_dn)
        tally = reconcile(plan_checks(records, config), prober, base_dn)
    except ProbeError as exc:
        logger.debug("Probe aborted: %s", exc)
        return ProbeReport(exc.verdict, str(exc))
    return verdict_for(tally, empty_message=empty_list_message(config.image_list))


__all__ = ["CatalogFetcher", "plan_checks", "run_probe"]
