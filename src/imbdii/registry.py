# SPDX-License-Identifier: MIT
# Copyright (c) 2025 Blackcat Informatics® Inc.
"""Directory service adapter counting entries matched by an LDAP filter."""

from __future__ import annotations

import logging
from collections.abc import Iterable
from typing import Final, Protocol

from .errors import MissingToolError, RegistryUnavailableError
from .process_utils import TIMEOUT_RETURNCODE, resolve_executable, run_command

logger = logging.getLogger(__name__)

LDAPSEARCH: Final[str] = "ldapsearch"
NUM_ENTRIES_KEY: Final[str] = "#numEntries"
DOWN_MESSAGE: Final[str] = "Failed to contact the LDAP server. Is the top BDII down?"


class RegistryProber(Protocol):
    """Count directory entries matching a filter under a base DN."""

    def count(self, base_dn: str, ldap_filter: str) -> int:
        """Return the number of entries matching *ldap_filter* below *base_dn*."""
        ...


def parse_num_entries(lines: Iterable[str]) -> int:
    """Extract the ``# numEntries:`` trailer from ``ldapsearch`` output.

    ldapsearch omits the trailer when nothing matches, so a missing or
    unreadable trailer counts as zero entries.
    """

    for line in lines:
        compact = line.replace(" ", "")
        key, _, value = compact.partition(":")
        if key != NUM_ENTRIES_KEY:
            continue
        try:
            return int(value)
        except ValueError:
            logger.debug("Ignoring unreadable numEntries value %r", value)
            return 0
    return 0


class LdapSearchProber:
    """Run one anonymous ``ldapsearch`` per filter against a top BDII."""

    def __init__(self, uri: str, *, timeout: float | None = None, executable: str = LDAPSEARCH) -> None:
        self.uri = uri
        self.timeout = timeout
        self.executable = executable

    def ensure_available(self) -> str:
        """Return the resolved executable path, raising :class:`MissingToolError` if absent."""

        try:
            return resolve_executable(self.executable)
        except FileNotFoundError as exc:
            raise MissingToolError(self.executable) from exc

    def command(self, base_dn: str, ldap_filter: str) -> list[str]:
        """Return the argument list used to query *base_dn* with *ldap_filter*."""

        return [self.executable, "-x", "-H", self.uri, "-b", base_dn, ldap_filter]

    def count(self, base_dn: str, ldap_filter: str) -> int:
        """Return the entry count reported by the directory.

        Raises:
            MissingToolError: When ``ldapsearch`` is not installed.
            RegistryUnavailableError: On a non-zero exit status or a timeout.
        """

        args = self.command(base_dn, ldap_filter)
        logger.debug('Executing %s -x -H %s -b "%s" "%s"', self.executable, self.uri, base_dn, ldap_filter)
        try:
            completed = run_command(args, timeout=self.timeout)
        except FileNotFoundError as exc:
            raise MissingToolError(self.executable) from exc

        if completed.returncode != 0:
            if completed.returncode == TIMEOUT_RETURNCODE:
                logger.debug("ldapsearch timed out after %ss", self.timeout)
            else:
                logger.debug("ldapsearch exited with status %s: %s", completed.returncode, completed.stderr)
            raise RegistryUnavailableError(
                DOWN_MESSAGE,
                returncode=completed.returncode,
                stderr=completed.stderr,
            )
        return parse_num_entries(completed.stdout.splitlines())


__all__ = [
    "DOWN_MESSAGE",
    "LDAPSEARCH",
    "LdapSearchProber",
    "RegistryProber",
    "parse_num_entries",
]
