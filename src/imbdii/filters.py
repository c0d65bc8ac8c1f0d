# SPDX-License-Identifier: MIT
# Copyright (c) 2025 Blackcat Informatics® Inc.
"""Translate image attributes into LDAP search filters."""

from __future__ import annotations

import logging
import re
from collections.abc import Mapping
from dataclasses import dataclass
from typing import Final

from .config import SITE_PLACEHOLDER

logger = logging.getLogger(__name__)

CLAUSE_SEPARATOR: Final[str] = ","

# Attribute names such as ``ad:mpuri`` contain colons but never filter syntax,
# so a literal ``#`` inside a clause value cannot open a token.
_TOKEN_PATTERN: Final[re.Pattern[str]] = re.compile(r"#([^#,=()\s]+)#")


def template_tokens(template: str) -> list[str]:
    """Return the distinct ``#key#`` tokens of *template* in order of first appearance."""

    seen: dict[str, None] = {}
    for match in _TOKEN_PATTERN.finditer(template):
        seen.setdefault(match.group(1), None)
    return list(seen)


def resolve_template(template: str, record: Mapping[str, str]) -> str:
    """Substitute every ``#key#`` token of *template* found in *record*.

    Tokens without a matching attribute are left untouched; the resulting
    filter will not match anything and the image is reported missing.
    """

    for key in template_tokens(template):
        if key not in record:
            logger.debug("Attribute %s is not defined for this image; leaving #%s# unresolved", key, key)

    def _substitute(match: re.Match[str]) -> str:
        return record.get(match.group(1), match.group(0))

    return _TOKEN_PATTERN.sub(_substitute, template)


def split_clauses(resolved: str) -> list[str]:
    """Split a resolved check list into its non-empty comma separated clauses."""

    return [clause for clause in resolved.split(CLAUSE_SEPARATOR) if clause]


def build_ldap_filter(resolved: str, object_class: str) -> str:
    """Return ``(&(objectClass=<object_class>)(<clause>)...)`` for *resolved*."""

    clauses = "".join(f"({clause})" for clause in split_clauses(resolved))
    return f"(&(objectClass={object_class}){clauses})"


@dataclass(frozen=True, slots=True)
class ImageCheck:
    """Resolved check list and LDAP filter derived from one image."""

    resolved: str
    ldap_filter: str


def build_check(record: Mapping[str, str], template: str, object_class: str) -> ImageCheck:
    """Resolve *template* against *record* and compile the matching LDAP filter."""

    resolved = resolve_template(template, record)
    return ImageCheck(resolved=resolved, ldap_filter=build_ldap_filter(resolved, object_class))


def resolve_base_dn(template: str, site: str) -> str:
    """Replace the site placeholder of a base DN template with *site*."""

    return template.replace(SITE_PLACEHOLDER, site)


__all__ = [
    "CLAUSE_SEPARATOR",
    "ImageCheck",
    "build_check",
    "build_ldap_filter",
    "resolve_base_dn",
    "resolve_template",
    "split_clauses",
    "template_tokens",
]
