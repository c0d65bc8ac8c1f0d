# SPDX-License-Identifier: MIT
# Copyright (c) 2025 Blackcat Informatics® Inc.
"""Typer option declarations for the probe command."""

from __future__ import annotations

from typing import Annotated

import typer

from ..config import (
    DEFAULT_BASE_DN,
    DEFAULT_BDII,
    DEFAULT_CHECK_LIST,
    DEFAULT_FIELD_SEPARATOR,
    DEFAULT_IMAGE_LIST,
    DEFAULT_IMAGE_OBJECT,
    DEFAULT_TIMEOUT,
)

SITE_OPTION = Annotated[
    str | None,
    typer.Option(
        "--site",
        "-H",
        envvar="IMBDII_SITE",
        metavar="SITE-NAME",
        help="BDII site name (GLUE2DomainID) to verify. Required.",
        show_default=False,
    ),
]
BDII_OPTION = Annotated[
    str | None,
    typer.Option(
        "--topbdii",
        "-T",
        envvar="IMBDII_BDII",
        help=f"Top BDII to query. Default is {DEFAULT_BDII}",
        show_default=False,
    ),
]
IMAGE_LIST_OPTION = Annotated[
    str | None,
    typer.Option(
        "--image-list",
        "-l",
        envvar="IMBDII_IMAGE_LIST",
        help=f"Image list to verify. Default is {DEFAULT_IMAGE_LIST}",
        show_default=False,
    ),
]
CHECK_LIST_OPTION = Annotated[
    str | None,
    typer.Option(
        "--check-list",
        "-C",
        envvar="IMBDII_CHECK_LIST",
        help=(
            "Comma separated list of <bdii_attribute>=#<image_list_property># elements to compare "
            f"between the image list and the BDII. Default is {DEFAULT_CHECK_LIST}"
        ),
        show_default=False,
    ),
]
BASE_OPTION = Annotated[
    str | None,
    typer.Option(
        "--base",
        "-b",
        envvar="IMBDII_BASE_DN",
        help=f"Base BDII DN for the cloud resources. Default is {DEFAULT_BASE_DN}",
        show_default=False,
    ),
]
OBJECT_CLASS_OPTION = Annotated[
    str | None,
    typer.Option(
        "--object-class",
        "-j",
        envvar="IMBDII_IMAGE_OBJECT",
        help=f"BDII object class representing an OS image. Default is {DEFAULT_IMAGE_OBJECT}",
        show_default=False,
    ),
]
TIMEOUT_OPTION = Annotated[
    float | None,
    typer.Option(
        "--timeout",
        envvar="IMBDII_TIMEOUT",
        help=f"Seconds allowed for the image list download and each LDAP query. Default is {DEFAULT_TIMEOUT:g}",
        show_default=False,
    ),
]
VERIFY_TLS_OPTION = Annotated[
    bool,
    typer.Option(
        "--verify-tls",
        envvar="IMBDII_VERIFY_TLS",
        help="Validate the image list server certificate.",
    ),
]
SEPARATOR_OPTION = Annotated[
    str | None,
    typer.Option(
        "--separator",
        envvar="IMBDII_FIELD_SEPARATOR",
        help=f"Field separator inside image list entries. Default is {DEFAULT_FIELD_SEPARATOR}",
        show_default=False,
    ),
]
DEBUG_OPTION = Annotated[
    bool,
    typer.Option(
        "--debug",
        "-d",
        envvar="IMBDII_DEBUG",
        help="Display debug information on standard error.",
    ),
]


__all__ = [
    "BASE_OPTION",
    "BDII_OPTION",
    "CHECK_LIST_OPTION",
    "DEBUG_OPTION",
    "IMAGE_LIST_OPTION",
    "OBJECT_CLASS_OPTION",
    "SEPARATOR_OPTION",
    "SITE_OPTION",
    "TIMEOUT_OPTION",
    "VERIFY_TLS_OPTION",
]
