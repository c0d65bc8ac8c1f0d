# SPDX-License-Identifier: MIT
# Copyright (c) 2025 Blackcat Informatics® Inc.
"""CLI application entry point mapping probe reports onto exit statuses."""

from __future__ import annotations

import sys
from collections.abc import Sequence
from typing import Final

import typer

from ..config import ConfigError, ProbeConfig
from ..core.logging import configure_debug_logging
from ..core.severity import Verdict, render_status_line
from ..probe import run_probe
from ..reconcile import ProbeReport
from ._options import (
    BASE_OPTION,
    BDII_OPTION,
    CHECK_LIST_OPTION,
    DEBUG_OPTION,
    IMAGE_LIST_OPTION,
    OBJECT_CLASS_OPTION,
    SEPARATOR_OPTION,
    SITE_OPTION,
    TIMEOUT_OPTION,
    VERIFY_TLS_OPTION,
)

PROG_NAME: Final[str] = "imbdii-probe"

app = typer.Typer(
    name=PROG_NAME,
    help=(
        "Check Image Management and BDII Information System Nagios plugin.\n\n"
        "Verifies that every image of a vmcatcher image list is published in the "
        "site BDII under the cloud resources of SITE-NAME."
    ),
    add_completion=False,
    pretty_exceptions_enable=False,
    context_settings={"help_option_names": ["-h", "--help"]},
)


@app.command()
def check(
    site: SITE_OPTION = None,
    topbdii: BDII_OPTION = None,
    image_list: IMAGE_LIST_OPTION = None,
    check_list: CHECK_LIST_OPTION = None,
    base: BASE_OPTION = None,
    object_class: OBJECT_CLASS_OPTION = None,
    timeout: TIMEOUT_OPTION = None,
    verify_tls: VERIFY_TLS_OPTION = False,
    field_separator: SEPARATOR_OPTION = None,
    debug: DEBUG_OPTION = False,
) -> None:
    """Verify the image list against the BDII and print a single status line."""

    try:
        config = ProbeConfig.from_options(
            site=site,
            bdii=topbdii,
            image_list=image_list,
            check_list=check_list,
            base_dn=base,
            image_object=object_class,
            timeout=timeout,
            verify_tls=verify_tls,
            field_separator=field_separator,
            debug=debug,
        )
    except ConfigError as exc:
        report = ProbeReport(exc.verdict, str(exc))
    else:
        configure_debug_logging(config.debug)
        report = run_probe(config)
    typer.echo(report.status_line())
    raise typer.Exit(code=report.exit_code)


def main(argv: Sequence[str] | None = None) -> int:
    """Run the CLI and return the exit status instead of exiting.

    Usage errors such as unknown flags are reported as ``IMBDII ERROR`` and
    mapped to the error status rather than the parser's own usage status.
    """

    try:
        result = app(args=list(argv) if argv is not None else None, prog_name=PROG_NAME, standalone_mode=False)
    except typer.TyperException as exc:
        typer.echo(render_status_line(Verdict.ERROR, exc.format_message()))
        return Verdict.ERROR.exit_code
    except typer.Abort:
        typer.echo(render_status_line(Verdict.ERROR, "Aborted"))
        return Verdict.ERROR.exit_code
    return result if isinstance(result, int) else Verdict.OK.exit_code


def run() -> None:
    """Console-script entry point."""

    sys.exit(main())


__all__ = ["PROG_NAME", "app", "check", "main", "run"]
