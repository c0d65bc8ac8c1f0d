# SPDX-License-Identifier: MIT
# Copyright (c) 2025 Blackcat Informatics® Inc.
"""Tests for probe configuration validation."""

from __future__ import annotations

import pytest
from pydantic import ValidationError

from imbdii.config import DEFAULT_BDII, DEFAULT_CHECK_LIST, ConfigError, ProbeConfig
from imbdii.core.severity import Verdict


def test_defaults() -> None:
    config = ProbeConfig.from_options(site="CESNET-MCC", bdii=None, timeout=None)

    assert config.bdii == DEFAULT_BDII
    assert config.check_list == DEFAULT_CHECK_LIST
    assert config.verify_tls is False
    assert config.debug is False


def test_missing_site_is_config_error() -> None:
    with pytest.raises(ConfigError, match="Missing site-name parameter") as excinfo:
        ProbeConfig.from_options(site=None)

    assert excinfo.value.verdict is Verdict.ERROR


@pytest.mark.parametrize(
    "options",
    [
        {"site": "   "},
        {"site": "SITE", "timeout": 0},
        {"site": "SITE", "check_list": ""},
        {"site": "SITE", "unknown": "value"},
    ],
)
def test_invalid_options(options: dict[str, object]) -> None:
    with pytest.raises(ConfigError, match="Invalid configuration"):
        ProbeConfig.from_options(**options)


def test_config_is_frozen() -> None:
    config = ProbeConfig(site="SITE")

    with pytest.raises(ValidationError):
        config.site = "OTHER"  # type: ignore[misc]
