# SPDX-License-Identifier: MIT
# Copyright (c) 2025 Blackcat Informatics® Inc.
"""Immutable run configuration for the image list / BDII probe."""

from __future__ import annotations

from typing import Any, Final

from pydantic import BaseModel, ConfigDict, Field, ValidationError, field_validator

from .errors import ProbeError

SITE_PLACEHOLDER: Final[str] = "#site-name#"

DEFAULT_BDII: Final[str] = "ldap://lcg-bdii.cern.ch:2170"
DEFAULT_BASE_DN: Final[str] = f"GLUE2GroupID=cloud,GLUE2DomainID={SITE_PLACEHOLDER},GLUE2GroupID=grid,o=glue"
DEFAULT_IMAGE_OBJECT: Final[str] = "GLUE2ApplicationEnvironment"
DEFAULT_IMAGE_LIST: Final[str] = "https://vmcaster.appdb.egi.eu/store/vo/fedcloud.egi.eu/image.list"
DEFAULT_CHECK_LIST: Final[str] = "GLUE2ApplicationEnvironmentRepository=#ad:mpuri#"
DEFAULT_TIMEOUT: Final[float] = 60.0
DEFAULT_FIELD_SEPARATOR: Final[str] = '"'


class ConfigError(ProbeError):
    """Raised when configuration input is invalid."""


class ProbeConfig(BaseModel):
    """Settings for one probe run, constructed once and never mutated."""

    model_config = ConfigDict(frozen=True, extra="forbid")

    site: str
    bdii: str = DEFAULT_BDII
    image_list: str = DEFAULT_IMAGE_LIST
    base_dn: str = DEFAULT_BASE_DN
    image_object: str = DEFAULT_IMAGE_OBJECT
    check_list: str = DEFAULT_CHECK_LIST
    field_separator: str = Field(default=DEFAULT_FIELD_SEPARATOR, min_length=1)
    debug: bool = False
    timeout: float = Field(default=DEFAULT_TIMEOUT, gt=0)
    verify_tls: bool = False

    @field_validator("site", "bdii", "image_list", "base_dn", "image_object", "check_list")
    @classmethod
    def _require_text(cls, value: str) -> str:
        stripped = value.strip()
        if not stripped:
            raise ValueError("must not be blank")
        return stripped

    @classmethod
    def from_options(cls, **options: Any) -> ProbeConfig:
        """Build a configuration, translating validation failures into :class:`ConfigError`.

        ``None`` values are dropped so the model defaults apply.
        """

        supplied = {key: value for key, value in options.items() if value is not None}
        if not supplied.get("site"):
            raise ConfigError("Missing site-name parameter. See usage.")
        try:
            return cls(**supplied)
        except ValidationError as exc:
            details = "; ".join(
                f"{'.'.join(str(part) for part in error['loc'])}: {error['msg']}" for error in exc.errors()
            )
            raise ConfigError(f"Invalid configuration: {details}") from exc


__all__ = [
    "DEFAULT_BASE_DN",
    "DEFAULT_BDII",
    "DEFAULT_CHECK_LIST",
    "DEFAULT_FIELD_SEPARATOR",
    "DEFAULT_IMAGE_LIST",
    "DEFAULT_IMAGE_OBJECT",
    "DEFAULT_TIMEOUT",
    "SITE_PLACEHOLDER",
    "ConfigError",
    "ProbeConfig",
]
