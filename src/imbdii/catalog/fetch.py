# SPDX-License-Identifier: MIT
# Copyright (c) 2025 Blackcat Informatics® Inc.
"""HTTP retrieval of the image list."""

from __future__ import annotations

import logging

import httpx

from ..errors import CatalogUnavailableError

logger = logging.getLogger(__name__)

DOWN_MESSAGE = "Failed to access the image list. Is the image list server down?"


def fetch_catalog(
    url: str,
    *,
    timeout: float,
    verify: bool = False,
    client: httpx.Client | None = None,
) -> str:
    """Download the image list at *url* and return its body as text.

    Args:
        url: Location of the vmcatcher image list.
        timeout: Request timeout in seconds.
        verify: Validate the server certificate. Disabled by default because
            the image list endpoints are commonly served by grid CAs that are
            not in the system trust store.
        client: Optional pre-built client, used as is.

    Returns:
        str: Response body.

    Raises:
        CatalogUnavailableError: On transport failure, a non-2xx status or an
            empty body.
    """

    logger.debug("Getting images info from the image list %s", url)
    try:
        if client is not None:
            response = client.get(url, timeout=timeout)
        else:
            with httpx.Client(verify=verify, timeout=timeout, follow_redirects=True) as owned:
                response = owned.get(url)
        response.raise_for_status()
    except httpx.HTTPStatusError as exc:
        logger.debug("Image list request returned HTTP %s", exc.response.status_code)
        raise CatalogUnavailableError(DOWN_MESSAGE) from exc
    except httpx.HTTPError as exc:
        logger.debug("Image list request failed: %s", exc)
        raise CatalogUnavailableError(DOWN_MESSAGE) from exc

    body = response.text
    if not body.strip():
        raise CatalogUnavailableError(empty_list_message(url))
    return body


def empty_list_message(url: str) -> str:
    """Return the warning text used when the image list yields no images."""

    return f"Image list is empty, unaccessible or we failed to parse it. Please check curl -s -k {url}"


__all__ = ["DOWN_MESSAGE", "empty_list_message", "fetch_catalog"]
