"""Test doubles and sample payloads shared by the probe tests."""

from __future__ import annotations

from collections.abc import Sequence

from imbdii.errors import RegistryUnavailableError

IMAGE_LIST = """{
  "hv:imagelist": {
    "dc:date:created": "2025-03-01T10:00:00Z",
    "dc:identifier": "a1b2c3d4-fedcloud",
    "dc:title": "fedcloud.egi.eu",
    "hv:images": [
      {
        "hv:image": {
          "ad:mpuri": "https://appdb.egi.eu/store/vm/image/ubuntu-22.04:101/",
          "dc:identifier": "ubuntu-22.04",
          "dc:title": "Image for Ubuntu 22.04",
          "hv:version": "2025.02.01"
        }
      },
      {
        "hv:image": {
          "ad:mpuri": "https://appdb.egi.eu/store/vm/image/centos-stream-9:205/",
          "dc:identifier": "centos-stream-9",
          "dc:title": "Image for CentOS Stream 9",
          "hv:version": "9.20250115"
        }
      },
      {
        "hv:image": {
          "ad:mpuri": "https://appdb.egi.eu/store/vm/image/almalinux-9:310/",
          "dc:identifier": "almalinux-9",
          "dc:title": "Image for AlmaLinux 9",
          "hv:version": "9.5"
        }
      }
    ]
  }
}
"""

MPURIS = (
    "https://appdb.egi.eu/store/vm/image/ubuntu-22.04:101/",
    "https://appdb.egi.eu/store/vm/image/centos-stream-9:205/",
    "https://appdb.egi.eu/store/vm/image/almalinux-9:310/",
)


class FakeProber:
    """Directory double returning scripted counts, or raising, per query."""

    def __init__(self, results: Sequence[int | Exception]) -> None:
        self._results = list(results)
        self.calls: list[tuple[str, str]] = []

    def count(self, base_dn: str, ldap_filter: str) -> int:
        index = len(self.calls)
        self.calls.append((base_dn, ldap_filter))
        result = self._results[index % len(self._results)]
        if isinstance(result, Exception):
            raise result
        return result


class FakeFetcher:
    """Image list double recording the requested URL."""

    def __init__(self, body: str | Exception) -> None:
        self._body = body
        self.calls: list[tuple[str, float, bool]] = []

    def __call__(self, url: str, *, timeout: float, verify: bool = False) -> str:
        self.calls.append((url, timeout, verify))
        if isinstance(self._body, Exception):
            raise self._body
        return self._body


def transport_failure() -> RegistryUnavailableError:
    return RegistryUnavailableError(
        "Failed to contact the LDAP server. Is the top BDII down?",
        returncode=255,
        stderr="ldap_sasl_bind(SIMPLE): Can't contact LDAP server (-1)",
    )
