"""Config settings – TransportSettings for the SparkPost transport."""
from __future__ import annotations

import dataclasses
from typing import ClassVar

from sparkpost_transmission.config.settings.base import Settings

GLOBAL_BASE_URL = "https://api.sparkpost.com/api/v1"
EU_BASE_URL = "https://api.eu.sparkpost.com/api/v1"

REGION_BASE_URLS: dict[str, str] = {
    "global": GLOBAL_BASE_URL,
    "eu": EU_BASE_URL,
}


@dataclasses.dataclass
class TransportSettings(Settings):
    """Credential and endpoint for the transport.

    Loaded from ``SPARKPOST_API_KEY``, ``SPARKPOST_REGION``,
    ``SPARKPOST_BASE_URL``, ``SPARKPOST_TIMEOUT`` and ``SPARKPOST_SANDBOX``.
    ``base_url`` wins over ``region`` when both are set.
    """

    _prefix: ClassVar[str] = "SPARKPOST"

    api_key: str
    region: str = "global"
    base_url: str = ""
    timeout: float = 10.0
    sandbox: bool = False

    def _validate(self) -> None:
        if not self.api_key.strip():
            raise self._invalid("api_key", "must not be empty")
        self.region = self.region.lower()
        if self.region not in REGION_BASE_URLS:
            raise self._invalid("region", f"expected one of {sorted(REGION_BASE_URLS)}")
        if self.timeout <= 0:
            raise self._invalid("timeout", "must be positive")

    @property
    def resolved_base_url(self) -> str:
        return (self.base_url or REGION_BASE_URLS[self.region]).rstrip("/")


__all__ = ["EU_BASE_URL", "GLOBAL_BASE_URL", "REGION_BASE_URLS", "TransportSettings"]
