"""HTTP adapter – HttpxHttpClient."""
from __future__ import annotations

from typing import Any

import httpx

from sparkpost_transmission.kernel.errors import TransportError, TransportTimeoutError


class HttpxHttpClient:
    """Thin async httpx wrapper with structured error mapping.

    Non-2xx responses are returned, not raised: the provider reports its own
    refusals in the body of 4xx replies.
    """

    def __init__(self, base_url: str = "", timeout: float = 10.0, **kwargs: Any) -> None:
        self._client = httpx.AsyncClient(base_url=base_url, timeout=timeout, **kwargs)

    async def __aenter__(self) -> "HttpxHttpClient":
        await self._client.__aenter__()
        return self

    async def __aexit__(self, *args: Any) -> None:
        await self._client.__aexit__(*args)

    async def aclose(self) -> None:
        await self._client.aclose()

    async def get(self, url: str, **kwargs: Any) -> httpx.Response:
        return await self.request("GET", url, **kwargs)

    async def post(self, url: str, **kwargs: Any) -> httpx.Response:
        return await self.request("POST", url, **kwargs)

    async def request(self, method: str, url: str, **kwargs: Any) -> httpx.Response:
        try:
            return await self._client.request(method, url, **kwargs)
        except httpx.TimeoutException as exc:
            raise TransportTimeoutError(
                url, f"HTTP request timed out: {method} {url}", cause=exc
            ) from exc
        except httpx.HTTPError as exc:
            raise TransportError(url, f"HTTP request failed: {method} {url}: {exc}", cause=exc) from exc


__all__ = ["HttpxHttpClient"]
