"""HTTP adapter – TransmissionTransport for the SparkPost transmissions API.

Example::

    async with TransmissionTransport.eu(api_key) as transport:
        response = await transport.send(message)
        if response.is_failure():
            for error in response.errors:
                print(error.code, error.message)
"""
from __future__ import annotations

from collections.abc import Callable, Mapping
from typing import Any
from urllib.parse import quote

import httpx

from sparkpost_transmission.adapters.http.client import HttpxHttpClient
from sparkpost_transmission.config.settings import EU_BASE_URL, GLOBAL_BASE_URL, TransportSettings
from sparkpost_transmission.kernel.errors import MalformedResponseError, TransportError
from sparkpost_transmission.observability.logging import SensitiveFieldsFilter, get_logger
from sparkpost_transmission.transmission import (
    Address,
    LookupResponse,
    Message,
    SendOptions,
    TransmissionFailure,
    TransmissionResponse,
    TransmissionSuccess,
    decode_lookup,
    decode_response,
)

_JSON = "application/json"
_FIXED_HEADERS = frozenset({"accept", "content-type", "authorization"})


class TransmissionTransport:
    """Sends messages to ``{base_url}/transmissions`` and decodes the replies.

    Implements :class:`~sparkpost_transmission.transmission.TransmissionSender`.
    Provider rejections are returned as ``TransmissionFailure``; only
    transport problems and unrecognisable replies raise.
    """

    def __init__(
        self,
        api_key: str,
        base_url: str = GLOBAL_BASE_URL,
        *,
        timeout: float = 10.0,
        sandbox: bool = False,
        http_client: HttpxHttpClient | None = None,
    ) -> None:
        self._api_key = api_key
        self._base_url = base_url.rstrip("/")
        self._sandbox = sandbox
        self._http = http_client or HttpxHttpClient(timeout=timeout)
        self._redactor = SensitiveFieldsFilter()
        self._log = get_logger(__name__, base_url=self._base_url)

    @classmethod
    def eu(cls, api_key: str, **kwargs: Any) -> TransmissionTransport:
        """Transport bound to the EU region endpoint."""
        return cls(api_key, EU_BASE_URL, **kwargs)

    @classmethod
    def from_settings(cls, settings: TransportSettings, **kwargs: Any) -> TransmissionTransport:
        return cls(
            settings.api_key,
            settings.resolved_base_url,
            timeout=settings.timeout,
            sandbox=settings.sandbox,
            **kwargs,
        )

    async def __aenter__(self) -> TransmissionTransport:
        await self._http.__aenter__()
        return self

    async def __aexit__(self, *args: Any) -> None:
        await self._http.__aexit__(*args)

    async def aclose(self) -> None:
        await self._http.aclose()

    def __repr__(self) -> str:
        return f"TransmissionTransport(base_url={self._base_url!r})"

    @property
    def base_url(self) -> str:
        return self._base_url

    @property
    def transmissions_url(self) -> str:
        return f"{self._base_url}/transmissions"

    def new_message(self, sender: Address | str) -> Message:
        """Start a message whose options follow this transport's sandbox setting."""
        return Message.with_options(sender, SendOptions(sandbox=self._sandbox))

    def build_headers(self, extra: Mapping[str, str] | None = None) -> dict[str, str]:
        """Merge *extra* under the fixed JSON and authorization headers.

        Extra headers named like a fixed header, in any case, are dropped.
        """
        headers = {k: v for k, v in (extra or {}).items() if k.lower() not in _FIXED_HEADERS}
        headers["Accept"] = _JSON
        headers["Content-Type"] = _JSON
        headers["Authorization"] = self._api_key
        return headers

    async def send(self, message: Message) -> TransmissionResponse:
        """POST *message* as one transmission."""
        url = self.transmissions_url
        payload = await self._exchange("POST", url, json=message.to_dict())
        response = self._decode(decode_response, payload, url)
        if isinstance(response, TransmissionSuccess):
            self._log.info(
                "transmission.accepted",
                transmission_id=response.id,
                accepted=response.total_accepted_recipients,
                rejected=response.total_rejected_recipients,
            )
        else:
            self._log_rejection(response, url)
        return response

    async def scheduled_by_id(self, transmission_id: str) -> LookupResponse:
        """Fetch one scheduled transmission."""
        url = f"{self.transmissions_url}/{quote(transmission_id, safe='')}"
        payload = await self._exchange("GET", url)
        return self._lookup_result(self._decode(decode_lookup, payload, url), url)

    async def scheduled_transmissions(self, filters: Mapping[str, str] | None = None) -> LookupResponse:
        """List scheduled transmissions, optionally filtered.

        *filters* travel as request headers, e.g.
        ``{"campaign_id": "spring", "template_id": "welcome"}``.
        """
        url = self.transmissions_url
        payload = await self._exchange("GET", url, extra_headers=filters)
        return self._lookup_result(self._decode(decode_lookup, payload, url), url)

    async def _exchange(
        self,
        method: str,
        url: str,
        *,
        extra_headers: Mapping[str, str] | None = None,
        **kwargs: Any,
    ) -> Any:
        headers = self.build_headers(extra_headers)
        self._log.debug(
            "transmission.request", method=method, url=url, headers=self._redactor.redact(headers)
        )
        try:
            response = await self._http.request(method, url, headers=headers, **kwargs)
        except TransportError as exc:
            self._log.error("transmission.transport_failed", method=method, url=url, error=exc.message)
            raise
        return self._parse_json(response, method, url)

    def _parse_json(self, response: httpx.Response, method: str, url: str) -> Any:
        try:
            return response.json()
        except ValueError as exc:
            self._log.error(
                "transmission.transport_failed",
                method=method,
                url=url,
                status_code=response.status_code,
                error="non-JSON body",
            )
            raise TransportError(
                url,
                f"Non-JSON reply (HTTP {response.status_code}) from {method} {url}",
                status_code=response.status_code,
                cause=exc,
            ) from exc

    def _decode(self, decoder: Callable[[Any], Any], payload: Any, url: str) -> Any:
        try:
            return decoder(payload)
        except MalformedResponseError as exc:
            self._log.error("transmission.malformed", url=url, error=exc.message)
            raise

    def _lookup_result(self, response: LookupResponse, url: str) -> LookupResponse:
        if isinstance(response, TransmissionFailure):
            self._log_rejection(response, url)
        return response

    def _log_rejection(self, response: TransmissionFailure, url: str) -> None:
        self._log.warning(
            "transmission.rejected",
            url=url,
            error_count=len(response.errors),
            codes=[e.code for e in response.errors],
        )


__all__ = ["TransmissionTransport"]
