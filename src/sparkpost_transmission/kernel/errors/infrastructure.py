"""Infrastructure errors — HTTP exchange and reply decoding failures."""

from __future__ import annotations

from typing import Any

from sparkpost_transmission.kernel.errors.base import SparkPostError


class InfrastructureError(SparkPostError):
    """I/O failure that is not a provider decision."""

    default_code = "infrastructure_error"


class TransportError(InfrastructureError):
    """The HTTP exchange with the provider did not complete.

    Covers refused connections, protocol errors and bodies that are not JSON.
    """

    default_code = "transport_error"

    def __init__(
        self,
        url: str,
        message: str | None = None,
        *,
        status_code: int | None = None,
        **kwargs: Any,
    ) -> None:
        super().__init__(message or f"Request to '{url}' failed", **kwargs)
        self.url = url
        self.status_code = status_code

    def _context(self) -> dict[str, Any]:
        context: dict[str, Any] = {"url": self.url}
        if self.status_code is not None:
            context["status_code"] = self.status_code
        return context


class TransportTimeoutError(TransportError):
    """The provider did not answer before the client timeout."""

    default_code = "transport_timeout"


class MalformedResponseError(InfrastructureError):
    """The provider answered with JSON that is neither a result nor an error list."""

    default_code = "malformed_response"

    def __init__(
        self,
        message: str,
        *,
        payload: Any = None,
        **kwargs: Any,
    ) -> None:
        super().__init__(message, **kwargs)
        self.payload = payload

    def _context(self) -> dict[str, Any]:
        # body is kept on the instance, not in the log payload
        return {"payload_type": type(self.payload).__name__}


__all__ = [
    "InfrastructureError",
    "MalformedResponseError",
    "TransportError",
    "TransportTimeoutError",
]
