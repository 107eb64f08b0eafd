"""Transmission – provider reply variants and their decoding.

The provider answers with an object holding either ``results`` or ``errors``.
A reply carrying neither is a :class:`MalformedResponseError`; a reply carrying
``errors`` is an ordinary :class:`TransmissionFailure` value, never raised.
"""
from __future__ import annotations

from dataclasses import dataclass, field
from typing import Any

from sparkpost_transmission.kernel.errors import MalformedResponseError
from sparkpost_transmission.kernel.types import JSONValue

__all__ = [
    "ApiError",
    "LookupResponse",
    "TransmissionFailure",
    "TransmissionLookup",
    "TransmissionResponse",
    "TransmissionSuccess",
    "decode_lookup",
    "decode_response",
]


@dataclass(frozen=True)
class ApiError:
    """One structured error reported by the provider."""

    description: str | None = None
    code: str | None = None
    message: str | None = None


@dataclass(frozen=True)
class TransmissionSuccess:
    """The provider accepted the transmission."""

    total_accepted_recipients: int
    total_rejected_recipients: int
    id: str

    def is_success(self) -> bool:
        return True

    def is_failure(self) -> bool:
        return False


@dataclass(frozen=True)
class TransmissionFailure:
    """The provider refused the request (bad recipients, template, quota…)."""

    errors: list[ApiError] = field(default_factory=list)

    def is_success(self) -> bool:
        return False

    def is_failure(self) -> bool:
        return True


@dataclass(frozen=True)
class TransmissionLookup:
    """``results`` of a scheduled-transmission query, left as JSON."""

    results: JSONValue

    def is_success(self) -> bool:
        return True

    def is_failure(self) -> bool:
        return False


type TransmissionResponse = TransmissionSuccess | TransmissionFailure
type LookupResponse = TransmissionLookup | TransmissionFailure


def decode_response(payload: Any) -> TransmissionResponse:
    """Decode the reply to a transmission POST."""
    if not isinstance(payload, dict):
        raise MalformedResponseError(
            f"Expected a JSON object, got {type(payload).__name__}", payload=payload
        )
    if "results" in payload:
        return _decode_success(payload["results"], payload)
    if "errors" in payload:
        return _decode_failure(payload["errors"], payload)
    raise MalformedResponseError(
        "Reply carries neither 'results' nor 'errors'", payload=payload
    )


def decode_lookup(payload: Any) -> LookupResponse:
    """Decode the reply to a scheduled-transmission GET."""
    if not isinstance(payload, dict):
        raise MalformedResponseError(
            f"Expected a JSON object, got {type(payload).__name__}", payload=payload
        )
    if "results" in payload:
        return TransmissionLookup(payload["results"])
    if "errors" in payload:
        return _decode_failure(payload["errors"], payload)
    raise MalformedResponseError(
        "Reply carries neither 'results' nor 'errors'", payload=payload
    )


def _decode_success(results: Any, payload: dict[str, Any]) -> TransmissionSuccess:
    if not isinstance(results, dict):
        raise MalformedResponseError("'results' must be an object", payload=payload)
    accepted = results.get("total_accepted_recipients")
    rejected = results.get("total_rejected_recipients")
    transmission_id = results.get("id")
    for name, count in (
        ("total_accepted_recipients", accepted),
        ("total_rejected_recipients", rejected),
    ):
        # bool is an int subclass
        if isinstance(count, bool) or not isinstance(count, int) or count < 0:
            raise MalformedResponseError(
                f"'results.{name}' must be a non-negative integer", payload=payload
            )
    if not isinstance(transmission_id, str):
        raise MalformedResponseError("'results.id' must be a string", payload=payload)
    return TransmissionSuccess(
        total_accepted_recipients=accepted,
        total_rejected_recipients=rejected,
        id=transmission_id,
    )


def _decode_failure(errors: Any, payload: dict[str, Any]) -> TransmissionFailure:
    if not isinstance(errors, list):
        raise MalformedResponseError("'errors' must be an array", payload=payload)
    decoded: list[ApiError] = []
    for item in errors:
        if not isinstance(item, dict):
            raise MalformedResponseError("'errors' entries must be objects", payload=payload)
        decoded.append(
            ApiError(
                description=_optional_str(item.get("description"), "description", payload),
                code=_optional_str(item.get("code"), "code", payload),
                message=_optional_str(item.get("message"), "message", payload),
            )
        )
    return TransmissionFailure(decoded)


def _optional_str(value: Any, name: str, payload: dict[str, Any]) -> str | None:
    if value is None or isinstance(value, str):
        return value
    # numeric error codes are tolerated
    if isinstance(value, int) and not isinstance(value, bool):
        return str(value)
    raise MalformedResponseError(f"'errors[].{name}' must be a string", payload=payload)
