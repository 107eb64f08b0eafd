"""Kernel – framework-agnostic building blocks."""

from sparkpost_transmission.kernel.errors import (
    ApplicationError,
    DomainError,
    EncodingError,
    InfrastructureError,
    MalformedResponseError,
    SparkPostError,
    TransportError,
    TransportTimeoutError,
)
from sparkpost_transmission.kernel.types import JSONValue, to_json_value

__all__ = [
    "ApplicationError",
    "DomainError",
    "EncodingError",
    "InfrastructureError",
    "JSONValue",
    "MalformedResponseError",
    "SparkPostError",
    "TransportError",
    "TransportTimeoutError",
    "to_json_value",
]
