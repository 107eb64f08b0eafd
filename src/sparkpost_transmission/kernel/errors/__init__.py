"""Kernel error hierarchy — public re-export surface.

Hierarchy::

    SparkPostError
    ├── DomainError             (domain.py)
    │   └── EncodingError
    ├── ApplicationError        (application.py)
    │   └── ConfigError         (config/validation)
    └── InfrastructureError     (infrastructure.py)
        ├── TransportError
        │   └── TransportTimeoutError
        └── MalformedResponseError

A provider rejection is not an error: it decodes to
:class:`~sparkpost_transmission.transmission.TransmissionFailure`.
"""

from sparkpost_transmission.kernel.errors.application import ApplicationError
from sparkpost_transmission.kernel.errors.base import SparkPostError
from sparkpost_transmission.kernel.errors.domain import DomainError, EncodingError
from sparkpost_transmission.kernel.errors.infrastructure import (
    InfrastructureError,
    MalformedResponseError,
    TransportError,
    TransportTimeoutError,
)

__all__ = [
    "ApplicationError",
    "DomainError",
    "EncodingError",
    "InfrastructureError",
    "MalformedResponseError",
    "SparkPostError",
    "TransportError",
    "TransportTimeoutError",
]
