"""Domain errors — raised while building a message."""

from __future__ import annotations

from typing import Any

from sparkpost_transmission.kernel.errors.base import SparkPostError


class DomainError(SparkPostError):
    """Raised when a message cannot be assembled as requested."""

    default_code = "domain_error"


class EncodingError(DomainError):
    """A structured value could not be converted to its JSON wire form.

    ``field`` names the message field that rejected the value, e.g.
    ``metadata`` or ``substitution_data``.
    """

    default_code = "encoding_error"

    def __init__(
        self,
        message: str,
        *,
        field: str | None = None,
        value_type: str | None = None,
        **kwargs: Any,
    ) -> None:
        super().__init__(message, **kwargs)
        self.field = field
        self.value_type = value_type

    def _context(self) -> dict[str, Any]:
        return {"field": self.field, "value_type": self.value_type}


__all__ = ["DomainError", "EncodingError"]
