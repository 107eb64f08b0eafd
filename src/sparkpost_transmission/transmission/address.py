"""Transmission – Address and Recipient value objects."""
from __future__ import annotations

import copy
from dataclasses import dataclass
from typing import Any

from sparkpost_transmission.kernel.types import JSONValue, to_json_value

__all__ = ["Address", "Recipient"]


@dataclass(frozen=True)
class Address:
    """An email endpoint with an optional display name.

    The address string is passed through untouched: no validation and no
    case normalisation happen at this layer.
    """

    email: str
    name: str | None = None

    @classmethod
    def coerce(cls, value: Address | str) -> Address:
        """Accept either an :class:`Address` or a bare address string."""
        if isinstance(value, Address):
            return value
        return cls(value)

    def to_wire(self) -> dict[str, str]:
        wire = {"email": self.email}
        if self.name is not None:
            wire["name"] = self.name
        return wire

    def __str__(self) -> str:
        if self.name:
            return f"{self.name} <{self.email}>"
        return self.email


@dataclass(frozen=True)
class Recipient:
    """One explicit recipient plus the data used to personalise its copy.

    ``substitution_data`` is converted to plain JSON on construction and
    raises :class:`~sparkpost_transmission.kernel.errors.EncodingError` when it
    has no JSON form.
    """

    address: Address
    substitution_data: JSONValue = None

    def __post_init__(self) -> None:
        object.__setattr__(
            self,
            "substitution_data",
            to_json_value(self.substitution_data, field="recipient.substitution_data"),
        )

    @classmethod
    def coerce(cls, value: Recipient | Address | str) -> Recipient:
        if isinstance(value, Recipient):
            return value
        return cls(Address.coerce(value))

    @classmethod
    def with_substitution(cls, address: Address | str, data: Any) -> Recipient:
        return cls(Address.coerce(address), data)

    def to_wire(self) -> dict[str, Any]:
        return {
            "address": self.address.to_wire(),
            "substitution_data": copy.deepcopy(self.substitution_data),
        }
