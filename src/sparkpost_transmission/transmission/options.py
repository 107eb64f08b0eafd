"""Transmission – SendOptions value object."""
from __future__ import annotations

import datetime
from dataclasses import dataclass
from typing import Any

__all__ = ["SendOptions"]

_WIRE_TIME_FORMAT = "%Y-%m-%dT%H:%M:%SZ"


@dataclass(frozen=True)
class SendOptions:
    """Delivery flags for one transmission.

    ``sandbox`` defaults to ``False``; use :meth:`sandboxed` for the profile
    that keeps mail inside the provider's sink.
    """

    open_tracking: bool = False
    click_tracking: bool = False
    transactional: bool = False
    sandbox: bool = False
    inline_css: bool = False
    start_time: datetime.datetime | None = None

    @classmethod
    def sandboxed(cls, **overrides: Any) -> SendOptions:
        return cls(**{"sandbox": True, **overrides})

    def to_wire(self) -> dict[str, Any]:
        wire: dict[str, Any] = {
            "open_tracking": self.open_tracking,
            "click_tracking": self.click_tracking,
            "transactional": self.transactional,
            "sandbox": self.sandbox,
            "inline_css": self.inline_css,
        }
        if self.start_time is not None:
            wire["start_time"] = _format_start_time(self.start_time)
        return wire


def _format_start_time(value: datetime.datetime) -> str:
    # naive datetimes are taken as UTC
    if value.tzinfo is None:
        value = value.replace(tzinfo=datetime.UTC)
    return value.astimezone(datetime.UTC).strftime(_WIRE_TIME_FORMAT)
