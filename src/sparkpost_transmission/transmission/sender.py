"""Transmission – TransmissionSender Protocol (port)."""
from __future__ import annotations

from typing import Protocol, runtime_checkable

from sparkpost_transmission.transmission.message import Message
from sparkpost_transmission.transmission.response import TransmissionResponse

__all__ = ["TransmissionSender"]


@runtime_checkable
class TransmissionSender(Protocol):
    """Port: submit a message as one transmission."""

    async def send(self, message: Message) -> TransmissionResponse:
        """Send *message*; provider rejections come back as ``TransmissionFailure``."""
        ...
