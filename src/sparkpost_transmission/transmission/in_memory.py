"""Transmission – InMemoryTransmissionSender for unit tests."""
from __future__ import annotations

import uuid
from typing import Any

from sparkpost_transmission.transmission.message import Message
from sparkpost_transmission.transmission.recipients import RecipientList
from sparkpost_transmission.transmission.response import (
    TransmissionFailure,
    TransmissionResponse,
    TransmissionSuccess,
)

__all__ = ["InMemoryTransmissionSender"]


class InMemoryTransmissionSender:
    """Fake TransmissionSender that captures wire bodies in memory.

    Explicit recipients are all counted as accepted; a stored list counts as
    zero because its size is only known to the provider. Queue a failure with
    :meth:`fail_next` to exercise rejection handling.
    """

    def __init__(self) -> None:
        self.sent: list[dict[str, Any]] = []
        self._pending_failures: list[TransmissionFailure] = []

    async def send(self, message: Message) -> TransmissionResponse:
        self.sent.append(message.to_dict())
        if self._pending_failures:
            return self._pending_failures.pop(0)
        accepted = len(message.recipients) if isinstance(message.recipients, RecipientList) else 0
        return TransmissionSuccess(
            total_accepted_recipients=accepted,
            total_rejected_recipients=0,
            id=str(uuid.uuid4()),
        )

    def fail_next(self, failure: TransmissionFailure) -> None:
        self._pending_failures.append(failure)

    def reset(self) -> None:
        """Clear the outbox and any queued failures."""
        self.sent.clear()
        self._pending_failures.clear()

    # convenience helpers
    @property
    def count(self) -> int:
        return len(self.sent)

    def last(self) -> dict[str, Any] | None:
        return self.sent[-1] if self.sent else None
