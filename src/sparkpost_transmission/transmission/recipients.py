"""Transmission – RecipientSet: an explicit list or a stored-list reference.

The two variants serialise to structurally different JSON (an array versus an
object) so they are separate classes sharing one method surface. Every
transition goes through the value returned by the call, e.g.::

    recipients = recipients.add_recipient("a@example.com")
    recipients = recipients.set_stored_list("newsletter")
"""
from __future__ import annotations

from collections.abc import Iterator
from dataclasses import dataclass, field
from typing import Any

from sparkpost_transmission.transmission.address import Address, Recipient

__all__ = ["RecipientList", "RecipientSet", "StoredRecipientList"]


@dataclass
class RecipientList:
    """Explicit recipients in wire order, unique by ``address.email``."""

    recipients: list[Recipient] = field(default_factory=list)

    def add_recipient(self, target: Recipient | Address | str) -> RecipientList:
        """Append *target*, dropping any earlier entry with the same email.

        The match is exact and case-sensitive. A replaced entry does not keep
        its position: the new one always lands at the end.
        """
        recipient = Recipient.coerce(target)
        email = recipient.address.email
        self.recipients = [r for r in self.recipients if r.address.email != email]
        self.recipients.append(recipient)
        return self

    def set_stored_list(self, name: str) -> StoredRecipientList:
        return StoredRecipientList(name)

    def to_wire(self) -> list[dict[str, Any]]:
        return [recipient.to_wire() for recipient in self.recipients]

    def __len__(self) -> int:
        return len(self.recipients)

    def __iter__(self) -> Iterator[Recipient]:
        return iter(self.recipients)


@dataclass(frozen=True)
class StoredRecipientList:
    """Reference to a recipient list stored in the provider account."""

    list_id: str

    def add_recipient(self, target: Recipient | Address | str) -> RecipientList:
        """Start a fresh explicit list; the stored-list reference is dropped."""
        return RecipientList([Recipient.coerce(target)])

    def set_stored_list(self, name: str) -> StoredRecipientList:
        return StoredRecipientList(name)

    def to_wire(self) -> dict[str, str]:
        return {"list_id": self.list_id}


type RecipientSet = RecipientList | StoredRecipientList
