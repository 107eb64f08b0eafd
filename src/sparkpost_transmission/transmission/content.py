"""Transmission – Content and Attachment value objects."""
from __future__ import annotations

from dataclasses import dataclass, field
from typing import Any

from sparkpost_transmission.transmission.address import Address

__all__ = ["Attachment", "Content"]


@dataclass(frozen=True)
class Attachment:
    """A file attachment; ``data`` is already base64 encoded."""

    name: str
    mime_type: str
    data: str

    def __repr__(self) -> str:
        return f"Attachment(name={self.name!r}, mime_type={self.mime_type!r}, size={len(self.data)})"

    def to_wire(self) -> dict[str, str]:
        return {"name": self.name, "type": self.mime_type, "data": self.data}


@dataclass
class Content:
    """Sender, subject and body variants of a transmission."""

    sender: Address
    subject: str = ""
    tags: list[str] | None = None
    text: str | None = None
    html: str | None = None
    template_id: str | None = None
    attachments: list[Attachment] = field(default_factory=list)

    def to_wire(self) -> dict[str, Any]:
        wire: dict[str, Any] = {
            "from": self.sender.to_wire(),
            "subject": self.subject,
        }
        if self.tags is not None:
            wire["tags"] = list(self.tags)
        if self.text is not None:
            wire["text"] = self.text
        if self.html is not None:
            wire["html"] = self.html
        if self.template_id is not None:
            wire["template_id"] = self.template_id
        if self.attachments:
            wire["attachments"] = [a.to_wire() for a in self.attachments]
        return wire
