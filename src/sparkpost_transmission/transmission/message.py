"""Transmission – Message aggregate with chainable mutators.

Example::

    message = (
        Message(Address("marketing@example.com", "Example Company"))
        .add_recipient("wilma@example.com")
        .set_campaign_id("spring_sale")
        .set_subject("Hello {{first_name}}")
        .set_html("<p>Hi {{first_name}}</p>")
    )
"""
from __future__ import annotations

import copy
import json
from typing import Any

from sparkpost_transmission.kernel.types import JSONValue, to_json_value
from sparkpost_transmission.transmission.address import Address, Recipient
from sparkpost_transmission.transmission.content import Attachment, Content
from sparkpost_transmission.transmission.options import SendOptions
from sparkpost_transmission.transmission.recipients import RecipientList, RecipientSet

__all__ = ["Message"]


class Message:
    """One transmission: options, recipients and content.

    Every mutator returns the message itself. The transport only reads the
    message, so the same instance can be sent more than once.
    """

    def __init__(self, sender: Address | str, options: SendOptions | None = None) -> None:
        self.options: SendOptions = options or SendOptions()
        self.description: str | None = None
        self.campaign_id: str | None = None
        self.metadata: JSONValue = None
        self.substitution_data: JSONValue = None
        self.recipients: RecipientSet = RecipientList()
        self.content = Content(sender=Address.coerce(sender))

    @classmethod
    def with_options(cls, sender: Address | str, options: SendOptions) -> Message:
        return cls(sender, options)

    def __repr__(self) -> str:
        return (
            f"Message(sender={str(self.content.sender)!r}, "
            f"subject={self.content.subject!r}, recipients={self.recipients!r})"
        )

    # recipients
    def add_recipient(self, recipient: Recipient | Address | str) -> Message:
        """Add an explicit recipient, replacing one with the same email.

        Calling this while a stored list is set discards the stored list.
        """
        self.recipients = self.recipients.add_recipient(recipient)
        return self

    def set_stored_recipient_list(self, list_id: str) -> Message:
        """Send to a stored list instead; explicit recipients are discarded."""
        self.recipients = self.recipients.set_stored_list(list_id)
        return self

    # content
    def set_subject(self, subject: str) -> Message:
        self.content.subject = subject
        return self

    def set_html(self, html: str) -> Message:
        self.content.html = html
        return self

    def set_text(self, text: str) -> Message:
        self.content.text = text
        return self

    def set_template_id(self, template_id: str) -> Message:
        self.content.template_id = template_id
        return self

    def set_tags(self, tags: list[str]) -> Message:
        self.content.tags = list(tags)
        return self

    def add_tag(self, tag: str) -> Message:
        if self.content.tags is None:
            self.content.tags = []
        self.content.tags.append(tag)
        return self

    def add_attachment(self, attachment: Attachment) -> Message:
        self.content.attachments.append(attachment)
        return self

    # transmission-level fields
    def set_options(self, options: SendOptions) -> Message:
        self.options = options
        return self

    def set_campaign_id(self, campaign_id: str) -> Message:
        self.campaign_id = campaign_id
        return self

    def set_description(self, description: str) -> Message:
        self.description = description
        return self

    def set_metadata(self, metadata: Any) -> Message:
        """Attach arbitrary metadata; raises ``EncodingError`` if it has no JSON form."""
        self.metadata = to_json_value(metadata, field="metadata")
        return self

    def set_substitution_data(self, data: Any) -> Message:
        """Set message-wide template data; raises ``EncodingError`` if it has no JSON form."""
        self.substitution_data = to_json_value(data, field="substitution_data")
        return self

    # wire projection
    def to_dict(self) -> dict[str, Any]:
        """Return the JSON request body, leaving unset optional fields out.

        The body shares no mutable state with the message.
        """
        body: dict[str, Any] = {"options": self.options.to_wire()}
        if self.description is not None:
            body["description"] = self.description
        if self.campaign_id is not None:
            body["campaign_id"] = self.campaign_id
        if self.metadata is not None:
            body["metadata"] = copy.deepcopy(self.metadata)
        if self.substitution_data is not None:
            body["substitution_data"] = copy.deepcopy(self.substitution_data)
        body["recipients"] = self.recipients.to_wire()
        body["content"] = self.content.to_wire()
        return body

    def to_json(self) -> str:
        return json.dumps(self.to_dict(), ensure_ascii=False)
