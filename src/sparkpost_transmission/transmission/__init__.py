"""Transmission – message model, reply decoding and the sender port."""
from sparkpost_transmission.transmission.address import Address, Recipient
from sparkpost_transmission.transmission.content import Attachment, Content
from sparkpost_transmission.transmission.in_memory import InMemoryTransmissionSender
from sparkpost_transmission.transmission.message import Message
from sparkpost_transmission.transmission.options import SendOptions
from sparkpost_transmission.transmission.recipients import (
    RecipientList,
    RecipientSet,
    StoredRecipientList,
)
from sparkpost_transmission.transmission.response import (
    ApiError,
    LookupResponse,
    TransmissionFailure,
    TransmissionLookup,
    TransmissionResponse,
    TransmissionSuccess,
    decode_lookup,
    decode_response,
)
from sparkpost_transmission.transmission.sender import TransmissionSender

__all__ = [
    "Address",
    "ApiError",
    "Attachment",
    "Content",
    "InMemoryTransmissionSender",
    "LookupResponse",
    "Message",
    "Recipient",
    "RecipientList",
    "RecipientSet",
    "SendOptions",
    "StoredRecipientList",
    "TransmissionFailure",
    "TransmissionLookup",
    "TransmissionResponse",
    "TransmissionSender",
    "TransmissionSuccess",
    "decode_lookup",
    "decode_response",
]
