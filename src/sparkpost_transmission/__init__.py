"""
sparkpost_transmission – compose and send SparkPost transmissions.

Import path convention::

    from sparkpost_transmission.transmission import Address, Message, SendOptions
    from sparkpost_transmission.adapters.http import TransmissionTransport
    from sparkpost_transmission.kernel.errors import TransportError
"""

from sparkpost_transmission.adapters.http import TransmissionTransport
from sparkpost_transmission.transmission import (
    Address,
    Attachment,
    Message,
    Recipient,
    SendOptions,
    TransmissionFailure,
    TransmissionSuccess,
)

__version__ = "0.1.0"
__all__ = [
    "Address",
    "Attachment",
    "Message",
    "Recipient",
    "SendOptions",
    "TransmissionFailure",
    "TransmissionSuccess",
    "TransmissionTransport",
    "__version__",
]
