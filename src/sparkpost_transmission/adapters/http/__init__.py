"""HTTP adapter – async httpx client and the transmissions transport."""
from sparkpost_transmission.adapters.http.client import HttpxHttpClient
from sparkpost_transmission.adapters.http.transport import TransmissionTransport

__all__ = ["HttpxHttpClient", "TransmissionTransport"]
