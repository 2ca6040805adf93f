"""Transport layer interface: messages, errors and the transport contract."""

from __future__ import annotations

from abc import ABC, abstractmethod
from dataclasses import dataclass, field

from arxia.errors import ArxiaError


@dataclass
class TransportMessage:
    """A message carried by a transport."""

    from_id: str
    """Sender identifier (hex-encoded public key)."""
    to: str
    """Recipient identifier, or empty for broadcast."""
    payload: bytes = field(default=b"")
    """Raw payload bytes."""
    timestamp: int = 0
    """Creation time in milliseconds since the UNIX epoch."""

    def __post_init__(self) -> None:
        self.payload = bytes(self.payload)


class TransportError(ArxiaError):
    """A failure at the transport layer."""

    def __init__(self, reason: str) -> None:
        self.reason = reason
        super().__init__(f"transport error: {reason}")

    def _set_message(self, message: str) -> None:
        self.reason = message
        self.args = (message,)


class PayloadTooLargeError(TransportError):
    """The payload exceeds the transport's MTU."""

    def __init__(self, size: int, max_size: int) -> None:
        super().__init__("")
        self.size = size
        self.max_size = max_size
        self._set_message(f"payload too large: {size} > {max_size}")


class DisconnectedError(TransportError):
    """The transport channel is disconnected."""

    def __init__(self) -> None:
        super().__init__("")
        self._set_message("transport disconnected")


class MessageLostError(TransportError):
    """The message was lost in transit."""

    def __init__(self) -> None:
        super().__init__("")
        self._set_message("message lost")


class Transport(ABC):
    """Contract shared by every transport implementation."""

    @abstractmethod
    def send(self, msg: TransportMessage) -> None:
        """Send a message to a peer or broadcast it; raises TransportError."""

    @abstractmethod
    def try_recv(self) -> TransportMessage | None:
        """Return a pending message without blocking, or None."""

    @abstractmethod
    def mtu(self) -> int:
        """Maximum transmission unit in bytes."""