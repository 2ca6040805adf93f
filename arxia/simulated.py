"""Simulated in-memory transport with configurable latency and packet loss.

Packet loss uses a deterministic xorshift64 generator for reproducibility.
"""

from __future__ import annotations

import math
from collections import deque

from arxia.transport import (
    MessageLostError,
    PayloadTooLargeError,
    Transport,
    TransportMessage,
)

_U64_MASK = (1 << 64) - 1
_INITIAL_RNG_STATE = 0xDEAD_BEEF_CAFE_BABE


def xorshift64(state: int) -> int:
    """Advance a xorshift64 generator; the new state is also the output."""
    x = state & _U64_MASK
    x ^= (x << 13) & _U64_MASK
    x ^= x >> 7
    x ^= (x << 17) & _U64_MASK
    return x


def _loss_threshold(loss_rate: float) -> int:
    if math.isnan(loss_rate) or loss_rate <= 0:
        return 0
    scaled = loss_rate * float(_U64_MASK)
    if math.isinf(scaled):
        return _U64_MASK
    return min(int(scaled), _U64_MASK)


class SimulatedTransport(Transport):
    """Transport backed by in-memory queues, for tests and simulations."""

    def __init__(self, latency_ms: int, loss_rate: float, mtu: int) -> None:
        self._inbox: deque[TransportMessage] = deque()
        self._outbox: list[TransportMessage] = []
        self._latency_ms = latency_ms
        self._loss_rate = loss_rate
        self._mtu = mtu
        self._rng_state = _INITIAL_RNG_STATE

    @classmethod
    def lora(cls) -> SimulatedTransport:
        """A transport with LoRa-like parameters."""
        return cls(2000, 0.05, 256)

    @classmethod
    def ble(cls) -> SimulatedTransport:
        """A transport with BLE-like parameters."""
        return cls(50, 0.01, 512)

    def inject_message(self, msg: TransportMessage) -> None:
        """Queue a message for a later try_recv."""
        self._inbox.append(msg)

    def sent_messages(self) -> tuple[TransportMessage, ...]:
        """Every message successfully sent so far."""
        return tuple(self._outbox)

    def latency_ms(self) -> int:
        """The configured latency in milliseconds."""
        return self._latency_ms

    def send(self, msg: TransportMessage) -> None:
        """Record the message, or raise if it is too large or lost."""
        if len(msg.payload) > self._mtu:
            raise PayloadTooLargeError(len(msg.payload), self._mtu)
        self._rng_state = xorshift64(self._rng_state)
        if self._rng_state < _loss_threshold(self._loss_rate):
            raise MessageLostError()
        self._outbox.append(msg)

    def try_recv(self) -> TransportMessage | None:
        """Pop the oldest injected message, or None when there is none."""
        return self._inbox.popleft() if self._inbox else None

    def mtu(self) -> int:
        """Maximum transmission unit in bytes."""
        return self._mtu