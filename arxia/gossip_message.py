"""Messages exchanged between gossip peers."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Union

_U8_MAX = 0xFF
_HASH_LEN = 32


@dataclass(frozen=True)
class BlockAnnounce:
    """A new block to propagate, in compact serialized form."""

    block_data: bytes
    hops: int

    def __post_init__(self) -> None:
        if not 0 <= self.hops <= _U8_MAX:
            raise ValueError(f"hops must fit in one byte, got {self.hops}")
        object.__setattr__(self, "block_data", bytes(self.block_data))


@dataclass(frozen=True)
class NonceSyncRequest:
    """Request for nonce registry synchronisation."""

    from_node: str


@dataclass(frozen=True)
class NonceSyncResponse:
    """Nonce registry entries: (block hash, nonce, account hash)."""

    entries: tuple[tuple[bytes, int, bytes], ...]

    def __post_init__(self) -> None:
        entries = tuple(
            (bytes(block_hash), nonce, bytes(account))
            for block_hash, nonce, account in self.entries
        )
        for block_hash, _, account in entries:
            if len(block_hash) != _HASH_LEN or len(account) != _HASH_LEN:
                raise ValueError("registry entry hashes must be 32 bytes")
        object.__setattr__(self, "entries", entries)


@dataclass(frozen=True)
class Ping:
    """Heartbeat carrying the sender id and a timestamp."""

    node_id: str
    timestamp: int


GossipMessage = Union[BlockAnnounce, NonceSyncRequest, NonceSyncResponse, Ping]