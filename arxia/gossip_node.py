"""A node participating in the gossip mesh."""

from __future__ import annotations

from collections.abc import Mapping

from arxia.block import Block
from arxia.nonce_registry import (
    Registry,
    SyncResult,
    merge_nonce_registries,
    sync_nonces_before_l1,
)

_HASH_LEN = 32


def _hex_to_32(value: str) -> bytes:
    """Decode hex to exactly 32 bytes; anything else becomes all zeros."""
    try:
        raw = bytes.fromhex(value)
    except ValueError:
        return bytes(_HASH_LEN)
    return raw if len(raw) == _HASH_LEN else bytes(_HASH_LEN)


class GossipNode:
    """Known blocks, nonce registry and peers of one mesh node."""

    def __init__(self, node_id: str) -> None:
        self.node_id = node_id
        self.known_blocks: list[Block] = []
        self.nonce_registry: Registry = {}
        self.peers: list[str] = []

    def add_block(self, block: Block) -> None:
        """Remember a block and register its nonce."""
        self.nonce_registry[_hex_to_32(block.hash)] = (
            block.nonce,
            _hex_to_32(block.account),
        )
        self.known_blocks.append(block)

    def merge_registry(self, remote: Mapping[bytes, tuple[int, bytes]]) -> None:
        """Merge a peer's nonce registry into this node's."""
        merge_nonce_registries(self.nonce_registry, remote)

    def check_sync(self, peer_registry: Mapping[bytes, tuple[int, bytes]]) -> SyncResult:
        """Compare this node's registry with a peer's."""
        return sync_nonces_before_l1(self.nonce_registry, peer_registry)

    def add_peer(self, peer_id: str) -> None:
        """Add a peer unless it is already known."""
        if peer_id not in self.peers:
            self.peers.append(peer_id)