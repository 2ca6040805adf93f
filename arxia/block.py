"""Blocks and block operation types of the block lattice."""

from __future__ import annotations

import json
from dataclasses import dataclass, field
from typing import Union

from arxia.hashing import hash_blake3


def _tagged_json(tag: str, fields: dict[str, object]) -> str:
    return json.dumps({tag: fields}, separators=(",", ":"), ensure_ascii=False)


@dataclass(frozen=True)
class Open:
    """Genesis operation opening an account with an initial balance."""

    initial_balance: int

    def to_json(self) -> str:
        """Canonical JSON form used when hashing a block."""
        return _tagged_json("Open", {"initial_balance": self.initial_balance})


@dataclass(frozen=True)
class Send:
    """Send funds to another account (hex-encoded public key)."""

    destination: str
    amount: int

    def to_json(self) -> str:
        """Canonical JSON form used when hashing a block."""
        return _tagged_json(
            "Send", {"destination": self.destination, "amount": self.amount}
        )


@dataclass(frozen=True)
class Receive:
    """Receive funds from the SEND block with the given hash."""

    source_hash: str

    def to_json(self) -> str:
        """Canonical JSON form used when hashing a block."""
        return _tagged_json("Receive", {"source_hash": self.source_hash})


@dataclass(frozen=True)
class Revoke:
    """Revoke the DID credential with the given hash."""

    credential_hash: str

    def to_json(self) -> str:
        """Canonical JSON form used when hashing a block."""
        return _tagged_json("Revoke", {"credential_hash": self.credential_hash})


BlockType = Union[Open, Send, Receive, Revoke]


@dataclass
class Block:
    """A single block in an account chain."""

    account: str
    previous: str
    block_type: BlockType
    balance: int
    nonce: int
    timestamp: int
    hash: str
    signature: bytes = field(default=b"")

    @staticmethod
    def compute_hash(
        account: str,
        previous: str,
        block_type: BlockType,
        balance: int,
        nonce: int,
        timestamp: int,
    ) -> str:
        """Hex BLAKE3 digest of the block contents."""
        content = (
            f"{account}:{previous}:{block_type.to_json()}:{balance}:{nonce}:{timestamp}"
        )
        return hash_blake3(content.encode("utf-8"))