"""ORV votes: hashing, casting and verification."""

from __future__ import annotations

import struct
from dataclasses import dataclass

from cryptography.hazmat.primitives.asymmetric.ed25519 import Ed25519PrivateKey

from arxia.hashing import hash_blake3_bytes
from arxia.signing import public_key_bytes, sign, verify

_NUMBERS = struct.Struct("<QQ")


@dataclass(frozen=True)
class VoteORV:
    """A single signed vote from a representative."""

    block_hash: bytes
    voter_pubkey: bytes
    delegated_stake: int
    nonce: int
    signature: bytes


def compute_vote_hash(
    block_hash: bytes, voter_pubkey: bytes, delegated_stake: int, nonce: int
) -> bytes:
    """BLAKE3 digest of the vote content (stake and nonce little-endian)."""
    data = bytes(block_hash) + bytes(voter_pubkey) + _NUMBERS.pack(delegated_stake, nonce)
    return hash_blake3_bytes(data)


def verify_vote(vote: VoteORV) -> None:
    """Check a vote's signature; raises on failure."""
    digest = compute_vote_hash(
        vote.block_hash, vote.voter_pubkey, vote.delegated_stake, vote.nonce
    )
    verify(vote.voter_pubkey, digest, vote.signature)


def cast_vote(
    signing_key: Ed25519PrivateKey,
    block_hash: bytes,
    delegated_stake: int,
    nonce: int,
) -> VoteORV:
    """Create and sign a vote for ``block_hash``."""
    voter_pubkey = public_key_bytes(signing_key)
    digest = compute_vote_hash(block_hash, voter_pubkey, delegated_stake, nonce)
    return VoteORV(
        block_hash=bytes(block_hash),
        voter_pubkey=voter_pubkey,
        delegated_stake=delegated_stake,
        nonce=nonce,
        signature=sign(signing_key, digest),
    )