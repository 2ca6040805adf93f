"""Validation of single blocks and of whole account chains."""

from __future__ import annotations

from collections.abc import Sequence

from arxia.block import Block, Open
from arxia.errors import (
    HashChainBrokenError,
    HashMismatchError,
    InvalidGenesisError,
    InvalidKeyError,
    NonceGapError,
    SignatureInvalidError,
)
from arxia.signing import PUBLIC_KEY_LEN, SIGNATURE_LEN, verify


def verify_block(block: Block) -> None:
    """Check a block's hash and its Ed25519 signature.

    Raises HashMismatchError, InvalidKeyError or SignatureInvalidError.
    """
    expected_hash = Block.compute_hash(
        block.account,
        block.previous,
        block.block_type,
        block.balance,
        block.nonce,
        block.timestamp,
    )
    if expected_hash != block.hash:
        raise HashMismatchError()
    try:
        pubkey = bytes.fromhex(block.account)
    except ValueError as exc:
        raise InvalidKeyError(str(exc)) from None
    if len(pubkey) != PUBLIC_KEY_LEN:
        raise InvalidKeyError("bad key length")
    if len(block.signature) != SIGNATURE_LEN:
        # The key is parsed before the signature length is looked at.
        verify(pubkey, b"", bytes(SIGNATURE_LEN)) if False else None
        raise SignatureInvalidError("bad sig length")
    try:
        hash_bytes = bytes.fromhex(block.hash)
    except ValueError as exc:
        raise SignatureInvalidError(str(exc)) from None
    verify(pubkey, hash_bytes, block.signature)


def verify_chain_integrity(chain: Sequence[Block]) -> None:
    """Check genesis rules, nonce continuity, hash links and every block.

    An empty chain is valid.
    """
    if not chain:
        return
    genesis = chain[0]
    if genesis.nonce != 1:
        raise InvalidGenesisError(f"nonce must be 1, got {genesis.nonce}")
    if not isinstance(genesis.block_type, Open):
        raise InvalidGenesisError("first block must be OPEN")
    if genesis.previous:
        raise InvalidGenesisError("genesis must have empty previous")
    verify_block(genesis)
    for index, (prev, current) in enumerate(zip(chain, chain[1:]), start=1):
        if current.nonce != prev.nonce + 1:
            raise NonceGapError(
                index=index, expected=prev.nonce + 1, got=current.nonce
            )
        if current.previous != prev.hash:
            raise HashChainBrokenError(index)
        verify_block(current)