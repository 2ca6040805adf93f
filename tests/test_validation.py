import dataclasses

import pytest

from arxia.block import Block, Open, Receive
from arxia.chain import AccountChain, VectorClock
from arxia.errors import (
    HashChainBrokenError,
    HashMismatchError,
    InvalidGenesisError,
    InvalidKeyError,
    NonceGapError,
    SignatureInvalidError,
)
from arxia.validation import verify_block, verify_chain_integrity


def _manual_block(account, previous, block_type, nonce, signature=bytes(64)):
    return Block(
        account=account,
        previous=previous,
        block_type=block_type,
        balance=1,
        nonce=nonce,
        timestamp=0,
        hash=Block.compute_hash(account, previous, block_type, 1, nonce, 0),
        signature=signature,
    )


def test_verify_block_valid():
    vc = VectorClock()
    chain = AccountChain()
    block = chain.open(1_000_000, vc)
    assert verify_block(block) is None
    forged = dataclasses.replace(block, signature=bytes(64))
    with pytest.raises(SignatureInvalidError):
        verify_block(forged)


def test_verify_chain_integrity_valid():
    vc = VectorClock()
    alice = AccountChain()
    bob = AccountChain()
    alice.open(1_000_000, vc)
    bob.open(0, vc)
    send = alice.send(bob.id, 100_000, vc)
    bob.receive(send, vc)
    assert verify_chain_integrity(alice.chain) is None
    assert verify_chain_integrity(bob.chain) is None
    assert [b.nonce for b in bob.chain] == [1, 2]


def test_verify_chain_empty_is_ok():
    assert verify_chain_integrity([]) is None
    vc = VectorClock()
    alice = AccountChain()
    alice.open(10, vc)
    alice.send("ab" * 32, 5, vc)
    with pytest.raises(InvalidGenesisError):
        verify_chain_integrity(alice.chain[1:])


def test_verify_block_rejects_tampered_hash():
    vc = VectorClock()
    chain = AccountChain()
    block = chain.open(1_000_000, vc)
    block.hash = "0" * 64
    with pytest.raises(HashMismatchError):
        verify_block(block)


def test_verify_block_rejects_tampered_balance():
    vc = VectorClock()
    chain = AccountChain()
    block = chain.open(1_000_000, vc)
    tampered = dataclasses.replace(block, balance=2_000_000)
    with pytest.raises(HashMismatchError):
        verify_block(tampered)


def test_verify_block_rejects_flipped_signature_bit():
    vc = VectorClock()
    chain = AccountChain()
    block = chain.open(500, vc)
    sig = bytearray(block.signature)
    sig[0] ^= 0x01
    with pytest.raises(SignatureInvalidError):
        verify_block(dataclasses.replace(block, signature=bytes(sig)))


def test_verify_block_bad_signature_length():
    vc = VectorClock()
    chain = AccountChain()
    block = chain.open(500, vc)
    with pytest.raises(SignatureInvalidError, match="bad sig length"):
        verify_block(dataclasses.replace(block, signature=bytes(10)))


def test_verify_block_non_hex_account():
    block = _manual_block("zz", "", Open(initial_balance=1), 1)
    with pytest.raises(InvalidKeyError):
        verify_block(block)


def test_verify_block_short_account():
    block = _manual_block("abcd", "", Open(initial_balance=1), 1)
    with pytest.raises(InvalidKeyError, match="bad key length"):
        verify_block(block)


def test_genesis_must_be_open():
    block = _manual_block("ab" * 32, "", Receive(source_hash="cd" * 32), 1)
    with pytest.raises(InvalidGenesisError, match="first block must be OPEN"):
        verify_chain_integrity([block])


def test_genesis_must_have_empty_previous():
    block = _manual_block("ab" * 32, "ef" * 32, Open(initial_balance=1), 1)
    with pytest.raises(InvalidGenesisError, match="empty previous"):
        verify_chain_integrity([block])


def test_nonce_gap_detected():
    vc = VectorClock()
    alice = AccountChain()
    alice.open(1_000, vc)
    alice.send("ab" * 32, 10, vc)
    alice.send("ab" * 32, 10, vc)
    broken = [alice.chain[0], alice.chain[2]]
    with pytest.raises(NonceGapError) as info:
        verify_chain_integrity(broken)
    assert (info.value.index, info.value.expected, info.value.got) == (1, 2, 3)


def test_hash_chain_broken_detected():
    vc = VectorClock()
    alice = AccountChain()
    alice.open(1_000, vc)
    alice.send("ab" * 32, 10, vc)
    relinked = dataclasses.replace(alice.chain[1], previous="00" * 32)
    with pytest.raises(HashChainBrokenError) as info:
        verify_chain_integrity([alice.chain[0], relinked])
    assert info.value.index == 1


def test_chain_with_tampered_later_block():
    vc = VectorClock()
    alice = AccountChain()
    alice.open(1_000, vc)
    alice.send("ab" * 32, 10, vc)
    tampered = dataclasses.replace(alice.chain[1], balance=999_999)
    with pytest.raises(HashMismatchError):
        verify_chain_integrity([alice.chain[0], tampered])