import pytest

from arxia.block import Open, Receive, Send
from arxia.chain import AccountChain, VectorClock
from arxia.errors import (
    InsufficientBalanceError,
    NotSendBlockError,
    WrongDestinationError,
    ZeroAmountError,
)
from arxia.signing import verify


def test_open_account():
    vc = VectorClock()
    chain = AccountChain()
    block = chain.open(1_000_000, vc)
    assert block.balance == 1_000_000
    assert block.nonce == 1
    assert block.previous == ""
    assert block.hash != ""
    assert len(block.signature) == 64
    assert block.block_type == Open(initial_balance=1_000_000)


def test_open_signature_over_raw_hash_bytes():
    vc = VectorClock()
    chain = AccountChain()
    block = chain.open(10, vc)
    verify(bytes.fromhex(chain.id), bytes.fromhex(block.hash), block.signature)
    assert chain.chain == [block]


def test_open_ticks_short_id():
    vc = VectorClock()
    chain = AccountChain()
    chain.open(10, vc)
    assert vc.clocks == {chain.short_id: 1}
    assert chain.short_id == chain.id[:8]
    assert len(chain.id) == 64


def test_send_and_receive():
    vc = VectorClock()
    alice = AccountChain()
    bob = AccountChain()
    alice.open(1_000_000, vc)
    bob.open(500_000, vc)
    send = alice.send(bob.id, 200_000, vc)
    assert alice.balance == 800_000
    recv = bob.receive(send, vc)
    assert bob.balance == 700_000
    assert recv.nonce == 2
    assert recv.block_type == Receive(source_hash=send.hash)
    assert send.block_type == Send(destination=bob.id, amount=200_000)
    assert send.previous == alice.chain[0].hash


def test_send_insufficient_balance():
    vc = VectorClock()
    alice = AccountChain()
    alice.open(100, vc)
    with pytest.raises(InsufficientBalanceError) as info:
        alice.send("deadbeef", 200, vc)
    assert info.value.available == 100
    assert info.value.required == 200
    assert alice.balance == 100
    assert len(alice.chain) == 1


def test_send_zero_amount():
    vc = VectorClock()
    alice = AccountChain()
    alice.open(1_000, vc)
    with pytest.raises(ZeroAmountError):
        alice.send("dest", 0, vc)


def test_receive_wrong_destination():
    vc = VectorClock()
    alice = AccountChain()
    bob = AccountChain()
    carol = AccountChain()
    alice.open(1_000, vc)
    send = alice.send(carol.id, 10, vc)
    with pytest.raises(WrongDestinationError):
        bob.receive(send, vc)


def test_receive_requires_send_block():
    vc = VectorClock()
    alice = AccountChain()
    bob = AccountChain()
    genesis = alice.open(1_000, vc)
    with pytest.raises(NotSendBlockError):
        bob.receive(genesis, vc)


def test_vector_clock_btreemap_ordering():
    vc = VectorClock()
    vc.tick("charlie")
    vc.tick("alice")
    vc.tick("bob")
    assert list(vc.clocks) == ["alice", "bob", "charlie"]


def test_vector_clock_merge():
    vc1 = VectorClock()
    vc1.tick("a")
    vc1.tick("a")
    vc2 = VectorClock()
    vc2.tick("a")
    vc2.tick("b")
    vc1.merge(vc2)
    assert vc1.clocks["a"] == 2
    assert vc1.clocks["b"] == 1


def test_vector_clock_happened_before():
    vc1 = VectorClock()
    vc1.tick("a")
    vc2 = VectorClock(dict(vc1.clocks))
    vc2.tick("a")
    assert vc1.happened_before(vc2)
    assert not vc2.happened_before(vc1)


def test_vector_clock_concurrent():
    vc1 = VectorClock()
    vc1.tick("a")
    vc2 = VectorClock()
    vc2.tick("b")
    assert vc1.is_concurrent(vc2)


def test_vector_clock_equal_not_concurrent():
    vc1 = VectorClock()
    vc1.tick("a")
    vc2 = VectorClock()
    vc2.tick("a")
    assert not vc1.is_concurrent(vc2)
    assert not vc1.happened_before(vc2)