"""Vector clocks and account chains that own a keypair."""

from __future__ import annotations

from dataclasses import dataclass, field

from cryptography.hazmat.primitives.asymmetric.ed25519 import (
    Ed25519PrivateKey,
    Ed25519PublicKey,
)

from arxia.block import Block, BlockType, Open, Receive, Send
from arxia.errors import (
    InsufficientBalanceError,
    NotSendBlockError,
    WrongDestinationError,
    ZeroAmountError,
)
from arxia.signing import generate_keypair, public_key_bytes, sign
from arxia.types import now_millis


@dataclass
class VectorClock:
    """Vector clock for causal ordering, kept in sorted key order."""

    clocks: dict[str, int] = field(default_factory=dict)

    def _set(self, node_id: str, value: int) -> None:
        if node_id in self.clocks:
            self.clocks[node_id] = value
        else:
            self.clocks[node_id] = value
            self.clocks = dict(sorted(self.clocks.items()))

    def tick(self, node_id: str) -> None:
        """Increment the counter for ``node_id``."""
        self._set(node_id, self.clocks.get(node_id, 0) + 1)

    def merge(self, other: VectorClock) -> None:
        """Merge with another clock, element-wise maximum."""
        for node_id, other_val in other.clocks.items():
            self._set(node_id, max(self.clocks.get(node_id, 0), other_val))

    def happened_before(self, other: VectorClock) -> bool:
        """True if this clock causally precedes ``other``."""
        at_least_one_less = False
        for node_id, self_val in self.clocks.items():
            other_val = other.clocks.get(node_id, 0)
            if self_val > other_val:
                return False
            if self_val < other_val:
                at_least_one_less = True
        if any(
            nid not in self.clocks and other_val > 0
            for nid, other_val in other.clocks.items()
        ):
            at_least_one_less = True
        return at_least_one_less

    def is_concurrent(self, other: VectorClock) -> bool:
        """True if neither clock precedes the other and they differ."""
        return (
            not self.happened_before(other)
            and not other.happened_before(self)
            and self != other
        )


class AccountChain:
    """A single account's chain of blocks together with its keypair."""

    def __init__(self) -> None:
        self._signing_key, self.verifying_key = generate_keypair()
        self.public_key_hex: str = public_key_bytes(self._signing_key).hex()
        self.chain: list[Block] = []
        self.balance: int = 0
        self.nonce: int = 0

    @property
    def id(self) -> str:
        """Full hex-encoded public key."""
        return self.public_key_hex

    @property
    def short_id(self) -> str:
        """First 8 hex characters of the public key."""
        return self.public_key_hex[:8]

    @property
    def signing_key(self) -> Ed25519PrivateKey:
        """The account's signing key."""
        return self._signing_key

    def _previous_hash(self) -> str:
        return self.chain[-1].hash if self.chain else ""

    def _seal(self, previous: str, block_type: BlockType) -> Block:
        timestamp = now_millis()
        block_hash = Block.compute_hash(
            self.public_key_hex,
            previous,
            block_type,
            self.balance,
            self.nonce,
            timestamp,
        )
        # Sign the raw 32 digest bytes, never the hex text.
        signature = sign(self._signing_key, bytes.fromhex(block_hash))
        block = Block(
            account=self.public_key_hex,
            previous=previous,
            block_type=block_type,
            balance=self.balance,
            nonce=self.nonce,
            timestamp=timestamp,
            hash=block_hash,
            signature=signature,
        )
        self.chain.append(block)
        return block

    def open(self, initial_balance: int, vclock: VectorClock) -> Block:
        """Create the genesis block with ``initial_balance``."""
        vclock.tick(self.short_id)
        self.balance = initial_balance
        self.nonce = 1
        return self._seal("", Open(initial_balance=initial_balance))

    def send(self, destination: str, amount: int, vclock: VectorClock) -> Block:
        """Send ``amount`` to ``destination`` and return the SEND block."""
        if amount == 0:
            raise ZeroAmountError()
        if self.balance < amount:
            raise InsufficientBalanceError(available=self.balance, required=amount)
        vclock.tick(self.short_id)
        self.balance -= amount
        self.nonce += 1
        previous = self._previous_hash()
        return self._seal(previous, Send(destination=destination, amount=amount))

    def receive(self, send_block: Block, vclock: VectorClock) -> Block:
        """Receive the funds of a SEND block addressed to this account."""
        block_type = send_block.block_type
        if not isinstance(block_type, Send):
            raise NotSendBlockError()
        if block_type.destination != self.public_key_hex:
            raise WrongDestinationError()
        vclock.tick(self.short_id)
        self.balance += block_type.amount
        self.nonce += 1
        previous = self._previous_hash()
        return self._seal(previous, Receive(source_hash=send_block.hash))


__all__ = ["AccountChain", "VectorClock", "Ed25519PublicKey"]