"""Relay receipts, receipt batches and relay reputation scoring."""

from __future__ import annotations

from dataclasses import dataclass, field

_INITIAL_SCORE = 100
_SUCCESS_REWARD = 1
_FAILURE_PENALTY = 5


@dataclass
class RelayReceipt:
    """Proof that a relay node forwarded a message."""

    relay_id: str
    message_hash: str
    timestamp: int
    signature: bytes
    hop_count: int


@dataclass
class RelayBatch:
    """A batch of relay receipts sent together."""

    batch_id: int
    receipts: list[RelayReceipt] = field(default_factory=list)

    def add(self, receipt: RelayReceipt) -> None:
        """Append a receipt to the batch."""
        self.receipts.append(receipt)

    def __len__(self) -> int:
        return len(self.receipts)


@dataclass
class RelayScore:
    """Reputation of a relay node; higher is better."""

    relay_id: str
    score: int = _INITIAL_SCORE
    messages_relayed: int = 0
    messages_failed: int = 0

    def record_success(self) -> None:
        """Count a successful relay."""
        self.messages_relayed += 1
        self.score += _SUCCESS_REWARD

    def record_failure(self) -> None:
        """Count a failed or dropped relay."""
        self.messages_failed += 1
        self.score -= _FAILURE_PENALTY

    def slash(self, penalty: int) -> None:
        """Apply a penalty for proven misbehaviour."""
        self.score -= penalty

    def is_trusted(self) -> bool:
        """Whether the relay is in good standing."""
        return self.score > 0