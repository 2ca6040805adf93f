"""Positive-negative counter CRDT for convergent balance tracking."""

from __future__ import annotations

from dataclasses import dataclass, field


def _merge_max(target: dict[str, int], source: dict[str, int]) -> None:
    for key, value in source.items():
        target[key] = max(target.get(key, 0), value)


@dataclass
class PNCounter:
    """Counter CRDT: commutative, associative and idempotent merge."""

    p: dict[str, int] = field(default_factory=dict)
    n: dict[str, int] = field(default_factory=dict)

    def increment(self, node_id: str, amount: int) -> None:
        """Credit ``amount`` to ``node_id``."""
        self.p[node_id] = self.p.get(node_id, 0) + amount

    def decrement(self, node_id: str, amount: int) -> None:
        """Debit ``amount`` from ``node_id``."""
        self.n[node_id] = self.n.get(node_id, 0) + amount

    def value(self) -> int:
        """Net value: total credits minus total debits."""
        return sum(self.p.values()) - sum(self.n.values())

    def merge(self, other: PNCounter) -> None:
        """Merge another counter, element-wise maximum."""
        _merge_max(self.p, other.p)
        _merge_max(self.n, other.n)