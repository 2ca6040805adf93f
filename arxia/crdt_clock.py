"""Vector clock for the CRDT layer with deterministic key order."""

from __future__ import annotations

from dataclasses import dataclass, field


@dataclass
class CrdtVectorClock:
    """Map from node id to logical clock value, kept sorted by node id."""

    clocks: dict[str, int] = field(default_factory=dict)

    def __post_init__(self) -> None:
        self.clocks = dict(sorted(self.clocks.items()))

    def _set(self, node_id: str, value: int) -> None:
        is_new = node_id not in self.clocks
        self.clocks[node_id] = value
        if is_new:
            self.clocks = dict(sorted(self.clocks.items()))

    def tick(self, node_id: str) -> None:
        """Increment the clock for ``node_id``."""
        self._set(node_id, self.clocks.get(node_id, 0) + 1)

    def merge(self, other: CrdtVectorClock) -> None:
        """Merge with another clock, element-wise maximum."""
        for node_id, value in other.clocks.items():
            self._set(node_id, max(self.clocks.get(node_id, 0), value))

    def happened_before(self, other: CrdtVectorClock) -> bool:
        """True if this clock causally precedes ``other``."""
        at_least_one_less = False
        for node_id, self_val in self.clocks.items():
            other_val = other.clocks.get(node_id, 0)
            if self_val > other_val:
                return False
            if self_val < other_val:
                at_least_one_less = True
        if any(
            node_id not in self.clocks and value > 0
            for node_id, value in other.clocks.items()
        ):
            at_least_one_less = True
        return at_least_one_less

    def is_concurrent(self, other: CrdtVectorClock) -> bool:
        """True if neither clock precedes the other and they differ."""
        return (
            not self.happened_before(other)
            and not other.happened_before(self)
            and self != other
        )

    def __len__(self) -> int:
        return len(self.clocks)