"""Vector clock pruning.

Clocks are bounded to ``MAX_VECTOR_CLOCK_ENTRIES`` entries. Expired pruning
drops nodes silent for more than ``EXPIRY_DAYS`` days; forced pruning evicts
the lowest counters when the cap is exceeded, which may leave causal
ambiguity, so callers seeing ``PruningKind.FORCED_PRUNING`` must fall back
to the hash tiebreaker in conflict resolution.
"""

from __future__ import annotations

import time
from dataclasses import dataclass
from enum import Enum

from arxia.constants import MAX_VECTOR_CLOCK_ENTRIES

EXPIRY_DAYS = 7
"""Days of silence after which a node's entry expires."""

_SECS_PER_DAY = 86_400


class PruningKind(Enum):
    """What a pruning pass did."""

    CLEAN = "clean"
    EXPIRED_REMOVED = "expired_removed"
    FORCED_PRUNING = "forced_pruning"


@dataclass(frozen=True)
class PruningResult:
    """Outcome of a pruning pass and how many entries it removed."""

    kind: PruningKind
    count: int = 0


@dataclass
class VectorClockEntry:
    """A node's counter and the unix time (seconds) it was last seen."""

    counter: int
    last_seen_unix: int


Clock = dict[bytes, VectorClockEntry]


def _now_unix() -> int:
    return int(time.time())


def prune_expired(
    clock: Clock, expiry_days: int, reference_time_unix: int
) -> PruningResult:
    """Remove entries older than ``expiry_days`` relative to the reference time."""
    threshold = expiry_days * _SECS_PER_DAY
    expired = [
        node_id
        for node_id, entry in clock.items()
        if max(reference_time_unix - entry.last_seen_unix, 0) >= threshold
    ]
    for node_id in expired:
        del clock[node_id]
    if not expired:
        return PruningResult(PruningKind.CLEAN)
    return PruningResult(PruningKind.EXPIRED_REMOVED, len(expired))


def prune_to_cap(clock: Clock, cap: int) -> PruningResult:
    """Evict the lowest-counter entries (ties by node id) down to ``cap``."""
    if len(clock) <= cap:
        return PruningResult(PruningKind.CLEAN)
    to_evict = len(clock) - cap
    ranked = sorted(clock.items(), key=lambda item: (item[1].counter, item[0]))
    for node_id, _ in ranked[:to_evict]:
        del clock[node_id]
    return PruningResult(PruningKind.FORCED_PRUNING, to_evict)


def prune_all(
    clock: Clock, expiry_days: int, cap: int, reference_time_unix: int
) -> PruningResult:
    """Expire old entries, then enforce the cap; report the most severe action."""
    expired = prune_expired(clock, expiry_days, reference_time_unix)
    forced = prune_to_cap(clock, cap)
    return forced if forced.kind is PruningKind.FORCED_PRUNING else expired


def prune_expired_default(clock: Clock) -> PruningResult:
    """Expire entries with the default expiry against the current time."""
    return prune_expired(clock, EXPIRY_DAYS, _now_unix())


def prune_all_default(clock: Clock) -> PruningResult:
    """Full pruning with protocol defaults against the current time."""
    return prune_all(clock, EXPIRY_DAYS, MAX_VECTOR_CLOCK_ENTRIES, _now_unix())