"""Quorum checks for ORV consensus."""

from __future__ import annotations

from dataclasses import dataclass


@dataclass(frozen=True)
class QuorumResult:
    """Outcome of a quorum check together with its inputs."""

    reached: bool
    voted_reps: int
    total_reps: int
    voted_stake: int
    total_supply: int


def check_quorum(
    voted_reps: int, total_reps: int, voted_stake: int, total_supply: int
) -> QuorumResult:
    """Quorum needs at least 2/3 of representatives and 20% of stake."""
    rep_quorum = total_reps != 0 and voted_reps * 3 >= total_reps * 2
    stake_quorum = total_supply != 0 and (voted_stake / total_supply) >= 0.20
    return QuorumResult(
        reached=rep_quorum and stake_quorum,
        voted_reps=voted_reps,
        total_reps=total_reps,
        voted_stake=voted_stake,
        total_supply=total_supply,
    )