"""ORV vote collection and representative eligibility."""

from __future__ import annotations

from collections.abc import Iterable

from arxia.vote import VoteORV

MIN_REPRESENTATIVE_STAKE_PERCENT = 0.001


def min_representative_stake(total_supply: int) -> int:
    """Smallest stake (0.1% of supply, truncated) a representative needs."""
    return int(total_supply * MIN_REPRESENTATIVE_STAKE_PERCENT)


def collect_votes(votes: Iterable[VoteORV], total_supply: int) -> list[VoteORV]:
    """Keep only votes from representatives holding the minimum stake."""
    min_stake = min_representative_stake(total_supply)
    return [v for v in votes if v.delegated_stake >= min_stake]