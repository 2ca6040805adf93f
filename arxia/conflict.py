"""Conflict resolution with the ORV cascade and double-spend detection."""

from __future__ import annotations

from collections.abc import Sequence
from dataclasses import dataclass

from arxia.block import Block
from arxia.vote import VoteORV

_U64_MAX = (1 << 64) - 1

STAKE_WEIGHTED = "stake_weighted"
HASH_TIEBREAKER = "hash_tiebreaker"
SAME_NONCE = "same_nonce"


@dataclass(frozen=True)
class BlockCandidate:
    """A candidate block paired with the votes supporting it."""

    block: Block
    votes: Sequence[VoteORV]


def resolve_conflict_orv(
    block_a: Block,
    block_b: Block,
    votes_a: Sequence[VoteORV],
    votes_b: Sequence[VoteORV],
) -> tuple[Block, str]:
    """Pick the winner of two competing blocks and say how it was chosen.

    A stake gap above 5% of the combined stake decides; otherwise the
    block with the lower hash wins.
    """
    stake_a = sum(v.delegated_stake for v in votes_a)
    stake_b = sum(v.delegated_stake for v in votes_b)
    total_stake = min(stake_a + stake_b, _U64_MAX)
    if total_stake > 0:
        gap = abs(stake_a - stake_b)
        if min(gap * 20, _U64_MAX) > total_stake:
            return (block_a if stake_a > stake_b else block_b), STAKE_WEIGHTED
    if block_a.hash <= block_b.hash:
        return block_a, HASH_TIEBREAKER
    return block_b, HASH_TIEBREAKER


def detect_double_spend(blocks: Sequence[Block]) -> list[tuple[Block, Block, str]]:
    """Find pairs of blocks sharing an account and nonce."""
    by_nonce: dict[tuple[str, int], list[Block]] = {}
    for block in blocks:
        by_nonce.setdefault((block.account, block.nonce), []).append(block)
    return [
        (group[0], group[1], SAME_NONCE) for group in by_nonce.values() if len(group) > 1
    ]