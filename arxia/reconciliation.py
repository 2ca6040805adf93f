"""Partition reconciliation of block lattice data through PN-counters."""

from __future__ import annotations

from collections.abc import Sequence

from arxia.block import Block, Open, Receive, Send
from arxia.pn_counter import PNCounter


def _previous_balance(blocks: Sequence[Block], account: str, nonce: int) -> int:
    """Balance of the block just before ``nonce`` on ``account``, or 0."""
    return next(
        (b.balance for b in blocks if b.account == account and b.nonce == nonce - 1),
        0,
    )


def reconcile_partitions(
    partition_a: Sequence[Block], partition_b: Sequence[Block]
) -> dict[str, int]:
    """Merge the blocks of two partitions into per-account balances.

    Blocks seen in both partitions (same hash) are counted once. OPEN
    credits the initial balance, SEND debits the amount, RECEIVE credits
    the balance increase over the previous block; REVOKE changes nothing.
    """
    everything = [*partition_a, *partition_b]
    counters: dict[str, PNCounter] = {}
    seen: set[str] = set()
    for block in everything:
        if block.hash in seen:
            continue
        seen.add(block.hash)
        node = block.account[:8]
        block_type = block.block_type
        if isinstance(block_type, Open):
            counters.setdefault(block.account, PNCounter()).increment(
                node, block_type.initial_balance
            )
        elif isinstance(block_type, Send):
            counters.setdefault(block.account, PNCounter()).decrement(
                node, block_type.amount
            )
        elif isinstance(block_type, Receive):
            prev = _previous_balance(everything, block.account, block.nonce)
            if block.balance > prev:
                counters.setdefault(block.account, PNCounter()).increment(
                    node, block.balance - prev
                )
    return {account: counter.value() for account, counter in counters.items()}