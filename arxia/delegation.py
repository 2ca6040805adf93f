"""Stake delegation to representatives."""

from __future__ import annotations

from collections.abc import Iterable
from dataclasses import dataclass


@dataclass(frozen=True)
class Delegation:
    """A delegator's stake assigned to a representative."""

    delegator: str
    representative: str
    amount: int
    created_at: int


def total_delegated_stake(representative: str, delegations: Iterable[Delegation]) -> int:
    """Sum of the stake delegated to ``representative``."""
    return sum(d.amount for d in delegations if d.representative == representative)