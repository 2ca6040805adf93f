"""Four-level transaction finality assessment."""

from __future__ import annotations

from enum import IntEnum

from arxia.constants import L0_CAP_MICRO_ARX
from arxia.nonce_registry import SyncResult

_L2_VALIDATOR_FRACTION = 0.67


class FinalityLevel(IntEnum):
    """Finality level of a transaction, ordered from weakest to strongest."""

    PENDING = 0
    L0 = 1
    L1 = 2
    L2 = 3

    def __str__(self) -> str:
        return _LABELS[self]


_LABELS = {
    FinalityLevel.PENDING: "PENDING",
    FinalityLevel.L0: "L0 (instant)",
    FinalityLevel.L1: "L1 (gossip)",
    FinalityLevel.L2: "L2 (full)",
}


def assess_finality(
    amount_micro_arx: int,
    local_confirmations: int,
    sync_result: SyncResult,
    validator_pct: float,
) -> FinalityLevel:
    """Decide the finality level reached by a transaction."""
    if validator_pct >= _L2_VALIDATOR_FRACTION:
        return FinalityLevel.L2
    if sync_result == SyncResult.success():
        return FinalityLevel.L1
    if amount_micro_arx <= L0_CAP_MICRO_ARX and local_confirmations > 0:
        return FinalityLevel.L0
    return FinalityLevel.PENDING