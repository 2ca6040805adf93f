"""Nonce registry synchronisation for L1 finality."""

from __future__ import annotations

from collections.abc import Mapping, MutableMapping
from dataclasses import dataclass
from enum import Enum

Registry = dict[bytes, tuple[int, bytes]]
"""Block hash mapped to (nonce, account hash)."""


class SyncStatus(Enum):
    """Outcome kind of a synchronisation check."""

    SUCCESS = "success"
    MISMATCH = "mismatch"
    NO_NEIGHBORS = "no_neighbors"


@dataclass(frozen=True)
class SyncResult:
    """Result of a nonce synchronisation attempt."""

    status: SyncStatus
    mismatches: int = 0

    @classmethod
    def success(cls) -> SyncResult:
        """Registries are fully synchronised."""
        return cls(SyncStatus.SUCCESS)

    @classmethod
    def mismatch(cls, count: int) -> SyncResult:
        """Registries differ in ``count`` entries."""
        return cls(SyncStatus.MISMATCH, count)

    @classmethod
    def no_neighbors(cls) -> SyncResult:
        """No neighbour registry was available."""
        return cls(SyncStatus.NO_NEIGHBORS)


def merge_nonce_registries(
    local: MutableMapping[bytes, tuple[int, bytes]],
    remote: Mapping[bytes, tuple[int, bytes]],
) -> None:
    """Merge ``remote`` into ``local``, keeping the higher nonce per key."""
    for key, (remote_nonce, remote_account) in remote.items():
        current = local.setdefault(key, (0, remote_account))
        if remote_nonce > current[0]:
            local[key] = (remote_nonce, remote_account)


def sync_nonces_before_l1(
    local: Mapping[bytes, tuple[int, bytes]],
    remote: Mapping[bytes, tuple[int, bytes]],
) -> SyncResult:
    """Count entries on which the two registries disagree."""
    if not remote:
        return SyncResult.no_neighbors()
    mismatches = sum(
        1
        for key, (local_nonce, _) in local.items()
        if key not in remote or remote[key][0] != local_nonce
    )
    mismatches += sum(1 for key in remote if key not in local)
    if mismatches == 0:
        return SyncResult.success()
    return SyncResult.mismatch(mismatches)