"""Escrow contract holding funds until release or timeout refund."""

from __future__ import annotations

from dataclasses import dataclass, field
from enum import Enum

from arxia.errors import ArxiaError


class EscrowState(Enum):
    """Lifecycle state of an escrow."""

    LOCKED = "locked"
    RELEASED = "released"
    REFUNDED = "refunded"


class EscrowError(ArxiaError):
    """An escrow operation is not allowed in the current state."""


@dataclass
class Escrow:
    """Funds (micro-ARX) held between a sender and a recipient."""

    sender: str
    recipient: str
    amount: int
    timeout: int
    """Refund becomes possible at this unix time (ms)."""
    state: EscrowState = field(default=EscrowState.LOCKED)

    def _require_locked(self) -> None:
        if self.state is not EscrowState.LOCKED:
            raise EscrowError("escrow is not in locked state")

    def release(self) -> None:
        """Release the funds to the recipient."""
        self._require_locked()
        self.state = EscrowState.RELEASED

    def refund(self, current_time: int) -> None:
        """Refund the funds to the sender once the timeout has elapsed."""
        self._require_locked()
        if current_time < self.timeout:
            raise EscrowError("timeout has not elapsed")
        self.state = EscrowState.REFUNDED