"""Token lock contract for vesting and staking."""

from __future__ import annotations

from dataclasses import dataclass

from arxia.errors import ArxiaError


class TokenLockError(ArxiaError):
    """A claim on locked tokens is not allowed."""


@dataclass
class TokenLock:
    """Tokens (micro-ARX) locked for an owner until a unix time (ms)."""

    owner: str
    amount: int
    unlock_at: int
    claimed: bool = False

    def claim(self, current_time: int) -> int:
        """Claim the tokens once unlocked and return the amount."""
        if self.claimed:
            raise TokenLockError("tokens already claimed")
        if current_time < self.unlock_at:
            raise TokenLockError("lock period has not elapsed")
        self.claimed = True
        return self.amount

    def is_unlocked(self, current_time: int) -> bool:
        """Whether the lock period has elapsed."""
        return current_time >= self.unlock_at