"""Fundamental types shared across the protocol."""

from __future__ import annotations

import time
from enum import IntEnum

from arxia.errors import InvalidBlockTypeError


class BlockTypeTag(IntEnum):
    """Block type discriminant used in compact serialization."""

    OPEN = 0x00
    SEND = 0x01
    RECEIVE = 0x02
    REVOKE = 0x03

    @classmethod
    def from_byte(cls, b: int) -> BlockTypeTag:
        """Return the tag for a byte, raising InvalidBlockTypeError if unknown."""
        try:
            return cls(b)
        except ValueError:
            raise InvalidBlockTypeError(b) from None


def now_millis() -> int:
    """Current time as milliseconds since the UNIX epoch."""
    return time.time_ns() // 1_000_000