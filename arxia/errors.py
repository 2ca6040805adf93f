"""Exception hierarchy shared by the whole protocol implementation."""


class ArxiaError(Exception):
    """Base class for every protocol error."""


class _ReasonError(ArxiaError):
    """An error carrying a free-form reason after a fixed prefix."""

    prefix = ""

    def __init__(self, reason: str) -> None:
        self.reason = reason
        super().__init__(f"{self.prefix}: {reason}")


class _FixedMessageError(ArxiaError):
    """An error whose message never varies."""

    message = ""

    def __init__(self) -> None:
        super().__init__(self.message)


class InvalidBlockTypeError(ArxiaError, ValueError):
    """Unknown block type tag byte."""

    def __init__(self, tag: int) -> None:
        self.tag = tag
        super().__init__(f"invalid block type tag: 0x{tag:02x}")


class DataTooShortError(ArxiaError, ValueError):
    """Data too short for deserialization."""

    def __init__(self, got: int, expected: int) -> None:
        self.got = got
        self.expected = expected
        super().__init__(f"data too short: {got} bytes (need {expected})")


class HashMismatchError(_FixedMessageError):
    """Stored hash does not match the recomputed value."""

    message = "hash mismatch"


class SignatureInvalidError(_ReasonError):
    """Ed25519 signature verification failed."""

    prefix = "signature verification failed"


class InsufficientBalanceError(ArxiaError):
    """Balance too small for the requested operation."""

    def __init__(self, available: int, required: int) -> None:
        self.available = available
        self.required = required
        super().__init__(f"insufficient balance: {available} < {required}")


class ZeroAmountError(_FixedMessageError, ValueError):
    """An attempt to send a zero amount."""

    message = "cannot send zero amount"


class NonceGapError(ArxiaError):
    """Nonce gap detected in an account chain."""

    def __init__(self, index: int, expected: int, got: int) -> None:
        self.index = index
        self.expected = expected
        self.got = got
        super().__init__(f"nonce gap at block {index}: expected {expected}, got {got}")


class HashChainBrokenError(ArxiaError):
    """The hash link between consecutive blocks is broken."""

    def __init__(self, index: int) -> None:
        self.index = index
        super().__init__(f"hash chain broken at block {index}")


class InvalidGenesisError(_ReasonError):
    """The genesis block is malformed."""

    prefix = "invalid genesis block"


class WrongDestinationError(_FixedMessageError):
    """A SEND block is addressed to another account."""

    message = "SEND block not addressed to this account"


class NotSendBlockError(_FixedMessageError):
    """A RECEIVE was attempted from something other than a SEND block."""

    message = "can only RECEIVE from a SEND block"


class DoubleSpendError(ArxiaError):
    """Two different blocks share the same nonce."""

    def __init__(self, nonce: int) -> None:
        self.nonce = nonce
        super().__init__(f"double-spend detected for account at nonce {nonce}")


class TransportFailureError(_ReasonError):
    """Transport-level failure."""

    prefix = "transport error"


class SyncTimeoutError(_FixedMessageError):
    """Synchronisation timed out."""

    message = "sync timeout"


class NoNeighborsError(_FixedMessageError):
    """No neighbours are available for gossip."""

    message = "no neighbors available"


class HexDecodeError(_ReasonError, ValueError):
    """Hex decoding failed."""

    prefix = "hex decode error"


class SerializationError(_ReasonError):
    """Serialization failed."""

    prefix = "serialization error"


class InvalidKeyError(_ReasonError, ValueError):
    """A cryptographic key is malformed."""

    prefix = "invalid key"