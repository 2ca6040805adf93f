"""Decentralized identifiers of the form did:arxia:<base58(blake3(pubkey))>."""

from __future__ import annotations

from dataclasses import dataclass

from arxia.hashing import hash_blake3_bytes

DID_PREFIX = "did:arxia:"
_B58_ALPHABET = "123456789ABCDEFGHJKLMNPQRSTUVWXYZabcdefghijkmnopqrstuvwxyz"


def _b58encode(data: bytes) -> str:
    number = int.from_bytes(data, "big")
    digits = []
    while number:
        number, rem = divmod(number, 58)
        digits.append(_B58_ALPHABET[rem])
    leading_zeros = len(data) - len(data.lstrip(b"\x00"))
    return "1" * leading_zeros + "".join(reversed(digits))


@dataclass(frozen=True)
class ArxiaDid:
    """An identifier derived from an Ed25519 public key."""

    did: str
    public_key: bytes

    @classmethod
    def from_public_key(cls, public_key: bytes) -> ArxiaDid:
        """Derive the DID of a 32-byte public key."""
        public_key = bytes(public_key)
        encoded = _b58encode(hash_blake3_bytes(public_key))
        return cls(did=f"{DID_PREFIX}{encoded}", public_key=public_key)

    def identifier(self) -> str:
        """The Base58 part after the ``did:arxia:`` prefix."""
        if self.did.startswith(DID_PREFIX):
            return self.did[len(DID_PREFIX):]
        return self.did

    def __str__(self) -> str:
        return self.did