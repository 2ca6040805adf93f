"""Ed25519 signing over raw bytes.

Signatures are always made over raw bytes (typically a 32-byte BLAKE3
digest), never over a hex-encoded string.
"""

from __future__ import annotations

from cryptography.exceptions import InvalidSignature
from cryptography.hazmat.primitives.asymmetric.ed25519 import (
    Ed25519PrivateKey,
    Ed25519PublicKey,
)
from cryptography.hazmat.primitives.serialization import (
    Encoding,
    NoEncryption,
    PrivateFormat,
    PublicFormat,
)

from arxia.errors import InvalidKeyError, SignatureInvalidError

PUBLIC_KEY_LEN = 32
SIGNATURE_LEN = 64


def generate_keypair() -> tuple[Ed25519PrivateKey, Ed25519PublicKey]:
    """Generate a fresh Ed25519 signing key and its verifying key."""
    signing_key = Ed25519PrivateKey.generate()
    return signing_key, signing_key.public_key()


def public_key_bytes(signing_key: Ed25519PrivateKey) -> bytes:
    """Raw 32-byte public key of a signing key."""
    return signing_key.public_key().public_bytes(Encoding.Raw, PublicFormat.Raw)


def private_key_bytes(signing_key: Ed25519PrivateKey) -> bytes:
    """Raw 32-byte seed of a signing key."""
    return signing_key.private_bytes(Encoding.Raw, PrivateFormat.Raw, NoEncryption())


def sign(signing_key: Ed25519PrivateKey, data: bytes) -> bytes:
    """Sign raw bytes and return the 64-byte signature."""
    return signing_key.sign(bytes(data))


def verify(pubkey: bytes, data: bytes, signature: bytes) -> None:
    """Verify a signature over raw bytes.

    Raises InvalidKeyError for a malformed public key and
    SignatureInvalidError when the signature does not check out.
    """
    if len(pubkey) != PUBLIC_KEY_LEN:
        raise InvalidKeyError(f"expected {PUBLIC_KEY_LEN} bytes, got {len(pubkey)}")
    try:
        verifying_key = Ed25519PublicKey.from_public_bytes(bytes(pubkey))
    except ValueError as exc:
        raise InvalidKeyError(str(exc)) from None
    if len(signature) != SIGNATURE_LEN:
        raise SignatureInvalidError("bad sig length")
    try:
        verifying_key.verify(bytes(signature), bytes(data))
    except InvalidSignature:
        raise SignatureInvalidError("signature does not match") from None