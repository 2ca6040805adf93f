from cryptography.hazmat.primitives.serialization import Encoding, PublicFormat

from arxia.did import ArxiaDid
from arxia.signing import generate_keypair

_B58 = set("123456789ABCDEFGHJKLMNPQRSTUVWXYZabcdefghijkmnopqrstuvwxyz")


def test_did_from_public_key():
    _, vk = generate_keypair()
    raw = vk.public_bytes(Encoding.Raw, PublicFormat.Raw)
    did = ArxiaDid.from_public_key(raw)
    assert did.did.startswith("did:arxia:")
    assert did.identifier() != ""
    assert did.public_key == raw


def test_did_deterministic():
    pubkey = bytes([0x42]) * 32
    did1 = ArxiaDid.from_public_key(pubkey)
    did2 = ArxiaDid.from_public_key(pubkey)
    assert did1.did == did2.did
    assert did1.did.startswith("did:arxia:")
    assert did1.public_key == pubkey


def test_did_display():
    did = ArxiaDid.from_public_key(bytes([0x01]) * 32)
    displayed = str(did)
    assert displayed.startswith("did:arxia:")
    assert displayed == did.did


def test_different_keys_different_dids():
    did1 = ArxiaDid.from_public_key(bytes([0x01]) * 32)
    did2 = ArxiaDid.from_public_key(bytes([0x02]) * 32)
    assert did1 != did2


def test_identifier_is_base58():
    did = ArxiaDid.from_public_key(bytes([0x07]) * 32)
    ident = did.identifier()
    assert set(ident) <= _B58
    assert 32 <= len(ident) <= 44
    assert str(did) == "did:arxia:" + ident


def test_identifier_without_prefix_returns_whole_string():
    did = ArxiaDid(did="plain", public_key=bytes(32))
    assert did.identifier() == "plain"