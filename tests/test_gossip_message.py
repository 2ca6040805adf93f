import dataclasses

import pytest

from arxia.gossip_message import (
    BlockAnnounce,
    NonceSyncRequest,
    NonceSyncResponse,
    Ping,
)


def test_block_announce_keeps_fields():
    msg = BlockAnnounce(block_data=bytearray(b"\x01\x02"), hops=3)
    assert msg.block_data == b"\x01\x02"
    assert msg.hops == 3


def test_block_announce_rejects_hops_out_of_byte_range():
    with pytest.raises(ValueError):
        BlockAnnounce(block_data=b"", hops=256)
    with pytest.raises(ValueError):
        BlockAnnounce(block_data=b"", hops=-1)


def test_block_announce_accepts_max_hops():
    assert BlockAnnounce(block_data=b"", hops=255).hops == 255


def test_nonce_sync_request_equality():
    assert NonceSyncRequest("node_a") == NonceSyncRequest("node_a")
    assert NonceSyncRequest("node_a").from_node == "node_a"


def test_nonce_sync_response_normalises_entries():
    entry = (bytes([1] * 32), 7, bytes([2] * 32))
    msg = NonceSyncResponse(entries=[entry])
    assert msg.entries == (entry,)


def test_nonce_sync_response_rejects_short_hash():
    with pytest.raises(ValueError):
        NonceSyncResponse(entries=[(b"\x01", 1, bytes(32))])


def test_ping_is_frozen():
    ping = Ping(node_id="n", timestamp=1000)
    with pytest.raises(dataclasses.FrozenInstanceError):
        ping.timestamp = 5  # type: ignore[misc]
    assert ping.timestamp == 1000