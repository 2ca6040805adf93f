"""Compact 193-byte binary block format for LoRa transport.

Layout: [1B type][32B account][32B previous][8B balance][8B nonce]
[8B timestamp][8B amount/initial][32B destination or source][64B signature],
integers big-endian.
"""

from __future__ import annotations

import binascii
import struct

from arxia.block import Block, Open, Receive, Revoke, Send
from arxia.constants import COMPACT_BLOCK_SIZE
from arxia.errors import DataTooShortError, SerializationError
from arxia.types import BlockTypeTag

_FIELD_LEN = 32
_SIGNATURE_LEN = 64
_NUMBERS = struct.Struct(">QQQQ")
_ZERO_FIELD = bytes(_FIELD_LEN)


def _hex32(value: str) -> bytes:
    """Decode a hex field to 32 bytes; undecodable text becomes zeros."""
    try:
        raw = binascii.unhexlify(value)
    except ValueError:
        return _ZERO_FIELD
    if len(raw) < _FIELD_LEN:
        raise SerializationError(
            f"hex field decodes to {len(raw)} bytes, need {_FIELD_LEN}"
        )
    return raw[:_FIELD_LEN]


def _tag_of(block: Block) -> BlockTypeTag:
    bt = block.block_type
    if isinstance(bt, Open):
        return BlockTypeTag.OPEN
    if isinstance(bt, Send):
        return BlockTypeTag.SEND
    if isinstance(bt, Receive):
        return BlockTypeTag.RECEIVE
    return BlockTypeTag.REVOKE


def to_compact_bytes(block: Block) -> bytes:
    """Serialize a block to its 193-byte compact form."""
    bt = block.block_type
    previous = _hex32(block.previous) if block.previous else _ZERO_FIELD
    if isinstance(bt, Open):
        amount, tail = bt.initial_balance, _ZERO_FIELD
    elif isinstance(bt, Send):
        amount, tail = bt.amount, _hex32(bt.destination)
    elif isinstance(bt, Receive):
        amount, tail = 0, _hex32(bt.source_hash)
    else:
        amount, tail = 0, _hex32(bt.credential_hash)
    signature = (
        bytes(block.signature)
        if len(block.signature) == _SIGNATURE_LEN
        else bytes(_SIGNATURE_LEN)
    )
    return b"".join(
        (
            bytes([_tag_of(block)]),
            _hex32(block.account),
            previous,
            _NUMBERS.pack(block.balance, block.nonce, block.timestamp, amount),
            tail,
            signature,
        )
    )


def from_compact_bytes(data: bytes) -> Block:
    """Deserialize a block from its compact form, recomputing the hash."""
    if len(data) < COMPACT_BLOCK_SIZE:
        raise DataTooShortError(got=len(data), expected=COMPACT_BLOCK_SIZE)
    data = bytes(data)
    tag = data[0]
    account = data[1:33].hex()
    prev_raw = data[33:65]
    previous = "" if not any(prev_raw) else prev_raw.hex()
    balance, nonce, timestamp, amount = _NUMBERS.unpack(data[65:97])
    dest_src = data[97:129].hex()
    signature = data[129:193]
    kind = BlockTypeTag.from_byte(tag)
    if kind is BlockTypeTag.OPEN:
        block_type = Open(initial_balance=amount)
    elif kind is BlockTypeTag.SEND:
        block_type = Send(destination=dest_src, amount=amount)
    elif kind is BlockTypeTag.RECEIVE:
        block_type = Receive(source_hash=dest_src)
    else:
        block_type = Revoke(credential_hash=dest_src)
    block_hash = Block.compute_hash(
        account, previous, block_type, balance, nonce, timestamp
    )
    return Block(
        account=account,
        previous=previous,
        block_type=block_type,
        balance=balance,
        nonce=nonce,
        timestamp=timestamp,
        hash=block_hash,
        signature=signature,
    )