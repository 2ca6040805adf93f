"""BLAKE3 hashing (default 32-byte output)."""

from __future__ import annotations

import struct
from typing import NamedTuple

_MASK = 0xFFFFFFFF
_BLOCK_LEN = 64
_CHUNK_LEN = 1024

_CHUNK_START = 1
_CHUNK_END = 2
_PARENT = 4
_ROOT = 8

_IV = (
    0x6A09E667,
    0xBB67AE85,
    0x3C6EF372,
    0xA54FF53A,
    0x510E527F,
    0x9B05688C,
    0x1F83D9AB,
    0x5BE0CD19,
)

_PERMUTATION = (2, 6, 3, 10, 7, 0, 4, 13, 1, 11, 12, 5, 9, 14, 15, 8)


def _rotr(x: int, n: int) -> int:
    return ((x >> n) | (x << (32 - n))) & _MASK


def _g(s: list[int], a: int, b: int, c: int, d: int, mx: int, my: int) -> None:
    s[a] = (s[a] + s[b] + mx) & _MASK
    s[d] = _rotr(s[d] ^ s[a], 16)
    s[c] = (s[c] + s[d]) & _MASK
    s[b] = _rotr(s[b] ^ s[c], 12)
    s[a] = (s[a] + s[b] + my) & _MASK
    s[d] = _rotr(s[d] ^ s[a], 8)
    s[c] = (s[c] + s[d]) & _MASK
    s[b] = _rotr(s[b] ^ s[c], 7)


def _round(s: list[int], m: list[int]) -> None:
    _g(s, 0, 4, 8, 12, m[0], m[1])
    _g(s, 1, 5, 9, 13, m[2], m[3])
    _g(s, 2, 6, 10, 14, m[4], m[5])
    _g(s, 3, 7, 11, 15, m[6], m[7])
    _g(s, 0, 5, 10, 15, m[8], m[9])
    _g(s, 1, 6, 11, 12, m[10], m[11])
    _g(s, 2, 7, 8, 13, m[12], m[13])
    _g(s, 3, 4, 9, 14, m[14], m[15])


def _compress(
    cv: tuple[int, ...], block: bytes, counter: int, block_len: int, flags: int
) -> list[int]:
    m = list(struct.unpack("<16I", block.ljust(_BLOCK_LEN, b"\x00")))
    s = [
        *cv,
        *_IV[:4],
        counter & _MASK,
        (counter >> 32) & _MASK,
        block_len,
        flags,
    ]
    for rnd in range(7):
        _round(s, m)
        if rnd < 6:
            m = [m[i] for i in _PERMUTATION]
    for i in range(8):
        s[i] ^= s[i + 8]
        s[i + 8] ^= cv[i]
    return s


class _Output(NamedTuple):
    cv: tuple[int, ...]
    block: bytes
    counter: int
    block_len: int
    flags: int

    def chaining_value(self) -> tuple[int, ...]:
        return tuple(
            _compress(self.cv, self.block, self.counter, self.block_len, self.flags)[:8]
        )

    def root_bytes(self) -> bytes:
        words = _compress(self.cv, self.block, 0, self.block_len, self.flags | _ROOT)
        return struct.pack("<8I", *words[:8])


def _chunk_output(chunk: bytes, chunk_index: int) -> _Output:
    blocks = [chunk[i : i + _BLOCK_LEN] for i in range(0, len(chunk), _BLOCK_LEN)] or [b""]
    cv = _IV
    for position, block in enumerate(blocks[:-1]):
        flags = _CHUNK_START if position == 0 else 0
        cv = tuple(_compress(cv, block, chunk_index, _BLOCK_LEN, flags)[:8])
    last = blocks[-1]
    flags = _CHUNK_END | (_CHUNK_START if len(blocks) == 1 else 0)
    return _Output(cv, last, chunk_index, len(last), flags)


def _node_output(data: bytes, chunk_index: int) -> _Output:
    if len(data) <= _CHUNK_LEN:
        return _chunk_output(data, chunk_index)
    chunks = -(-len(data) // _CHUNK_LEN)
    left_chunks = 1 << ((chunks - 1).bit_length() - 1)
    split = left_chunks * _CHUNK_LEN
    left = _node_output(data[:split], chunk_index).chaining_value()
    right = _node_output(data[split:], chunk_index + left_chunks).chaining_value()
    return _Output(_IV, struct.pack("<16I", *left, *right), 0, _BLOCK_LEN, _PARENT)


def hash_blake3_bytes(data: bytes) -> bytes:
    """Return the 32-byte BLAKE3 digest of ``data``."""
    return _node_output(bytes(data), 0).root_bytes()


def hash_blake3(data: bytes) -> str:
    """Return the BLAKE3 digest of ``data`` as lower-case hex."""
    return hash_blake3_bytes(data).hex()