import time

import pytest

from arxia.errors import InvalidBlockTypeError
from arxia.types import BlockTypeTag, now_millis


def test_block_type_tag_round_trip():
    assert BlockTypeTag.from_byte(0x00) is BlockTypeTag.OPEN
    assert BlockTypeTag.from_byte(0x01) is BlockTypeTag.SEND
    assert BlockTypeTag.from_byte(0x02) is BlockTypeTag.RECEIVE
    assert BlockTypeTag.from_byte(0x03) is BlockTypeTag.REVOKE


def test_block_type_tag_values_round_trip():
    for tag in BlockTypeTag:
        assert BlockTypeTag.from_byte(int(tag)) is tag


def test_block_type_tag_invalid():
    with pytest.raises(InvalidBlockTypeError) as info:
        BlockTypeTag.from_byte(0xFF)
    assert info.value.tag == 0xFF


def test_now_millis_not_zero():
    assert now_millis() > 0


def test_now_millis_tracks_wall_clock():
    before = int(time.time() * 1000)
    value = now_millis()
    after = int(time.time() * 1000)
    assert before - 1 <= value <= after + 1