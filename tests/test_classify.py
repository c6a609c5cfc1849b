import pytest

from cdda_core.classify import is_track_start
from cdda_core.protocol import DATA_SIZE, SUBCODE_P, SUBCODE_SIZE


def test_p_bit_in_every_byte_is_a_track_start(block):
    # Every byte value with P set, at every subcode position.
    with_p = [v for v in range(256) if v & SUBCODE_P]
    for v in with_p:
        assert is_track_start(block(sub=bytes([v]) * SUBCODE_SIZE))
    assert is_track_start(block(sub=bytes(with_p[i % len(with_p)] for i in range(SUBCODE_SIZE))))


def test_one_clear_p_bit_anywhere_is_not_a_track_start(block):
    without_p = [v for v in range(256) if not v & SUBCODE_P]
    for pos in range(SUBCODE_SIZE):
        for v in without_p:
            sub = bytearray([0xFF]) * SUBCODE_SIZE
            sub[pos] = v
            assert not is_track_start(block(sub=bytes(sub)))


def test_payload_is_ignored(block):
    assert not is_track_start(block(track_start=False, fill=0xFF))
    assert is_track_start(block(track_start=True, fill=0x00))


def test_only_p_bit_matters(block):
    # All other subcode channels set, P clear.
    assert not is_track_start(block(sub=bytes([0x7F]) * SUBCODE_SIZE))
    assert is_track_start(block(sub=bytes([0x80]) * SUBCODE_SIZE))


def test_block_layout():
    assert DATA_SIZE == 2352
    assert SUBCODE_SIZE == 96


def test_partial_block_is_rejected():
    for size in (0, DATA_SIZE, DATA_SIZE + SUBCODE_SIZE - 1):
        with pytest.raises(ValueError):
            is_track_start(b"\xff" * size)
