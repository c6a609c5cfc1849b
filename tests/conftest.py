import pytest

from cdda_core.protocol import DATA_SIZE, SUBCODE_P, SUBCODE_SIZE


def make_block(track_start: bool = False, fill: int = 0, sub: bytes | None = None) -> bytes:
    pcm = bytes([fill & 0xFF]) * DATA_SIZE
    if sub is None:
        sub = bytes([SUBCODE_P if track_start else 0x00]) * SUBCODE_SIZE
    return pcm + sub


@pytest.fixture
def block():
    return make_block
