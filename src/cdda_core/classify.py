from __future__ import annotations

from .protocol import BLOCK_SIZE, DATA_SIZE, SUBCODE_P


def is_track_start(block: bytes) -> bool:
    """Check if this block is the start of a new track.

    A track starts where subcode channel P is all 1's, i.e. the P bit is
    set in every byte of the subcode region. The PCM region is ignored.
    Only whole sectors are classified.
    """
    if len(block) != BLOCK_SIZE:
        raise ValueError(f"Block must be {BLOCK_SIZE} bytes, got {len(block)}")

    for b in memoryview(block)[DATA_SIZE:BLOCK_SIZE]:
        if not b & SUBCODE_P:
            return False
    return True
