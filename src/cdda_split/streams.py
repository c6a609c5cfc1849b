from __future__ import annotations

from pathlib import Path
from typing import BinaryIO, Iterator
from warnings import warn

import pandas as pd
import pyarrow as pa
import pyarrow.parquet as pq

from cdda_core.protocol import BLOCK_SIZE, TRACK_PREFIX

from cdda_split.session import TrackSession


def iter_blocks(stream: BinaryIO, block_size: int = BLOCK_SIZE) -> Iterator[bytes]:
    """Yield full sectors (PCM + subcode) until the stream runs dry.

    A partial trailing sector is treated as end of stream.
    """
    offset = 0
    while True:
        block = stream.read(block_size)

        # Clean EOF
        if not block:
            return

        if len(block) < block_size:
            warn(f"Truncated block at offset {offset} ({len(block)} of {block_size} bytes). Stopping.")
            return

        yield block
        offset += block_size


def split_stream(stream: BinaryIO, out_dir: Path, prefix: str = TRACK_PREFIX) -> list[dict]:
    """Split a raw CDDA + subcode image into one WAV file per track.

    Returns one record per closed track. Track file errors propagate after
    the open track (if any) has been closed.
    """
    out_dir = Path(out_dir)
    out_dir.mkdir(parents=True, exist_ok=True)

    with TrackSession(out_dir, prefix) as session:
        for block in iter_blocks(stream):
            session.feed(block)

    return session.tracks


def write_track_index(tracks: list[dict], out_path: Path) -> None:
    """Write a parquet table describing the produced tracks."""
    df = pd.DataFrame(tracks)
    if df.empty:
        return

    schema = pa.schema(
        [
            ("track", pa.int32()),
            ("file", pa.string()),
            ("start_offset", pa.int64()),
            ("end_offset", pa.int64()),
            ("blocks", pa.int64()),
            ("frames", pa.int64()),
            ("data_bytes", pa.int64()),
            ("duration_s", pa.int64()),
            ("content_hash", pa.string()),
        ]
    )

    out_path = Path(out_path)
    out_path.parent.mkdir(parents=True, exist_ok=True)
    table = pa.Table.from_pandas(df, schema=schema, preserve_index=False)
    pq.write_table(table, out_path)
