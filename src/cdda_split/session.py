from __future__ import annotations

import hashlib
from pathlib import Path
from typing import BinaryIO

import click

from cdda_core.classify import is_track_start
from cdda_core.errors import TrackExistsError, TrackOpenError, TrackTooLargeError
from cdda_core.protocol import (
    BLOCK_ALIGN,
    BLOCK_SIZE,
    BYTE_RATE,
    DATA_SIZE,
    FRAMES_PER_BLOCK,
    MAX_DATA_SIZE,
    TRACK_PREFIX,
)
from cdda_core.wav import track_name, write_header


class TrackSession:
    """One forward pass over a raw image, one WAV file per track.

    Idle until the first track-start block; from then on every block's PCM
    goes to the open track. A new track-start block closes the open track
    and opens the next one. Only one track file is open at a time.

    Use as a context manager: leaving the block closes the open track on
    every exit path, fatal errors included.
    """

    def __init__(self, out_dir: Path, prefix: str = TRACK_PREFIX):
        self.out_dir = Path(out_dir)
        self.prefix = prefix
        self.track_number = 0
        self.offset = 0
        self.start_offset = 0
        self.end_offset = 0
        self.num_frames = 0
        self.track_path: Path | None = None
        self.tracks: list[dict] = []
        self._fh: BinaryIO | None = None
        self._hash = None

    @property
    def recording(self) -> bool:
        return self._fh is not None

    def __enter__(self) -> TrackSession:
        return self

    def __exit__(self, exc_type, exc, tb) -> None:
        self.finish()

    def feed(self, block: bytes) -> None:
        if len(block) != BLOCK_SIZE:
            raise ValueError(f"Block must be {BLOCK_SIZE} bytes, got {len(block)}")

        if is_track_start(block):
            self.close_track()
            self.track_number += 1
            self.start_track()

        if self.recording:
            self.update_track(block)
        self.offset += BLOCK_SIZE

    def finish(self) -> None:
        """End of stream: close the open track, if any."""
        self.close_track()

    def start_track(self) -> None:
        self.num_frames = 0
        self.start_offset = self.offset
        path = self.out_dir / track_name(self.track_number, self.prefix)

        # Never overwrite: a collision aborts the run, already written
        # tracks are left as they are.
        try:
            fh = open(path, "xb")
        except FileExistsError:
            raise TrackExistsError(str(path)) from None
        except OSError as e:
            raise TrackOpenError(str(path), e.strerror or str(e)) from e

        self._fh = fh
        self._hash = hashlib.sha256()
        self.track_path = path
        write_header(fh, self.num_frames)

    def update_track(self, block: bytes) -> None:
        assert self._fh is not None
        data_size = (self.num_frames + FRAMES_PER_BLOCK) * BLOCK_ALIGN
        if data_size > MAX_DATA_SIZE:
            raise TrackTooLargeError(str(self.track_path), data_size)

        pcm = memoryview(block)[:DATA_SIZE]
        self._fh.write(pcm)
        self._hash.update(pcm)
        self.num_frames += FRAMES_PER_BLOCK

    def close_track(self) -> None:
        if self._fh is None:
            return

        fh, self._fh = self._fh, None
        self.end_offset = self.offset
        try:
            write_header(fh, self.num_frames)
        finally:
            fh.close()

        blocks = (self.end_offset - self.start_offset) // BLOCK_SIZE
        duration_s = ((self.end_offset - self.start_offset) * DATA_SIZE // BLOCK_SIZE) // BYTE_RATE
        name = self.track_path.name

        click.echo(
            f"{name}: duration_s:{duration_s} "
            f"start_offset:{self.start_offset} end_offset:{self.end_offset}",
            err=True,
        )

        self.tracks.append(
            {
                "track": self.track_number,
                "file": name,
                "start_offset": self.start_offset,
                "end_offset": self.end_offset,
                "blocks": blocks,
                "frames": self.num_frames,
                "data_bytes": self.num_frames * BLOCK_ALIGN,
                "duration_s": duration_s,
                "content_hash": self._hash.hexdigest(),
            }
        )
