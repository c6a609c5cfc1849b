"""RIFF/WAVE header encoding for CDDA tracks."""
from __future__ import annotations

import struct
from typing import BinaryIO

from .protocol import (
    BITS_PER_SAMPLE,
    BLOCK_ALIGN,
    BYTE_RATE,
    NUM_CHANNELS,
    SAMPLE_RATE,
    TRACK_PREFIX,
    TRACK_SUFFIX,
    WAV_FORMAT_PCM,
    WAV_HEADER_FMT,
    WAV_HEADER_LEN,
    WAV_SUBCHUNK1_PCM,
)

_U32 = 0xFFFFFFFF


def encode_header(num_frames: int) -> bytes:
    """Build the 44-byte header for a track holding num_frames frames.

    Size fields wrap at 32 bits like the on-disk format does.
    """
    data_size = (num_frames * BLOCK_ALIGN) & _U32
    chunk_size = (36 + data_size) & _U32
    return struct.pack(
        WAV_HEADER_FMT,
        b"RIFF",
        chunk_size,
        b"WAVE",
        b"fmt ",
        WAV_SUBCHUNK1_PCM,
        WAV_FORMAT_PCM,
        NUM_CHANNELS,
        SAMPLE_RATE,
        BYTE_RATE,
        BLOCK_ALIGN,
        BITS_PER_SAMPLE,
        b"data",
        data_size,
    )


def write_header(sink: BinaryIO, num_frames: int) -> None:
    """(Re)write the header at offset 0 and return to the end of the sink."""
    sink.seek(0)
    sink.write(encode_header(num_frames))
    sink.seek(0, 2)


def decode_header(raw: bytes) -> dict:
    if len(raw) < WAV_HEADER_LEN:
        raise ValueError(f"Truncated WAV header ({len(raw)} bytes)")

    (
        riff,
        chunk_size,
        wave,
        fmt,
        subchunk1_size,
        audio_format,
        num_channels,
        sample_rate,
        byte_rate,
        block_align,
        bits_per_sample,
        data,
        data_size,
    ) = struct.unpack(WAV_HEADER_FMT, raw[:WAV_HEADER_LEN])

    if riff != b"RIFF" or wave != b"WAVE" or fmt != b"fmt " or data != b"data":
        raise ValueError(f"Bad WAV magic {riff!r}/{wave!r}/{fmt!r}/{data!r}")

    return {
        "chunk_size": chunk_size,
        "subchunk1_size": subchunk1_size,
        "audio_format": audio_format,
        "num_channels": num_channels,
        "sample_rate": sample_rate,
        "byte_rate": byte_rate,
        "block_align": block_align,
        "bits_per_sample": bits_per_sample,
        "data_size": data_size,
    }


def track_name(number: int, prefix: str = TRACK_PREFIX) -> str:
    """track_01.wav, track_02.wav, ... (track numbers are one-based)."""
    return f"{prefix}{number:02d}{TRACK_SUFFIX}"
