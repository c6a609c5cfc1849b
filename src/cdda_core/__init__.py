"""CDDA Core - Shared sector layout, classification and WAV encoding."""
from .classify import is_track_start
from .wav import decode_header, encode_header, track_name, write_header

__all__ = ["is_track_start", "decode_header", "encode_header", "track_name", "write_header"]
