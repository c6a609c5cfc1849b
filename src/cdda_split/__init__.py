"""CDDA Split - Streaming track splitter for raw CDDA images."""
from .session import TrackSession
from .streams import iter_blocks, split_stream, write_track_index

__all__ = ["TrackSession", "iter_blocks", "split_stream", "write_track_index"]
