"""Error kinds raised while splitting an image."""
from __future__ import annotations

ERRORS = {
    "E_TRACK_EXISTS": "Track file already exists, won't overwrite",
    "E_TRACK_OPEN": "Track file could not be created",
    "E_TRACK_TOO_LARGE": "Track exceeds the WAV 32-bit size limit",
}


class TrackOpenError(OSError):
    """A track file could not be created. Fatal for the whole run."""

    code = "E_TRACK_OPEN"

    def __init__(self, path: str, reason: str):
        self.path = path
        self.reason = reason
        super().__init__(f'{ERRORS[self.code]}: "{path}": {reason}')


class TrackExistsError(TrackOpenError, FileExistsError):
    code = "E_TRACK_EXISTS"

    def __init__(self, path: str):
        super().__init__(path, "file exists")


class TrackTooLargeError(ValueError):
    code = "E_TRACK_TOO_LARGE"

    def __init__(self, path: str, data_size: int):
        self.path = path
        self.data_size = data_size
        super().__init__(f'{ERRORS[self.code]}: "{path}" would reach {data_size} bytes')
