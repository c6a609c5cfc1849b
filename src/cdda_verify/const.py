ERRORS = {
  "E_LAYOUT_MISSING": "Track directory missing",
  "E_HEADER_MAGIC": "WAV header missing or malformed",
  "E_HEADER_FORMAT": "WAV format fields do not match CDDA audio",
  "E_SIZE_MISMATCH": "Header data size does not match file payload",
  "E_RIFF_SIZE": "RIFF chunk size does not match data size",
  "E_TRACK_GAP": "Track numbering is not contiguous from 01",
}
