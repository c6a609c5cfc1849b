import re
from pathlib import Path
from cdda_core.protocol import (
    BITS_PER_SAMPLE, BLOCK_ALIGN, BYTE_RATE, NUM_CHANNELS, SAMPLE_RATE,
    TRACK_PREFIX, TRACK_SUFFIX, WAV_FORMAT_PCM, WAV_HEADER_LEN, WAV_SUBCHUNK1_PCM,
)
from cdda_core.wav import decode_header
from .const import ERRORS

EXPECTED_FORMAT = {
    "subchunk1_size": WAV_SUBCHUNK1_PCM,
    "audio_format": WAV_FORMAT_PCM,
    "num_channels": NUM_CHANNELS,
    "sample_rate": SAMPLE_RATE,
    "byte_rate": BYTE_RATE,
    "block_align": BLOCK_ALIGN,
    "bits_per_sample": BITS_PER_SAMPLE,
}

def _error(code: str, **extra) -> dict:
    return {"code": code, "message": ERRORS[code], **extra}

def find_tracks(track_dir: Path, prefix: str = TRACK_PREFIX) -> dict[int, Path]:
    pat = re.compile(re.escape(prefix) + r"(\d{2,})" + re.escape(TRACK_SUFFIX) + "$")
    found = {}
    for p in track_dir.iterdir():
        m = pat.match(p.name)
        if m and p.is_file():
            found[int(m.group(1))] = p
    return dict(sorted(found.items()))

def verify_track(path: Path) -> list[dict]:
    errors = []
    size = path.stat().st_size
    with open(path, "rb") as f:
        raw = f.read(WAV_HEADER_LEN)
    try:
        hdr = decode_header(raw)
    except ValueError as e:
        return [_error("E_HEADER_MAGIC", path=str(path), detail=str(e))]

    bad = {k: hdr[k] for k, v in EXPECTED_FORMAT.items() if hdr[k] != v}
    if bad:
        errors.append(_error("E_HEADER_FORMAT", path=str(path), fields=bad))

    payload = size - WAV_HEADER_LEN
    if hdr["data_size"] != payload:
        errors.append(_error("E_SIZE_MISMATCH", path=str(path), header=hdr["data_size"], payload=payload))
    elif hdr["data_size"] % BLOCK_ALIGN:
        errors.append(_error("E_SIZE_MISMATCH", path=str(path), header=hdr["data_size"], partial_frame=True))
    if hdr["chunk_size"] != (36 + hdr["data_size"]) & 0xFFFFFFFF:
        errors.append(_error("E_RIFF_SIZE", path=str(path), chunk_size=hdr["chunk_size"]))
    return errors

def verify_tracks(track_dir: Path, prefix: str = TRACK_PREFIX) -> dict:
    errors = []
    if not track_dir.is_dir():
        errors.append(_error("E_LAYOUT_MISSING", path=str(track_dir)))
        return {"status":"FAIL","error_count":len(errors),"errors":errors,"tracks":0}

    tracks = find_tracks(track_dir, prefix)
    numbers = list(tracks)
    if numbers != list(range(1, len(numbers) + 1)):
        errors.append(_error("E_TRACK_GAP", found=numbers))

    for path in tracks.values():
        errors.extend(verify_track(path))

    status = "FAIL" if errors else "PASS"
    return {"status":status,"error_count":len(errors),"errors":errors,"tracks":len(tracks)}
