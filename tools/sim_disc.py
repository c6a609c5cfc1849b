import random
import sys
from pathlib import Path

from cdda_core.protocol import DATA_SIZE, SUBCODE_P, SUBCODE_SIZE

def make_block(track_start: bool, pcm: bytes | None = None) -> bytes:
    """One raw sector: PCM followed by subcode with P set (or not) everywhere."""
    if pcm is None:
        pcm = random.randbytes(DATA_SIZE)
    # Other subcode channels carry noise; only P marks the track start.
    sub = bytearray(random.randbytes(SUBCODE_SIZE))
    for i in range(SUBCODE_SIZE):
        sub[i] = sub[i] | SUBCODE_P if track_start else sub[i] & ~SUBCODE_P
    return pcm + bytes(sub)

def generate_image(out_file: str, track_blocks: list[int], lead_in: int = 0, tail: int = 0) -> Path:
    """Write a raw image with one track per entry of track_blocks.

    Each entry is the number of sectors in that track, start sector included.
    lead_in sectors precede the first track, tail adds a partial sector.
    """
    out = Path(out_file)
    out.parent.mkdir(parents=True, exist_ok=True)

    with open(out, "wb") as f:
        for _ in range(lead_in):
            f.write(make_block(False))
        for n in track_blocks:
            f.write(make_block(True))
            for _ in range(n - 1):
                f.write(make_block(False))
        if tail:
            f.write(random.randbytes(tail))

    print(f"GENERATED: {out} ({len(track_blocks)} tracks)")
    return out

if __name__ == "__main__":
    # Usage:
    #   python tools/sim_disc.py OUT_FILE BLOCKS [BLOCKS ...] [--lead-in N] [--tail N] [--seed N]

    args = [a for a in sys.argv[1:] if a]

    def pop_int(arg_list: list[str], flag: str, default: int) -> tuple[int, list[str]]:
        """Remove an integer option from an argv-style list."""
        if flag not in arg_list:
            return default, arg_list
        i = arg_list.index(flag)
        if i + 1 >= len(arg_list):
            raise SystemExit(f"{flag} requires a value")
        return int(arg_list[i + 1]), arg_list[:i] + arg_list[i + 2:]

    lead_in, args = pop_int(args, "--lead-in", 0)
    tail, args = pop_int(args, "--tail", 0)
    seed, args = pop_int(args, "--seed", 0)

    if not args:
        raise SystemExit("Usage: sim_disc.py OUT_FILE BLOCKS [BLOCKS ...]")

    random.seed(seed)
    generate_image(args[0], [int(n) for n in args[1:]], lead_in=lead_in, tail=tail)
