import os
import subprocess
import sys
from pathlib import Path

from cdda_core.protocol import DATA_SIZE, WAV_HEADER_LEN

def run(args, cwd, stdin=None):
    env = dict(os.environ)
    env["PYTHONPATH"] = os.pathsep.join([str(Path(cwd) / "src"), env.get("PYTHONPATH", "")])
    return subprocess.run([sys.executable, *args], cwd=cwd, env=env, stdin=stdin, check=False, capture_output=True)

def test_split_and_rerun(tmp_path):
    repo = Path(__file__).resolve().parents[1]
    img = tmp_path / "disc.img"
    out = tmp_path / "tracks"

    # Lead-in, three tracks, torn last sector
    r = run(["tools/sim_disc.py", str(img), "3", "5", "2", "--lead-in", "4", "--tail", "100", "--seed", "7"], cwd=repo)
    assert r.returncode == 0, r.stderr + r.stdout

    with open(img, "rb") as f:
        r = run(["-m", "cdda_split.cli", "-o", str(out)], cwd=repo, stdin=f)
    assert r.returncode == 0, r.stderr
    assert r.stdout == b""

    names = sorted(p.name for p in out.iterdir())
    assert names == ["track_01.wav", "track_02.wav", "track_03.wav"]
    sizes = [(out / n).stat().st_size - WAV_HEADER_LEN for n in names]
    assert sizes == [3 * DATA_SIZE, 5 * DATA_SIZE, 2 * DATA_SIZE]

    diag = r.stderr.decode().splitlines()
    assert sum(line.startswith("track_") for line in diag) == 3
    assert any("Truncated block" in line for line in diag)

    r = run(["-m", "cdda_verify.cli", "tracks", str(out)], cwd=repo)
    assert r.returncode == 0, r.stdout

    # Re-running into the same directory fails fast and leaves the files alone
    before = {n: (out / n).read_bytes() for n in names}
    with open(img, "rb") as f:
        r = run(["-m", "cdda_split.cli", "-o", str(out)], cwd=repo, stdin=f)
    assert r.returncode == 1
    assert b"FATAL:" in r.stderr
    assert {n: (out / n).read_bytes() for n in names} == before
