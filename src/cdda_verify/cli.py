import json
from pathlib import Path
import click
from cdda_core.protocol import TRACK_PREFIX
from .logic import verify_tracks

@click.group()
def main():
    pass

@main.command("tracks")
@click.argument("path", type=click.Path(file_okay=False, path_type=Path))
@click.option("--prefix", default=TRACK_PREFIX, show_default=True)
def tracks_cmd(path: Path, prefix: str):
    result = verify_tracks(path, prefix)
    click.echo(json.dumps(result, sort_keys=True, separators=(",", ":"), ensure_ascii=False))
    if result["status"] != "PASS":
        raise SystemExit(1)

if __name__ == "__main__":
    main()
