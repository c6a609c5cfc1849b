"""CDDA Split - raw disc image to per-track WAV files."""
from __future__ import annotations

from pathlib import Path
from typing import BinaryIO

import click

from cdda_core.protocol import TRACK_PREFIX
from cdda_split.streams import split_stream, write_track_index


@click.command()
@click.argument("image", type=click.File("rb"), default="-")
@click.option(
    "-o",
    "--output-dir",
    type=click.Path(file_okay=False, path_type=Path),
    default=Path("."),
    show_default=True,
    help="Directory the track files are created in",
)
@click.option("--prefix", default=TRACK_PREFIX, show_default=True, help="Track file name prefix")
@click.option(
    "--index",
    type=click.Path(dir_okay=False, path_type=Path),
    default=None,
    help="Also write a parquet index of the produced tracks",
)
def main(image: BinaryIO, output_dir: Path, prefix: str, index: Path | None) -> None:
    """Split a raw CDDA image with subcode (IMAGE, default stdin) into tracks.

    Track boundaries come from subcode channel P. Existing track files are
    never overwritten: a name collision stops the run.
    """
    try:
        tracks = split_stream(image, output_dir, prefix)
        if index is not None:
            write_track_index(tracks, index)
    except Exception as e:
        # Fail closed with a single-line reason; tracks already written stay.
        click.echo(f"FATAL: {e}", err=True)
        raise SystemExit(1)


if __name__ == "__main__":
    main()
