"""CLI implementation for byteslice."""

import logging
import sys
from typing import Optional

import typer

from . import extract
from .core.model import ArgumentError, ByteSliceError
from .core.registry import _REGISTRY, DEFAULT_FORMAT
from .core.util import parse_int_option

app = typer.Typer(add_completion=False, help="Output a slice of a binary file in a chosen encoding.")


def _configure_logging(verbose: bool) -> None:
    if verbose:
        logging.basicConfig(
            level=logging.DEBUG,
            stream=sys.stderr,
            format="%(levelname)s %(name)s: %(message)s",
        )


@app.command()
def main(
    files: Optional[list[str]] = typer.Argument(None, metavar="FILE", help="File path or http(s) URL to read"),
    offset: str = typer.Option("0", "--offset", "-o", help="Offset of output in bytes"),
    size: str = typer.Option("-1", "--size", "--length", "-s", "-l", help="Size of output in bytes, -1 for all"),
    fmt: str = typer.Option(
        DEFAULT_FORMAT, "--format", "-f",
        help="Output format, available: " + ", ".join(_REGISTRY.names()),
    ),
    legacy_printable: bool = typer.Option(
        False, "--legacy-printable", help="C strings: treat bytes from decimal 20 upward as printable"
    ),
    list_formats: bool = typer.Option(False, "--list-formats", help="List output formats and exit"),
    verbose: bool = typer.Option(False, "--verbose", "-v", help="Log debug information to stderr"),
):
    """Write the selected byte range of FILE to stdout."""
    _configure_logging(verbose)

    if list_formats:
        for name, encoder in _REGISTRY.items():
            typer.echo(f"{name:<14}{encoder.description}")
        return

    try:
        start = parse_int_option("offset", offset)
        length = parse_int_option("size", size)
        _REGISTRY.resolve(fmt)

        sources = files or []
        if len(sources) != 1:
            raise ArgumentError(f"expected exactly one argument, got {len(sources)}")

        sink = typer.get_binary_stream("stdout")
        extract(sources[0], sink, offset=start, length=length, fmt=fmt,
                legacy_printable=legacy_printable)
        sink.flush()
    except (ByteSliceError, OSError) as e:
        typer.echo(f"ERROR: {e}", err=True)
        raise typer.Exit(code=1)


if __name__ == "__main__":
    app()
