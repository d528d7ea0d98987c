"""Inspect command - Display the raw ID3v2 header or ID3v1 footer."""

import argparse
import logging
import sys
import traceback
from pathlib import Path

from rich.console import Console
from rich.table import Table

from ...errors import TagParseError
from ...tagging.tag.footer import Footer
from ...tagging.tag.formats import read
from ...tagging.tag.genres import genre_name
from ..utils import ExitCode, reader_options


def cmd_inspect(args: argparse.Namespace) -> None:
    """Display the structure a file's tag was decoded from.

    Args:
        args: Parsed command-line arguments
    """
    console = Console()
    path = Path(args.path)

    if not path.is_file():
        console.print(f"[red]Error: File not found: {path}[/red]")
        sys.exit(ExitCode.INVALID_INPUT)

    console.print(f"[cyan]Reading file: {path}[/cyan]")
    console.print(f"[cyan]File size: {path.stat().st_size:,} bytes[/cyan]\n")

    try_id3v1, strict_size = reader_options(args)
    try:
        tag = read(path, try_id3v1=try_id3v1, strict_size=strict_size)
    except TagParseError as e:
        console.print(f"[red]Error parsing file: {e}[/red]")
        if logging.getLogger().level <= logging.DEBUG:
            console.print(traceback.format_exc())
        sys.exit(ExitCode.PARSE_ERROR)

    header = tag.header
    if isinstance(header, Footer):
        table = Table(title="ID3v1 Footer", show_header=False)
        table.add_column("Field", style="cyan", width=15)
        table.add_column("Value", style="magenta")

        table.add_row("Version", str(header.version))
        table.add_row("Size", f"{header.size} bytes")
        table.add_row("Title", repr(header.title))
        table.add_row("Artist", repr(header.artist))
        table.add_row("Album", repr(header.album))
        table.add_row("Year", repr(header.year))
        table.add_row("Comment", repr(header.comment))
        table.add_row("Track byte", str(header.track))
        table.add_row("Genre byte", f"{header.genre} ({genre_name(header.genre) or 'unknown'})")
    else:
        table = Table(title="ID3v2 Header", show_header=False)
        table.add_column("Field", style="cyan", width=15)
        table.add_column("Value", style="magenta")

        table.add_row("Version", str(header.version))
        table.add_row("Flags", f"0x{header.flags:02x}")
        table.add_row("Unsynchronised", "Yes" if header.unsynchronised else "No")
        table.add_row("Extended header", "Yes" if header.extended else "No")
        table.add_row("Tag size", f"{header.size:,} bytes")
        table.add_row("Size decoding", "strict (0x7f)" if strict_size else "legacy (0xef)")
        table.add_row("Frames", str(len(tag.frames)))

    console.print(table)
