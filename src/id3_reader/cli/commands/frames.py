"""Frames command - List the frames of an ID3v2 tag."""

import argparse
import logging
import sys
from pathlib import Path

from rich.console import Console
from rich.table import Table

from ...errors import TagParseError
from ...tagging.tag.formats import read
from ..schemas import ErrorResponse, FrameInfo, FramesResponse
from ..utils import ExitCode, json_output, reader_options
from .show import error_code


def frame_text(frame) -> str:
    """Short display form of a frame's value."""
    value = frame.value
    if isinstance(value, bytes):
        return f"<{len(value)} bytes>"
    if len(value) > 50:
        return value[:47] + "..."
    return value


def cmd_frames(args: argparse.Namespace) -> None:
    """List key, size, flags, description and value of each ID3v2 frame.

    Args:
        args: Parsed command-line arguments

    Exit Codes:
        0: Success
        10: Invalid input (file doesn't exist, or only an ID3v1 tag)
        20: The file has no readable tag
    """
    use_json = getattr(args, "json", False)
    console = Console(quiet=use_json)
    path = Path(args.path)

    if not path.is_file():
        if use_json:
            json_output(
                ErrorResponse(error="invalid_input", message=f"File not found: {path}"),
                ExitCode.INVALID_INPUT,
            )
        console.print(f"[red]Error: File not found: {path}[/red]")
        sys.exit(ExitCode.INVALID_INPUT)

    # The footer has no frames, so never fall back to it here
    _, strict_size = reader_options(args)
    try:
        tag = read(path, try_id3v1=False, strict_size=strict_size)
    except TagParseError as e:
        if use_json:
            json_output(
                ErrorResponse(error=error_code(e), message=str(e), path=str(path)),
                ExitCode.PARSE_ERROR,
            )
        console.print(f"[red]Error: {e}[/red]")
        logging.debug("Failed to read frames from %s", path, exc_info=True)
        sys.exit(ExitCode.PARSE_ERROR)

    if use_json:
        json_output(
            FramesResponse(
                path=str(path),
                version=str(tag.version),
                frames=[
                    FrameInfo(
                        key=frame.key,
                        size=frame.size,
                        flags=frame.flags,
                        description=tag.describe_frame(frame),
                        value=frame.value if isinstance(frame.value, str) else None,
                    )
                    for frame in tag.frames
                ],
            )
        )

    table = Table(title=f"ID3v{tag.version} frames: {path.name}")
    table.add_column("Key", style="cyan")
    table.add_column("Size", style="green", justify="right")
    table.add_column("Flags", style="yellow", justify="right")
    table.add_column("Description")
    table.add_column("Value", style="magenta")

    for frame in tag.frames:
        table.add_row(
            frame.key,
            str(frame.size),
            f"0x{frame.flags:04x}",
            tag.describe_frame(frame) or "[dim]unknown[/dim]",
            frame_text(frame),
        )

    console.print(table)
    console.print(f"[dim]{len(tag.frames)} frames[/dim]")
