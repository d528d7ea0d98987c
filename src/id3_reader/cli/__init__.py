"""Command-line interface for ID3 Reader (id3r).

This package provides the 'id3r' command-line tool with these subcommands:
    show: Print tag fields as one delimited line per file
    frames: List the frames of an ID3v2 tag
    inspect: Display the raw ID3v2 header or ID3v1 footer

Modules:
    commands/: Command implementations
    schemas.py: JSON output models
    utils.py: CLI utility functions
"""

import argparse
import logging
import sys

from rich_argparse import RichHelpFormatter

from .. import __version__
from .utils import ExitCode, setup_logging
from .commands import (
    cmd_show,
    cmd_frames,
    cmd_inspect,
)

__all__ = [
    "main",
    "cmd_show",
    "cmd_frames",
    "cmd_inspect",
    "setup_logging",
]


class RichRawHelpFormatter(RichHelpFormatter, argparse.RawDescriptionHelpFormatter):
    """Combines Rich formatting with the ability to keep line breaks (Raw)."""
    pass


def main() -> None:
    """Main CLI entry point."""

    # Parent parser for shared options
    parent_parser = argparse.ArgumentParser(add_help=False)

    parent_parser.add_argument(
        "-v",
        "--version",
        action="version",
        version=f"%(prog)s {__version__}",
    )
    parent_parser.add_argument(
        "-l",
        "--log-level",
        default=None,
        help="Set logging level (disabled by default)",
    )
    parent_parser.add_argument("-c", "--config", help="Path to configuration file")
    parent_parser.add_argument(
        "--strict-size",
        action="store_true",
        help="Decode tag sizes with the standard synch-safe mask (0x7f) "
        "instead of the legacy one (0xef)",
    )

    parser = argparse.ArgumentParser(
        prog="id3r",
        usage="id3r <command> [options]",
        description="ID3 Reader - Read ID3v2 and ID3v1 metadata from audio files",
        formatter_class=RichRawHelpFormatter,
        parents=[parent_parser],
    )

    subparsers = parser.add_subparsers(
        title="Commands",
        dest="command",
        metavar="",
    )

    # ──────────────────────────────
    # show
    # ──────────────────────────────
    show_parser = subparsers.add_parser(
        "show",
        help="Print tag fields, one line per file",
        usage="id3r show <path> [<path> ...] [options]",
        description=(
            "Print year, artist, album, track, title, comment, genre and "
            "version for each file (directories are scanned recursively)"
        ),
        parents=[parent_parser],
        formatter_class=RichHelpFormatter,
    )
    show_parser.add_argument("paths", nargs="+", help="Audio files or directories")
    show_parser.add_argument(
        "-s",
        "--separator",
        default=None,
        help="Field separator (default: ',')",
    )
    show_parser.add_argument(
        "--no-id3v1",
        action="store_true",
        help="Don't fall back to the ID3v1 footer",
    )
    show_parser.add_argument("--json", action="store_true", help="Output JSON")
    show_parser.set_defaults(func=cmd_show)

    # ──────────────────────────────
    # frames
    # ──────────────────────────────
    frames_parser = subparsers.add_parser(
        "frames",
        help="List the frames of an ID3v2 tag",
        usage="id3r frames <path> [options]",
        description="Display every frame of a file's ID3v2 tag with its description",
        parents=[parent_parser],
        formatter_class=RichHelpFormatter,
    )
    frames_parser.add_argument("path", help="Audio file")
    frames_parser.add_argument("--json", action="store_true", help="Output JSON")
    frames_parser.set_defaults(func=cmd_frames)

    # ──────────────────────────────
    # inspect
    # ──────────────────────────────
    inspect_parser = subparsers.add_parser(
        "inspect",
        help="Inspect the raw tag header or footer",
        usage="id3r inspect <path> [options]",
        description="Display the ID3v2 header or ID3v1 footer a file's tag was read from",
        parents=[parent_parser],
        formatter_class=RichHelpFormatter,
    )
    inspect_parser.add_argument("path", help="Audio file")
    inspect_parser.add_argument(
        "--no-id3v1",
        action="store_true",
        help="Don't fall back to the ID3v1 footer",
    )
    inspect_parser.set_defaults(func=cmd_inspect)

    # Parse args
    args = parser.parse_args()

    # Show help if no command is provided
    if not args.command:
        parser.print_help()
        sys.exit(ExitCode.ERROR)

    # Logging setup
    if args.log_level:
        setup_logging(args.log_level)
    else:
        setup_logging("critical")

    # Execute command
    try:
        args.func(args)
    except KeyboardInterrupt:
        logging.info("\nOperation cancelled by user")
        sys.exit(ExitCode.CANCELLED)
    except Exception as e:
        logging.error(f"Error: {e}", exc_info=args.log_level == "debug")
        sys.exit(ExitCode.ERROR)


if __name__ == "__main__":
    main()
