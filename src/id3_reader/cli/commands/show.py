"""Show command - Print tag fields as one delimited line per file."""

import argparse
import logging
import sys
from pathlib import Path

from ...errors import NoTagFound, TagParseError
from ...tagging.tag.formats import iter_audio_files, read
from ..schemas import ErrorResponse, ShowResponse, TagInfo
from ..utils import ExitCode, json_output, load_config, reader_options


def error_code(e: TagParseError) -> str:
    """Machine-readable code for a parse failure."""
    if isinstance(e, NoTagFound):
        return "no_tag"
    if e.__class__ is TagParseError:
        return "parse_error"
    return "malformed_tag"


def cmd_show(args: argparse.Namespace) -> None:
    """Print the fields of every file's tag.

    Directories are scanned recursively for MPEG audio files. Each file
    produces one line of fields joined by the configured separator, in the
    configured order (year, artist, album, track, title, comment, genre,
    version by default). Missing fields print as empty strings.

    Args:
        args: Parsed command-line arguments

    Exit Codes:
        0: Every file was read
        10: Invalid input (path doesn't exist)
        20: At least one file had no readable tag
    """
    use_json = getattr(args, "json", False)
    config = load_config(args)
    try_id3v1, strict_size = reader_options(args)
    separator = args.separator if args.separator is not None else config.get_separator()
    fields = config.get_fields()

    tags = []
    errors = []
    for path_arg in args.paths:
        path = Path(path_arg)
        if not path.exists():
            if use_json:
                json_output(
                    ErrorResponse(
                        error="invalid_input",
                        message=f"Path does not exist: {path}",
                        path=str(path),
                    ),
                    ExitCode.INVALID_INPUT,
                )
            logging.error("Path does not exist: %s", path)
            sys.exit(ExitCode.INVALID_INPUT)

        for file_path in iter_audio_files(path):
            try:
                tag = read(file_path, try_id3v1=try_id3v1, strict_size=strict_size)
            except TagParseError as e:
                logging.error("%s: %s", file_path, e)
                errors.append(
                    ErrorResponse(error=error_code(e), message=str(e), path=str(file_path))
                )
                continue

            logging.debug("%s: %r", file_path, tag)
            if use_json:
                tags.append(
                    TagInfo(
                        path=str(file_path),
                        version=str(tag.version),
                        title=tag.title,
                        artist=tag.artist,
                        album=tag.album,
                        track=tag.track,
                        total_tracks=tag.total_tracks,
                        year=tag.year,
                        comment=tag.comment,
                        genre=tag.genre,
                    )
                )
            else:
                print(separator.join(tag.fields(fields)))

    exit_code = ExitCode.PARSE_ERROR if errors else ExitCode.SUCCESS
    if use_json:
        json_output(
            ShowResponse(
                status="completed_with_errors" if errors else "success",
                tags=tags,
                errors=errors or None,
            ),
            exit_code,
        )
    if errors:
        sys.exit(exit_code)
