"""Entry point for reading tags from files on disk."""

import logging
import os
from pathlib import Path
from typing import Iterator, Union

from .core import Tag
from .synchsafe import LEGACY_MASK, SYNCHSAFE_MASK

# MPEG audio files are where ID3 tags are expected
SUPPORTED_EXTENSIONS = {
    '.mp3',
    '.mp2',
    '.mp1',
    '.mpga',
}


def read(
    filename: Union[str, "os.PathLike[str]"],
    try_id3v1: bool = True,
    strict_size: bool = False,
) -> Tag:
    """
    Read the ID3 tag of a file and return a Tag object.

    Args:
        filename: Path to the audio file
        try_id3v1: If True, fall back to the ID3v1 footer when there is no
            ID3v2 header
        strict_size: If True, decode the tag size with the conformant
            synch-safe mask instead of the legacy one

    Raises:
        TagParseError: If the file has no readable tag
    """
    mask = SYNCHSAFE_MASK if strict_size else LEGACY_MASK
    return Tag.load(filename, try_id3v1=try_id3v1, size_mask=mask)


def iter_audio_files(path: Union[str, "os.PathLike[str]"]) -> Iterator[Path]:
    """
    Yield `path` itself if it is a file, or every supported audio file below
    it (sorted) if it is a directory.
    """
    path = Path(path)
    if not path.is_dir():
        yield path
        return

    for file_path in sorted(path.rglob("*")):
        if file_path.suffix.lower() in SUPPORTED_EXTENSIONS and file_path.is_file():
            yield file_path
        elif file_path.is_file():
            logging.debug("Skipping unsupported file format: %s", file_path)
