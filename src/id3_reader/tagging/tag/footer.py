"""Detection and parsing of the 128-byte ID3v1 trailer at the end of a file."""

import io
import logging
import struct
from dataclasses import dataclass
from typing import BinaryIO

from ...constants import ID3V1_FORMAT, ID3V1_MARKER, ID3V1_SIZE
from ...errors import MissingFooter, TagParseError, TruncatedSource
from .utils import decode_latin1
from .version import TagVersion


@dataclass(frozen=True)
class Footer:
    """
    An ID3v1 (or ID3v1.1) trailer.

    Text fields are decoded from Latin-1 with their padding removed. `track`
    and `genre` are the raw bytes; `track` is only meaningful for ID3v1.1
    (minor version 1), where it replaces the last byte of the comment.
    """

    version: TagVersion
    title: str
    artist: str
    album: str
    year: str
    comment: str
    track: int
    genre: int
    flags: int = 0
    size: int = ID3V1_SIZE


class FooterDecoder:
    def try_parse(self, f: BinaryIO) -> Footer:
        """
        Read the ID3v1 trailer from the last 128 bytes of `f`.

        Raises:
            TruncatedSource: If the source is shorter than 128 bytes
            MissingFooter: If the trailer does not start with "TAG"
            TagParseError: If the source cannot seek
        """
        try:
            f.seek(-ID3V1_SIZE, io.SEEK_END)
        except io.UnsupportedOperation as e:
            raise TagParseError(f"Couldn't seek to ID3v1 footer: {e}") from e
        except (OSError, ValueError) as e:
            raise TruncatedSource(
                f"Couldn't seek to ID3v1 footer: source shorter than {ID3V1_SIZE} bytes"
            ) from e

        data = f.read(ID3V1_SIZE)
        if len(data) < ID3V1_SIZE:
            raise TruncatedSource(
                f"Incomplete ID3v1 footer: expected {ID3V1_SIZE} bytes, got {len(data)}"
            )
        if data[:3] != ID3V1_MARKER:
            raise MissingFooter("Missing ID3v1 footer")

        marker, title, artist, album, year, comment, track, genre = struct.unpack(
            ID3V1_FORMAT, data
        )
        version = TagVersion(1, 1 if track else 0, 0)
        logging.debug("ID3v%s footer: track=%d genre=%d", version, track, genre)

        return Footer(
            version=version,
            title=decode_latin1(title),
            artist=decode_latin1(artist),
            album=decode_latin1(album),
            year=decode_latin1(year),
            comment=decode_latin1(comment),
            track=track,
            genre=genre,
        )


def read_footer(f: BinaryIO) -> Footer:
    return FooterDecoder().try_parse(f)
