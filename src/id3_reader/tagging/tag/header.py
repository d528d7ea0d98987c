"""Detection and parsing of the 10-byte ID3v2 header at the start of a file."""

import logging
import struct
from dataclasses import dataclass
from typing import BinaryIO, Optional

from ...constants import (
    ID3V2_HEADER_FORMAT,
    ID3V2_HEADER_SIZE,
    ID3V2_MARKER,
    MAX_ID3V2_MAJOR,
    MIN_ID3V2_MAJOR,
)
from ...errors import UnsupportedVersion
from .synchsafe import SizeCodec, legacy
from .version import TagVersion

# Header flag bits
FLAG_UNSYNCHRONISATION = 0x80
FLAG_EXTENDED_HEADER = 0x40
FLAG_EXPERIMENTAL = 0x20
FLAG_FOOTER_PRESENT = 0x10


@dataclass(frozen=True)
class Header:
    """An ID3v2 header. `size` excludes the 10 header bytes themselves."""

    version: TagVersion
    flags: int
    size: int

    @property
    def extended(self) -> bool:
        return bool(self.flags & FLAG_EXTENDED_HEADER)

    @property
    def unsynchronised(self) -> bool:
        return bool(self.flags & FLAG_UNSYNCHRONISATION)


class HeaderDecoder:
    def __init__(self, codec: SizeCodec = legacy):
        self.codec = codec

    def try_parse(self, f: BinaryIO) -> Optional[Header]:
        """
        Read an ID3v2 header from the current position of `f`.

        Returns None if there is no "ID3" marker. The position is left
        advanced past the bytes read either way.

        Raises:
            UnsupportedVersion: If the major version is outside 2-4
        """
        data = f.read(ID3V2_HEADER_SIZE)
        if len(data) < ID3V2_HEADER_SIZE or data[:3] != ID3V2_MARKER:
            return None

        marker, major, revision, flags, raw_size = struct.unpack(ID3V2_HEADER_FORMAT, data)
        if major < MIN_ID3V2_MAJOR or major > MAX_ID3V2_MAJOR:
            raise UnsupportedVersion(f"Unknown ID3v2 header version: 2.{major}.{revision}")

        size = self.codec.decode(raw_size)
        logging.debug(
            "ID3v2.%d.%d header: flags=0x%02x raw size=0x%08x decoded size=%d",
            major, revision, flags, raw_size, size,
        )
        return Header(TagVersion(2, major, revision), flags, size)


def read_header(f: BinaryIO, codec: SizeCodec = legacy) -> Optional[Header]:
    return HeaderDecoder(codec).try_parse(f)
