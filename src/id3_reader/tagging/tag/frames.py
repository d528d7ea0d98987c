"""ID3v2 frame records and the reader that iterates them."""

import logging
import struct
from typing import BinaryIO, Callable, List, Optional

from ...constants import (
    FRAME_DECODED_MAJORS,
    FRAME_DESCRIPTIONS,
    FRAME_HEADER_FORMAT,
    FRAME_HEADER_SIZE,
)
from ...errors import TagParseError, TruncatedFrame, UnsupportedVersion
from .header import Header
from .utils import decode_text, split_terminated, strip_padding
from .version import TagVersion


class Frame:
    """
    A raw ID3v2 frame: 4-character key, payload size, flags and payload.

    Frames with keys this reader does not interpret are kept as plain Frame
    objects so callers can still get at their payload.
    """

    def __init__(self, key: str, size: int, flags: int, payload: bytes):
        self.key = key
        self.size = size
        self.flags = flags
        self.payload = payload

    @property
    def value(self):
        """The frame's decoded value; the raw payload for opaque frames."""
        return self.payload

    def __repr__(self):
        return f"{type(self).__name__}({self.key!r}, size={self.size}, flags=0x{self.flags:04x})"


class TextFrame(Frame):
    """A T*** frame: one encoding byte followed by encoded text."""

    def __init__(self, key: str, size: int, flags: int, payload: bytes):
        super().__init__(key, size, flags, payload)
        self.encoding = payload[0]
        self.text = decode_text(payload[1:], self.encoding)

    @property
    def value(self) -> str:
        return self.text


class CommentFrame(Frame):
    """
    A COMM frame: encoding byte, 3-byte language code, a terminated short
    content description, then the comment text itself.
    """

    def __init__(self, key: str, size: int, flags: int, payload: bytes):
        super().__init__(key, size, flags, payload)
        self.encoding = payload[0]
        self.language = payload[1:4].decode("latin-1").rstrip("\x00")
        description, text = split_terminated(payload[4:], self.encoding)
        if not strip_padding(text):
            # Nothing after the terminator: the remaining bytes are all comment text
            description, text = b"", payload[4:]
        self.description = decode_text(description, self.encoding)
        self.text = decode_text(text, self.encoding)

    @property
    def value(self) -> str:
        return self.text


def make_frame(key: str, size: int, flags: int, payload: bytes) -> Frame:
    """Build the most specific Frame subclass for `key`."""
    if key.startswith("T") and payload:
        return TextFrame(key, size, flags, payload)
    if key == "COMM" and len(payload) >= 4:
        return CommentFrame(key, size, flags, payload)
    return Frame(key, size, flags, payload)


class FrameReader:
    """
    Read the frames of an ID3v2.3/2.4 tag.

    Reading starts at the current position of the file, which must be just
    past the 10-byte tag header, and never goes beyond `header.size` bytes
    from there. Zero-size frames (padding) are skipped.
    """

    def __init__(self, header: Header):
        self.header = header

    def read_all(
        self,
        f: BinaryIO,
        on_frame: Optional[Callable[[Frame], None]] = None,
    ) -> List[Frame]:
        """
        Return the list of frames in the tag, calling `on_frame` for each
        one as it is appended.

        Raises:
            UnsupportedVersion: For ID3v2.2 tags
            TruncatedFrame: If a frame is cut short or overruns the tag
        """
        version = self.header.version
        if version.minor not in FRAME_DECODED_MAJORS:
            raise UnsupportedVersion(f"ID3v{version} frames are not supported")

        frames: List[Frame] = []
        budget = self.header.size
        consumed = 0

        while consumed + FRAME_HEADER_SIZE < budget:
            data = f.read(FRAME_HEADER_SIZE)
            if len(data) < FRAME_HEADER_SIZE:
                raise TruncatedFrame(
                    f"Couldn't read ID3v2 frame header at offset {consumed}: "
                    f"expected {FRAME_HEADER_SIZE} bytes, got {len(data)}"
                )
            raw_key, size, flags = struct.unpack(FRAME_HEADER_FORMAT, data)
            consumed += FRAME_HEADER_SIZE

            if size == 0:
                continue

            key = raw_key.decode("latin-1")
            if consumed + size > budget:
                raise TruncatedFrame(
                    f"Frame {key!r} of {size} bytes overruns the tag "
                    f"({budget - consumed} bytes left)"
                )
            payload = f.read(size)
            if len(payload) < size:
                raise TruncatedFrame(
                    f"Couldn't read ID3v2 frame {key!r}: expected {size} bytes, got {len(payload)}"
                )
            consumed += size

            frame = make_frame(key, size, flags, payload)
            logging.debug("Read frame %r", frame)
            frames.append(frame)
            if on_frame is not None:
                on_frame(frame)

        return frames


def describe_frame(key: str, version: TagVersion) -> Optional[str]:
    """
    Return a human-readable description of frame `key`.

    Raises:
        UnsupportedVersion: For ID3v2.2 tags
        TagParseError: For ID3v1 tags, which have no frames
    """
    if version.is_id3v2 and version.minor in FRAME_DECODED_MAJORS:
        return FRAME_DESCRIPTIONS.get(key)
    if version.is_id3v2 and version.minor == 2:
        raise UnsupportedVersion("ID3v2.2 frame descriptions are not supported")
    if version.is_id3v1:
        raise TagParseError("ID3v1 does not have frames")
    raise UnsupportedVersion(f"Unknown ID3 version {version}")
