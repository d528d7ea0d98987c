"""Pytest configuration and fixtures.

Synthetic tags are assembled byte by byte with struct so every test knows
exactly what is on disk.
"""

import io
import struct

import pytest

from id3_reader.tagging.tag.synchsafe import SizeCodec

# Tag sizes used by the builders. Every 7-bit group of 256 has bit 4 clear,
# so the legacy and strict size decodings agree on it.
DEFAULT_TAG_SIZE = 256

AUDIO = b"\xff\xfb\x90\x64" + b"\x00" * 412


def make_frame(key, payload, flags=0):
    """Return the bytes of one ID3v2.3/2.4 frame."""
    return struct.pack(">4sIH", key.encode("latin-1"), len(payload), flags) + payload


def make_text_frame(key, text, encoding=0):
    codec = {0: "latin-1", 1: "utf-16", 2: "utf-16-be", 3: "utf-8"}[encoding]
    return make_frame(key, bytes([encoding]) + text.encode(codec))


def make_comment_frame(text, description="", language="eng", encoding=0):
    codec = {0: "latin-1", 3: "utf-8"}[encoding]
    payload = (
        bytes([encoding])
        + language.encode("latin-1")
        + description.encode(codec)
        + b"\x00"
        + text.encode(codec)
    )
    return make_frame("COMM", payload)


def make_id3v2(frames=(), major=3, revision=0, flags=0, size=None, raw_size=None):
    """
    Return an ID3v2 header plus frame region.

    The frame region is zero-padded to `size` bytes (default 256). Pass
    `raw_size` to write an arbitrary value into the header's size field.
    """
    body = b"".join(frames)
    if size is None:
        size = max(DEFAULT_TAG_SIZE, len(body))
    body = body.ljust(size, b"\x00")
    if raw_size is None:
        raw_size = SizeCodec.encode(size)
    header = struct.pack(">3sBBBI", b"ID3", major, revision, flags, raw_size)
    return header + body


def make_id3v1(title="", artist="", album="", year="", comment="", track=0, genre=255):
    """Return a 128-byte ID3v1 (track 0) or ID3v1.1 (track > 0) footer."""

    def field(value, width):
        return value.encode("latin-1")[:width].ljust(width, b"\x00")

    return (
        b"TAG"
        + field(title, 30)
        + field(artist, 30)
        + field(album, 30)
        + field(year, 4)
        + field(comment, 29)
        + bytes([track, genre])
    )


class TrackingReader(io.BytesIO):
    """BytesIO recording the furthest position any read reached."""

    def __init__(self, data):
        super().__init__(data)
        self.max_read_end = 0

    def read(self, size=-1):
        data = super().read(size)
        self.max_read_end = max(self.max_read_end, self.tell())
        return data


@pytest.fixture
def frame():
    return make_frame


@pytest.fixture
def text_frame():
    return make_text_frame


@pytest.fixture
def comment_frame():
    return make_comment_frame


@pytest.fixture
def id3v2():
    return make_id3v2


@pytest.fixture
def id3v1():
    return make_id3v1


@pytest.fixture
def tracking_reader():
    return TrackingReader


@pytest.fixture
def sample_id3v2_bytes():
    """A complete ID3v2.3 tag with every common frame, followed by audio."""
    frames = [
        make_text_frame("TIT2", "Café"),
        make_text_frame("TPE1", "The Artist"),
        make_text_frame("TALB", "The Album"),
        make_text_frame("TRCK", "5/12"),
        make_text_frame("TYER", "1999"),
        make_text_frame("TCON", "(17)"),
        make_comment_frame("Nice track", description="note"),
        make_frame("PRIV", b"owner\x00\x01\x02"),
    ]
    return make_id3v2(frames) + AUDIO


@pytest.fixture
def sample_id3v1_bytes():
    """Audio followed by an ID3v1.1 footer."""
    return AUDIO + make_id3v1(
        title="Old Song",
        artist="Old Artist",
        album="Old Album",
        year="1987",
        comment="From tape",
        track=5,
        genre=9,
    )


@pytest.fixture
def mp3_file(tmp_path, sample_id3v2_bytes):
    path = tmp_path / "song.mp3"
    path.write_bytes(sample_id3v2_bytes)
    return path


@pytest.fixture
def id3v1_file(tmp_path, sample_id3v1_bytes):
    path = tmp_path / "old.mp3"
    path.write_bytes(sample_id3v1_bytes)
    return path


@pytest.fixture(autouse=True)
def isolated_config(tmp_path, monkeypatch):
    """Keep every test away from the user's ~/.id3r directory."""
    config_dir = tmp_path / "config"
    monkeypatch.setenv("ID3R_CONFIG_DIR", str(config_dir))
    return config_dir
