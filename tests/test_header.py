"""Tests for ID3v2 header detection."""

import io
import struct

import pytest

from id3_reader.errors import UnsupportedVersion
from id3_reader.tagging.tag.header import Header, HeaderDecoder, read_header
from id3_reader.tagging.tag.synchsafe import SYNCHSAFE_MASK, SizeCodec
from id3_reader.tagging.tag.version import TagVersion


class TestHeaderDecoder:
    def test_parse_v23_header(self, id3v2):
        """Test a plain ID3v2.3 header is decoded."""
        header = HeaderDecoder().try_parse(io.BytesIO(id3v2(major=3, revision=0)))
        assert header == Header(TagVersion(2, 3, 0), 0, 256)

    def test_parse_v24_flags_and_revision(self, id3v2):
        header = read_header(io.BytesIO(id3v2(major=4, revision=1, flags=0x80)))
        assert header.version == TagVersion(2, 4, 1)
        assert header.flags == 0x80
        assert header.unsynchronised
        assert not header.extended

    def test_v22_header_is_recognised(self, id3v2):
        """Test version 2.2 headers parse; only their frames are refused."""
        header = read_header(io.BytesIO(id3v2(major=2)))
        assert header.version == TagVersion(2, 2, 0)

    def test_no_marker_returns_none(self):
        """Test a stream without "ID3" is absent, not an error."""
        f = io.BytesIO(b"\xff\xfb\x90\x64" + b"\x00" * 200)
        assert HeaderDecoder().try_parse(f) is None
        # The position is left advanced past the header bytes
        assert f.tell() == 10

    def test_short_source_returns_none(self):
        assert read_header(io.BytesIO(b"ID3\x03")) is None

    @pytest.mark.parametrize("major", [0, 1, 5, 255])
    def test_unsupported_major(self, major):
        data = struct.pack(">3sBBBI", b"ID3", major, 0, 0, 0)
        with pytest.raises(UnsupportedVersion):
            read_header(io.BytesIO(data))

    def test_size_uses_codec(self, id3v2):
        """Test the size field goes through the configured mask."""
        data = id3v2(size=300, raw_size=SizeCodec.encode(30))
        assert read_header(io.BytesIO(data)).size == 14
        strict = read_header(io.BytesIO(data), SizeCodec(SYNCHSAFE_MASK))
        assert strict.size == 30
