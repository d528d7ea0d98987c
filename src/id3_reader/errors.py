"""Exceptions raised while locating and decoding ID3 tags.

The hierarchy separates the two ways a load can fail:

    ID3Error
        TagParseError
            NoTagFound          no tag where one was looked for
                MissingFooter   trailer present but without the TAG marker
            MalformedTag        a tag was found but cannot be decoded
                UnsupportedVersion
                TruncatedSource
                TruncatedFrame

Callers that want to fall back to another source of metadata catch
NoTagFound; MalformedTag always means the file is damaged or unsupported.
"""


class ID3Error(Exception):
    """Base class for all errors raised by id3_reader."""


class TagParseError(ID3Error):
    """A tag could not be loaded. The original failure is chained as __cause__."""


class NoTagFound(TagParseError):
    """Neither an ID3v2 header nor an ID3v1 footer is present."""


class MissingFooter(NoTagFound):
    """The last 128 bytes of the source do not start with the TAG marker."""


class MalformedTag(TagParseError):
    """A tag marker was found but the tag itself cannot be decoded."""


class UnsupportedVersion(MalformedTag):
    """ID3v2 major version outside 2-4, or a 2.2 tag whose frames were requested."""


class TruncatedSource(MalformedTag):
    """Fewer bytes are available than a fixed-width structure requires."""


class TruncatedFrame(MalformedTag):
    """A frame header or payload is cut short, or overruns the tag size."""
