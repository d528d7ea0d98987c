"""Core Tag class: locate an ID3 tag in a file and decode it."""

import logging
import os
from types import MappingProxyType
from typing import Any, BinaryIO, Callable, Dict, List, Mapping, Optional, Union

from ...constants import DEFAULT_OUTPUT_FIELDS
from ...errors import NoTagFound, TagParseError
from .footer import Footer, FooterDecoder
from .frames import Frame, FrameReader, describe_frame
from .header import Header, HeaderDecoder
from .synchsafe import LEGACY_MASK, SizeCodec
from .utils import conv_string
from .version import TagVersion

Source = Union[str, "os.PathLike[str]", BinaryIO]


class Tag:
    """
    Metadata decoded from an ID3v2 header or, failing that, an ID3v1 footer.

    Normalized fields:
        title, artist, album, year, comment: strings
        track: integer, or the TRCK text when it is not numeric
        total_tracks: integer
        genre: genre display name (never a raw code)

    For ID3v2 tags `frames` holds every frame read, in file order; it is
    empty for ID3v1 tags. `header` is the Header or Footer the tag was
    decoded from.

    Fields are filled in by setters registered per frame key (ID3v2) or per
    footer field (ID3v1); see the mappings package.
    """

    frame_map: Mapping[str, Callable[["Tag", Frame], None]] = {}
    footer_map: Mapping[str, Callable[["Tag", Footer], None]] = {}

    def __init__(self):
        self.header: Optional[Union[Header, Footer]] = None
        self.version: Optional[TagVersion] = None
        self.frames: List[Frame] = []
        self.path: Optional[str] = None

        self.title: Optional[str] = None
        self.artist: Optional[str] = None
        self.album: Optional[str] = None
        self.track: Optional[Union[int, str]] = None
        self.total_tracks: Optional[int] = None
        self.year: Optional[str] = None
        self.comment: Optional[str] = None
        self.genre: Optional[str] = None

    # ---------------------------------------------------------------------------
    # Loading
    # ---------------------------------------------------------------------------
    @classmethod
    def load(
        cls,
        source: Source,
        try_id3v1: bool = True,
        size_mask: int = LEGACY_MASK,
    ) -> "Tag":
        """
        Decode the tag in `source`, a path or a binary file object.

        A path is opened and closed within this call. A file object is read
        from its current position and left open for the caller.

        Args:
            source: Path or seekable binary file object
            try_id3v1: Fall back to the ID3v1 footer when there is no
                ID3v2 header
            size_mask: Byte mask for the synch-safe tag size (see synchsafe)

        Raises:
            NoTagFound: If no tag is present (MissingFooter when the footer
                fallback found no TAG marker)
            MalformedTag: If a tag is present but cannot be decoded
            TagParseError: For any other failure, chained to its cause
        """
        tag = cls()
        if isinstance(source, (str, bytes, os.PathLike)):
            tag.path = os.fsdecode(source)
            try:
                with open(source, "rb") as f:
                    tag._load(f, try_id3v1, size_mask)
            except TagParseError:
                raise
            except OSError as e:
                raise TagParseError(f"Couldn't read {tag.path}: {e}") from e
        else:
            tag.path = getattr(source, "name", None)
            tag._load(source, try_id3v1, size_mask)
        return tag

    def _load(self, f: BinaryIO, try_id3v1: bool, size_mask: int) -> None:
        try:
            header = HeaderDecoder(SizeCodec(size_mask)).try_parse(f)
            if header is not None:
                self.header = header
                self.version = header.version
                self.frames = FrameReader(header).read_all(f, self.map_frame)
            elif try_id3v1:
                footer = FooterDecoder().try_parse(f)
                self.header = footer
                self.version = footer.version
                self.map_footer(footer)
            else:
                raise NoTagFound("Couldn't load ID3 header")
        except TagParseError as e:
            logging.debug("Couldn't parse ID3 tag: %s", e)
            raise type(e)(f"Couldn't parse ID3 tag: {e}") from e
        except Exception as e:
            raise TagParseError(f"Couldn't parse ID3 tag: {e}") from e

    def map_frame(self, frame: Frame) -> None:
        """Pre-parse a common frame onto its Tag field."""
        setter = self.frame_map.get(frame.key)
        if setter is not None:
            setter(self, frame)

    def map_footer(self, footer: Footer) -> None:
        for setter in self.footer_map.values():
            setter(self, footer)

    # ---------------------------------------------------------------------------
    # Mapping registration
    # ---------------------------------------------------------------------------
    @classmethod
    def RegisterFrameKey(cls, key: str, setter: Callable[["Tag", Frame], None]):
        """Register the setter run for every frame with the given key."""
        if isinstance(cls.frame_map, MappingProxyType):
            raise RuntimeError("Frame mappings are frozen")
        cls.frame_map[key] = setter  # type: ignore[index]

    @classmethod
    def RegisterFooterField(cls, name: str, setter: Callable[["Tag", Footer], None]):
        """Register the setter copying one ID3v1 footer field onto the tag."""
        if isinstance(cls.footer_map, MappingProxyType):
            raise RuntimeError("Footer mappings are frozen")
        cls.footer_map[name] = setter  # type: ignore[index]

    @classmethod
    def FreezeMappings(cls):
        cls.frame_map = MappingProxyType(dict(cls.frame_map))
        cls.footer_map = MappingProxyType(dict(cls.footer_map))

    # ---------------------------------------------------------------------------
    # Accessors
    # ---------------------------------------------------------------------------
    @property
    def is_id3v1(self) -> bool:
        return isinstance(self.header, Footer)

    def to_dict(self) -> Optional[Dict[str, Frame]]:
        """Return the frames keyed by frame key (None for ID3v1 tags)."""
        if self.is_id3v1:
            return None
        return {frame.key: frame for frame in self.frames}

    def describe_frame(self, frame: Frame) -> Optional[str]:
        """Human-readable description of `frame` for this tag's version."""
        if self.version is None:
            raise TagParseError("Tag has not been loaded")
        return describe_frame(frame.key, self.version)

    def get(self, name: str) -> Any:
        """Return a field by name; "version" gives the version string."""
        if name == "version":
            return str(self.version) if self.version is not None else None
        return getattr(self, name)

    def fields(self, names: Optional[List[str]] = None) -> List[str]:
        """Return the named fields (default: the `id3r show` order) as strings."""
        return [conv_string(self.get(name)) for name in names or DEFAULT_OUTPUT_FIELDS]

    def __repr__(self):
        return f"Tag(version={conv_string(self.version)!r}, title={self.title!r}, artist={self.artist!r})"
