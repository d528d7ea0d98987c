"""
Tag subpackage - ID3 tag detection and decoding.

This package reads ID3v2.3/2.4 headers and frames, and the ID3v1 footer
used as a fallback, into a single Tag object.
"""

from .core import Tag
from .footer import Footer, FooterDecoder
from .formats import read, SUPPORTED_EXTENSIONS
from .frames import CommentFrame, Frame, FrameReader, TextFrame, describe_frame
from .genres import GenreTable, resolve_genre
from .header import Header, HeaderDecoder
from .mappings import setup_all_mappings
from .synchsafe import LEGACY_MASK, SYNCHSAFE_MASK, SizeCodec
from .version import TagVersion

# Initialize all tag field mappings
setup_all_mappings()

__all__ = [
    'Tag',
    'TagVersion',
    'Header',
    'HeaderDecoder',
    'Footer',
    'FooterDecoder',
    'Frame',
    'TextFrame',
    'CommentFrame',
    'FrameReader',
    'GenreTable',
    'SizeCodec',
    'LEGACY_MASK',
    'SYNCHSAFE_MASK',
    'describe_frame',
    'resolve_genre',
    'read',
    'SUPPORTED_EXTENSIONS',
]
