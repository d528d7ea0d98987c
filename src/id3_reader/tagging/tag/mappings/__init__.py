"""Field mappings from ID3v2 frames and ID3v1 footer fields onto a Tag."""

from ..core import Tag
from .id3v1 import setup_id3v1_mappings
from .id3v2 import setup_id3v2_mappings


def setup_all_mappings():
    """Initialize all tag field mappings. They are read-only afterwards."""
    setup_id3v2_mappings()
    setup_id3v1_mappings()
    Tag.FreezeMappings()


__all__ = [
    'setup_id3v1_mappings',
    'setup_id3v2_mappings',
    'setup_all_mappings',
]
