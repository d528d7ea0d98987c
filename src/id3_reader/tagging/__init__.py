"""ID3 tagging sub-package.

Sub-packages:
    tag/: Tag detection and decoding
        - core.py: Core Tag class
        - header.py, footer.py: ID3v2 header / ID3v1 footer decoders
        - frames.py: ID3v2 frame reader
        - genres.py: Genre table
        - synchsafe.py: Synch-safe size codec
        - mappings/: Field mappings for ID3v2 frames and ID3v1 fields

Main exports:
    read: Read the tag of an audio file
    Tag: Decoded tag
    TagVersion: Tag version
    resolve_genre: Genre code resolution
"""

__all__ = ["tag", "read", "Tag", "TagVersion", "resolve_genre"]

from .tag import read, Tag, TagVersion, resolve_genre
