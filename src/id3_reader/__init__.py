"""ID3 Reader.

Reads title, artist, album, track, year, comment and genre from audio files
carrying ID3v2.3/2.4 tags, falling back to the ID3v1 trailer.

Main modules:
    cli: Command-line interface (id3r command)
    tagging: Tag detection and decoding

Core modules:
    config: Configuration management
    constants: Byte layouts and lookup tables
    errors: Exception hierarchy
"""

try:
    from importlib.metadata import version, PackageNotFoundError

    __version__ = version("id3-reader")
except (PackageNotFoundError, ImportError):
    # Package not installed: read directly from pyproject.toml
    try:
        from pathlib import Path
        import tomllib

        pyproject_path = Path(__file__).parent.parent.parent / "pyproject.toml"
        with open(pyproject_path, "rb") as f:
            __version__ = tomllib.load(f)["project"]["version"]
    except (OSError, KeyError, ValueError):
        __version__ = "unknown"

from .errors import (
    ID3Error,
    TagParseError,
    NoTagFound,
    MissingFooter,
    MalformedTag,
    UnsupportedVersion,
    TruncatedSource,
    TruncatedFrame,
)
from .tagging import read, Tag, TagVersion, resolve_genre

__all__ = [
    # Sub-packages
    "cli",
    "tagging",
    # Core modules
    "config",
    "constants",
    "errors",
    # API
    "read",
    "Tag",
    "TagVersion",
    "resolve_genre",
    "ID3Error",
    "TagParseError",
    "NoTagFound",
    "MissingFooter",
    "MalformedTag",
    "UnsupportedVersion",
    "TruncatedSource",
    "TruncatedFrame",
]
