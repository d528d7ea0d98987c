"""CLI command implementations.

Each module in this package implements a specific id3r subcommand:
    show.py: Print the normalized fields of each file's tag
    frames.py: List the frames of an ID3v2 tag
    inspect.py: Display the raw header or footer structure
"""

from .show import cmd_show
from .frames import cmd_frames
from .inspect import cmd_inspect

__all__ = [
    "cmd_show",
    "cmd_frames",
    "cmd_inspect",
]
