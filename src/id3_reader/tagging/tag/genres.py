"""Resolution of ID3v1 genre codes and ID3v2 TCON strings to genre names."""

import re
from typing import Optional, Union

from ...constants import GENRES

# "(17)" or "(4)Classics": a legacy code optionally followed by a refinement
_PAREN_GENRE = re.compile(r"^\((\d+)\)(.*)$", re.DOTALL)
_NUMERIC_GENRE = re.compile(r"^\d+$")


def genre_name(index: int) -> Optional[str]:
    """Return the table entry for `index`, or None if out of range."""
    if 0 <= index < len(GENRES):
        return GENRES[index]
    return None


def resolve_genre(value: Union[int, str, None]) -> Optional[str]:
    """
    Resolve a genre code to its display name.

    Integers (the ID3v1 genre byte) are looked up directly. Strings (ID3v2
    TCON text) may be a bare index such as "17", or the legacy "(N)suffix"
    form, where the suffix is appended verbatim to the name at index N:
    "(4)Classics" resolves to "DiscoClassics". Free text and out-of-range
    codes resolve to None.
    """
    if value is None:
        return None
    if isinstance(value, int):
        return genre_name(value)

    match = _PAREN_GENRE.match(value)
    if match:
        name = genre_name(int(match.group(1)))
        if name is None:
            return None
        return name + match.group(2)

    if _NUMERIC_GENRE.match(value):
        return genre_name(int(value))

    return None


def genre_index(name: str) -> Optional[int]:
    """Reverse lookup of a genre name (case-insensitive)."""
    lowered = name.lower()
    for i, genre in enumerate(GENRES):
        if genre.lower() == lowered:
            return i
    return None


class GenreTable:
    """Namespace exposing the genre table and its resolvers."""

    names = GENRES
    resolve = staticmethod(resolve_genre)
    index = staticmethod(genre_index)
