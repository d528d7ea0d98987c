"""Utility functions for text decoding and field conversion."""

import logging
from typing import Any, Optional, Tuple, Union

from ...constants import TEXT_ENCODINGS


def strip_padding(data: bytes) -> bytes:
    """Strip trailing NULs and spaces from a fixed-width field."""
    return data.rstrip(b"\x00 ")


def terminator(encoding: int) -> bytes:
    """Return the string terminator for an ID3v2 text encoding byte."""
    return b"\x00\x00" if encoding in (1, 2) else b"\x00"


def decode_text(data: bytes, encoding: int = 0) -> str:
    """
    Decode a text payload according to its ID3v2 encoding byte, trimming
    trailing padding.

    Unknown encoding bytes are decoded as Latin-1, which accepts any byte
    sequence.
    """
    codec = TEXT_ENCODINGS.get(encoding)
    if codec is None:
        logging.warning("Unknown text encoding %r, decoding as latin-1", encoding)
        codec = "latin-1"
    try:
        text = data.decode(codec)
    except UnicodeDecodeError:
        logging.debug("Invalid %s text %r, replacing bad characters", codec, data)
        text = data.decode(codec, errors="replace")
    return text.rstrip("\x00 ")


def decode_latin1(data: bytes) -> str:
    """Decode a fixed-width ID3v1 field."""
    return strip_padding(data).decode("latin-1")


def split_terminated(data: bytes, encoding: int) -> Tuple[bytes, bytes]:
    """
    Split `data` at the first terminator for `encoding`.

    For the two-byte encodings the terminator must be aligned on a character
    boundary. If no terminator is found, everything is returned as the first
    part.
    """
    term = terminator(encoding)
    if len(term) == 1:
        head, sep, tail = data.partition(term)
        return (head, tail) if sep else (data, b"")

    offset = 0
    while True:
        offset = data.find(term, offset)
        if offset < 0:
            return data, b""
        if offset % 2 == 0:
            return data[:offset], data[offset + 2:]
        offset += 1


def conv_number(value: Any) -> Optional[Union[int, float]]:
    """
    Convert a value to a number, reading only its leading numeric part
    ("5/12" -> 5). Returns None when there is nothing numeric to read.
    """
    if value is None:
        return None
    if isinstance(value, (int, float)):
        return value

    def find_first_not_of(str_val: str, chars: str) -> int:
        """Find the first character not in the given set."""
        for i, c in enumerate(str_val):
            if c not in chars:
                return i
        return len(str_val)

    value = str(value).strip()
    sign = ""
    if value.startswith("-") or value.startswith("+"):
        sign = value[0]
        value = value[1:]
    i = find_first_not_of(value, "1234567890.")
    value = sign + value[:i]

    try:
        return int(value)
    except ValueError:
        try:
            return float(value)
        except ValueError:
            return None


def number_pair(value: str) -> Tuple[Optional[int], Optional[int]]:
    """Split a "number/total" string such as a TRCK frame ("5/12" -> (5, 12))."""
    number, sep, total = value.partition("/")
    number_value = conv_number(number) if number.strip() else None
    total_value = conv_number(total) if sep and total.strip() else None
    return (
        int(number_value) if number_value is not None else None,
        int(total_value) if total_value is not None else None,
    )


def conv_string(value: Any) -> str:
    """Convert a field value to a string for output, None becoming ""."""
    if value is None:
        return ""
    return str(value)
