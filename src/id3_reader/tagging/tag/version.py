"""Three-component ID3 tag version."""

from typing import NamedTuple


class TagVersion(NamedTuple):
    """
    Version of a decoded tag, e.g. 2.3.0 for an ID3v2.3 header or 1.1.0 for
    an ID3v1.1 footer.

    Being a NamedTuple, versions are immutable, compare in
    (major, minor, revision) order and support indexed access:

        >>> v = TagVersion(2, 3, 0)
        >>> v[1], v >= (2, 3, 0), str(v)
        (3, True, '2.3.0')
    """

    major: int
    minor: int
    revision: int = 0

    def __str__(self) -> str:
        return ".".join(str(part) for part in self)

    @property
    def is_id3v1(self) -> bool:
        return self.major == 1

    @property
    def is_id3v2(self) -> bool:
        return self.major == 2
