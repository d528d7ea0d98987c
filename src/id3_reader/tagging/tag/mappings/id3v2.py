"""ID3v2 frame mappings: frame key -> Tag field setter."""

from ..core import Tag
from ..genres import resolve_genre
from ..utils import number_pair


def setup_id3v2_mappings():
    """Register the frames pre-parsed onto Tag fields."""

    def RegisterTextKey(key, field):
        """Copy the decoded text of frame `key` onto `field`."""

        def setter(tag, frame):
            # Frames too short to decode stay opaque and are not mapped
            if isinstance(frame.value, str):
                setattr(tag, field, frame.value)

        setter.__name__ = "text_setter(" + field + ")"
        Tag.RegisterFrameKey(key, setter)

    for key, field in {
        "COMM": "comment",
        "TALB": "album",
        "TIT2": "title",
        "TPE1": "artist",
        "TYER": "year",
    }.items():
        RegisterTextKey(key, field)

    # TCON holds either a genre code ("17", "(4)Classics") or free text.
    # Only codes resolve; free text leaves the genre unset.
    def genre_setter(tag, frame):
        tag.genre = resolve_genre(frame.value)

    Tag.RegisterFrameKey("TCON", genre_setter)

    # TRCK is "number" or "number/total"; other text is kept as it is
    def track_setter(tag, frame):
        if not isinstance(frame.value, str):
            return
        number, total = number_pair(frame.value)
        tag.track = number if number is not None else (frame.value or None)
        tag.total_tracks = total

    Tag.RegisterFrameKey("TRCK", track_setter)

    # ID3v2.4 replaced TYER with the TDRC timestamp ("1999-05-01T12:00").
    # An explicit TYER wins if both are present.
    def recording_time_setter(tag, frame):
        if tag.year is None and frame.value:
            tag.year = frame.value[:4]

    Tag.RegisterFrameKey("TDRC", recording_time_setter)
