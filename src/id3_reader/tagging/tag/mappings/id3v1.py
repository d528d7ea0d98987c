"""ID3v1 footer mappings: footer field -> Tag field setter."""

from ..core import Tag
from ..genres import resolve_genre


def setup_id3v1_mappings():
    """Register how each footer field is copied onto a Tag."""

    def RegisterBasicField(name):
        def setter(tag, footer):
            setattr(tag, name, getattr(footer, name) or None)

        setter.__name__ = "footer_setter(" + name + ")"
        Tag.RegisterFooterField(name, setter)

    for name in ("title", "artist", "album", "year", "comment"):
        RegisterBasicField(name)

    # The track byte only exists in ID3v1.1; 0 means "no track"
    def track_setter(tag, footer):
        tag.track = footer.track or None

    Tag.RegisterFooterField("track", track_setter)

    def genre_setter(tag, footer):
        tag.genre = resolve_genre(footer.genre)

    Tag.RegisterFooterField("genre", genre_setter)
