"""Fixed byte layouts and lookup tables for ID3 tags."""

from types import MappingProxyType

# ID3v2 header (tag start) and frame header layouts
ID3V2_MARKER = b"ID3"
ID3V2_HEADER_SIZE = 10
ID3V2_HEADER_FORMAT = ">3sBBBI"  # marker, major, revision, flags, size
FRAME_HEADER_SIZE = 10
FRAME_HEADER_FORMAT = ">4sIH"  # key, size (plain big-endian), flags

# Major sub-versions accepted in an ID3v2 header. Version 2 is recognised
# but its 3-character frame layout is not decoded.
MIN_ID3V2_MAJOR = 2
MAX_ID3V2_MAJOR = 4
FRAME_DECODED_MAJORS = (3, 4)

# ID3v1 trailer (last 128 bytes of the file)
ID3V1_MARKER = b"TAG"
ID3V1_SIZE = 128
ID3V1_FORMAT = ">3s30s30s30s4s29sBB"

# Text frame encoding byte -> codec name
TEXT_ENCODINGS = MappingProxyType({
    0: "latin-1",
    1: "utf-16",
    2: "utf-16-be",
    3: "utf-8",
})

# ID3v1 / Winamp genre list. Indices 0-79 are the original ID3v1 genres,
# 80-125 are the Winamp extensions. Spellings are kept as published.
GENRES = (
    "Blues",  # 0
    "Classic Rock",  # 1
    "Country",  # 2
    "Dance",  # 3
    "Disco",  # 4
    "Funk",  # 5
    "Grunge",  # 6
    "Hip-Hop",  # 7
    "Jazz",  # 8
    "Metal",  # 9
    "New Age",  # 10
    "Oldies",  # 11
    "Other",  # 12
    "Pop",  # 13
    "R&B",  # 14
    "Rap",  # 15
    "Reggae",  # 16
    "Rock",  # 17
    "Techno",  # 18
    "Industrial",  # 19
    "Alternative",  # 20
    "Ska",  # 21
    "Death Metal",  # 22
    "Pranks",  # 23
    "Soundtrack",  # 24
    "Euro-Techno",  # 25
    "Ambient",  # 26
    "Trip-Hop",  # 27
    "Vocal",  # 28
    "Jazz+Funk",  # 29
    "Fusion",  # 30
    "Trance",  # 31
    "Classical",  # 32
    "Instrumental",  # 33
    "Acid",  # 34
    "House",  # 35
    "Game",  # 36
    "Sound Clip",  # 37
    "Gospel",  # 38
    "Noise",  # 39
    "AlternRock",  # 40
    "Bass",  # 41
    "Soul",  # 42
    "Punk",  # 43
    "Space",  # 44
    "Meditative",  # 45
    "Instrumental Pop",  # 46
    "Instrumental Rock",  # 47
    "Ethnic",  # 48
    "Gothic",  # 49
    "Darkwave",  # 50
    "Techno-Industrial",  # 51
    "Electronic",  # 52
    "Pop-Folk",  # 53
    "Eurodance",  # 54
    "Dream",  # 55
    "Southern Rock",  # 56
    "Comedy",  # 57
    "Cult",  # 58
    "Gangsta",  # 59
    "Top 40",  # 60
    "Christian Rap",  # 61
    "Pop/Funk",  # 62
    "Jungle",  # 63
    "Native American",  # 64
    "Cabaret",  # 65
    "New Wave",  # 66
    "Psychadelic",  # 67
    "Rave",  # 68
    "Showtunes",  # 69
    "Trailer",  # 70
    "Lo-Fi",  # 71
    "Tribal",  # 72
    "Acid Punk",  # 73
    "Acid Jazz",  # 74
    "Polka",  # 75
    "Retro",  # 76
    "Musical",  # 77
    "Rock & Roll",  # 78
    "Hard Rock",  # 79

    # Winamp extensions
    "Folk",  # 80
    "Folk-Rock",  # 81
    "National Folk",  # 82
    "Swing",  # 83
    "Fast Fusion",  # 84
    "Bebob",  # 85
    "Latin",  # 86
    "Revival",  # 87
    "Celtic",  # 88
    "Bluegrass",  # 89
    "Avantgarde",  # 90
    "Gothic Rock",  # 91
    "Progressive Rock",  # 92
    "Psychedelic Rock",  # 93
    "Symphonic Rock",  # 94
    "Slow Rock",  # 95
    "Big Band",  # 96
    "Chorus",  # 97
    "Easy Listening",  # 98
    "Acoustic",  # 99
    "Humour",  # 100
    "Speech",  # 101
    "Chanson",  # 102
    "Opera",  # 103
    "Chamber Music",  # 104
    "Sonata",  # 105
    "Symphony",  # 106
    "Booty Bass",  # 107
    "Primus",  # 108
    "Porn Groove",  # 109
    "Satire",  # 110
    "Slow Jam",  # 111
    "Club",  # 112
    "Tango",  # 113
    "Samba",  # 114
    "Folklore",  # 115
    "Ballad",  # 116
    "Power Ballad",  # 117
    "Rhythmic Soul",  # 118
    "Freestyle",  # 119
    "Duet",  # 120
    "Punk Rock",  # 121
    "Drum Solo",  # 122
    "Acapella",  # 123
    "Euro-House",  # 124
    "Dance Hall",  # 125
)

# Descriptions of ID3v2.3 frames, plus the frames added in ID3v2.4
FRAME_DESCRIPTIONS = MappingProxyType({
    "AENC": "Audio encryption",
    "APIC": "Attached picture",
    "COMM": "Comments",
    "COMR": "Commercial frame",
    "ENCR": "Encryption method registration",
    "EQUA": "Equalization",
    "ETCO": "Event timing codes",
    "GEOB": "General encapsulated object",
    "GRID": "Group identification registration",
    "IPLS": "Involved people list",
    "LINK": "Linked information",
    "MCDI": "Music CD identifier",
    "MLLT": "MPEG location lookup table",
    "OWNE": "Ownership frame",
    "PRIV": "Private frame",
    "PCNT": "Play counter",
    "POPM": "Popularimeter",
    "POSS": "Position synchronisation frame",
    "RBUF": "Recommended buffer size",
    "RVAD": "Relative volume adjustment",
    "RVRB": "Reverb",
    "SYLT": "Synchronized lyric/text",
    "SYTC": "Synchronized tempo codes",
    "TALB": "Album/Movie/Show title",
    "TBPM": "BPM (beats per minute)",
    "TCOM": "Composer",
    "TCON": "Content type",
    "TCOP": "Copyright message",
    "TDAT": "Date",
    "TDLY": "Playlist delay",
    "TENC": "Encoded by",
    "TEXT": "Lyricist/Text writer",
    "TFLT": "File type",
    "TIME": "Time",
    "TIT1": "Content group description",
    "TIT2": "Title/songname/content description",
    "TIT3": "Subtitle/Description refinement",
    "TKEY": "Initial key",
    "TLAN": "Language(s)",
    "TLEN": "Length",
    "TMED": "Media type",
    "TOAL": "Original album/movie/show title",
    "TOFN": "Original filename",
    "TOLY": "Original lyricist(s)/text writer(s)",
    "TOPE": "Original artist(s)/performer(s)",
    "TORY": "Original release year",
    "TOWN": "File owner/licensee",
    "TPE1": "Lead performer(s)/Soloist(s)",
    "TPE2": "Band/orchestra/accompaniment",
    "TPE3": "Conductor/performer refinement",
    "TPE4": "Interpreted, remixed, or otherwise modified by",
    "TPOS": "Part of a set",
    "TPUB": "Publisher",
    "TRCK": "Track number/Position in set",
    "TRDA": "Recording dates",
    "TRSN": "Internet radio station name",
    "TRSO": "Internet radio station owner",
    "TSIZ": "Size",
    "TSRC": "ISRC (international standard recording code)",
    "TSSE": "Software/Hardware and settings used for encoding",
    "TYER": "Year",
    "TXXX": "User defined text information frame",
    "UFID": "Unique file identifier",
    "USER": "Terms of use",
    "USLT": "Unsychronized lyric/text transcription",
    "WCOM": "Commercial information",
    "WCOP": "Copyright/Legal information",
    "WOAF": "Official audio file webpage",
    "WOAR": "Official artist/performer webpage",
    "WOAS": "Official audio source webpage",
    "WORS": "Official internet radio station homepage",
    "WPAY": "Payment",
    "WPUB": "Publishers official webpage",
    "WXXX": "User defined URL link frame",
    # ID3v2.4 additions
    "ASPI": "Audio seek point index",
    "EQU2": "Equalisation (2)",
    "RVA2": "Relative volume adjustment (2)",
    "SEEK": "Seek frame",
    "SIGN": "Signature frame",
    "TDEN": "Encoding time",
    "TDOR": "Original release time",
    "TDRC": "Recording time",
    "TDRL": "Release time",
    "TDTG": "Tagging time",
    "TIPL": "Involved people list",
    "TMCL": "Musician credits list",
    "TMOO": "Mood",
    "TPRO": "Produced notice",
    "TSOA": "Album sort order",
    "TSOP": "Performer sort order",
    "TSOT": "Title sort order",
    "TSST": "Set subtitle",
})

# Order of the fields printed by `id3r show`
DEFAULT_OUTPUT_FIELDS = [
    "year",
    "artist",
    "album",
    "track",
    "title",
    "comment",
    "genre",
    "version",
]
