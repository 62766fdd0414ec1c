"""Read text metadata (names, lyrics, Yamaha XF song info) from SMF files."""

from .chunks import (  # noqa: F401
    CHUNK_SIGNATURES,
    HEADER_MAGIC,
    HEADER_SIZE,
    TRACK_MAGIC,
    XF_INFO_MAGIC,
    Chunk,
    check_header,
    iter_chunks,
)
from .decoder import decode  # noqa: F401
from .errors import DecodeError, NotMidiFile, TruncatedData  # noqa: F401
from .events import TEXT_ENCODING, walk_events  # noqa: F401
from .meta import (  # noqa: F401
    MetaEvent,
    TextKind,
    TextMeta,
    TrackMeta,
    XfField,
    XfMeta,
)
from .summary import (  # noqa: F401
    FileReport,
    decode_files,
    format_report,
    has_metadata,
    non_empty_tracks,
    song_name,
)
from .vlq import read_vlq  # noqa: F401
from .xf import (  # noqa: F401
    XF_HEADER_LABELS,
    XF_LANGUAGE_LABELS,
    merge_xf,
    parse_xf_text,
)
