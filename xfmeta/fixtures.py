"""Build small SMF images for tests and sample files.

Files are written with ``mido`` so the event streams look like what real
sequencers emit (running status, automatic end-of-track).  XF information
chunks are produced by writing an ordinary track and re-tagging it
``XFIH``, which is how XF files lay them out after the ``MTrk`` chunks.
"""

from __future__ import annotations

import io
from typing import Iterable, List, Optional, Sequence

import mido

from .chunks import CHUNK_PREAMBLE_SIZE, HEADER_SIZE, XF_INFO_MAGIC
from .events import TEXT_ENCODING
from .xf import XF_DELIMITER, XF_HEADER_TAG, XF_LANGUAGE_TAG


def build_smf(
    tracks: Sequence[Iterable[mido.Message | mido.MetaMessage]],
    *,
    charset: str = TEXT_ENCODING,
    ticks_per_beat: int = 480,
) -> bytes:
    """Serialise ``tracks`` as a format-1 file; text metas use ``charset``."""
    mid = mido.MidiFile(type=1, ticks_per_beat=ticks_per_beat, charset=charset)
    for messages in tracks:
        mid.tracks.append(mido.MidiTrack(messages))
    buf = io.BytesIO()
    mid.save(file=buf)
    return buf.getvalue()


def xf_payload(tag: str, values: Sequence[str]) -> str:
    """Join ``values`` behind ``tag`` the way XF payloads are stored."""
    return XF_DELIMITER.join([tag, *values])


def xf_info_track(
    header: Optional[Sequence[str]] = None,
    languages: Sequence[Sequence[str]] = (),
) -> List[mido.MetaMessage]:
    """Text events for an XF information chunk: one ``XFhd`` then ``XFln``s."""
    messages: List[mido.MetaMessage] = []
    if header is not None:
        messages.append(mido.MetaMessage("text", text=xf_payload(XF_HEADER_TAG, header)))
    for values in languages:
        messages.append(mido.MetaMessage("text", text=xf_payload(XF_LANGUAGE_TAG, values)))
    return messages


def retag_chunk(data: bytes, index: int, tag: bytes = XF_INFO_MAGIC) -> bytes:
    """Replace the tag of the ``index``-th chunk after the header.

    Chunks are located by their declared lengths.
    """
    if len(tag) != 4:
        raise ValueError(f"chunk tag must be 4 bytes, got {tag!r}")
    raw = bytearray(data)
    pos = HEADER_SIZE
    for _ in range(index):
        if pos + CHUNK_PREAMBLE_SIZE > len(raw):
            raise ValueError(f"file has fewer than {index + 1} chunks")
        length = int.from_bytes(raw[pos + 4 : pos + 8], "big")
        pos += CHUNK_PREAMBLE_SIZE + length
    if pos + CHUNK_PREAMBLE_SIZE > len(raw):
        raise ValueError(f"file has fewer than {index + 1} chunks")
    raw[pos : pos + 4] = tag
    return bytes(raw)


def build_xf_file(
    title: str,
    *,
    sequence_name: Optional[str] = None,
    header: Sequence[str] = (),
    languages: Sequence[Sequence[str]] = (),
    charset: str = TEXT_ENCODING,
) -> bytes:
    """A two-chunk XF-style file: a conductor ``MTrk`` then an ``XFIH`` chunk.

    ``title`` becomes the Title field of the first ``XFln`` payload unless
    ``languages`` is given explicitly.
    """
    conductor: List[mido.Message | mido.MetaMessage] = [
        mido.MetaMessage("track_name", name=sequence_name or title),
        mido.MetaMessage("set_tempo", tempo=mido.bpm2tempo(120)),
        mido.MetaMessage("time_signature", numerator=4, denominator=4),
    ]
    if not languages:
        languages = [["JP", title]]
    info = xf_info_track(header=list(header) if header else None, languages=languages)
    data = build_smf([conductor, info], charset=charset)
    return retag_chunk(data, 1)
