"""Top-level entry point: SMF bytes in, per-track text metadata out."""

from __future__ import annotations

from typing import List

from .chunks import iter_chunks
from .events import TEXT_ENCODING, walk_events
from .meta import TrackMeta


def decode(data: bytes, *, encoding: str = TEXT_ENCODING) -> List[TrackMeta]:
    """Decode the text metadata of a fully-buffered Standard MIDI File.

    One :class:`TrackMeta` is returned per ``MTrk`` / ``XFIH`` chunk, in
    file order and numbered from 1, including chunks that carry no text.

    Raises
    ------
    NotMidiFile
        ``data`` does not start with ``MThd``.
    TruncatedData
        A read ran past the end of ``data``.  No partial result is returned.
    """
    data = bytes(data)
    result: List[TrackMeta] = []
    for index, chunk in enumerate(iter_chunks(data)):
        events = walk_events(data, chunk, first_track=index == 0, encoding=encoding)
        result.append(TrackMeta(track=index + 1, events=events))
    return result
