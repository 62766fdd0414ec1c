"""Helpers for presenting decoded metadata.

Nothing here touches the byte stream; these functions work on the
:class:`~xfmeta.meta.TrackMeta` lists returned by :func:`xfmeta.decode`.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Iterable, List, Optional, Tuple

from .decoder import decode
from .errors import DecodeError
from .events import TEXT_ENCODING
from .meta import TextKind, TextMeta, TrackMeta, XfMeta

TITLE_LABEL = "Title"
NO_METADATA = "No metadata found."

STATUS_OK = "ok"
STATUS_EMPTY = "no metadata found"
STATUS_ERROR = "error"


def non_empty_tracks(tracks: Iterable[TrackMeta]) -> List[TrackMeta]:
    return [track for track in tracks if not track.is_empty]


def has_metadata(tracks: Iterable[TrackMeta]) -> bool:
    return any(not track.is_empty for track in tracks)


def _xf_records(tracks: Iterable[TrackMeta]) -> Iterable[XfMeta]:
    for track in tracks:
        for event in track.events:
            if isinstance(event, XfMeta):
                yield event


def song_name(tracks: List[TrackMeta]) -> Optional[str]:
    """Pick a display name for the song.

    An XF title wins, per-language over common.  Otherwise the first
    track's sequence name is used.
    """
    records = list(_xf_records(tracks))
    for item in (f for record in records for f in record.per_language):
        if item.label == TITLE_LABEL:
            return item.text
    for item in (f for record in records for f in record.common):
        if item.label == TITLE_LABEL:
            return item.text

    if not tracks:
        return None
    for event in tracks[0].events:
        if isinstance(event, TextMeta) and event.kind is TextKind.SEQUENCE_OR_TRACK_NAME:
            return event.text
    return None


@dataclass
class FileReport:
    """Decode outcome for one named file."""

    name: str
    tracks: List[TrackMeta] = field(default_factory=list)
    error: Optional[DecodeError] = None

    @property
    def status(self) -> str:
        if self.error is not None:
            return STATUS_ERROR
        if not has_metadata(self.tracks):
            return STATUS_EMPTY
        return STATUS_OK

    @property
    def song_name(self) -> Optional[str]:
        if self.error is not None:
            return None
        return song_name(self.tracks)

    @property
    def display_name(self) -> str:
        return self.song_name or self.name


def decode_files(
    items: Iterable[Tuple[str, bytes]], *, encoding: str = TEXT_ENCODING
) -> List[FileReport]:
    """Decode ``(name, data)`` pairs independently, sorted by name.

    A :class:`DecodeError` is kept on that file's report; the remaining
    files are still decoded.
    """
    reports: List[FileReport] = []
    for name, data in sorted(items, key=lambda item: item[0]):
        try:
            tracks = decode(data, encoding=encoding)
        except DecodeError as err:
            reports.append(FileReport(name=name, error=err))
            continue
        reports.append(FileReport(name=name, tracks=tracks))
    return reports


def _format_xf(record: XfMeta) -> List[str]:
    lines: List[str] = []
    for heading, items in (("XF (common)", record.common), ("XF (per-language)", record.per_language)):
        if not items:
            continue
        lines.append(f"  {heading}")
        for item in items:
            lines.append(f"    {item.label}: {item.text}")
    return lines


def format_tracks(tracks: Iterable[TrackMeta]) -> str:
    lines: List[str] = []
    for track in non_empty_tracks(tracks):
        lines.append(f"Track {track.track}")
        for event in track.events:
            if isinstance(event, XfMeta):
                lines.extend(_format_xf(event))
            else:
                lines.append(f"  {event.label}: {event.text}")
    return "\n".join(lines) if lines else NO_METADATA


def format_report(report: FileReport) -> str:
    """Plain-text detail view; decode errors are shown verbatim."""
    if report.error is not None:
        return str(report.error)
    return format_tracks(report.tracks)
