"""Value types produced by the decoder."""

from __future__ import annotations

from dataclasses import dataclass, field
from enum import IntEnum
from typing import List, Optional, Union


class TextKind(IntEnum):
    """Textual meta-event types; values are the meta type bytes."""

    TEXT = 0x01
    COPYRIGHT = 0x02
    SEQUENCE_OR_TRACK_NAME = 0x03
    LYRICS = 0x05
    MARKER = 0x06
    CUE_POINT = 0x07


TEXT_KIND_LABELS = {
    TextKind.TEXT: "Text",
    TextKind.COPYRIGHT: "Copyright",
    TextKind.SEQUENCE_OR_TRACK_NAME: "Sequence Name",
    TextKind.LYRICS: "Lyrics",
    TextKind.MARKER: "Marker",
    TextKind.CUE_POINT: "Cue Point",
}
TRACK_NAME_LABEL = "Track Name"


@dataclass(frozen=True)
class TextMeta:
    """A plain text meta event (name, copyright, lyric, ...)."""

    kind: TextKind
    text: str
    first_track: bool = True

    @property
    def label(self) -> str:
        # 0x03 names the whole sequence only in the first track.
        if self.kind is TextKind.SEQUENCE_OR_TRACK_NAME and not self.first_track:
            return TRACK_NAME_LABEL
        return TEXT_KIND_LABELS[self.kind]


@dataclass(frozen=True)
class XfField:
    label: str
    text: str


@dataclass
class XfMeta:
    """Fields gathered from the ``XFhd`` / ``XFln`` payloads of one chunk.

    Mutable on purpose: consecutive XF payloads in a chunk are folded into
    the most recent record (see :func:`xfmeta.xf.merge_xf`).
    """

    common: List[XfField] = field(default_factory=list)
    per_language: List[XfField] = field(default_factory=list)

    @property
    def label(self) -> str:
        return "XF"

    def find(self, label: str) -> Optional[str]:
        """Return the first non-empty ``label`` value, per-language fields first."""
        for item in self.per_language:
            if item.label == label and item.text:
                return item.text
        for item in self.common:
            if item.label == label and item.text:
                return item.text
        return None


MetaEvent = Union[TextMeta, XfMeta]


@dataclass
class TrackMeta:
    track: int  # 1-based, in chunk discovery order
    events: List[MetaEvent] = field(default_factory=list)

    @property
    def is_empty(self) -> bool:
        return not self.events
