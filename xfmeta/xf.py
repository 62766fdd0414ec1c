"""Yamaha XF information payloads.

XF files carry song information as colon-delimited text meta events whose
text starts with a 4-character tag:

  XFhd  song-wide ("common") information
  XFln  language-specific information, one payload per language

Field ``n`` of the split payload is labelled with entry ``n`` of the tag's
table.  Entry 0 is the tag itself and is never emitted.
"""

from __future__ import annotations

import logging
from typing import List, Optional

from .meta import MetaEvent, XfField, XfMeta

logger = logging.getLogger(__name__)

XF_DELIMITER = ":"
XF_HEADER_TAG = "XFhd"
XF_LANGUAGE_TAG = "XFln"

COMMON = "common"
PER_LANGUAGE = "per_language"

XF_HEADER_LABELS = (
    "ID",
    "Release Date",
    "Production Area",
    "Genre",
    "Rhythm",
    "Lead Instrument",
    "Vocal Type",
    "Composer",
    "Lyricist",
    "Arranger",
    "Performer",
    "Data Producer",
    "Keywords",
)
XF_LANGUAGE_LABELS = (
    "ID",
    "Language",
    "Title",
    "Composer",
    "Lyricist",
    "Arranger",
    "Performer",
    "Data Producer",
)

XF_TABLES = {
    XF_HEADER_TAG: (COMMON, XF_HEADER_LABELS),
    XF_LANGUAGE_TAG: (PER_LANGUAGE, XF_LANGUAGE_LABELS),
}


def xf_tag(text: str) -> Optional[str]:
    """Return ``"XFhd"`` or ``"XFln"`` when ``text`` is an XF payload."""
    tag = text[:4]
    return tag if tag in XF_TABLES else None


def parse_xf_text(text: str) -> tuple[str, List[XfField]]:
    """Split an XF payload into ``(category, fields)``.

    Empty fields and fields past the end of the label table are dropped;
    the remaining fields keep their payload order.
    """
    tag = xf_tag(text)
    if tag is None:
        raise ValueError(f"not an XF payload: {text[:4]!r}")
    category, labels = XF_TABLES[tag]

    fields: List[XfField] = []
    for index, value in enumerate(text.split(XF_DELIMITER)):
        if index == 0 or index >= len(labels) or not value:
            continue
        fields.append(XfField(label=labels[index], text=value))
    return category, fields


def merge_xf(events: List[MetaEvent], category: str, fields: List[XfField]) -> None:
    """Append ``fields`` to ``events``, folding into a trailing :class:`XfMeta`."""
    last = events[-1] if events else None
    if isinstance(last, XfMeta):
        logger.debug("folding %d %s XF field(s) into previous record", len(fields), category)
        getattr(last, category).extend(fields)
        return
    record = XfMeta()
    getattr(record, category).extend(fields)
    events.append(record)
