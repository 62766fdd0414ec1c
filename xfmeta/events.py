"""Walk the MIDI event stream of one chunk and collect its text metadata.

Only meta events are interpreted.  Every other event is decoded just far
enough to know its length:

  0x80-0xEF  channel message, 2 data bytes (1 for 0xCn / 0xDn)
  0xF0/0xF7  system exclusive, VLQ length + payload
  0xFF       meta event, type byte + VLQ length + payload
  other      unrecognised; step over a single byte

A data byte (< 0x80) where a status byte is expected re-uses the previous
status (running status) and is left in place as the first data byte.
"""

from __future__ import annotations

import logging
from typing import List

from .chunks import Chunk
from .meta import MetaEvent, TextKind, TextMeta
from .vlq import read_byte, read_vlq, skip
from .xf import merge_xf, parse_xf_text, xf_tag

logger = logging.getLogger(__name__)

META_STATUS = 0xFF
SYSEX_STATUSES = frozenset({0xF0, 0xF7})
END_OF_TRACK = 0x2F
ONE_DATA_BYTE = frozenset({0xC0, 0xD0})  # program change, channel pressure

TEXT_ENCODING = "cp932"  # Windows-31J, the Shift-JIS form sequencers write
TEXT_KINDS = {kind.value: kind for kind in TextKind}


def decode_text(payload: bytes, encoding: str = TEXT_ENCODING) -> str:
    return payload.decode(encoding, errors="replace")


def _handle_text(
    events: List[MetaEvent],
    kind: TextKind,
    payload: bytes,
    *,
    first_track: bool,
    encoding: str,
) -> None:
    text = decode_text(payload, encoding)
    if xf_tag(text) is not None:
        category, fields = parse_xf_text(text)
        merge_xf(events, category, fields)
    elif text:
        events.append(TextMeta(kind=kind, text=text, first_track=first_track))


def walk_events(
    data: bytes,
    chunk: Chunk,
    *,
    first_track: bool,
    encoding: str = TEXT_ENCODING,
) -> List[MetaEvent]:
    """Return the text meta events of ``chunk`` in stream order.

    Parameters
    ----------
    data : bytes
        The whole file image; ``chunk`` indexes into it.
    chunk : Chunk
        Body range to walk.
    first_track : bool
        True for the first discovered chunk, whose 0x03 event names the
        sequence rather than a track.
    encoding : str
        Codec for text payloads.

    Raises
    ------
    TruncatedData
        If any read runs past the end of ``data``.
    """
    events: List[MetaEvent] = []
    pos = chunk.body_start
    end = chunk.body_end
    running_status = 0

    while pos < end:
        _delta, pos = read_vlq(data, pos)

        status, after = read_byte(data, pos, "status byte")
        if status & 0x80:
            pos = after
            running_status = status
        else:
            status = running_status

        if status == META_STATUS:
            meta_type, pos = read_byte(data, pos, "meta type")
            length, pos = read_vlq(data, pos)
            payload_end = skip(data, pos, length, "meta payload")
            kind = TEXT_KINDS.get(meta_type)
            if kind is not None:
                _handle_text(
                    events,
                    kind,
                    data[pos:payload_end],
                    first_track=first_track,
                    encoding=encoding,
                )
            elif meta_type == END_OF_TRACK and length == 0:
                break
            else:
                logger.debug("skipping meta type 0x%02X at 0x%X", meta_type, pos)
            pos = payload_end
        elif 0x80 <= status <= 0xEF:
            count = 1 if (status & 0xF0) in ONE_DATA_BYTE else 2
            pos = skip(data, pos, count)
        elif status in SYSEX_STATUSES:
            length, pos = read_vlq(data, pos)
            pos = skip(data, pos, length, "sysex payload")
        else:
            logger.debug("unrecognised status 0x%02X at 0x%X", status, pos)
            pos = skip(data, pos, 1)

    return events
