"""Locate track-like chunks inside an SMF byte image.

The scanner does not trust chunk lengths to find the *next* chunk.  After
the fixed 14-byte header it searches forward for the next ``MTrk`` or
``XFIH`` tag, so stray bytes between chunks (or unknown chunk types) are
stepped over.  A tag-shaped byte run inside an unknown chunk's body will
be taken for a chunk start.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass
from typing import Iterator

from .errors import NotMidiFile, TruncatedData
from .vlq import read_u32_be

logger = logging.getLogger(__name__)

HEADER_MAGIC = b"MThd"
HEADER_SIZE = 14  # tag(4) + length(4) + format(2) + ntrks(2) + division(2)
TRACK_MAGIC = b"MTrk"
XF_INFO_MAGIC = b"XFIH"
CHUNK_SIGNATURES = (TRACK_MAGIC, XF_INFO_MAGIC)
CHUNK_PREAMBLE_SIZE = 8  # tag + u32 BE length


@dataclass(frozen=True)
class Chunk:
    signature: bytes
    offset: int  # position of the 4-byte tag
    body_start: int
    body_end: int  # exclusive; may lie past the end of the buffer

    @property
    def length(self) -> int:
        return self.body_end - self.body_start


def check_header(data: bytes) -> int:
    """Validate the ``MThd`` tag and return the offset scanning starts from."""
    if data[:4] != HEADER_MAGIC:
        raise NotMidiFile(data[:4])
    if len(data) < HEADER_SIZE:
        raise TruncatedData(len(data), len(data), "header chunk")
    return HEADER_SIZE


def find_signature(data: bytes, start: int) -> int:
    """Return the offset of the next chunk tag at or after ``start``, or -1."""
    hits = [idx for idx in (data.find(sig, start) for sig in CHUNK_SIGNATURES) if idx != -1]
    return min(hits) if hits else -1


def iter_chunks(data: bytes) -> Iterator[Chunk]:
    """Yield every ``MTrk`` / ``XFIH`` chunk in file order."""
    pos = check_header(data)
    while pos < len(data):
        idx = find_signature(data, pos)
        if idx == -1:
            break
        length, body_start = read_u32_be(data, idx + 4)
        chunk = Chunk(
            signature=data[idx : idx + 4],
            offset=idx,
            body_start=body_start,
            body_end=body_start + length,
        )
        logger.debug(
            "%s chunk at 0x%X, %d byte body", chunk.signature.decode("ascii"), idx, length
        )
        yield chunk
        pos = chunk.body_end
