"""Bounded readers over an immutable SMF byte buffer.

Every helper takes the buffer plus an offset and returns the offset just
past what it consumed.  Running off the end of the buffer raises
:class:`~xfmeta.errors.TruncatedData` instead of an ``IndexError``.
"""

from __future__ import annotations

from typing import Tuple

from .errors import TruncatedData


def read_byte(data: bytes, offset: int, what: str = "byte") -> Tuple[int, int]:
    """Return ``(data[offset], offset + 1)``."""
    if offset >= len(data):
        raise TruncatedData(offset, len(data), what)
    return data[offset], offset + 1


def read_vlq(data: bytes, offset: int) -> Tuple[int, int]:
    """Decode a MIDI variable-length quantity starting at ``offset``.

    Seven bits are taken from each byte, most significant group first, and
    the quantity ends at the first byte whose top bit is clear.  MIDI caps
    VLQs at four bytes; that limit is not enforced here.

    Returns
    -------
    tuple[int, int]
        The decoded value and the offset just past its last byte.
    """
    value = 0
    pos = offset
    size = len(data)
    while True:
        if pos >= size:
            raise TruncatedData(pos, size, "variable-length quantity")
        byte = data[pos]
        pos += 1
        value = (value << 7) | (byte & 0x7F)
        if not byte & 0x80:
            return value, pos


def skip(data: bytes, offset: int, count: int, what: str = "event data") -> int:
    """Advance ``count`` bytes, refusing to move past the end of ``data``."""
    end = offset + count
    if end > len(data):
        raise TruncatedData(offset, len(data), what)
    return end


def read_u32_be(data: bytes, offset: int, what: str = "chunk length") -> Tuple[int, int]:
    end = skip(data, offset, 4, what)
    return int.from_bytes(data[offset:end], "big"), end
