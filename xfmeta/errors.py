"""Decode failures raised by :func:`xfmeta.decode`.

Both kinds are terminal for the file being decoded: there is no partial
result.  They subclass ``ValueError`` so callers that already guard file
parsing with ``except ValueError`` keep working.
"""

from __future__ import annotations


class DecodeError(ValueError):
    """Base class for every failure the decoder reports."""


class NotMidiFile(DecodeError):
    """The buffer does not start with the ``MThd`` header signature."""

    def __init__(self, head: bytes) -> None:
        self.head = bytes(head[:4])
        super().__init__(
            f"not a Standard MIDI File (expected b'MThd', got {self.head!r})"
        )


class TruncatedData(DecodeError):
    """A read would run past the end of the buffer."""

    def __init__(self, offset: int, size: int, what: str = "data") -> None:
        self.offset = offset
        self.size = size
        self.what = what
        super().__init__(
            f"truncated {what} at offset 0x{offset:X} (buffer is {size} bytes)"
        )
