"""Structural errors raised while walking a JPEG codestream.

Every error is fatal to the walk. They all derive from ``IOError`` so callers
that only care about "the file could not be read" can catch that.
"""
from __future__ import annotations

from typing import Optional


class JPEGStructureError(IOError):
    """Base class for every marker-structure violation."""


class TruncatedStream(JPEGStructureError):
    def __init__(self, expected: int, offset: int, missing: Optional[int] = None):
        self.expected = expected
        self.offset = offset
        self.missing = expected if missing is None else missing
        super().__init__(
            f"Expected to read {expected} bytes at offset {offset}, "
            f"{self.missing} short"
        )


class ExpectedMarkerPrefix(JPEGStructureError):
    def __init__(self, got: int, offset: int):
        self.got = got
        self.offset = offset
        super().__init__(f"Expected 0xFF byte, got {got:02x} at offset {offset}")


class MalformedHeader(JPEGStructureError):
    def __init__(self, got: bytes):
        self.got = bytes(got)
        super().__init__(f"Mismatch! Expected ffd8, got {self.got.hex()}")


class UnknownMarker(JPEGStructureError):
    def __init__(self, byte: int, offset: Optional[int] = None):
        self.byte = byte
        self.offset = offset
        super().__init__(f"Expected known encoding byte, got {byte:02x}")


class InvalidSegmentLength(JPEGStructureError):
    """A length field smaller than the two bytes it occupies itself."""

    def __init__(self, length: int, offset: int):
        self.length = length
        self.offset = offset
        super().__init__(
            f"Segment length {length} at offset {offset} is shorter than its own length field"
        )
