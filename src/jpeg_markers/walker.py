from __future__ import annotations
import logging
from pathlib import Path
from typing import BinaryIO, Callable, Optional

from .errors import ExpectedMarkerPrefix, InvalidSegmentLength, MalformedHeader, UnknownMarker
from .marker import classify, marker_info
from .primitives import Segment, SegmentKind, WalkState, MARKER_PREFIX, SOI_MARKER
from .reader import ByteSource
from .scanner import ScanBoundaryScanner

logger = logging.getLogger(__name__)

SegmentCallback = Callable[[Segment], None]


class MarkerWalker:
    """
    Walks the marker segments of a JPEG codestream.

    ``begin`` checks the SOI marker, then ``step`` handles one marker per
    call until it returns True on EOI. Each segment is handed to
    ``on_segment``; the walker itself never prints.
    """
    def __init__(self, source: ByteSource, on_segment: Optional[SegmentCallback] = None):
        self.source = source
        self.on_segment = on_segment
        self.state = WalkState()
        self.scanner = ScanBoundaryScanner()

    @property
    def total(self) -> int:
        return self.state.total

    @property
    def finished(self) -> bool:
        return self.state.finished

    def _emit(self, segment: Segment) -> None:
        if self.on_segment is not None:
            self.on_segment(segment)

    def begin(self) -> None:
        soi = self.source.read(2)
        if soi != bytes([MARKER_PREFIX, SOI_MARKER]):
            raise MalformedHeader(soi)
        self.state.total += 2

    def _read_length(self) -> int:
        offset = self.source.offset
        length = self.source.read_size()
        if length < 2:
            raise InvalidSegmentLength(length, offset)
        return length

    def step(self) -> bool:
        """Process the next marker. Returns True once EOI has been seen."""
        if self.state.finished:
            raise RuntimeError("walk already reached end of image")

        offset = self.source.offset
        prefix, marker = self.source.read(2)
        if prefix != MARKER_PREFIX:
            raise ExpectedMarkerPrefix(prefix, offset)
        self.state.total += 2

        kind = classify(marker)
        logger.debug("offset %d: %s", offset, marker_info(marker))

        if kind is SegmentKind.UNKNOWN:
            raise UnknownMarker(marker, offset)

        if kind is SegmentKind.END_OF_IMAGE:
            self.state.finished = True
            self._emit(Segment(kind, marker, offset=offset))
            return True

        length = self._read_length()

        if kind is SegmentKind.START_OF_SCAN:
            # the length field counts its own 2 bytes
            self.source.skip(length - 2)
            size = length + self.scanner.scan(self.source)
            self.state.total += size
            self._emit(Segment(kind, marker, size, offset, self.scanner.state.restart_markers))
        else:
            self.state.total += length
            self.source.skip(length - 2)
            self._emit(Segment(kind, marker, length, offset))
        return False

    def run(self) -> int:
        """begin + step until EOI, returning the running total."""
        self.begin()
        while not self.step():
            pass
        return self.state.total


def walk(f: BinaryIO, on_segment: Optional[SegmentCallback] = None) -> int:
    return MarkerWalker(ByteSource(f), on_segment).run()


def walk_file(path: str | Path, on_segment: Optional[SegmentCallback] = None) -> int:
    """
    Walk the JPEG file at path.

    Args:
        path: Path to the JPEG file
        on_segment: Optional callable receiving each Segment in file order

    Returns:
        Total number of bytes accounted for, SOI to EOI
    """
    with open(path, "rb") as f:
        return walk(f, on_segment)
