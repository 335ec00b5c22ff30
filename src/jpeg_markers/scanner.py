from __future__ import annotations
import logging

from .errors import TruncatedStream
from .primitives import ScanState, MARKER_PREFIX, STUFFED_BYTE, RST0_MARKER, RST7_MARKER
from .reader import ByteSource

logger = logging.getLogger(__name__)


class ScanBoundaryScanner:
    """
    Finds where the entropy-coded data after an SOS header ends.

    Scan data has no length field, so it is read one byte at a time until a
    0xFF that starts a real marker. Byte stuffing (0xFF00) and restart
    markers (0xFFD0-0xFFD7) belong to the scan and are counted as data.
    The terminating 0xFF is pushed back for the next marker read.
    """
    def __init__(self):
        self.state = ScanState()

    def scan(self, source: ByteSource) -> int:
        """Return the number of scan bytes consumed, stuffing and restarts included."""
        self.state = state = ScanState()
        start = source.offset

        while not state.found:
            b = source.read_u8()
            if b != MARKER_PREFIX:
                state.consumed += 1
                continue

            nxt = source.peek()
            if nxt is None:
                raise TruncatedStream(1, source.offset)
            if nxt == STUFFED_BYTE or RST0_MARKER <= nxt <= RST7_MARKER:
                source.read_u8()
                state.consumed += 2
                if nxt != STUFFED_BYTE:
                    state.restart_markers += 1
            else:
                source.unget()
                state.found = True

        logger.debug(
            "scan data at offset %d: %d bytes, %d restart markers",
            start, state.consumed, state.restart_markers,
        )
        return state.consumed
