from __future__ import annotations
from typing import BinaryIO, Optional

from .errors import TruncatedStream

SKIP_CHUNK_SIZE = 64 * 1024


class ByteSource:
    """
    Forward-only byte reader with one byte of pushback.

    The underlying stream only needs ``read``; it is never seeked, opened or
    closed here, so pipes and sockets work as well as files.
    """
    def __init__(self, f: BinaryIO, start_offset: int = 0):
        self.f = f
        self._consumed = start_offset
        self._last: Optional[int] = None  # 最近讀到的 byte，給 unget 用
        self._pushback: Optional[int] = None
        self._lookahead: Optional[bytes] = None

    @property
    def offset(self) -> int:
        """Absolute offset of the next byte to be read."""
        return self._consumed - (1 if self._pushback is not None else 0)

    def _raw_read(self, n: int) -> bytes:
        if self._lookahead is None:
            return self.f.read(n)
        head = self._lookahead
        self._lookahead = None
        if n == 1:
            return head
        return head + self.f.read(n - 1)

    def read(self, n: int) -> bytes:
        """Read exactly n bytes or raise TruncatedStream."""
        if n <= 0:
            return b""
        start = self.offset
        data = b""
        if self._pushback is not None:
            data = bytes([self._pushback])
            self._pushback = None
        if len(data) < n:
            data += self._raw_read(n - len(data))
        self._consumed = start + len(data)
        if data:
            self._last = data[-1]
        if len(data) != n:
            raise TruncatedStream(n, start, n - len(data))
        return data

    def read_u8(self) -> int:
        return self.read(1)[0]

    def read_size(self) -> int:
        """Big-endian 16-bit segment length."""
        data = self.read(2)
        return (data[0] << 8) | data[1]

    def peek(self) -> Optional[int]:
        """Next byte without consuming it, None at end of stream."""
        if self._pushback is not None:
            return self._pushback
        if self._lookahead is None:
            self._lookahead = self.f.read(1)
        return self._lookahead[0] if self._lookahead else None

    def unget(self) -> None:
        """Push the most recently read byte back so the next read returns it."""
        if self._pushback is not None:
            raise RuntimeError("only one byte of pushback is supported")
        if self._last is None:
            raise RuntimeError("nothing has been read yet")
        self._pushback = self._last
        self._last = None

    def skip(self, n: int) -> None:
        """Advance n bytes without looking at them."""
        remaining = n
        while remaining > 0:
            start = self.offset
            chunk = min(remaining, SKIP_CHUNK_SIZE)
            try:
                self.read(chunk)
            except TruncatedStream as e:
                # report against the whole skip, not the current chunk
                raise TruncatedStream(n, start - (n - remaining), remaining - chunk + e.missing) from None
            remaining -= chunk
