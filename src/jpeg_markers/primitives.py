from dataclasses import dataclass
from enum import Enum
from typing import Optional

# Marker 常數 (第二個 byte，第一個 byte 一律是 0xFF)
MARKER_PREFIX = 0xFF
STUFFED_BYTE = 0x00
SOI_MARKER = 0xD8
EOI_MARKER = 0xD9
SOS_MARKER = 0xDA
DQT_MARKER = 0xDB
DHT_MARKER = 0xC4
SOF0_MARKER = 0xC0
SOF2_MARKER = 0xC2
COM_MARKER = 0xFE
APP0_MARKER = 0xE0
APP15_MARKER = 0xEF
RST0_MARKER = 0xD0
RST7_MARKER = 0xD7


class SegmentKind(Enum):
    APPLICATION_DATA = "APP"
    QUANTIZATION_TABLE = "DQT"
    FRAME_HEADER = "SOF"
    HUFFMAN_TABLE = "DHT"
    START_OF_SCAN = "SOS"
    END_OF_IMAGE = "EOI"
    COMMENT = "COM"
    UNKNOWN = "???"

    @property
    def has_length(self) -> bool:
        return self not in (SegmentKind.END_OF_IMAGE, SegmentKind.UNKNOWN)


@dataclass
class Segment:
    kind: SegmentKind
    # second byte of the 0xFF xx pair, kept so APPn segments can be told apart
    marker: int
    # None when the marker carries no length field (EOI)
    length: Optional[int] = None
    offset: int = 0
    restart_markers: int = 0

    @property
    def has_length(self) -> bool:
        return self.length is not None


@dataclass
class ScanState:
    consumed: int = 0
    found: bool = False
    restart_markers: int = 0


@dataclass
class WalkState:
    # running total of bytes accounted for, SOI included
    total: int = 0
    finished: bool = False
