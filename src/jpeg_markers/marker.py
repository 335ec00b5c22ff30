# --------------------------------------------------------
# |segment name|marker value |has length|description       |
# --------------------------------------------------------
# |SOI         |0xFFD8       |No        | start of image   |
# |EOI         |0xFFD9       |No        | end of image     |
# |DQT         |0xFFDB       |Yes       | quantization table|
# |DHT         |0xFFC4       |Yes       | huffman table    |
# |SOF0 / SOF2 |0xFFC0/0xFFC2|Yes       | baseline/progressive|
# |SOS         |0xFFDA       |Yes       | start of scan    |
# |APP0-APP15  |0xFFE0-0xFFEF|Yes       | application data |
# |COM         |0xFFFE       |Yes       | comment          |
# --------------------------------------------------------
# 無 length 的 segment 只有 marker 的 2 bytes
# 有 length 的 segment 在 marker 後緊接著 2 bytes 長度(包含這 2 bytes 本身)
from __future__ import annotations

from .primitives import (
    Segment, SegmentKind,
    APP0_MARKER, APP15_MARKER, COM_MARKER, DHT_MARKER, DQT_MARKER,
    EOI_MARKER, SOF0_MARKER, SOF2_MARKER, SOS_MARKER,
)

_KINDS = {
    DQT_MARKER: SegmentKind.QUANTIZATION_TABLE,
    SOF0_MARKER: SegmentKind.FRAME_HEADER,
    SOF2_MARKER: SegmentKind.FRAME_HEADER,
    DHT_MARKER: SegmentKind.HUFFMAN_TABLE,
    SOS_MARKER: SegmentKind.START_OF_SCAN,
    EOI_MARKER: SegmentKind.END_OF_IMAGE,
    COM_MARKER: SegmentKind.COMMENT,
}


def classify(marker: int) -> SegmentKind:
    """Map the second byte of a marker pair to its SegmentKind."""
    if APP0_MARKER <= marker <= APP15_MARKER:
        return SegmentKind.APPLICATION_DATA
    return _KINDS.get(marker, SegmentKind.UNKNOWN)


def marker_info(marker: int) -> str:
    marker_dict = {
        0xD8: "Start of Image (SOI)",
        0xD9: "End of Image (EOI)",
        0xDB: "Define Quantization Table (DQT)",
        0xC4: "Define Huffman Table (DHT)",
        0xC0: "Start of Frame 0 (SOF0) - Baseline DCT",
        0xC2: "Start of Frame 2 (SOF2) - Progressive DCT",
        0xDA: "Start of Scan (SOS)",
        0xFE: "Comment (COM)",
    }
    if APP0_MARKER <= marker <= APP15_MARKER:
        return f"Application Segment {marker - APP0_MARKER} (APP{marker - APP0_MARKER})"
    return marker_dict.get(marker, "Unknown Marker")


def describe(segment: Segment) -> str:
    """One report line per segment."""
    kind = segment.kind
    if kind is SegmentKind.APPLICATION_DATA:
        return f"APP Data Type {segment.marker:02x}: {segment.length} bytes of application data"
    elif kind is SegmentKind.QUANTIZATION_TABLE:
        return f"DQT: {segment.length} bytes of quantization data"
    elif kind is SegmentKind.FRAME_HEADER:
        return f"SOF: {segment.length} bytes of frame data"
    elif kind is SegmentKind.HUFFMAN_TABLE:
        return f"DHT: {segment.length} bytes of huffman tables"
    elif kind is SegmentKind.START_OF_SCAN:
        return f"SOS: {segment.length} bytes of scan data"
    elif kind is SegmentKind.COMMENT:
        return f"COM: comment {segment.length} bytes"
    elif kind is SegmentKind.END_OF_IMAGE:
        return "EOI: end of image"
    raise ValueError(f"No report line for marker {segment.marker:02x}")


def describe_total(total: int) -> str:
    return f"Total size = {total}"
