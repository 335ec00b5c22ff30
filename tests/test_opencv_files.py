"""Walk real JPEG files produced by OpenCV's encoder."""
import io

import pytest

np = pytest.importorskip("numpy")
cv2 = pytest.importorskip("cv2")

from jpeg_markers.errors import UnknownMarker
from jpeg_markers.primitives import SegmentKind
from jpeg_markers.walker import walk


def encode(image, params=()):
    ok, buf = cv2.imencode(".jpg", image, list(params))
    assert ok
    return buf.tobytes()


@pytest.fixture
def noise_image():
    # noise keeps the entropy data full of 0xFF bytes that need stuffing
    rng = np.random.default_rng(0)
    return rng.integers(0, 256, size=(64, 48, 3), dtype=np.uint8)


def walk_bytes(data):
    segments = []
    total = walk(io.BytesIO(data), segments.append)
    return total, segments


class TestOpenCVJpeg:
    def test_baseline_color(self, noise_image):
        data = encode(noise_image, [cv2.IMWRITE_JPEG_QUALITY, 95])
        total, segments = walk_bytes(data)
        assert total == len(data)
        kinds = [s.kind for s in segments]
        assert kinds[0] is SegmentKind.APPLICATION_DATA
        assert kinds.count(SegmentKind.START_OF_SCAN) == 1
        assert kinds[-1] is SegmentKind.END_OF_IMAGE
        assert segments[kinds.index(SegmentKind.FRAME_HEADER)].marker == 0xC0

    def test_grayscale(self, noise_image):
        gray = cv2.cvtColor(noise_image, cv2.COLOR_BGR2GRAY)
        data = encode(gray)
        total, _ = walk_bytes(data)
        assert total == len(data)

    def test_progressive(self, noise_image):
        data = encode(noise_image, [cv2.IMWRITE_JPEG_PROGRESSIVE, 1])
        total, segments = walk_bytes(data)
        assert total == len(data)
        frames = [s for s in segments if s.kind is SegmentKind.FRAME_HEADER]
        assert [f.marker for f in frames] == [0xC2]
        scans = [s for s in segments if s.kind is SegmentKind.START_OF_SCAN]
        assert len(scans) > 1


    @pytest.mark.skipif(
        not hasattr(cv2, "IMWRITE_JPEG_RST_INTERVAL"),
        reason="OpenCV build without restart interval support",
    )
    def test_restart_interval_stops_at_dri(self, noise_image):
        """DRI is not a walkable segment kind, so restart-interval files stop there."""
        data = encode(noise_image, [cv2.IMWRITE_JPEG_RST_INTERVAL, 1])
        with pytest.raises(UnknownMarker) as excinfo:
            walk_bytes(data)
        assert excinfo.value.byte == 0xDD
