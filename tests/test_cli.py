"""Tests for the command-line driver."""
import os
import tempfile

import pytest

from jpeg_markers.cli import main


@pytest.fixture
def jpeg_file():
    paths = []

    def _write(data):
        with tempfile.NamedTemporaryFile(delete=False, suffix=".jpg") as f:
            f.write(data)
            paths.append(f.name)
        return f.name

    yield _write
    for path in paths:
        os.unlink(path)


class TestMain:
    def test_dqt_then_eoi(self, jpeg_file, capsys):
        path = jpeg_file(b"\xFF\xD8\xFF\xDB\x00\x05\x01\x02\x03\xFF\xD9")
        assert main([path]) == 0
        assert capsys.readouterr().out.splitlines() == [
            "DQT: 5 bytes of quantization data",
            "EOI: end of image",
            "Total size = 11",
        ]

    def test_app_and_scan_lines(self, jpeg_file, capsys):
        data = (
            b"\xFF\xD8"
            b"\xFF\xE1\x00\x04\xAA\xBB"
            b"\xFF\xDA\x00\x03\x01" b"\x11\x22\xFF\x00\x33"
            b"\xFF\xD9"
        )
        assert main([jpeg_file(data)]) == 0
        assert capsys.readouterr().out.splitlines() == [
            "APP Data Type e1: 4 bytes of application data",
            "SOS: 8 bytes of scan data",
            "EOI: end of image",
            f"Total size = {len(data)}",
        ]

    def test_structural_error_is_one_line(self, jpeg_file, capsys):
        path = jpeg_file(b"\xFF\xD8\xFF\x01")
        assert main([path]) == 1
        assert capsys.readouterr().out == "Expected known encoding byte, got 01\n"

    def test_malformed_header(self, jpeg_file, capsys):
        assert main([jpeg_file(b"\x89PNG")]) == 1
        assert capsys.readouterr().out.startswith("Mismatch! Expected ffd8")

    def test_missing_file(self, capsys):
        assert main(["/nonexistent/file.jpg"]) == 1
        assert capsys.readouterr().out == "Couldn't open the file /nonexistent/file.jpg\n"

    def test_no_argument(self, capsys):
        with pytest.raises(SystemExit) as excinfo:
            main([])
        assert excinfo.value.code == 1
        assert capsys.readouterr().out == "Expected filename as argument\n"

    def test_too_many_arguments(self, capsys):
        with pytest.raises(SystemExit) as excinfo:
            main(["a.jpg", "b.jpg"])
        assert excinfo.value.code == 1
