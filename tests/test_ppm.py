"""Tests for PPM (P6) reading and writing and the Pillow image sink."""

import pytest
from PIL import Image

from soft_renderer import FrameBuffer, ImageWriteError, PPMFormatError, Viewport
from soft_renderer.color import BLUE, GREEN, RED, ORANGE
from soft_renderer.ppm import encode_ppm, read_ppm


def _write(path, data: bytes):
    path.write_bytes(data)
    return str(path)


class TestWrite:

    def test_exact_bytes(self, tmp_path):
        fb = FrameBuffer(2, 1)
        fb.set_pixel(0, 0, RED)
        fb.set_pixel(1, 0, BLUE)
        out = tmp_path / "two.ppm"
        fb.dump_ppm(str(out))
        assert out.read_bytes() == b"P6\n2 1\n255\n\xff\x00\x00\x00\x00\xff"

    def test_encode_top_row_first(self):
        data = encode_ppm(1, 2, [GREEN, 0x010203])
        assert data == b"P6\n1 2\n255\n\x00\xff\x00\x01\x02\x03"

    def test_dump_region(self, tmp_path):
        fb = FrameBuffer(6, 6)
        fb.test_pattern()
        out = str(tmp_path / "region.ppm")
        fb.dump_pixels_ppm(1, 2, 3, 4, out)
        w, h, pixels = read_ppm(out)
        assert (w, h) == (3, 3)
        assert pixels == fb.region_pixels(1, 2, 3, 4)

    def test_viewport_dump(self, tmp_path):
        fb = FrameBuffer(8, 8)
        vp = fb.viewport(2, 3, 4, 2)
        vp.clear(ORANGE)
        out = str(tmp_path / "vp.ppm")
        vp.dump_ppm(out)
        w, h, pixels = read_ppm(out)
        assert (w, h) == (4, 2)
        assert set(pixels) == {ORANGE}

    def test_unwritable_path_raises_oserror(self, tmp_path):
        with pytest.raises(OSError):
            FrameBuffer(1, 1).dump_ppm(str(tmp_path / "missing" / "x.ppm"))


class TestRead:

    @pytest.mark.parametrize("size", [(1, 1), (5, 3), (3, 7), (16, 9)])
    def test_round_trip(self, tmp_path, size):
        fb = FrameBuffer(*size)
        fb.test_pattern()
        fb.set_pixel(0, size[1] - 1, RED)
        out = str(tmp_path / "rt.ppm")
        fb.dump_ppm(out)
        back = FrameBuffer.from_ppm(out)
        assert (back.width, back.height) == size
        assert back.pixels == fb.pixels
        assert back.cleared

    def test_comment_line_is_skipped(self, tmp_path):
        path = _write(tmp_path / "c.ppm",
                      b"P6\n# written by hand\n2 1\n255\n\x01\x02\x03\x04\x05\x06")
        assert read_ppm(path) == (2, 1, [0x010203, 0x040506])

    def test_bad_magic_number(self, tmp_path):
        path = _write(tmp_path / "p3.ppm", b"P3\n1 1\n255\n0 0 0\n")
        with pytest.raises(PPMFormatError, match="magic number"):
            read_ppm(path)

    def test_unreadable_dimensions(self, tmp_path):
        path = _write(tmp_path / "dim.ppm", b"P6\nab 1\n255\n\x00\x00\x00")
        with pytest.raises(PPMFormatError, match="dimensions") as info:
            read_ppm(path)
        assert info.value.filename == path

    def test_truncated_pixel_data(self, tmp_path):
        path = _write(tmp_path / "short.ppm", b"P6\n2 2\n255\n\x00\x00\x00")
        with pytest.raises(PPMFormatError, match="truncated"):
            read_ppm(path)

    def test_truncated_header(self, tmp_path):
        path = _write(tmp_path / "hdr.ppm", b"P6\n2 2")
        with pytest.raises(PPMFormatError):
            read_ppm(path)

    def test_missing_file(self, tmp_path):
        with pytest.raises(FileNotFoundError):
            FrameBuffer.from_ppm(str(tmp_path / "nope.ppm"))

    def test_viewport_from_ppm(self, tmp_path):
        src = FrameBuffer(3, 2, background=BLUE)
        src.set_pixel(2, 1, RED)
        path = str(tmp_path / "src.ppm")
        src.dump_ppm(path)

        fb = FrameBuffer(10, 10)
        vp = Viewport.from_ppm(fb, 4, 5, path)
        assert (vp.width, vp.height) == (3, 2)
        assert fb.get_pixel(6, 6) == RED
        assert fb.get_pixel(4, 5) == BLUE
        assert vp.cleared


class TestImageSink:

    def test_png(self, tmp_path):
        fb = FrameBuffer(3, 2)
        fb.set_pixel(2, 1, RED)
        out = tmp_path / "img.png"
        fb.save_image(str(out), "png")
        with Image.open(out) as img:
            assert img.size == (3, 2)
            assert img.convert("RGB").getpixel((2, 1)) == (255, 0, 0)
            assert img.convert("RGB").getpixel((0, 0)) == (0, 0, 0)

    def test_viewport_region(self, tmp_path):
        fb = FrameBuffer(8, 8)
        vp = fb.viewport(2, 2, 4, 3)
        vp.clear(GREEN)
        out = tmp_path / "vp.bmp"
        vp.save_image(str(out), "bmp")
        with Image.open(out) as img:
            assert img.size == (4, 3)
            assert img.convert("RGB").getpixel((3, 2)) == (0, 255, 0)

    def test_jpg_alias(self, tmp_path):
        out = tmp_path / "img.jpg"
        FrameBuffer(4, 4, background=ORANGE).save_image(str(out), "jpg")
        with Image.open(out) as img:
            assert img.format == "JPEG"

    def test_unknown_format(self, tmp_path):
        with pytest.raises(ImageWriteError):
            FrameBuffer(1, 1).save_image(str(tmp_path / "x.zzz"), "no-such-format")
