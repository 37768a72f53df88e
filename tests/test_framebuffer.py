"""Tests for the FrameBuffer / Viewport pixel store."""

import gc
import logging

from soft_renderer import BLACK, FrameBuffer, Viewport, WHITE
from soft_renderer.color import BLUE, GREEN, RED


class TestFrameBuffer:

    def test_new_buffer_is_cleared_to_background(self):
        fb = FrameBuffer(5, 3, background=RED)
        assert len(fb.pixels) == 15
        assert set(fb.pixels) == {RED}
        assert fb.cleared
        assert fb.vp.cleared
        assert (fb.vp.width, fb.vp.height) == (5, 3)

    def test_background_accepts_tuple_and_hex(self):
        assert FrameBuffer(1, 1, (0, 255, 0)).pixels == [GREEN]
        assert FrameBuffer(1, 1, "#0000ff").pixels == [BLUE]

    def test_set_and_get_pixel_row_major(self, fb8):
        fb8.set_pixel(3, 2, RED)
        assert fb8.get_pixel(3, 2) == RED
        assert fb8.pixels[2 * 8 + 3] == RED

    def test_out_of_range_read_returns_black(self, caplog):
        fb = FrameBuffer(4, 4, background=WHITE)
        with caplog.at_level(logging.WARNING):
            assert fb.get_pixel(4, 0) == BLACK
            assert fb.get_pixel(-1, 2) == BLACK
        assert "Bad pixel coordinate (4, 0) [w=4, h=4]" in caplog.text

    def test_out_of_range_write_is_dropped(self, fb8, caplog):
        before = list(fb8.pixels)
        with caplog.at_level(logging.WARNING):
            fb8.set_pixel(8, 0, RED)
            fb8.set_pixel(-1, 1, RED)  # must not wrap onto the previous row
            fb8.set_pixel(0, 99, RED)
        assert fb8.pixels == before
        assert fb8.cleared
        assert len(caplog.records) == 3

    def test_write_resets_cleared_flag(self, fb8):
        fb8.set_pixel(3, 3, RED)
        assert not fb8.cleared
        assert not fb8.vp.cleared
        fb8.clear()
        assert fb8.cleared and fb8.vp.cleared

    def test_clear_is_idempotent(self, fb8):
        fb8.set_pixel(1, 1, RED)
        fb8.clear(BLUE)
        once = list(fb8.pixels)
        fb8.clear(BLUE)
        assert fb8.pixels == once
        assert set(once) == {BLUE}

    def test_copy_is_independent(self, fb8):
        fb8.set_pixel(2, 5, RED)
        copy = FrameBuffer.from_framebuffer(fb8)
        assert copy.pixels == fb8.pixels
        assert copy.pixels is not fb8.pixels
        fb8.set_pixel(2, 5, GREEN)
        assert copy.get_pixel(2, 5) == RED

    def test_copy_keeps_background(self):
        src = FrameBuffer(3, 3, background=BLUE)
        src.set_pixel(1, 1, RED)
        copy = FrameBuffer.from_framebuffer(src)
        assert copy.background == BLUE
        assert copy.cleared
        copy.clear()
        assert set(copy.pixels) == {BLUE}

    def test_convert_channels(self):
        fb = FrameBuffer(1, 1, background=0x123456)
        assert fb.convert_red().pixels == [0x120000]
        assert fb.convert_green().pixels == [0x003400]
        assert fb.convert_blue().pixels == [0x000056]

    def test_test_pattern(self, fb8):
        fb8.test_pattern()
        assert fb8.get_pixel(3, 5) == 0x070707
        assert fb8.get_pixel(0, 0) == BLACK

    def test_str_dump(self):
        text = str(FrameBuffer(2, 1, background=RED))
        assert text.startswith("FrameBuffer [w=2, h=1]")
        assert "255   0   0|255   0   0|" in text

    def test_set_viewport_reshapes_default(self, fb8):
        fb8.set_viewport(2, 2, 3, 4)
        assert (fb8.vp.ul_x, fb8.vp.ul_y, fb8.vp.width, fb8.vp.height) == (2, 2, 3, 4)
        fb8.set_viewport()
        assert (fb8.vp.width, fb8.vp.height) == (8, 8)


class TestViewport:

    def test_reads_and_writes_are_offset(self, fb8):
        vp = fb8.viewport(2, 3, 4, 4)
        vp.set_pixel(1, 1, RED)
        assert fb8.get_pixel(3, 4) == RED
        assert vp.get_pixel(1, 1) == RED
        assert (vp.lr_x, vp.lr_y) == (5, 6)

    def test_overlapping_viewports_share_pixels(self, fb8):
        a = fb8.viewport(0, 0, 4, 4)
        b = fb8.viewport(2, 2, 4, 4)
        a.set_pixel(3, 3, GREEN)
        assert b.get_pixel(1, 1) == GREEN

    def test_clear_fills_only_its_rectangle(self, fb8, lit):
        vp = fb8.viewport(1, 2, 3, 2, background=RED)
        vp.clear()
        assert lit(fb8, RED) == {(x, y) for x in range(1, 4) for y in range(2, 4)}
        assert vp.cleared
        assert not fb8.cleared

    def test_clear_twice_same_state(self, fb8):
        vp = fb8.viewport(1, 1, 5, 5)
        vp.clear(RED)
        once = list(fb8.pixels)
        vp.clear(RED)
        assert fb8.pixels == once

    def test_cleared_flags_follow_writes(self, fb8):
        vp = fb8.viewport(2, 2, 3, 3)
        other = fb8.viewport(6, 6, 2, 2)
        fb8.clear()
        assert vp.cleared and other.cleared

        fb8.set_pixel(0, 0, RED)  # outside both
        assert vp.cleared and other.cleared

        fb8.set_pixel(4, 4, RED)  # on vp's lower-right corner
        assert vp.cleared
        assert not fb8.cleared

        fb8.set_pixel(3, 3, RED)  # strictly inside vp
        assert not vp.cleared
        assert other.cleared

    def test_clearing_one_viewport_dirties_an_overlapping_one(self, fb8):
        a = fb8.viewport(0, 0, 4, 4)
        b = fb8.viewport(2, 2, 4, 4)
        c = fb8.viewport(5, 0, 3, 2)
        fb8.clear()
        a.clear(RED)
        assert a.cleared
        assert not b.cleared
        assert c.cleared

    def test_out_of_range_viewport_degrades_gracefully(self, fb8, lit, caplog):
        vp = fb8.viewport(6, 6, 4, 4)
        with caplog.at_level(logging.WARNING):
            vp.clear(RED)
            assert vp.get_pixel(3, 3) == BLACK
            vp.set_pixel(3, 3, RED)
        assert lit(fb8, RED) == {(6, 6), (7, 6), (6, 7), (7, 7)}
        assert "Bad pixel coordinate" in caplog.text

    def test_copy_from_framebuffer(self, lit):
        src = FrameBuffer(2, 2, background=GREEN)
        src.set_pixel(1, 1, RED)
        fb = FrameBuffer(6, 6)
        vp = Viewport.from_framebuffer(fb, 3, 1, src)
        assert (vp.width, vp.height) == (2, 2)
        assert vp.background == GREEN
        assert fb.get_pixel(4, 2) == RED
        assert lit(fb, GREEN) == {(3, 1), (4, 1), (3, 2)}
        assert vp.cleared

    def test_copy_from_viewport(self, fb8):
        src = fb8.viewport(0, 0, 2, 2)
        src.set_pixel(0, 1, BLUE)
        dst = Viewport.from_viewport(fb8, 5, 5, src)
        assert dst.get_pixel(0, 1) == BLUE
        assert fb8.get_pixel(5, 6) == BLUE

    def test_to_framebuffer_is_independent(self, fb8):
        vp = fb8.viewport(4, 4, 3, 2)
        vp.set_pixel(2, 1, RED)
        out = vp.to_framebuffer()
        assert (out.width, out.height) == (3, 2)
        assert out.get_pixel(2, 1) == RED
        vp.set_pixel(2, 1, BLUE)
        assert out.get_pixel(2, 1) == RED

    def test_viewports_registered(self, fb8):
        vp = fb8.viewport(1, 1, 2, 2)
        assert fb8.viewports == (fb8.vp, vp)

    def test_dropped_viewport_is_forgotten(self, fb8):
        kept = fb8.viewport(0, 0, 2, 2)
        for _ in range(100):
            fb8.viewport(1, 1, 4, 4).set_pixel(0, 0, RED)
        gc.collect()
        assert fb8.viewports == (fb8.vp, kept)

    def test_copy_framebuffer_into_itself(self):
        fb = FrameBuffer(4, 1)
        for x, rgb in enumerate([1, 2, 3, 4]):
            fb.set_pixel(x, 0, rgb)
        vp = Viewport.from_framebuffer(fb, 1, 0, fb)
        # the copied pixel that falls off the right edge is dropped
        assert fb.pixels == [1, 1, 2, 3]
        assert vp.cleared
