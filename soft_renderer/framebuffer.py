#
# PROJECT: soft-renderer
# MODULE: soft_renderer/framebuffer.py
# STATUS: Level 2 - Implementation
# LOG_REF: 2026-10-18
#

"""
Pixel store: a FrameBuffer owns a row-major list of packed 0xRRGGBB ints,
and any number of Viewports address rectangles inside it.

Coordinates follow image conventions: x grows to the right, y grows
downward, and row 0 is the top row of the image.

A Viewport holds no pixels. It is a rectangle (inclusive upper-left and
lower-right corners), a background color and a cleared flag, plus a handle
to its FrameBuffer; every read and write is offset by the upper-left corner
and forwarded to that FrameBuffer. Overlapping viewports therefore see each
other's writes. Viewport rectangles are not checked against the buffer;
pixels that fall outside it are dropped by the FrameBuffer's bounds check.
"""

import itertools
import logging
import weakref

from . import image_io, ppm
from .color import BLACK, to_rgb_int, unpack_rgb

logger = logging.getLogger(__name__)


class FrameBuffer:
    __slots__ = ['width', 'height', 'pixels', 'background', 'cleared', 'vp',
                 '_viewports', '_vp_ids']

    def __init__(self, width: int, height: int, background=BLACK):
        self.width, self.height = int(width), int(height)
        self.pixels = [BLACK] * (self.width * self.height)
        self.background = to_rgb_int(background)
        self.cleared = False
        # Weak registry: a viewport the caller drops stops being tracked
        self._viewports = weakref.WeakValueDictionary()
        self._vp_ids = itertools.count()
        # Default viewport is the whole buffer
        self.vp = Viewport(self)
        self.clear()

    # ── Construction from other pixel sources (copies, never aliases) ──

    @classmethod
    def from_framebuffer(cls, source: 'FrameBuffer') -> 'FrameBuffer':
        fb = cls(source.width, source.height, source.background)
        for y in range(fb.height):
            for x in range(fb.width):
                fb.set_pixel(x, y, source.get_pixel(x, y))
        fb._mark_cleared()
        return fb

    @classmethod
    def from_viewport(cls, source: 'Viewport') -> 'FrameBuffer':
        fb = cls(source.width, source.height, source.background)
        for y in range(fb.height):
            for x in range(fb.width):
                fb.set_pixel(x, y, source.get_pixel(x, y))
        fb._mark_cleared()
        return fb

    @classmethod
    def from_ppm(cls, filename) -> 'FrameBuffer':
        """Load a P6 file. Raises PPMFormatError or OSError."""
        width, height, pixels = ppm.read_ppm(filename)
        fb = cls(width, height)
        i = 0
        for y in range(height):
            for x in range(width):
                fb.set_pixel(x, y, pixels[i])
                i += 1
        fb._mark_cleared()
        return fb

    def __repr__(self):
        return (f"FrameBuffer(w={self.width}, h={self.height}, "
                f"background=0x{self.background:06X}, viewports={len(self._viewports)})")

    def __str__(self):
        """Pixel table for debugging very small buffers."""
        lines = [f"FrameBuffer [w={self.width}, h={self.height}]",
                 " r   g   b |" * self.width]
        for y in range(self.height):
            row = []
            for x in range(self.width):
                r, g, b = unpack_rgb(self.pixels[y * self.width + x])
                row.append(f"{r:3d} {g:3d} {b:3d}|")
            lines.append("".join(row))
        return "\n".join(lines)

    # ── Viewports ───────────────────────────────────────────────────────

    def _register(self, vp: 'Viewport'):
        self._viewports[next(self._vp_ids)] = vp

    @property
    def viewports(self):
        """Live viewports opened on this buffer, default viewport first."""
        return tuple(self._viewports.values())

    def viewport(self, ul_x: int = 0, ul_y: int = 0, width: int = None,
                 height: int = None, background=None) -> 'Viewport':
        """Open a new viewport on this buffer. Its pixels are not cleared."""
        return Viewport(self, ul_x, ul_y, width, height, background)

    def set_viewport(self, ul_x: int = 0, ul_y: int = 0, width: int = None,
                     height: int = None):
        """Reshape the default viewport (whole buffer when called bare)."""
        self.vp.set_viewport(ul_x, ul_y,
                             self.width if width is None else width,
                             self.height if height is None else height)

    # ── Pixel access ────────────────────────────────────────────────────

    def in_bounds(self, x: int, y: int) -> bool:
        return 0 <= x < self.width and 0 <= y < self.height

    def get_pixel(self, x: int, y: int) -> int:
        """Packed color at (x, y). Out-of-range reads log and return black."""
        if not self.in_bounds(x, y):
            logger.warning("FrameBuffer: Bad pixel coordinate (%d, %d) [w=%d, h=%d]",
                           x, y, self.width, self.height)
            return BLACK
        return self.pixels[y * self.width + x]

    def set_pixel(self, x: int, y: int, color: int):
        """Store a packed color at (x, y). Out-of-range writes log and are dropped."""
        if not self.in_bounds(x, y):
            logger.warning("FrameBuffer: Bad pixel coordinate (%d, %d) [w=%d, h=%d]",
                           x, y, self.width, self.height)
            return
        self.pixels[y * self.width + x] = color
        self.cleared = False
        for vp in self._viewports.values():
            if vp.cleared and vp.encloses(x, y):
                vp.cleared = False

    def _mark_cleared(self):
        self.cleared = True
        for vp in self._viewports.values():
            vp.cleared = True

    def fill_rect(self, ul_x: int, ul_y: int, lr_x: int, lr_y: int, color: int):
        """
        Fill the inclusive rectangle with a packed color. The part outside
        the buffer is dropped with a single warning.
        """
        x0, y0 = max(ul_x, 0), max(ul_y, 0)
        x1, y1 = min(lr_x, self.width - 1), min(lr_y, self.height - 1)
        if (x0, y0, x1, y1) != (ul_x, ul_y, lr_x, lr_y):
            logger.warning("FrameBuffer: rectangle (%d, %d)-(%d, %d) extends outside "
                           "[w=%d, h=%d]; clipped", ul_x, ul_y, lr_x, lr_y,
                           self.width, self.height)
        if x0 > x1 or y0 > y1:
            return
        run = [color] * (x1 - x0 + 1)
        w = self.width
        for y in range(y0, y1 + 1):
            self.pixels[y * w + x0:y * w + x1 + 1] = run
        self.cleared = False
        for vp in self._viewports.values():
            if vp.cleared and vp.interior_overlaps(x0, y0, x1, y1):
                vp.cleared = False

    def clear(self, color=None):
        """Fill the whole buffer (default: the background color)."""
        rgb = self.background if color is None else to_rgb_int(color)
        self.pixels[:] = [rgb] * (self.width * self.height)
        self._mark_cleared()

    def test_pattern(self):
        """Fill with a gray (x | y) % 255 pattern."""
        for y in range(self.height):
            for x in range(self.width):
                gray = (x | y) % 255
                self.set_pixel(x, y, (gray << 16) | (gray << 8) | gray)

    # ── Channel splits ──────────────────────────────────────────────────

    def _convert_channel(self, mask: int) -> 'FrameBuffer':
        fb = FrameBuffer(self.width, self.height)
        fb.background = self.background
        for y in range(self.height):
            for x in range(self.width):
                fb.set_pixel(x, y, self.get_pixel(x, y) & mask)
        return fb

    def convert_red(self) -> 'FrameBuffer':
        return self._convert_channel(0xFF0000)

    def convert_green(self) -> 'FrameBuffer':
        return self._convert_channel(0x00FF00)

    def convert_blue(self) -> 'FrameBuffer':
        return self._convert_channel(0x0000FF)

    # ── Output ──────────────────────────────────────────────────────────

    def region_pixels(self, ul_x: int, ul_y: int, lr_x: int, lr_y: int):
        """Row-major copy of the inclusive rectangle (bounds-checked reads)."""
        return [self.get_pixel(x, y)
                for y in range(ul_y, lr_y + 1)
                for x in range(ul_x, lr_x + 1)]

    def dump_ppm(self, filename):
        self.dump_pixels_ppm(0, 0, self.width - 1, self.height - 1, filename)

    def dump_pixels_ppm(self, ul_x: int, ul_y: int, lr_x: int, lr_y: int, filename):
        """Write the inclusive rectangle to a P6 file."""
        ppm.write_ppm(filename, lr_x - ul_x + 1, lr_y - ul_y + 1,
                      self.region_pixels(ul_x, ul_y, lr_x, lr_y))

    def save_image(self, filename, format_name: str = 'png'):
        self.save_pixels_image(0, 0, self.width - 1, self.height - 1,
                               filename, format_name)

    def save_pixels_image(self, ul_x: int, ul_y: int, lr_x: int, lr_y: int,
                          filename, format_name: str = 'png'):
        """Hand the inclusive rectangle to the external image encoder."""
        image_io.save_image(filename, lr_x - ul_x + 1, lr_y - ul_y + 1,
                            self.region_pixels(ul_x, ul_y, lr_x, lr_y),
                            format_name)


class Viewport:
    """
    A rectangle of a FrameBuffer with its own local coordinates.

    (0, 0) is the viewport's upper-left pixel. The constructor registers
    the viewport with its FrameBuffer but does not touch any pixels.
    """
    __slots__ = ['fb', 'ul_x', 'ul_y', 'lr_x', 'lr_y', 'background', 'cleared',
                 '__weakref__']

    def __init__(self, fb: FrameBuffer, ul_x: int = 0, ul_y: int = 0,
                 width: int = None, height: int = None, background=None):
        self.fb = fb
        self.set_viewport(ul_x, ul_y,
                          fb.width if width is None else width,
                          fb.height if height is None else height)
        self.background = fb.background if background is None else to_rgb_int(background)
        self.cleared = False
        fb._register(self)

    @classmethod
    def from_framebuffer(cls, fb: FrameBuffer, ul_x: int, ul_y: int,
                         source: FrameBuffer) -> 'Viewport':
        """New viewport at (ul_x, ul_y) holding a copy of source's pixels."""
        w, h = source.width, source.height
        snapshot = [source.get_pixel(x, y) for y in range(h) for x in range(w)]
        vp = cls(fb, ul_x, ul_y, w, h, source.background)
        vp._fill_from(snapshot)
        return vp

    @classmethod
    def from_viewport(cls, fb: FrameBuffer, ul_x: int, ul_y: int,
                      source: 'Viewport') -> 'Viewport':
        """New viewport at (ul_x, ul_y) holding a copy of another viewport."""
        w, h = source.width, source.height
        snapshot = [source.get_pixel(x, y) for y in range(h) for x in range(w)]
        vp = cls(fb, ul_x, ul_y, w, h, source.background)
        vp._fill_from(snapshot)
        return vp

    @classmethod
    def from_ppm(cls, fb: FrameBuffer, ul_x: int, ul_y: int, filename) -> 'Viewport':
        """New viewport at (ul_x, ul_y) sized to, and filled from, a P6 file."""
        width, height, pixels = ppm.read_ppm(filename)
        vp = cls(fb, ul_x, ul_y, width, height)
        vp._fill_from(pixels)
        return vp

    def _fill_from(self, pixels):
        """
        Write a row-major list sized to this viewport, then mark it cleared.
        Sources are read into the list before any write, so a source that
        overlaps this viewport is copied as it was.
        """
        w = self.width
        for i, rgb in enumerate(pixels):
            self.set_pixel(i % w, i // w, rgb)
        self.cleared = True

    def __repr__(self):
        return (f"Viewport(ul=({self.ul_x}, {self.ul_y}), lr=({self.lr_x}, {self.lr_y}), "
                f"w={self.width}, h={self.height}, cleared={self.cleared})")

    def set_viewport(self, ul_x: int, ul_y: int, width: int, height: int):
        """Move and resize this viewport within its FrameBuffer."""
        self.ul_x = int(ul_x)
        self.ul_y = int(ul_y)
        self.lr_x = self.ul_x + int(width) - 1
        self.lr_y = self.ul_y + int(height) - 1

    @property
    def width(self) -> int:
        return self.lr_x - self.ul_x + 1

    @property
    def height(self) -> int:
        return self.lr_y - self.ul_y + 1

    def contains(self, fb_x: int, fb_y: int) -> bool:
        """Whether a FrameBuffer coordinate lies inside this rectangle."""
        return self.ul_x <= fb_x <= self.lr_x and self.ul_y <= fb_y <= self.lr_y

    # Cleared-flag bookkeeping only looks at the interior; border writes
    # leave the flag alone.
    def encloses(self, fb_x: int, fb_y: int) -> bool:
        return self.ul_x < fb_x < self.lr_x and self.ul_y < fb_y < self.lr_y

    def interior_overlaps(self, ul_x: int, ul_y: int, lr_x: int, lr_y: int) -> bool:
        return (lr_x > self.ul_x and ul_x < self.lr_x and
                lr_y > self.ul_y and ul_y < self.lr_y)

    def get_pixel(self, x: int, y: int) -> int:
        return self.fb.get_pixel(self.ul_x + x, self.ul_y + y)

    def set_pixel(self, x: int, y: int, color: int):
        self.fb.set_pixel(self.ul_x + x, self.ul_y + y, color)
        self.cleared = False

    def clear(self, color=None):
        """Fill this rectangle (default: the viewport's background color)."""
        rgb = self.background if color is None else to_rgb_int(color)
        self.fb.fill_rect(self.ul_x, self.ul_y, self.lr_x, self.lr_y, rgb)
        self.cleared = True

    def test_pattern(self):
        for y in range(self.height):
            for x in range(self.width):
                gray = (x | y) % 255
                self.set_pixel(x, y, (gray << 16) | (gray << 8) | gray)

    def to_framebuffer(self) -> FrameBuffer:
        """Copy this viewport's pixels into a new, independent FrameBuffer."""
        return FrameBuffer.from_viewport(self)

    def dump_ppm(self, filename):
        self.fb.dump_pixels_ppm(self.ul_x, self.ul_y, self.lr_x, self.lr_y, filename)

    def save_image(self, filename, format_name: str = 'png'):
        self.fb.save_pixels_image(self.ul_x, self.ul_y, self.lr_x, self.lr_y,
                                  filename, format_name)
