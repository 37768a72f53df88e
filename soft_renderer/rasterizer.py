#
# PROJECT: soft-renderer
# MODULE: soft_renderer/rasterizer.py
# STATUS: Level 2 - Implementation
# LOG_REF: 2026-10-18
#

"""
Rasterize pixel-plane primitives into a Viewport.

The logical pixel-plane has real coordinates with (1, 1) as the lower-left
logical pixel and (w, h) as the upper-right one. A logical pixel (x, y)
maps to viewport storage coordinates (x - 1, h - y): columns shift by one
and rows flip so that increasing y moves toward the top of the image.

Clipping is per pixel: with config.clip set, every candidate pixel outside
[0, w) x [0, h) in storage coordinates is dropped. No segment is trimmed.
With clipping off the FrameBuffer's own bounds check drops (and logs) any
pixel that misses the backing array.

All rounding is half-up (floor(v + 0.5)).
"""

import logging

from .config import RenderConfig
from .errors import UnsupportedPrimitiveError
from .math_utils import round_half_up
from .pipeline_logger import PipelineLogger, CLIPPED, NOT_CLIPPED
from .primitives import PrimitiveKind

logger = logging.getLogger(__name__)


def rasterize(model, vp, config: RenderConfig = None, plog: PipelineLogger = None):
    """Rasterize every primitive of a pixel-plane model into the viewport."""
    if config is None:
        config = RenderConfig()
    if plog is None:
        plog = PipelineLogger(config.debug)

    for p in model.primitives:
        plog.log_primitive("4. Rasterize", model, p)
        kind = getattr(p, 'kind', None)
        if kind is PrimitiveKind.LINE_SEGMENT:
            rasterize_line(model, p, vp, config, plog)
        elif kind is PrimitiveKind.POINT:
            rasterize_point(model, p, vp, config, plog)
        else:
            if config.strict_primitives:
                raise UnsupportedPrimitiveError(p)
            logger.warning("Model %s: skipping unsupported primitive %r", model.name, p)


def rasterize_point(model, pt, vp, config: RenderConfig = None, plog: PipelineLogger = None):
    """
    Draw a Point as the filled (2r+1) x (2r+1) square of logical pixels
    centered on the point's rounded position.
    """
    if config is None:
        config = RenderConfig()
    if plog is None:
        plog = PipelineLogger(config.debug)

    w, h = vp.width, vp.height
    v = model.vertices[pt.vindex_list[0]]
    if not v.is_finite():
        logger.warning("Model %s: skipping %s with non-finite vertex %r", model.name, pt, v)
        return

    # Round the point's coordinates to the nearest logical pixel
    x = round_half_up(v.x)
    y = round_half_up(v.y)
    r = pt.radius
    clip = config.clip
    color = config.point_color
    debug = plog.enabled

    y_lo, y_hi, x_lo, x_hi = y - r, y + r, x - r, x + r
    if clip and not debug:
        # Only 1 <= x_ <= w and 1 <= y_ <= h can pass the clip test
        y_lo, y_hi = max(y_lo, 1), min(y_hi, h)
        x_lo, x_hi = max(x_lo, 1), min(x_hi, w)

    for y_ in range(y_lo, y_hi + 1):
        for x_ in range(x_lo, x_hi + 1):
            # Same rectangle as 0 <= x_vp < w, 0 <= y_vp < h
            keep = not clip or (0 < x_ <= w and 0 < y_ <= h)
            if debug:
                plog.log_pixel(NOT_CLIPPED if keep else CLIPPED, x_, y_, x_ - 1, h - y_, vp)
            if keep:
                vp.set_pixel(x_ - 1, h - y_, color)


def rasterize_line(model, ls, vp, config: RenderConfig = None, plog: PipelineLogger = None):
    """
    Draw a LineSegment with a simple DDA: step the major axis one pixel at
    a time and round the accumulated minor coordinate at each step.

    Endpoints are reordered so iteration always runs from the lower to the
    higher major coordinate, which makes the result independent of the
    segment's direction.
    """
    if config is None:
        config = RenderConfig()
    if plog is None:
        plog = PipelineLogger(config.debug)

    w, h = vp.width, vp.height
    v0 = model.vertices[ls.vindex_list[0]]
    v1 = model.vertices[ls.vindex_list[1]]
    if not (v0.is_finite() and v1.is_finite()):
        logger.warning("Model %s: skipping %s with non-finite vertex", model.name, ls)
        return

    clip = config.clip
    color = config.line_color
    debug = plog.enabled

    # Round each endpoint to the nearest logical pixel
    x0, y0 = round_half_up(v0.x), round_half_up(v0.y)
    x1, y1 = round_half_up(v1.x), round_half_up(v1.y)

    # Degenerate segment: a single pixel
    if x0 == x1 and y0 == y1:
        x_vp, y_vp = x0 - 1, h - y0
        if not clip or (0 <= x_vp < w and 0 <= y_vp < h):
            if debug:
                plog.log_pixel(NOT_CLIPPED, x0, y0, x_vp, y_vp, vp)
            vp.set_pixel(x_vp, y_vp, color)
        elif debug:
            plog.log_pixel(CLIPPED, x0, y0, x_vp, y_vp, vp)
        return

    if abs(y1 - y0) <= abs(x1 - x0):
        # |slope| <= 1: step along x, left to right
        if x1 < x0:
            x0, y0, x1, y1 = x1, y1, x0, y0
        m = (y1 - y0) / (x1 - x0)
        if debug:
            plog.log_message(f"Slope m = {m}")
            plog.log_message(f"(x0_vp, y0_vp) = ({x0 - 1:9.4f}, {h - y0:9.4f})")
            plog.log_message(f"(x1_vp, y1_vp) = ({x1 - 1:9.4f}, {h - y1:9.4f})")

        start, stop = x0, x1
        if clip and not debug:
            start, stop = max(x0, 1), min(x1, w)
        y = y0 + (start - x0) * m
        for x in range(start, stop + 1):
            x_vp = x - 1
            y_vp = h - round_half_up(y)
            if not clip or (0 <= x_vp < w and 0 <= y_vp < h):
                if debug:
                    plog.log_pixel(NOT_CLIPPED, x, y, x_vp, y_vp, vp)
                vp.set_pixel(x_vp, y_vp, color)
            elif debug:
                plog.log_pixel(CLIPPED, x, y, x_vp, y_vp, vp)
            y += m
    else:
        # |slope| > 1: step along y, bottom to top
        if y1 < y0:
            x0, y0, x1, y1 = x1, y1, x0, y0
        m = (x1 - x0) / (y1 - y0)
        if debug:
            plog.log_message(f"Slope m = {m} (so 1/m = {1 / m if m else float('inf')})")
            plog.log_message(f"(x0_vp, y0_vp) = ({x0 - 1:9.4f}, {h - y0:9.4f})")
            plog.log_message(f"(x1_vp, y1_vp) = ({x1 - 1:9.4f}, {h - y1:9.4f})")

        start, stop = y0, y1
        if clip and not debug:
            start, stop = max(y0, 1), min(y1, h)
        x = x0 + (start - y0) * m
        for y in range(start, stop + 1):
            x_vp = round_half_up(x) - 1
            y_vp = h - y
            if not clip or (0 <= x_vp < w and 0 <= y_vp < h):
                if debug:
                    plog.log_pixel(NOT_CLIPPED, x, y, x_vp, y_vp, vp)
                vp.set_pixel(x_vp, y_vp, color)
            elif debug:
                plog.log_pixel(CLIPPED, x, y, x_vp, y_vp, vp)
            x += m
