#
# PROJECT: soft-renderer
# MODULE: soft_renderer/ppm.py
# STATUS: Level 2 - Implementation
# LOG_REF: 2026-10-18
#

"""
Binary PPM (magic number P6) reader and writer.

    P6\\n
    <width> <height>\\n
    255\\n
    <width*height*3 bytes, row-major, top row first>

A single '#' comment line directly after the magic number is skipped on
read. Writing always emits exactly the header above.
"""

import logging

from .errors import PPMFormatError

logger = logging.getLogger(__name__)

MAGIC = b'P6'
MAXVAL = 255


def _read_byte(stream, filename) -> bytes:
    c = stream.read(1)
    if not c:
        raise PPMFormatError(filename, "unexpected end of file in header")
    return c


def _read_through_newline(stream, filename) -> bytes:
    """Read up to the next newline; the newline is consumed, not returned."""
    buf = bytearray()
    c = _read_byte(stream, filename)
    while c != b'\n':
        buf += c
        c = _read_byte(stream, filename)
    return bytes(buf)


def read_header(stream, filename='<stream>'):
    """Parse the PPM header and return (width, height)."""
    magic = _read_through_newline(stream, filename)
    if not magic.strip().startswith(MAGIC):
        raise PPMFormatError(filename, f"improper PPM magic number {magic[:16]!r}")

    c = _read_byte(stream, filename)
    if c == b'#':  # single comment line
        _read_through_newline(stream, filename)
        c = _read_byte(stream, filename)

    width_s = bytearray()
    while c != b' ' and c != b'\n':
        width_s += c
        c = _read_byte(stream, filename)
    height_s = _read_through_newline(stream, filename)

    try:
        width = int(width_s.strip())
        height = int(height_s.strip())
    except ValueError:
        raise PPMFormatError(
            filename, f"unreadable dimensions {bytes(width_s)!r} {height_s!r}") from None
    if width < 0 or height < 0:
        raise PPMFormatError(filename, f"negative dimensions {width} x {height}")

    # maxval line, not used
    _read_through_newline(stream, filename)
    return width, height


def read_pixels(stream, width, height, filename='<stream>'):
    """Read width*height RGB triplets into a list of packed 0xRRGGBB ints."""
    needed = width * height * 3
    data = stream.read(needed)
    if len(data) != needed:
        raise PPMFormatError(
            filename, f"truncated pixel data: expected {needed} bytes, got {len(data)}")
    return [(data[i] << 16) | (data[i + 1] << 8) | data[i + 2]
            for i in range(0, needed, 3)]


def read_ppm(filename):
    """Load a P6 file. Returns (width, height, pixels)."""
    with open(filename, 'rb') as f:
        width, height = read_header(f, filename)
        pixels = read_pixels(f, width, height, filename)
    logger.debug("Read %s (%d x %d)", filename, width, height)
    return width, height, pixels


def encode_ppm(width, height, pixels) -> bytes:
    """Serialize packed pixels (row-major, top row first) to P6 bytes."""
    header = f"P6\n{width} {height}\n{MAXVAL}\n".encode('ascii')
    body = bytearray(3 * width * height)
    i = 0
    for rgb in pixels:
        body[i] = (rgb >> 16) & 0xFF
        body[i + 1] = (rgb >> 8) & 0xFF
        body[i + 2] = rgb & 0xFF
        i += 3
    return header + bytes(body)


def write_ppm(filename, width, height, pixels):
    """Write packed pixels to a P6 file. OSError propagates to the caller."""
    data = encode_ppm(width, height, pixels)
    with open(filename, 'wb') as f:
        f.write(data)
    logger.debug("Wrote %s (%d x %d)", filename, width, height)
