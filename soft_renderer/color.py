#
# PROJECT: soft-renderer
# MODULE: soft_renderer/color.py
# STATUS: Level 2 - Implementation
# LOG_REF: 2026-10-18
#

# Pixels are stored as packed 0xRRGGBB ints.

BLACK = 0x000000
WHITE = 0xFFFFFF
RED = 0xFF0000
GREEN = 0x00FF00
BLUE = 0x0000FF
ORANGE = 0xFFC800
GRAY = 0x808080


def pack_rgb(r: int, g: int, b: int) -> int:
    """Pack 0-255 channel values into a single 0xRRGGBB int."""
    return ((r & 0xFF) << 16) | ((g & 0xFF) << 8) | (b & 0xFF)


def unpack_rgb(rgb: int):
    """Split a packed 0xRRGGBB int into an (r, g, b) tuple."""
    return ((rgb >> 16) & 0xFF, (rgb >> 8) & 0xFF, rgb & 0xFF)


def parse_hex_color(hex_str):
    """
    Parse a hex color string to an (r, g, b) tuple.
    Accepts: '#RRGGBB' or 'RRGGBB' (case-insensitive).
    Returns: (r, g, b) tuple with values 0-255, or None on failure.
    """
    if hex_str is None:
        return None
    val = str(hex_str).strip().lstrip('#')
    if len(val) != 6:
        return None
    try:
        r = int(val[0:2], 16)
        g = int(val[2:4], 16)
        b = int(val[4:6], 16)
        return (r, g, b)
    except ValueError:
        return None


def to_rgb_int(color) -> int:
    """Accept a packed int, an (r, g, b) tuple or a hex string."""
    if isinstance(color, int):
        return color & 0xFFFFFF
    if isinstance(color, str):
        parsed = parse_hex_color(color)
        if parsed is None:
            raise ValueError(f"Invalid hex color: {color!r}")
        return pack_rgb(*parsed)
    r, g, b = color
    return pack_rgb(r, g, b)
