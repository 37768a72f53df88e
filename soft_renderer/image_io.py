#
# PROJECT: soft-renderer
# MODULE: soft_renderer/image_io.py
# STATUS: Level 2 - Implementation
# LOG_REF: 2026-10-18
#

import logging

from PIL import Image

from .color import unpack_rgb
from .errors import ImageWriteError

logger = logging.getLogger(__name__)

# Informal format names accepted alongside Pillow's own
_FORMAT_ALIASES = {
    'jpg': 'JPEG',
    'tif': 'TIFF',
}


def to_image(width: int, height: int, pixels) -> Image.Image:
    """Build an RGB Pillow image from packed row-major pixels."""
    img = Image.new('RGB', (width, height))
    img.putdata([unpack_rgb(p) for p in pixels])
    return img


def save_image(filename, width: int, height: int, pixels, format_name: str = 'png'):
    """
    Encode a rectangle of packed pixels with Pillow.

    format_name is an informal name such as 'png', 'gif', 'jpg' or 'bmp'.
    Unknown formats raise ImageWriteError; OSError from the file system
    propagates unchanged.
    """
    fmt = _FORMAT_ALIASES.get(format_name.lower(), format_name.upper())
    img = to_image(width, height, pixels)
    try:
        img.save(filename, format=fmt)
    except (KeyError, ValueError) as e:
        raise ImageWriteError(
            f"Could not write {filename} as {format_name!r}: {e}") from e
    logger.debug("Saved %s as %s (%d x %d)", filename, fmt, width, height)
