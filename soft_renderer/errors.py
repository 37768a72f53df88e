#
# PROJECT: soft-renderer
# MODULE: soft_renderer/errors.py
# STATUS: Level 2 - Implementation
# LOG_REF: 2026-10-18
#


class RendererError(Exception):
    """Base class for errors raised by soft_renderer."""


class PPMFormatError(RendererError):
    """A PPM file has a bad header or truncated pixel data."""

    def __init__(self, filename, message):
        super().__init__(f"{filename}: {message}")
        self.filename = filename


class ImageWriteError(RendererError):
    """The external image encoder could not write a file."""


class UnsupportedPrimitiveError(RendererError):
    """The rasterizer met a primitive variant it cannot draw."""

    def __init__(self, primitive):
        super().__init__(f"Unsupported primitive: {primitive!r}")
        self.primitive = primitive
