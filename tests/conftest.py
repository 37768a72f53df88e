"""Pytest configuration and shared fixtures."""

import logging

import pytest

from soft_renderer import FrameBuffer, Model, Vertex, WHITE


@pytest.fixture
def fb8():
    """An 8x8 black framebuffer."""
    return FrameBuffer(8, 8)


@pytest.fixture
def lit():
    """Return a function listing the framebuffer coordinates of a given color."""
    def _lit(fb, color=WHITE):
        return {(x, y)
                for y in range(fb.height)
                for x in range(fb.width)
                if fb.pixels[y * fb.width + x] == color}
    return _lit


@pytest.fixture
def pixel_model():
    """Build a Model directly from pixel-plane (x, y) pairs and primitives."""
    def _model(points, primitives, name="pp"):
        return Model([Vertex(x, y, 0.0) for x, y in points], list(primitives), name)
    return _model


@pytest.fixture
def restore_package_logger():
    """Undo any handler/level changes made to the 'soft_renderer' logger."""
    logger = logging.getLogger("soft_renderer")
    handlers, level = list(logger.handlers), logger.level
    yield logger
    for h in list(logger.handlers):
        if h not in handlers:
            h.close()
    logger.handlers[:] = handlers
    logger.setLevel(level)
