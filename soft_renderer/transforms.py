#
# PROJECT: soft-renderer
# MODULE: soft_renderer/transforms.py
# STATUS: Level 2 - Implementation
# LOG_REF: 2026-10-18
#

"""
The three vertex stages of the pipeline.

Each stage is a pure function: it builds a new vertex list and returns a
new Model that shares the input model's primitive list, so the caller's
model is never modified.

  1. model_to_camera            model coordinates -> camera coordinates
  2. project                    camera coordinates -> image plane
  3. image_plane_to_pixel_plane image plane [-1, 1] -> logical pixel-plane
"""

import math

from .camera import Camera
from .math_utils import Vertex
from .model import Model

# Keeps the outermost image-plane coordinates strictly inside the
# pixel-plane after rounding (Blinn, "A Trip Down the Graphics Pipeline").
PIXEL_PLANE_DIVISOR = 2.001


def _divide(num: float, den: float) -> float:
    """IEEE-754 division: x / 0.0 gives +/-inf (or nan) instead of raising."""
    try:
        return num / den
    except ZeroDivisionError:
        if num == 0 or math.isnan(num):
            return math.nan
        return math.copysign(math.inf, num) * math.copysign(1.0, den)


def model_to_camera(position) -> Model:
    """Translate every vertex of the position's model by its translation vector."""
    model = position.model
    t = position.translation
    return model.with_vertices([t.plus(v) for v in model.vertices],
                               name=f"{position.name}::{model.name}")


def project(model: Model, camera: Camera) -> Model:
    """
    Project camera-space vertices onto the image plane.

    Perspective uses similar triangles through the origin and the plane
    z = -1:  x_p = x_c / -z_c,  y_p = y_c / -z_c,  z_p = -1.
    The camera looks down -z, so every z_c should be negative. Vertices
    with z_c >= 0 are not rejected; they give mirrored or infinite points.

    Parallel projection keeps x and y and sets z to 0.
    """
    if camera.perspective:
        vertices = [Vertex(_divide(v.x, -v.z), _divide(v.y, -v.z), -1.0)
                    for v in model.vertices]
    else:
        vertices = [Vertex(v.x, v.y, 0.0) for v in model.vertices]
    return model.with_vertices(vertices)


def image_plane_to_pixel_plane(model: Model, viewport) -> Model:
    """
    Map image-plane vertices into the logical pixel-plane of a viewport.

        x_pp = 0.5 + w/2.001 * (x_p + 1)
        y_pp = 0.5 + h/2.001 * (y_p + 1)

    so (-1, -1) lands on (0.5, 0.5) and (1, 1) just short of (w+0.5, h+0.5).
    """
    w = viewport.width
    h = viewport.height
    sx = w / PIXEL_PLANE_DIVISOR
    sy = h / PIXEL_PLANE_DIVISOR
    vertices = [Vertex(0.5 + sx * (v.x + 1), 0.5 + sy * (v.y + 1), 0.0)
                for v in model.vertices]
    return model.with_vertices(vertices)
