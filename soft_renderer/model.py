#
# PROJECT: soft-renderer
# MODULE: soft_renderer/model.py
# STATUS: Level 2 - Implementation
# LOG_REF: 2026-10-18
#

import logging

from .math_utils import Vertex
from .primitives import Primitive, PrimitiveKind, Point, LineSegment

logger = logging.getLogger(__name__)


class Model:
    """
    Ordered vertex list plus an ordered primitive list.

    Pipeline stages never mutate a Model; they call with_vertices() to get a
    new Model that shares this one's primitive list, name and visibility.
    """

    def __init__(self, vertices=None, primitives=None, name: str = "Model",
                 visible: bool = True):
        self.vertices = list(vertices) if vertices is not None else []
        self.primitives = primitives if primitives is not None else []
        self.name = name
        self.visible = visible

    def __repr__(self):
        return (f"Model(name={self.name!r}, vertices={len(self.vertices)}, "
                f"primitives={len(self.primitives)}, visible={self.visible})")

    def add_vertex(self, *vertices: Vertex):
        self.vertices.extend(vertices)

    def add_primitive(self, *primitives: Primitive):
        self.primitives.extend(primitives)

    def with_vertices(self, vertices, name=None) -> 'Model':
        """New Model with the given vertices and this model's primitive list."""
        return Model(vertices,
                     self.primitives,
                     self.name if name is None else name,
                     self.visible)

    @classmethod
    def cube(cls, name: str = "Cube"):
        """Wireframe cube, side 2, centered at the origin (12 line segments)."""
        model = cls(name=name)
        model.add_vertex(
            Vertex(-1, -1, -1), Vertex( 1, -1, -1), Vertex( 1,  1, -1), Vertex(-1,  1, -1),
            Vertex(-1, -1,  1), Vertex( 1, -1,  1), Vertex( 1,  1,  1), Vertex(-1,  1,  1),
        )
        model.add_primitive(
            LineSegment(0, 1), LineSegment(1, 2), LineSegment(2, 3), LineSegment(3, 0),  # back
            LineSegment(4, 5), LineSegment(5, 6), LineSegment(6, 7), LineSegment(7, 4),  # front
            LineSegment(0, 4), LineSegment(1, 5), LineSegment(2, 6), LineSegment(3, 7),  # sides
        )
        return model

    @classmethod
    def square(cls, name: str = "Square"):
        """Unit square outline in the z = 0 plane, corners at (+/-1, +/-1)."""
        model = cls(name=name)
        model.add_vertex(Vertex(-1, -1, 0), Vertex(-1, 1, 0),
                         Vertex( 1,  1, 0), Vertex( 1, -1, 0))
        model.add_primitive(LineSegment(0, 1), LineSegment(1, 2),
                            LineSegment(2, 3), LineSegment(3, 0))
        return model


_EXPECTED_INDEX_COUNT = {
    PrimitiveKind.POINT: 1,
    PrimitiveKind.LINE_SEGMENT: 2,
}


def check_model(model: Model) -> bool:
    """
    Log every malformed primitive in the model and report whether it is
    well formed. Never raises; rendering a malformed model is the caller's
    decision.
    """
    ok = True
    n = len(model.vertices)
    for i, p in enumerate(model.primitives):
        kind = getattr(p, 'kind', None)
        indices = getattr(p, 'vindex_list', None)
        if kind not in _EXPECTED_INDEX_COUNT or indices is None:
            logger.warning("Model %s: primitive %d is not a supported primitive: %r",
                           model.name, i, p)
            ok = False
            continue
        if len(indices) != _EXPECTED_INDEX_COUNT[kind]:
            logger.warning("Model %s: primitive %d (%s) has %d vertex indices",
                           model.name, i, p, len(indices))
            ok = False
        for idx in indices:
            if idx < 0 or idx >= n:
                logger.warning("Model %s: primitive %d (%s) has bad vertex index %d "
                               "(vertex count = %d)", model.name, i, p, idx, n)
                ok = False
        if isinstance(p, Point) and p.radius < 0:
            logger.warning("Model %s: primitive %d (%s) has negative radius",
                           model.name, i, p)
            ok = False
    return ok
