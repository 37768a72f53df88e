#
# PROJECT: soft-renderer
# MODULE: soft_renderer/primitives.py
# STATUS: Level 2 - Implementation
# LOG_REF: 2026-10-18
#

from enum import Enum


class PrimitiveKind(Enum):
    POINT = 'point'
    LINE_SEGMENT = 'line_segment'


class Primitive:
    """
    Tagged geometric primitive.

    `kind` is the tag the rasterizer dispatches on; `vindex_list` holds
    indices into the owning Model's vertex list. Index validity is the
    caller's responsibility (see model.check_model).
    """
    __slots__ = ('vindex_list',)
    kind = None

    def __init__(self, *indices: int):
        self.vindex_list = [int(i) for i in indices]

    def __eq__(self, other):
        if type(other) is type(self):
            return self.vindex_list == other.vindex_list
        return NotImplemented

    __hash__ = None


class Point(Primitive):
    """A single vertex drawn as a (2r+1) x (2r+1) square of pixels."""
    __slots__ = ('radius',)
    kind = PrimitiveKind.POINT

    def __init__(self, index: int, radius: int = 0):
        super().__init__(index)
        self.radius = int(radius)

    def __eq__(self, other):
        if isinstance(other, Point):
            return self.vindex_list == other.vindex_list and self.radius == other.radius
        return NotImplemented

    __hash__ = None

    def __repr__(self):
        return f"Point({self.vindex_list[0]}, radius={self.radius})"

    def __str__(self):
        return f"Point: ([{self.vindex_list[0]}], radius={self.radius})"


class LineSegment(Primitive):
    __slots__ = ()
    kind = PrimitiveKind.LINE_SEGMENT

    def __init__(self, i0: int, i1: int):
        super().__init__(i0, i1)

    def __repr__(self):
        return f"LineSegment({self.vindex_list[0]}, {self.vindex_list[1]})"

    def __str__(self):
        return f"LineSegment: ([{self.vindex_list[0]}, {self.vindex_list[1]}])"
