#
# PROJECT: soft-renderer
# MODULE: soft_renderer/math_utils.py
# STATUS: Level 2 - Implementation
# LOG_REF: 2026-10-18
#

import math


class Vertex:
    """Immutable 3-component point. Pipeline stages build new ones."""
    __slots__ = ('x', 'y', 'z')

    def __init__(self, x: float, y: float, z: float):
        object.__setattr__(self, 'x', float(x))
        object.__setattr__(self, 'y', float(y))
        object.__setattr__(self, 'z', float(z))

    def __setattr__(self, name, value):
        raise AttributeError("Vertex is immutable")

    def __repr__(self):
        return f"Vertex({self.x:.4f}, {self.y:.4f}, {self.z:.4f})"

    def __str__(self):
        return f"(x,y,z) = ({self.x:9.4f}, {self.y:9.4f}, {self.z:9.4f})"

    def __iter__(self):
        yield self.x
        yield self.y
        yield self.z

    def __getitem__(self, index):
        if index == 0: return self.x
        if index == 1: return self.y
        if index == 2: return self.z
        raise IndexError("Vertex index out of range")

    def __eq__(self, other):
        if isinstance(other, Vertex):
            return (self.x, self.y, self.z) == (other.x, other.y, other.z)
        return NotImplemented

    def __hash__(self):
        return hash((self.x, self.y, self.z))

    def is_finite(self) -> bool:
        return math.isfinite(self.x) and math.isfinite(self.y) and math.isfinite(self.z)


class Vector:
    """Immutable 3-component translation vector."""
    __slots__ = ('x', 'y', 'z')

    def __init__(self, x: float = 0.0, y: float = 0.0, z: float = 0.0):
        object.__setattr__(self, 'x', float(x))
        object.__setattr__(self, 'y', float(y))
        object.__setattr__(self, 'z', float(z))

    def __setattr__(self, name, value):
        raise AttributeError("Vector is immutable")

    def __repr__(self):
        return f"Vector({self.x:.4f}, {self.y:.4f}, {self.z:.4f})"

    def __iter__(self):
        yield self.x
        yield self.y
        yield self.z

    def __eq__(self, other):
        if isinstance(other, Vector):
            return (self.x, self.y, self.z) == (other.x, other.y, other.z)
        return NotImplemented

    def __hash__(self):
        return hash((self.x, self.y, self.z))

    def __add__(self, other):
        if isinstance(other, Vector):
            return Vector(self.x + other.x, self.y + other.y, self.z + other.z)
        if isinstance(other, Vertex):
            return self.plus(other)
        return NotImplemented

    def __mul__(self, scalar):
        return Vector(self.x * scalar, self.y * scalar, self.z * scalar)

    def plus(self, v: Vertex) -> Vertex:
        """Translate a vertex by this vector, returning a new Vertex."""
        return Vertex(v.x + self.x, v.y + self.y, v.z + self.z)


def round_half_up(value: float) -> int:
    """
    Round to the nearest integer with ties going toward +infinity,
    so 2.5 -> 3 and -2.5 -> -2. Python's round() rounds ties to even,
    which shifts pixels on exact half-pixel coordinates.
    """
    return math.floor(value + 0.5)
