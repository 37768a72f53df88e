#
# PROJECT: soft-renderer
# MODULE: soft_renderer/scene.py
# STATUS: Level 2 - Implementation
# LOG_REF: 2026-10-18
#

from .camera import Camera
from .math_utils import Vector
from .model import Model


class Position:
    """
    A Model placed in the scene by a translation vector.

    Multiple positions may share the same Model object.
    """

    def __init__(self, model: Model, translation=None, name: str = "Position",
                 visible: bool = True, debug: bool = False):
        self.model = model
        self.translation = Vector(0.0, 0.0, 0.0)
        if translation is not None:
            self.translate(*translation)
        self.name = name
        self.visible = visible
        self.debug = debug

    def __repr__(self):
        return (f"Position(name={self.name!r}, model={self.model.name!r}, "
                f"translation={self.translation!r}, visible={self.visible})")

    def translate(self, dx: float, dy: float, dz: float):
        """Set the translation vector (model-to-camera offset)."""
        self.translation = Vector(dx, dy, dz)


class Scene:
    """Container for the camera and an ordered list of positions."""

    def __init__(self, name: str = "Scene", camera: Camera = None, debug: bool = False):
        self.name = name
        self.camera = camera if camera is not None else Camera()
        self.positions = []  # list of Position, rendered in order
        self.debug = debug

    def add_position(self, *positions: Position):
        self.positions.extend(positions)

    def get_position(self, name: str):
        """Return the first position with the given name, or None."""
        for p in self.positions:
            if p.name == name:
                return p
        return None

    def clear(self):
        """Remove all positions from the scene."""
        self.positions.clear()
