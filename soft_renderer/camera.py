#
# PROJECT: soft-renderer
# MODULE: soft_renderer/camera.py
# STATUS: Level 2 - Implementation
# LOG_REF: 2026-10-18
#

class Camera:
    """
    Camera state for the pipeline.

    The camera sits at the origin looking down the negative z-axis. The only
    state is the projection mode: perspective projects onto the image plane
    z = -1, parallel (orthographic) drops the z coordinate.
    """
    __slots__ = ('perspective',)

    def __init__(self, perspective: bool = True):
        self.perspective = perspective

    def __repr__(self):
        mode = "perspective" if self.perspective else "parallel"
        return f"Camera({mode})"

    @classmethod
    def perspective_camera(cls) -> 'Camera':
        return cls(perspective=True)

    @classmethod
    def parallel_camera(cls) -> 'Camera':
        return cls(perspective=False)

    def project_perspective(self):
        """Switch to perspective projection."""
        self.perspective = True

    def project_ortho(self):
        """Switch to parallel (orthographic) projection."""
        self.perspective = False
