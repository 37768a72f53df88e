#
# PROJECT: soft-renderer
# MODULE: soft_renderer/renderer.py
# STATUS: Level 2 - Implementation
# LOG_REF: 2026-10-18
#

from .config import RenderConfig
from .framebuffer import FrameBuffer
from .model import check_model
from .pipeline_logger import PipelineLogger
from .rasterizer import rasterize
from .scene import Scene
from .transforms import model_to_camera, project, image_plane_to_pixel_plane


class Renderer:
    """
    Four-stage software renderer.

    render(scene, target) draws every visible position of the scene into a
    Viewport (or a FrameBuffer's default viewport).

    Pipeline, per visible position with a visible model:
      1. model_to_camera             translate by the position's vector
      2. project                     perspective or parallel projection
      3. image_plane_to_pixel_plane  fit [-1, 1] to the viewport size
      4. rasterize                   points and line segments into pixels

    Stages 1-3 return new Models; only stage 4 touches the pixel store. The
    viewport is not cleared first; clear it (or not) before calling.
    """

    def __init__(self, config: RenderConfig = None):
        self.config = config if config is not None else RenderConfig()

    def render(self, scene: Scene, target):
        vp = target.vp if isinstance(target, FrameBuffer) else target
        config = self.config
        plog = PipelineLogger(debug=config.debug, debug_scene=scene.debug)

        plog.log_message(f"== Begin Rendering of Scene: {scene.name} ==")
        plog.log_message(f"-- Current Camera: {scene.camera!r}")

        for position in scene.positions:
            plog.debug_position = position.debug
            if not position.visible:
                plog.log_message(f"==== Hidden position: {position.name} ====")
                continue

            plog.log_message(f"==== Render position: {position.name} ====")
            plog.log_message(f"---- Translation vector = {position.translation!r}")

            model = position.model
            if not model.visible:
                plog.log_message(f"====== Hidden model: {model.name} ======")
                plog.log_message(f"==== End position: {position.name} ====")
                continue

            plog.log_message(f"====== Render model: {model.name} ======")
            check_model(model)
            plog.log_vertex_list("0. Model      ", model)

            # 1. Model-to-camera
            model1 = model_to_camera(position)
            plog.log_vertex_list("1. Camera     ", model1)

            # 2. Projection
            model2 = project(model1, scene.camera)
            plog.log_vertex_list("2. Projected  ", model2)

            # 3. Image-plane to pixel-plane
            model3 = image_plane_to_pixel_plane(model2, vp)
            plog.log_vertex_list("3. Pixel-plane", model3)
            plog.log_primitive_list("3. Pixel-plane", model3)

            # 4. Rasterize (and clip)
            rasterize(model3, vp, config, plog)

            plog.log_message(f"====== End model: {model.name} ======")
            plog.log_message(f"==== End position: {position.name} ====")

        plog.debug_position = False
        plog.log_message("== End Rendering of Scene ==")


def render(scene: Scene, target, config: RenderConfig = None):
    """Render a scene into a FrameBuffer or Viewport with a one-off Renderer."""
    Renderer(config).render(scene, target)
