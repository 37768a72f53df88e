#
# PROJECT: soft-renderer
# MODULE: soft_renderer/pipeline_logger.py
# STATUS: Level 2 - Implementation
# LOG_REF: 2026-10-18
#

import logging

logger = logging.getLogger("soft_renderer.pipeline")

CLIPPED = "Clipped: "
NOT_CLIPPED = "         "


class PipelineLogger:
    """
    Stage-by-stage diagnostics for one render call.

    Output goes to the 'soft_renderer.pipeline' logger at DEBUG, and only
    while one of the three switches is on: the render config's debug flag,
    the scene's debug flag, or the current position's debug flag.
    """
    __slots__ = ('debug_config', 'debug_scene', 'debug_position')

    def __init__(self, debug: bool = False, debug_scene: bool = False):
        self.debug_config = debug
        self.debug_scene = debug_scene
        self.debug_position = False

    @property
    def enabled(self) -> bool:
        return ((self.debug_config or self.debug_scene or self.debug_position)
                and logger.isEnabledFor(logging.DEBUG))

    def log_message(self, message: str):
        if self.enabled:
            logger.debug(message)

    def log_vertex_list(self, stage: str, model):
        if self.enabled:
            for i, v in enumerate(model.vertices):
                logger.debug("%s: vIndex = %3d, %s", stage, i, v)

    def log_primitive_list(self, stage: str, model):
        if self.enabled:
            if not model.primitives:
                logger.debug("%s: []", stage)
            for p in model.primitives:
                logger.debug("%s: %s", stage, p)

    def log_primitive(self, stage: str, model, p):
        if self.enabled:
            logger.debug("%s: %s", stage, p)
            for idx in getattr(p, 'vindex_list', ()):
                if 0 <= idx < len(model.vertices):
                    logger.debug("   vIndex = %3d, %s", idx, model.vertices[idx])
                else:
                    logger.debug("   vIndex = %3d, <bad index>", idx)

    def log_pixel(self, clipped_message: str, x_pp, y_pp, x_vp: int, y_vp: int, vp):
        """One rasterized pixel. Integral pixel-plane coordinates print as ints."""
        if self.enabled:
            fb = vp.fb
            xs = f"{x_pp:4d}" if isinstance(x_pp, int) else f"{x_pp:9.4f}"
            ys = f"{y_pp:4d}" if isinstance(y_pp, int) else f"{y_pp:9.4f}"
            logger.debug(
                "%sfb_[w=%d,h=%d]  vp_[x=%4d, y=%4d, w=%d,h=%d]  "
                "(x_pp=%s, y_pp=%s)  (x_vp=%4d, y_vp=%4d)",
                clipped_message, fb.width, fb.height,
                vp.ul_x, vp.ul_y, vp.width, vp.height,
                xs, ys, x_vp, y_vp)
