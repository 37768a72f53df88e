#
# PROJECT: soft-renderer
# MODULE: soft_renderer/__init__.py
# STATUS: Level 2 - Implementation
# LOG_REF: 2026-10-18
#

from .math_utils import Vertex, Vector, round_half_up
from .color import pack_rgb, unpack_rgb, parse_hex_color, BLACK, WHITE
from .config import RenderConfig
from .errors import (RendererError, PPMFormatError, ImageWriteError,
                     UnsupportedPrimitiveError)
from .primitives import PrimitiveKind, Primitive, Point, LineSegment
from .model import Model, check_model
from .camera import Camera
from .scene import Scene, Position
from .framebuffer import FrameBuffer, Viewport
from .transforms import model_to_camera, project, image_plane_to_pixel_plane
from .rasterizer import rasterize, rasterize_point, rasterize_line
from .renderer import Renderer, render
from .logging_config import setup_logging
