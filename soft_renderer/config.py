#
# PROJECT: soft-renderer
# MODULE: soft_renderer/config.py
# STATUS: Level 2 - Implementation
# LOG_REF: 2026-10-18
#

import os
from dataclasses import dataclass

from .color import WHITE

_TRUE_VALUES = ('1', 'true', 'yes', 'on')
_FALSE_VALUES = ('0', 'false', 'no', 'off')


def _env_flag(name: str, default: bool) -> bool:
    raw = os.environ.get(name)
    if raw is None:
        return default
    val = raw.strip().lower()
    if val in _TRUE_VALUES:
        return True
    if val in _FALSE_VALUES:
        return False
    return default


@dataclass
class RenderConfig:
    """Configuration for the rendering pipeline."""
    clip: bool = True
    debug: bool = False
    strict_primitives: bool = False
    line_color: int = WHITE
    point_color: int = WHITE

    @classmethod
    def from_env(cls) -> 'RenderConfig':
        """
        Build a config from SOFT_RENDERER_CLIP and SOFT_RENDERER_DEBUG.
        Unset or unrecognised values keep the defaults.
        """
        return cls(
            clip=_env_flag('SOFT_RENDERER_CLIP', True),
            debug=_env_flag('SOFT_RENDERER_DEBUG', False),
        )
