"""SnapStudio - AI product and portrait photography studio."""

__version__ = "0.1.0"

from snapstudio.core.catalog import STYLE_DEFINITIONS, StylePreset
from snapstudio.core.config import StudioConfig, config

__all__ = [
    "STYLE_DEFINITIONS",
    "StudioConfig",
    "StylePreset",
    "config",
]
