"""UI event handlers organized by feature area.

This package provides handlers for all Gradio UI events, organized into logical modules:
- generation: Scene generation, export and clearing
- analysis: Image analysis
- styles: Style descriptions and social media presets
"""

from .analysis import analyze_images
from .generation import clear_images, export_result, generate_scene, set_processing
from .styles import apply_social_preset, describe_style

__all__ = [
    # Generation handlers
    "generate_scene",
    "export_result",
    "clear_images",
    "set_processing",
    # Analysis handlers
    "analyze_images",
    # Style handlers
    "apply_social_preset",
    "describe_style",
]
