"""Data models for SnapStudio UI state and choices."""

import logging
from dataclasses import dataclass
from typing import Any

from snapstudio.core.catalog import STYLE_DEFINITIONS, StylePreset
from snapstudio.core.options import (
    AspectRatio,
    CameraAngle,
    CameraDistance,
    FaceDirection,
    LightingPreset,
    Resolution,
    SocialPlatform,
    SubjectPose,
)

logger = logging.getLogger(__name__)


@dataclass
class UIState:
    """Session state for the Gradio UI.

    Each browser session gets its own UIState. Gradio deep-copies the
    initial value per session, so only plain values live here until
    ``initialize_ui_state`` attaches the service objects.

    Attributes
    ----------
    client : Any | None
        Remote model client (genai.Client)
    pipeline : Any | None
        StudioPipeline instance (composer + generator + sequencer)
    analyzer : Any | None
        ImageAnalyzer instance
    sequencer : Any | None
        RequestSequencer shared with the pipeline
    last_image : str | None
        Most recently accepted result (PNG data URI)
    last_prompt : str
        Prompt that produced last_image
    last_analysis : Any | None
        Most recent ImageAnalysisResult
    """

    client: Any | None = None
    pipeline: Any | None = None
    analyzer: Any | None = None
    sequencer: Any | None = None

    last_image: str | None = None
    last_prompt: str = ""
    last_analysis: Any | None = None

    def is_initialized(self) -> bool:
        """Check if the service objects are attached.

        Returns:
            True if pipeline and analyzer are available
        """
        return self.pipeline is not None and self.analyzer is not None

    def __repr__(self) -> str:
        """String representation for debugging."""
        return (
            f"UIState(initialized={self.is_initialized()}, "
            f"has_result={self.last_image is not None})"
        )


# Dropdown choices: (label, value) pairs for styles, raw labels for options
STYLE_CHOICES = [
    (definition.display_name, style.value) for style, definition in STYLE_DEFINITIONS.items()
]
ANGLE_CHOICES = [option.value for option in CameraAngle]
DISTANCE_CHOICES = [option.value for option in CameraDistance]
LIGHTING_CHOICES = [option.value for option in LightingPreset]
POSE_CHOICES = [option.value for option in SubjectPose]
FACE_DIRECTION_CHOICES = [option.value for option in FaceDirection]
RESOLUTION_CHOICES = [option.value for option in Resolution]
ASPECT_RATIO_CHOICES = [option.value for option in AspectRatio]
SOCIAL_PLATFORM_CHOICES = [option.value for option in SocialPlatform]

DEFAULT_STYLE = StylePreset.SMART_AD
SOURCE_IMAGE_SLOTS = 4
EXPORT_FORMATS = ["png", "jpg"]

GENERIC_ERROR_MESSAGE = "An error occurred during generation."
ANALYSIS_ERROR_MESSAGE = "Failed to analyze image."
