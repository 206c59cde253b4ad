"""Value objects passed between the UI and the core.

These models are constructed fresh for every request and never persisted.
Pydantic validates the enum fields on construction, so a GenerationConfig
that reaches the prompt composer is always fully formed.
"""

from __future__ import annotations

import re

from pydantic import BaseModel, ConfigDict, Field, field_validator

from .catalog import StylePreset
from .options import (
    DEFAULT_ANGLE,
    DEFAULT_ASPECT_RATIO,
    DEFAULT_DISTANCE,
    DEFAULT_FACE_DIRECTION,
    DEFAULT_LIGHTING,
    DEFAULT_POSE,
    DEFAULT_RESOLUTION,
    AspectRatio,
    CameraAngle,
    CameraDistance,
    FaceDirection,
    LightingPreset,
    Resolution,
    SubjectPose,
)

HEX_COLOR_PATTERN = re.compile(r"^#(?:[0-9a-fA-F]{3}|[0-9a-fA-F]{6})$")


class GenerationConfig(BaseModel):
    """All user selections for one generation request.

    Attributes:
        prompt: Free-text instruction (any language).
        fixed_elements: Mandatory content that must appear in or survive the output.
        style: Selected style preset.
        angle: Camera angle.
        distance: Camera distance / shot type.
        lighting: Lighting preset.
        pose: Subject pose.
        face_direction: Where the subject is looking.
        resolution: Target output resolution.
        aspect_ratio: Target output aspect ratio.
        background_color: Optional solid background color (``#RRGGBB``).
    """

    model_config = ConfigDict(frozen=True)

    prompt: str = ""
    fixed_elements: str = ""
    style: StylePreset = StylePreset.SMART_AD
    angle: CameraAngle = DEFAULT_ANGLE
    distance: CameraDistance = DEFAULT_DISTANCE
    lighting: LightingPreset = DEFAULT_LIGHTING
    pose: SubjectPose = DEFAULT_POSE
    face_direction: FaceDirection = DEFAULT_FACE_DIRECTION
    resolution: Resolution = DEFAULT_RESOLUTION
    aspect_ratio: AspectRatio = DEFAULT_ASPECT_RATIO
    background_color: str = Field(default="", description="Solid background color or empty")

    @field_validator("prompt", "fixed_elements", mode="before")
    @classmethod
    def _strip_text(cls, value: str | None) -> str:
        return (value or "").strip()

    @field_validator("background_color", mode="before")
    @classmethod
    def _check_background_color(cls, value: str | None) -> str:
        value = (value or "").strip()
        if value and not HEX_COLOR_PATTERN.match(value):
            raise ValueError(f"Background color must be a hex color like #FFFFFF, got {value!r}")
        return value

    @property
    def constraint_clause(self) -> str:
        """Mandatory-elements clause, or an empty string when none are set."""
        if not self.fixed_elements:
            return ""
        return f"MANDATORY ELEMENTS (Must be included/preserved): {self.fixed_elements}"


class ImageAnalysisResult(BaseModel):
    """Two English descriptions produced by the image analyzer.

    Attributes:
        creation_prompt: Prompt that recreates the whole image from scratch.
        preservation_prompt: Description of the primary subject to keep unchanged.
    """

    model_config = ConfigDict(frozen=True)

    creation_prompt: str
    preservation_prompt: str
