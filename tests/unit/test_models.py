"""Unit tests for core value objects."""

import pytest
from pydantic import ValidationError

from snapstudio.core.catalog import StylePreset
from snapstudio.core.models import GenerationConfig, ImageAnalysisResult
from snapstudio.core.options import (
    AspectRatio,
    CameraAngle,
    CameraDistance,
    LightingPreset,
    Resolution,
)


class TestGenerationConfig:
    """Tests for GenerationConfig model."""

    def test_defaults(self):
        """Defaults match the UI defaults."""
        cfg = GenerationConfig()
        assert cfg.style == StylePreset.SMART_AD
        assert cfg.angle == CameraAngle.EYE_LEVEL
        assert cfg.distance == CameraDistance.MEDIUM
        assert cfg.lighting == LightingPreset.SOFTBOX
        assert cfg.resolution == Resolution.FHD
        assert cfg.aspect_ratio == AspectRatio.SQUARE
        assert cfg.prompt == ""
        assert cfg.background_color == ""

    def test_labels_coerced_to_enums(self):
        """Raw UI labels and style identifiers are accepted."""
        cfg = GenerationConfig(style="LUXURY", angle="من الأعلى (Flat Lay)")
        assert cfg.style is StylePreset.LUXURY
        assert cfg.angle is CameraAngle.TOP_DOWN

    def test_invalid_option_rejected(self):
        """Unknown option labels fail validation."""
        with pytest.raises(ValidationError):
            GenerationConfig(angle="sideways")

    def test_invalid_style_rejected(self):
        """Unknown style identifiers fail validation."""
        with pytest.raises(ValidationError):
            GenerationConfig(style="WATERCOLOR")

    def test_text_is_stripped(self):
        """Prompt and fixed elements are stripped; None becomes empty."""
        cfg = GenerationConfig(prompt="  on a table  ", fixed_elements=None)
        assert cfg.prompt == "on a table"
        assert cfg.fixed_elements == ""

    @pytest.mark.parametrize("color", ["#FFF", "#a1b2c3", ""])
    def test_valid_background_colors(self, color: str):
        """Short and long hex colors and empty are accepted."""
        assert GenerationConfig(background_color=color).background_color == color

    @pytest.mark.parametrize("color", ["red", "#GGGGGG", "#12345", "FFFFFF"])
    def test_invalid_background_colors(self, color: str):
        """Anything that is not a hex color is rejected."""
        with pytest.raises(ValidationError):
            GenerationConfig(background_color=color)

    def test_constraint_clause(self):
        """Fixed elements become a mandatory clause."""
        cfg = GenerationConfig(fixed_elements="red logo")
        assert cfg.constraint_clause == "MANDATORY ELEMENTS (Must be included/preserved): red logo"

    def test_constraint_clause_empty(self):
        """No fixed elements, no clause."""
        assert GenerationConfig().constraint_clause == ""

    def test_frozen(self):
        """Configs are immutable."""
        cfg = GenerationConfig()
        with pytest.raises(ValidationError):
            cfg.prompt = "changed"


class TestImageAnalysisResult:
    """Tests for ImageAnalysisResult model."""

    def test_fields(self):
        """Both descriptions are stored."""
        result = ImageAnalysisResult(creation_prompt="a", preservation_prompt="b")
        assert result.creation_prompt == "a"
        assert result.preservation_prompt == "b"
