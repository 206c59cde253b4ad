"""Unit tests for hardcoded prompt templates."""

import logging

from snapstudio.core.catalog import STYLE_DEFINITIONS, StylePreset
from snapstudio.core.models import GenerationConfig
from snapstudio.core.options import (
    AspectRatio,
    CameraAngle,
    CameraDistance,
    FaceDirection,
    LightingPreset,
    SubjectPose,
)
from snapstudio.core.prompt_templates import (
    REMOVE_BG_PROMPT,
    UPSCALE_PROMPT,
    TemplateRegistry,
    template_registry,
)


def render(style: StylePreset, **values) -> str:
    return template_registry.get(style)(GenerationConfig(style=style, **values))


class TestTemplateRegistry:
    """Tests for TemplateRegistry."""

    def test_register_and_get(self):
        """Registered builders are returned by get."""
        registry = TemplateRegistry()

        @registry.register(StylePreset.LUXURY)
        def build(cfg):
            return "luxury"

        assert registry.get(StylePreset.LUXURY) is build
        assert registry.has_template(StylePreset.LUXURY)
        assert registry.list_styles() == [StylePreset.LUXURY]

    def test_get_missing(self):
        """Missing builders return None."""
        assert TemplateRegistry().get(StylePreset.LUXURY) is None

    def test_overwrite_warns(self, caplog):
        """Registering twice logs a warning and keeps the newer builder."""
        registry = TemplateRegistry()
        registry.register(StylePreset.LUXURY)(lambda cfg: "first")

        with caplog.at_level(logging.WARNING):
            second = registry.register(StylePreset.LUXURY)(lambda cfg: "second")

        assert "already registered" in caplog.text
        assert registry.get(StylePreset.LUXURY) is second

    def test_every_local_style_has_template(self):
        """Styles not sent to the optimizer all have a builder."""
        for style, definition in STYLE_DEFINITIONS.items():
            if not definition.uses_remote_optimizer:
                assert template_registry.has_template(style), style

    def test_optimized_styles_have_no_template(self):
        """Optimized styles are left to the remote optimizer."""
        assert not template_registry.has_template(StylePreset.SMART_AD)


class TestFixedTemplates:
    """Fixed instructions ignore every parameter."""

    def test_remove_bg(self):
        """Background removal returns the fixed instruction."""
        assert render(StylePreset.REMOVE_BG) == REMOVE_BG_PROMPT
        assert (
            render(StylePreset.REMOVE_BG, prompt="make it blue", fixed_elements="logo")
            == REMOVE_BG_PROMPT
        )

    def test_upscale(self):
        """Upscaling returns the fixed instruction."""
        assert render(StylePreset.UPSCALE, lighting=LightingPreset.NEON) == UPSCALE_PROMPT


class TestTextToImageTemplates:
    """Tests for the creation templates."""

    def test_imagine_default_topic(self):
        """An empty prompt falls back to the default topic."""
        assert '"Future Technology"' in render(StylePreset.IMAGINE_V5)

    def test_imagine_uses_prompt(self):
        """The user's prompt is the concept."""
        text = render(StylePreset.IMAGINE_V5, prompt="a floating city")
        assert '"a floating city"' in text
        assert CameraAngle.EYE_LEVEL.value in text

    def test_pure_creation_default_topic(self):
        """An empty prompt falls back to a generic scene."""
        assert '"A beautiful scene"' in render(StylePreset.PURE_CREATION)

    def test_constraint_clause_included(self):
        """Fixed elements appear as a mandatory clause."""
        text = render(StylePreset.PURE_CREATION, fixed_elements="a red car")
        assert "MANDATORY ELEMENTS (Must be included/preserved): a red car" in text

    def test_no_constraint_clause_without_fixed_elements(self):
        """No clause, and no blank line, when nothing is fixed."""
        text = render(StylePreset.PURE_CREATION)
        assert "MANDATORY" not in text
        assert "\n\n" not in text


class TestDomainTemplates:
    """Tests for the hand-written category templates."""

    def test_free_edit_default_instruction(self):
        """Free edit without a prompt asks for an enhancement."""
        assert '"Enhance the image"' in render(StylePreset.FREE_EDIT)

    def test_developer_pro_parameters(self):
        """Pose, distance and gaze are honoured."""
        text = render(
            StylePreset.DEVELOPER_PRO,
            pose=SubjectPose.BUSY_TYPING,
            distance=CameraDistance.CLOSE_UP,
            face_direction=FaceDirection.SCREEN,
        )
        assert f"- POSE: {SubjectPose.BUSY_TYPING.value}" in text
        assert f"- DISTANCE: {CameraDistance.CLOSE_UP.value}." in text
        assert f"- EYE GAZE / FACE DIRECTION: {FaceDirection.SCREEN.value}." in text

    def test_food_composition(self):
        """Food composition includes angle, distance and aspect ratio."""
        text = render(
            StylePreset.FOOD_PHOTOGRAPHY,
            angle=CameraAngle.TOP_DOWN,
            aspect_ratio=AspectRatio.PORTRAIT,
        )
        assert (
            f"Composition: {CameraAngle.TOP_DOWN.value}, {CameraDistance.MEDIUM.value}, "
            f"{AspectRatio.PORTRAIT.value}." in text
        )

    def test_shoes_eye_level_floats(self):
        """An eye-level shoe shot becomes a floating composition."""
        assert "Composition: Floating dynamically." in render(StylePreset.SHOES_ELEGANCE)

    def test_shoes_other_angle(self):
        """Other angles are used as-is."""
        text = render(StylePreset.SHOES_ELEGANCE, angle=CameraAngle.LOW_ANGLE)
        assert f"Composition: {CameraAngle.LOW_ANGLE.value}." in text

    def test_fashion_pose(self):
        """Fashion honours the subject pose."""
        text = render(StylePreset.FASHION_CLOTHING, pose=SubjectPose.FASHION_WALK)
        assert f"Subject Pose: {SubjectPose.FASHION_WALK.value}." in text

    def test_smartphone_lighting(self):
        """Smartphone shots use the chosen lighting."""
        text = render(StylePreset.SMARTPHONE_PHOTO, lighting=LightingPreset.RIM)
        assert LightingPreset.RIM.value in text

    def test_files_3d_text_clarity(self):
        """The 3D files template insists on readable filenames."""
        assert "CRITICAL PRIORITY: TEXT CLARITY." in render(StylePreset.FILES_3D_RENDER)
