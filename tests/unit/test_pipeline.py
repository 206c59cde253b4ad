"""Unit tests for StudioPipeline."""

from unittest.mock import Mock

import pytest

from snapstudio.core.catalog import StylePreset
from snapstudio.core.exceptions import GenerationError, MissingImageError
from snapstudio.core.models import GenerationConfig
from snapstudio.core.pipeline import (
    STEP_ANALYZING,
    STEP_CONCEPTUALIZING,
    STEP_GENERATING,
    STEP_RENDERING,
    STEP_UPSCALING,
    StudioPipeline,
)
from snapstudio.core.sequencer import RequestSequencer


@pytest.fixture
def composer() -> Mock:
    composer = Mock()
    composer.compose.return_value = "composed prompt"
    return composer


@pytest.fixture
def generator() -> Mock:
    generator = Mock()
    generator.generate.return_value = "data:image/png;base64,QUJD"
    return generator


@pytest.fixture
def pipeline(composer, generator) -> StudioPipeline:
    return StudioPipeline(composer, generator, RequestSequencer())


class TestRun:
    """Tests for StudioPipeline.run."""

    def test_scene_replacement(self, pipeline, composer, generator):
        """Compose then generate with the source images."""
        cfg = GenerationConfig(style=StylePreset.LUXURY)

        result = pipeline.run(["img-a", "img-b"], None, cfg)

        composer.compose.assert_called_once_with(cfg, has_reference=False)
        generator.generate.assert_called_once_with(
            ["img-a", "img-b"],
            None,
            "composed prompt",
            cfg.resolution,
            cfg.style,
            cfg.aspect_ratio,
        )
        assert result.prompt == "composed prompt"
        assert result.image == "data:image/png;base64,QUJD"
        assert result.token == 1
        assert result.stale is False

    def test_empty_slots_dropped(self, pipeline, generator):
        """Empty image slots are removed before generating."""
        pipeline.run([None, "img", ""], None, GenerationConfig())
        assert generator.generate.call_args.args[0] == ["img"]

    def test_reference_flag(self, pipeline, composer):
        """The composer knows when a reference image is present."""
        pipeline.run(["img"], "ref", GenerationConfig())
        assert composer.compose.call_args.kwargs["has_reference"] is True

    def test_missing_image_fails_before_calls(self, pipeline, composer, generator):
        """Image styles without images fail without any remote call."""
        with pytest.raises(MissingImageError):
            pipeline.run([], None, GenerationConfig(style=StylePreset.PORTRAIT))

        composer.compose.assert_not_called()
        generator.generate.assert_not_called()
        assert pipeline.sequencer.latest == 0

    def test_text_to_image_without_images(self, pipeline, generator):
        """Creation styles run without source images."""
        result = pipeline.run(None, None, GenerationConfig(style=StylePreset.IMAGINE_V5))
        assert generator.generate.call_args.args[0] == []
        assert result.stale is False

    @pytest.mark.parametrize(
        "style,images,steps",
        [
            (StylePreset.IMAGINE_V5, [], [STEP_CONCEPTUALIZING, STEP_RENDERING]),
            (StylePreset.UPSCALE, ["img"], [STEP_ANALYZING, STEP_UPSCALING]),
            (StylePreset.SMART_AD, ["img"], [STEP_ANALYZING, STEP_GENERATING]),
        ],
    )
    def test_progress_steps(self, pipeline, style, images, steps):
        """Progress messages depend on the style."""
        seen = []
        pipeline.run(images, None, GenerationConfig(style=style), on_step=seen.append)
        assert seen == steps

    def test_generation_error_propagates(self, pipeline, generator):
        """Generator failures reach the caller."""
        generator.generate.side_effect = GenerationError("boom")
        with pytest.raises(GenerationError):
            pipeline.run(["img"], None, GenerationConfig())


class TestStaleness:
    """Tests for superseded requests."""

    def test_superseded_request_is_stale(self, pipeline, generator):
        """A request overtaken by a newer one is marked stale."""

        def newer_request_arrives(*args):
            pipeline.sequencer.issue()
            return "data:image/png;base64,QUJD"

        generator.generate.side_effect = newer_request_arrives

        result = pipeline.run(["img"], None, GenerationConfig())

        assert result.token == 1
        assert result.stale is True

    def test_latest_request_is_current(self, pipeline):
        """Consecutive requests are each current when they finish."""
        first = pipeline.run(["img"], None, GenerationConfig())
        second = pipeline.run(["img"], None, GenerationConfig())

        assert (first.token, second.token) == (1, 2)
        assert not first.stale
        assert not second.stale

    def test_superseded_failure_is_stale(self, pipeline, generator):
        """A superseded request that fails is returned as stale, not raised."""

        def newer_request_then_failure(*args):
            pipeline.sequencer.issue()
            raise GenerationError("old request failed")

        generator.generate.side_effect = newer_request_then_failure

        result = pipeline.run(["img"], None, GenerationConfig())

        assert result.token == 1
        assert result.stale is True
        assert result.image == ""
        assert result.prompt == "composed prompt"

    def test_superseded_composer_failure_is_stale(self, pipeline, composer, generator):
        """A failure while composing is also ignored once superseded."""

        def newer_request_then_failure(*args, **kwargs):
            pipeline.sequencer.issue()
            raise RuntimeError("compose failed")

        composer.compose.side_effect = newer_request_then_failure

        result = pipeline.run(["img"], None, GenerationConfig())

        assert result.stale is True
        assert result.prompt == ""
        generator.generate.assert_not_called()

    def test_current_failure_still_raises(self, pipeline, generator):
        """Failures of the latest request reach the caller."""
        generator.generate.side_effect = GenerationError("latest request failed")

        with pytest.raises(GenerationError, match="latest request failed"):
            pipeline.run(["img"], None, GenerationConfig())
