"""Generation pipeline: prompt composition followed by scene generation."""

import logging
from collections.abc import Callable, Sequence
from dataclasses import dataclass

from .catalog import StylePreset, get_style_definition
from .exceptions import MissingImageError
from .models import GenerationConfig
from .prompt_composer import PromptComposer
from .scene_generator import SceneGenerator
from .sequencer import RequestSequencer

logger = logging.getLogger(__name__)

StepCallback = Callable[[str], None]

STEP_CONCEPTUALIZING = "Conceptualizing..."
STEP_ANALYZING = "Analyzing Composition..."
STEP_UPSCALING = "Upscaling & Refining (8K)..."
STEP_RENDERING = "Rendering Scene..."
STEP_GENERATING = "Generating Masterpiece..."


@dataclass(frozen=True)
class PipelineResult:
    """Outcome of one pipeline run.

    Attributes:
        token: Request token issued for this run
        prompt: Composed prompt sent to the image model
        image: Generated image as a PNG data URI (empty for a stale failed run)
        stale: True if a newer request was issued while this one ran; a
            superseded run that failed is also returned as stale
    """

    token: int
    prompt: str
    image: str
    stale: bool = False


class StudioPipeline:
    """Runs the composer and the generator for one user action.

    Every run is stateless apart from the shared request sequencer, which
    marks results of superseded runs as stale.
    """

    def __init__(
        self,
        composer: PromptComposer,
        generator: SceneGenerator,
        sequencer: RequestSequencer | None = None,
    ) -> None:
        self.composer = composer
        self.generator = generator
        self.sequencer = sequencer or RequestSequencer()

    def run(
        self,
        images: Sequence[str] | None,
        reference_image: str | None,
        cfg: GenerationConfig,
        on_step: StepCallback | None = None,
    ) -> PipelineResult:
        """Compose the prompt and generate the scene.

        Args:
            images: Source images; empty slots are dropped
            reference_image: Optional style reference image
            cfg: Generation configuration
            on_step: Called with a short progress message before each stage

        Returns:
            PipelineResult (check ``stale`` before displaying it)

        Raises:
            MissingImageError: If the style needs a source image and none was given
            GenerationError: If image generation fails and no newer request was issued
        """
        definition = get_style_definition(cfg.style)
        source_images = [image for image in (images or []) if image]

        if not source_images and not definition.is_text_to_image:
            raise MissingImageError(f"Style {cfg.style.value} requires at least one source image")

        token = self.sequencer.issue()
        notify = on_step or (lambda step: None)
        prompt = ""

        try:
            notify(STEP_CONCEPTUALIZING if definition.is_text_to_image else STEP_ANALYZING)
            prompt = self.composer.compose(cfg, has_reference=bool(reference_image))
            logger.info(f"Request {token} composed prompt ({len(prompt)} chars)")

            if cfg.style == StylePreset.UPSCALE:
                notify(STEP_UPSCALING)
            elif definition.is_text_to_image:
                notify(STEP_RENDERING)
            else:
                notify(STEP_GENERATING)

            image = self.generator.generate(
                source_images,
                reference_image,
                prompt,
                cfg.resolution,
                cfg.style,
                cfg.aspect_ratio,
            )
        except Exception as e:
            if self.sequencer.is_current(token):
                raise
            logger.info(
                f"Request {token} failed after being superseded by request "
                f"{self.sequencer.latest}, ignoring: {e}"
            )
            return PipelineResult(token=token, prompt=prompt, image="", stale=True)

        stale = not self.sequencer.is_current(token)
        if stale:
            logger.info(
                f"Request {token} superseded by request {self.sequencer.latest}, result is stale"
            )
        return PipelineResult(token=token, prompt=prompt, image=image, stale=stale)
