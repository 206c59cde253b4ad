"""Prompt composition.

The composer turns a :class:`GenerationConfig` into the English instruction
sent to the image model. How it does so depends on the style's catalog entry:

- **fixed / text-to-image / template** styles are rendered locally by a
  builder from :mod:`snapstudio.core.prompt_templates`; no remote call.
- **optimized** styles are sent to the remote text model, which translates
  the (possibly Arabic) option labels into English photography terms and
  writes the final prompt.

The remote optimizer may fail. When it does, the composer logs the failure
and returns a deterministic fallback built from the raw option labels, so
``compose`` always yields a non-empty string and never raises for a remote
error.

Usage Example
-------------
    >>> from snapstudio.core.client import create_client
    >>> from snapstudio.core.config import config
    >>> composer = PromptComposer(create_client(config), config)
    >>> prompt = composer.compose(GenerationConfig(prompt="on a marble table"))
"""

import logging
from typing import Any

from google.genai import types

from .catalog import get_style_definition
from .config import StudioConfig
from .models import GenerationConfig
from .prompt_templates import TemplateRegistry, template_registry

logger = logging.getLogger(__name__)

OPTIMIZER_USER_MESSAGE = "Optimize prompt."
REFERENCE_NOTE = "Match the style/vibe of the provided reference image."
DEFAULT_DESCRIPTION = "A professional product shot."

OPTIMIZER_SYSTEM_INSTRUCTION = """\
You are an Expert Product Photography Prompt Engineer.
Your goal is to convert user requests (which may contain Arabic enum values) into a precise, \
high-quality ENGLISH prompt for an Image Generation Model (like Imagen/Gemini).

The User has provided specific configurations:
1. Angle: "{angle}" (Translate this to English camera terminology).
2. Distance: "{distance}" (Translate to English camera shot type).
3. Lighting: "{lighting}" (Translate to English lighting setup).
4. Subject Pose: "{pose}" (Translate this. If it implies action, describe it).
5. Face Direction: "{face_direction}" (Where the subject is looking).
6. Aspect Ratio: "{aspect_ratio}".
7. Background Color: "{background}".
8. Style Context: "{style_details}".
9. User Custom Description: "{description}".
10. MANDATORY CONSTRAINTS: "{constraints}".
11. Reference Image: "{reference_note}".

OUTPUT FORMAT:
"[Camera Angle], [Camera Distance/Shot Type], [Subject Pose Description], [Face Direction], \
[Lighting Setup], [Background Description], [Style Keywords/Texture/Vibe], \
[Mandatory Constraints], 8k Ultra Resolution, Masterpiece"

Constraint: Refer to the subject as "the central subject".
Ensure the prompt is descriptive and artistic.
"""


def fallback_prompt(cfg: GenerationConfig) -> str:
    """Deterministic prompt used when the remote optimizer is unavailable.

    Field order: angle, distance, lighting, pose, style suffix.
    """
    style_details = get_style_definition(cfg.style).prompt_suffix
    return (
        f"{cfg.angle.value}, {cfg.distance.value}, {cfg.lighting.value}, "
        f"{cfg.pose.value}, {style_details}, 8k Resolution"
    )


def build_optimizer_instruction(cfg: GenerationConfig, has_reference: bool = False) -> str:
    """Render the system instruction for the remote prompt optimizer.

    Args:
        cfg: Generation configuration
        has_reference: Whether a reference image accompanies the request

    Returns:
        System instruction text
    """
    background = (
        f"BACKGROUND MUST BE SOLID COLOR: {cfg.background_color}."
        if cfg.background_color
        else ""
    )
    description = f'User description: "{cfg.prompt}"' if cfg.prompt else DEFAULT_DESCRIPTION

    return OPTIMIZER_SYSTEM_INSTRUCTION.format(
        angle=cfg.angle.value,
        distance=cfg.distance.value,
        lighting=cfg.lighting.value,
        pose=cfg.pose.value,
        face_direction=cfg.face_direction.value,
        aspect_ratio=cfg.aspect_ratio.value,
        background=background,
        style_details=get_style_definition(cfg.style).prompt_suffix,
        description=description,
        constraints=cfg.constraint_clause,
        reference_note=REFERENCE_NOTE if has_reference else "",
    )


class PromptComposer:
    """Builds the English instruction for one generation request.

    Attributes
    ----------
    client : genai.Client
        Remote model client (only used for optimized styles)
    config : StudioConfig
        Configuration holding the text model name
    templates : TemplateRegistry
        Registry of hardcoded template builders
    """

    def __init__(
        self,
        client: Any,
        config: StudioConfig,
        templates: TemplateRegistry | None = None,
    ) -> None:
        self.client = client
        self.config = config
        self.templates = templates or template_registry

    def compose(self, cfg: GenerationConfig, has_reference: bool = False) -> str:
        """Compose the prompt for a request.

        Args:
            cfg: Fully formed generation configuration
            has_reference: Whether a reference image was supplied

        Returns:
            Non-empty English prompt
        """
        definition = get_style_definition(cfg.style)

        if not definition.uses_remote_optimizer:
            builder = self.templates.get(cfg.style)
            if builder is not None:
                logger.info(f"Composing {definition.prompt_mode.value} prompt for {cfg.style.value}")
                return builder(cfg)
            logger.warning(
                f"No template registered for {cfg.style.value}, delegating to remote optimizer"
            )

        return self._optimize(cfg, has_reference)

    def _optimize(self, cfg: GenerationConfig, has_reference: bool) -> str:
        system_instruction = build_optimizer_instruction(cfg, has_reference)

        try:
            logger.info(f"Optimizing prompt for {cfg.style.value} with {self.config.text_model}")
            response = self.client.models.generate_content(
                model=self.config.text_model,
                contents=OPTIMIZER_USER_MESSAGE,
                config=types.GenerateContentConfig(system_instruction=system_instruction),
            )
            text = (response.text or "").strip()
        except Exception as e:
            logger.warning(f"Prompt optimization failed, using fallback prompt: {e}", exc_info=True)
            return fallback_prompt(cfg)

        if not text:
            logger.warning("Prompt optimizer returned no text, using fallback prompt")
            return fallback_prompt(cfg)

        return text
