"""Scene generation with the remote image model.

The scene generator assembles one multi-part request: every source image as
an inline PNG payload, the optional reference image, and a task description
chosen by the style's ``scene_task``. It issues exactly one call and returns
the first inline image of the response as a ``data:image/png;base64,`` URI.

There is no retry. A transport failure raises :class:`GenerationError` and a
response without an image raises :class:`NoImageGeneratedError`; a partial or
empty image is never returned.

Task Descriptions
-----------------
- **upscale**: upscale to the target resolution, keep the background exactly
- **remove-background**: pure white cutout; the reference image is never sent
- **text-to-image**: generate from the prompt; reference used as style only
- **files-3d**: rebuild a file/folder screenshot as a 3D isometric render
- **free-edit**: creative edit with freedom to change subject and scene
- **scene-replacement**: keep the subject exactly, generate a new scene
"""

import logging
from collections.abc import Sequence
from typing import Any

from google.genai import types

from .catalog import SceneTask, StylePreset, get_style_definition
from .config import StudioConfig
from .exceptions import GenerationError, NoImageGeneratedError
from .images import INLINE_MIME_TYPE, image_bytes, to_data_uri
from .options import AspectRatio, Resolution

logger = logging.getLogger(__name__)


def build_task_description(
    task: SceneTask,
    prompt: str,
    resolution: Resolution,
    aspect_ratio: AspectRatio,
    has_reference: bool,
) -> str:
    """Render the task description sent after the image payloads.

    Args:
        task: Scene task selected by the style
        prompt: Composed prompt
        resolution: Target resolution
        aspect_ratio: Target aspect ratio
        has_reference: Whether a reference image is part of the request

    Returns:
        Task description text
    """
    resolution_label = resolution.value
    ratio_label = aspect_ratio.value

    if task == SceneTask.UPSCALE:
        lines = [
            "Task: Upscale and Enhance.",
            f"1. Upscale input to {resolution_label}.",
            "2. Preserve original background EXACTLY.",
            "3. Sharpen details and denoise.",
            "4. Output in 8K fidelity.",
        ]
    elif task == SceneTask.REMOVE_BACKGROUND:
        lines = [
            "Task: Background Removal / Extraction.",
            "1. Place the product on a pure SOLID WHITE background (#FFFFFF).",
            "2. NO shadows, NO gradient, NO props.",
            "3. Keep product edges perfectly sharp.",
            f"4. Maintain resolution and aspect ratio {ratio_label}.",
        ]
    elif task == SceneTask.TEXT_TO_IMAGE:
        lines = [
            "Task: Generate Image from Text (Concept Art / Scene Generation).",
            f"Prompt: {prompt}",
            f"Output Aspect Ratio: {ratio_label}.",
            f"Target Resolution: {resolution_label}.",
            "Quality: Photorealistic, Highly Detailed, Cinematic, 8k Ultra HD.",
        ]
        if has_reference:
            lines.append("Style Reference: Use the provided image as a Style/Vibe reference.")
    elif task == SceneTask.FILES_3D:
        lines = [
            "Task: Image Transformation & Style Transfer (2D to 3D).",
            "1. ANALYZE the source image to identify file names, folder names, and icons.",
            "2. RE-CREATE the scene as a 3D Isometric Render.",
            "3. CRITICAL: The names of the files (text) MUST be clearly written on the 3D objects.",
            "4. Maintain the exact spelling of filenames from the original image.",
            f"5. Prompt: {prompt}",
            f"6. Output Aspect Ratio: {ratio_label}.",
            f"7. Target Resolution: {resolution_label}.",
        ]
    elif task == SceneTask.FREE_EDIT:
        lines = [
            "Task: Creative Image Editing / Manipulation.",
            f"1. Modify the provided image based on the user's specific instruction: {prompt}",
            "2. Unlike strict product photography, you have the creative freedom to change "
            "the subject, colors, or background if the prompt asks for it.",
            "3. Maintain realism and high quality.",
            f"4. Output Aspect Ratio: {ratio_label}.",
            f"5. Target Resolution: {resolution_label}.",
        ]
    else:
        lines = [
            "Task: Background Replacement / In-Painting / Scene Generation.",
            "1. Keep the central subject (person or product) EXACTLY as is "
            "(Face/Product Details must not change).",
            "2. If multiple images are provided, use them to understand the 3D geometry "
            "of the object.",
            f"3. Generate a new scene based on: {prompt}",
            f"4. {'Mimic the style of Image 2.' if has_reference else ''}",
            f"5. Output Aspect Ratio: {ratio_label}.",
            f"6. Target Resolution: {resolution_label}.",
            "7. Ensure realistic integration (shadows/reflections) between subject "
            "and new background.",
            "8. Output Quality: 8k Ultra Sharp.",
        ]

    return "\n".join(lines)


def _inline_part(asset: str) -> types.Part:
    return types.Part.from_bytes(data=image_bytes(asset), mime_type=INLINE_MIME_TYPE)


def extract_image_data_uri(response: Any) -> str:
    """Return the first inline image of a response as a PNG data URI.

    Raises:
        NoImageGeneratedError: If the response holds no inline image
    """
    for candidate in getattr(response, "candidates", None) or []:
        content = getattr(candidate, "content", None)
        for part in getattr(content, "parts", None) or []:
            inline = getattr(part, "inline_data", None)
            if inline is not None and inline.data:
                return to_data_uri(inline.data)

    raise NoImageGeneratedError("No image generated")


class SceneGenerator:
    """Sends images and a task description to the remote image model.

    Attributes
    ----------
    client : genai.Client
        Remote model client
    config : StudioConfig
        Configuration holding the image model name
    """

    def __init__(self, client: Any, config: StudioConfig) -> None:
        self.client = client
        self.config = config

    def build_contents(
        self,
        images: Sequence[str],
        reference_image: str | None,
        prompt: str,
        resolution: Resolution,
        style: StylePreset,
        aspect_ratio: AspectRatio,
    ) -> list[types.Part]:
        """Assemble the multi-part request payload (images first, task text last)."""
        definition = get_style_definition(style)
        parts = [_inline_part(image) for image in images if image]

        include_reference = bool(reference_image) and definition.accepts_reference
        if include_reference:
            parts.append(_inline_part(reference_image))
        elif reference_image:
            logger.info(f"Ignoring reference image for {StylePreset(style).value}")

        task_description = build_task_description(
            definition.scene_task,
            prompt,
            Resolution(resolution),
            AspectRatio(aspect_ratio),
            has_reference=include_reference,
        )
        parts.append(types.Part.from_text(text=task_description))
        return parts

    def generate(
        self,
        images: Sequence[str] | None,
        reference_image: str | None,
        prompt: str,
        resolution: Resolution,
        style: StylePreset,
        aspect_ratio: AspectRatio,
    ) -> str:
        """Generate the scene and return it as a PNG data URI.

        Args:
            images: Source images (base64, optional data-URI prefix); may be empty
                for text-to-image styles
            reference_image: Optional style reference image
            prompt: Composed prompt
            resolution: Target resolution
            style: Style preset
            aspect_ratio: Target aspect ratio

        Returns:
            ``data:image/png;base64,...`` string

        Raises:
            GenerationError: If the remote call fails
            NoImageGeneratedError: If the response contains no image
        """
        contents = self.build_contents(
            images or [], reference_image, prompt, resolution, style, aspect_ratio
        )
        image_count = len(contents) - 1

        logger.info(
            f"Generating scene with {self.config.image_model} "
            f"({image_count} inline images, style={StylePreset(style).value})"
        )

        try:
            response = self.client.models.generate_content(
                model=self.config.image_model,
                contents=contents,
                config=types.GenerateContentConfig(response_modalities=[types.Modality.IMAGE]),
            )
        except Exception as e:
            logger.error(f"Generation Error: {e}", exc_info=True)
            raise GenerationError(f"Image generation failed: {e}") from e

        data_uri = extract_image_data_uri(response)
        logger.info("Scene generated successfully")
        return data_uri
