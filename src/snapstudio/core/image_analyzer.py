"""Vision analysis of a source image.

Sends the first source image to the multimodal model and asks for a JSON
object with two English descriptions:

1. ``creationPrompt``: recreates the whole image from scratch.
2. ``preservationPrompt``: describes only the primary subject, for telling
   the image model what must not change during an edit.

Malformed-but-parseable output is tolerated: a missing field is replaced by
a placeholder. Only a body that is not JSON at all, or a transport failure,
raises :class:`AnalysisError`.
"""

import json
import logging
from collections.abc import Sequence
from typing import Any

from google.genai import types

from .config import StudioConfig
from .exceptions import AnalysisError, MissingImageError
from .images import INLINE_MIME_TYPE, image_bytes
from .models import ImageAnalysisResult

logger = logging.getLogger(__name__)

CREATION_PLACEHOLDER = "Could not generate prompt."
PRESERVATION_PLACEHOLDER = "Could not identify subject."

ANALYSIS_USER_MESSAGE = "Analyze this image and provide the JSON output."

ANALYSIS_SYSTEM_INSTRUCTION = """\
You are an AI Vision Expert for Photography.
Analyze the provided image and output a JSON object with exactly two fields:

1. "creationPrompt": A highly detailed, artistic English prompt that describes the image \
perfectly so it can be re-created by an AI generator from scratch. Include lighting, angle, \
mood, colors, and subject details.

2. "preservationPrompt": A precise English description of the PRIMARY SUBJECT ONLY. This \
text will be used to tell an AI what NOT to change during an edit. Focus on the subject's \
physical traits, clothing, or product details.
"""

ANALYSIS_RESPONSE_SCHEMA = types.Schema(
    type=types.Type.OBJECT,
    properties={
        "creationPrompt": types.Schema(type=types.Type.STRING),
        "preservationPrompt": types.Schema(type=types.Type.STRING),
    },
    required=["creationPrompt", "preservationPrompt"],
)


def _text_field(payload: dict, key: str, placeholder: str) -> str:
    value = payload.get(key)
    if isinstance(value, str) and value.strip():
        return value.strip()
    if value is not None:
        logger.warning(f"Analysis field {key} is not usable text: {value!r}")
    return placeholder


def parse_analysis(text: str | None) -> ImageAnalysisResult:
    """Parse the analyzer's JSON body, substituting placeholders for missing fields.

    Fields that are absent, empty or not strings get their placeholder.

    Raises:
        AnalysisError: If the body is not valid JSON
    """
    try:
        payload = json.loads(text or "{}")
    except json.JSONDecodeError as e:
        raise AnalysisError("Failed to analyze image.") from e

    if not isinstance(payload, dict):
        logger.warning(f"Analysis returned {type(payload).__name__} instead of an object")
        payload = {}

    return ImageAnalysisResult(
        creation_prompt=_text_field(payload, "creationPrompt", CREATION_PLACEHOLDER),
        preservation_prompt=_text_field(payload, "preservationPrompt", PRESERVATION_PLACEHOLDER),
    )


class ImageAnalyzer:
    """Produces creation and preservation prompts from a source image."""

    def __init__(self, client: Any, config: StudioConfig) -> None:
        self.client = client
        self.config = config

    def analyze(self, images: Sequence[str]) -> ImageAnalysisResult:
        """Analyze the first of the given images.

        Args:
            images: Source images (base64, optional data-URI prefix)

        Returns:
            ImageAnalysisResult with both descriptions filled in

        Raises:
            MissingImageError: If no image is supplied (no network call is made)
            AnalysisError: If the remote call fails or returns a non-JSON body
        """
        if not images or not images[0]:
            raise MissingImageError("No image provided for analysis.")

        image_part = types.Part.from_bytes(data=image_bytes(images[0]), mime_type=INLINE_MIME_TYPE)

        try:
            logger.info(f"Analyzing image with {self.config.vision_model}")
            response = self.client.models.generate_content(
                model=self.config.vision_model,
                contents=[image_part, types.Part.from_text(text=ANALYSIS_USER_MESSAGE)],
                config=types.GenerateContentConfig(
                    system_instruction=ANALYSIS_SYSTEM_INSTRUCTION,
                    response_mime_type="application/json",
                    response_schema=ANALYSIS_RESPONSE_SCHEMA,
                ),
            )
        except Exception as e:
            logger.error(f"Analysis Error: {e}", exc_info=True)
            raise AnalysisError("Failed to analyze image.") from e

        return parse_analysis(response.text)
