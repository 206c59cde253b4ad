"""Validation utilities for SnapStudio UI inputs."""

import logging
import re
from collections.abc import Iterable
from pathlib import Path

from pydantic import ValidationError as PydanticValidationError

from snapstudio.core.catalog import get_style_definition
from snapstudio.core.images import encode_image
from snapstudio.core.models import HEX_COLOR_PATTERN, GenerationConfig

logger = logging.getLogger(__name__)

RGB_COLOR_PATTERN = re.compile(
    r"^rgba?\(\s*(\d{1,3})\s*,\s*(\d{1,3})\s*,\s*(\d{1,3})\s*(?:,\s*[\d.]+\s*)?\)$"
)


class ValidationError(Exception):
    """User-friendly validation error.

    This exception is raised when user input fails validation.
    The message is intended to be displayed directly to the user.
    """

    pass


def validate_background_color(color: str | None) -> str:
    """Validate an optional solid background color.

    Args:
        color: Hex color (#RGB or #RRGGBB), an rgb()/rgba() string from the
            color picker, or empty

    Returns:
        Upper-cased hex color, or "" when no color is set

    Raises:
        ValidationError: If the color is not a hex color
    """
    color = (color or "").strip()
    if not color:
        return ""

    rgb = RGB_COLOR_PATTERN.match(color)
    if rgb:
        channels = [int(value) for value in rgb.groups()]
        if any(value > 255 for value in channels):
            raise ValidationError(f"Invalid background color: {color}")
        color = "#" + "".join(f"{value:02X}" for value in channels)

    if not HEX_COLOR_PATTERN.match(color):
        raise ValidationError(f"Invalid background color: {color}. Use a hex color like #FFFFFF.")
    return color.upper()


def validate_prompt_content(prompt: str, max_length: int = 5000) -> None:
    """Validate free-text prompt content.

    Args:
        prompt: Prompt text to validate
        max_length: Maximum allowed prompt length in characters

    Raises:
        ValidationError: If prompt is too long
    """
    if len(prompt) > max_length:
        raise ValidationError(
            f"Prompt is too long ({len(prompt)} characters). Maximum is {max_length} characters."
        )


def collect_source_images(uploads: Iterable[str | Path | None], max_images: int) -> list[str]:
    """Encode the filled upload slots as PNG data URIs.

    Empty slots are skipped, so slot 1 may be empty while slot 2 is filled.

    Args:
        uploads: File paths from the upload slots (None for empty slots)
        max_images: Maximum number of images allowed

    Returns:
        List of PNG data URIs in slot order

    Raises:
        ValidationError: If too many images are supplied or one cannot be read
    """
    filled = [upload for upload in uploads if upload]
    if len(filled) > max_images:
        raise ValidationError(f"Too many images ({len(filled)}). Maximum is {max_images}.")

    images = []
    for upload in filled:
        try:
            images.append(encode_image(upload))
        except (OSError, ValueError) as e:
            logger.warning(f"Could not read uploaded image {upload}: {e}")
            raise ValidationError(f"Could not read image: {Path(upload).name}") from e
    return images


def validate_source_images(images: list[str], style: str) -> None:
    """Ensure a source image is present unless the style is text-to-image.

    Raises:
        ValidationError: If the style needs a source image and none was supplied
    """
    definition = get_style_definition(style)
    if not images and not definition.is_text_to_image:
        raise ValidationError(
            f"The style **{definition.label}** needs at least one source image. "
            "Please upload an image above."
        )


def build_generation_config(**values) -> GenerationConfig:
    """Build a GenerationConfig from raw UI values.

    Raises:
        ValidationError: If any value is not a valid option
    """
    try:
        return GenerationConfig(**values)
    except PydanticValidationError as e:
        errors = "; ".join(
            f"{'.'.join(str(loc) for loc in error['loc'])}: {error['msg']}" for error in e.errors()
        )
        raise ValidationError(f"Invalid settings: {errors}") from e
