"""Style and output preset handlers."""

import logging

import gradio as gr

from snapstudio.core.catalog import PromptMode, get_style_definition
from snapstudio.core.options import aspect_ratio_for_platform

logger = logging.getLogger(__name__)

MODE_DESCRIPTIONS = {
    PromptMode.FIXED: "Fixed instruction. Camera, lighting and text settings are ignored.",
    PromptMode.TEXT_TO_IMAGE: "Creates a new image from your description. No upload needed.",
    PromptMode.TEMPLATE: "Dedicated studio template for this product category.",
    PromptMode.OPTIMIZED: "Your settings are turned into a professional prompt by the text model.",
}


def describe_style(style: str) -> tuple[str, gr.update]:
    """Describe a style preset and toggle the upload slots.

    Args:
        style: Style preset identifier

    Returns:
        Tuple of (style_markdown, upload_group_visibility_update)
    """
    try:
        definition = get_style_definition(style)
    except KeyError as e:
        logger.warning(f"Unknown style selected: {e}")
        return f"❌ Unknown style: {style}", gr.update()

    lines = [
        f"### {definition.display_name}",
        MODE_DESCRIPTIONS[definition.prompt_mode],
    ]
    if definition.is_text_to_image:
        lines.append("📝 **Text-to-image mode**: describe the scene you want in the prompt box.")
    else:
        lines.append("📸 **Image mode**: upload at least one source image.")
    if not definition.accepts_reference:
        lines.append("The reference image is not used by this style.")

    return "\n\n".join(lines), gr.update(visible=not definition.is_text_to_image)


def apply_social_preset(platform: str) -> gr.update:
    """Set the aspect ratio that matches a social media platform.

    Args:
        platform: Social platform label

    Returns:
        Aspect ratio dropdown update (unchanged for an unknown platform)
    """
    try:
        ratio = aspect_ratio_for_platform(platform)
    except ValueError as e:
        logger.warning(f"Unknown social platform: {e}")
        return gr.update()

    logger.info(f"Applied social preset {platform}: {ratio.value}")
    return gr.update(value=ratio.value)
