"""Scene generation and export handlers."""

import logging

import gradio as gr

from snapstudio.core.catalog import get_style_definition
from snapstudio.core.config import config
from snapstudio.core.exceptions import MissingCredentialsError, NoImageGeneratedError
from snapstudio.core.export import export_image
from snapstudio.core.images import decode_image, encode_image

from ..models import GENERIC_ERROR_MESSAGE, SOURCE_IMAGE_SLOTS, UIState
from ..state import initialize_ui_state
from ..validation import (
    ValidationError,
    build_generation_config,
    collect_source_images,
    validate_background_color,
    validate_prompt_content,
    validate_source_images,
)

logger = logging.getLogger(__name__)

GENERATE_LABEL = "✨ Generate"
PROCESSING_LABEL = "⏳ Processing..."


def set_processing(active: bool) -> gr.update:
    """Disable the Generate button while a request is outstanding.

    Args:
        active: True when a request starts, False when it has finished

    Returns:
        Button update
    """
    return gr.update(
        interactive=not active,
        value=PROCESSING_LABEL if active else GENERATE_LABEL,
    )


def generate_scene(
    image_1: str | None,
    image_2: str | None,
    image_3: str | None,
    image_4: str | None,
    reference_image: str | None,
    prompt: str,
    fixed_elements: str,
    style: str,
    angle: str,
    distance: str,
    lighting: str,
    pose: str,
    face_direction: str,
    resolution: str,
    aspect_ratio: str,
    use_background_color: bool,
    background_color: str,
    state: UIState,
) -> tuple:
    """Generate a scene from the UI inputs.

    Args:
        image_1: Source image path for slot 1 (optional)
        image_2: Source image path for slot 2 (optional)
        image_3: Source image path for slot 3 (optional)
        image_4: Source image path for slot 4 (optional)
        reference_image: Style reference image path (optional)
        prompt: Free-text instruction
        fixed_elements: Elements that must be preserved
        style: Style preset identifier
        angle: Camera angle label
        distance: Camera distance label
        lighting: Lighting preset label
        pose: Subject pose label
        face_direction: Face direction label
        resolution: Output resolution label
        aspect_ratio: Output aspect ratio label
        use_background_color: Whether to request a solid background color
        background_color: Background color from the color picker
        state: UI state

    Returns:
        Tuple of (result_image_update, prompt_used, info_text, updated_state)
    """
    try:
        validate_prompt_content(prompt or "")
        color = validate_background_color(background_color) if use_background_color else ""

        uploads = [image_1, image_2, image_3, image_4][:SOURCE_IMAGE_SLOTS]
        images = collect_source_images(uploads, config.max_source_images)
        validate_source_images(images, style)
        reference = encode_image(reference_image) if reference_image else None

        cfg = build_generation_config(
            prompt=prompt or "",
            fixed_elements=fixed_elements or "",
            style=style,
            angle=angle,
            distance=distance,
            lighting=lighting,
            pose=pose,
            face_direction=face_direction,
            resolution=resolution,
            aspect_ratio=aspect_ratio,
            background_color=color,
        )

        state = initialize_ui_state(state)

        steps = []
        result = state.pipeline.run(images, reference, cfg, on_step=steps.append)

        if result.stale:
            logger.info(f"Discarding stale result for request {result.token}")
            return gr.update(), gr.update(), "ℹ️ A newer request replaced this one.", state

        state.last_image = result.image
        state.last_prompt = result.prompt

        definition = get_style_definition(cfg.style)
        info = f"""
✅ **Generation Complete!**

**Style:** {definition.display_name}
**Resolution:** {cfg.resolution.value}
**Aspect Ratio:** {cfg.aspect_ratio.value}
**Source Images:** {len(images)}{' + reference' if reference and definition.accepts_reference else ''}
**Steps:** {' → '.join(steps)}
        """

        if config.save_outputs:
            path = export_image(result.image, "png", config.outputs_dir)
            info += f"\n**Saved to:** {path}"

        return decode_image(result.image), result.prompt, info.strip(), state

    except ValidationError as e:
        logger.warning(f"Validation error: {e}")
        return gr.update(), gr.update(), f"❌ **Validation Error**\n\n{str(e)}", state

    except MissingCredentialsError as e:
        logger.error(f"Missing credentials: {e}")
        error_msg = (
            "❌ **Missing API Key**\n\n"
            "Set `SNAPSTUDIO_API_KEY` (or `GEMINI_API_KEY`) and restart the app."
        )
        return gr.update(), gr.update(), error_msg, state

    except NoImageGeneratedError as e:
        logger.warning(f"Model returned no image: {e}")
        return gr.update(), gr.update(), f"❌ **Error**\n\n{str(e)}", state

    except Exception as e:
        logger.error(f"Error generating scene: {e}", exc_info=True)
        return gr.update(), gr.update(), f"❌ **Error**\n\n{GENERIC_ERROR_MESSAGE}", state


def export_result(fmt: str, state: UIState) -> tuple[str | None, str]:
    """Export the last generated image for download.

    Args:
        fmt: "png" or "jpg"
        state: UI state

    Returns:
        Tuple of (file_path_or_None, info_text)
    """
    if not state.last_image:
        return None, "❌ Nothing to export yet. Generate an image first."

    try:
        path = export_image(state.last_image, fmt, config.outputs_dir)
    except ValueError as e:
        logger.warning(f"Export failed: {e}")
        return None, f"❌ **Export Failed**\n\n{str(e)}"

    return str(path), f"✅ Exported **{path.name}**"


def clear_images(state: UIState) -> tuple:
    """Clear every upload slot, the reference image and the last result.

    Args:
        state: UI state

    Returns:
        Tuple of (image_1, image_2, image_3, image_4, reference, result, prompt_used, updated_state)
    """
    state.last_image = None
    state.last_prompt = ""
    logger.info("Cleared source images and result")
    return None, None, None, None, None, None, "", state
