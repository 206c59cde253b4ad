"""Image analysis handlers."""

import logging

from snapstudio.core.config import config
from snapstudio.core.exceptions import AnalysisError, MissingCredentialsError, MissingImageError

from ..models import ANALYSIS_ERROR_MESSAGE, SOURCE_IMAGE_SLOTS, UIState
from ..state import initialize_ui_state
from ..validation import ValidationError, collect_source_images

logger = logging.getLogger(__name__)


def analyze_images(
    image_1: str | None,
    image_2: str | None,
    image_3: str | None,
    image_4: str | None,
    state: UIState,
) -> tuple[str, str, str, UIState]:
    """Describe the first uploaded image.

    Only the first filled slot is analyzed.

    Args:
        image_1: Source image path for slot 1 (optional)
        image_2: Source image path for slot 2 (optional)
        image_3: Source image path for slot 3 (optional)
        image_4: Source image path for slot 4 (optional)
        state: UI state

    Returns:
        Tuple of (creation_prompt, preservation_prompt, info_text, updated_state)
    """
    try:
        uploads = [image_1, image_2, image_3, image_4][:SOURCE_IMAGE_SLOTS]
        images = collect_source_images(uploads, config.max_source_images)

        state = initialize_ui_state(state)
        result = state.analyzer.analyze(images)
        state.last_analysis = result

        return result.creation_prompt, result.preservation_prompt, "✅ **Analysis Complete!**", state

    except (ValidationError, MissingImageError) as e:
        logger.warning(f"Validation error: {e}")
        return "", "", f"❌ **Validation Error**\n\n{str(e)}", state

    except MissingCredentialsError as e:
        logger.error(f"Missing credentials: {e}")
        return "", "", "❌ **Missing API Key**\n\nSet `SNAPSTUDIO_API_KEY` and restart the app.", state

    except AnalysisError as e:
        logger.warning(f"Analysis failed: {e}")
        return "", "", f"❌ **Error**\n\n{ANALYSIS_ERROR_MESSAGE}", state

    except Exception as e:
        logger.error(f"Error analyzing image: {e}", exc_info=True)
        return "", "", f"❌ **Error**\n\n{ANALYSIS_ERROR_MESSAGE}", state
