"""Remote model client factory.

A single ``google.genai.Client`` is created from the configured API key and
handed explicitly to the prompt composer, scene generator and image analyzer.
Nothing in the core reaches for a module-level client.
"""

import logging

from google import genai

from .config import StudioConfig
from .exceptions import MissingCredentialsError

logger = logging.getLogger(__name__)


def create_client(config: StudioConfig) -> genai.Client:
    """Create the Gemini client used for every remote call.

    Args:
        config: Configuration holding the API key

    Returns:
        Configured genai.Client

    Raises:
        MissingCredentialsError: If no API key is configured
    """
    if not config.has_api_key:
        raise MissingCredentialsError(
            "No API key configured. Set GEMINI_API_KEY (or SNAPSTUDIO_API_KEY) "
            "in the environment or .env file."
        )

    client = genai.Client(api_key=config.api_key)
    logger.info(
        f"Created Gemini client (text={config.text_model}, "
        f"vision={config.vision_model}, image={config.image_model})"
    )
    return client
