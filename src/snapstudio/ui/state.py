"""State management utilities for SnapStudio UI.

This module handles the initialization and cleanup of per-session UI state:
the remote client and the composer, generator, analyzer and pipeline built
on top of it.
"""

import logging

from snapstudio.core.client import create_client
from snapstudio.core.config import StudioConfig
from snapstudio.core.config import config as default_config
from snapstudio.core.image_analyzer import ImageAnalyzer
from snapstudio.core.pipeline import StudioPipeline
from snapstudio.core.prompt_composer import PromptComposer
from snapstudio.core.scene_generator import SceneGenerator
from snapstudio.core.sequencer import RequestSequencer

from .models import UIState

logger = logging.getLogger(__name__)


def initialize_ui_state(state: UIState | None = None, config: StudioConfig | None = None) -> UIState:
    """Initialize or ensure UI state is ready.

    This function handles lazy initialization of the UI state components.
    If state is None or uninitialized, it creates the remote client and
    every service object that depends on it.

    Args:
        state: Existing UIState or None
        config: Configuration (default: global config)

    Returns:
        Initialized UIState instance

    Raises:
        MissingCredentialsError: If no API key is configured
    """
    config = config or default_config

    if state is None:
        logger.info("Creating new UIState")
        state = UIState()

    if state.is_initialized():
        logger.debug("UIState already initialized")
        return state

    logger.info("Initializing UIState components...")

    if state.client is None:
        state.client = create_client(config)

    if state.sequencer is None:
        state.sequencer = RequestSequencer()

    if state.pipeline is None:
        composer = PromptComposer(state.client, config)
        generator = SceneGenerator(state.client, config)
        state.pipeline = StudioPipeline(composer, generator, state.sequencer)
        logger.info("StudioPipeline initialized successfully")

    if state.analyzer is None:
        state.analyzer = ImageAnalyzer(state.client, config)
        logger.info("ImageAnalyzer initialized successfully")

    logger.info(f"UIState initialization complete: {state}")
    return state


def cleanup_ui_state(state: UIState) -> None:
    """Clean up UI state resources.

    This should be called when a session ends.

    Args:
        state: UI state to clean up
    """
    logger.info("Cleaning up UIState resources")

    state.client = None
    state.sequencer = None
    state.pipeline = None
    state.analyzer = None
    state.last_image = None
    state.last_prompt = ""
    state.last_analysis = None

    logger.info("UIState cleanup complete")
