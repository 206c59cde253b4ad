"""Core functionality for SnapStudio.

This package holds everything between the UI and the remote model service:

- **Style Catalog** (catalog.py): style presets with their capability flags
- **Option Enumerations** (options.py): angle, distance, lighting, pose, ...
- **Prompt Composer** (prompt_composer.py, prompt_templates.py): builds the
  English instruction, locally or through the remote text model
- **Scene Generator** (scene_generator.py): sends images + task text to the
  remote image model and decodes the returned image
- **Image Analyzer** (image_analyzer.py): creation/preservation prompts
  from a source image
- **Pipeline** (pipeline.py, sequencer.py): composer + generator for one user
  action, with stale-result detection
- **Configuration** (config.py): Pydantic Settings, SNAPSTUDIO_ prefix

Usage Example
-------------
    from snapstudio.core import (
        GenerationConfig, PromptComposer, SceneGenerator, StudioPipeline,
        config, create_client,
    )

    client = create_client(config)
    pipeline = StudioPipeline(
        PromptComposer(client, config), SceneGenerator(client, config)
    )
    result = pipeline.run([source_png_data_uri], None, GenerationConfig())
"""

from snapstudio.core.catalog import (
    STYLE_DEFINITIONS,
    PromptMode,
    SceneTask,
    StyleDefinition,
    StylePreset,
    get_style_definition,
)
from snapstudio.core.client import create_client
from snapstudio.core.config import StudioConfig, config
from snapstudio.core.exceptions import (
    AnalysisError,
    GenerationError,
    MissingCredentialsError,
    MissingImageError,
    NoImageGeneratedError,
    StudioError,
)
from snapstudio.core.image_analyzer import ImageAnalyzer
from snapstudio.core.models import GenerationConfig, ImageAnalysisResult
from snapstudio.core.pipeline import PipelineResult, StudioPipeline
from snapstudio.core.prompt_composer import PromptComposer
from snapstudio.core.scene_generator import SceneGenerator
from snapstudio.core.sequencer import RequestSequencer

__all__ = [
    "STYLE_DEFINITIONS",
    "AnalysisError",
    "GenerationConfig",
    "GenerationError",
    "ImageAnalysisResult",
    "ImageAnalyzer",
    "MissingCredentialsError",
    "MissingImageError",
    "NoImageGeneratedError",
    "PipelineResult",
    "PromptComposer",
    "PromptMode",
    "RequestSequencer",
    "SceneGenerator",
    "SceneTask",
    "StudioConfig",
    "StudioError",
    "StudioPipeline",
    "StyleDefinition",
    "StylePreset",
    "config",
    "create_client",
    "get_style_definition",
]
