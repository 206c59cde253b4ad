"""Configuration management for SnapStudio.

This module provides centralized configuration management using Pydantic Settings.
All configuration is loaded from environment variables with the SNAPSTUDIO_ prefix,
allowing easy customization without code changes.

Environment Variable Loading
-----------------------------
Configuration values are loaded in the following priority order:
1. Environment variables (SNAPSTUDIO_* prefix)
2. .env file in the project root
3. Default values defined in StudioConfig

The API key is the one exception to the prefix rule: it is also read from
``GEMINI_API_KEY`` or ``API_KEY`` so an existing Gemini setup works unchanged.

Example .env file:
    GEMINI_API_KEY=your-key
    SNAPSTUDIO_IMAGE_MODEL=gemini-2.5-flash-image
    SNAPSTUDIO_OUTPUTS_DIR=outputs
    SNAPSTUDIO_SAVE_OUTPUTS=true

Global Configuration Instance
------------------------------
A global `config` instance is created automatically at module import time.
The remote client is *not* created here; see :mod:`snapstudio.core.client`.

Usage Example
-------------
    from snapstudio.core.config import config

    print(config.image_model)
    print(config.outputs_dir)
"""

from pathlib import Path

from pydantic import AliasChoices, Field
from pydantic_settings import BaseSettings, SettingsConfigDict


class StudioConfig(BaseSettings):
    """Main configuration for SnapStudio.

    Attributes
    ----------
    Credentials:
        api_key : str | None
            Gemini API key (SNAPSTUDIO_API_KEY, GEMINI_API_KEY or API_KEY)

    Remote Models:
        text_model : str
            Model used to translate and optimize prompts
        vision_model : str
            Model used by the image analyzer
        image_model : str
            Model used to generate and edit images

    Generation Settings:
        max_source_images : int
            Maximum number of source images (angles) per request

    Paths:
        outputs_dir : Path
            Directory for exported results
        save_outputs : bool
            Export every generated image to outputs_dir automatically

    UI Settings:
        gradio_server_name : str
            Server bind address (0.0.0.0 for local network)
        gradio_server_port : int
            Server port (1024-65535)
        gradio_share : bool
            Create public gradio.live link (keep False for local-only)

    Examples
    --------
        >>> custom_config = StudioConfig(
        ...     api_key="test-key",
        ...     image_model="gemini-2.5-flash-image",
        ...     save_outputs=False,
        ... )
    """

    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        env_prefix="SNAPSTUDIO_",
        case_sensitive=False,
        populate_by_name=True,
        extra="ignore",
    )

    # Credentials
    api_key: str | None = Field(
        default=None,
        validation_alias=AliasChoices("SNAPSTUDIO_API_KEY", "GEMINI_API_KEY", "API_KEY"),
        description="Gemini API key",
    )

    # Remote models
    text_model: str = Field(
        default="gemini-2.5-flash",
        description="Text model used for prompt translation/optimization",
    )
    vision_model: str = Field(
        default="gemini-2.5-flash",
        description="Multimodal model used for image analysis",
    )
    image_model: str = Field(
        default="gemini-2.5-flash-image",
        description="Image generation model",
    )

    # Generation settings
    max_source_images: int = Field(
        default=4,
        description="Maximum number of source images per request",
        ge=1,
        le=4,
    )

    # Paths
    outputs_dir: Path = Field(
        default=Path("outputs"),
        description="Directory to save exported images",
    )
    save_outputs: bool = Field(
        default=False,
        description="Export every generated image to outputs_dir",
    )

    # UI settings
    gradio_server_name: str = Field(
        default="0.0.0.0",
        description="Server bind address (0.0.0.0 for local network)",
    )
    gradio_server_port: int = Field(
        default=7860,
        description="Server port",
        ge=1024,
        le=65535,
    )
    gradio_share: bool = Field(
        default=False,
        description="Create public gradio.live link (keep False for local-only)",
    )

    def __init__(self, **kwargs):
        """Initialize configuration and create the outputs directory.

        Args:
            **kwargs: Configuration overrides (typically from environment variables)
        """
        super().__init__(**kwargs)

        self.outputs_dir.mkdir(parents=True, exist_ok=True)

    @property
    def has_api_key(self) -> bool:
        """Whether a non-empty API key is configured."""
        return bool(self.api_key and self.api_key.strip())


# Global configuration instance
# Loads values from environment variables (SNAPSTUDIO_* prefix) and .env file.
config = StudioConfig()
