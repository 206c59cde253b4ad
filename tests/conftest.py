"""Shared pytest fixtures for SnapStudio tests."""

import io
import shutil
import tempfile
from collections.abc import Callable
from pathlib import Path
from typing import Generator
from unittest.mock import Mock

import pytest
from google.genai import types
from PIL import Image

from snapstudio.core.config import StudioConfig
from snapstudio.core.images import to_data_uri
from snapstudio.ui.models import UIState


@pytest.fixture
def temp_dir() -> Generator[Path, None, None]:
    """Create a temporary directory for test files.

    Yields:
        Path to temporary directory

    Cleanup:
        Directory is removed after test completes
    """
    temp_path = Path(tempfile.mkdtemp())
    try:
        yield temp_path
    finally:
        shutil.rmtree(temp_path, ignore_errors=True)


@pytest.fixture
def test_config(temp_dir: Path) -> StudioConfig:
    """Create a test configuration with a temporary outputs directory.

    Args:
        temp_dir: Temporary directory from fixture

    Returns:
        StudioConfig instance for testing
    """
    return StudioConfig(
        api_key="test-key",
        text_model="test-text-model",
        vision_model="test-vision-model",
        image_model="test-image-model",
        outputs_dir=temp_dir / "outputs",
        save_outputs=False,
        _env_file=None,
    )


@pytest.fixture
def png_bytes() -> bytes:
    """A small 8x6 RGBA PNG."""
    buffer = io.BytesIO()
    Image.new("RGBA", (8, 6), (255, 0, 0, 255)).save(buffer, format="PNG")
    return buffer.getvalue()


@pytest.fixture
def sample_image(png_bytes: bytes) -> str:
    """PNG data URI of the small test image."""
    return to_data_uri(png_bytes)


@pytest.fixture
def sample_image_file(temp_dir: Path, png_bytes: bytes) -> Path:
    """The small test image written to disk, as Gradio hands uploads over."""
    path = temp_dir / "upload.png"
    path.write_bytes(png_bytes)
    return path


@pytest.fixture
def mock_client() -> Mock:
    """Mock genai.Client; configure ``client.models.generate_content`` per test."""
    client = Mock()
    client.models.generate_content = Mock()
    return client


@pytest.fixture
def text_response() -> Callable[[str], types.GenerateContentResponse]:
    """Factory for a model response holding a single text part."""

    def build(text: str) -> types.GenerateContentResponse:
        return types.GenerateContentResponse(
            candidates=[
                types.Candidate(
                    content=types.Content(role="model", parts=[types.Part(text=text)])
                )
            ]
        )

    return build


@pytest.fixture
def image_response() -> Callable[[bytes], types.GenerateContentResponse]:
    """Factory for a model response holding a text part followed by an inline image."""

    def build(data: bytes) -> types.GenerateContentResponse:
        return types.GenerateContentResponse(
            candidates=[
                types.Candidate(
                    content=types.Content(
                        role="model",
                        parts=[
                            types.Part(text="Here is your image."),
                            types.Part(
                                inline_data=types.Blob(data=data, mime_type="image/png")
                            ),
                        ],
                    )
                )
            ]
        )

    return build


@pytest.fixture
def ui_state() -> UIState:
    """Create empty UI state for testing.

    Returns:
        UIState instance
    """
    return UIState()
