"""Export generated images to disk as PNG or JPEG."""

import logging
import time
from pathlib import Path
from typing import Literal

from .config import config as default_config
from .images import decode_image

logger = logging.getLogger(__name__)

ExportFormat = Literal["png", "jpg"]

FILENAME_PREFIX = "snapstudio"


def export_image(
    data_uri: str,
    fmt: ExportFormat = "png",
    output_dir: Path | None = None,
) -> Path:
    """Write a generated image to disk.

    Args:
        data_uri: Generated image (PNG data URI or bare base64)
        fmt: "png" or "jpg"
        output_dir: Target directory (default: configured outputs_dir)

    Returns:
        Path of the written file, named ``snapstudio-<epoch ms>.<fmt>``

    Raises:
        ValueError: If the format is unknown or the payload is not an image
    """
    if fmt not in ("png", "jpg"):
        raise ValueError(f"Unsupported export format: {fmt}")

    output_dir = Path(output_dir or default_config.outputs_dir)
    output_dir.mkdir(parents=True, exist_ok=True)

    image = decode_image(data_uri)
    path = output_dir / f"{FILENAME_PREFIX}-{int(time.time() * 1000)}.{fmt}"

    if fmt == "jpg":
        # JPEG has no alpha channel
        image.convert("RGB").save(path, format="JPEG", quality=95)
    else:
        image.save(path, format="PNG")

    logger.info(f"Exported image to {path}")
    return path
